"""Structural parse data types (pure data, no business logic).

The tree is a flat ordered list of tagged nodes: nodes never nest, the kind tag
is all the structure there is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from . import constants


class ConditionalHeader(str, Enum):
    IF = "if"
    WHILE = "while"


class BlockEndKind(str, Enum):
    END_IF = "fi"
    END_LOOP = "done"
    END_BRACE = "}"


class Assignment(BaseModel):
    kind: Literal["assignment"] = "assignment"
    line: int
    name: str
    rhs_text: str


class Conditional(BaseModel):
    kind: Literal["conditional"] = "conditional"
    line: int
    header: ConditionalHeader
    predicate_text: str


class BlockEnd(BaseModel):
    kind: Literal["block_end"] = "block_end"
    line: int
    which: BlockEndKind


class ForLoop(BaseModel):
    kind: Literal["for_loop"] = "for_loop"
    line: int
    var_name: str
    iterable_text: str


class FunctionDef(BaseModel):
    kind: Literal["function_def"] = "function_def"
    line: int
    name: str


class BlockOpen(BaseModel):
    kind: Literal["block_open"] = "block_open"
    line: int


class Command(BaseModel):
    kind: Literal["command"] = "command"
    line: int
    text: str


SyntaxNode = Annotated[
    Union[Assignment, Conditional, BlockEnd, ForLoop, FunctionDef, BlockOpen, Command],
    Field(discriminator="kind"),
]


class SyntaxTree(BaseModel):
    root: str = constants.TREE_ROOT_NAME
    nodes: list[SyntaxNode] = []


class StructuralError(BaseModel):
    """A structural problem tied to one source line."""

    line: int
    message: str

    def __str__(self) -> str:
        return constants.LINE_PREFIX_TEMPLATE.format(line=self.line, message=self.message)


class SyntaxResult(BaseModel):
    tree: SyntaxTree = Field(default_factory=SyntaxTree)
    errors: list[StructuralError] = []
    file_errors: list[str] = []

    @property
    def messages(self) -> list[str]:
        """Per-line errors followed by whole-file errors, rendered for display."""
        return [str(err) for err in self.errors] + list(self.file_errors)


@dataclass
class BlockCounters:
    """Open-block counts for each block kind; never negative.

    ``done`` closes a ``while`` first and only then a ``for``.
    """

    if_depth: int = 0
    while_depth: int = 0
    for_depth: int = 0
    brace_depth: int = 0

    def close_if(self) -> bool:
        if self.if_depth > 0:
            self.if_depth -= 1
            return True
        return False

    def close_loop(self) -> bool:
        if self.while_depth > 0:
            self.while_depth -= 1
            return True
        if self.for_depth > 0:
            self.for_depth -= 1
            return True
        return False

    def close_brace(self) -> bool:
        if self.brace_depth > 0:
            self.brace_depth -= 1
            return True
        return False

    def unclosed_messages(self) -> list[str]:
        pending = [
            (self.if_depth, constants.UNCLOSED_IF),
            (self.while_depth, constants.UNCLOSED_WHILE),
            (self.for_depth, constants.UNCLOSED_FOR),
            (self.brace_depth, constants.UNCLOSED_BRACE),
        ]
        return [message for depth, message in pending if depth > 0]
