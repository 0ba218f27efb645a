"""BashChecker — untyped variable assignment and use tracking."""

from __future__ import annotations

import re

from .. import constants
from ..language import IDENTIFIER_WORD_PATTERN, LanguageConfig
from ..semantic import VariableRecord
from ..source_lines import SourceLine, assignment_pattern, referenced_names
from ._base import BaseChecker

_FOR_HEADER_RE = re.compile(rf"^for\s+({IDENTIFIER_WORD_PATTERN})\s+in\b")
_FUNCTION_HEADER_RE = re.compile(
    rf"^(?:function\s+)?{IDENTIFIER_WORD_PATTERN}\s*\(\)\s*\{{$"
)
_FIRST_WORD_RE = re.compile(IDENTIFIER_WORD_PATTERN)
_BRACE_LINES = frozenset({"{", "}"})


class BashChecker(BaseChecker):
    """Checks that every ``$NAME`` is assigned on an earlier line and read somewhere.

    References on a line are resolved before the line's own assignment, so
    ``X=$X`` with no earlier ``X=`` is a use before assignment.
    """

    UNUSED_TEMPLATE = constants.ASSIGNED_NOT_USED_TEMPLATE

    def __init__(self, config: LanguageConfig):
        super().__init__(config)
        self._assignment_re = assignment_pattern(config)
        self._command_re = re.compile(config.command_charset_pattern)
        # names read before their first assignment
        self._read_early: set[str] = set()

    def _reset(self) -> None:
        super()._reset()
        self._read_early = set()

    def _check_line(self, line: SourceLine) -> None:
        self._check_references(line)

        m = self._assignment_re.match(line.text) or _FOR_HEADER_RE.match(line.text)
        if m:
            self._assign(m.group(1), line)
            return

        if not self._is_recognized(line.text):
            self._errors.append(
                constants.SEMANTIC_UNRECOGNIZED_TEMPLATE.format(
                    line=line.number, text=line.text
                )
            )

    def _check_references(self, line: SourceLine) -> None:
        for name in referenced_names(line.text):
            if not self._mark_used(name):
                self._read_early.add(name)
                self._errors.append(
                    constants.USE_BEFORE_ASSIGNMENT_TEMPLATE.format(
                        line=line.number, name=name
                    )
                )

    def _assign(self, name: str, line: SourceLine) -> None:
        existing = self._variables.get(name)
        if existing is not None:
            self._warnings.append(
                constants.REASSIGNED_TEMPLATE.format(
                    line=line.number,
                    name=name,
                    first=existing.first_assigned_at_line,
                )
            )
            return
        self._variables[name] = VariableRecord(
            name=name,
            first_assigned_at_line=line.number,
            used=name in self._read_early,
        )

    def _is_recognized(self, text: str) -> bool:
        if text in _BRACE_LINES or _FUNCTION_HEADER_RE.match(text):
            return True
        if self._command_re.match(text):
            return True
        first = _FIRST_WORD_RE.match(text)
        return first is not None and self._config.is_keyword(first.group(0))
