"""Semantic analysis data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from . import constants


@dataclass
class VariableRecord:
    name: str
    first_assigned_at_line: int
    used: bool = False
    declared_type: str | None = None  # None for untyped dialects


class SemanticResult(BaseModel):
    errors: list[str] = []
    warnings: list[str] = []
    style_warnings: list[str] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def render(self) -> str:
        """Human-readable verdict: a banner followed by the relevant sections."""
        if self.is_valid:
            lines = [constants.SEMANTIC_VALID_BANNER]
            lines.extend(_section(constants.WARNINGS_HEADER, self.warnings))
        else:
            lines = [constants.SEMANTIC_INVALID_BANNER]
            lines.extend(f"- {err}" for err in self.errors)
            lines.extend(_section(constants.WARNINGS_HEADER, self.warnings))
        lines.extend(_section(constants.STYLE_HEADER, self.style_warnings))
        return "\n".join(lines)


def _section(header: str, items: list[str]) -> list[str]:
    if not items:
        return []
    return [header] + [f"- {item}" for item in items]
