"""BaseChecker — language-agnostic line-by-line semantic checking infrastructure."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..language import LanguageConfig
from ..semantic import SemanticResult, VariableRecord
from ..source_lines import SourceLine, iter_lines

logger = logging.getLogger(__name__)


class BaseChecker(ABC):
    """Base class for semantic checkers.

    Subclasses implement ``_check_line`` and set ``UNUSED_TEMPLATE``; the base
    class owns the variable table, the result lists and the final
    unused-variable sweep.
    """

    UNUSED_TEMPLATE: str = ""

    def __init__(self, config: LanguageConfig):
        self._config = config
        self._variables: dict[str, VariableRecord] = {}
        self._errors: list[str] = []
        self._warnings: list[str] = []
        self._style_warnings: list[str] = []

    # ── entry point ──────────────────────────────────────────────

    def check(self, source: str) -> SemanticResult:
        self._reset()
        self._check_style(source)
        for line in iter_lines(source, self._config):
            self._check_line(line)
        self._report_unused()

        logger.debug(
            "Checked %d variables: %d errors, %d warnings (%s)",
            len(self._variables),
            len(self._errors),
            len(self._warnings),
            self._config.name,
        )
        return SemanticResult(
            errors=self._errors,
            warnings=self._warnings,
            style_warnings=self._style_warnings,
        )

    # ── hooks ────────────────────────────────────────────────────

    def _reset(self) -> None:
        self._variables = {}
        self._errors = []
        self._warnings = []
        self._style_warnings = []

    @abstractmethod
    def _check_line(self, line: SourceLine) -> None: ...

    def _check_style(self, source: str) -> None:
        """Whole-source style checks; none by default."""

    # ── helpers ──────────────────────────────────────────────────

    def _mark_used(self, name: str) -> bool:
        """Mark *name* as read; False if it was never assigned or declared."""
        record = self._variables.get(name)
        if record is None:
            return False
        record.used = True
        return True

    def _report_unused(self) -> None:
        for record in self._variables.values():
            if not record.used:
                self._warnings.append(self.UNUSED_TEMPLATE.format(name=record.name))
