"""JavaChecker — declared-type checks for ``int`` and ``String`` variables."""

from __future__ import annotations

import re

from .. import constants
from ..language import IDENTIFIER_WORD_PATTERN
from ..semantic import VariableRecord
from ..source_lines import SourceLine
from ._base import BaseChecker

_NAME = IDENTIFIER_WORD_PATTERN

_DECLARATION_RE = re.compile(rf"^(int|String)\s+({_NAME})\s*(?:=\s*([^;]+))?;")
_ASSIGNMENT_RE = re.compile(rf"^({_NAME})\s*=\s*([^;]+);")
_CONDITION_RE = re.compile(r"^(?:if|while)\s*\(([^)]+)\)\s*\{?")
_PRINTLN_RE = re.compile(r"System\.out\.println\s*\((.*)\);")
_EQUALS_RE = re.compile(rf"({_NAME})\.equals\s*\((.*)\)")
_CLASS_RE = re.compile(rf"\bclass\s+({_NAME})")
_TRY_RE = re.compile(r"\btry\b")
_CATCH_RE = re.compile(r"\bcatch\b")

_STRING_LITERAL_RE = re.compile(r"\"[^\"]*\"")
_QUOTED_EXPR_RE = re.compile(r"^\".*\"$")
_INT_LITERAL_RE = re.compile(r"^[0-9]+$")
_NAME_ONLY_RE = re.compile(rf"^{_NAME}$")
# member names (``s.length``, ``x.equals``) are not variables
_VARIABLE_WORD_RE = re.compile(rf"(?<![.\w]){_NAME}")

_OPERAND = rf"\"[^\"]*\"|\d+|{_NAME}"
_COMPARISON_RE = re.compile(rf"({_OPERAND})\s*(==|!=|<=|>=|<|>)\s*({_OPERAND})")
_RELATIONAL_OPERATORS = frozenset({"<", ">", "<=", ">="})

_NON_VARIABLE_WORDS = frozenset({constants.TYPE_STRING, "System", "equals"})


class JavaChecker(BaseChecker):
    """Typed checker for the Java-flavoured dialect.

    Declarations, assignments, ``if``/``while`` conditions, ``.equals`` calls
    and ``System.out.println`` arguments are checked line by line; the first
    two shapes end processing of a line, the others may all apply to one line.
    """

    UNUSED_TEMPLATE = constants.DECLARED_NOT_USED_TEMPLATE

    # ── style ────────────────────────────────────────────────────

    def _check_style(self, source: str) -> None:
        for m in _CLASS_RE.finditer(source):
            name = m.group(1)
            if name[0].islower():
                self._style_warnings.append(
                    constants.CLASS_NAME_STYLE_TEMPLATE.format(name=name)
                )

        lines = [raw.strip() for raw in source.split("\n")]
        if not any(self._config.is_comment_line(line) for line in lines):
            self._style_warnings.append(constants.MISSING_COMMENTS_STYLE)

        if not (_TRY_RE.search(source) and _CATCH_RE.search(source)):
            self._style_warnings.append(constants.MISSING_TRY_CATCH_STYLE)

    # ── per line ─────────────────────────────────────────────────

    def _check_line(self, line: SourceLine) -> None:
        m = _DECLARATION_RE.match(line.text)
        if m:
            self._declare(m.group(1), m.group(2), m.group(3), line)
            return

        m = _ASSIGNMENT_RE.match(line.text)
        if m:
            self._assign(m.group(1), m.group(2), line)
            return

        m = _CONDITION_RE.match(line.text)
        if m:
            self._check_condition(m.group(1), line)

        m = _EQUALS_RE.search(line.text)
        if m:
            self._check_equals(m.group(1), line)

        m = _PRINTLN_RE.search(line.text)
        if m:
            self._check_names(
                m.group(1), line, constants.UNDECLARED_IN_PRINTLN_TEMPLATE
            )

    def _declare(
        self, type_name: str, name: str, initializer: str | None, line: SourceLine
    ) -> None:
        if name in self._variables:
            self._errors.append(
                constants.ALREADY_DECLARED_TEMPLATE.format(line=line.number, name=name)
            )
        else:
            self._variables[name] = VariableRecord(
                name=name, first_assigned_at_line=line.number, declared_type=type_name
            )
        if initializer and not self._is_compatible(type_name, initializer):
            self._errors.append(
                constants.INCOMPATIBLE_ASSIGNMENT_TEMPLATE.format(
                    line=line.number, name=name
                )
            )

    def _assign(self, name: str, expr: str, line: SourceLine) -> None:
        record = self._variables.get(name)
        if record is None:
            self._errors.append(
                constants.UNDECLARED_TEMPLATE.format(line=line.number, name=name)
            )
            return
        record.used = True
        if not self._is_compatible(record.declared_type, expr):
            self._errors.append(
                constants.INCOMPATIBLE_ASSIGNMENT_TEMPLATE.format(
                    line=line.number, name=name
                )
            )

    def _check_condition(self, condition: str, line: SourceLine) -> None:
        self._check_names(
            condition, line, constants.UNDECLARED_IN_CONDITION_TEMPLATE
        )
        for left, operator, right in _COMPARISON_RE.findall(condition):
            left_type = self._operand_type(left)
            right_type = self._operand_type(right)
            if operator in _RELATIONAL_OPERATORS and constants.TYPE_STRING in (
                left_type,
                right_type,
            ):
                self._errors.append(
                    constants.STRING_RELATIONAL_TEMPLATE.format(line=line.number)
                )
            elif left_type and right_type and left_type != right_type:
                self._errors.append(
                    constants.INCOMPATIBLE_COMPARISON_TEMPLATE.format(
                        line=line.number, left=left_type, right=right_type
                    )
                )

    def _check_equals(self, name: str, line: SourceLine) -> None:
        record = self._variables.get(name)
        if record is None:
            return
        if record.declared_type != constants.TYPE_STRING:
            self._errors.append(
                constants.EQUALS_ON_NON_STRING_TEMPLATE.format(line=line.number)
            )
        record.used = True

    def _check_names(self, text: str, line: SourceLine, template: str) -> None:
        """Report undeclared names in *text* and mark the declared ones used."""
        without_strings = _STRING_LITERAL_RE.sub(" ", text)
        for name in _VARIABLE_WORD_RE.findall(without_strings):
            if name in _NON_VARIABLE_WORDS or self._config.is_keyword(name):
                continue
            if not self._mark_used(name):
                self._errors.append(template.format(line=line.number, name=name))

    # ── typing ───────────────────────────────────────────────────

    def _operand_type(self, operand: str) -> str | None:
        if operand.startswith('"'):
            return constants.TYPE_STRING
        if _INT_LITERAL_RE.match(operand):
            return constants.TYPE_INT
        record = self._variables.get(operand)
        return record.declared_type if record else None

    def _is_compatible(self, type_name: str | None, expr: str) -> bool:
        expr = expr.strip()
        if type_name == constants.TYPE_INT:
            if _QUOTED_EXPR_RE.match(expr):
                return False
            return bool(_INT_LITERAL_RE.match(expr)) or self._has_type(
                expr, constants.TYPE_INT
            )
        if type_name == constants.TYPE_STRING:
            return bool(_QUOTED_EXPR_RE.match(expr)) or self._has_type(
                expr, constants.TYPE_STRING
            )
        return True

    def _has_type(self, expr: str, type_name: str) -> bool:
        if not _NAME_ONLY_RE.match(expr):
            return False
        record = self._variables.get(expr)
        return record is not None and record.declared_type == type_name
