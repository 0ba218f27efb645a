"""Structural parser — line-oriented statement shapes and block matching.

Each non-blank, non-comment line is checked for balanced quotes and
misspelled keywords, then matched against an ordered table of statement
shapes. The first shape that matches records its node and ends processing of
the line. Block counters carry state from line to line; whatever is still
open at end of input becomes a whole-file error.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from . import constants
from .language import BASH, IDENTIFIER_WORD_PATTERN, LanguageConfig
from .source_lines import SourceLine, assignment_pattern, iter_lines
from .suggest import suggest_keyword
from .syntax import (
    Assignment,
    BlockCounters,
    BlockEnd,
    BlockEndKind,
    BlockOpen,
    Command,
    Conditional,
    ConditionalHeader,
    ForLoop,
    FunctionDef,
    StructuralError,
    SyntaxNode,
    SyntaxResult,
    SyntaxTree,
)

logger = logging.getLogger(__name__)

_NAME = IDENTIFIER_WORD_PATTERN

_WORD_RE = re.compile(_NAME)
_UNESCAPED_SINGLE_QUOTE_RE = re.compile(r"(?<!\\)'")
_UNESCAPED_DOUBLE_QUOTE_RE = re.compile(r"(?<!\\)\"")
_DOUBLE_QUOTED_RE = re.compile(r"\"(?:[^\"\\]|\\.)*\"")
_SINGLE_QUOTED_RE = re.compile(r"'(?:[^'\\]|\\.)*'")
_ARITHMETIC_OPEN = "$(("
_VARIABLE_REFERENCE_RE = re.compile(rf"\$\{{{_NAME}\}}|\${_NAME}")
_OPTION_FLAG_RE = re.compile(r"(?<![\w$-])--?[a-zA-Z][\w-]*")

_IF_RE = re.compile(r"^if\s+(.+?)\s*;?\s*then$")
_FI_RE = re.compile(r"^fi$")
_WHILE_RE = re.compile(r"^while\s+(.+?)\s*;?\s*do$")
_DONE_RE = re.compile(r"^done$")
_FOR_RE = re.compile(rf"^for\s+({_NAME})\s+in\s+(.+?)\s*;?\s*do$")
_FUNCTION_RE = re.compile(rf"^(?:function\s+)?({_NAME})\s*\(\)\s*\{{$")
_OPEN_BRACE_RE = re.compile(r"^\{$")
_CLOSE_BRACE_RE = re.compile(r"^\}$")

ShapeHandler = Callable[[re.Match, SourceLine], None]


class StructuralParser:
    """Line-oriented parser for the Bash-like dialect."""

    def __init__(self, config: LanguageConfig = BASH):
        self._config = config
        self._assignment_re = assignment_pattern(config)
        self._command_re = re.compile(config.command_charset_pattern)
        self._nodes: list[SyntaxNode] = []
        self._errors: list[StructuralError] = []
        self._counters = BlockCounters()
        self._SHAPE_DISPATCH: list[tuple[re.Pattern[str], ShapeHandler]] = [
            (self._assignment_re, self._on_assignment),
            (_IF_RE, self._on_if),
            (_FI_RE, self._on_fi),
            (_WHILE_RE, self._on_while),
            (_DONE_RE, self._on_done),
            (_FOR_RE, self._on_for),
            (_FUNCTION_RE, self._on_function),
            (_OPEN_BRACE_RE, self._on_open_brace),
            (_CLOSE_BRACE_RE, self._on_close_brace),
            (self._command_re, self._on_command),
        ]

    # ── entry point ──────────────────────────────────────────────

    def parse(self, source: str) -> SyntaxResult:
        self._nodes = []
        self._errors = []
        self._counters = BlockCounters()

        for line in iter_lines(source, self._config):
            self._check_quotes(line)
            self._suggest_keywords(line)
            self._dispatch(line)

        file_errors = self._counters.unclosed_messages()
        logger.debug(
            "Parsed %d nodes, %d line errors, %d unclosed blocks",
            len(self._nodes),
            len(self._errors),
            len(file_errors),
        )
        return SyntaxResult(
            tree=SyntaxTree(nodes=self._nodes),
            errors=self._errors,
            file_errors=file_errors,
        )

    # ── per-line checks ──────────────────────────────────────────

    def _error(self, line: SourceLine, message: str) -> None:
        self._errors.append(StructuralError(line=line.number, message=message))

    def _check_quotes(self, line: SourceLine) -> None:
        if len(_UNESCAPED_SINGLE_QUOTE_RE.findall(line.text)) % 2:
            self._error(line, constants.UNBALANCED_SINGLE_QUOTES)
        if len(_UNESCAPED_DOUBLE_QUOTE_RE.findall(line.text)) % 2:
            self._error(line, constants.UNBALANCED_DOUBLE_QUOTES)

    def _suggest_keywords(self, line: SourceLine) -> None:
        bound = self._bound_name(line.text)
        for word in _WORD_RE.findall(self._strip_non_words(line.text)):
            if word == bound or self._is_exempt(word):
                continue
            suggestion = suggest_keyword(word, self._config.keywords)
            if suggestion is not None:
                self._error(
                    line,
                    constants.UNKNOWN_KEYWORD_TEMPLATE.format(
                        word=word, suggestion=suggestion
                    ),
                )

    def _strip_non_words(self, text: str) -> str:
        """Blank out regions whose words are never keyword candidates."""
        text = _DOUBLE_QUOTED_RE.sub(" ", text)
        text = _SINGLE_QUOTED_RE.sub(" ", text)
        text = _blank_arithmetic(text)
        text = _VARIABLE_REFERENCE_RE.sub(" ", text)
        return _OPTION_FLAG_RE.sub(" ", text)

    def _is_exempt(self, word: str) -> bool:
        return (
            self._config.is_keyword(word)
            or word in self._config.test_operators
            or word in self._config.builtin_commands
        )

    def _bound_name(self, text: str) -> str:
        """The name a line binds: assignment target, loop variable or function name."""
        for pattern in (self._assignment_re, _FOR_RE, _FUNCTION_RE):
            m = pattern.match(text)
            if m:
                return m.group(1)
        return ""

    # ── shape dispatch ───────────────────────────────────────────

    def _dispatch(self, line: SourceLine) -> None:
        for pattern, handler in self._SHAPE_DISPATCH:
            m = pattern.match(line.text)
            if m:
                handler(m, line)
                return
        self._error(line, constants.UNRECOGNIZED_SYNTAX_TEMPLATE.format(line=line.text))

    def _on_assignment(self, m: re.Match, line: SourceLine) -> None:
        self._nodes.append(
            Assignment(line=line.number, name=m.group(1), rhs_text=m.group(2).strip())
        )

    def _on_if(self, m: re.Match, line: SourceLine) -> None:
        self._nodes.append(
            Conditional(
                line=line.number,
                header=ConditionalHeader.IF,
                predicate_text=m.group(1),
            )
        )
        self._counters.if_depth += 1

    def _on_fi(self, m: re.Match, line: SourceLine) -> None:
        if not self._counters.close_if():
            self._error(line, constants.UNMATCHED_FI)
        self._nodes.append(BlockEnd(line=line.number, which=BlockEndKind.END_IF))

    def _on_while(self, m: re.Match, line: SourceLine) -> None:
        self._nodes.append(
            Conditional(
                line=line.number,
                header=ConditionalHeader.WHILE,
                predicate_text=m.group(1),
            )
        )
        self._counters.while_depth += 1

    def _on_done(self, m: re.Match, line: SourceLine) -> None:
        if not self._counters.close_loop():
            self._error(line, constants.UNMATCHED_DONE)
        self._nodes.append(BlockEnd(line=line.number, which=BlockEndKind.END_LOOP))

    def _on_for(self, m: re.Match, line: SourceLine) -> None:
        self._nodes.append(
            ForLoop(line=line.number, var_name=m.group(1), iterable_text=m.group(2))
        )
        self._counters.for_depth += 1

    def _on_function(self, m: re.Match, line: SourceLine) -> None:
        self._nodes.append(FunctionDef(line=line.number, name=m.group(1)))
        self._counters.brace_depth += 1

    def _on_open_brace(self, m: re.Match, line: SourceLine) -> None:
        self._nodes.append(BlockOpen(line=line.number))
        self._counters.brace_depth += 1

    def _on_close_brace(self, m: re.Match, line: SourceLine) -> None:
        if not self._counters.close_brace():
            self._error(line, constants.UNMATCHED_BRACE)
        self._nodes.append(BlockEnd(line=line.number, which=BlockEndKind.END_BRACE))

    def _on_command(self, m: re.Match, line: SourceLine) -> None:
        self._nodes.append(Command(line=line.number, text=line.text))


def _blank_arithmetic(text: str) -> str:
    """Replace each ``$((...))`` expansion, nested parentheses included, with a space.

    An expansion that is never closed runs to the end of the line.
    """
    parts: list[str] = []
    pos = 0
    while True:
        start = text.find(_ARITHMETIC_OPEN, pos)
        if start == -1:
            parts.append(text[pos:])
            return "".join(parts)
        parts.append(text[pos:start])
        parts.append(" ")
        depth = 0
        pos = len(text)
        for i in range(start + 1, len(text)):
            if text[i] == "(":
                depth += 1
            elif text[i] == ")":
                depth -= 1
                if depth == 0:
                    pos = i + 1
                    break


# Languages with a line grammar; others are analysed by tokenizer and checker only.
_PARSERS: dict[str, Callable[[LanguageConfig], StructuralParser]] = {
    constants.LANGUAGE_BASH: StructuralParser,
}


def has_structural_parser(config: LanguageConfig) -> bool:
    return config.name in _PARSERS


def get_structural_parser(config: LanguageConfig) -> StructuralParser:
    """Instantiate the structural parser for *config*.

    Raises ``ValueError`` if the language has no line grammar.
    """
    factory = _PARSERS.get(config.name)
    if factory is None:
        raise ValueError(f"No structural parser for language: {config.name}")
    return factory(config)


def parse(source: str, config: LanguageConfig = BASH) -> SyntaxResult:
    """Parse *source* line by line into a flat syntax tree plus structural errors."""
    return get_structural_parser(config).parse(source)
