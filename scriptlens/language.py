"""Language configurations — one analysis engine, many dialects.

A ``LanguageConfig`` owns every word list and sub-pattern the stages consult,
so a dialect is a value passed into the tokenizer, parser and checker rather
than a module-level constant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from . import constants

IDENTIFIER_WORD_PATTERN = r"[a-zA-Z_][a-zA-Z0-9_]*"


@dataclass(frozen=True)
class LanguageConfig:
    """Word lists and category sub-patterns for one dialect."""

    name: str
    keywords: tuple[str, ...]
    operators: tuple[str, ...]
    identifier_pattern: str
    number_pattern: str
    string_pattern: str
    symbol_pattern: str
    comment_pattern: str
    line_comment_prefixes: tuple[str, ...]
    quoted_region_pattern: str = r"'[^']*'|\"[^\"]*\""
    test_operators: frozenset[str] = frozenset()
    builtin_commands: frozenset[str] = frozenset()
    declaration_keywords: tuple[str, ...] = ()
    command_charset_pattern: str = ""

    def is_keyword(self, word: str) -> bool:
        return word in self.keywords

    @property
    def keyword_pattern(self) -> str:
        return r"\b(?:" + "|".join(re.escape(kw) for kw in self.keywords) + r")\b"

    @property
    def operator_pattern(self) -> str:
        """Operator alternation with longer operators ahead of their prefixes."""
        ordered = sorted(self.operators, key=len, reverse=True)
        return "|".join(re.escape(op) for op in ordered)

    def is_comment_line(self, stripped_line: str) -> bool:
        return stripped_line.startswith(self.line_comment_prefixes)


BASH = LanguageConfig(
    name=constants.LANGUAGE_BASH,
    keywords=(
        "if", "then", "else", "elif", "fi", "for", "while", "do", "done",
        "function", "case", "esac", "in", "select", "until", "time", "coproc",
        "break", "continue", "return", "exit", "echo", "read", "declare",
        "local", "export", "let", "test", "shift", "unset", "trap", "source",
        "exec", "set", "eval", "wait", "bg", "fg", "kill",
    ),
    operators=(
        "==", "!=", "=", "+=", "-=", "*=", "/=", "%=", "||", "&&", "!", "|",
        ";", "&", "+", "-", "*", "/", "%", "<", ">", "<=", ">=",
        "-eq", "-ne", "-lt", "-gt", "-le", "-ge",
    ),
    identifier_pattern=(
        r"\$\{" + IDENTIFIER_WORD_PATTERN + r"\}|\$?" + IDENTIFIER_WORD_PATTERN
    ),
    number_pattern=r"\b\d+(?:\.\d+)?\b",
    string_pattern=r"'[^'\n\r]*'|\"[^\"\n\r]*\"",
    symbol_pattern=r"[{}\[\]()<>]",
    comment_pattern=r"#[^\n]*",
    line_comment_prefixes=("#",),
    test_operators=frozenset({"eq", "ne", "lt", "le", "gt", "ge"}),
    builtin_commands=frozenset(
        {
            "true", "false", "printf", "cd", "ls", "pwd", "cat", "grep", "sed",
            "awk", "cut", "sort", "uniq", "head", "tail", "wc", "mkdir", "rm",
            "cp", "mv", "touch", "chmod", "sleep", "date", "basename", "dirname",
        }
    ),
    declaration_keywords=("declare", "local", "export", "readonly"),
    command_charset_pattern=r"^[a-zA-Z0-9_\-.$/{}\[\]=\"': ]+$",
)

JAVA = LanguageConfig(
    name=constants.LANGUAGE_JAVA,
    keywords=(
        "abstract", "boolean", "break", "case", "catch", "char", "class",
        "continue", "default", "do", "double", "else", "extends", "final",
        "finally", "float", "for", "if", "implements", "import", "int",
        "interface", "long", "new", "null", "package", "private", "protected",
        "public", "return", "static", "switch", "this", "throw", "throws",
        "try", "void", "while", "true", "false",
    ),
    operators=(
        "==", "!=", "<=", ">=", "&&", "||", "++", "--", "+=", "-=", "*=",
        "/=", "%=", "=", "+", "-", "*", "/", "%", "<", ">", "!", "?", ":",
        ";", ",", ".",
    ),
    identifier_pattern=IDENTIFIER_WORD_PATTERN,
    number_pattern=r"\b\d+(?:\.\d+)?\b",
    string_pattern=r"\"(?:[^\"\\\n]|\\.)*\"|'(?:[^'\\\n]|\\.)'",
    symbol_pattern=r"[{}\[\]()]",
    comment_pattern=r"//[^\n]*|/\*[\s\S]*?\*/",
    line_comment_prefixes=("//", "/*"),
    quoted_region_pattern=r"\"[^\"]*\"|'[^']*'",
)

_LANGUAGES: dict[str, LanguageConfig] = {
    BASH.name: BASH,
    JAVA.name: JAVA,
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(_LANGUAGES.keys())


def get_language(name: str) -> LanguageConfig:
    """Return the configuration registered under *name*.

    Raises ``ValueError`` if *name* has no registered configuration.
    """
    config = _LANGUAGES.get(name)
    if config is None:
        raise ValueError(f"Unsupported language: {name}")
    return config
