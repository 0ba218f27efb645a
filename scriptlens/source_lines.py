"""Line scanning helpers shared by the structural parser and the checkers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from .language import IDENTIFIER_WORD_PATTERN, LanguageConfig

VARIABLE_REFERENCE_RE = re.compile(
    r"\$\{(" + IDENTIFIER_WORD_PATTERN + r")\}|\$(" + IDENTIFIER_WORD_PATTERN + r")"
)


@dataclass(frozen=True)
class SourceLine:
    number: int  # 1-based
    text: str  # stripped of surrounding whitespace


def iter_lines(source: str, config: LanguageConfig) -> Iterator[SourceLine]:
    """Yield the non-blank, non-comment lines of *source* with their line numbers."""
    for number, raw in enumerate(source.split("\n"), start=1):
        text = raw.strip()
        if not text or config.is_comment_line(text):
            continue
        yield SourceLine(number=number, text=text)


def assignment_pattern(config: LanguageConfig) -> re.Pattern[str]:
    """``NAME=value``, optionally behind a declaration keyword such as ``export``."""
    prefix = ""
    if config.declaration_keywords:
        keywords = "|".join(re.escape(kw) for kw in config.declaration_keywords)
        prefix = rf"(?:(?:{keywords})\s+)?"
    return re.compile(rf"^{prefix}({IDENTIFIER_WORD_PATTERN})=(.*)$")


def referenced_names(text: str) -> list[str]:
    """Names referenced as ``$NAME`` or ``${NAME}`` in *text*, in order, without repeats."""
    seen: dict[str, None] = {}
    for braced, bare in VARIABLE_REFERENCE_RE.findall(text):
        seen.setdefault(braced or bare, None)
    return list(seen)
