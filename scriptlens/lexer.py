"""Tokenizer — ordered category matchers over the raw source text.

Each category of the language configuration becomes an independent matcher.
At every scan position all matchers are tried; the longest match wins and ties
go to the category listed first. Characters that no matcher accepts are
skipped silently.

Lexical error detection is a separate pass over the source with quoted
regions blanked out; comments are scanned like code. It flags bare words
that no token captured verbatim, so it is stricter than the token pass and
the two can disagree.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from . import constants
from .language import BASH, IDENTIFIER_WORD_PATTERN, LanguageConfig
from .tokens import (
    DisplayCategory,
    LexicalError,
    LexicalSummary,
    Token,
    TokenKind,
    TokenRow,
)

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(IDENTIFIER_WORD_PATTERN)
_NUMERIC_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class CategoryMatcher:
    """A single token category: a scanning pattern plus its anchored form."""

    kind: TokenKind
    pattern: re.Pattern[str]
    anchored: re.Pattern[str]

    @classmethod
    def from_source(cls, kind: TokenKind, pattern: str) -> CategoryMatcher:
        return cls(
            kind=kind,
            pattern=re.compile(pattern),
            anchored=re.compile(f"(?:{pattern})"),
        )

    def match_length(self, source: str, pos: int) -> int:
        m = self.pattern.match(source, pos)
        return m.end() - pos if m else 0

    def accepts(self, text: str) -> bool:
        return self.anchored.fullmatch(text) is not None


def build_matchers(config: LanguageConfig) -> tuple[CategoryMatcher, ...]:
    """Build the category matchers for *config* in classification order."""
    return (
        CategoryMatcher.from_source(TokenKind.KEYWORD, config.keyword_pattern),
        CategoryMatcher.from_source(TokenKind.IDENTIFIER, config.identifier_pattern),
        CategoryMatcher.from_source(TokenKind.NUMBER, config.number_pattern),
        CategoryMatcher.from_source(TokenKind.STRING_LITERAL, config.string_pattern),
        CategoryMatcher.from_source(TokenKind.OPERATOR, config.operator_pattern),
        CategoryMatcher.from_source(TokenKind.SYMBOL, config.symbol_pattern),
        CategoryMatcher.from_source(TokenKind.COMMENT, config.comment_pattern),
    )


class Tokenizer:
    """Splits source text into classified tokens for one language."""

    def __init__(self, config: LanguageConfig):
        self._config = config
        self._matchers = build_matchers(config)
        self._blank_re = re.compile(config.quoted_region_pattern)

    def tokenize(self, source: str) -> tuple[list[Token], list[LexicalError]]:
        tokens = self.scan(source)
        errors = self.find_lexical_errors(source, tokens)
        logger.debug(
            "Tokenized %d chars into %d tokens (%d lexical errors, %s)",
            len(source),
            len(tokens),
            len(errors),
            self._config.name,
        )
        return tokens, errors

    def scan(self, source: str) -> list[Token]:
        tokens: list[Token] = []
        pos = 0
        end = len(source)
        while pos < end:
            length = self._longest_match(source, pos)
            if length == 0:
                pos += 1
                continue
            text = source[pos : pos + length]
            tokens.append(Token(kind=self.classify(text), text=text))
            pos += length
        return tokens

    def _longest_match(self, source: str, pos: int) -> int:
        best = 0
        for matcher in self._matchers:
            length = matcher.match_length(source, pos)
            # strict comparison keeps the earlier category on ties
            if length > best:
                best = length
        return best

    def classify(self, text: str) -> TokenKind:
        """Return the first category whose anchored pattern accepts all of *text*."""
        return next(
            (matcher.kind for matcher in self._matchers if matcher.accepts(text)),
            TokenKind.UNKNOWN,
        )

    def blank_quoted_regions(self, source: str) -> str:
        return self._blank_re.sub(" ", source)

    def find_lexical_errors(
        self, source: str, tokens: list[Token]
    ) -> list[LexicalError]:
        captured = {tok.text for tok in tokens}
        errors: list[LexicalError] = []
        for word in _WORD_RE.findall(self.blank_quoted_regions(source)):
            if self._is_known_word(word, captured):
                continue
            errors.append(
                LexicalError(
                    word=word,
                    message=constants.LEXICAL_ERROR_TEMPLATE.format(word=word),
                )
            )
        return errors

    def _is_known_word(self, word: str, captured: set[str]) -> bool:
        return (
            self._config.is_keyword(word)
            or word in self._config.test_operators
            or word in captured
            or _NUMERIC_RE.match(word) is not None
        )


@lru_cache(maxsize=None)
def get_tokenizer(config: LanguageConfig) -> Tokenizer:
    return Tokenizer(config)


def tokenize(
    source: str, config: LanguageConfig = BASH
) -> tuple[list[Token], list[LexicalError]]:
    """Tokenize *source* and detect lexical errors.

    Args:
        source: The source code text.
        config: Language configuration supplying the category patterns.

    Returns:
        A ``(tokens, lexical_errors)`` pair; tokens are in source order.
    """
    return get_tokenizer(config).tokenize(source)


def summarize(tokens: list[Token], errors: list[LexicalError]) -> LexicalSummary:
    """Build the per-category token table for display.

    Unknown tokens appear as error rows but are not counted; the ``Error``
    total is the number of lexical errors.
    """
    totals = {category: 0 for category in DisplayCategory}
    rows: list[TokenRow] = []
    for tok in tokens:
        category = tok.display_category
        rows.append(
            TokenRow(
                text=tok.text,
                category=category,
                is_error=category == DisplayCategory.ERROR,
            )
        )
        if category != DisplayCategory.ERROR:
            totals[category] += 1
    totals[DisplayCategory.ERROR] += len(errors)
    return LexicalSummary(
        rows=rows, totals=totals, errors=[err.message for err in errors]
    )
