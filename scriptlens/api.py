"""Composable API functions for the analysis pipeline.

One entry point per stage, each taking the full source text, plus
``analyze`` which runs all three stages and bundles their results. The stages
never share intermediate state; each re-scans the source on its own.
"""

from __future__ import annotations

import logging

from .checkers import get_checker
from .language import get_language
from .lexer import summarize, tokenize
from .parser import get_structural_parser, has_structural_parser
from .report import AnalysisReport
from .semantic import SemanticResult
from .syntax import SyntaxResult
from .tokens import LexicalError, LexicalSummary, Token
from . import constants

logger = logging.getLogger(__name__)


def tokenize_source(
    source: str, language: str = constants.LANGUAGE_BASH
) -> tuple[list[Token], list[LexicalError]]:
    """Tokenize source code and collect lexical errors.

    Args:
        source: The source code text.
        language: Source language name (e.g. "bash", "java").

    Returns:
        A ``(tokens, lexical_errors)`` pair.
    """
    logger.info("Tokenizing source (%s, %d chars)", language, len(source))
    return tokenize(source, get_language(language))


def lexical_summary(
    source: str, language: str = constants.LANGUAGE_BASH
) -> LexicalSummary:
    """Tokenize source code and return the per-category display summary."""
    tokens, errors = tokenize_source(source, language)
    return summarize(tokens, errors)


def parse_source(source: str, language: str = constants.LANGUAGE_BASH) -> SyntaxResult:
    """Parse source code into a flat syntax tree with structural errors.

    Raises:
        ValueError: If the language is unknown or has no line grammar.
    """
    logger.info("Parsing source (%s)", language)
    return get_structural_parser(get_language(language)).parse(source)


def check_source(
    source: str, language: str = constants.LANGUAGE_BASH
) -> SemanticResult:
    """Run the semantic checker for *language* over source code."""
    logger.info("Checking source semantics (%s)", language)
    return get_checker(get_language(language)).check(source)


def analyze(source: str, language: str = constants.LANGUAGE_BASH) -> AnalysisReport:
    """Run all three stages over source code.

    Args:
        source: The source code text.
        language: Source language name.

    Returns:
        An AnalysisReport; ``syntax`` is None when the language has no
        structural parser.
    """
    config = get_language(language)
    logger.info("Analyzing source (%s, %d lines)", language, source.count("\n") + 1)

    tokens, lexical_errors = tokenize_source(source, language)
    syntax = parse_source(source, language) if has_structural_parser(config) else None
    semantic = check_source(source, language)

    return AnalysisReport(
        language=config.name,
        tokens=tokens,
        lexical=summarize(tokens, lexical_errors),
        syntax=syntax,
        semantic=semantic,
    )


def dump_report(
    source: str, language: str = constants.LANGUAGE_BASH, indent: int | None = 2
) -> str:
    """Analyze source code and return the report serialized as JSON."""
    return analyze(source, language).model_dump_json(indent=indent)
