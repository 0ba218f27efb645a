"""Tests for the composable API functions in scriptlens.api."""

import json

import pytest

from scriptlens import constants
from scriptlens.api import (
    analyze,
    check_source,
    dump_report,
    lexical_summary,
    parse_source,
    tokenize_source,
)
from scriptlens.report import AnalysisReport
from scriptlens.tokens import DisplayCategory, TokenKind

CLEAN_SCRIPT = "X=1\nif [ $X -eq 1 ]; then\necho $X\nfi\n"
MISSING_FI = "if true; then\necho hi\n"
JAVA_SOURCE = "int x = 1;\nSystem.out.println(x);\n"


class TestTokenizeSource:
    def test_returns_tokens_and_errors(self):
        tokens, errors = tokenize_source("X=1")
        assert [tok.kind for tok in tokens] == [
            TokenKind.IDENTIFIER,
            TokenKind.OPERATOR,
            TokenKind.NUMBER,
        ]
        assert errors == []

    def test_language_parameter(self):
        tokens, _ = tokenize_source("int x;", language="java")
        assert tokens[0].kind == TokenKind.KEYWORD

    def test_unknown_language_raises(self):
        with pytest.raises(ValueError):
            tokenize_source("X=1", language="cobol")


class TestLexicalSummary:
    def test_totals(self):
        summary = lexical_summary(CLEAN_SCRIPT)
        assert summary.totals[DisplayCategory.ERROR] == 0
        assert summary.totals[DisplayCategory.KEYWORD] == 4  # if then echo fi


class TestParseSource:
    def test_clean_script(self):
        result = parse_source(CLEAN_SCRIPT)
        assert result.messages == []
        assert len(result.tree.nodes) == 4
        assert result.tree.root == constants.TREE_ROOT_NAME

    def test_java_has_no_structural_parser(self):
        with pytest.raises(ValueError):
            parse_source("int x;", language="java")


class TestCheckSource:
    def test_clean_script(self):
        result = check_source(CLEAN_SCRIPT)
        assert result.errors == []
        assert result.warnings == []

    def test_java(self):
        result = check_source(JAVA_SOURCE, language="java")
        assert result.errors == []
        assert result.warnings == []


class TestAnalyze:
    def test_clean_script_has_no_findings_in_any_stage(self):
        report = analyze(CLEAN_SCRIPT)
        assert isinstance(report, AnalysisReport)
        assert report.lexical.errors == []
        assert report.syntax.errors == []
        assert report.syntax.file_errors == []
        assert report.semantic.errors == []
        assert report.semantic.warnings == []
        assert report.is_clean

    def test_missing_fi_is_a_file_error(self):
        report = analyze(MISSING_FI)
        assert report.syntax.file_errors == [constants.UNCLOSED_IF]
        assert [err for err in report.syntax.errors if err.line == 1] == []
        assert not report.is_clean

    def test_java_skips_the_structural_stage(self):
        report = analyze(JAVA_SOURCE, language="java")
        assert report.syntax is None
        assert report.language == "java"
        assert report.semantic.errors == []

    def test_unknown_language_raises(self):
        with pytest.raises(ValueError):
            analyze("X=1", language="cobol")


class TestReportText:
    def test_sections_in_order(self):
        text = analyze(CLEAN_SCRIPT).report()
        lexical = text.index("Análisis léxico")
        syntactic = text.index("Análisis sintáctico")
        semantic = text.index("Análisis semántico")
        assert lexical < syntactic < semantic
        assert constants.SEMANTIC_VALID_BANNER in text

    def test_structural_messages_are_listed(self):
        text = analyze(MISSING_FI).report()
        assert constants.UNCLOSED_IF in text

    def test_java_report_notes_missing_grammar(self):
        text = analyze(JAVA_SOURCE, language="java").report()
        assert "sin gramática de líneas" in text


class TestDumpReport:
    def test_json_keys(self):
        data = json.loads(dump_report(CLEAN_SCRIPT))
        assert set(data) == {"language", "tokens", "lexical", "syntax", "semantic"}
        assert data["language"] == "bash"

    def test_nodes_carry_their_kind(self):
        data = json.loads(dump_report(CLEAN_SCRIPT))
        kinds = [node["kind"] for node in data["syntax"]["tree"]["nodes"]]
        assert kinds == ["assignment", "conditional", "command", "block_end"]

    def test_java_syntax_is_null(self):
        data = json.loads(dump_report(JAVA_SOURCE, language="java"))
        assert data["syntax"] is None
