"""Tests for the line-oriented structural parser."""

from __future__ import annotations

import pytest

from scriptlens import constants
from scriptlens.language import BASH, JAVA
from scriptlens.parser import StructuralParser, get_structural_parser, parse
from scriptlens.syntax import (
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
)


def _kinds(source: str) -> list[str]:
    return [node.kind for node in parse(source).tree.nodes]


def _messages_on_line(source: str, line: int) -> list[str]:
    return [err.message for err in parse(source).errors if err.line == line]


class TestShapes:
    def test_assignment(self):
        result = parse("X=1")
        assert result.tree.nodes == [Assignment(line=1, name="X", rhs_text="1")]
        assert result.errors == []
        assert result.file_errors == []

    def test_assignment_with_declaration_keyword(self):
        result = parse("export COUNT=10")
        assert result.tree.nodes == [
            Assignment(line=1, name="COUNT", rhs_text="10")
        ]

    def test_if_header(self):
        result = parse("if [ $X -eq 1 ]; then\nfi")
        assert result.tree.nodes == [
            Conditional(
                line=1, header=ConditionalHeader.IF, predicate_text="[ $X -eq 1 ]"
            ),
            BlockEnd(line=2, which=BlockEndKind.END_IF),
        ]
        assert result.errors == []
        assert result.file_errors == []

    def test_while_loop(self):
        result = parse("while true; do\ndone")
        assert result.tree.nodes == [
            Conditional(line=1, header=ConditionalHeader.WHILE, predicate_text="true"),
            BlockEnd(line=2, which=BlockEndKind.END_LOOP),
        ]
        assert result.file_errors == []

    def test_for_loop(self):
        result = parse("for i in 1 2 3; do\necho $i\ndone")
        assert result.tree.nodes[0] == ForLoop(
            line=1, var_name="i", iterable_text="1 2 3"
        )
        assert _kinds("for i in 1 2 3; do\necho $i\ndone") == [
            "for_loop",
            "command",
            "block_end",
        ]
        assert result.errors == []
        assert result.file_errors == []

    def test_function_definition(self):
        result = parse("greet() {\necho $1\n}")
        assert result.tree.nodes[0] == FunctionDef(line=1, name="greet")
        assert result.tree.nodes[-1] == BlockEnd(line=3, which=BlockEndKind.END_BRACE)
        assert result.file_errors == []

    def test_function_keyword_form(self):
        assert parse("function greet() {\n}").tree.nodes[0] == FunctionDef(
            line=1, name="greet"
        )

    def test_bare_open_brace_grows_block_open(self):
        result = parse("{\n}")
        assert result.tree.nodes == [
            BlockOpen(line=1),
            BlockEnd(line=2, which=BlockEndKind.END_BRACE),
        ]
        assert result.file_errors == []

    def test_command(self):
        assert parse("echo hola").tree.nodes == [Command(line=1, text="echo hola")]

    def test_unrecognized_line(self):
        result = parse("echo 1 | wc")
        assert result.tree.nodes == []
        assert result.errors == [
            StructuralError(line=1, message="Sintaxis no reconocida: 'echo 1 | wc'")
        ]

    def test_nodes_never_nest(self):
        source = "if true; then\nwhile true; do\nX=1\ndone\nfi"
        assert _kinds(source) == [
            "conditional",
            "conditional",
            "assignment",
            "block_end",
            "block_end",
        ]

    def test_blank_and_comment_lines_are_skipped(self):
        result = parse("\n# comentario\n\nX=1\n")
        assert result.tree.nodes == [Assignment(line=4, name="X", rhs_text="1")]


class TestBlockMatching:
    def test_balanced_if_has_no_file_errors(self):
        assert parse("if true; then\necho hola\nfi").file_errors == []

    def test_missing_fi(self):
        result = parse("if true; then\necho hola")
        assert result.file_errors == ["Bloque 'if' sin 'fi' de cierre"]

    def test_unmatched_fi_does_not_go_negative(self):
        result = parse("fi\nif true; then")
        assert result.errors == [StructuralError(line=1, message=constants.UNMATCHED_FI)]
        assert result.file_errors == [constants.UNCLOSED_IF]

    def test_unmatched_done(self):
        assert _messages_on_line("done", 1) == [constants.UNMATCHED_DONE]

    def test_done_closes_while_before_for(self):
        source = "while true; do\nfor i in 1 2; do\ndone"
        assert parse(source).file_errors == [constants.UNCLOSED_FOR]

    def test_done_closes_for_when_no_while_is_open(self):
        assert parse("for i in 1 2; do\ndone").file_errors == []

    def test_unmatched_close_brace(self):
        assert _messages_on_line("}", 1) == [constants.UNMATCHED_BRACE]

    def test_unclosed_brace(self):
        assert parse("{").file_errors == [constants.UNCLOSED_BRACE]

    def test_one_file_error_per_block_kind(self):
        source = "if true; then\nif true; then\nwhile true; do"
        assert parse(source).file_errors == [
            constants.UNCLOSED_IF,
            constants.UNCLOSED_WHILE,
        ]


class TestBlockCounters:
    def test_closers_at_zero_report_failure(self):
        counters = BlockCounters()
        assert not counters.close_if()
        assert not counters.close_loop()
        assert not counters.close_brace()
        assert counters == BlockCounters()

    def test_loop_close_prefers_while(self):
        counters = BlockCounters(while_depth=1, for_depth=1)
        assert counters.close_loop()
        assert counters.while_depth == 0
        assert counters.for_depth == 1


class TestQuoteBalance:
    def test_unbalanced_double_quotes(self):
        assert _messages_on_line('echo "hola', 1) == [
            constants.UNBALANCED_DOUBLE_QUOTES
        ]

    def test_unbalanced_single_quotes(self):
        assert _messages_on_line("echo 'hola", 1) == [
            constants.UNBALANCED_SINGLE_QUOTES
        ]

    def test_escaped_quotes_are_not_counted(self):
        messages = _messages_on_line('echo \\"hola', 1)
        assert constants.UNBALANCED_DOUBLE_QUOTES not in messages

    def test_error_reports_its_line(self):
        result = parse('X=1\necho "hola')
        assert [err.line for err in result.errors] == [2]

    def test_balanced_quotes(self):
        assert parse("echo \"hola\" 'mundo'").errors == []


class TestKeywordSuggestions:
    def test_misspelled_keyword(self):
        messages = _messages_on_line("whille [ $i -lt 3 ]; do", 1)
        expected = constants.UNKNOWN_KEYWORD_TEMPLATE.format(
            word="whille", suggestion="while"
        )
        assert expected in messages

    def test_far_word_gets_no_suggestion(self):
        assert parse("echo zzzzzz").errors == []

    def test_words_inside_strings_are_ignored(self):
        assert parse('echo "whille"').errors == []

    def test_variable_references_are_ignored(self):
        assert parse("echo $whille ${donne}").errors == []

    def test_arithmetic_expansion_is_ignored(self):
        messages = _messages_on_line("echo $((whille + 1))", 1)
        assert not any(message.startswith("Palabra reservada") for message in messages)

    def test_nested_arithmetic_expansion_is_ignored(self):
        messages = _messages_on_line("echo $(( (a+(b)) * donne )) fii", 1)
        suggestions = [m for m in messages if m.startswith("Palabra reservada")]
        assert suggestions == [
            constants.UNKNOWN_KEYWORD_TEMPLATE.format(word="fii", suggestion="fi")
        ]

    def test_assignment_target_is_ignored(self):
        assert parse("X=1").errors == []

    def test_builtin_commands_are_ignored(self):
        assert parse("if true; then\nfi").errors == []

    def test_suggestion_does_not_stop_shape_dispatch(self):
        result = parse("echo fii")
        assert result.tree.nodes == [Command(line=1, text="echo fii")]
        assert len(result.errors) == 1


class TestStructuralError:
    def test_str_includes_line(self):
        err = StructuralError(line=3, message=constants.UNMATCHED_FI)
        assert str(err) == "Línea 3: 'fi' sin 'if' correspondiente"

    def test_messages_lists_line_errors_then_file_errors(self):
        result = parse("fi\nif true; then")
        assert result.messages == [
            "Línea 1: 'fi' sin 'if' correspondiente",
            "Bloque 'if' sin 'fi' de cierre",
        ]


class TestParserRegistry:
    def test_bash_has_a_parser(self):
        assert isinstance(get_structural_parser(BASH), StructuralParser)

    def test_java_has_no_line_grammar(self):
        with pytest.raises(ValueError):
            get_structural_parser(JAVA)

    def test_parser_is_reusable(self):
        parser = StructuralParser(BASH)
        parser.parse("if true; then")
        assert parser.parse("X=1").file_errors == []
