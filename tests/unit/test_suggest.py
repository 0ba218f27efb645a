"""Tests for edit distance and keyword suggestions."""

from scriptlens.language import BASH
from scriptlens.suggest import levenshtein, suggest_keyword


class TestLevenshtein:
    def test_identical_words(self):
        assert levenshtein("while", "while") == 0

    def test_single_insertion(self):
        assert levenshtein("whille", "while") == 1

    def test_empty_word(self):
        assert levenshtein("", "done") == 4
        assert levenshtein("done", "") == 4

    def test_classic_example(self):
        assert levenshtein("kitten", "sitting") == 3

    def test_symmetric(self):
        assert levenshtein("esac", "case") == levenshtein("case", "esac")


class TestSuggestKeyword:
    def test_close_misspelling(self):
        assert suggest_keyword("whille", BASH.keywords) == "while"

    def test_transposition_within_two_edits(self):
        assert suggest_keyword("whiel", BASH.keywords) == "while"

    def test_far_word_has_no_suggestion(self):
        assert suggest_keyword("xyzzyq", BASH.keywords) is None

    def test_tie_goes_to_first_keyword(self):
        assert suggest_keyword("fo", ("for", "do")) == "for"
        assert suggest_keyword("fo", ("do", "for")) == "do"

    def test_max_distance_is_configurable(self):
        assert suggest_keyword("whiel", ("while",), max_distance=1) is None
