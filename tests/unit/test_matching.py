"""
Unit tests for literal term matching helpers.
"""

import pytest
from src.ranking.matching import contains_whole_word, count_occurrences, literal_pattern


class TestContainsWholeWord:
    """Test ASCII-letter word boundary detection"""

    @pytest.mark.parametrize("text, term, expected", [
        ("monsoon diaries", "monsoon", True),
        ("delhi monsoon", "monsoon", True),
        ("monsoons", "monsoon", False),
        ("the monsoon.", "monsoon", True),
        ("cats cat", "cat", True),         # second occurrence is bounded
        ("banana", "ana", False),          # every occurrence inside a word
        ("best web3 tips", "web", True),   # digits are not letters
        ("snake_case", "case", True),      # underscore is not a letter
        ("", "monsoon", False),
    ])
    def test_boundaries(self, text, term, expected):
        assert contains_whole_word(text, term) is expected

    def test_empty_term(self):
        assert contains_whole_word("anything", "") is False

    def test_metacharacters_are_literal(self):
        assert contains_whole_word("learn c++ today", "c++") is True
        assert contains_whole_word("learn cpp today", "c++") is False


class TestCountOccurrences:
    """Test non-overlapping literal counting"""

    def test_non_overlapping(self):
        assert count_occurrences("aaaa", "aa") == 2

    def test_counts_inside_words(self):
        assert count_occurrences("monsoon monsoons", "monsoon") == 2

    def test_escaped_metacharacters(self):
        """Test '.' is counted literally, not as any character"""
        assert count_occurrences("a.b", ".") == 1
        assert count_occurrences("c++ and c++", "c++") == 2
        assert count_occurrences("draft (draft)", "(draft)") == 1

    def test_empty_inputs(self):
        assert count_occurrences("", "term") == 0
        assert count_occurrences("text", "") == 0

    def test_literal_pattern_cached(self):
        assert literal_pattern("[x]") is literal_pattern("[x]")
        assert literal_pattern("[x]").search("a [x] b")
        assert not literal_pattern("[x]").search("x")
