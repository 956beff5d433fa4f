"""
Tests for space tokenization and the stop-word set.
"""

import pytest

from search_server.tokenizer import StopWords, split_into_words


@pytest.mark.parametrize(
    "text,expected",
    [
        ("white cat", ["white", "cat"]),
        ("white  cat", ["white", "", "cat"]),
        (" white cat ", ["", "white", "cat", ""]),
        ("", [""]),
        ("well-groomed\tdog", ["well-groomed\tdog"]),
        ("line\nbreak", ["line\nbreak"]),
    ],
)
def test_split_into_words(text, expected):
    assert split_into_words(text) == expected


class TestStopWords:
    def test_membership_is_exact(self):
        stop_words = StopWords("and in on")
        assert "and" in stop_words
        assert "And" not in stop_words
        assert "an" not in stop_words

    def test_add_is_an_idempotent_union(self):
        stop_words = StopWords("and in")
        stop_words.add("in on")
        stop_words.add("and")
        assert list(stop_words) == ["and", "in", "on"]
        assert len(stop_words) == 3

    def test_add_words(self):
        stop_words = StopWords()
        stop_words.add_words(["a", "the", "a"])
        assert list(stop_words) == ["a", "the"]

    def test_empty_token_becomes_a_stop_word(self):
        stop_words = StopWords("and  in")
        assert "" in stop_words

    def test_split_into_words_no_stop_keeps_order_and_duplicates(self):
        stop_words = StopWords("and")
        assert stop_words.split_into_words_no_stop("cat and dog and cat") == ["cat", "dog", "cat"]
