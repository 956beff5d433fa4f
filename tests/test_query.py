import pytest

from search_server.errors import InvalidQuery
from search_server.query import Query, parse_query, parse_query_word
from search_server.tokenizer import StopWords


@pytest.fixture
def stop_words():
    return StopWords("and in on")


@pytest.mark.parametrize(
    "text,plus,minus",
    [
        ("fluffy cat", {"fluffy", "cat"}, set()),
        ("fluffy cat -collar", {"fluffy", "cat"}, {"collar"}),
        ("cat cat -dog -dog", {"cat"}, {"dog"}),
        ("cat and dog", {"cat", "dog"}, set()),
        ("cat -and", {"cat"}, set()),
        ("--cat", set(), {"-cat"}),
        ("cat -cat", set(), {"cat"}),
        ("-cat cat", {"cat"}, set()),
    ],
)
def test_parse_query(stop_words, text, plus, minus):
    assert parse_query(text, stop_words) == Query(frozenset(plus), frozenset(minus))


def test_parse_query_word(stop_words):
    word = parse_query_word("-in", stop_words)
    assert word.data == "in"
    assert word.is_minus
    assert word.is_stop


@pytest.mark.parametrize("text", ["-", "cat -", "- cat", "cat - -dog"])
def test_bare_minus_is_invalid(stop_words, text):
    with pytest.raises(InvalidQuery):
        parse_query(text, stop_words)


def test_double_space_yields_empty_plus_word(stop_words):
    query = parse_query("cat  dog", stop_words)
    assert query.plus_words == {"cat", "", "dog"}
