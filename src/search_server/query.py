"""
Query parsing.

A raw query is a space-separated list of words. A word prefixed with a single
"-" is a minus word: documents containing it are excluded from the results.
Every other word is a plus word and contributes to relevance.

    "fluffy cat -collar"  ->  plus={"fluffy", "cat"}, minus={"collar"}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import InvalidQuery
from .tokenizer import StopWords, split_into_words

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    """Parsed query. A word is never both a plus and a minus word."""

    plus_words: frozenset[str] = frozenset()
    minus_words: frozenset[str] = frozenset()


def parse_query_word(text: str, stop_words: StopWords) -> QueryWord:
    """Classify one query token. Exactly one leading minus is stripped."""
    is_minus = False
    if text.startswith(MINUS_PREFIX):
        if text == MINUS_PREFIX:
            raise InvalidQuery("Minus sign must be followed by a word")
        is_minus = True
        text = text[len(MINUS_PREFIX):]
    return QueryWord(data=text, is_minus=is_minus, is_stop=text in stop_words)


def parse_query(text: str, stop_words: StopWords) -> Query:
    """
    Parse raw query text into plus and minus words.

    Stop words are dropped whether they are plus or minus words. When the same
    word occurs both ways, the later occurrence decides its kind.

    Raises:
        InvalidQuery: a token is a bare "-"
    """
    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for token in split_into_words(text):
        query_word = parse_query_word(token, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            plus_words.discard(query_word.data)
            minus_words.add(query_word.data)
        else:
            minus_words.discard(query_word.data)
            plus_words.add(query_word.data)

    logger.debug(f"Parsed query {text!r}: plus={sorted(plus_words)}, minus={sorted(minus_words)}")
    return Query(plus_words=frozenset(plus_words), minus_words=frozenset(minus_words))
