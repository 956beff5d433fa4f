"""
Whitespace tokenizer and stop-word set.

Tokenization is deliberately literal:
- Words are separated by the single ASCII space character only
- Tabs, newlines and other whitespace are ordinary word content
- Consecutive, leading or trailing spaces produce empty-string words

The empty string is therefore a legal word. It can end up in the stop-word set
or in the index like any other word.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

WORD_SEPARATOR = " "


def split_into_words(text: str) -> list[str]:
    """
    Split text into words on the space character.

    Examples:
        >>> split_into_words("white cat")
        ['white', 'cat']

        >>> split_into_words(" white  cat")
        ['', 'white', '', 'cat']

        >>> split_into_words("")
        ['']
    """
    return text.split(WORD_SEPARATOR)


class StopWords:
    """
    Append-only set of words excluded from indexing and querying.

    Args:
        text: Optional space-separated stop words to start with.

    Membership is exact and case-sensitive.
    """

    def __init__(self, text: str = ""):
        self._words: set[str] = set()
        if text:
            self.add(text)

    def add(self, text: str) -> None:
        """Add every word of a space-separated string."""
        self._words.update(split_into_words(text))

    def add_words(self, words: Iterable[str]) -> None:
        """Add already split words."""
        self._words.update(words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"StopWords({sorted(self._words)!r})"

    def split_into_words_no_stop(self, text: str) -> list[str]:
        """Tokenize text and drop stop words, keeping order and duplicates."""
        return [word for word in split_into_words(text) if word not in self]
