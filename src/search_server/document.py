"""
Document values shared by the index, the ranker and the matcher.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class DocumentStatus(Enum):
    """Classification attached to a document at ingestion."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass(frozen=True)
class Document:
    """
    A single search result.

    Attributes:
        id: Caller-assigned document id.
        relevance: TF-IDF score of the document for the query.
        rating: Average rating recorded at ingestion.
    """

    id: int
    relevance: float
    rating: int


@dataclass(frozen=True)
class DocumentData:
    """Per-document metadata owned by the index. Word frequencies are read-only."""

    rating: int
    status: DocumentStatus
    word_frequencies: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "word_frequencies", MappingProxyType(dict(self.word_frequencies)))


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of ratings, truncated toward zero.

    Returns 0 when there are no ratings.

    Examples:
        >>> compute_average_rating([8, -3])
        2
        >>> compute_average_rating([5, -12, 2, 1])
        -1
        >>> compute_average_rating([-5, 2])
        -1
    """
    if not ratings:
        return 0
    rating_sum = sum(ratings)
    average = abs(rating_sum) // len(ratings)
    return average if rating_sum >= 0 else -average


def format_document(document: Document) -> str:
    """Render a result the way the demonstration driver prints it."""
    return (
        f"{{ document_id = {document.id}, "
        f"relevance = {document.relevance:g}, "
        f"rating = {document.rating} }}"
    )
