"""
TF-IDF ranking over the inverted index.

Scoring:
    relevance(doc) = sum over plus words w in doc of tf(w, doc) * ln(N / df(w))

Documents containing any minus word are dropped whatever their score. The
remaining candidates pass through a filter predicate, get sorted by relevance
(near-equal relevances broken by rating) and truncated to the top results.

Usage:
    from search_server.ranking import as_predicate, find_all_documents, sort_documents

    predicate = as_predicate(DocumentStatus.BANNED)
    documents = sort_documents(find_all_documents(index, query, predicate))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Union

from .document import Document, DocumentStatus
from .index import InvertedIndex
from .query import Query

logger = logging.getLogger(__name__)

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
DocumentFilter = Union[DocumentStatus, DocumentPredicate, None]


# =============================================================================
# Configuration
# =============================================================================


class Parameters:
    """
    Ranking defaults.

    max_result_document_count: Results returned by a top-documents query
    relevance_epsilon: Relevances closer than this are treated as equal
    default_status: Status matched when no filter is given
    """

    max_result_document_count: int = 5
    relevance_epsilon: float = 1e-6
    default_status: DocumentStatus = DocumentStatus.ACTUAL


# =============================================================================
# Filters
# =============================================================================


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting documents with the given status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


def as_predicate(document_filter: DocumentFilter = None) -> DocumentPredicate:
    """
    Normalize a filter to a predicate of (id, status, rating).

    Args:
        document_filter: None (default status), a DocumentStatus, or a predicate

    Raises:
        TypeError: filter is neither a status nor callable
    """
    if document_filter is None:
        return status_predicate(Parameters.default_status)
    if isinstance(document_filter, DocumentStatus):
        return status_predicate(document_filter)
    if callable(document_filter):
        return document_filter
    raise TypeError(
        f"Filter must be a DocumentStatus or a callable, got {type(document_filter).__name__}"
    )


# =============================================================================
# Scoring
# =============================================================================


def compute_relevance(index: InvertedIndex, query: Query) -> dict[int, float]:
    """
    Relevance of every document matching a plus word and no minus word.

    Plus words that are not indexed contribute nothing.
    """
    plus_words = sorted(word for word in query.plus_words if index.document_frequency(word) > 0)
    idf_values = index.inverse_document_frequency(plus_words)

    document_to_relevance: dict[int, float] = {}
    for word, idf in zip(plus_words, idf_values):
        for document_id, tf in index.get_postings(word).items():
            document_to_relevance[document_id] = (
                document_to_relevance.get(document_id, 0.0) + tf * float(idf)
            )

    for word in query.minus_words:
        for document_id in index.get_postings(word):
            document_to_relevance.pop(document_id, None)

    return document_to_relevance


def find_all_documents(
    index: InvertedIndex,
    query: Query,
    predicate: DocumentPredicate,
) -> list[Document]:
    """
    Score, exclude and filter documents for a parsed query.

    Returns:
        Unsorted results in ascending id order
    """
    document_to_relevance = compute_relevance(index, query)

    matched_documents = []
    for document_id in sorted(document_to_relevance):
        data = index.get_document(document_id)
        if predicate(document_id, data.status, data.rating):
            matched_documents.append(
                Document(
                    id=document_id,
                    relevance=document_to_relevance[document_id],
                    rating=data.rating,
                )
            )

    logger.debug(
        f"Found {len(matched_documents)} of {len(document_to_relevance)} candidates after filtering"
    )
    return matched_documents


# =============================================================================
# Ordering and Top-K Selection
# =============================================================================


def sort_documents(
    documents: list[Document],
    epsilon: float = Parameters.relevance_epsilon,
) -> list[Document]:
    """
    Order documents so that for every pair (a before b) either

        a.relevance > b.relevance + epsilon, or
        |a.relevance - b.relevance| <= epsilon and a.rating >= b.rating.

    "Within epsilon" is not transitive, so a plain comparison sort cannot
    guarantee this. Each step instead takes the first document, in relevance
    order, that no remaining document is required to precede.

    Such an order does not always exist: with relevances 0.5, 0.5 + 0.8e-6 and
    0.5 + 1.6e-6 rated 9, 5 and 0, the top document must precede the bottom one,
    which outrates the middle one, which outrates the top one. When no document
    is free to go next, the highest rated document of the top relevance window
    is taken, so the result is still deterministic.

    Documents that are equal in relevance and rating keep their input order.
    """
    remaining = sorted(documents, key=lambda document: document.relevance, reverse=True)
    ordered = []
    while remaining:
        ordered.append(remaining.pop(_next_document(remaining, epsilon)))
    return ordered


def _next_document(remaining: list[Document], epsilon: float) -> int:
    """Position of the document to emit next; remaining is sorted by relevance descending."""
    window_floor = remaining[0].relevance - epsilon

    fallback = 0
    for position, candidate in enumerate(remaining):
        if candidate.relevance < window_floor:
            break
        if not _is_outrated_nearby(remaining, position, epsilon):
            return position
        if candidate.rating > remaining[fallback].rating:
            fallback = position
    return fallback


def _is_outrated_nearby(remaining: list[Document], position: int, epsilon: float) -> bool:
    """Whether a document within epsilon of remaining[position] has a higher rating."""
    candidate = remaining[position]

    for other in reversed(remaining[:position]):
        if other.relevance - candidate.relevance > epsilon:
            break
        if other.rating > candidate.rating:
            return True

    for other in remaining[position + 1:]:
        if candidate.relevance - other.relevance > epsilon:
            break
        if other.rating > candidate.rating:
            return True

    return False


def select_top_documents(
    documents: list[Document],
    top_k: int = Parameters.max_result_document_count,
) -> list[Document]:
    """Keep the first top_k of already sorted documents."""
    return documents[:top_k]


__all__ = [
    "DocumentFilter",
    "DocumentPredicate",
    "Parameters",
    "as_predicate",
    "compute_relevance",
    "find_all_documents",
    "select_top_documents",
    "sort_documents",
    "status_predicate",
]
