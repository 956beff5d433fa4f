"""
SearchServer: the public entry point tying tokenizer, index, parser and ranker.

Usage:
    from search_server import DocumentStatus, SearchServer

    server = SearchServer("and in on")
    server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])

    server.find_top_documents("fluffy cat")                          # ACTUAL only
    server.find_top_documents("fluffy cat", DocumentStatus.BANNED)
    server.find_top_documents("fluffy cat", lambda id, status, rating: id % 2 == 0)
    server.match_document("fluffy -collar", 1)

Instances are not thread-safe: ingestion and queries must not run concurrently.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable, Sequence

from .document import Document, DocumentStatus
from .index import InvertedIndex
from .matching import match_document
from .query import parse_query
from .ranking import (
    DocumentFilter,
    Parameters,
    as_predicate,
    find_all_documents,
    select_top_documents,
    sort_documents,
)
from .tokenizer import StopWords

logger = logging.getLogger(__name__)


class SearchServer:
    """
    In-memory TF-IDF search over short documents.

    Args:
        stop_words: Space-separated stop words, or an iterable of words
        max_result_document_count: Number of results of find_top_documents
        relevance_epsilon: Non-negative relevance difference up to which ratings decide order

    Raises:
        TypeError: result count is not an integer or epsilon is not a number
        ValueError: result count is not positive or epsilon is negative
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] = "",
        *,
        max_result_document_count: int = Parameters.max_result_document_count,
        relevance_epsilon: float = Parameters.relevance_epsilon,
    ):
        if isinstance(max_result_document_count, bool) or not isinstance(
            max_result_document_count, numbers.Integral
        ):
            raise TypeError(
                "max_result_document_count must be an integer, "
                f"got {type(max_result_document_count).__name__}"
            )
        if max_result_document_count <= 0:
            raise ValueError(
                f"max_result_document_count must be positive, got {max_result_document_count}"
            )
        if isinstance(relevance_epsilon, bool) or not isinstance(relevance_epsilon, numbers.Real):
            raise TypeError(
                f"relevance_epsilon must be a real number, got {type(relevance_epsilon).__name__}"
            )
        # NaN fails this comparison too.
        if not relevance_epsilon >= 0:
            raise ValueError(f"relevance_epsilon must be non-negative, got {relevance_epsilon}")
        self.max_result_document_count = int(max_result_document_count)
        self.relevance_epsilon = float(relevance_epsilon)

        self._stop_words = StopWords()
        if isinstance(stop_words, str):
            if stop_words:
                self._stop_words.add(stop_words)
        else:
            self._stop_words.add_words(stop_words)
        self._index = InvertedIndex()

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._index

    @property
    def document_count(self) -> int:
        return self._index.document_count

    @property
    def stop_words(self) -> StopWords:
        return self._stop_words

    def set_stop_words(self, text: str) -> None:
        """Add stop words. Documents already indexed are not reindexed."""
        self._stop_words.add(text)
        if len(self._index):
            logger.warning(
                f"Stop words changed after {len(self._index)} documents were indexed; "
                "existing documents keep their words"
            )

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """
        Tokenize, filter and index a document.

        Raises:
            InvalidDocumentId: id is negative
            DuplicateDocumentId: id was ingested before
            InvalidDocument: document consists of stop words only
        """
        words = self._stop_words.split_into_words_no_stop(document)
        self._index.add_document(document_id, words, status, ratings)

    def find_top_documents(
        self,
        raw_query: str,
        document_filter: DocumentFilter = None,
    ) -> list[Document]:
        """
        Best matching documents for a query.

        Args:
            raw_query: Space-separated words, "-word" excludes documents
            document_filter: None (ACTUAL documents), a DocumentStatus, or a
                predicate called as predicate(document_id, status, rating)

        Returns:
            At most max_result_document_count documents, best first

        Raises:
            InvalidQuery: query contains a bare "-"
            TypeError: filter is neither a status nor callable
        """
        predicate = as_predicate(document_filter)
        query = parse_query(raw_query, self._stop_words)
        matched_documents = find_all_documents(self._index, query, predicate)
        ranked = sort_documents(matched_documents, self.relevance_epsilon)
        return select_top_documents(ranked, self.max_result_document_count)

    def match_document(
        self,
        raw_query: str,
        document_id: int,
    ) -> tuple[list[str], DocumentStatus]:
        """
        Plus words of the query found in a document, with the document status.

        The word list is empty when the document contains a minus word.

        Raises:
            InvalidQuery: query contains a bare "-"
            UnknownDocumentId: document was never ingested
        """
        query = parse_query(raw_query, self._stop_words)
        return match_document(self._index, query, document_id)
