"""
Inverted index with normalized term frequencies.

Structure:
    postings:  word -> {document id -> tf}
    documents: document id -> DocumentData(rating, status, word_frequencies)

where tf = (occurrences of word in document) / (indexed words in document),
so the tfs of one document always sum to 1.0.

The number of recorded documents is the only document count. It is the
numerator of the inverse document frequency:

    idf(word) = ln(N / df(word))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from .document import DocumentData, DocumentStatus, compute_average_rating
from .errors import (
    DuplicateDocumentId,
    InvalidDocument,
    InvalidDocumentId,
    UnknownDocumentId,
    UnknownWord,
)

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Word-to-document postings plus per-document metadata.

    Ingestion is all-or-nothing: a rejected document leaves the index unchanged.
    """

    def __init__(self):
        self._postings: dict[str, dict[int, float]] = {}
        self._documents: dict[int, DocumentData] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    @property
    def document_count(self) -> int:
        return len(self._documents)

    @property
    def document_ids(self) -> Iterator[int]:
        return iter(sorted(self._documents))

    def add_document(
        self,
        document_id: int,
        words: Sequence[str],
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """
        Index a document.

        Args:
            document_id: Non-negative, not yet ingested id
            words: Document words with stop words already removed
            status: Status stored for filtering
            ratings: Ratings averaged into the stored rating

        Raises:
            InvalidDocumentId: id is negative
            DuplicateDocumentId: id was ingested before
            InvalidDocument: no words to index
        """
        if document_id < 0:
            raise InvalidDocumentId(f"Document id must be non-negative, got {document_id}")
        if document_id in self._documents:
            raise DuplicateDocumentId(f"Document id {document_id} is already indexed")
        if not words:
            raise InvalidDocument(
                f"Document {document_id} has no words to index after stop-word removal"
            )

        inv_word_count = 1.0 / len(words)
        word_frequencies: dict[str, float] = {}
        for word in words:
            word_frequencies[word] = word_frequencies.get(word, 0.0) + inv_word_count

        for word, tf in word_frequencies.items():
            self._postings.setdefault(word, {})[document_id] = tf

        self._documents[document_id] = DocumentData(
            rating=compute_average_rating(ratings),
            status=status,
            word_frequencies=word_frequencies,
        )

        logger.debug(
            f"Indexed document {document_id}: {len(words)} words, "
            f"{len(word_frequencies)} unique, status={status.name}"
        )

    def get_document(self, document_id: int) -> DocumentData:
        """Metadata of an ingested document."""
        try:
            return self._documents[document_id]
        except KeyError:
            raise UnknownDocumentId(f"Document id {document_id} is not indexed") from None

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Read-only term frequencies of one document (word -> tf)."""
        return self.get_document(document_id).word_frequencies

    def get_postings(self, word: str) -> Mapping[int, float]:
        """Read-only postings of a word (document id -> tf); empty if the word is not indexed."""
        return MappingProxyType(self._postings.get(word, {}))

    def document_frequency(self, word: str) -> int:
        """Number of documents containing word."""
        return len(self._postings.get(word, ()))

    def inverse_document_frequency(self, words: Iterable[str]) -> NDArray[np.float64]:
        """
        IDF for each word, ln(N / df).

        Raises:
            UnknownWord: a word is not indexed (its df would be zero)
        """
        words = list(words)
        df = np.array([self.document_frequency(word) for word in words], dtype=np.float64)
        if df.size and not np.all(df > 0):
            unknown = [word for word, count in zip(words, df) if count == 0]
            raise UnknownWord(f"Words are not indexed: {unknown!r}")
        return np.log(self.document_count / df)
