"""Per-document query matching."""

from __future__ import annotations

from .document import DocumentStatus
from .index import InvertedIndex
from .query import Query


def match_document(
    index: InvertedIndex,
    query: Query,
    document_id: int,
) -> tuple[list[str], DocumentStatus]:
    """
    Plus words of the query that occur in one document.

    Each word is checked against this document only, so a plus word missing
    from the whole corpus simply does not match. If any minus word occurs in
    the document, nothing matches.

    Returns:
        (matched words in ascending order, stored document status)

    Raises:
        UnknownDocumentId: document was never ingested
    """
    data = index.get_document(document_id)
    word_frequencies = data.word_frequencies

    if any(word in word_frequencies for word in query.minus_words):
        return [], data.status

    matched_words = sorted(word for word in query.plus_words if word in word_frequencies)
    return matched_words, data.status
