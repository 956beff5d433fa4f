"""
In-process TF-IDF search over short documents.

Components:
- tokenizer: space splitting and the stop-word set
- index: inverted index of normalized term frequencies
- query: plus/minus word query parsing
- ranking: TF-IDF scoring, filtering, ordering and top-k selection
- matching: plus words of a query found in one document
- server: SearchServer facade
"""

from .document import Document, DocumentStatus, format_document
from .errors import (
    DuplicateDocumentId,
    InvalidDocument,
    InvalidDocumentId,
    InvalidQuery,
    SearchServerError,
    UnknownDocumentId,
    UnknownWord,
)
from .server import SearchServer
from .tokenizer import StopWords, split_into_words

__all__ = [
    "Document",
    "DocumentStatus",
    "DuplicateDocumentId",
    "InvalidDocument",
    "InvalidDocumentId",
    "InvalidQuery",
    "SearchServer",
    "SearchServerError",
    "StopWords",
    "UnknownDocumentId",
    "UnknownWord",
    "format_document",
    "split_into_words",
]
