"""Errors raised by the search server for invalid input."""


class SearchServerError(ValueError):
    """Base class for recoverable validation failures."""


class InvalidQuery(SearchServerError):
    """A query token is a bare minus sign with no word after it."""


class InvalidDocument(SearchServerError):
    """A document has no indexable words once stop words are removed."""


class InvalidDocumentId(SearchServerError):
    """A document id is negative."""


class DuplicateDocumentId(SearchServerError):
    """A document id has already been ingested."""


class UnknownDocumentId(SearchServerError, KeyError):
    """A document id has never been ingested."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return ValueError.__str__(self)


class UnknownWord(SearchServerError, KeyError):
    """A word has no postings in the index."""

    def __str__(self) -> str:
        return ValueError.__str__(self)
