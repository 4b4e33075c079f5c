"""Exceptions raised by the search server and the request log."""


class SearchServerError(ValueError):
    """Base class for every error raised by tfidf_search."""


class InvalidTextError(SearchServerError):
    """A document, stop word or query contains a control character."""


class InvalidDocumentIdError(SearchServerError):
    """Document id is negative or already indexed."""


class InvalidMinusWordError(SearchServerError):
    """Query contains a bare '-' or a word with a double leading dash."""


class UnknownDocumentError(SearchServerError, KeyError):
    """No document with the requested id is indexed."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message
        return str(self.args[0]) if self.args else ""


class DocumentIndexError(SearchServerError, IndexError):
    """Positional document lookup outside of [0, document_count)."""
