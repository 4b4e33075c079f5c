"""In-memory TF-IDF search server with a sliding-window request log."""

from tfidf_search.config import MIN_IN_DAY, RELEVANCE_EPSILON, SearchConfig
from tfidf_search.document import (
    MAX_RESULT_DOCUMENT_COUNT,
    Document,
    DocumentPredicate,
    DocumentStatus,
)
from tfidf_search.errors import (
    DocumentIndexError,
    InvalidDocumentIdError,
    InvalidMinusWordError,
    InvalidTextError,
    SearchServerError,
    UnknownDocumentError,
)
from tfidf_search.paginator import Paginator, paginate
from tfidf_search.request_queue import RequestQueue
from tfidf_search.search_server import SearchServer

__all__ = [
    "Document",
    "DocumentIndexError",
    "DocumentPredicate",
    "DocumentStatus",
    "InvalidDocumentIdError",
    "InvalidMinusWordError",
    "InvalidTextError",
    "MAX_RESULT_DOCUMENT_COUNT",
    "MIN_IN_DAY",
    "Paginator",
    "RELEVANCE_EPSILON",
    "RequestQueue",
    "SearchConfig",
    "SearchServer",
    "SearchServerError",
    "UnknownDocumentError",
    "paginate",
]
