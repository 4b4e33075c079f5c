from __future__ import annotations

from dataclasses import dataclass

from tfidf_search.document import MAX_RESULT_DOCUMENT_COUNT

# Relevance values closer than this are treated as equal when ranking
RELEVANCE_EPSILON = 1e-6

# Request log retention in ticks, one tick per request
MIN_IN_DAY = 1440


@dataclass(frozen=True)
class SearchConfig:
    """
    Tunables for ranking and request logging.

    Attributes:
        max_result_document_count: Cap on the number of documents a query returns.
        relevance_epsilon: Relevance difference below which ties are broken by rating.
        request_window: Number of ticks a request stays in the request log.
    """

    max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT
    relevance_epsilon: float = RELEVANCE_EPSILON
    request_window: int = MIN_IN_DAY

    def __post_init__(self) -> None:
        if self.max_result_document_count < 1:
            raise ValueError("max_result_document_count must be positive.")
        if self.relevance_epsilon <= 0:
            raise ValueError("relevance_epsilon must be positive.")
        if self.request_window < 1:
            raise ValueError("request_window must be positive.")
