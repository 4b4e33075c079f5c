from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging

from tfidf_search.document import Document, DocumentPredicate, DocumentStatus
from tfidf_search.search_server import SearchServer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    timestamp: int
    results: int


class RequestQueue:
    """
    Sliding-window log of search requests over a ``SearchServer``.

    Every request advances a logical clock by one tick. Requests older than
    ``window`` ticks are evicted, and the number of retained requests that
    returned nothing is kept up to date.

    Args:
        search_server (SearchServer): Server to query; it is only read.
        window (int | None): Retention in ticks, defaults to the server's
            ``config.request_window``.
    """

    def __init__(self, search_server: SearchServer, window: int | None = None):
        if window is None:
            window = search_server.config.request_window
        if window < 1:
            raise ValueError("window must be positive.")
        self.search_server = search_server
        self.window = window
        self._requests: deque[QueryResult] = deque()
        self._no_result_requests = 0
        self._current_time = 0

    def __len__(self) -> int:
        return len(self._requests)

    @property
    def zero_result_count(self) -> int:
        """Number of retained requests that returned no documents."""
        return self._no_result_requests

    def add_find_request(
        self,
        raw_query: str,
        document_predicate: DocumentStatus | DocumentPredicate = DocumentStatus.ACTIVE,
    ) -> list[Document]:
        """Run ``find_top_documents`` and record how many documents it returned."""
        # A failing query raises before the clock advances
        result = self.search_server.find_top_documents(raw_query, document_predicate)
        self._add_request(len(result))
        return result

    def _add_request(self, results_num: int) -> None:
        self._current_time += 1
        evicted = 0
        while self._requests and self._current_time - self._requests[0].timestamp >= self.window:
            if self._requests.popleft().results == 0:
                self._no_result_requests -= 1
            evicted += 1
        if evicted:
            logger.debug("Evicted %d requests at tick %d", evicted, self._current_time)

        self._requests.append(QueryResult(self._current_time, results_num))
        if results_num == 0:
            self._no_result_requests += 1
