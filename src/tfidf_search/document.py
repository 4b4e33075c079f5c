from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

MAX_RESULT_DOCUMENT_COUNT = 5


class DocumentStatus(Enum):
    """Moderation status of an indexed document."""

    ACTIVE = "active"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


@dataclass(frozen=True)
class Document:
    """
    A single ranked search hit.

    Attributes:
        id (int): Caller-assigned document id.
        relevance (float): TF-IDF relevance of the document for the query.
        rating (int): Average rating stored at ingestion time.
    """

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with the given status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate
