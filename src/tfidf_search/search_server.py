"""
TF-IDF search server over short status-tagged documents.

Documents are added once and never change. Queries are whitespace separated
words; a word prefixed with '-' excludes every document containing it.
Relevance of a document is the sum over matched plus-words of

    tf(word, doc) * log(N / df(word))

where tf is the share of the document's non-stop words equal to ``word``.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
import logging

import numpy as np

from tfidf_search.config import SearchConfig
from tfidf_search.document import (
    Document,
    DocumentPredicate,
    DocumentStatus,
    status_predicate,
)
from tfidf_search.errors import (
    DocumentIndexError,
    InvalidDocumentIdError,
    InvalidMinusWordError,
    InvalidTextError,
    UnknownDocumentError,
)
from tfidf_search.string_processing import (
    is_valid_word,
    make_unique_non_empty_strings,
    split_into_words,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentData:
    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class Query:
    """Parsed query: words that must match and words that must be absent."""

    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


class SearchServer:
    """
    In-memory inverted index with TF-IDF ranking.

    Args:
        stop_words (str | Iterable[str]): Words ignored when indexing and querying,
            either as one whitespace separated string or as a collection.
        config (SearchConfig | None): Ranking limits, defaults to ``SearchConfig()``.

    Raises:
        InvalidTextError: If a stop word contains a control character.
    """

    def __init__(self, stop_words: str | Iterable[str] = (), config: SearchConfig | None = None):
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        self.stop_words = frozenset(make_unique_non_empty_strings(stop_words))
        for word in self.stop_words:
            if not is_valid_word(word):
                raise InvalidTextError(f"Stop word {word!r} contains a control character.")
        self.config = config or SearchConfig()

        self._word_to_document_freqs: defaultdict[str, dict[int, float]] = defaultdict(dict)
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    def __len__(self) -> int:
        return self.document_count

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTIVE,
        ratings: Sequence[int] = (),
    ) -> None:
        """
        Index a document.

        Args:
            document_id (int): Non-negative id, unique within the server.
            document (str): Document text.
            status (DocumentStatus): Status the query predicate sees.
            ratings (Sequence[int]): Rating samples, averaged with truncation toward zero.

        Raises:
            InvalidDocumentIdError: If the id is negative or already indexed.
            InvalidTextError: If the text contains a control character.
        """
        if document_id < 0 or document_id in self._documents:
            raise InvalidDocumentIdError(
                f"Document id {document_id} is negative or already exists."
            )
        words = self._split_into_words_no_stop(document)
        document_data = DocumentData(self._compute_average_rating(ratings), status)

        # Nothing is mutated before this point
        if words:
            word_count = len(words)
            for word, occurrences in Counter(words).items():
                self._word_to_document_freqs[word][document_id] = occurrences / word_count
        self._documents[document_id] = document_data
        self._document_ids.append(document_id)
        logger.debug("Added document %d with %d indexed words", document_id, len(words))

    def document_id(self, index: int) -> int:
        """Id of the document added at position ``index`` (insertion order)."""
        if not 0 <= index < len(self._document_ids):
            raise DocumentIndexError(
                f"Document index {index} out of range for {len(self._document_ids)} documents."
            )
        return self._document_ids[index]

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: DocumentStatus | DocumentPredicate = DocumentStatus.ACTIVE,
    ) -> list[Document]:
        """
        Rank documents for a query.

        Args:
            raw_query (str): Whitespace separated plus-words and '-'-prefixed minus-words.
            document_predicate (DocumentStatus | DocumentPredicate): Either a status to
                match exactly or a callable ``(id, status, rating) -> bool``.

        Returns:
            At most ``config.max_result_document_count`` documents ordered by relevance
            descending, near-equal relevances ordered by rating descending.

        Raises:
            InvalidTextError: If the query contains a control character.
            InvalidMinusWordError: If the query holds a malformed minus-word.
        """
        if isinstance(document_predicate, DocumentStatus):
            document_predicate = status_predicate(document_predicate)
        query = self._parse_query(raw_query)
        matched_documents = self._find_all_documents(query, document_predicate)

        epsilon = self.config.relevance_epsilon

        def compare(lhs: Document, rhs: Document) -> int:
            if abs(lhs.relevance - rhs.relevance) < epsilon:
                return rhs.rating - lhs.rating
            return -1 if lhs.relevance > rhs.relevance else 1

        matched_documents.sort(key=cmp_to_key(compare))
        top_documents = matched_documents[: self.config.max_result_document_count]
        logger.debug(
            "Query %r matched %d documents, returning %d",
            raw_query,
            len(matched_documents),
            len(top_documents),
        )
        return top_documents

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Plus-words of the query present in a document.

        Returns:
            Matched plus-words in sorted order, empty if any minus-word is present,
            paired with the document's status.

        Raises:
            InvalidTextError: If the query contains a control character.
            InvalidMinusWordError: If the query holds a malformed minus-word.
            UnknownDocumentError: If no document with ``document_id`` is indexed.
        """
        query = self._parse_query(raw_query)
        document_data = self._documents.get(document_id)
        if document_data is None:
            raise UnknownDocumentError(f"Document {document_id} is not indexed.")

        for word in query.minus_words:
            if document_id in self._word_to_document_freqs.get(word, {}):
                return [], document_data.status

        matched_words = [
            word
            for word in sorted(query.plus_words)
            if document_id in self._word_to_document_freqs.get(word, {})
        ]
        return matched_words, document_data.status

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if not is_valid_word(word):
                raise InvalidTextError(f"Word {word!r} contains a control character.")
            if not self.is_stop_word(word):
                words.append(word)
        return words

    @staticmethod
    def _compute_average_rating(ratings: Sequence[int]) -> int:
        if len(ratings) == 0:
            return 0
        total = sum(ratings)
        # Truncate toward zero, floor division would round negatives down
        average = abs(total) // len(ratings)
        return average if total >= 0 else -average

    def _parse_query_word(self, text: str) -> QueryWord:
        is_minus = False
        if text.startswith("-"):
            is_minus = True
            text = text[1:]
        if not is_valid_word(text):
            raise InvalidTextError(f"Query word {text!r} contains a control character.")
        if not text or text.startswith("-"):
            raise InvalidMinusWordError(f"Malformed minus-word {'-' + text!r}.")
        return QueryWord(text, is_minus, self.is_stop_word(text))

    def _parse_query(self, raw_query: str) -> Query:
        if not is_valid_word(raw_query):
            raise InvalidTextError(f"Query {raw_query!r} contains a control character.")
        query = Query()
        for word in split_into_words(raw_query):
            query_word = self._parse_query_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        return query

    def _inverse_document_frequency(self, words: list[str]) -> dict[str, float]:
        """idf(w) = log(N / df(w)) for words present in the index."""
        if not words:
            return {}
        df = np.array([len(self._word_to_document_freqs[word]) for word in words], dtype=float)
        idf = np.log(self.document_count / df)
        return {word: float(value) for word, value in zip(words, idf)}

    def _find_all_documents(self, query: Query, document_predicate: DocumentPredicate) -> list[Document]:
        document_to_relevance: defaultdict[int, float] = defaultdict(float)

        indexed_plus_words = sorted(
            word for word in query.plus_words if word in self._word_to_document_freqs
        )
        idf = self._inverse_document_frequency(indexed_plus_words)
        for word in indexed_plus_words:
            for document_id, term_freq in self._word_to_document_freqs[word].items():
                document_data = self._documents[document_id]
                if document_predicate(document_id, document_data.status, document_data.rating):
                    document_to_relevance[document_id] += term_freq * idf[word]

        for word in query.minus_words:
            for document_id in self._word_to_document_freqs.get(word, {}):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self._documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]
