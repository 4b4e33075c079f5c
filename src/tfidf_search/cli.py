"""
Command-line search over documents read from standard input.

Input layout:
    <stop words>
    <N>
    <document text>      \
    <k r1 ... rk>         > N times, ids 0..N-1, status ACTIVE
    <M>
    <query>              } M times
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from tfidf_search.config import MIN_IN_DAY, RELEVANCE_EPSILON, SearchConfig
from tfidf_search.document import MAX_RESULT_DOCUMENT_COUNT, DocumentStatus
from tfidf_search.errors import SearchServerError
from tfidf_search.paginator import paginate
from tfidf_search.read_input import read_line, read_line_with_number, read_ratings
from tfidf_search.request_queue import RequestQueue
from tfidf_search.search_server import SearchServer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TF-IDF search over documents read from stdin.")
    parser.add_argument("--page-size", type=int, default=2, help="Results per printed page (default: 2).")
    parser.add_argument(
        "--max-results",
        type=int,
        default=MAX_RESULT_DOCUMENT_COUNT,
        help=f"Maximum results per query (default: {MAX_RESULT_DOCUMENT_COUNT}).",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=MIN_IN_DAY,
        help=f"Request log retention in requests (default: {MIN_IN_DAY}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def load_server(stream: TextIO, config: SearchConfig) -> SearchServer:
    search_server = SearchServer(read_line(stream), config)
    document_count = read_line_with_number(stream)
    for document_id in range(document_count):
        text = read_line(stream)
        ratings = read_ratings(stream)
        search_server.add_document(document_id, text, DocumentStatus.ACTIVE, ratings)
    return search_server


def run(stream: TextIO, out: TextIO, config: SearchConfig, page_size: int) -> int:
    """Answer every query in ``stream``; returns the number of failed queries."""
    request_queue = RequestQueue(load_server(stream, config))
    failures = 0

    query_count = read_line_with_number(stream)
    for _ in range(query_count):
        query = read_line(stream)
        print(f"Search results for: {query}", file=out)
        try:
            documents = request_queue.add_find_request(query)
        except SearchServerError as e:
            failures += 1
            print(f"Error: {e}", file=out)
            continue
        for page in paginate(documents, page_size):
            print(page, file=out)
            print("Page break", file=out)

    print(f"Total empty requests: {request_queue.zero_result_count}", file=out)
    return failures


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = SearchConfig(
            max_result_document_count=args.max_results,
            relevance_epsilon=RELEVANCE_EPSILON,
            request_window=args.window,
        )
        failures = run(sys.stdin, sys.stdout, config, args.page_size)
    except ValueError as e:
        raise SystemExit(f"Error: {e}")
    if failures:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
