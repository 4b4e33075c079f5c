from __future__ import annotations

import sys
from typing import TextIO


def read_line(stream: TextIO | None = None) -> str:
    """Next line without its line terminator, empty at end of input."""
    stream = stream or sys.stdin
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO | None = None) -> int:
    """Leading integer of the next line; the rest of the line is discarded."""
    words = read_line(stream).split()
    if not words:
        raise ValueError("Expected a number, got an empty line.")
    return int(words[0])


def read_ratings(stream: TextIO | None = None) -> list[int]:
    """Ratings line in the form ``k r1 ... rk``."""
    numbers = [int(word) for word in read_line(stream).split()]
    if not numbers:
        return []
    count, ratings = numbers[0], numbers[1:]
    if count != len(ratings):
        raise ValueError(f"Expected {count} ratings, got {len(ratings)}.")
    return ratings
