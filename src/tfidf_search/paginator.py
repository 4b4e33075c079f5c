from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous slice of a sequence."""

    def __init__(self, items: Sequence[T]):
        self.items = items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    def __str__(self) -> str:
        return "".join(str(item) for item in self.items)


class Paginator(Generic[T]):
    """
    Splits a sequence into pages of ``page_size`` items; the last page may be shorter.

    Args:
        items (Sequence[T]): Items to split, order is preserved.
        page_size (int): Maximum number of items per page.
    """

    def __init__(self, items: Sequence[T], page_size: int):
        if page_size < 1:
            raise ValueError("page_size must be positive.")
        self.page_size = page_size
        self.pages = [Page(items[start : start + page_size]) for start in range(0, len(items), page_size)]

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self.pages)

    def __getitem__(self, index: int) -> Page[T]:
        return self.pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)
