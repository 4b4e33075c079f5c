from __future__ import annotations

from collections.abc import Iterable
import re

# Same separators as C-locale isspace: space, \t, \n, \v, \f, \r.
# str.split() would also split on \x1c-\x1f and hide them from validation.
_WORD_RE = re.compile(r"[^ \t\n\v\f\r]+")


def split_into_words(text: str) -> list[str]:
    """Splits text on runs of whitespace."""
    return _WORD_RE.findall(text)


def is_valid_word(word: str) -> bool:
    """A word is valid when it holds no control characters (code points 0-31)."""
    return not any(ord(char) < ord(" ") for char in word)


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    return {string for string in strings if string}
