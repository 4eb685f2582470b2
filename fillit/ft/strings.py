"""String searching, comparison, splitting and joining helpers."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

_TRIM_CHARS = " \n\t"
_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def count_words(s: str, sep: str) -> int:
    """Number of non-empty runs of characters other than sep."""
    return len(split(s, sep))


def split(s: str, sep: str) -> list[str]:
    """The non-empty words of s separated by one or more sep characters."""
    sep = _single_char(sep)
    return [word for word in s.split(sep) if word]


def trim(s: str) -> str:
    """s without leading and trailing spaces, newlines and tabs."""
    return s.strip(_TRIM_CHARS)


def find(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of needle, or None.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return index if index >= 0 else None


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like find, but the match must lie within the first length characters.

    An empty needle is found at index 0 whatever the length.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    if length == 0:
        return None
    return find(haystack[:length], needle)


def index_of(s: str, c: str) -> Optional[int]:
    """Index of the first c in s; a NUL character is found at the end."""
    c = _single_char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == _NUL else None


def rindex_of(s: str, c: str) -> Optional[int]:
    """Index of the last c in s; a NUL character is found at the end."""
    c = _single_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def compare(s1: str, s2: str) -> int:
    """Difference of the first differing characters, 0 when equal.

    The end of the shorter string compares as a NUL character.
    """
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """compare restricted to at most the first n characters."""
    _non_negative(n, "n")
    return compare(s1[:n], s2[:n])


def equal(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are the same; None equals only None."""
    if s1 is s2:
        return True
    if s1 is None or s2 is None:
        return False
    return compare(s1, s2) == 0


def equal_n(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when the first n characters match; always True for n == 0."""
    if n == 0 or s1 is s2:
        return True
    if s1 is None or s2 is None:
        return False
    return compare_n(s1, s2, n) == 0


def join(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return s1 + s2


def join_n(s1: str, s2: str, n: int) -> str:
    """s1 followed by s2, cut to at most n - 1 characters.

    A size of 0 places no limit at all.
    """
    _non_negative(n, "n")
    if n == 0:
        return s1 + s2
    head = s1[: n - 1]
    return head + s2[: n - 1 - len(head)]


def substring(s: str, start: int, length: int) -> str:
    """The length characters of s beginning at start."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start + length > len(s):
        raise IndexError("substring runs past the end of the string")
    return s[start:start + length]