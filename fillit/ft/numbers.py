"""Integer parsing, formatting and small arithmetic helpers."""

from __future__ import annotations

from math import isqrt

from fillit.ft.chars import is_space

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_SQRT_LIMIT = 2147395600


def atoi(text: str) -> int:
    """Read a signed decimal integer at the start of text.

    Leading whitespace is skipped, then one '-' or one '+' is accepted.
    Reading stops at the first non-digit. A value above the 32-bit range
    gives -1 and one below it gives 0.
    """
    index = 0
    length = len(text)
    while index < length and is_space(text[index]):
        index += 1
    sign = 1
    if index < length and text[index] == "-":
        sign = -1
        index += 1
    if index < length and text[index] == "+" and sign == 1:
        index += 1
    value = 0
    while index < length and "0" <= text[index] <= "9":
        value = value * 10 + sign * (ord(text[index]) - ord("0"))
        if value > INT_MAX:
            return -1
        if value < INT_MIN:
            return 0
        index += 1
    return value


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading '-' when negative."""
    digits = str(unsigned_abs(n))
    return "-" + digits if n < 0 else digits


def unsigned_abs(n: int) -> int:
    """Magnitude of n."""
    return -n if n < 0 else n


def power(nb: int, exponent: int) -> int:
    """nb raised to exponent; a negative exponent gives 0."""
    if exponent < 0:
        return 0
    return nb**exponent


def exact_sqrt(nb: int) -> int:
    """Integer square root of a perfect square, else 0.

    Negative inputs and inputs above the largest square that fits a
    32-bit int also give 0.
    """
    if nb < 0 or nb > _SQRT_LIMIT:
        return 0
    root = isqrt(nb)
    return root if root * root == nb else 0