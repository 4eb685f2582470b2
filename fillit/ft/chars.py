"""Character classification and case conversion over the ASCII range."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACES = frozenset(b" \n\t\v\f\r")


def _code(c: Char) -> int:
    """Code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError("expected a one-character string or an integer")


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space, newline, tab, vertical tab, form feed and carriage return.

    An integer is looked at as an unsigned byte, as a C character would be.
    """
    code = _code(c)
    if isinstance(c, int):
        code &= 0xFF
    return code in _SPACES


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code - ord("A") + ord("a"))
    return c


def to_upper(c: Char) -> Char:
    """Capitalise an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - ord("a") + ord("A"))
    return c