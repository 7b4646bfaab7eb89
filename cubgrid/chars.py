"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The classifiers return ``bool``; the converters return a value of the same
kind they were given.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_space",
    "to_upper",
    "to_lower",
]

_SPACE_CODES = frozenset(map(ord, " \t\n\v\f\r"))


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _SPACE_CODES


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_lower_code(code):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_upper_code(code):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code