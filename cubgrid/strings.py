"""Bounded string search, comparison and copying.

Positions are returned as indices into the searched string, or ``None``
when nothing is found. A string is treated as if it ended with a NUL
terminator, so searching for ``"\\0"`` finds its end.
"""

from __future__ import annotations

import operator
from typing import Optional, Tuple, Union

__all__ = [
    "strnlen",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strlcpy",
    "strlcat",
    "strndup",
]

CharLike = Union[str, int]

_TERMINATOR = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _size(n: int, name: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must not be negative: {n}")
    return n


def strnlen(s: str, maxlen: int) -> int:
    """Length of ``s``, but never more than ``maxlen``."""
    return min(len(s), _size(maxlen, "maxlen"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None."""
    ch = _char(c)
    if ch == _TERMINATOR:
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None."""
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within ``big[:length]``, or None.

    An empty ``little`` is found at index 0.
    """
    length = _size(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first unequal pair, with the
    end of the shorter string counting as code 0; returns 0 when equal.
    """
    n = _size(n, "n")
    left = a[:n]
    right = b[:n]
    for x, y in zip(left, right):
        if x != y:
            return ord(x) - ord(y)
    if len(left) == len(right):
        return 0
    if len(left) > len(right):
        return ord(left[len(right)])
    return -ord(right[len(left)])


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so truncation
    happened when that length is ``size`` or more. With a size of 0 nothing
    is copied.
    """
    size = _size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dst`` already fills the buffer it is left unchanged and
    the length reported is ``size + len(src)``.
    """
    size = _size(size, "size")
    used = min(len(dst), size)
    if used == size:
        return dst, size + len(src)
    room = size - used - 1
    return dst + src[:room], used + len(src)


def strndup(s: str, n: int) -> str:
    """A copy of at most the first ``n`` characters of ``s``."""
    return s[: strnlen(s, n)]