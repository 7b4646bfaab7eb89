"""Byte-buffer helpers working on ``bytearray`` and other bytes-like objects."""

from __future__ import annotations

import operator
from typing import Optional

__all__ = ["bzero", "memset", "calloc", "memchr", "memcmp", "memcpy", "memmove"]


def _count(n: int, *lengths: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")
    return n


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    n = _count(n, len(buf))
    buf[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes, or None."""
    n = _count(n, len(buf))
    index = bytes(buf[:n]).find(operator.index(value) & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    n = _count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    n = _count(n, len(dst), len(src))
    if dst is src:
        return dst
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst`` within ``buf``.

    The regions may overlap; the result is as if the source were copied
    to a temporary first.
    """
    dst = operator.index(dst)
    src = operator.index(src)
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    n = _count(n, len(buf) - dst, len(buf) - src)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf