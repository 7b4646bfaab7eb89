"""Writing characters, strings and integers to text streams.

Each function writes to ``file``, or to standard output when none is given.
"""

from __future__ import annotations

import operator
import sys
from typing import Optional, TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def put_char(c: str, file: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(file).write(c)


def put_str(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string as it is."""
    _target(file).write(s)


def put_endl(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(file)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading minus sign when negative."""
    _target(file).write(str(operator.index(n)))