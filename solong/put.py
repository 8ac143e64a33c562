"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from solong.strutil import itoa


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _out(stream).write(c)


def putstr(text: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    _out(stream).write(text)


def putendl(text: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _out(stream)
    out.write(text)
    out.write("\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _out(stream).write(itoa(n))