"""ANSI colour escapes written to a text stream."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Color(Enum):
    """Terminal colours and the escape sequence that selects each."""

    BLACK = "\033[0;30m"
    BLUE = "\033[0;34m"
    CYAN = "\033[0;36m"
    GREEN = "\033[0;32m"
    PURPLE = "\033[0;35m"
    RED = "\033[0;31m"
    WHITE = "\033[0;37m"
    YELLOW = "\033[0;33m"
    RESET = "\033[0m"

    def write(self, stream: TextIO | None = None) -> None:
        """Write this colour's escape sequence to ``stream`` (stdout by default)."""
        (sys.stdout if stream is None else stream).write(self.value)


def black(stream: TextIO | None = None) -> None:
    """Switch the terminal to black."""
    Color.BLACK.write(stream)


def blue(stream: TextIO | None = None) -> None:
    """Switch the terminal to blue."""
    Color.BLUE.write(stream)


def cyan(stream: TextIO | None = None) -> None:
    """Switch the terminal to cyan."""
    Color.CYAN.write(stream)


def green(stream: TextIO | None = None) -> None:
    """Switch the terminal to green."""
    Color.GREEN.write(stream)


def purple(stream: TextIO | None = None) -> None:
    """Switch the terminal to purple."""
    Color.PURPLE.write(stream)


def red(stream: TextIO | None = None) -> None:
    """Switch the terminal to red."""
    Color.RED.write(stream)


def white(stream: TextIO | None = None) -> None:
    """Switch the terminal to white."""
    Color.WHITE.write(stream)


def yellow(stream: TextIO | None = None) -> None:
    """Switch the terminal to yellow."""
    Color.YELLOW.write(stream)


def reset(stream: TextIO | None = None) -> None:
    """Restore the terminal's default attributes."""
    Color.RESET.write(stream)


_DEMO_ORDER = (
    Color.BLACK,
    Color.BLUE,
    Color.CYAN,
    Color.GREEN,
    Color.PURPLE,
    Color.RED,
    Color.WHITE,
    Color.YELLOW,
)


def demo(stream: TextIO | None = None) -> None:
    """Print every colour's name in that colour, one per line."""
    out = sys.stdout if stream is None else stream
    for color in _DEMO_ORDER:
        color.write(out)
        out.write(f"{color.name.capitalize()} \n")
        Color.RESET.write(out)