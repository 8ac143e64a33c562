"""Error types and coloured error reports."""

from __future__ import annotations

import sys
from typing import TextIO

from solong.colors import cyan, red, reset, white


class SoLongError(Exception):
    """Base class for errors raised by this package."""


class MapError(SoLongError):
    """A map does not hold the required tiles."""


def _err(stream: TextIO | None) -> TextIO:
    return sys.stderr if stream is None else stream


def _header(out: TextIO) -> None:
    red(out)
    out.write("Error\n")
    reset(out)


def report_error(message: str, stream: TextIO | None = None) -> None:
    """Write a coloured ``Error`` header followed by ``message``."""
    out = _err(stream)
    _header(out)
    white(out)
    out.write(message)
    reset(out)


def file_error(path: str, stream: TextIO | None = None) -> None:
    """Report that the file at ``path`` does not exist."""
    out = _err(stream)
    _header(out)
    white(out)
    out.write("File does not exist ")
    red(out)
    out.write(path)
    reset(out)
    out.write("\n")


def usage_error(stream: TextIO | None = None) -> None:
    """Report how the program is to be invoked."""
    out = _err(stream)
    _header(out)
    out.write("usage : ./so_long [")
    cyan(out)
    out.write("file")
    reset(out)
    white(out)
    out.write(".")
    reset(out)
    red(out)
    out.write("ber")
    reset(out)
    out.write("]\n")


def check_map_counts(players: int, exits: int, collectibles: int) -> None:
    """Raise MapError unless the map has collectibles, an exit and one player."""
    if collectibles == 0:
        raise MapError("No collectible in map")
    if exits == 0:
        raise MapError("No exit in map")
    if players == 0:
        raise MapError("No player position in map")
    if players > 1:
        raise MapError("Too much player position in map")