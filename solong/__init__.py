"""Helpers for a tile-based 2D game: terminal colours, character, string and byte-buffer utilities, line reading, a linked list, X11 colour names and map error reporting."""

__version__ = "0.1.0"