"""String helpers: number parsing and formatting, splitting, searching, trimming."""

from __future__ import annotations

from typing import Callable, Optional

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's complement style."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit, and text without digits gives 0.
    The result wraps like a 32-bit signed integer.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = []
    for ch in body:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    total = int("".join(digits)) if digits else 0
    return _wrap_int32(total * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if _wrap_int32(n) != n:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError("expected a single character")


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    _check_char(c)
    if c == "\0" and "\0" not in text:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    _check_char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0; 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    for a, b in zip(first[:n] + "\0", second[:n] + "\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0. Returns None when absent.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    window = haystack.split("\0", 1)[0][:length]
    index = window.find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("both text and charset are required")
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]