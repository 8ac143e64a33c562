"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_size(buf: Buffer, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(buf):
        raise ValueError(f"size {size} exceeds buffer length {len(buf)}")


def _cstrlen(buf: Buffer) -> int:
    """Length of the NUL-terminated string at the start of ``buf``."""
    index = bytes(buf).find(0)
    return len(buf) if index < 0 else index


def memset(buf: bytearray, value: int, size: int) -> bytearray:
    """Set the first ``size`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_size(buf, size)
    buf[:size] = bytes([value & 0xFF]) * size
    return buf


def bzero(buf: bytearray, size: int) -> bytearray:
    """Zero the first ``size`` bytes of ``buf``."""
    return memset(buf, 0, size)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer holding ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Buffer, value: int, size: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``size``, or None."""
    _check_size(buf, size)
    index = bytes(buf[:size]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, size: int) -> int:
    """Compare ``size`` bytes; the difference of the first unequal pair, else 0."""
    _check_size(first, size)
    _check_size(second, size)
    for a, b in zip(first[:size], second[:size]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Buffer, size: int) -> bytearray:
    """Copy ``size`` bytes from ``src`` to the start of ``dst``."""
    _check_size(dst, size)
    _check_size(src, size)
    dst[:size] = bytes(src[:size])
    return dst


def memccpy(dst: bytearray, src: Buffer, stop: int, size: int) -> Optional[int]:
    """Copy bytes up to and including the first ``stop`` byte, at most ``size``.

    Returns the index in ``dst`` just past the copied ``stop`` byte, or None
    when ``stop`` was not met within ``size`` bytes (all ``size`` are copied).
    """
    _check_size(dst, size)
    _check_size(src, size)
    chunk = bytes(src[:size])
    index = chunk.find(stop & 0xFF)
    count = size if index < 0 else index + 1
    dst[:count] = chunk[:count]
    return None if index < 0 else count


def memmove(buf: bytearray, dst_offset: int, src_offset: int, size: int) -> bytearray:
    """Move ``size`` bytes inside ``buf``; overlapping regions are handled."""
    if min(dst_offset, src_offset, size) < 0:
        raise ValueError("offsets and size must not be negative")
    if max(dst_offset, src_offset) + size > len(buf):
        raise ValueError("region lies outside the buffer")
    buf[dst_offset:dst_offset + size] = bytes(buf[src_offset:src_offset + size])
    return buf


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy the string ``src`` into ``dst`` of capacity ``size``, NUL-terminated.

    At most ``size - 1`` bytes are copied. Returns the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _cstrlen(src)
    if size > 0:
        count = min(src_len, size - 1)
        if count >= len(dst):
            raise ValueError("destination buffer too small")
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: Buffer, size: int) -> int:
    """Append the string ``src`` to the string in ``dst`` of capacity ``size``.

    Returns the length of ``src`` plus the smaller of ``size`` and the
    original length of the string in ``dst``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _cstrlen(src)
    if size == 0:
        return src_len
    dst_len = _cstrlen(dst)
    count = max(0, min(src_len, size - 1 - dst_len))
    if count:
        if dst_len + count > len(dst):
            raise ValueError("destination buffer too small")
        dst[dst_len:dst_len + count] = bytes(src[:count])
    if size < dst_len:
        return src_len + size
    if count < size:
        if dst_len + count >= len(dst):
            raise ValueError("destination buffer too small")
        dst[dst_len + count] = 0
    return src_len + dst_len