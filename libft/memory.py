"""Byte-buffer operations over mutable bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

ByteValue = Union[int, str, bytes]


def _byte(c: ByteValue) -> int:
    """Reduce ``c`` to a byte value the way a cast to unsigned char does."""
    if isinstance(c, bool):
        raise TypeError("expected an int, a one-character str or a one-byte bytes")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return (ord(c) if isinstance(c, str) else c[0]) & 0xFF
    raise TypeError(f"expected an int, a one-character str or a one-byte bytes, not {type(c).__name__}")


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf, c: ByteValue, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``.

    When both ``dest`` and ``src`` are None, None is returned.
    """
    if dest is None and src is None:
        return None
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dest``, safe for overlapping views.

    Returns ``dest``.
    """
    _check_count(n, dest, src)
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memchr(data, c: ByteValue, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([_byte(c)]))
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing pair of bytes, or 0.
    """
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)