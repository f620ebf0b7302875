"""NUL-terminated string routines.

Read-only functions accept ``str``, ``bytes`` or ``bytearray``. A string
ends at its first NUL character, or at its end when it has none. Positions
are returned as indices, and None stands for "not found".
The ``strl*`` functions write into a mutable ``bytearray`` buffer.
"""

from __future__ import annotations

from typing import List, Optional, Union

Text = Union[str, bytes, bytearray]
CharArg = Union[int, str, bytes]

_WHITESPACE = frozenset(b" \t\n\v\f\r")
_INT_MIN = -(2**31)
_INT_RANGE = 2**32


def _terminated(s: Text) -> Union[str, bytes]:
    """Return ``s`` cut at its first NUL."""
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s).split(b"\0", 1)[0]
    raise TypeError(f"expected str or a bytes-like object, not {type(s).__name__}")


def _codes(s: Text) -> List[int]:
    """Return the character codes of ``s`` up to its first NUL."""
    t = _terminated(s)
    return [ord(ch) for ch in t] if isinstance(t, str) else list(t)


def _as_bytes(s: Text) -> bytes:
    """Return ``s`` as bytes, cut at its first NUL."""
    t = _terminated(s)
    return t.encode("utf-8") if isinstance(t, str) else t


def _char_code(c: CharArg) -> int:
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, not bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c) if isinstance(c, str) else c[0]
    raise TypeError(f"expected an int or a single character, not {type(c).__name__}")


def _needle(t: Union[str, bytes], code: int) -> Optional[Union[str, bytes]]:
    if isinstance(t, str):
        return chr(code)
    return bytes([code]) if code < 256 else None


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: Text, c: CharArg) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    t = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(t)
    needle = _needle(t, code)
    if needle is None:
        return None
    index = t.find(needle)
    return None if index < 0 else index


def strrchr(s: Text, c: CharArg) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    t = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(t)
    needle = _needle(t, code)
    if needle is None:
        return None
    index = t.rfind(needle)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    codes1, codes2 = _codes(s1), _codes(s2)
    for i in range(n):
        a = codes1[i] if i < len(codes1) else 0
        b = codes2[i] if i < len(codes2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Return the index of ``little`` in ``big`` within the first ``length`` characters.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    haystack = _terminated(big)
    needle = _terminated(little)
    if type(haystack) is not type(needle):
        raise TypeError("big and little must both be str or both be bytes-like")
    if not needle:
        return 0
    limit = min(len(haystack), length)
    for i in range(limit):
        if i + len(needle) > length:
            break
        if haystack.startswith(needle, i):
            return i
    return None


def atoi(s: Text) -> int:
    """Convert the leading decimal integer of ``s``.

    Leading white space and a single sign are accepted; parsing stops at the
    first non-digit. The result wraps like a 32-bit signed int.
    """
    codes = _codes(s)
    i = 0
    while i < len(codes) and codes[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(codes) and codes[i] in (ord("-"), ord("+")):
        if codes[i] == ord("-"):
            sign = -1
        i += 1
    value = 0
    while i < len(codes) and ord("0") <= codes[i] <= ord("9"):
        value = value * 10 + codes[i] - ord("0")
        i += 1
    return (sign * value - _INT_MIN) % _INT_RANGE + _INT_MIN


def strdup(s: Text) -> Union[str, bytearray]:
    """Return a copy of ``s`` up to its first NUL.

    A ``str`` gives a ``str``; a bytes-like object gives a new ``bytearray``.
    """
    t = _terminated(s)
    return t if isinstance(t, str) else bytearray(t)


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst`` with at most ``size - 1`` bytes plus a NUL.

    Returns the length of ``src``, so a result ``>= size`` means truncation.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _as_bytes(src)
    if size == 0:
        return len(data)
    count = min(len(data), size - 1)
    if count + 1 > len(dst):
        raise ValueError(f"destination of {len(dst)} bytes cannot hold {count + 1}")
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the total under ``size`` bytes.

    Returns the length the string would have had with no limit: the current
    length of ``dst`` plus that of ``src``. When ``size`` is zero the length
    of ``src`` is returned, and when ``size`` is below the current length
    of ``dst`` the result is ``strlen(src) + size``; neither touches ``dst``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _as_bytes(src)
    dst_len = strlen(dst)
    total = dst_len + len(data)
    if size == 0:
        return len(data)
    if size < dst_len:
        return len(data) + size
    count = max(0, min(len(data), size - 1 - dst_len))
    end = dst_len + count
    if end > len(dst) or (count and end == len(dst)):
        raise ValueError(f"destination of {len(dst)} bytes cannot hold {end + 1}")
    dst[dst_len:end] = data[:count]
    if end < len(dst):
        dst[end] = 0
    return total