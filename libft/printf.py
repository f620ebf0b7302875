"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import re
import sys
from typing import Callable, Dict, Iterator

from libft.cstrings import _as_bytes
from libft.output import _write_all

_FORMAT_PIECE = re.compile(rb"%(.?)|[^%]+", re.DOTALL)
_INT_BITS = 2**32
_PTR_BITS = 2**64


def _require_int(value, conv: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conv} expects an int, not {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    return (value + 2**31) % _INT_BITS - 2**31


def _char(value) -> bytes:
    if isinstance(value, int):
        return bytes([value & 0xFF])
    if isinstance(value, (str, bytes)) and len(value) == 1:
        return value.encode("utf-8") if isinstance(value, str) else value
    raise TypeError("%c expects an int or a single character")


def _string(value) -> bytes:
    if value is None:
        return b"(null)"
    return _as_bytes(value)


def _pointer(value) -> bytes:
    if value is None or value == 0:
        return b"(nil)"
    address = _require_int(value, "p") % _PTR_BITS
    return b"0x" + format(address, "x").encode("ascii")


def _decimal(value) -> bytes:
    return str(_signed32(_require_int(value, "d"))).encode("ascii")


def _unsigned(value) -> bytes:
    return str(_require_int(value, "u") % _INT_BITS).encode("ascii")


def _hex_lower(value) -> bytes:
    return format(_require_int(value, "x") % _INT_BITS, "x").encode("ascii")


def _hex_upper(value) -> bytes:
    return format(_require_int(value, "X") % _INT_BITS, "X").encode("ascii")


_CONVERSIONS: Dict[bytes, Callable[[object], bytes]] = {
    b"c": _char,
    b"s": _string,
    b"p": _pointer,
    b"d": _decimal,
    b"i": _decimal,
    b"u": _unsigned,
    b"x": _hex_lower,
    b"X": _hex_upper,
}


def _take(pending: Iterator, conv: bytes):
    try:
        return next(pending)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conv.decode('latin-1')}") from None


def render(fmt, *args) -> bytes:
    """Return the bytes that ``printf(fmt, *args)`` would write.

    Unknown conversions produce nothing and consume no argument.
    """
    data = _as_bytes(fmt)
    pending = iter(args)
    out = bytearray()
    for match in _FORMAT_PIECE.finditer(data):
        conv = match.group(1)
        if conv is None:
            out += match.group(0)
        elif conv == b"%":
            out += b"%"
        elif conv in _CONVERSIONS:
            out += _CONVERSIONS[conv](_take(pending, conv))
    return bytes(out)


def printf(fmt, *args) -> int:
    """Write the formatted output to standard output; return the number of bytes written."""
    data = render(fmt, *args)
    sys.stdout.flush()
    _write_all(1, data)
    return len(data)