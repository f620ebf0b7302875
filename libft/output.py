"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.cstrings import _as_bytes


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[int, str, bytes], fd: int) -> None:
    """Write the single character ``c`` to ``fd``.

    An int is reduced to one byte; a str character is written UTF-8 encoded.
    """
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, not bool")
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        data = c.encode("utf-8") if isinstance(c, str) else c
    else:
        raise TypeError(f"expected an int or a single character, not {type(c).__name__}")
    _write_all(fd, data)


def put_str_fd(s: Optional[Union[str, bytes, bytearray]], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _as_bytes(s))


def put_endl_fd(s: Optional[Union[str, bytes, bytearray]], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _as_bytes(s) + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))