"""Reading a file descriptor one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 10
OPEN_MAX = 4096


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled from ``fd`` in chunks of at most ``buffer_size`` bytes.
    Each line keeps its trailing newline; the last line of the input is
    returned without one when the input does not end in a newline.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def readline(self) -> Optional[bytes]:
        """Return the next line as bytes, or None at the end of the input.

        A read error discards any buffered data and propagates as OSError.
        """
        line = bytearray()
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line += self._pending[:newline + 1]
                del self._pending[:newline + 1]
                return bytes(line)
            line += self._pending
            self._pending.clear()
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return bytes(line) if line else None
            self._pending += chunk

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from ``fd``, or None at end of input or on error.

    Buffered data is kept separately for each descriptor between calls and
    is dropped once the descriptor reaches its end or fails.
    """
    if fd < 0 or fd >= OPEN_MAX:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd, BUFFER_SIZE)
    try:
        line = reader.readline()
    except OSError:
        _readers.pop(fd, None)
        return None
    if line is None:
        _readers.pop(fd, None)
    return line