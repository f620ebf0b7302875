"""String building and transformation routines that return new objects."""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from libft.cstrings import _char_code, _needle, _terminated

Text = Union[str, bytes, bytearray]


def _same_kind(*parts: Text) -> List[Union[str, bytes]]:
    """Cut every part at its first NUL and check that all are str or all bytes-like."""
    cut = [_terminated(p) for p in parts]
    if len({isinstance(p, str) for p in cut}) > 1:
        raise TypeError("arguments must all be str or all be bytes-like")
    return cut


def substr(s: Optional[Text], start: int, length: int) -> Optional[Union[str, bytes]]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` beyond the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    t = _terminated(s)
    if start > len(t):
        return t[:0]
    return t[start:start + length]


def strjoin(s1: Text, s2: Text) -> Union[str, bytes]:
    """Return the concatenation of ``s1`` and ``s2``."""
    a, b = _same_kind(s1, s2)
    return a + b


def strtrim(s: Text, charset: Text) -> Union[str, bytes]:
    """Return ``s`` without the characters of ``charset`` at either end."""
    t, chars = _same_kind(s, charset)
    if not chars:
        return t
    return t.strip(chars)


def split(s: Optional[Text], sep: Union[int, str, bytes]) -> Optional[List[Union[str, bytes]]]:
    """Split ``s`` on the character ``sep``, dropping empty words.

    None gives None. A NUL separator leaves the whole string as one word.
    """
    if s is None:
        return None
    t = _terminated(s)
    code = _char_code(sep)
    needle = _needle(t, code) if code else None
    if needle is None:
        return [t] if t else []
    return [word for word in t.split(needle) if word]


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    return str(n)


def strmapi(s: Optional[Text], f: Optional[Callable]) -> Optional[Union[str, bytes]]:
    """Return a new string made of ``f(index, char)`` for every character of ``s``.

    For a str, ``f`` receives and returns one-character strings; for a
    bytes-like object, it receives and returns byte values. If either
    argument is None, None is returned.
    """
    if s is None or f is None:
        return None
    t = _terminated(s)
    if isinstance(t, str):
        return "".join(f(i, ch) for i, ch in enumerate(t))
    return bytes(f(i, byte) & 0xFF for i, byte in enumerate(t))


def striteri(s: Optional[bytearray], f: Optional[Callable]) -> None:
    """Call ``f(index, cell)`` for every byte of ``s`` before its first NUL.

    ``cell`` is a one-byte writable view into ``s``, so ``f`` may change the
    byte in place with ``cell[0] = value``. Nothing happens if either
    argument is None.
    """
    if s is None or f is None:
        return
    if not isinstance(s, bytearray):
        raise TypeError(f"expected a bytearray, not {type(s).__name__}")
    end = s.find(0)
    if end < 0:
        end = len(s)
    with memoryview(s) as view:
        for i in range(end):
            with view[i:i + 1] as cell:
                f(i, cell)