"""Character classification and case conversion in the "C" locale (ASCII only)."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    """Return the integer code of ``c``, which is an int or a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character string, not {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(c: Char) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: Char) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """Return True if ``c`` lies in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """Return True if ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: Char) -> Char:
    """Return ``c`` upper-cased if it is an ASCII lower-case letter.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Return ``c`` lower-cased if it is an ASCII upper-case letter.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code