"""Character, memory and NUL-terminated string routines, a small printf and a buffered line reader."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstrings", "output", "transform", "printf", "gnl"]