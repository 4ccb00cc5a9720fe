"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError("expected a character or an integer code")
    return c


def _in(c: Char, low: str, high: str) -> bool:
    return ord(low) <= _code(c) <= ord(high)


def isdigit(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return _in(c, "0", "9")


def islower(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII lower-case letter."""
    return _in(c, "a", "z")


def isupper(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII upper-case letter."""
    return _in(c, "A", "Z")


def isalpha(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    return isupper(c) or islower(c)


def isalnum(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: Char) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _shift(c: Char, delta: int) -> Char:
    code = _code(c) + delta
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Return the lower-case form of an ASCII upper-case letter, else ``c``."""
    return _shift(c, 32) if isupper(c) else c


def toupper(c: Char) -> Char:
    """Return the upper-case form of an ASCII lower-case letter, else ``c``."""
    return _shift(c, -32) if islower(c) else c