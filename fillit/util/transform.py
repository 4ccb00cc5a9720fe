"""Clearing, walking, mapping, splitting and trimming strings.

Strings are treated as ending at their first NUL character, if they hold
one. A missing string (``None``) is accepted where the original helpers
accepted a null pointer. In that case the function does nothing, or it
returns ``None``, 0 or an empty result as documented.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

_NUL = "\0"
_BLANKS = " \t\n"

ClearableBuffer = Union[bytearray, memoryview, MutableSequence]


def _terminated(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strclr(buffer: Optional[ClearableBuffer]) -> None:
    """Clear ``buffer`` in place up to its first zero element.

    Byte buffers are cleared with ``0``. Sequences of characters are
    cleared with ``"\\0"``.
    """
    if buffer is None:
        return
    zero: Any = 0 if isinstance(buffer, (bytearray, memoryview)) else _NUL
    for index, item in enumerate(buffer):
        if item == zero:
            break
        buffer[index] = zero


def striter(s: Optional[str], f: Optional[Callable[[str], Any]]) -> None:
    """Call ``f`` on every character of ``s`` in order."""
    if s is None or f is None:
        return
    for ch in _terminated(s):
        f(ch)


def striteri(s: Optional[str], f: Optional[Callable[[int, str], Any]]) -> None:
    """Call ``f`` with the index and the character, for every character of ``s``."""
    if s is None or f is None:
        return
    for index, ch in enumerate(_terminated(s)):
        f(index, ch)


def strmap(s: Optional[str], f: Callable[[str], str]) -> Optional[str]:
    """Return a new string made of ``f`` applied to each character of ``s``."""
    if s is None:
        return None
    return "".join(f(ch) for ch in _terminated(s))


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Like :func:`strmap`, but ``f`` also receives each character's index."""
    if s is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(_terminated(s)))


def strsplit(s: Optional[str], c: str) -> Optional[list[str]]:
    """Split ``s`` on ``c`` and return the non-empty pieces in order."""
    if s is None:
        return None
    separator = _char(c)
    text = _terminated(s)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(s: Optional[str]) -> Optional[str]:
    """Return ``s`` with spaces, tabs and newlines removed from both ends."""
    if s is None:
        return None
    return _terminated(s).strip(_BLANKS)


def countwords(s: Optional[str], c: str) -> int:
    """Return the number of non-empty runs of characters other than ``c``."""
    words = strsplit(s, c)
    return 0 if words is None else len(words)