"""Building new strings by copying, concatenating and slicing.

Strings are treated as ending at their first NUL character, if they hold
one. The functions never change their arguments. Each one returns a new
string, and ``strlcat`` also returns the length it tried to build.
"""

from __future__ import annotations

from typing import Optional

_NUL = "\0"


def _terminated(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strcat(s1: str, s2: str) -> str:
    """Return ``s2`` appended to ``s1``."""
    return _terminated(s1) + _terminated(s2)


def strncat(s1: str, s2: str, n: int) -> str:
    """Return at most ``n`` characters of ``s2`` appended to ``s1``."""
    _non_negative(n, "n")
    return _terminated(s1) + _terminated(s2)[:n]


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    The buffer also holds the terminating NUL, so at most ``size - 1``
    characters result. Returns the new string and the length the full
    concatenation would have had. If ``dst`` already fills the buffer,
    ``dst`` is returned unchanged with ``len(src) + size``.
    """
    _non_negative(size, "size")
    head, tail = _terminated(dst), _terminated(src)
    if len(head) + 1 > size:
        return head, len(tail) + size
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def strcpy(src: str) -> str:
    """Return a copy of ``src``."""
    return _terminated(src)


def strncpy(src: str, length: int) -> str:
    """Return exactly ``length`` characters: ``src`` cut or padded with NULs."""
    _non_negative(length, "length")
    return _terminated(src)[:length].ljust(length, _NUL)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return _terminated(s)


def strnew(size: int) -> str:
    """Return a cleared buffer of ``size`` NUL characters."""
    _non_negative(size, "size")
    return _NUL * size


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Return ``s1`` followed by ``s2``, or ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return strcat(s1, s2)


def strjoinfree(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Join two strings where the caller gives up ``s1``; see :func:`strjoin`."""
    return strjoin(s1, s2)


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return up to ``length`` characters of ``s`` from index ``start``.

    Returns ``None`` if ``s`` is missing. The copy stops at the end of ``s``.
    A ``start`` past the end of ``s`` raises ``ValueError``.
    """
    if s is None:
        return None
    _non_negative(start, "start")
    _non_negative(length, "length")
    text = _terminated(s)
    if start > len(text):
        raise ValueError("start lies past the end of the string")
    return text[start:start + length]


def strsubfree(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Take a substring where the caller gives up ``s``; see :func:`strsub`."""
    return strsub(s, start, length)