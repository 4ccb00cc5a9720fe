"""String measuring, searching and comparison.

Strings are treated as ending at their first NUL character, if they hold
one. Searches return an index into the string, or ``None`` when nothing is
found; comparisons return the difference of the first unequal character
codes, with the end of a string counting as code 0.
"""

from __future__ import annotations

from typing import Optional

_NUL = "\0"


def _terminated(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters before the end of ``s``."""
    return len(_terminated(s))


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``; NUL finds the end."""
    text = _terminated(s)
    if _char(c) == _NUL:
        return len(text)
    found = text.find(c)
    return found if found >= 0 else None


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``; NUL finds the end."""
    text = _terminated(s)
    if _char(c) == _NUL:
        return len(text)
    found = text.rfind(c)
    return found if found >= 0 else None


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Return where ``needle`` first occurs in ``haystack``; an empty needle gives 0."""
    pattern = _terminated(needle)
    if not pattern:
        return 0
    found = _terminated(haystack).find(pattern)
    return found if found >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    pattern = _terminated(needle)
    if not pattern:
        return 0
    found = _terminated(haystack)[:length].find(pattern)
    return found if found >= 0 else None


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; negative, zero or positive like the C function."""
    a, b = _terminated(s1), _terminated(s2)
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    common = min(len(a), len(b))
    return _code_at(a, common) - _code_at(b, common)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    return strcmp(_terminated(s1)[:n], _terminated(s2)[:n])


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """Tell whether two strings are equal; ``None`` never equals anything."""
    if s1 is None or s2 is None:
        return False
    return _terminated(s1) == _terminated(s2)


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """Tell whether the first ``n`` characters of two strings are equal."""
    if s1 is None or s2 is None:
        return False
    if n < 0:
        raise ValueError("n must not be negative")
    return _terminated(s1)[:n] == _terminated(s2)[:n]