"""Small integer helpers: parsing, formatting and arithmetic."""

from __future__ import annotations

from math import isqrt
from typing import Any

_SPACE = " \t\n\r\v\f"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if there is none."""
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits += ch
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return f"{n:d}"


def lenint(n: int) -> int:
    """Return the number of characters of ``n`` in decimal, sign included."""
    return len(itoa(n))


def power(nb: int, exponent: int) -> int:
    """Return ``nb`` raised to ``exponent``; a negative exponent gives 0."""
    if exponent < 0:
        return 0
    return nb**exponent


def sqrt(nb: int) -> int:
    """Return the smallest root whose square is at least ``nb`` and a multiple of it.

    Returns 0 for non-positive input or when that root's square is not a
    multiple of ``nb``.
    """
    if nb <= 0:
        return 0
    root = isqrt(nb)
    if root * root < nb:
        root += 1
    return root if (root * root) % nb == 0 else 0


def isprime(nb: int) -> bool:
    """Tell whether ``nb`` has no divisor in ``2 .. nb // 2 - 1``."""
    if nb <= 1:
        return False
    return not any(nb % d == 0 for d in range(2, nb // 2))


def swap(a: Any, b: Any) -> tuple[Any, Any]:
    """Return the two values in reverse order."""
    return b, a