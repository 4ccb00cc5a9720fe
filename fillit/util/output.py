"""Writing characters, strings and numbers to streams or file descriptors.

Functions taking ``stream`` write to a text stream, ``sys.stdout`` by
default. Functions ending in ``_fd`` write UTF-8 bytes straight to an open
file descriptor. A string argument of ``None`` writes nothing.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _write_fd(text: str, fd: int) -> None:
    data = text.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream``."""
    _stream(stream).write(_check_char(c))


def putchar_fd(c: str, fd: int) -> None:
    """Write one character to file descriptor ``fd``."""
    _write_fd(_check_char(c), fd)


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; nothing is written for ``None``."""
    if s is None:
        return
    _stream(stream).write(s)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to file descriptor ``fd``; nothing is written for ``None``."""
    if s is None:
        return
    _write_fd(s, fd)


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; nothing is written for ``None``."""
    if s is None:
        return
    _stream(stream).write(s + "\n")


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` and a newline to ``fd``; nothing is written for ``None``."""
    if s is None:
        return
    _write_fd(s + "\n", fd)


def _number(n: int) -> str:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    return f"{n:d}"


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    _stream(stream).write(_number(n))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to file descriptor ``fd``."""
    _write_fd(_number(n), fd)