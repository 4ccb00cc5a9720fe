"""Reading, validating and normalising tetrimino description files.

A description file holds up to 26 pieces.  Each piece is four rows of four
characters (``.`` or ``#``) ending in a newline, and consecutive pieces are
separated by one empty line.  The last piece has no trailing empty line.
"""

from __future__ import annotations

import os
from string import ascii_uppercase

BLOCK_SIDE = 4
BLOCK_CELLS = BLOCK_SIDE * BLOCK_SIDE
CHUNK_SIZE = 21
MAX_FILE_SIZE = 547
READ_LIMIT = 546

# (bound on the first '#', offsets that must hold '#', column offset)
_SPECIAL_SHAPES = (
    (8, (3, 4, 7), 1),
    (11, (1, 3, 4), 1),
    (8, (4, 7, 8), 1),
    (11, (3, 4, 5), 1),
    (8, (3, 4, 8), 1),
    (12, (2, 3, 4), 2),
)


class InvalidInputError(ValueError):
    """Raised when a source does not describe a valid set of tetriminos."""


def _terminated(text: str) -> str:
    """Return ``text`` cut at its first NUL character, if any."""
    return text.split("\0", 1)[0]


def _at(text: str, index: int) -> str:
    """Return the character at ``index``, or NUL when outside ``text``."""
    if 0 <= index < len(text):
        return text[index]
    return "\0"


def check_pattern(chunk: str) -> bool:
    """Check that a piece has only valid characters, four '#' and twelve '.'."""
    head = _terminated(chunk)[:CHUNK_SIZE]
    if any(ch not in ".#\n" for ch in head):
        return False
    return head.count("#") == 4 and head.count(".") == 12


def check_newline(chunk: str) -> bool:
    """Check the row endings of a piece and what follows it."""
    text = _terminated(chunk)
    if not all(_at(text, k) == "\n" for k in (4, 9, 14, 19)):
        return False
    tail = _at(text, 20)
    return (tail == "\n" and _at(text, 21) != "\0") or tail == "\0"


def check_contact(chunk: str) -> bool:
    """Check that the four cells of a piece form one connected tetrimino."""
    text = _terminated(chunk)
    contact = 0
    for i, ch in enumerate(text[:CHUNK_SIZE]):
        if ch != "#":
            continue
        if i < 18 and _at(text, i + 1) == "#":
            contact += 1
        if i < 14 and _at(text, i + 5) == "#":
            contact += 1
        if i > 0 and _at(text, i - 1) == "#":
            contact += 1
        if i > 4 and _at(text, i - 5) == "#":
            contact += 1
    return contact in (6, 8)


def validate(text: str) -> int:
    """Validate a whole description and return the number of pieces in it."""
    text = _terminated(text)
    if not 0 < len(text) <= MAX_FILE_SIZE:
        raise InvalidInputError("description size out of range")
    starts = range(0, len(text), CHUNK_SIZE)
    for start in starts:
        chunk = text[start:]
        if not check_pattern(chunk):
            raise InvalidInputError(f"bad characters in piece at offset {start}")
        if not check_contact(chunk):
            raise InvalidInputError(f"disconnected piece at offset {start}")
        if not check_newline(chunk):
            raise InvalidInputError(f"bad line layout in piece at offset {start}")
    return len(starts)


def read_source(path: str | os.PathLike[str]) -> str:
    """Read a description file and return its validated text."""
    try:
        with open(path, "rb") as handle:
            data = handle.read(READ_LIMIT)
    except OSError as exc:
        raise InvalidInputError(f"cannot read {os.fspath(path)!r}") from exc
    text = _terminated(data.decode("latin-1"))
    validate(text)
    return text


def special_offset(block: str) -> int:
    """Return how far the first '#' of a flattened block sits from its left edge."""
    first = block.find("#")
    if first < 0:
        raise InvalidInputError("block holds no cell")
    for bound, offsets, column in _SPECIAL_SHAPES:
        if first < bound and all(_at(block, first + k) == "#" for k in offsets):
            return column
    return 0


def shift_to_corner(block: str, letter: str) -> str:
    """Move a flattened block to the top-left corner, marking cells with ``letter``."""
    first = block.find("#")
    if first < 0:
        raise InvalidInputError("block holds no cell")
    shift = first - special_offset(block)
    cells = ["." if ch == "#" else ch for ch in block]
    for index, ch in enumerate(block):
        if ch == "#":
            cells[index - shift] = letter
    return "".join(cells)


def parse_pieces(text: str) -> list[str]:
    """Validate a description and return its pieces as lettered 16-cell blocks."""
    validate(text)
    flat = _terminated(text).replace("\n", "")
    blocks = [flat[k:k + BLOCK_CELLS] for k in range(0, len(flat), BLOCK_CELLS)]
    return [shift_to_corner(block, letter) for block, letter in zip(blocks, ascii_uppercase)]