"""The square board that pieces are packed onto."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from math import isqrt

EMPTY = "."
BLOCK_SIDE = 4


def _is_letter(ch: str) -> bool:
    return "A" <= ch <= "Z"


class Board:
    """A square grid of cells, each empty or holding a piece letter."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("board size must not be negative")
        self.size = size
        self._rows = [[EMPTY] * size for _ in range(size)]

    def _cells(self, block: str, row: int, col: int) -> Iterator[tuple[int, int, str]]:
        """Yield board coordinates and block cells of a block laid at (row, col)."""
        for line in range(min(BLOCK_SIDE, self.size - row)):
            for column in range(min(BLOCK_SIDE, self.size - col)):
                yield row + line, col + column, block[line * BLOCK_SIDE + column]

    def fits(self, block: str, row: int, col: int) -> bool:
        """Tell whether all four cells of ``block`` fit free at (row, col)."""
        count = 0
        for r, c, ch in self._cells(block, row, col):
            if not _is_letter(ch):
                continue
            if _is_letter(self._rows[r][c]):
                return False
            count += 1
        return count == 4

    def place(self, block: str, row: int, col: int) -> None:
        """Write the letters of ``block`` onto the board at (row, col)."""
        for r, c, ch in self._cells(block, row, col):
            if _is_letter(ch):
                self._rows[r][c] = ch

    def remove(self, block: str, row: int, col: int) -> None:
        """Clear the cells that ``block`` covers at (row, col)."""
        for r, c, ch in self._cells(block, row, col):
            if _is_letter(ch):
                self._rows[r][c] = EMPTY

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self._rows)


def min_board_size(pieces: Sequence[str]) -> int:
    """Return the smallest side whose area can hold all the pieces' cells."""
    cells = 4 * len(pieces)
    side = isqrt(cells)
    if side * side < cells:
        side += 1
    return side