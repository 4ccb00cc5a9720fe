"""Backtracking search for the smallest square holding all pieces."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import count, product

from .board import Board, min_board_size
from .parser import InvalidInputError, parse_pieces, read_source

USAGE = "Usage: ./fillit my_file"


def _place_from(board: Board, pieces: Sequence[str], index: int) -> bool:
    if index == len(pieces):
        return True
    block = pieces[index]
    for row, col in product(range(board.size), repeat=2):
        if board.fits(block, row, col):
            board.place(block, row, col)
            if _place_from(board, pieces, index + 1):
                return True
            board.remove(block, row, col)
    return False


def solve(board: Board, pieces: Sequence[str]) -> bool:
    """Place every piece on ``board`` in order; leave it unchanged on failure."""
    return _place_from(board, list(pieces), 0)


def smallest_solution(pieces: Sequence[str]) -> Board:
    """Return the first solved board, trying sides from the smallest possible."""
    for size in count(min_board_size(pieces)):
        board = Board(size)
        if solve(board, pieces):
            return board
    raise AssertionError("unreachable")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the description file named on the command line and print the board."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        text = read_source(args[0])
    except InvalidInputError:
        print("error")
        return 0
    print(smallest_solution(parse_pieces(text)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())