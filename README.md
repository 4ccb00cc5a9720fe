# fillit

Reads a file of tetrominoes and arranges them in the smallest square that
holds them all. It prints the result with each piece drawn in its own letter.

## Install

    pip install .

## Usage

    fillit pieces.txt

The same command is available as `python -m fillit.solver pieces.txt`.

The input holds up to 26 pieces. Each piece is four lines of four
characters, `.` for empty and `#` for filled, and each line ends in a
newline. Pieces are separated by one empty line, and no empty line follows
the last piece. Every piece must have exactly four `#` cells, all touching
one another edge to edge.

Example input:

    ....
    ##..
    .#..
    .#..

    ....
    ####
    ....
    ....

Output:

    AA..
    .A..
    .A..
    BBBB

Pieces get the letters `A`, `B`, `C`, … in the order they appear. Each piece
is first moved to the top-left corner of its 4×4 block. Pieces are then
placed one after another at the first free spot, scanning rows from top to
bottom and columns from left to right. A piece that cannot be placed sends
the search back to try the previous piece elsewhere. The square starts at
the smallest side whose area can hold all the cells. If no arrangement fits,
the side grows by one and the search starts over.

When the file cannot be read or is not valid, the program prints `error`.
Called with a wrong number of arguments, it prints `Usage: ./fillit my_file`.
The exit status is 0 in every case.

## Library use

    from fillit.parser import parse_pieces, read_source
    from fillit.solver import smallest_solution

    text = read_source("pieces.txt")
    board = smallest_solution(parse_pieces(text))
    print(board)

- `fillit.parser`
  - `read_source` reads at most 546 bytes and validates them.
  - `validate` checks a description and returns the number of pieces.
  - `parse_pieces` returns each piece as a lettered 16-cell string.
  - On bad input, all three raise `InvalidInputError`, a subclass of `ValueError`.
  - The per-piece checks `check_pattern`, `check_newline` and `check_contact` are public as well.
- `fillit.board.Board`
  - A square grid with `fits`, `place` and `remove` for a block at a given row and column.
  - `str(board)` gives the printed grid.
  - `fillit.board.min_board_size` gives the side the search starts from.
- `fillit.solver`
  - `solve(board, pieces)` fills a given board and returns whether it succeeded.
  - `smallest_solution(pieces)` returns the first board that works.

## Helper modules

`fillit.util` holds small general helpers that the solver itself does not
need:

- `chars`: ASCII classification and case conversion (`isalpha`, `isdigit`, `toupper`, …). These accept a character or an integer code.
- `numbers`: `atoi`, `itoa`, `lenint`, `power`, `sqrt`, `isprime`, `swap`.
- `linked_list`: `ListNode` and the functions `lstnew`, `lstadd`, `lstdelone`, `lstdel`, `lstiter`, `lstmap`.
- `output`: `putchar`, `putstr`, `putendl`, `putnbr` write to a text stream. Their `_fd` variants write to a file descriptor.
- `search`: `strlen`, `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`, `strncmp`, `strequ`, `strnequ`.
- `build`: `strcat`, `strncat`, `strlcat`, `strcpy`, `strncpy`, `strdup`, `strnew`, `strjoin`, `strsub`, and the `…free` variants.
- `transform`: `strclr`, `striter`, `striteri`, `strmap`, `strmapi`, `strsplit`, `strtrim`, `countwords`.

The string helpers treat a string as ending at its first NUL character.

## Not included

There are no helpers for raw byte buffers, such as filling, copying,
comparing or searching memory. Use `bytes`, `bytearray` and `memoryview`
directly.

## Tests

    pip install .[test]
    pytest