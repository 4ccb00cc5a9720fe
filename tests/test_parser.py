import pytest

from fillit.parser import (
    InvalidInputError,
    check_contact,
    check_newline,
    check_pattern,
    parse_pieces,
    read_source,
    shift_to_corner,
    special_offset,
    validate,
)


def _piece(*rows):
    return "".join(row + "\n" for row in rows)


def _file(*pieces):
    return "\n".join(pieces)


def _flat(piece):
    return piece.replace("\n", "")


SQUARE = _piece("##..", "##..", "....", "....")
SQUARE_MOVED = _piece("....", "....", "..##", "..##")
BAR = _piece("#...", "#...", "#...", "#...")
BAR_MOVED = _piece(".#..", ".#..", ".#..", ".#..")
T_UP = _piece(".#..", "###.", "....", "....")
T_UP_MOVED = _piece("....", "..#.", ".###", "....")
L_RIGHT = _piece("..#.", "###.", "....", "....")
L_RIGHT_MOVED = _piece("....", "....", "...#", ".###")
S_VERTICAL = _piece(".#..", "##..", "#...", "....")
S_VERTICAL_MOVED = _piece("....", "..#.", ".##.", ".#..")
Z_FLAT = _piece(".##.", "##..", "....", "....")
SPLIT = _piece("##..", "....", "##..", "....")


def test_check_pattern_accepts_piece():
    assert check_pattern(SQUARE)


def test_check_pattern_rejects_foreign_character():
    assert not check_pattern(SQUARE.replace(".", "x", 1))


def test_check_pattern_rejects_fifth_cell():
    assert not check_pattern(SQUARE.replace(".", "#", 1))


@pytest.mark.parametrize("piece", [SQUARE, BAR, T_UP, L_RIGHT, S_VERTICAL, Z_FLAT])
def test_check_contact_accepts_tetriminos(piece):
    assert check_contact(piece)


def test_check_contact_rejects_split_piece():
    assert not check_contact(SPLIT)


def test_check_newline_last_piece():
    assert check_newline(SQUARE)


def test_check_newline_followed_by_piece():
    assert check_newline(_file(SQUARE, BAR))


def test_check_newline_rejects_trailing_blank_line():
    assert not check_newline(SQUARE + "\n")


def test_check_newline_rejects_long_row():
    assert not check_newline("##...\n##..\n....\n....\n")


def test_validate_counts_pieces():
    pieces = [SQUARE, BAR, T_UP]
    assert validate(_file(*pieces)) == len(pieces)


def test_validate_accepts_twenty_six_pieces():
    pieces = [SQUARE] * 26
    assert validate(_file(*pieces)) == len(pieces)


def test_validate_stops_at_nul():
    assert validate(SQUARE + "\0garbage") == validate(SQUARE)


@pytest.mark.parametrize(
    "text",
    [
        "",
        SQUARE + "\n",
        SPLIT,
        SQUARE + "x" + BAR,
        _file(*[SQUARE] * 27),
        SQUARE[:-1],
    ],
)
def test_validate_rejects(text):
    with pytest.raises(InvalidInputError):
        validate(text)


def test_read_source_returns_text(tmp_path):
    text = _file(SQUARE, T_UP)
    path = tmp_path / "pieces.txt"
    path.write_text(text)
    assert read_source(path) == text


def test_read_source_missing_file(tmp_path):
    with pytest.raises(InvalidInputError):
        read_source(tmp_path / "absent.txt")


def test_read_source_invalid_file(tmp_path):
    path = tmp_path / "pieces.txt"
    path.write_text(SPLIT)
    with pytest.raises(InvalidInputError):
        read_source(path)


def test_read_source_rejects_too_many_pieces(tmp_path):
    path = tmp_path / "pieces.txt"
    path.write_text(_file(*[SQUARE] * 27))
    with pytest.raises(InvalidInputError):
        read_source(path)


@pytest.mark.parametrize(
    "piece, expected",
    [
        (SQUARE, 0),
        (BAR, 0),
        (T_UP, 1),
        (S_VERTICAL, 1),
        (Z_FLAT, 1),
        (L_RIGHT, 2),
    ],
)
def test_special_offset(piece, expected):
    assert special_offset(_flat(piece)) == expected


def test_special_offset_requires_a_cell():
    with pytest.raises(InvalidInputError):
        special_offset("." * 16)


@pytest.mark.parametrize(
    "origin, moved",
    [
        (SQUARE, SQUARE_MOVED),
        (BAR, BAR_MOVED),
        (T_UP, T_UP_MOVED),
        (L_RIGHT, L_RIGHT_MOVED),
        (S_VERTICAL, S_VERTICAL_MOVED),
    ],
)
def test_shift_to_corner_moves_to_origin(origin, moved):
    placed = shift_to_corner(_flat(origin), "C")
    assert shift_to_corner(_flat(moved), "C") == placed
    assert placed == _flat(origin).replace("#", "C")


def test_shift_to_corner_keeps_cell_count():
    shifted = shift_to_corner(_flat(L_RIGHT_MOVED), "Q")
    assert shifted.count("Q") == 4
    assert set(shifted) == {"Q", "."}


def test_parse_pieces_square_in_corner():
    assert parse_pieces(SQUARE_MOVED) == ["AA..AA.........."]


def test_parse_pieces_letters_in_order():
    pieces = parse_pieces(_file(SQUARE, BAR, T_UP))
    assert [set(p) - {"."} for p in pieces] == [{"A"}, {"B"}, {"C"}]
    assert all(len(p) == 16 and p.count(p[0] if p[0] != "." else p[1]) >= 1 for p in pieces)
    assert [sum(ch != "." for ch in p) for p in pieces] == [4, 4, 4]


def test_parse_pieces_matches_corner_version():
    assert parse_pieces(_file(T_UP_MOVED, BAR_MOVED)) == parse_pieces(_file(T_UP, BAR))


def test_parse_pieces_rejects_invalid():
    with pytest.raises(InvalidInputError):
        parse_pieces(SPLIT)