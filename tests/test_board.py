import pytest

from linetris_board import GAME_OVER_ZONE, Board
from linetris_piece import COLS, ROWS, Piece, pos


def test_new_board_is_empty():
    b = Board()
    assert len(b.cells) == COLS * ROWS
    assert all(c is None for c in b.cells)


def test_get_set():
    b = Board()
    b.set(pos(3, 7), "Z")
    assert b.get(pos(3, 7)) == "Z"
    assert b.get(pos(3, 6)) is None


@pytest.mark.parametrize("p", [-1, COLS * ROWS])
def test_out_of_range_positions_raise(p):
    b = Board()
    assert not b.in_bounds(p)
    with pytest.raises(IndexError):
        b.get(p)
    with pytest.raises(IndexError):
        b.set(p, "T")


def test_row_full():
    b = Board()
    for c in range(COLS - 1):
        b.set(pos(1, c), "I")
    assert not b.is_row_full(1)
    b.set(pos(1, COLS - 1), "I")
    assert b.is_row_full(1)


def test_collapse_shifts_rows_above_down():
    b = Board()
    b.set(pos(1, 0), "T")
    b.set(pos(2, 3), "S")
    b.set(pos(ROWS - 1, 9), "O")
    b.collapse_from(1)
    assert b.get(pos(1, 3)) == "S"
    assert b.get(pos(1, 0)) is None
    assert b.get(pos(ROWS - 2, 9)) == "O"
    assert b.row(ROWS - 1) == [None] * COLS
    assert len(b.cells) == COLS * ROWS


def test_collapse_keeps_rows_below():
    b = Board()
    b.set(pos(1, 2), "L")
    b.set(pos(5, 2), "J")
    b.collapse_from(4)
    assert b.get(pos(1, 2)) == "L"
    assert b.get(pos(4, 2)) == "J"


def test_game_over_zone_is_centre_of_spawn_row():
    assert GAME_OVER_ZONE == (173, 174, 175, 176)


def test_game_over_zone_occupancy():
    b = Board()
    b.set(pos(17, 2), "T")
    b.set(pos(17, 7), "T")
    b.set(pos(16, 4), "T")
    assert not b.is_game_over_zone_occupied()
    b.set(pos(17, 3), "T")
    assert b.is_game_over_zone_occupied()


def test_freeze_writes_kind():
    b = Board()
    piece = Piece.spawn("J")
    b.freeze(piece)
    assert all(b.get(p) == "J" for p in piece.cells)
    assert sum(c is not None for c in b.cells) == 4


def test_rows_is_a_copy():
    b = Board()
    rows = b.rows()
    assert len(rows) == ROWS
    b.set(pos(1, 1), "T")
    assert rows[1][1] is None
