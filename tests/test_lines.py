from linetris_board import Board
from linetris_lines import clear_full_rows
from linetris_piece import COLS, ROWS, pos


def fill(board, row, kind="I", skip=()):
    for c in range(COLS):
        if c not in skip:
            board.set(pos(row, c), kind)


def test_nothing_to_clear():
    b = Board()
    fill(b, 1, skip=(3,))
    assert clear_full_rows(b) == 0
    assert b.get(pos(1, 3)) is None


def test_single_row():
    b = Board()
    fill(b, 1)
    b.set(pos(2, 4), "T")
    assert clear_full_rows(b) == 1
    assert b.row(1) == [None] * 4 + ["T"] + [None] * 5
    assert b.row(ROWS - 1) == [None] * COLS


def test_stacked_full_rows_cascade():
    b = Board()
    fill(b, 1, "J")
    fill(b, 2, "L")
    fill(b, 3, "S")
    fill(b, 4, "Z", skip=(0,))
    assert clear_full_rows(b) == 3
    assert b.row(1) == [None] + ["Z"] * (COLS - 1)
    assert all(c is None for c in b.cells[2 * COLS:])


def test_split_full_rows():
    b = Board()
    fill(b, 1)
    fill(b, 2, "O", skip=(5,))
    fill(b, 3)
    assert clear_full_rows(b) == 2
    assert b.row(1) == ["O"] * 5 + [None] + ["O"] * 4
    assert b.row(2) == [None] * COLS


def test_top_row_can_clear():
    b = Board()
    fill(b, ROWS - 1)
    assert clear_full_rows(b) == 1
    assert all(c is None for c in b.cells)
