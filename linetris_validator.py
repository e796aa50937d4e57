"""Move legality against walls, floor and the settled stack.

Rules run in a fixed order and the first failing rule rejects the candidate:

  * bounds: every cell must address the board at all
  * wall wrap: with linear addressing a sideways move (or a rotation) past a
    wall lands in the neighbouring row, so a candidate touching both the
    first and the last column has wrapped
  * stack: no cell may overlap a settled cell
  * floor: row 0 is below the playfield
  * vertical I: a vertical I is one column wide and never straddles the
    wrap, so its reference cell is checked against the wall it just crossed
"""
from typing import Sequence

from linetris_board import Board
from linetris_piece import COLS, Command, col_of, row_of


def out_of_bounds(board: Board, cells: Sequence[int]) -> bool:
    return any(not board.in_bounds(p) for p in cells)


def wraps_wall(cells: Sequence[int]) -> bool:
    cols = {col_of(p) for p in cells}
    return 0 in cols and COLS - 1 in cols


def hits_stack(board: Board, cells: Sequence[int]) -> bool:
    return any(board.get(p) is not None for p in cells)


def hits_floor(cells: Sequence[int]) -> bool:
    return any(row_of(p) < 1 for p in cells)


def vertical_i_crosses_wall(cells: Sequence[int], move: Command, kind: str) -> bool:
    if kind != "I":
        return False
    ref = col_of(cells[0])
    return (move is Command.MOVE_LEFT and ref == COLS - 1) or \
           (move is Command.MOVE_RIGHT and ref == 0)


def validate(board: Board, cells: Sequence[int], move: Command, kind: str) -> bool:
    if out_of_bounds(board, cells):
        return False
    if wraps_wall(cells):
        return False
    if hits_stack(board, cells):
        return False
    if hits_floor(cells):
        return False
    if vertical_i_crosses_wall(cells, move, kind):
        return False
    return True
