"""Piece model, spawn layouts, commands"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from linetris_rotation import lookup

# Cells are addressed linearly as row*COLS + col. Row 0 is the floor row
# below the playfield; rows 1..VISIBLE_ROWS are visible.
COLS, ROWS = 10, 21
VISIBLE_ROWS = ROWS - 1

KINDS = ("T", "I", "S", "Z", "O", "L", "J")

SPAWN_ROW, SPAWN_COL = ROWS - 4, COLS // 2 - 1

# (row, col) offsets from the spawn anchor, in cell order
LAYOUTS: Dict[str, Tuple[Tuple[int, int], ...]] = {
    "T": ((0, 0), (0, 1), (0, 2), (1, 1)),
    "I": ((0, 1), (1, 1), (2, 1), (3, 1)),
    "S": ((0, 0), (0, 1), (1, 1), (1, 2)),
    "Z": ((0, 1), (0, 2), (1, 0), (1, 1)),
    "O": ((0, 0), (0, 1), (1, 1), (1, 0)),
    "L": ((1, 0), (0, 0), (2, 0), (0, 1)),
    "J": ((1, 1), (0, 1), (2, 1), (0, 0)),
}


class Command(Enum):
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    MOVE_DOWN = "down"
    ROTATE = "rotate"
    QUIT = "quit"
    NONE = "none"


MOVES: Dict[Command, Tuple[int, int]] = {
    Command.MOVE_LEFT: (0, -1),
    Command.MOVE_RIGHT: (0, 1),
    Command.MOVE_DOWN: (-1, 0),
}


def pos(row: int, col: int) -> int:
    return row * COLS + col


def row_of(p: int) -> int:
    return p // COLS


def col_of(p: int) -> int:
    return p % COLS


@dataclass(frozen=True)
class Piece:
    kind: str
    cells: Tuple[int, int, int, int]
    state: int = 0

    @staticmethod
    def spawn(kind: str) -> "Piece":
        cells = tuple(pos(SPAWN_ROW + r, SPAWN_COL + c) for r, c in LAYOUTS[kind])
        return Piece(kind, cells, 0)

    def translate(self, drow: int, dcol: int) -> "Piece":
        """Return the piece shifted by the same delta on every cell.

        The shift is a plain linear offset, so a column past either wall wraps
        into the neighbouring row; the move validator is what rejects that.
        """
        off = drow * COLS + dcol
        return Piece(self.kind, tuple(p + off for p in self.cells), self.state)

    def rotate(self) -> "Piece":
        deltas, nxt = lookup(self.kind, self.state)
        cells = tuple(p + dr * COLS + dc for p, (dr, dc) in zip(self.cells, deltas))
        return Piece(self.kind, cells, nxt)

    def candidate(self, command: Command) -> "Piece":
        if command is Command.ROTATE:
            return self.rotate()
        return self.translate(*MOVES[command])
