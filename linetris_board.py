"""Board: settled cells, row collapse, game-over zone"""
from typing import List, Optional, Tuple

from linetris_piece import COLS, ROWS, SPAWN_ROW, Piece, pos

Cell = Optional[str]

# four cells of the spawn row around the centre column
GAME_OVER_ZONE = tuple(pos(SPAWN_ROW, c) for c in range(COLS // 2 - 2, COLS // 2 + 2))


class Board:
    def __init__(self):
        self.cells: List[Cell] = [None] * (COLS * ROWS)

    def in_bounds(self, p: int) -> bool:
        return 0 <= p < COLS * ROWS

    def get(self, p: int) -> Cell:
        if not self.in_bounds(p):
            raise IndexError(f"board position {p} out of range")
        return self.cells[p]

    def set(self, p: int, kind: Cell):
        if not self.in_bounds(p):
            raise IndexError(f"board position {p} out of range")
        self.cells[p] = kind

    def row(self, r: int) -> List[Cell]:
        return self.cells[r * COLS:(r + 1) * COLS]

    def is_row_full(self, r: int) -> bool:
        return all(self.row(r))

    def collapse_from(self, r: int):
        """Drop row ``r``; every row above moves down one and the top row is emptied."""
        del self.cells[r * COLS:(r + 1) * COLS]
        self.cells.extend([None] * COLS)

    def freeze(self, piece: Piece):
        for p in piece.cells:
            self.set(p, piece.kind)

    def is_game_over_zone_occupied(self) -> bool:
        return any(self.cells[p] is not None for p in GAME_OVER_ZONE)

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(self.row(r)) for r in range(ROWS))
