# linetris_layout.py
from dataclasses import dataclass
from typing import Tuple

from linetris_config import CONFIG
from linetris_piece import COLS, VISIBLE_ROWS

MARGIN = 16
PANEL_W = 180


@dataclass(frozen=True)
class Dims:
    cell: int
    board_x: int
    board_y: int
    panel_x: int

    @property
    def board_w(self) -> int:
        return COLS * self.cell

    @property
    def board_h(self) -> int:
        return VISIBLE_ROWS * self.cell

    @property
    def size(self) -> Tuple[int, int]:
        return (self.panel_x + PANEL_W + MARGIN, self.board_y + self.board_h + MARGIN)

    def cell_xy(self, col: int, line: int) -> Tuple[int, int]:
        """Top-left pixel of a cell; ``line`` counts visible rows from the top."""
        return (self.board_x + col * self.cell, self.board_y + line * self.cell)


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    return Dims(cell=cell, board_x=MARGIN, board_y=MARGIN,
                panel_x=MARGIN + COLS * cell + MARGIN)
