"""Full-row removal"""
import logging

from linetris_board import Board
from linetris_piece import ROWS

log = logging.getLogger(__name__)


def clear_full_rows(board: Board) -> int:
    """Collapse full rows until a bottom-to-top pass finds none; return the count.

    Restarting the scan after every collapse means a full row that slides into
    a cleared slot is never skipped.
    """
    cleared = 0
    while True:
        full = next((r for r in range(1, ROWS) if board.is_row_full(r)), None)
        if full is None:
            break
        board.collapse_from(full)
        cleared += 1
        log.debug("cleared row %d", full)
    return cleared
