"""Per-kind rotation table.

Each entry maps ``(kind, state)`` to four ``(drow, dcol)`` deltas, one per cell
in spawn order, and the state reached afterwards. The deltas are hand-tuned per
cell and are not derived from a rotation matrix.
"""
from typing import Dict, Tuple

Delta = Tuple[int, int]
Step = Tuple[Tuple[Delta, Delta, Delta, Delta], int]

_ = (0, 0)

ROTATIONS: Dict[Tuple[str, int], Step] = {
    ("T", 0): (((-1, 1), _, _, _), 1),
    ("T", 1): ((_, _, _, (-1, -1)), 2),
    ("T", 2): ((_, _, (1, -1), _), 3),
    ("T", 3): (((1, -1), _, (-1, 1), (1, 1)), 0),

    ("L", 0): ((_, (1, 1), (-1, -1), (0, -2)), 1),
    ("L", 1): ((_, (-1, -1), (1, 1), (2, 0)), 2),
    ("L", 2): ((_, (1, 1), (-1, -1), (0, 2)), 3),
    ("L", 3): ((_, (-1, -1), (1, 1), (-2, 0)), 0),

    ("J", 0): ((_, (1, 1), (-1, -1), (2, 0)), 1),
    ("J", 1): ((_, (-1, -1), (1, 1), (0, 2)), 2),
    ("J", 2): ((_, (1, 1), (-1, -1), (-2, 0)), 3),
    ("J", 3): ((_, (-1, -1), (1, 1), (0, -2)), 0),

    # I, S and Z flip between two orientations
    ("I", 0): (((1, -1), _, (-1, 1), (-2, 2)), 1),
    ("I", 1): (((-1, 1), _, (1, -1), (2, -2)), 0),

    ("S", 0): (((2, 1), (0, 1), _, _), 1),
    ("S", 1): (((-2, -1), (0, -1), _, _), 0),

    ("Z", 0): ((_, (2, 0), (0, 2), _), 1),
    ("Z", 1): ((_, (-2, 0), (0, -2), _), 0),

    ("O", 0): ((_, _, _, _), 0),
}

del _


def cycle_length(kind: str) -> int:
    """Number of distinct rotation states for ``kind``."""
    return sum(1 for k, _state in ROTATIONS if k == kind)


def lookup(kind: str, state: int) -> Step:
    return ROTATIONS[(kind, state)]
