"""
Game state machine: one active piece, gravity ticks, freezes and outcomes.

A ``Game`` is driven one iteration at a time through ``update(command, now)``.
Each iteration does exactly one thing: it applies the pending command, or, when
no command is pending and the fall interval has elapsed, it runs a gravity
tick. A tick that cannot move the piece down freezes it, clears full rows,
checks the game-over zone and spawns the next piece.

Terminal states are values (``GameOver`` / ``Quit``) kept on ``game.outcome``;
nothing in here exits the process.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from linetris_board import Board, Cell
from linetris_config import CONFIG
from linetris_lines import clear_full_rows
from linetris_piece import ROWS, Command, Piece, col_of, row_of
from linetris_rng import KindRandom
from linetris_validator import validate

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameOver:
    score: int


@dataclass(frozen=True)
class Quit:
    score: int


Outcome = Union[GameOver, Quit]


@dataclass
class GameState:
    score: int = 0
    fall_interval: int = CONFIG["FALL_INTERVAL_MS"]
    last_tick: int = 0

    def credit_rows(self, count: int, step: int, floor: int):
        """Score one point per row and speed up by ``step`` per row, not below ``floor``."""
        self.score += count
        self.fall_interval = max(floor, self.fall_interval - count * step)


@dataclass(frozen=True)
class Snapshot:
    """Board with the active piece drawn in; row 0 is the floor row."""
    grid: Tuple[Tuple[Cell, ...], ...]
    score: int
    fall_interval: int
    outcome: Optional[Outcome] = None

    def visible_rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Playfield rows from the top down, floor row left out."""
        return tuple(reversed(self.grid[1:]))


class Game:
    def __init__(self, rng=None, now: int = 0,
                 fall_interval: Optional[int] = None,
                 step: Optional[int] = None,
                 min_interval: Optional[int] = None):
        self.rng = rng if rng is not None else KindRandom(CONFIG["SEED"])
        self.step = CONFIG["SPEEDUP_STEP_MS"] if step is None else step
        self.min_interval = CONFIG["MIN_FALL_INTERVAL_MS"] if min_interval is None else min_interval
        interval = CONFIG["FALL_INTERVAL_MS"] if fall_interval is None else fall_interval
        self.state = GameState(0, max(self.min_interval, interval), now)
        self.board = Board()
        self.outcome: Optional[Outcome] = None
        self.piece: Optional[Piece] = None
        self.spawn()

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def fall_interval(self) -> int:
        return self.state.fall_interval

    def spawn(self) -> bool:
        """Bring in the next random piece, or end the game if there is no room."""
        if self.board.is_game_over_zone_occupied():
            self._end(GameOver(self.state.score))
            return False
        piece = Piece.spawn(self.rng.next_piece())
        if any(self.board.get(p) is not None for p in piece.cells):
            self._end(GameOver(self.state.score))
            return False
        self.piece = piece
        log.debug("spawned %s at %s", piece.kind, piece.cells)
        return True

    def try_move(self, command: Command) -> bool:
        cand = self.piece.candidate(command)
        if not validate(self.board, cand.cells, command, self.piece.kind):
            return False
        self.piece = cand
        return True

    def tick(self, now: int) -> bool:
        self.state.last_tick = now
        if self.board.is_game_over_zone_occupied():
            self._end(GameOver(self.state.score))
            return True
        if not self.try_move(Command.MOVE_DOWN):
            self.freeze()
        return True

    def freeze(self):
        self.board.freeze(self.piece)
        log.debug("froze %s at %s", self.piece.kind, self.piece.cells)
        cleared = clear_full_rows(self.board)
        if cleared:
            self.state.credit_rows(cleared, self.step, self.min_interval)
            log.debug("cleared %d row(s), score %d, interval %d ms",
                      cleared, self.state.score, self.state.fall_interval)
        self.spawn()

    def update(self, command: Command, now: int) -> bool:
        """Run one loop iteration; return True when the state changed."""
        if self.outcome is not None:
            return False
        if command is Command.QUIT:
            self._end(Quit(self.state.score))
            return True
        if command is not Command.NONE:
            return self.try_move(command)
        if now - self.state.last_tick >= self.state.fall_interval:
            return self.tick(now)
        return False

    def _end(self, outcome: Outcome):
        self.outcome = outcome
        log.info("%s with score %d", type(outcome).__name__, outcome.score)

    def snapshot(self) -> Snapshot:
        grid = [list(self.board.row(r)) for r in range(ROWS)]
        if self.piece is not None and not isinstance(self.outcome, GameOver):
            for p in self.piece.cells:
                grid[row_of(p)][col_of(p)] = self.piece.kind
        return Snapshot(tuple(tuple(r) for r in grid), self.state.score,
                        self.state.fall_interval, self.outcome)


def run_game(game: Game, poll: Callable[[], Command], clock: Callable[[], int],
             render: Optional[Callable[[Snapshot], None]] = None) -> Outcome:
    """Drive ``game`` until it ends and return its outcome."""
    if render:
        render(game.snapshot())
    while game.outcome is None:
        if game.update(poll(), clock()) and render:
            render(game.snapshot())
    return game.outcome
