"""
Game loop: spawning, per-tick command handling, gravity, lock and game over.

The host calls ``Game.tick(dt, commands)`` once per frame. A tick runs in a
fixed order with the active piece lifted off the board:

  1) the lock timer and game clock advance by dt
  2) rotation (counter-clockwise wins over clockwise)
  3) horizontal move (left wins over right)
  4) soft drop, then hard drop
  5) a gravity step if the step timer has elapsed

and the active piece (a fresh one, if the old piece locked) is written back
into the board at the end. Commands are edge-triggered: each one present in
``commands`` is applied at most once per tick.
"""
import logging
from enum import Enum
from typing import Iterable, Optional

from tetris_board import BoardGrid
from tetris_collision import is_valid
from tetris_config import GameConfig
from tetris_ghost import Ghost, project
from tetris_piece import ActivePiece
from tetris_rng import UniformRandom

logger = logging.getLogger(__name__)


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"


class Game:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[UniformRandom] = None):
        self.config = config or GameConfig()
        self.catalog = self.config.catalog
        self.board = BoardGrid(self.config.width, self.config.height)
        self.rng = rng or UniformRandom(self.catalog.kinds, self.config.seed)
        self.clock = 0.0
        self.piece: Optional[ActivePiece] = None
        self.games_over = 0

    def start(self, kind: Optional[str] = None) -> bool:
        return self.spawn_piece(kind)

    def spawn_piece(self, kind: Optional[str] = None) -> bool:
        """Put a new piece at the spawn position.

        Returns False on game over: the spawn cells were blocked, so the board
        is wiped and the new piece carries on over the empty board.
        """
        if kind is None:
            kind = self.rng.next_piece()
        c = self.config
        self.piece = ActivePiece.spawn(self.board, self.catalog[kind], c.spawn,
                                       c.step_delay, c.lock_delay, now=self.clock,
                                       on_lock=self._on_lock)
        if not is_valid(self.piece.cells, self.piece.position, self.board):
            self.games_over += 1
            logger.warning("game over: %s cannot spawn at %s", kind, c.spawn)
            self.board.clear_all()
            self.piece.place()
            return False
        self.piece.place()
        logger.debug("spawned %s at %s", kind, c.spawn)
        return True

    def _on_lock(self, cleared: int) -> None:
        self.spawn_piece()

    def tick(self, dt: float, commands: Iterable[Command] = ()) -> None:
        if dt < 0:
            raise ValueError(f"dt must not be negative, got {dt!r}")
        if self.piece is None:
            self.start()
        commands = set(commands)
        piece = self.piece
        with piece.lifted():
            piece.advance(dt)
            self.clock += dt

            if Command.ROTATE_CCW in commands:
                piece.rotate(-1)
            elif Command.ROTATE_CW in commands:
                piece.rotate(1)

            if Command.MOVE_LEFT in commands:
                piece.move(-1, 0)
            elif Command.MOVE_RIGHT in commands:
                piece.move(1, 0)

            if Command.SOFT_DROP in commands:
                piece.move(0, -1)
            if Command.HARD_DROP in commands:
                piece.hard_drop()

            if not piece.locked and self.clock >= piece.step_time:
                piece.step(self.clock)

    def ghost(self) -> Ghost:
        return project(self.piece, self.board)
