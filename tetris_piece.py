"""Active piece: movement, rotation, gravity step and lock"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, List, Optional

from tetris_board import BoardGrid
from tetris_collision import absolute_cells, is_valid
from tetris_rotation import resolve_rotation
from tetris_shapes import Cell, TetrominoShape

logger = logging.getLogger(__name__)


class PieceState(Enum):
    FALLING = "falling"
    GROUNDED = "grounded"
    LOCKED = "locked"


@dataclass
class ActivePiece:
    board: BoardGrid = field(repr=False)
    shape: TetrominoShape
    position: Cell
    cells: List[Cell]
    step_delay: float
    lock_delay: float
    rotation_index: int = 0
    step_time: float = 0.0   # game-clock time of the next forced step
    lock_time: float = 0.0   # time since spawn or the last successful move
    locked: bool = False
    placed: bool = False     # cells currently written into the board
    on_lock: Optional[Callable[[int], None]] = field(default=None, repr=False)

    @staticmethod
    def spawn(board: BoardGrid, shape: TetrominoShape, position: Cell,
              step_delay: float, lock_delay: float, now: float = 0.0,
              on_lock: Optional[Callable[[int], None]] = None) -> "ActivePiece":
        return ActivePiece(board, shape, tuple(position), list(shape.cells),
                           step_delay, lock_delay, rotation_index=0,
                           step_time=now + step_delay, lock_time=0.0,
                           on_lock=on_lock)

    @property
    def kind(self) -> str:
        return self.shape.kind

    def absolute_cells(self) -> List[Cell]:
        return absolute_cells(self.cells, self.position)

    @property
    def state(self) -> PieceState:
        if self.locked:
            return PieceState.LOCKED
        with self.lifted():
            x, y = self.position
            below = is_valid(self.cells, (x, y - 1), self.board)
        return PieceState.FALLING if below else PieceState.GROUNDED

    # ---------- board membership ----------
    def place(self) -> None:
        self.board.set_cells(self.absolute_cells(), self.kind)
        self.placed = True

    def lift(self) -> None:
        if self.placed:
            self.board.clear_cells(self.absolute_cells())
            self.placed = False

    @contextmanager
    def lifted(self) -> Iterator["ActivePiece"]:
        """Remove the piece from the board while validity tests run."""
        was_placed = self.placed
        self.lift()
        try:
            yield self
        finally:
            if was_placed and not self.locked:
                self.place()

    # ---------- movement ----------
    def advance(self, dt: float) -> None:
        self.lock_time += dt

    def move(self, dx: int, dy: int) -> bool:
        x, y = self.position
        target = (x + dx, y + dy)
        with self.lifted():
            if not is_valid(self.cells, target, self.board):
                return False
            self.position = target
        self.lock_time = 0.0
        return True

    def rotate(self, direction: int) -> bool:
        with self.lifted():
            result = resolve_rotation(self.shape, self.cells, self.rotation_index,
                                      self.position, direction, self.board)
            if result is not None:
                self.rotation_index = result.rotation_index
                self.cells = list(result.cells)
                self.position = result.position
        if result is None:
            return False
        # any committed turn counts as a grounding reset, so pieces can spin indefinitely
        self.lock_time = 0.0
        return True

    def step(self, now: float) -> None:
        self.step_time = now + self.step_delay
        moved = self.move(0, -1)
        if not moved and self.lock_time >= self.lock_delay:
            self.lock()

    def hard_drop(self) -> int:
        rows = 0
        with self.lifted():
            while self.move(0, -1):
                rows += 1
        self.lock()
        return rows

    def lock(self) -> int:
        """Commit the cells to the board, sweep full rows and hand over."""
        if self.locked:
            return 0
        self.board.set_cells(self.absolute_cells(), self.kind)
        self.placed = False
        self.locked = True
        cleared = self.board.clear_full_rows()
        logger.debug("locked %s at %s (rotation %d)", self.kind, self.position, self.rotation_index)
        if self.on_lock is not None:
            self.on_lock(cleared)
        return cleared
