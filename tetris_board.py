"""Board grid: bounds, occupancy, row sweep"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from tetris_errors import ConfigError
from tetris_shapes import Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    x_min: int
    y_min: int
    width: int
    height: int

    @staticmethod
    def centered(width: int, height: int) -> "Bounds":
        # bottom-left corner sits at (-w/2, -h/2), truncated toward zero
        return Bounds(-(width // 2), -(height // 2), width, height)

    @property
    def x_max(self) -> int:
        return self.x_min + self.width

    @property
    def y_max(self) -> int:
        return self.y_min + self.height

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return self.x_min <= x < self.x_max and self.y_min <= y < self.y_max


class BoardGrid:
    """Occupied cells of the playfield, keyed by (x, y) with y growing upward.

    Only in-bounds cells are ever stored. Each occupied cell carries an
    optional tag (the tetromino kind) that the simulation itself ignores.
    """

    def __init__(self, width: int, height: int):
        for name, v in (("width", width), ("height", height)):
            if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
                raise ConfigError(f"board {name} must be a positive integer, got {v!r}")
        self.bounds = Bounds.centered(width, height)
        self._cells: Dict[Cell, Optional[str]] = {}

    def is_occupied(self, cell: Cell) -> bool:
        return self.bounds.contains(cell) and cell in self._cells

    def tag(self, cell: Cell) -> Optional[str]:
        return self._cells.get(cell)

    def set_cell(self, cell: Cell, occupied: bool = True, tag: Optional[str] = None) -> None:
        """Mark or unmark a cell. Callers keep cells within bounds."""
        if occupied:
            self._cells[cell] = tag
        else:
            self._cells.pop(cell, None)

    def set_cells(self, cells: Iterable[Cell], tag: Optional[str] = None) -> None:
        for c in cells:
            self._cells[c] = tag

    def clear_cells(self, cells: Iterable[Cell]) -> None:
        for c in cells:
            self._cells.pop(c, None)

    def clear_all(self) -> None:
        self._cells.clear()

    def occupied(self) -> Dict[Cell, Optional[str]]:
        return dict(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def is_row_full(self, row: int) -> bool:
        b = self.bounds
        return all((x, row) in self._cells for x in range(b.x_min, b.x_max))

    def clear_full_rows(self) -> int:
        """Clear full rows bottom-up and collapse the rows above them.

        After a clear the same row index is examined again, since the row
        shifted into it may be full as well. Returns the number of rows cleared.
        """
        b = self.bounds
        cleared = 0
        row = b.y_min
        while row < b.y_max:
            if self.is_row_full(row):
                self._collapse(row)
                cleared += 1
            else:
                row += 1
        if cleared:
            logger.debug("cleared %d row(s)", cleared)
        return cleared

    def _collapse(self, row: int) -> None:
        b = self.bounds
        for x in range(b.x_min, b.x_max):
            self._cells.pop((x, row), None)
        # copy each row from the one above; the row above y_max - 1 is always empty
        for y in range(row, b.y_max):
            for x in range(b.x_min, b.x_max):
                above = (x, y + 1)
                if above in self._cells:
                    self._cells[(x, y)] = self._cells.pop(above)
                else:
                    self._cells.pop((x, y), None)
