"""Ghost piece: where the active piece would come to rest"""
from dataclasses import dataclass
from typing import List, Tuple

from tetris_board import BoardGrid
from tetris_collision import absolute_cells, is_valid
from tetris_piece import ActivePiece
from tetris_shapes import Cell


@dataclass(frozen=True)
class Ghost:
    position: Cell
    cells: Tuple[Cell, ...]

    def absolute_cells(self) -> List[Cell]:
        return absolute_cells(self.cells, self.position)


def project(piece: ActivePiece, board: BoardGrid) -> Ghost:
    """Scan down from the piece's row and keep the lowest valid row above the first collision."""
    cells = tuple(piece.cells)
    x, current = piece.position
    landing = piece.position
    with piece.lifted():
        for row in range(current, board.bounds.y_min - 2, -1):
            if not is_valid(cells, (x, row), board):
                break
            landing = (x, row)
    return Ghost(landing, cells)
