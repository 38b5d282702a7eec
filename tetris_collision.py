"""Collision test shared by movement, rotation kicks and the ghost"""
from typing import Iterable, List

from tetris_board import BoardGrid
from tetris_shapes import Cell


def absolute_cells(cells: Iterable[Cell], position: Cell) -> List[Cell]:
    px, py = position
    return [(px + x, py + y) for x, y in cells]


def is_valid(cells: Iterable[Cell], position: Cell, board: BoardGrid) -> bool:
    """Return True if every cell at position is in bounds and unoccupied.

    The moving piece must already be lifted from the board, otherwise it
    collides with itself.
    """
    bounds = board.bounds
    for cell in absolute_cells(cells, position):
        if not bounds.contains(cell):
            return False
        if board.is_occupied(cell):
            return False
    return True
