# tetris_layout.py
from dataclasses import dataclass
from typing import Tuple

from tetris_board import Bounds
from tetris_shapes import Cell


@dataclass
class Dims:
    cell: int
    margin: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

    def cell_origin(self, bounds: Bounds, cell: Cell) -> Tuple[int, int]:
        """Top-left pixel of a board cell; board y grows up, screen y grows down."""
        x, y = cell
        col = x - bounds.x_min
        row = bounds.y_max - 1 - y
        return self.board_x + col * self.cell, self.board_y + row * self.cell


def compute_dims(cols: int, rows: int, cell: int) -> Dims:
    margin = 16

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin
    total_h = margin + board_h + margin

    return Dims(
        cell=cell, margin=margin,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
    )
