"""SRS rotation: rotation matrix, pivot handling and wall kicks"""
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tetris_board import BoardGrid
from tetris_collision import is_valid
from tetris_shapes import Cell, Pivot, TetrominoShape

# cos 90, sin 90, -sin 90, cos 90
ROTATION_MATRIX = (0, 1, -1, 0)

ROTATION_STATES = 4


@dataclass(frozen=True)
class Rotation:
    rotation_index: int
    cells: List[Cell]
    position: Cell


def wrap(value: int, lo: int, hi: int) -> int:
    """Wrap value into [lo, hi)."""
    return lo + (value - lo) % (hi - lo)


def rotate_cells(cells: Sequence[Cell], pivot: Pivot, direction: int) -> List[Cell]:
    """Rotate offsets a quarter turn; +1 is clockwise, -1 counter-clockwise.

    Half-offset shapes (I, O) turn around a cell corner, so their offsets are
    shifted by half a cell first and rounded up afterwards.
    """
    m0, m1, m2, m3 = ROTATION_MATRIX
    out: List[Cell] = []
    for x, y in cells:
        if pivot is Pivot.HALF_OFFSET:
            fx, fy = x - 0.5, y - 0.5
            nx = math.ceil(fx * m0 * direction + fy * m1 * direction)
            ny = math.ceil(fx * m2 * direction + fy * m3 * direction)
        else:
            nx = round(x * m0 * direction + y * m1 * direction)
            ny = round(x * m2 * direction + y * m3 * direction)
        out.append((int(nx), int(ny)))
    return out


def kick_index(rotation_index: int, direction: int, rows: int) -> int:
    """Kick table row for turning away from rotation_index.

    Each orientation owns two interleaved rows: clockwise at 2*i and
    counter-clockwise at 2*i - 1.
    """
    index = rotation_index * 2
    if direction < 0:
        index -= 1
    return wrap(index, 0, rows)


def resolve_rotation(shape: TetrominoShape, cells: Sequence[Cell], rotation_index: int,
                     position: Cell, direction: int, board: BoardGrid) -> Optional[Rotation]:
    """Try to turn the piece, testing the kick alternatives in order.

    Returns the committed rotation, or None when every alternative collides.
    Inputs are never mutated, so a rejected turn leaves no trace.
    """
    if direction not in (1, -1):
        raise ValueError(f"rotation direction must be 1 or -1, got {direction!r}")
    new_index = wrap(rotation_index + direction, 0, ROTATION_STATES)
    trial = rotate_cells(cells, shape.pivot, direction)

    row = shape.kicks[kick_index(rotation_index, direction, len(shape.kicks))]
    px, py = position
    for dx, dy in ((0, 0),) + tuple(row):
        candidate = (px + dx, py + dy)
        if is_valid(trial, candidate, board):
            return Rotation(new_index, trial, candidate)
    return None
