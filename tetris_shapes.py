"""Tetromino shapes, pivot styles and SRS kick tables"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Tuple

from tetris_errors import ConfigError

Cell = Tuple[int, int]

CELL_COUNT = 4


class Pivot(Enum):
    INTEGER = "integer"          # pivot on a cell centre
    HALF_OFFSET = "half_offset"  # pivot on a cell corner (I, O)


# Spawn orientation offsets, y grows upward
CELLS: Dict[str, List[Cell]] = {
    "I": [(-1, 1), (0, 1), (1, 1), (2, 1)],
    "J": [(-1, 1), (-1, 0), (0, 0), (1, 0)],
    "L": [(1, 1), (-1, 0), (0, 0), (1, 0)],
    "O": [(0, 1), (1, 1), (0, 0), (1, 0)],
    "S": [(0, 1), (1, 1), (-1, 0), (0, 0)],
    "T": [(0, 1), (-1, 0), (0, 0), (1, 0)],
    "Z": [(-1, 1), (0, 1), (0, 0), (1, 0)],
}

# Rows: 0->R, R->0, R->2, 2->R, 2->L, L->2, L->0, 0->L
I_KICKS: List[List[Cell]] = [
    [(0, 0), (-2, 0), ( 1, 0), (-2, -1), ( 1,  2)],
    [(0, 0), ( 2, 0), (-1, 0), ( 2,  1), (-1, -2)],
    [(0, 0), (-1, 0), ( 2, 0), (-1,  2), ( 2, -1)],
    [(0, 0), ( 1, 0), (-2, 0), ( 1, -2), (-2,  1)],
    [(0, 0), ( 2, 0), (-1, 0), ( 2,  1), (-1, -2)],
    [(0, 0), (-2, 0), ( 1, 0), (-2, -1), ( 1,  2)],
    [(0, 0), ( 1, 0), (-2, 0), ( 1, -2), (-2,  1)],
    [(0, 0), (-1, 0), ( 2, 0), (-1,  2), ( 2, -1)],
]
JLOSTZ_KICKS: List[List[Cell]] = [
    [(0, 0), (-1, 0), (-1,  1), (0, -2), (-1, -2)],
    [(0, 0), ( 1, 0), ( 1, -1), (0,  2), ( 1,  2)],
    [(0, 0), ( 1, 0), ( 1, -1), (0,  2), ( 1,  2)],
    [(0, 0), (-1, 0), (-1,  1), (0, -2), (-1, -2)],
    [(0, 0), ( 1, 0), ( 1,  1), (0, -2), ( 1, -2)],
    [(0, 0), (-1, 0), (-1, -1), (0,  2), (-1,  2)],
    [(0, 0), (-1, 0), (-1, -1), (0,  2), (-1,  2)],
    [(0, 0), ( 1, 0), ( 1,  1), (0, -2), ( 1, -2)],
]

HALF_OFFSET_KINDS = ("I", "O")


@dataclass(frozen=True)
class TetrominoShape:
    kind: str
    cells: Tuple[Cell, ...]
    pivot: Pivot
    kicks: Tuple[Tuple[Cell, ...], ...]

    @staticmethod
    def build(kind: str, cells: Iterable[Cell], pivot: Pivot,
              kicks: Iterable[Iterable[Cell]]) -> "TetrominoShape":
        return TetrominoShape(
            kind,
            tuple((int(x), int(y)) for x, y in cells),
            pivot,
            tuple(tuple((int(dx), int(dy)) for dx, dy in row) for row in kicks),
        )

    @property
    def kick_shape(self) -> Tuple[int, int]:
        """(rows, alternatives) of the kick table."""
        return len(self.kicks), len(self.kicks[0]) if self.kicks else 0


class ShapeCatalog:
    """
    Immutable set of tetromino definitions, validated on construction.

    Every kind has exactly four distinct cells, and every kind's kick table
    is a non-empty rectangle with the same dimensions as all the others.
    """

    def __init__(self, shapes: Iterable[TetrominoShape]):
        self._shapes: Dict[str, TetrominoShape] = {}
        for shape in shapes:
            if shape.kind in self._shapes:
                raise ConfigError(f"duplicate tetromino kind {shape.kind!r}")
            self._validate(shape)
            self._shapes[shape.kind] = shape
        if not self._shapes:
            raise ConfigError("shape catalog is empty")
        dims = {s.kick_shape for s in self._shapes.values()}
        if len(dims) != 1:
            raise ConfigError(f"kick tables differ in size across kinds: {sorted(dims)}")

    @staticmethod
    def _validate(shape: TetrominoShape) -> None:
        if len(shape.cells) != CELL_COUNT:
            raise ConfigError(f"{shape.kind}: expected {CELL_COUNT} cells, got {len(shape.cells)}")
        if len(set(shape.cells)) != CELL_COUNT:
            raise ConfigError(f"{shape.kind}: cells overlap")
        if not shape.kicks:
            raise ConfigError(f"{shape.kind}: kick table is empty")
        width = len(shape.kicks[0])
        if width == 0 or any(len(row) != width for row in shape.kicks):
            raise ConfigError(f"{shape.kind}: kick table rows are ragged or empty")

    @classmethod
    def standard(cls) -> "ShapeCatalog":
        """The seven SRS tetrominoes."""
        return cls(
            TetrominoShape.build(
                kind,
                cells,
                Pivot.HALF_OFFSET if kind in HALF_OFFSET_KINDS else Pivot.INTEGER,
                I_KICKS if kind == "I" else JLOSTZ_KICKS,
            )
            for kind, cells in CELLS.items()
        )

    @property
    def kinds(self) -> List[str]:
        return list(self._shapes)

    def __getitem__(self, kind: str) -> TetrominoShape:
        return self._shapes[kind]

    def __contains__(self, kind: object) -> bool:
        return kind in self._shapes

    def __iter__(self) -> Iterator[TetrominoShape]:
        return iter(self._shapes.values())

    def __len__(self) -> int:
        return len(self._shapes)
