"""
Rendering helpers.

- Pre-render one solid cell and one ghost outline Surface per tetromino kind.
- Pre-render the static background (grid) once.
- Draw order each frame: background, occupied cells (locked blocks and the
  active piece, which lives in the board while falling), then ghost outlines
  on cells that are still empty.
"""
from typing import Dict, Tuple

import pygame

from tetris_board import BoardGrid
from tetris_ghost import Ghost
from tetris_layout import Dims

# Colors per tetromino kind
COLORS: Dict[str, Tuple[int, int, int]] = {
    "I": (102, 224, 255),
    "J": (106, 119, 255),
    "L": (255, 158, 94),
    "O": (255, 224, 102),
    "S": (94, 224, 142),
    "T": (200, 119, 255),
    "Z": (255, 102, 119),
}
FALLBACK_COLOR = (180, 180, 200)


class RenderAssets:
    """Holds pre-rendered surfaces for fast blitting."""
    def __init__(self, dims: Dims, board: BoardGrid):
        self.dims = dims
        self.bounds = board.bounds
        self._make_static()
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10, 13, 34))
        grid_col = (40, 50, 90)
        for x in range(self.bounds.width + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.bounds.height + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    def _sprites(self, kind) -> Tuple[pygame.Surface, pygame.Surface]:
        # built lazily so tags outside COLORS still draw
        if kind not in self.cell_surf:
            c = self.dims.cell
            col = COLORS.get(kind, FALLBACK_COLOR)
            s = pygame.Surface((c - 2, c - 2))
            s.fill(col)
            g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0, 0, c - 8, c - 8), 2)
            self.cell_surf[kind], self.ghost_surf[kind] = s, g
        return self.cell_surf[kind], self.ghost_surf[kind]

    def draw(self, screen: pygame.Surface, board: BoardGrid, ghost: Ghost, kind: str):
        screen.blit(self.bg, (0, 0))
        for cell, tag in board.occupied().items():
            x, y = self.dims.cell_origin(self.bounds, cell)
            screen.blit(self._sprites(tag)[0], (x + 1, y + 1))
        outline = self._sprites(kind)[1]
        for cell in ghost.absolute_cells():
            if board.is_occupied(cell) or not self.bounds.contains(cell):
                continue
            x, y = self.dims.cell_origin(self.bounds, cell)
            screen.blit(outline, (x + 4, y + 4))
