"""Uniform piece randomizer"""
import random
from typing import Iterable, Optional

from tetris_errors import ConfigError


class UniformRandom:
    """Picks every kind with equal probability; repeats and droughts are allowed."""

    def __init__(self, kinds: Iterable[str], seed: Optional[int] = None):
        self.pieces = list(kinds)
        if not self.pieces:
            raise ConfigError("no tetromino kinds to choose from")
        self._random = random.Random(seed)

    def next_piece(self) -> str:
        return self._random.choice(self.pieces)
