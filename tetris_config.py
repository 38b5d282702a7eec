"""Session configuration: editable defaults and the validated game config"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from tetris_board import Bounds
from tetris_errors import ConfigError
from tetris_shapes import Cell, ShapeCatalog

CONFIG: Dict[str, Any] = {
    "CELL_SIZE": 32,
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "SPAWN_X": -1,
    "SPAWN_Y": 8,
    "STEP_DELAY_MS": 1000,
    "LOCK_DELAY_MS": 500,
    "SEED": None,
    "FPS": 60,
    "LOG_LEVEL": "INFO",
}


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True)
class GameConfig:
    """Fixed for the lifetime of a session. Delays are in seconds.

    Every catalog shape must fit inside the board at the spawn position;
    a spawn blocked by locked cells is a game over, but one that leaves
    the bounds is a ConfigError.
    """
    width: int = 10
    height: int = 20
    spawn: Cell = (-1, 8)
    step_delay: float = 1.0
    lock_delay: float = 0.5
    catalog: ShapeCatalog = field(default_factory=ShapeCatalog.standard)
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("width", "height"):
            v = getattr(self, name)
            if not _is_int(v) or v <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {v!r}")
        spawn = self.spawn
        if not isinstance(spawn, (tuple, list)) or len(spawn) != 2 or not all(_is_int(v) for v in spawn):
            raise ConfigError(f"spawn must be an integer (x, y) pair, got {self.spawn!r}")
        for name in ("step_delay", "lock_delay"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, (int, float)) or v <= 0:
                raise ConfigError(f"{name} must be a positive duration, got {v!r}")
        if not isinstance(self.catalog, ShapeCatalog):
            raise ConfigError("catalog must be a ShapeCatalog")
        object.__setattr__(self, "spawn", tuple(spawn))
        bounds = Bounds.centered(self.width, self.height)
        sx, sy = self.spawn
        for shape in self.catalog:
            if not all(bounds.contains((sx + x, sy + y)) for x, y in shape.cells):
                raise ConfigError(f"{shape.kind} does not fit the board at spawn {self.spawn}")

    @classmethod
    def from_dict(cls, values: Optional[Mapping[str, Any]] = None,
                  catalog: Optional[ShapeCatalog] = None) -> "GameConfig":
        """Build a config from CONFIG-style keys, overlaying values on the defaults."""
        c = dict(CONFIG)
        if values:
            c.update(values)
        return cls(
            width=c["BOARD_WIDTH"],
            height=c["BOARD_HEIGHT"],
            spawn=(c["SPAWN_X"], c["SPAWN_Y"]),
            step_delay=c["STEP_DELAY_MS"] / 1000.0,
            lock_delay=c["LOCK_DELAY_MS"] / 1000.0,
            catalog=catalog if catalog is not None else ShapeCatalog.standard(),
            seed=c["SEED"],
        )
