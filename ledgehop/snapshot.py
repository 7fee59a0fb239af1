"""ledgehop/snapshot.py — Per-tick world snapshot and bounds-checked tile access.

The host hands the agent one Snapshot per tick. Every tile read in the
decision core goes through a TileLookup built by grid_lookup(), so scans
near the screen edge read a fixed fill value instead of indexing out of range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Sequence

import numpy as np

from ledgehop.constants import EMPTY, SOLID, TILE_SIZE

# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------

TileLookup = Callable[[int, int], int]
"""Callable that returns the cell code at screen tile (tile_x, tile_y)."""


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be interpreted."""


class Threat(NamedTuple):
    """One hostile actor: engine type id and world position."""

    kind: float
    x: float
    y: float


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the world for one tick.

    tiles is indexed tiles[tx, ty] with row 0 at the top of the screen.
    enemies is the engine's flat (id, x, y, id, x, y, ...) sequence.
    """

    player_x: float
    player_y: float
    tile_x: int
    tile_y: int
    tiles: np.ndarray
    enemies: Sequence[float] = field(default_factory=tuple)
    on_ground: bool = True

    def validate(self) -> None:
        """Raise SnapshotError if the snapshot is unusable."""
        if not isinstance(self.tiles, np.ndarray) or self.tiles.ndim != 2:
            raise SnapshotError(
                f"tile grid must be a 2-D array, got {type(self.tiles).__name__}"
                f" with shape {getattr(self.tiles, 'shape', None)}"
            )
        if not all(isinstance(t, (int, np.integer)) for t in (self.tile_x, self.tile_y)):
            raise SnapshotError(
                f"tile position must be integers, got ({self.tile_x!r}, {self.tile_y!r})"
            )
        try:
            finite = math.isfinite(float(self.player_x)) and math.isfinite(
                float(self.player_y)
            )
        except (TypeError, ValueError):
            finite = False
        if not finite:
            raise SnapshotError(
                f"player position is not finite: ({self.player_x}, {self.player_y})"
            )
        if not _is_finite_numeric(self.tiles):
            raise SnapshotError(
                f"tile grid must hold finite numbers, got dtype {self.tiles.dtype}"
            )
        try:
            enemies = np.asarray(self.enemies)
        except (TypeError, ValueError):
            enemies = None
        if enemies is None or enemies.ndim != 1 or not _is_finite_numeric(enemies):
            raise SnapshotError(
                f"enemies must be a flat sequence of finite numbers, got {self.enemies!r}"
            )


def _is_finite_numeric(values: np.ndarray) -> bool:
    if np.issubdtype(values.dtype, np.integer):
        return True
    if not np.issubdtype(values.dtype, np.floating):
        return False
    return bool(np.isfinite(values).all())


def split_threats(enemies: Sequence[float]) -> list[Threat]:
    usable = len(enemies) - len(enemies) % 3
    return [
        Threat(enemies[i], enemies[i + 1], enemies[i + 2])
        for i in range(0, usable, 3)
    ]


def snapshot_from_tiles(
    tiles: np.ndarray,
    tile_x: int,
    tile_y: int,
    enemies: Sequence[float] = (),
    on_ground: bool = True,
    player_y: float | None = None,
) -> Snapshot:
    """Build a Snapshot with the player centred in (tile_x, tile_y)."""
    px = tile_x * TILE_SIZE + TILE_SIZE / 2
    py = tile_y * TILE_SIZE + TILE_SIZE / 2 if player_y is None else player_y
    return Snapshot(
        player_x=px,
        player_y=py,
        tile_x=tile_x,
        tile_y=tile_y,
        tiles=tiles,
        enemies=tuple(enemies),
        on_ground=on_ground,
    )


# ---------------------------------------------------------------------------
# Tile access
# ---------------------------------------------------------------------------

def grid_lookup(tiles: np.ndarray, solid_edges: bool = False) -> TileLookup:
    """Wrap a (width, height) grid as a bounds-checked TileLookup.

    Reads outside the grid return EMPTY, or SOLID when solid_edges is set.
    """
    width, height = tiles.shape
    fill = SOLID if solid_edges else EMPTY

    def lookup(tx: int, ty: int) -> int:
        if 0 <= tx < width and 0 <= ty < height:
            return int(tiles[tx, ty])
        return fill

    return lookup
