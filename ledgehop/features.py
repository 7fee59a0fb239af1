"""ledgehop/features.py — Stateless feature extraction from the tile grid.

Every scan is bounded by a small fixed cap or by the grid height, and reads
tiles through a TileLookup, so none of these functions can index past the
grid or raise. Screen rows grow downward: "up" is ty - 1, "ahead" is
tx + direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ledgehop.config import AgentConfig
from ledgehop.constants import EMPTY, GAP_BAND, GAP_SCAN_CAP, STAIRS_SCAN_CAP
from ledgehop.geometry import Rect
from ledgehop.snapshot import Snapshot, Threat, TileLookup, split_threats


@dataclass(frozen=True)
class Features:
    """Everything the jump state machine and composer read for one tick."""

    direction: int = 1
    wall_height: int = 0
    staircase_length: int = 0
    gap_width: int = 0
    ceiling: int = -1


NO_FEATURES = Features()


# ---------------------------------------------------------------------------
# Threats
# ---------------------------------------------------------------------------

def nearest_threat(enemies: Sequence[float], rect: Rect) -> Threat | None:
    """Return the first enemy inside *rect*, in sequence order.

    "Nearest" is the engine's ordering, not a distance search.
    """
    for threat in split_threats(enemies):
        if rect.contains(threat.x, threat.y):
            return threat
    return None


# ---------------------------------------------------------------------------
# Terrain probes
# ---------------------------------------------------------------------------

def wall_height(
    lookup: TileLookup,
    tx: int,
    ty: int,
    direction: int = 1,
    rows: int | None = None,
) -> int:
    """Count contiguous solid tiles in the column ahead, from row ty upward.

    With *rows* set, a player below the bottom row sees no wall.
    """
    if rows is not None and ty >= rows:
        return 0
    col = tx + direction
    height = 0
    for y in range(ty, -1, -1):
        if lookup(col, y) == EMPTY:
            break
        height += 1
    return height


def staircase_length(
    lookup: TileLookup,
    tx: int,
    ty: int,
    direction: int = 1,
    cap: int = STAIRS_SCAN_CAP,
) -> int:
    """Walk diagonally up-and-ahead while cells are solid, at most *cap* steps."""
    steps = 0
    for k in range(1, cap + 1):
        y = ty - k
        if y < 0 or lookup(tx + k * direction, y) == EMPTY:
            break
        steps += 1
    return steps


def gap_width(
    lookup: TileLookup,
    tx: int,
    ty: int,
    direction: int = 1,
    cap: int = GAP_SCAN_CAP,
    band: int = GAP_BAND,
) -> int:
    """Count empty columns ahead before the first column with footing.

    A column has footing if any cell in rows ty..ty+band is solid. The scan
    covers the column directly ahead plus *cap* more.
    """
    width = 0
    for k in range(1, cap + 2):
        col = tx + k * direction
        if any(lookup(col, ty + dy) != EMPTY for dy in range(band + 1)):
            break
        width += 1
    return width


def ceiling_clearance(
    lookup: TileLookup,
    tx: int,
    ty: int,
    direction: int = 1,
    rows: int | None = None,
) -> int:
    """Rows to the nearest solid tile straight above or diagonally ahead-above.

    Returns -1 when nothing solid lies between the player's row and the top.
    With *rows* set, rows below the bottom of the grid are skipped.
    """
    first = 1 if rows is None else max(1, ty - rows + 1)
    for d in range(first, ty + 1):
        y = ty - d
        if lookup(tx, y) != EMPTY or lookup(tx + direction, y) != EMPTY:
            return d
    return -1


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------

def extract_features(
    snapshot: Snapshot,
    lookup: TileLookup,
    direction: int,
    config: AgentConfig,
) -> Features:
    """Run every enabled probe ahead of the player in *direction*."""
    tx, ty = snapshot.tile_x, snapshot.tile_y
    rows = snapshot.tiles.shape[1]
    stairs = 0
    if config.use_stairs:
        stairs = staircase_length(lookup, tx, ty, direction, config.stairs_cap)
    gap = 0
    if config.use_gaps:
        gap = gap_width(lookup, tx, ty, direction, config.gap_cap, config.gap_band)
    return Features(
        direction=direction,
        wall_height=wall_height(lookup, tx, ty, direction, rows),
        staircase_length=stairs,
        gap_width=gap,
        ceiling=ceiling_clearance(lookup, tx, ty, direction, rows),
    )
