"""ledgehop/constants.py — Action indices, tile geometry, and default tuning.

Defaults here feed AgentConfig; the presets in config.py override them.
"""

# ---------------------------------------------------------------------------
# Action vector layout
# ---------------------------------------------------------------------------

ACTION_LEFT = 0
ACTION_RIGHT = 1
ACTION_DOWN = 2
ACTION_SPEED = 3
ACTION_JUMP = 4

NUM_ACTIONS = 5

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

TILE_SIZE = 16
"""World units per screen tile."""

EMPTY = 0
SOLID = 1

# Engagement rectangle half extents (world units)
ENGAGE_HALF_WIDTH = 48.0
ENGAGE_HALF_HEIGHT = 64.0

# ---------------------------------------------------------------------------
# Scan caps (tiles)
# ---------------------------------------------------------------------------

STAIRS_SCAN_CAP = 4
GAP_SCAN_CAP = 4
"""Columns scanned beyond the first one ahead."""
GAP_BAND = 2
"""Rows below the player's row included in each gap column test."""

# ---------------------------------------------------------------------------
# Jump durations (ticks)
# ---------------------------------------------------------------------------

THREAT_DURATION = 4
THREAT_LEVEL_DURATION = 1
THREAT_BELOW_DURATION = 4
THREAT_HIGH_DURATION = 10
"""Threat above and close with no ceiling in range."""

THREAT_LEVEL_BAND = 16.0
THREAT_CLOSE_X = 32.0
THREAT_FAR_BELOW = 48.0

WALL_SHORT_HEIGHT = 1
WALL_SHORT_DURATION = 4
WALL_MARGIN = 4

STAIRS_MIN = 2
STAIRS_MARGIN = 6

GAP_DURATION = 5

# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------

DRIFT_CAP = 15
"""Consecutive LEFT ticks before the drift limiter force-clears LEFT."""

RUN_WALL_HEIGHT = 4
RUN_GAP_WIDTH = 4
RUN_STAIRS_LENGTH = 4
