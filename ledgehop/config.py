"""ledgehop/config.py — Agent tuning: AgentConfig, presets, and YAML loading.

The three agent variants differ only in which features are switched on and
how jump durations are tuned, so each variant is a preset of one config.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path

import yaml

from ledgehop import constants as C


@dataclass(frozen=True)
class AgentConfig:
    """Every tuning value and feature switch the decision pipeline reads."""

    # Engagement rectangle
    engage_half_width: float = C.ENGAGE_HALF_WIDTH
    engage_half_height: float = C.ENGAGE_HALF_HEIGHT

    # Feature switches
    steer: bool = True
    refine_threats: bool = True
    use_gaps: bool = True
    use_stairs: bool = True
    run: bool = True
    solid_edges: bool = False

    # Threat jumps
    threat_duration: int = C.THREAT_DURATION
    threat_level_duration: int = C.THREAT_LEVEL_DURATION
    threat_below_duration: int = C.THREAT_BELOW_DURATION
    threat_high_duration: int = C.THREAT_HIGH_DURATION
    threat_level_band: float = C.THREAT_LEVEL_BAND
    threat_close_x: float = C.THREAT_CLOSE_X
    threat_far_below: float = C.THREAT_FAR_BELOW

    # Wall jumps
    wall_short_height: int = C.WALL_SHORT_HEIGHT
    wall_short_duration: int = C.WALL_SHORT_DURATION
    wall_margin: int = C.WALL_MARGIN

    # Staircase jumps
    stairs_cap: int = C.STAIRS_SCAN_CAP
    stairs_min: int = C.STAIRS_MIN
    stairs_margin: int = C.STAIRS_MARGIN

    # Gap jumps
    gap_cap: int = C.GAP_SCAN_CAP
    gap_band: int = C.GAP_BAND
    gap_duration: int = C.GAP_DURATION

    # Composer
    drift_cap: int = C.DRIFT_CAP
    run_wall_height: int = C.RUN_WALL_HEIGHT
    run_gap_width: int = C.RUN_GAP_WIDTH
    run_stairs_length: int = C.RUN_STAIRS_LENGTH

    def replace(self, **overrides) -> AgentConfig:
        """Return a copy with *overrides* applied.

        Raises:
            ValueError: If an override names a field AgentConfig does not have.
        """
        unknown = set(overrides) - set(_FIELD_NAMES)
        if unknown:
            raise ValueError(
                f"Unknown config keys: {sorted(unknown)}. "
                f"Valid keys: {sorted(_FIELD_NAMES)}"
            )
        return dataclasses.replace(self, **overrides)


_FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in dataclasses.fields(AgentConfig))


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

# Threats and walls only, fixed durations, always heading right.
BASIC = AgentConfig(
    engage_half_width=50.0,
    engage_half_height=50.0,
    steer=False,
    refine_threats=False,
    use_gaps=False,
    use_stairs=False,
    run=False,
    wall_short_height=255,  # every wall gets the fixed duration
    wall_short_duration=10,
    drift_cap=0,
)

# Adds gap jumps, refined threat jumps and running; no stairs or steering.
JUMPER = AgentConfig(
    engage_half_width=50.0,
    steer=False,
    use_stairs=False,
    drift_cap=0,
)

HAZARD = AgentConfig()

PRESETS: dict[str, AgentConfig] = {
    "basic": BASIC,
    "jumper": JUMPER,
    "hazard": HAZARD,
}


def resolve_config(preset: str = "hazard", overrides: dict | None = None) -> AgentConfig:
    """Look up a preset by name and apply optional overrides.

    Raises:
        KeyError: If *preset* is not a known preset name.
        ValueError: If an override key is unknown.
    """
    if preset not in PRESETS:
        raise KeyError(f"Unknown preset: {preset!r}. Available: {sorted(PRESETS)}")
    return PRESETS[preset].replace(**(overrides or {}))


def load_config(path: Path | str) -> AgentConfig:
    """Load an AgentConfig from YAML: ``{preset: name, <field>: value, ...}``."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    data = dict(data)
    preset = data.pop("preset", "hazard")
    return resolve_config(preset, data)
