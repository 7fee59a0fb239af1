"""ledgehop/composer.py — Steering, drift limiting, and the final action vector."""

from __future__ import annotations

import logging

import numpy as np

from ledgehop.config import AgentConfig
from ledgehop.constants import (
    ACTION_DOWN,
    ACTION_JUMP,
    ACTION_LEFT,
    ACTION_RIGHT,
    ACTION_SPEED,
    NUM_ACTIONS,
)
from ledgehop.features import Features
from ledgehop.snapshot import Threat

logger = logging.getLogger(__name__)


def empty_actions() -> np.ndarray:
    """Allocate an all-False action vector."""
    return np.zeros(NUM_ACTIONS, dtype=bool)


def steer(
    threat: Threat | None, player_x: float, drift: int, drift_cap: int
) -> tuple[bool, int]:
    """Decide whether to head left this tick.

    The agent turns toward a threat on its left. drift counts consecutive
    LEFT ticks; on reaching drift_cap LEFT is dropped for this tick and the
    count starts over. drift_cap <= 0 disables the limiter.

    Returns (left, new_drift).
    """
    left = threat is not None and threat.x < player_x
    if not left:
        return False, 0
    drift += 1
    if drift_cap > 0 and drift >= drift_cap:
        logger.debug("drift limiter released LEFT after %d ticks", drift)
        return False, 0
    return True, drift


def is_falling(prev_y: float, y: float) -> bool:
    """True when the player moved down since last tick (y grows downward)."""
    return prev_y < y


def wants_speed(features: Features, config: AgentConfig) -> bool:
    if not config.run:
        return False
    return (
        features.wall_height >= config.run_wall_height
        or features.gap_width > config.run_gap_width
        or features.staircase_length >= config.run_stairs_length
    )


def compose_actions(
    out: np.ndarray,
    left: bool,
    jump: bool,
    features: Features,
    falling: bool,
    config: AgentConfig,
) -> np.ndarray:
    """Overwrite *out* with this tick's buttons and return it.

    RIGHT is held unless heading left, or dropping toward a detected gap.
    """
    out[ACTION_LEFT] = left
    out[ACTION_RIGHT] = not left and not (features.gap_width > 0 and falling)
    out[ACTION_DOWN] = False
    out[ACTION_SPEED] = wants_speed(features, config)
    out[ACTION_JUMP] = jump
    return out
