"""ledgehop/jump.py — Jump state machine: which hazard may start a jump, and for how long.

At most one JumpCause is active. Each tick the transition table below is
evaluated in order; every rule sees the state left by the rules before it,
and may only fire from the causes listed in its allowed set. Once a jump is
running it is held until its target duration elapses.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable

from ledgehop.config import AgentConfig
from ledgehop.features import Features
from ledgehop.snapshot import Snapshot, Threat

logger = logging.getLogger(__name__)


class JumpCause(enum.Enum):
    NONE = "none"
    THREAT = "threat"
    WALL = "wall"
    GAP = "gap"
    STAIRS = "stairs"


@dataclass(frozen=True)
class JumpState:
    """Active jump cause, its target duration, and ticks held so far."""

    cause: JumpCause = JumpCause.NONE
    target: int = -1
    elapsed: int = 0

    @property
    def active(self) -> bool:
        return self.cause is not JumpCause.NONE


IDLE = JumpState()


def start_jump(cause: JumpCause, duration: int) -> JumpState:
    return JumpState(cause=cause, target=duration, elapsed=0)


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------

def threat_duration(
    threat: Threat, snapshot: Snapshot, features: Features, config: AgentConfig
) -> int | None:
    """Hold time for a jump at *threat*; None means do not jump.

    dy > 0 means the threat is below the player (screen y grows downward).
    """
    if not config.refine_threats:
        return config.threat_duration
    dy = threat.y - snapshot.player_y
    dx = abs(threat.x - snapshot.player_x)
    if abs(dy) <= config.threat_level_band:
        return config.threat_level_duration
    if dy < 0:
        if dx <= config.threat_close_x:
            if features.ceiling < 0:
                return config.threat_high_duration
            return max(1, features.ceiling - 1)
        return config.threat_duration
    if dy > config.threat_far_below:
        return None
    return config.threat_below_duration


def wall_duration(height: int, config: AgentConfig) -> int:
    if height <= config.wall_short_height:
        return config.wall_short_duration
    return height + config.wall_margin


# ---------------------------------------------------------------------------
# Transition table
# ---------------------------------------------------------------------------

DurationFn = Callable[[Threat | None, Snapshot, Features, AgentConfig], "int | None"]


@dataclass(frozen=True)
class JumpRule:
    cause: JumpCause
    allowed_from: frozenset[JumpCause]
    needs_ground: bool
    duration: DurationFn


def _threat_rule(threat, snapshot, features, config):
    if threat is None:
        return None
    return threat_duration(threat, snapshot, features, config)


def _wall_rule(threat, snapshot, features, config):
    if features.wall_height <= 0:
        return None
    return wall_duration(features.wall_height, config)


def _stairs_rule(threat, snapshot, features, config):
    if features.staircase_length <= config.stairs_min:
        return None
    return features.staircase_length + config.stairs_margin


def _gap_rule(threat, snapshot, features, config):
    if features.gap_width <= 0:
        return None
    return config.gap_duration


_FROM_NONE = frozenset({JumpCause.NONE})

JUMP_RULES: tuple[JumpRule, ...] = (
    JumpRule(JumpCause.THREAT, _FROM_NONE, True, _threat_rule),
    JumpRule(JumpCause.WALL, _FROM_NONE, True, _wall_rule),
    JumpRule(JumpCause.STAIRS, frozenset({JumpCause.NONE, JumpCause.WALL}), False, _stairs_rule),
    JumpRule(JumpCause.GAP, _FROM_NONE, False, _gap_rule),
)


def plan_jump(
    state: JumpState,
    threat: Threat | None,
    snapshot: Snapshot,
    features: Features,
    config: AgentConfig,
) -> JumpState:
    """Apply the transition table to *state* and return the resulting state."""
    for rule in JUMP_RULES:
        if state.cause not in rule.allowed_from:
            continue
        if rule.needs_ground and not snapshot.on_ground:
            continue
        duration = rule.duration(threat, snapshot, features, config)
        if duration is None or duration < 1:
            continue
        logger.debug(
            "jump %s -> %s for %d ticks", state.cause.value, rule.cause.value, duration
        )
        state = start_jump(rule.cause, duration)
    return state


def advance_jump(state: JumpState) -> tuple[bool, JumpState]:
    """Hold the active jump for one tick.

    Returns (jump_asserted, next_state). The final tick of a jump still
    asserts JUMP; the state resets to IDLE after it.
    """
    if not state.active:
        return False, IDLE
    elapsed = state.elapsed + 1
    if elapsed >= state.target:
        logger.debug("jump %s released after %d ticks", state.cause.value, elapsed)
        return True, IDLE
    return True, JumpState(state.cause, state.target, elapsed)
