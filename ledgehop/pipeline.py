"""ledgehop/pipeline.py — One tick of the decision pipeline as a pure function.

decide() maps (snapshot, state, config) to (actions, next state). Agents hold
the state between ticks; nothing here keeps any.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ledgehop.composer import compose_actions, empty_actions, is_falling, steer
from ledgehop.config import HAZARD, AgentConfig
from ledgehop.features import NO_FEATURES, Features, extract_features, nearest_threat
from ledgehop.geometry import engagement_rect
from ledgehop.jump import IDLE, JumpCause, JumpState, advance_jump, plan_jump
from ledgehop.snapshot import Snapshot, SnapshotError, Threat, grid_lookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentState:
    """Scalars carried from one tick to the next."""

    jump: JumpState = IDLE
    drift: int = 0
    prev_y: float = 0.0


@dataclass
class Decision:
    """Result of one tick: buttons, next state, and what was seen.

    cause is the jump cause held during this tick (NONE when JUMP is off).
    """

    actions: np.ndarray
    state: AgentState
    features: Features
    threat: Threat | None
    cause: JumpCause


def initial_state(snapshot: Snapshot | None = None) -> AgentState:
    prev_y = snapshot.player_y if snapshot is not None else 0.0
    return AgentState(jump=IDLE, drift=0, prev_y=prev_y)


def decide(
    snapshot: Snapshot,
    state: AgentState,
    config: AgentConfig = HAZARD,
    out: np.ndarray | None = None,
) -> Decision:
    """Run one tick: threat → steer → features → jump → compose.

    If *out* is given it is overwritten in place and returned as
    Decision.actions. A malformed snapshot produces an all-False vector and
    an idle state instead of an exception.
    """
    if out is None:
        out = empty_actions()

    try:
        snapshot.validate()
    except SnapshotError as exc:
        logger.warning("ignoring malformed snapshot: %s", exc)
        out[:] = False
        return Decision(
            actions=out,
            state=AgentState(jump=IDLE, drift=0, prev_y=state.prev_y),
            features=NO_FEATURES,
            threat=None,
            cause=JumpCause.NONE,
        )

    lookup = grid_lookup(snapshot.tiles, solid_edges=config.solid_edges)
    rect = engagement_rect(
        snapshot.player_x,
        snapshot.player_y,
        config.engage_half_width,
        config.engage_half_height,
    )
    threat = nearest_threat(snapshot.enemies, rect)

    if config.steer:
        left, drift = steer(threat, snapshot.player_x, state.drift, config.drift_cap)
    else:
        left, drift = False, 0
    direction = -1 if left else 1

    features = extract_features(snapshot, lookup, direction, config)
    planned = plan_jump(state.jump, threat, snapshot, features, config)
    jump, next_jump = advance_jump(planned)

    falling = is_falling(state.prev_y, snapshot.player_y)
    compose_actions(out, left, jump, features, falling, config)

    return Decision(
        actions=out,
        state=AgentState(jump=next_jump, drift=drift, prev_y=snapshot.player_y),
        features=features,
        threat=threat,
        cause=planned.cause,
    )
