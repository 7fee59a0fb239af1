"""Tests for ledgehop/composer.py — steering, drift limiter, and the action vector."""

from __future__ import annotations

import numpy as np

from ledgehop.composer import (
    compose_actions,
    empty_actions,
    is_falling,
    steer,
    wants_speed,
)
from ledgehop.config import BASIC, HAZARD
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

BEHIND = Threat(1.0, 10.0, 100.0)
AHEAD = Threat(1.0, 90.0, 100.0)


# ---------------------------------------------------------------------------
# steer / drift limiter
# ---------------------------------------------------------------------------

def test_no_threat_heads_right():
    assert steer(None, 50.0, 0, 15) == (False, 0)


def test_threat_ahead_heads_right_and_resets_drift():
    assert steer(AHEAD, 50.0, 7, 15) == (False, 0)


def test_threat_behind_heads_left():
    assert steer(BEHIND, 50.0, 0, 15) == (True, 1)


def test_threat_at_same_x_heads_right():
    assert steer(Threat(1.0, 50.0, 100.0), 50.0, 3, 15) == (False, 0)


def test_drift_limiter_fires_on_fifteenth_tick():
    drift = 0
    lefts = []
    for _ in range(15):
        left, drift = steer(BEHIND, 50.0, drift, 15)
        lefts.append(left)
    assert lefts[:14] == [True] * 14
    assert lefts[14] is False
    assert drift == 0


def test_drift_limiter_restarts_after_release():
    drift = 0
    for _ in range(15):
        _, drift = steer(BEHIND, 50.0, drift, 15)
    left, drift = steer(BEHIND, 50.0, drift, 15)
    assert left is True
    assert drift == 1


def test_drift_never_negative():
    drift = 0
    for i in range(40):
        threat = BEHIND if i % 7 else None
        _, drift = steer(threat, 50.0, drift, 15)
        assert 0 <= drift < 15


def test_drift_cap_zero_disables_limiter():
    drift = 0
    for _ in range(30):
        left, drift = steer(BEHIND, 50.0, drift, 0)
        assert left
    assert drift == 30


# ---------------------------------------------------------------------------
# is_falling / wants_speed
# ---------------------------------------------------------------------------

def test_is_falling():
    assert is_falling(100.0, 101.0)
    assert not is_falling(100.0, 100.0)
    assert not is_falling(100.0, 99.0)


def test_speed_thresholds():
    assert not wants_speed(Features(), HAZARD)
    assert not wants_speed(Features(wall_height=3), HAZARD)
    assert wants_speed(Features(wall_height=4), HAZARD)
    assert not wants_speed(Features(gap_width=4), HAZARD)
    assert wants_speed(Features(gap_width=5), HAZARD)
    assert not wants_speed(Features(staircase_length=3), HAZARD)
    assert wants_speed(Features(staircase_length=4), HAZARD)


def test_speed_disabled():
    assert not wants_speed(Features(wall_height=6, gap_width=5), BASIC)


# ---------------------------------------------------------------------------
# compose_actions
# ---------------------------------------------------------------------------

def test_empty_actions():
    out = empty_actions()
    assert out.dtype == bool
    assert out.shape == (NUM_ACTIONS,)
    assert not out.any()


def test_compose_plain_run():
    out = compose_actions(empty_actions(), False, False, Features(), False, HAZARD)
    assert out[ACTION_RIGHT]
    assert not out[ACTION_LEFT]
    assert not out[ACTION_JUMP]
    assert not out[ACTION_SPEED]
    assert not out[ACTION_DOWN]


def test_compose_overwrites_in_place():
    out = np.ones(NUM_ACTIONS, dtype=bool)
    result = compose_actions(out, False, True, Features(), False, HAZARD)
    assert result is out
    assert out[ACTION_JUMP]
    assert not out[ACTION_DOWN]
    assert not out[ACTION_LEFT]


def test_compose_left_excludes_right():
    out = compose_actions(empty_actions(), True, False, Features(), False, HAZARD)
    assert out[ACTION_LEFT]
    assert not out[ACTION_RIGHT]


def test_compose_falling_over_gap_stops_right():
    f = Features(gap_width=2)
    out = compose_actions(empty_actions(), False, True, f, True, HAZARD)
    assert not out[ACTION_RIGHT]
    assert out[ACTION_JUMP]


def test_compose_gap_not_falling_keeps_right():
    f = Features(gap_width=2)
    out = compose_actions(empty_actions(), False, True, f, False, HAZARD)
    assert out[ACTION_RIGHT]


def test_compose_falling_without_gap_keeps_right():
    out = compose_actions(empty_actions(), False, False, Features(), True, HAZARD)
    assert out[ACTION_RIGHT]
