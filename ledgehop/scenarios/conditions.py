"""ledgehop/scenarios/conditions — Expectation dataclass and trajectory checker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ledgehop.agents.actions import ACTION_INDEX
from ledgehop.jump import JumpCause

if TYPE_CHECKING:
    from ledgehop.invariants import Violation
    from ledgehop.scenarios.runner import TickRecord

VALID_EXPECT_TYPES: frozenset[str] = frozenset(
    {
        "jump_ticks",
        "action_always",
        "action_never",
        "action_at",
        "jump_cause_at",
        "no_violations",
    }
)

_VALID_CAUSES: frozenset[str] = frozenset(c.value for c in JumpCause)


@dataclass
class Expectation:
    type: str
    value: int | bool | None = None
    action: str | None = None
    tick: int | None = None
    cause: str | None = None

    def validate(self) -> None:
        """Raise ValueError if required fields for this type are missing."""
        if self.type not in VALID_EXPECT_TYPES:
            raise ValueError(f"Unknown expectation type: {self.type!r}")
        if self.type in ("action_always", "action_never", "action_at"):
            if self.action not in ACTION_INDEX:
                raise ValueError(
                    f"{self.type} needs an action from {sorted(ACTION_INDEX)}, "
                    f"got {self.action!r}"
                )
        if self.type in ("action_at", "jump_cause_at") and self.tick is None:
            raise ValueError(f"{self.type} needs a tick")
        if self.type == "jump_cause_at" and self.cause not in _VALID_CAUSES:
            raise ValueError(
                f"jump_cause_at needs a cause from {sorted(_VALID_CAUSES)}, "
                f"got {self.cause!r}"
            )
        if self.type == "jump_ticks" and self.value is None:
            raise ValueError("jump_ticks needs a value")


# ---------------------------------------------------------------------------
# Checking
# ---------------------------------------------------------------------------


def _record_at(trajectory: list[TickRecord], tick: int) -> TickRecord | None:
    if 0 <= tick < len(trajectory):
        return trajectory[tick]
    return None


def _check_one(
    exp: Expectation,
    trajectory: list[TickRecord],
    violations: list[Violation],
) -> str | None:
    """Evaluate one expectation. Returns a failure message, or None if it holds."""
    if exp.type == "jump_ticks":
        count = sum(1 for r in trajectory if "jump" in r.actions)
        if count != exp.value:
            return f"jump_ticks: expected {exp.value}, got {count}"

    elif exp.type == "action_always":
        for r in trajectory:
            if exp.action not in r.actions:
                return f"action_always: {exp.action} released at tick {r.tick}"

    elif exp.type == "action_never":
        for r in trajectory:
            if exp.action in r.actions:
                return f"action_never: {exp.action} asserted at tick {r.tick}"

    elif exp.type == "action_at":
        rec = _record_at(trajectory, exp.tick)
        if rec is None:
            return f"action_at: tick {exp.tick} was never run"
        expected = True if exp.value is None else bool(exp.value)
        if (exp.action in rec.actions) != expected:
            return (
                f"action_at: {exp.action} expected {expected} "
                f"at tick {exp.tick}, actions were {rec.actions}"
            )

    elif exp.type == "jump_cause_at":
        rec = _record_at(trajectory, exp.tick)
        if rec is None:
            return f"jump_cause_at: tick {exp.tick} was never run"
        if rec.cause != exp.cause:
            return (
                f"jump_cause_at: expected {exp.cause} at tick {exp.tick}, "
                f"got {rec.cause}"
            )

    elif exp.type == "no_violations":
        errors = [v for v in violations if v.severity == "error"]
        if errors:
            first = errors[0]
            return (
                f"no_violations: {len(errors)} error(s), first "
                f"{first.invariant} at tick {first.tick}"
            )

    return None


def check_expectations(
    expectations: list[Expectation],
    trajectory: list[TickRecord],
    violations: list[Violation],
) -> list[str]:
    """Check every expectation against a finished trajectory.

    Returns the failure messages, empty when everything held.
    """
    failures: list[str] = []
    for exp in expectations:
        message = _check_one(exp, trajectory, violations)
        if message is not None:
            failures.append(message)
    return failures
