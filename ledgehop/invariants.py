"""ledgehop/invariants.py — Invariant checker for recorded agent trajectories.

Scans a recorded trajectory (one record per tick) and flags states the
decision pipeline must never produce. This is a library module — tests and
the scenario runner import it and assert on results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from ledgehop.constants import DRIFT_CAP

# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class RecordLike(Protocol):
    """Minimal interface for per-tick records accepted by the checker.

    cause is the jump cause held during the tick; next_cause, target and
    elapsed describe the jump state carried into the following tick.
    """

    tick: int
    actions: list[str]
    cause: str
    next_cause: str
    target: int
    elapsed: int
    drift: int


# ---------------------------------------------------------------------------
# Violation
# ---------------------------------------------------------------------------


@dataclass
class Violation:
    """A single invariant violation."""

    tick: int
    invariant: str
    details: str
    severity: str  # "error" or "warning"


# ---------------------------------------------------------------------------
# Individual checkers
# ---------------------------------------------------------------------------


def _check_jump_state(records: Sequence[RecordLike]) -> list[Violation]:
    violations: list[Violation] = []
    for rec in records:
        if rec.next_cause == "none":
            if rec.elapsed != 0 or rec.target != -1:
                violations.append(Violation(
                    tick=rec.tick,
                    invariant="idle_jump_not_reset",
                    details=(
                        f"cause=none but elapsed={rec.elapsed} "
                        f"target={rec.target} (expected 0 / -1)"
                    ),
                    severity="error",
                ))
            continue
        if rec.elapsed <= 0:
            violations.append(Violation(
                tick=rec.tick,
                invariant="active_jump_zero_elapsed",
                details=f"cause={rec.next_cause} carried with elapsed={rec.elapsed}",
                severity="error",
            ))
        if rec.elapsed > rec.target:
            violations.append(Violation(
                tick=rec.tick,
                invariant="jump_overran_target",
                details=(
                    f"cause={rec.next_cause} elapsed={rec.elapsed} "
                    f"exceeds target={rec.target}"
                ),
                severity="error",
            ))
    return violations


def _check_jump_output(records: Sequence[RecordLike]) -> list[Violation]:
    violations: list[Violation] = []
    for rec in records:
        jumping = "jump" in rec.actions
        if jumping and rec.cause == "none":
            violations.append(Violation(
                tick=rec.tick,
                invariant="jump_without_cause",
                details="JUMP asserted with no active jump cause",
                severity="error",
            ))
        elif not jumping and rec.cause != "none":
            violations.append(Violation(
                tick=rec.tick,
                invariant="cause_without_jump",
                details=f"cause={rec.cause} active but JUMP not asserted",
                severity="error",
            ))
    return violations


def _check_drift(records: Sequence[RecordLike], drift_cap: int) -> list[Violation]:
    violations: list[Violation] = []
    for rec in records:
        if rec.drift < 0:
            violations.append(Violation(
                tick=rec.tick,
                invariant="drift_negative",
                details=f"drift counter is {rec.drift}",
                severity="error",
            ))
        elif drift_cap > 0 and rec.drift >= drift_cap:
            violations.append(Violation(
                tick=rec.tick,
                invariant="drift_at_cap",
                details=f"drift counter {rec.drift} reached cap {drift_cap}",
                severity="error",
            ))
        if "left" not in rec.actions and rec.drift != 0:
            violations.append(Violation(
                tick=rec.tick,
                invariant="drift_without_left",
                details=f"LEFT released but drift counter is {rec.drift}",
                severity="warning",
            ))
    return violations


def _check_horizontal(records: Sequence[RecordLike]) -> list[Violation]:
    violations: list[Violation] = []
    for rec in records:
        if "left" in rec.actions and "right" in rec.actions:
            violations.append(Violation(
                tick=rec.tick,
                invariant="left_and_right",
                details="LEFT and RIGHT asserted on the same tick",
                severity="error",
            ))
    return violations


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_invariants(
    records: Sequence[RecordLike],
    drift_cap: int = DRIFT_CAP,
) -> list[Violation]:
    """Scan a trajectory for decision-pipeline invariant violations.

    Args:
        records: Per-tick record list.
        drift_cap: The agent's drift cap; 0 skips the cap check.

    Returns:
        List of Violation objects, sorted by tick.
    """
    violations: list[Violation] = []
    violations.extend(_check_jump_state(records))
    violations.extend(_check_jump_output(records))
    violations.extend(_check_drift(records, drift_cap))
    violations.extend(_check_horizontal(records))
    violations.sort(key=lambda v: v.tick)
    return violations
