"""ledgehop/scenarios/report — Jump spans, action timelines, and result files.

A scenario outcome is summarized as the jumps the agent made (cause, first
tick, ticks held), a one-string-per-tick action timeline, and the failed
expectations plus invariant violations grouped by invariant name.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import IO, TYPE_CHECKING, NamedTuple, Sequence

from ledgehop.agents.actions import ACTION_NAMES

if TYPE_CHECKING:
    from ledgehop.invariants import Violation
    from ledgehop.scenarios.runner import ScenarioOutcome, TickRecord


class JumpSpan(NamedTuple):
    cause: str
    start: int
    ticks: int


# ---------------------------------------------------------------------------
# Trajectory summaries
# ---------------------------------------------------------------------------

def jump_spans(trajectory: Sequence[TickRecord]) -> list[JumpSpan]:
    """Split the trajectory into held jumps.

    A span starts on a tick whose cause differs from the cause carried out of
    the previous tick, so a jump that ends and restarts straight away counts
    twice.
    """
    spans: list[JumpSpan] = []
    for i, rec in enumerate(trajectory):
        if rec.cause == "none":
            continue
        if not spans or i == 0 or trajectory[i - 1].next_cause != rec.cause:
            spans.append(JumpSpan(rec.cause, rec.tick, 1))
        else:
            last = spans[-1]
            spans[-1] = last._replace(ticks=last.ticks + 1)
    return spans


def action_timeline(trajectory: Sequence[TickRecord]) -> list[str]:
    """One string per tick: the initial of each asserted action, '.' otherwise.

    Slots follow the action vector order: ".R..J" is a tick holding RIGHT and JUMP.
    """
    return [
        "".join(
            name[0].upper() if name in rec.actions else "."
            for _, name in sorted(ACTION_NAMES.items())
        )
        for rec in trajectory
    ]


def group_violations(violations: Sequence[Violation]) -> dict[str, list[int]]:
    """Map invariant name to the ticks it was violated on, first seen first."""
    grouped: dict[str, list[int]] = {}
    for v in violations:
        grouped.setdefault(v.invariant, []).append(v.tick)
    return grouped


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

def format_outcome(outcome: ScenarioOutcome) -> list[str]:
    """Lines describing one outcome: a status line, then failures and violations."""
    status = "PASS" if outcome.success else "FAIL"
    spans = jump_spans(outcome.trajectory)
    jumps = " ".join(f"{s.cause}@{s.start}x{s.ticks}" for s in spans) or "-"
    lines = [
        f"{status}  {outcome.name:<24s} {outcome.agent:<7s} "
        f"{outcome.ticks:>4d} ticks  jumps: {jumps}"
    ]
    for failure in outcome.failures:
        lines.append(f"    expect  {failure}")
    severities = {v.invariant: v.severity for v in outcome.violations}
    for name, ticks in group_violations(outcome.violations).items():
        shown = ", ".join(str(t) for t in ticks[:5])
        if len(ticks) > 5:
            shown += ", ..."
        lines.append(f"    {severities[name]:<7s} {name} x{len(ticks)} (ticks {shown})")
    return lines


def print_report(
    results: Sequence[ScenarioOutcome],
    stream: IO[str] | None = None,
    quiet: bool = False,
) -> None:
    """Print every outcome (only failures when *quiet*) and a count line."""
    for outcome in results:
        if quiet and outcome.success:
            continue
        for line in format_outcome(outcome):
            print(line, file=stream)
    passed = sum(1 for r in results if r.success)
    print(
        f"\n{len(results)} scenarios: {passed} passed, {len(results) - passed} failed",
        file=stream,
    )


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def outcome_to_dict(outcome: ScenarioOutcome, include_trajectory: bool = False) -> dict:
    d = {
        "name": outcome.name,
        "agent": outcome.agent,
        "success": outcome.success,
        "reason": outcome.reason,
        "ticks": outcome.ticks,
        "wall_time_ms": round(outcome.wall_time_ms, 3),
        "metrics": outcome.metrics,
        "failures": outcome.failures,
        "violations": group_violations(outcome.violations),
        "jumps": [s._asdict() for s in jump_spans(outcome.trajectory)],
        "timeline": action_timeline(outcome.trajectory),
    }
    if include_trajectory:
        d["trajectory"] = [asdict(r) for r in outcome.trajectory]
    return d


def save_results(
    results: Sequence[ScenarioOutcome],
    path: Path | str,
    include_trajectory: bool = False,
) -> None:
    """Write outcomes to *path* as a JSON list, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [outcome_to_dict(r, include_trajectory) for r in results]
    path.write_text(json.dumps(data, indent=2) + "\n")
