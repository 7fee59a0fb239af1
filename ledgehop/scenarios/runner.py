"""ledgehop/scenarios/runner — Scenario execution engine.

Feeds a scenario's scene to an agent tick by tick, recording what the agent
saw and did, then checks invariants and expectations.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

from ledgehop.agents.actions import actions_to_names
from ledgehop.agents.registry import resolve_agent
from ledgehop.invariants import Violation, check_invariants
from ledgehop.scenarios.conditions import check_expectations
from ledgehop.scenarios.loader import ScenarioDef
from ledgehop.scenarios.report import jump_spans
from ledgehop.snapshot import Snapshot

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass
class TickRecord:
    """Per-tick snapshot of agent input, output, and carried state."""

    tick: int
    y: float
    on_ground: bool
    actions: list[str]
    cause: str
    next_cause: str
    target: int
    elapsed: int
    drift: int
    wall_height: int
    staircase_length: int
    gap_width: int
    ceiling: int
    threat: bool


@dataclass
class ScenarioOutcome:
    """Result of executing a scenario to completion."""

    name: str
    agent: str
    success: bool
    reason: str
    ticks: int
    failures: list[str]
    violations: list[Violation]
    metrics: dict[str, Any]
    trajectory: list[TickRecord] = field(default_factory=list)
    wall_time_ms: float = 0.0


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------


def scenario_snapshot(scenario_def: ScenarioDef, tick: int) -> Snapshot:
    """The snapshot the host would deliver on *tick*."""
    y = scenario_def.player_y
    if scenario_def.y_path is not None:
        y = scenario_def.y_path[tick]
    on_ground = scenario_def.on_ground
    if scenario_def.ground_path is not None:
        on_ground = scenario_def.ground_path[tick]
    return Snapshot(
        player_x=scenario_def.player_x,
        player_y=y,
        tile_x=scenario_def.player_tile[0],
        tile_y=scenario_def.player_tile[1],
        tiles=scenario_def.tiles,
        enemies=tuple(scenario_def.enemies),
        on_ground=on_ground,
    )


def _metrics(trajectory: list[TickRecord]) -> dict[str, Any]:
    def count(name: str) -> int:
        return sum(1 for r in trajectory if name in r.actions)

    return {
        "jump_ticks": count("jump"),
        "left_ticks": count("left"),
        "right_ticks": count("right"),
        "speed_ticks": count("speed"),
        "jumps_started": len(jump_spans(trajectory)),
    }


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def run_scenario(scenario_def: ScenarioDef) -> ScenarioOutcome:
    """Execute a single scenario to completion.

    Resolves the agent, initializes it on the tick-0 snapshot, runs every
    tick, and returns a ScenarioOutcome with trajectory, violations and
    failed expectations.
    """
    agent = resolve_agent(scenario_def.agent, scenario_def.agent_params)
    agent.initialize(scenario_snapshot(scenario_def, 0))

    trajectory: list[TickRecord] = []
    start_time = time.perf_counter()

    for tick in range(scenario_def.ticks):
        snapshot = scenario_snapshot(scenario_def, tick)
        actions = agent.get_actions(snapshot)
        decision = agent.last_decision
        state = decision.state
        trajectory.append(
            TickRecord(
                tick=tick,
                y=snapshot.player_y,
                on_ground=snapshot.on_ground,
                actions=actions_to_names(actions),
                cause=decision.cause.value,
                next_cause=state.jump.cause.value,
                target=state.jump.target,
                elapsed=state.jump.elapsed,
                drift=state.drift,
                wall_height=decision.features.wall_height,
                staircase_length=decision.features.staircase_length,
                gap_width=decision.features.gap_width,
                ceiling=decision.features.ceiling,
                threat=decision.threat is not None,
            )
        )

    wall_time = (time.perf_counter() - start_time) * 1000
    violations = check_invariants(trajectory, agent.config.drift_cap)
    failures = check_expectations(scenario_def.expect, trajectory, violations)
    logger.debug(
        "%s: %d ticks, %d violation(s), %d failed expectation(s)",
        scenario_def.name, len(trajectory), len(violations), len(failures),
    )

    return ScenarioOutcome(
        name=scenario_def.name,
        agent=agent.agent_name(),
        success=not failures,
        reason=failures[0] if failures else "expectations_met",
        ticks=len(trajectory),
        failures=failures,
        violations=violations,
        metrics=_metrics(trajectory),
        trajectory=trajectory,
        wall_time_ms=wall_time,
    )
