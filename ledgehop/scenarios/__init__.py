"""ledgehop/scenarios — Scenario definition, loading, expectations, and runner."""

from ledgehop.scenarios.conditions import (
    VALID_EXPECT_TYPES,
    Expectation,
    check_expectations,
)
from ledgehop.scenarios.loader import ScenarioDef, load_scenario, load_scenarios
from ledgehop.scenarios.runner import (
    ScenarioOutcome,
    TickRecord,
    run_scenario,
    scenario_snapshot,
)
from ledgehop.scenarios.report import (
    JumpSpan,
    action_timeline,
    format_outcome,
    jump_spans,
    print_report,
    save_results,
)

__all__ = [
    "VALID_EXPECT_TYPES",
    "Expectation",
    "check_expectations",
    "ScenarioDef",
    "load_scenario",
    "load_scenarios",
    "TickRecord",
    "ScenarioOutcome",
    "run_scenario",
    "scenario_snapshot",
    "JumpSpan",
    "action_timeline",
    "format_outcome",
    "jump_spans",
    "print_report",
    "save_results",
]
