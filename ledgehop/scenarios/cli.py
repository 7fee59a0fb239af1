"""ledgehop/scenarios/cli — Run scenario files against the agents.

Usage::

    ledgehop-scenarios scenarios/wall_two_high.yaml
    ledgehop-scenarios --all --agent basic -q
    ledgehop-scenarios --all --list
    ledgehop-scenarios --all -o results/run.json --trajectory

Exit status is 0 when every scenario meets its expectations, 1 otherwise,
and 2 for usage errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ledgehop.agents.registry import AGENT_REGISTRY
from ledgehop.scenarios.loader import ScenarioDef, load_scenarios
from ledgehop.scenarios.report import print_report, save_results
from ledgehop.scenarios.runner import run_scenario

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledgehop-scenarios",
        description="Feed scripted scenes to a ledgehop agent and check what it does.",
    )
    select = parser.add_argument_group("scenario selection")
    select.add_argument("scenarios", nargs="*", type=Path, help="scenario YAML files")
    select.add_argument("--all", action="store_true", help="run every *.yaml under --base")
    select.add_argument("--base", type=Path, default=Path("scenarios"),
                        help="directory searched by --all (default: scenarios)")
    select.add_argument("--list", action="store_true",
                        help="list the selected scenarios without running them")

    running = parser.add_argument_group("running")
    running.add_argument("--agent", choices=sorted(AGENT_REGISTRY),
                     help="run every scenario with this agent and its default config")

    out = parser.add_argument_group("reporting")
    out.add_argument("-o", "--output", type=Path, help="write results JSON here")
    out.add_argument("--trajectory", action="store_true",
                     help="include the full per-tick record in the JSON")
    out.add_argument("-q", "--quiet", action="store_true", help="print failing scenarios only")
    out.add_argument("-v", "--verbose", action="store_true", help="log every jump decision")
    return parser


def _list(defs: list[ScenarioDef]) -> None:
    for d in defs:
        print(f"{d.name:<24s} {d.agent:<7s} {d.ticks:>4d}  {d.description}")


def run(args: argparse.Namespace) -> int:
    defs = load_scenarios(paths=args.scenarios or None, run_all=args.all, base=args.base)
    if args.list:
        _list(defs)
        return 0

    results = []
    for d in defs:
        if args.agent:
            logger.info("%s: agent %s -> %s", d.name, d.agent, args.agent)
            d.agent = args.agent
            d.agent_params = None
        results.append(run_scenario(d))

    print_report(results, quiet=args.quiet)
    if args.output:
        save_results(results, args.output, include_trajectory=args.trajectory)
        logger.info("wrote %d result(s) to %s", len(results), args.output)
    return 0 if all(r.success for r in results) else 1


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not args.scenarios and not args.all:
        parser.error("give scenario files or --all")
    sys.exit(run(args))


if __name__ == "__main__":
    main()
