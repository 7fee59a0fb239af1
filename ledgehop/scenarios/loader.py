"""ledgehop/scenarios/loader — ScenarioDef and YAML loading functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import yaml

from ledgehop.constants import TILE_SIZE
from ledgehop.scenarios.conditions import Expectation
from ledgehop.scene import parse_map


@dataclass
class ScenarioDef:
    name: str
    description: str
    agent: str
    agent_params: dict | None
    ticks: int
    tiles: np.ndarray
    player_tile: tuple[int, int]
    player_x: float
    player_y: float
    on_ground: bool = True
    y_path: list[float] | None = None
    ground_path: list[bool] | None = None
    enemies: list[float] = field(default_factory=list)
    expect: list[Expectation] = field(default_factory=list)


def _tile_center(t: int) -> float:
    return t * TILE_SIZE + TILE_SIZE / 2


def _parse_player(data: dict | None, marked: tuple[int, int] | None) -> tuple:
    """Resolve the player tile and world position.

    The map's ``P`` mark is used unless ``player.tile`` is given.
    """
    data = data or {}
    tile = data.get("tile")
    if tile is not None:
        player_tile = (int(tile[0]), int(tile[1]))
    elif marked is not None:
        player_tile = marked
    else:
        raise ValueError("Scenario needs a 'P' in the map or player.tile")
    px = float(data.get("x", _tile_center(player_tile[0])))
    py = float(data.get("y", _tile_center(player_tile[1])))
    on_ground = bool(data.get("on_ground", True))
    return player_tile, px, py, on_ground


def _parse_enemies(raw: list | None) -> list[float]:
    """Flatten enemy dicts into the engine's (id, x, y) triples."""
    flat: list[float] = []
    for entry in raw or []:
        if "tile" in entry:
            x = _tile_center(int(entry["tile"][0]))
            y = _tile_center(int(entry["tile"][1]))
        else:
            x, y = float(entry["x"]), float(entry["y"])
        flat.extend((float(entry.get("kind", 0)), x, y))
    return flat


def _parse_expectation(data: dict) -> Expectation:
    exp = Expectation(
        type=data["type"],
        value=data.get("value"),
        action=data.get("action"),
        tick=data.get("tick"),
        cause=data.get("cause"),
    )
    exp.validate()
    return exp


def _parse_scenario(data: dict) -> ScenarioDef:
    """Parse a raw YAML dict into a ScenarioDef."""
    tiles, marked = parse_map(data["map"])
    player_tile, px, py, on_ground = _parse_player(data.get("player"), marked)
    ticks = int(data["ticks"])
    y_path = data.get("y_path")
    ground_path = data.get("ground_path")
    for key, path in (("y_path", y_path), ("ground_path", ground_path)):
        if path is not None and len(path) < ticks:
            raise ValueError(f"{key} has {len(path)} entries, need {ticks}")
    return ScenarioDef(
        name=data["name"],
        description=data.get("description", ""),
        agent=data.get("agent", "hazard"),
        agent_params=data.get("agent_params"),
        ticks=ticks,
        tiles=tiles,
        player_tile=player_tile,
        player_x=px,
        player_y=py,
        on_ground=on_ground,
        y_path=[float(y) for y in y_path] if y_path is not None else None,
        ground_path=[bool(g) for g in ground_path] if ground_path is not None else None,
        enemies=_parse_enemies(data.get("enemies")),
        expect=[_parse_expectation(e) for e in data.get("expect", [])],
    )


def load_scenario(path: Path) -> ScenarioDef:
    """Load a single scenario from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return _parse_scenario(data)


def load_scenarios(
    paths: list[Path] | None = None,
    run_all: bool = False,
    base: Path = Path("scenarios"),
) -> list[ScenarioDef]:
    """Load multiple scenarios.

    Args:
        paths: Explicit list of YAML file paths to load.
        run_all: If True, glob all ``*.yaml`` files under *base*.
        base: Directory to search when *run_all* is True.

    Returns:
        List of parsed ScenarioDef objects.
    """
    if paths is None:
        paths = []
    if run_all:
        paths = sorted(base.glob("*.yaml"))
    return [load_scenario(p) for p in paths]
