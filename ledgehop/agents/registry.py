"""ledgehop/agents/registry.py — Agent name → class mapping.

Used by scenario YAML resolution to instantiate agents by string name.
"""

from __future__ import annotations

from ledgehop.agents.basic import BasicAgent
from ledgehop.agents.hazard import HazardAgent
from ledgehop.agents.jumper import JumperAgent
from ledgehop.agents.reflex import ReflexAgent

AGENT_REGISTRY: dict[str, type[ReflexAgent]] = {
    "basic": BasicAgent,
    "jumper": JumperAgent,
    "hazard": HazardAgent,
}


def resolve_agent(name: str, params: dict | None = None) -> ReflexAgent:
    """Look up an agent class by name and instantiate with optional kwargs.

    Args:
        name: Agent name (key in AGENT_REGISTRY).
        params: Optional kwargs passed to the agent constructor, e.g.
            ``{"config": {"drift_cap": 10}}``.

    Returns:
        An instantiated agent conforming to the Agent protocol.

    Raises:
        KeyError: If name is not in the registry.
    """
    if name not in AGENT_REGISTRY:
        raise KeyError(f"Unknown agent: {name!r}. Available: {sorted(AGENT_REGISTRY)}")
    cls = AGENT_REGISTRY[name]
    return cls(**(params or {}))
