"""ledgehop/agents — Agent interface, action vector, and the reflex agents."""

from ledgehop.agents.actions import (
    ACTION_DOWN,
    ACTION_INDEX,
    ACTION_JUMP,
    ACTION_LEFT,
    ACTION_NAMES,
    ACTION_RIGHT,
    ACTION_SPEED,
    NUM_ACTIONS,
    action_index,
    actions_to_names,
    empty_actions,
)
from ledgehop.agents.base import Agent
from ledgehop.agents.basic import BasicAgent
from ledgehop.agents.hazard import HazardAgent
from ledgehop.agents.jumper import JumperAgent
from ledgehop.agents.reflex import ReflexAgent
from ledgehop.agents.registry import AGENT_REGISTRY, resolve_agent

__all__ = [
    "Agent",
    "ACTION_LEFT",
    "ACTION_RIGHT",
    "ACTION_DOWN",
    "ACTION_SPEED",
    "ACTION_JUMP",
    "NUM_ACTIONS",
    "ACTION_NAMES",
    "ACTION_INDEX",
    "action_index",
    "actions_to_names",
    "empty_actions",
    "ReflexAgent",
    "BasicAgent",
    "JumperAgent",
    "HazardAgent",
    "AGENT_REGISTRY",
    "resolve_agent",
]
