"""ledgehop/agents/reflex.py — ReflexAgent: the decision pipeline behind the Agent protocol.

Owns the carried AgentState and a single action vector that is overwritten
in place every tick. Subclasses only pick a different default config.
"""

from __future__ import annotations

import numpy as np

from ledgehop.composer import empty_actions
from ledgehop.config import HAZARD, AgentConfig
from ledgehop.constants import ACTION_RIGHT
from ledgehop.pipeline import AgentState, Decision, decide, initial_state
from ledgehop.snapshot import Snapshot


class ReflexAgent:
    """Reactive agent: one snapshot in, one boolean vector out."""

    name = "reflex"
    default_config: AgentConfig = HAZARD

    def __init__(self, config: AgentConfig | dict | None = None) -> None:
        if config is None:
            config = self.default_config
        elif isinstance(config, dict):
            config = self.default_config.replace(**config)
        self.config = config
        self.state = AgentState()
        self.last_decision: Decision | None = None
        self._actions: np.ndarray | None = None

    def initialize(self, snapshot: Snapshot) -> None:
        self._actions = empty_actions()
        self._actions[ACTION_RIGHT] = True
        self.state = initial_state(snapshot)
        self.last_decision = None

    def get_actions(self, snapshot: Snapshot) -> np.ndarray:
        if self._actions is None:
            self.initialize(snapshot)
        decision = decide(snapshot, self.state, self.config, out=self._actions)
        self.state = decision.state
        self.last_decision = decision
        return self._actions

    def agent_name(self) -> str:
        return self.name
