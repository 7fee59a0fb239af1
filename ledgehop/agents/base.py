"""ledgehop/agents/base.py — Agent protocol.

Anything the host can drive tick by tick. Uses Protocol (not ABC) for duck
typing with static type checking.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from ledgehop.snapshot import Snapshot


@runtime_checkable
class Agent(Protocol):
    """Maps one world snapshot per tick to a boolean action vector."""

    def initialize(self, snapshot: Snapshot) -> None:
        """Called once before the first tick of an episode."""
        ...

    def get_actions(self, snapshot: Snapshot) -> np.ndarray:
        """Return the action vector for this tick."""
        ...

    def agent_name(self) -> str:
        ...
