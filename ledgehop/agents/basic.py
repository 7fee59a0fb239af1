"""ledgehop/agents/basic.py — BasicAgent: jump at threats and walls, keep running right.

Fixed hold times, no steering. The smallest useful subset of the pipeline.
"""

from __future__ import annotations

from ledgehop.agents.reflex import ReflexAgent
from ledgehop.config import BASIC


class BasicAgent(ReflexAgent):
    """Agent that clears threats and walls with fixed-length jumps."""

    name = "basic"
    default_config = BASIC
