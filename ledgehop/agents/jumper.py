"""ledgehop/agents/jumper.py — JumperAgent: BasicAgent plus gaps, tuned threat jumps, and running."""

from __future__ import annotations

from ledgehop.agents.reflex import ReflexAgent
from ledgehop.config import JUMPER


class JumperAgent(ReflexAgent):
    name = "jumper"
    default_config = JUMPER
