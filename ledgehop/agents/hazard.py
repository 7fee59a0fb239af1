"""ledgehop/agents/hazard.py — HazardAgent: every probe, steering, and the drift limiter.

The canonical agent: threat jumps sized by ceiling clearance, walls sized by
height, staircases overriding wall jumps, gap jumps, and turning toward
threats on the left for at most DRIFT_CAP ticks in a row.
"""

from __future__ import annotations

from ledgehop.agents.reflex import ReflexAgent
from ledgehop.config import HAZARD


class HazardAgent(ReflexAgent):
    """Agent that reacts to every hazard the feature extractors find."""

    name = "hazard"
    default_config = HAZARD
