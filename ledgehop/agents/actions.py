"""ledgehop/agents/actions.py — Action vector layout and helpers.

The host reads a fixed-size boolean vector; these helpers name its slots.
"""

from __future__ import annotations

import numpy as np

from ledgehop.composer import empty_actions
from ledgehop.constants import (
    ACTION_DOWN,
    ACTION_JUMP,
    ACTION_LEFT,
    ACTION_RIGHT,
    ACTION_SPEED,
    NUM_ACTIONS,
)

ACTION_NAMES: dict[int, str] = {
    ACTION_LEFT: "left",
    ACTION_RIGHT: "right",
    ACTION_DOWN: "down",
    ACTION_SPEED: "speed",
    ACTION_JUMP: "jump",
}

ACTION_INDEX: dict[str, int] = {name: i for i, name in ACTION_NAMES.items()}


def action_index(name: str) -> int:
    """Look up an action slot by name.

    Raises:
        ValueError: If *name* is not an action.
    """
    try:
        return ACTION_INDEX[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown action: {name!r}. Valid actions: {sorted(ACTION_INDEX)}"
        ) from None


def actions_to_names(actions: np.ndarray) -> list[str]:
    """Names of the asserted slots, in slot order."""
    return [ACTION_NAMES[i] for i in range(NUM_ACTIONS) if actions[i]]
