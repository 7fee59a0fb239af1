"""ledgehop/scene.py — ASCII tile maps for scenarios and tests.

Legend: ``.`` empty, ``#`` solid, ``P`` the player's tile (empty),
``1``-``9`` explicit cell codes. Rows are listed top to bottom.
"""

from __future__ import annotations

import numpy as np

from ledgehop.constants import EMPTY, SOLID

PLAYER_MARK = "P"

_CELL_CODES: dict[str, int] = {".": EMPTY, "#": SOLID, PLAYER_MARK: EMPTY}


def parse_map(rows: list[str] | str) -> tuple[np.ndarray, tuple[int, int] | None]:
    """Parse map rows into a (width, height) grid and the player tile.

    Returns:
        (tiles, player) where tiles is indexed tiles[tx, ty] and player is
        the (tx, ty) of the ``P`` mark, or None if there is none.

    Raises:
        ValueError: On ragged rows, unknown characters, or more than one ``P``.
    """
    if isinstance(rows, str):
        rows = rows.splitlines()
    rows = [r.strip() for r in rows if r.strip()]
    if not rows:
        raise ValueError("Map has no rows")
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ValueError(f"Map rows must all be {width} wide: {[len(r) for r in rows]}")

    tiles = np.zeros((width, len(rows)), dtype=np.int32)
    player: tuple[int, int] | None = None
    for ty, row in enumerate(rows):
        for tx, ch in enumerate(row):
            if ch == PLAYER_MARK:
                if player is not None:
                    raise ValueError(f"Map has more than one {PLAYER_MARK!r}")
                player = (tx, ty)
            if ch in _CELL_CODES:
                tiles[tx, ty] = _CELL_CODES[ch]
            elif ch.isdigit():
                tiles[tx, ty] = int(ch)
            else:
                raise ValueError(f"Unknown map character {ch!r} at ({tx}, {ty})")
    return tiles, player

