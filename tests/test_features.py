"""Tests for ledgehop/features.py — threat lookup and terrain probes."""

from __future__ import annotations

import pytest

from ledgehop.config import BASIC, HAZARD
from ledgehop.features import (
    Features,
    ceiling_clearance,
    extract_features,
    gap_width,
    nearest_threat,
    staircase_length,
    wall_height,
)
from ledgehop.geometry import Rect
from ledgehop.snapshot import Threat, grid_lookup
from tests.grids import (
    GROUND_ROW,
    HEIGHT,
    PLAYER_TX,
    PLAYER_TY,
    WIDTH,
    build_ceiling,
    build_empty,
    build_flat,
    build_gap,
    build_stairs,
    build_wall,
    player_snapshot,
)

TX, TY = PLAYER_TX, PLAYER_TY


# ---------------------------------------------------------------------------
# nearest_threat
# ---------------------------------------------------------------------------

class TestNearestThreat:
    rect = Rect(0.0, 0.0, 100.0, 100.0)

    def test_none_when_no_enemies(self):
        assert nearest_threat((), self.rect) is None

    def test_none_when_all_outside(self):
        enemies = (1.0, 150.0, 50.0, 1.0, 50.0, -5.0)
        assert nearest_threat(enemies, self.rect) is None

    def test_returns_first_inside_in_sequence_order(self):
        # Second enemy is closer to the rect centre but comes later
        enemies = (1.0, 200.0, 200.0, 2.0, 90.0, 90.0, 3.0, 50.0, 50.0)
        assert nearest_threat(enemies, self.rect) == Threat(2.0, 90.0, 90.0)

    def test_edge_counts_as_inside(self):
        assert nearest_threat((4.0, 100.0, 0.0), self.rect) == Threat(4.0, 100.0, 0.0)

    def test_result_always_inside_rect(self):
        enemies = tuple(
            v for i in range(20) for v in (float(i), i * 13.0 - 40.0, i * 7.0 - 10.0)
        )
        threat = nearest_threat(enemies, self.rect)
        assert threat is not None
        assert self.rect.contains(threat.x, threat.y)

    def test_partial_triple_ignored(self):
        assert nearest_threat((1.0, 50.0), self.rect) is None


# ---------------------------------------------------------------------------
# wall_height
# ---------------------------------------------------------------------------

class TestWallHeight:
    def test_zero_on_flat(self):
        assert wall_height(grid_lookup(build_flat()), TX, TY) == 0

    @pytest.mark.parametrize("h", [1, 2, 3, 5])
    def test_counts_contiguous_tiles(self, h):
        assert wall_height(grid_lookup(build_wall(h)), TX, TY) == h

    def test_stops_at_first_empty(self):
        tiles = build_wall(2)
        tiles[TX + 1, TY - 3] = 1  # floating block above a one-row hole
        assert wall_height(grid_lookup(tiles), TX, TY) == 2

    def test_wall_to_grid_top(self):
        tiles = build_wall(GROUND_ROW)
        assert wall_height(grid_lookup(tiles), TX, TY) == PLAYER_TY + 1

    def test_left_direction(self):
        tiles = build_wall(3, col=TX - 1)
        lookup = grid_lookup(tiles)
        assert wall_height(lookup, TX, TY, direction=-1) == 3
        assert wall_height(lookup, TX, TY, direction=1) == 0

    def test_column_off_grid_is_empty(self):
        assert wall_height(grid_lookup(build_flat()), WIDTH - 1, TY) == 0

    def test_column_off_grid_solid_edges(self):
        lookup = grid_lookup(build_flat(), solid_edges=True)
        assert wall_height(lookup, WIDTH - 1, TY) == TY + 1

    def test_player_below_grid_solid_edges(self):
        lookup = grid_lookup(build_flat(), solid_edges=True)
        assert wall_height(lookup, TX, 3_000_000, rows=HEIGHT) == 0

    def test_scan_bounded_by_grid_height(self):
        calls = []
        inner = grid_lookup(build_flat(), solid_edges=True)

        def lookup(tx, ty):
            calls.append((tx, ty))
            return inner(tx, ty)

        wall_height(lookup, TX, 3_000_000, rows=HEIGHT)
        wall_height(lookup, TX, HEIGHT - 1, rows=HEIGHT)
        assert len(calls) <= HEIGHT


# ---------------------------------------------------------------------------
# staircase_length
# ---------------------------------------------------------------------------

class TestStaircaseLength:
    def test_zero_when_first_diagonal_empty(self):
        assert staircase_length(grid_lookup(build_wall(1)), TX, TY) == 0

    @pytest.mark.parametrize("steps", [1, 2, 3])
    def test_counts_steps(self, steps):
        assert staircase_length(grid_lookup(build_stairs(steps)), TX, TY) == steps

    def test_capped(self):
        assert staircase_length(grid_lookup(build_stairs(6)), TX, TY) == 4
        assert staircase_length(grid_lookup(build_stairs(6)), TX, TY, cap=2) == 2

    def test_stops_at_grid_top(self):
        # Player on row 1: only one diagonal row exists above it
        tiles = build_empty()
        tiles[TX + 1, 0] = 1
        assert staircase_length(grid_lookup(tiles, solid_edges=True), TX, 1) == 1


# ---------------------------------------------------------------------------
# gap_width
# ---------------------------------------------------------------------------

class TestGapWidth:
    def test_zero_on_flat(self):
        assert gap_width(grid_lookup(build_flat()), TX, TY) == 0

    def test_zero_when_first_column_has_footing(self):
        tiles = build_gap(3, start=TX + 2)
        assert gap_width(grid_lookup(tiles), TX, TY) == 0

    @pytest.mark.parametrize("w", [1, 2, 3, 4])
    def test_counts_empty_columns(self, w):
        assert gap_width(grid_lookup(build_gap(w)), TX, TY) == w

    def test_five_wide_reaches_cap(self):
        assert gap_width(grid_lookup(build_gap(5)), TX, TY) == 5

    def test_never_exceeds_cap(self):
        assert gap_width(grid_lookup(build_gap(9)), TX, TY) == 5
        assert gap_width(grid_lookup(build_gap(9)), TX, TY, cap=2) == 3

    def test_block_on_player_row_is_footing(self):
        tiles = build_gap(4)
        tiles[TX + 3, TY] = 1
        assert gap_width(grid_lookup(tiles), TX, TY) == 2

    def test_band_reaches_below_floor_row(self):
        tiles = build_empty(height=HEIGHT + 2)
        tiles[:, HEIGHT + 1] = 1
        # Floor two rows under the player still counts as footing
        assert gap_width(grid_lookup(tiles), TX, HEIGHT - 1) == 0
        assert gap_width(grid_lookup(tiles), TX, HEIGHT - 1, band=1) == 5

    def test_empty_grid_reads_as_gap(self):
        assert gap_width(grid_lookup(build_empty()), TX, TY) == 5

    def test_off_grid_solid_edges_is_footing(self):
        lookup = grid_lookup(build_empty(), solid_edges=True)
        # Band reaches below the bottom row, which now reads solid
        assert gap_width(lookup, TX, HEIGHT - 1) == 0


# ---------------------------------------------------------------------------
# ceiling_clearance
# ---------------------------------------------------------------------------

class TestCeilingClearance:
    def test_none(self):
        assert ceiling_clearance(grid_lookup(build_flat()), TX, TY) == -1

    @pytest.mark.parametrize("rows", [1, 3, 5])
    def test_straight_above(self, rows):
        assert ceiling_clearance(grid_lookup(build_ceiling(rows)), TX, TY) == rows

    def test_diagonal_ahead(self):
        tiles = build_ceiling(4)
        tiles[TX + 1, TY - 2] = 1
        assert ceiling_clearance(grid_lookup(tiles), TX, TY) == 2

    def test_diagonal_behind_ignored(self):
        tiles = build_flat()
        tiles[TX - 1, TY - 2] = 1
        assert ceiling_clearance(grid_lookup(tiles), TX, TY) == -1
        assert ceiling_clearance(grid_lookup(tiles), TX, TY, direction=-1) == 2

    def test_top_row_player(self):
        assert ceiling_clearance(grid_lookup(build_flat(), solid_edges=True), TX, 0) == -1

    def test_player_below_grid_skips_off_grid_rows(self):
        tiles = build_ceiling(4)
        lookup = grid_lookup(tiles)
        ty = 3_000_000
        assert ceiling_clearance(lookup, TX, ty, rows=HEIGHT) == ty - (HEIGHT - 1)

    def test_scan_bounded_by_grid_height(self):
        calls = []
        inner = grid_lookup(build_empty())

        def lookup(tx, ty):
            calls.append((tx, ty))
            return inner(tx, ty)

        assert ceiling_clearance(lookup, TX, 3_000_000, rows=HEIGHT) == -1
        assert len(calls) <= 2 * HEIGHT


# ---------------------------------------------------------------------------
# extract_features
# ---------------------------------------------------------------------------

class TestExtractFeatures:
    def test_flat(self):
        snap = player_snapshot(build_flat())
        f = extract_features(snap, grid_lookup(snap.tiles), 1, HAZARD)
        assert f == Features(direction=1, wall_height=0, staircase_length=0,
                             gap_width=0, ceiling=-1)

    def test_staircase(self):
        snap = player_snapshot(build_stairs(4))
        f = extract_features(snap, grid_lookup(snap.tiles), 1, HAZARD)
        assert f.wall_height == 2
        assert f.staircase_length == 4
        assert f.gap_width == 0
        assert f.ceiling == 1

    def test_disabled_features_report_zero(self):
        snap = player_snapshot(build_gap(3))
        f = extract_features(snap, grid_lookup(snap.tiles), 1, BASIC)
        assert f.gap_width == 0
        snap = player_snapshot(build_stairs(4))
        f = extract_features(snap, grid_lookup(snap.tiles), 1, BASIC)
        assert f.staircase_length == 0
        assert f.wall_height == 2
