"""Structure checks for the greedy headings and the lookahead bucket chains."""

from __future__ import annotations

import pytest

from fillnav.geometry import Direction
from fillnav.services.tables import BUCKETS, HEADINGS, HEADINGS_BY_NAME, ChainKind


class TestHeadings:
    def test_sixteen_headings_clockwise_from_north(self):
        assert len(HEADINGS) == 16
        assert [h.name for h in HEADINGS[:4]] == ["N", "NNE", "NE", "ENE"]
        assert HEADINGS[8].name == "S"

    def test_look_cells_are_on_radius_two_ring(self):
        looks = [h.look for h in HEADINGS]
        assert len(set(looks)) == 16
        assert all(max(abs(dx), abs(dy)) == 2 for dx, dy in looks)

    def test_step_lists(self):
        assert HEADINGS_BY_NAME["N"].steps == (Direction.NORTH, Direction.NORTHEAST, Direction.NORTHWEST)
        assert HEADINGS_BY_NAME["NNE"].steps == (Direction.NORTH, Direction.NORTHEAST)
        assert HEADINGS_BY_NAME["SE"].steps == (Direction.SOUTHEAST,)
        assert HEADINGS_BY_NAME["WNW"].steps == (Direction.WEST, Direction.NORTHWEST)

    def test_steps_point_toward_look_cell(self):
        for heading in HEADINGS:
            lx, ly = heading.look
            for step in heading.steps:
                # Each step shrinks the distance to the look cell
                before = lx * lx + ly * ly
                after = (lx - step.dx) ** 2 + (ly - step.dy) ** 2
                assert after < before, heading.name


class TestBuckets:
    def test_bucket_offsets_match_heading_looks(self):
        assert [b.offset for b in BUCKETS] == [h.look for h in HEADINGS]
        assert [b.name for b in BUCKETS] == [h.name for h in HEADINGS]

    @pytest.mark.parametrize("index", range(16))
    def test_chain_shape(self, index):
        chain = BUCKETS[index].chain
        kinds = [step.kind for step in chain]
        assert len(chain) == 20
        assert kinds[:3] == [ChainKind.GREEDY] * 3
        assert kinds[3] == ChainKind.WALL_RIDER
        assert kinds[4:7] == [ChainKind.PROBE] * 3
        assert kinds[7:] == [ChainKind.GREEDY] * 13

    @pytest.mark.parametrize("index", range(16))
    def test_chain_covers_every_heading_once(self, index):
        greedy = [step.heading.name for step in BUCKETS[index].chain if step.kind is ChainKind.GREEDY]
        assert sorted(greedy) == sorted(h.name for h in HEADINGS)

    @pytest.mark.parametrize("index", range(16))
    def test_leading_order(self, index):
        chain = BUCKETS[index].chain
        names = [chain[i].heading.name for i in range(3)]
        cw = HEADINGS[(index + 1) % 16].name
        ccw = HEADINGS[(index - 1) % 16].name
        expected_tail = [cw, ccw] if index % 2 == 0 else [ccw, cw]
        assert names == [HEADINGS[index].name, *expected_tail]

    @pytest.mark.parametrize("index", range(16))
    def test_trailing_alternates_outward(self, index):
        chain = BUCKETS[index].chain
        names = [step.heading.name for step in chain[7:]]
        expected = []
        for k in range(2, 8):
            expected.append(HEADINGS[(index + k) % 16].name)
            expected.append(HEADINGS[(index - k) % 16].name)
        expected.append(HEADINGS[(index + 8) % 16].name)
        assert names == expected

    @pytest.mark.parametrize("index", range(16))
    def test_first_probe_is_bucket_offset(self, index):
        bucket = BUCKETS[index]
        probes = [step.offset for step in bucket.chain if step.kind is ChainKind.PROBE]
        assert probes[0] == bucket.offset
        assert all(max(abs(dx), abs(dy)) == 2 for dx, dy in probes)

    def test_north_bucket_probes(self):
        probes = [step.offset for step in BUCKETS[0].chain if step.kind is ChainKind.PROBE]
        assert probes == [(0, 2), (-1, 2), (1, 2)]

    def test_describe(self):
        chain = BUCKETS[0].chain
        assert chain[0].describe() == "N"
        assert chain[3].describe() == "wall_rider"
        assert chain[4].describe() == "probe(0, 2)"
