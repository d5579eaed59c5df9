"""Tests for rope_sim.domain.rope module."""

from __future__ import annotations

from random import Random

import pytest

from rope_sim.domain.moves import Direction, Move, expand_moves, parse_moves
from rope_sim.domain.rope import Knot, Rope, chebyshev_distance

REFERENCE_MOVES = ["R 4", "U 4", "L 3", "D 1", "R 4", "D 1", "L 5", "R 2"]
LARGER_MOVES = ["R 5", "U 8", "L 8", "D 3", "R 17", "D 10", "L 25", "U 20"]


def _run(lines: list[str], knot_count: int) -> Rope:
    rope = Rope.create(knot_count)
    for unit in expand_moves(parse_moves(lines)):
        rope.apply(unit)
    return rope


class TestChebyshevDistance:
    def test_same_point(self) -> None:
        assert chebyshev_distance((3, -2), (3, -2)) == 0

    def test_diagonal_neighbor(self) -> None:
        assert chebyshev_distance((0, 0), (1, -1)) == 1

    def test_uses_larger_axis(self) -> None:
        assert chebyshev_distance((0, 0), (2, -5)) == 5


class TestKnotFollow:
    def test_touching_knot_does_not_move(self) -> None:
        knot = Knot(0, 0)
        assert knot.follow(Knot(1, 1)) is False
        assert knot.position == (0, 0)

    def test_overlapping_knot_does_not_move(self) -> None:
        knot = Knot(2, 2)
        assert knot.follow(Knot(2, 2)) is False

    def test_straight_catch_up(self) -> None:
        knot = Knot(0, 0)
        assert knot.follow(Knot(-2, 0)) is True
        assert knot.position == (-1, 0)

    def test_diagonal_catch_up(self) -> None:
        knot = Knot(0, 0)
        knot.follow(Knot(1, 2))
        assert knot.position == (1, 1)

    def test_diagonal_corner_catch_up(self) -> None:
        knot = Knot(0, 0)
        knot.follow(Knot(2, -2))
        assert knot.position == (1, -1)

    def test_idempotent_once_touching(self) -> None:
        leader = Knot(3, 1)
        knot = Knot(0, 0)
        knot.follow(leader)
        knot.follow(leader)
        before = knot.position
        assert knot.follow(leader) is False
        assert knot.position == before


class TestRopeCreate:
    def test_all_knots_at_origin(self) -> None:
        rope = Rope.create(10)
        assert len(rope) == 10
        assert rope.positions() == [(0, 0)] * 10

    def test_origin_counts_as_visited(self) -> None:
        assert Rope.create(10).visited == {(0, 0)}

    def test_single_knot_head_is_tail(self) -> None:
        rope = Rope.create(1)
        assert rope.head is rope.tail

    def test_rejects_empty_rope(self) -> None:
        with pytest.raises(ValueError, match="knot_count"):
            Rope.create(0)

    def test_direct_construction_records_starting_tail(self) -> None:
        assert Rope(knots=[Knot(), Knot()]).visited == {(0, 0)}

    def test_direct_construction_records_offset_tail(self) -> None:
        rope = Rope(knots=[Knot(3, 1), Knot(2, 1)])
        assert rope.visited == {(2, 1)}

    def test_direct_construction_rejects_no_knots(self) -> None:
        with pytest.raises(ValueError, match="at least 1 knot"):
            Rope(knots=[])


class TestRopeStep:
    def test_head_moves_one_unit(self) -> None:
        for direction in Direction:
            rope = Rope.create(3)
            rope.step(direction)
            assert rope.head.position == direction.delta

    def test_two_knots_r4(self) -> None:
        rope = _run(["R 4"], knot_count=2)
        assert rope.head.position == (4, 0)
        assert rope.tail.position == (3, 0)
        assert rope.moves_applied == 4
        assert rope.visited == {(0, 0), (1, 0), (2, 0), (3, 0)}

    def test_apply_counts_unit_moves(self) -> None:
        rope = Rope.create(2)
        rope.apply(Move(Direction.UP, 3))
        assert rope.moves_applied == 3
        assert rope.tail.position == (0, 2)

    def test_single_knot_tail_tracks_head(self) -> None:
        rope = _run(["R 2", "U 1"], knot_count=1)
        assert rope.visited == {(0, 0), (1, 0), (2, 0), (2, 1)}


class TestRopePropagate:
    def test_stops_at_first_stationary_knot(self) -> None:
        rope = Rope(knots=[Knot(2, 0), Knot(0, 0), Knot(0, 0)])
        assert rope.propagate() == 1
        assert rope.positions() == [(2, 0), (1, 0), (0, 0)]

    def test_moves_whole_chain_when_needed(self) -> None:
        rope = Rope(knots=[Knot(3, 0), Knot(1, 0), Knot(0, 0)])
        assert rope.propagate() == 2
        assert rope.positions() == [(3, 0), (2, 0), (1, 0)]

    def test_early_exit_leaves_later_knots_untouched(self) -> None:
        # Third knot is out of reach of the second but propagation never gets there
        rope = Rope(knots=[Knot(0, 0), Knot(1, 0), Knot(5, 5)])
        assert rope.propagate() == 0
        assert rope.knots[2].position == (5, 5)

    def test_positions_from_start_index(self) -> None:
        rope = Rope(knots=[Knot(2, 0), Knot(1, 0), Knot(0, 0)])
        assert rope.positions(start=2) == [(0, 0)]


class TestReferenceScenarios:
    def test_two_knots_reference_moves(self) -> None:
        assert len(_run(REFERENCE_MOVES, knot_count=2).visited) == 13

    def test_ten_knots_reference_moves(self) -> None:
        rope = _run(REFERENCE_MOVES, knot_count=10)
        assert len(rope.visited) == 1
        assert rope.moves_applied == 24

    def test_ten_knots_larger_moves(self) -> None:
        assert len(_run(LARGER_MOVES, knot_count=10).visited) == 36

    def test_order_of_moves_matters(self) -> None:
        right_then_up = _run(["R 4", "U 4"], knot_count=2).visited
        up_then_right = _run(["U 4", "R 4"], knot_count=2).visited
        assert right_then_up != up_then_right


class TestRopeInvariants:
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_chain_stays_connected_and_visited_bounded(self, seed: int) -> None:
        rng = Random(seed)
        rope = Rope.create(10)
        previous_visited = len(rope.visited)
        for _ in range(300):
            rope.step(rng.choice(list(Direction)))
            assert rope.is_connected()
            assert len(rope.visited) >= previous_visited
            assert len(rope.visited) <= rope.moves_applied + 1
            previous_visited = len(rope.visited)

    def test_is_connected_detects_gap(self) -> None:
        rope = Rope(knots=[Knot(0, 0), Knot(2, 0)])
        assert rope.is_connected() is False
