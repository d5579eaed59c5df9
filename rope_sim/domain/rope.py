"""Rope of knots on an unbounded integer grid.

Chain invariant: after every unit step has fully propagated, each knot is
within Chebyshev distance 1 of the knot ahead of it. The invariant is broken
only transiently while a step is being propagated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rope_sim.config.constants import MIN_KNOT_COUNT, ORIGIN
from rope_sim.domain.moves import Direction, Move

Position = tuple[int, int]


def chebyshev_distance(a: Position, b: Position) -> int:
    """max(|dx|, |dy|) between two grid positions."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass
class Knot:
    """A single rope segment."""

    x: int = 0
    y: int = 0

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def is_touching(self, leader: Knot) -> bool:
        """True when within one cell of *leader*, diagonals included."""
        return chebyshev_distance(self.position, leader.position) <= 1

    def follow(self, leader: Knot) -> bool:
        """Step one unit toward *leader* on each axis unless already touching.

        Returns whether the knot moved.
        """
        if self.is_touching(leader):
            return False
        self.x += _sign(leader.x - self.x)
        self.y += _sign(leader.y - self.y)
        return True


@dataclass
class Rope:
    """Fixed-length chain of knots; ``knots[0]`` is the head, ``knots[-1]`` the tail."""

    knots: list[Knot]
    visited: set[Position] = field(default_factory=set)
    moves_applied: int = 0

    def __post_init__(self) -> None:
        if len(self.knots) < MIN_KNOT_COUNT:
            raise ValueError(f"a rope needs at least {MIN_KNOT_COUNT} knot")
        # The tail's starting cell counts as visited
        self.visited.add(self.tail.position)

    @classmethod
    def create(cls, knot_count: int) -> Rope:
        """Build a rope with every knot at the origin; the origin counts as visited."""
        if knot_count < MIN_KNOT_COUNT:
            raise ValueError(f"knot_count must be >= {MIN_KNOT_COUNT}")
        return cls(knots=[Knot(*ORIGIN) for _ in range(knot_count)])

    @property
    def head(self) -> Knot:
        return self.knots[0]

    @property
    def tail(self) -> Knot:
        return self.knots[-1]

    def __len__(self) -> int:
        return len(self.knots)

    def step(self, direction: Direction) -> None:
        """Move the head one unit, propagate down the chain, record the tail."""
        dx, dy = direction.delta
        self.head.x += dx
        self.head.y += dy
        self.propagate()
        self.visited.add(self.tail.position)
        self.moves_applied += 1

    def apply(self, move: Move) -> None:
        """Apply *move* as ``move.distance`` consecutive unit steps."""
        for _ in range(move.distance):
            self.step(move.direction)

    def propagate(self) -> int:
        """Let each follower react to its leader, stopping at the first one that stays put.

        Returns the number of followers that moved.
        """
        moved = 0
        for leader, knot in zip(self.knots, self.knots[1:]):
            if not knot.follow(leader):
                break
            moved += 1
        return moved

    def positions(self, start: int = 0) -> list[Position]:
        """Knot positions from index *start* to the tail."""
        return [knot.position for knot in self.knots[start:]]

    def is_connected(self) -> bool:
        """True when every adjacent pair of knots is touching."""
        return all(
            knot.is_touching(leader) for leader, knot in zip(self.knots, self.knots[1:])
        )
