"""Domain layer: move parsing and the rope model."""

from rope_sim.domain.moves import (
    INVALID_DIRECTION,
    INVALID_DISTANCE,
    Direction,
    Move,
    MoveParseError,
    expand_moves,
    parse_move,
    parse_moves,
)
from rope_sim.domain.rope import Knot, Position, Rope, chebyshev_distance

__all__ = [
    "Direction",
    "INVALID_DIRECTION",
    "INVALID_DISTANCE",
    "Knot",
    "Move",
    "MoveParseError",
    "Position",
    "Rope",
    "chebyshev_distance",
    "expand_moves",
    "parse_move",
    "parse_moves",
]
