"""Rope simulation: a chain of knots dragged across a grid by its head."""

from rope_sim.config.types import RopeConfig, SimulationResult
from rope_sim.domain.moves import Direction, Move, MoveParseError, parse_moves
from rope_sim.domain.rope import Knot, Rope
from rope_sim.simulation import run_simulation

__all__ = [
    "Direction",
    "Knot",
    "Move",
    "MoveParseError",
    "Rope",
    "RopeConfig",
    "SimulationResult",
    "parse_moves",
    "run_simulation",
]
