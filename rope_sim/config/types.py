"""Configuration and result dataclasses for rope simulation runs."""

from __future__ import annotations

from dataclasses import dataclass

from rope_sim.config.constants import DEFAULT_KNOT_COUNT, MIN_KNOT_COUNT

__all__ = [
    "RopeConfig",
    "SimulationResult",
]


@dataclass(frozen=True)
class RopeConfig:
    """Runtime knobs for one simulation run.

    ``render`` only controls diagnostic output; it never changes the counts.
    """

    knot_count: int = DEFAULT_KNOT_COUNT
    render: bool = False

    def __post_init__(self) -> None:
        if self.knot_count < MIN_KNOT_COUNT:
            raise ValueError(f"knot_count must be >= {MIN_KNOT_COUNT}")


@dataclass(frozen=True)
class SimulationResult:
    """Summary of a completed run."""

    knot_count: int
    moves_applied: int
    visited_count: int
    tail: tuple[int, int]
