"""Configuration layer: constants and typed config dataclasses."""

from rope_sim.config.constants import (
    DEFAULT_KNOT_COUNT,
    DIRECTION_DELTAS,
    FILLER_CHAR,
    MARKER_CHAR,
    MIN_KNOT_COUNT,
    ORIGIN,
    RENDER_MARGIN,
)
from rope_sim.config.types import RopeConfig, SimulationResult

__all__ = [
    "DEFAULT_KNOT_COUNT",
    "DIRECTION_DELTAS",
    "FILLER_CHAR",
    "MARKER_CHAR",
    "MIN_KNOT_COUNT",
    "ORIGIN",
    "RENDER_MARGIN",
    "RopeConfig",
    "SimulationResult",
]
