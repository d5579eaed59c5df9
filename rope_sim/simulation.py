"""Simulation driver: feed unit moves through a rope and summarize the run."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from rope_sim.config.types import RopeConfig, SimulationResult
from rope_sim.domain.moves import Move, expand_moves
from rope_sim.domain.rope import Rope

logger = logging.getLogger(__name__)

StepCallback = Callable[[Rope], None]


def run_simulation(
    moves: Iterable[Move],
    config: RopeConfig | None = None,
    on_step: StepCallback | None = None,
) -> SimulationResult:
    """Apply *moves* to a fresh rope one unit step at a time.

    Parameters
    ----------
    moves : iterable of Move
        Consumed lazily; any error raised while iterating propagates and the
        run is abandoned without a result.
    on_step : callable or None
        Invoked with the rope after each fully propagated unit step.
    """
    cfg = config if config is not None else RopeConfig()
    rope = Rope.create(cfg.knot_count)
    logger.debug("created rope with %d knots", cfg.knot_count)

    for unit in expand_moves(moves):
        rope.apply(unit)
        if on_step is not None:
            on_step(rope)

    logger.debug(
        "finished after %d moves, tail at %s", rope.moves_applied, rope.tail.position
    )
    return SimulationResult(
        knot_count=len(rope),
        moves_applied=rope.moves_applied,
        visited_count=len(rope.visited),
        tail=rope.tail.position,
    )
