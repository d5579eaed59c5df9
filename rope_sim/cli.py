"""CLI entrypoint: simulate a rope from a file of move commands.

This module owns argument parsing, output, and turning errors into exit
statuses. All simulation logic lives in:

- ``rope_sim.domain``     – move parsing and the rope model
- ``rope_sim.simulation`` – ``run_simulation`` driver
- ``rope_sim.render``     – per-step text snapshots
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from rope_sim.config.constants import DEFAULT_KNOT_COUNT, MIN_KNOT_COUNT
from rope_sim.config.types import RopeConfig, SimulationResult
from rope_sim.domain.moves import MoveParseError, parse_moves
from rope_sim.domain.rope import Rope
from rope_sim.io.reader import iter_lines
from rope_sim.logging_config import setup_logging
from rope_sim.render import render_rope
from rope_sim.simulation import run_simulation

logger = logging.getLogger(__name__)


def _knot_count(raw: str) -> int:
    """argparse type for ``--knots``."""
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("knots must be an integer") from exc
    if value < MIN_KNOT_COUNT:
        raise argparse.ArgumentTypeError(f"knots must be >= {MIN_KNOT_COUNT}")
    return value


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="rope-sim",
        description="Count the unique positions visited by the tail of a simulated rope.",
    )
    p.add_argument("path", type=Path, help="File of move commands, one '<R|L|U|D> <N>' per line")
    p.add_argument(
        "--knots",
        type=_knot_count,
        default=DEFAULT_KNOT_COUNT,
        help=f"Number of knots including the head (default: {DEFAULT_KNOT_COUNT})",
    )
    p.add_argument(
        "--render",
        action="store_true",
        help="Print a grid snapshot after every unit move",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return p.parse_args()


def _print_snapshot(rope: Rope) -> None:
    print(render_rope(rope.positions()))


def format_summary(result: SimulationResult) -> str:
    return (
        f"{result.moves_applied} moves applied\n"
        f"{result.visited_count} positions visited by the tail."
    )


class InputReadError(Exception):
    """The input file could not be opened, read, or decoded."""


def _read_lines(path: Path) -> Iterator[str]:
    """Yield input lines, reporting read failures as :exc:`InputReadError`.

    Only failures raised while reading land here; an ``OSError`` from writing
    stdout in a step callback is not translated.
    """
    try:
        yield from iter_lines(path)
    except UnicodeDecodeError as exc:
        raise InputReadError(f"could not read input file {path}: {exc.reason}") from exc
    except OSError as exc:
        reason = exc.strerror or exc
        raise InputReadError(f"could not read input file {path}: {reason}") from exc


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    config = RopeConfig(knot_count=args.knots, render=args.render)

    try:
        result = run_simulation(
            parse_moves(_read_lines(args.path)),
            config,
            on_step=_print_snapshot if config.render else None,
        )
        print(format_summary(result))
    except (MoveParseError, InputReadError) as exc:
        logger.debug("aborting run", exc_info=True)
        sys.exit(f"error: {exc}")
    except OSError as exc:
        reason = exc.strerror or exc
        sys.exit(f"error: could not write output: {reason}")


if __name__ == "__main__":
    main()
