"""Move parsing: text lines to directional unit-step commands.

Each input line has the form ``<letter> <distance>``, e.g. ``R 4``. Parsing
and expansion are lazy so a malformed line aborts the run before any later
command is applied.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from rope_sim.config.constants import DIRECTION_DELTAS

logger = logging.getLogger(__name__)

INVALID_DIRECTION = "invalid move direction"
INVALID_DISTANCE = "invalid distance"


class Direction(Enum):
    """Cardinal direction of a move, keyed by its input letter."""

    RIGHT = "R"
    LEFT = "L"
    UP = "U"
    DOWN = "D"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit (dx, dy) for one step in this direction."""
        return DIRECTION_DELTAS[self.value]


@dataclass(frozen=True)
class Move:
    """A direction plus a non-negative distance."""

    direction: Direction
    distance: int = 1


class MoveParseError(ValueError):
    """Raised when an input line is not a valid move command."""

    def __init__(self, reason: str, line: str, lineno: int | None = None) -> None:
        self.reason = reason
        self.line = line
        self.lineno = lineno
        location = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{location}{reason}: {line!r}")


def parse_move(line: str) -> Move:
    """Parse a single ``<letter> <distance>`` line into a Move."""
    text = line.rstrip("\r\n")
    try:
        direction = Direction(text[:1])
    except ValueError as exc:
        raise MoveParseError(INVALID_DIRECTION, text) from exc

    separator, distance_text = text[1:2], text[2:]
    if separator != " " or not (distance_text.isascii() and distance_text.isdigit()):
        raise MoveParseError(INVALID_DISTANCE, text)
    return Move(direction, int(distance_text))


def parse_moves(lines: Iterable[str]) -> Iterator[Move]:
    """Lazily parse lines, tagging any failure with its 1-based line number."""
    for lineno, line in enumerate(lines, start=1):
        try:
            move = parse_move(line)
        except MoveParseError as exc:
            raise MoveParseError(exc.reason, exc.line, lineno) from exc
        logger.debug("line %d: %s x%d", lineno, move.direction.name, move.distance)
        yield move


def expand_moves(moves: Iterable[Move]) -> Iterator[Move]:
    """Expand each move of distance N into N unit moves, preserving order."""
    for move in moves:
        unit = Move(move.direction, 1)
        for _ in range(move.distance):
            yield unit
