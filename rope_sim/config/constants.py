"""Centralized constants for rope simulation.

Defaults shared by the domain, rendering, and CLI layers live here so every
other module can import them from a single source.
"""

from __future__ import annotations

DEFAULT_KNOT_COUNT = 10
"""Default rope length: one head plus nine followers."""

MIN_KNOT_COUNT = 1
"""Smallest valid rope; a single knot is both head and tail."""

ORIGIN: tuple[int, int] = (0, 0)
"""Starting position of every knot."""

DIRECTION_DELTAS: dict[str, tuple[int, int]] = {
    "R": (1, 0),
    "L": (-1, 0),
    "U": (0, 1),
    "D": (0, -1),
}
"""(dx, dy) unit delta for each direction letter."""

RENDER_MARGIN = 1
"""Empty cells drawn around the bounding box of the knots."""

MARKER_CHAR = "R"
"""Cell character for a position occupied by at least one knot."""

FILLER_CHAR = "."
"""Cell character for an empty position."""
