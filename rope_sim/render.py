"""Text snapshots of the rope: a labelled grid bounding every knot.

Layout is y-major: each printed row is one y value and each character within
it one x value, the transpose of an x-major dump.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from rope_sim.config.constants import FILLER_CHAR, MARKER_CHAR, RENDER_MARGIN
from rope_sim.domain.rope import Position


def build_grid_array(
    positions: Sequence[Position], margin: int = RENDER_MARGIN
) -> tuple[np.ndarray, Position]:
    """Return an (H, W) bool occupancy array and the (x, y) of cell [0, 0].

    Row index grows with y and column index grows with x.
    """
    if not positions:
        raise ValueError("positions must not be empty")
    xs = [x for x, _ in positions]
    ys = [y for _, y in positions]
    x0, y0 = min(xs) - margin, min(ys) - margin
    width = max(xs) + margin - x0 + 1
    height = max(ys) + margin - y0 + 1

    grid = np.zeros((height, width), dtype=bool)
    for x, y in positions:
        grid[y - y0, x - x0] = True
    return grid, (x0, y0)


def render_rope(
    positions: Sequence[Position],
    margin: int = RENDER_MARGIN,
    marker: str = MARKER_CHAR,
    filler: str = FILLER_CHAR,
) -> str:
    """Render knot positions as a label line, a separator line, then grid rows."""
    grid, (x0, y0) = build_grid_array(positions, margin)
    cells = np.where(grid, marker, filler)
    lines = [f"_({x0}, {y0})", "|"]
    lines.extend("".join(row) for row in cells)
    return "\n".join(lines)
