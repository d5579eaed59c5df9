"""I/O helpers."""

from rope_sim.io.reader import iter_lines

__all__ = ["iter_lines"]
