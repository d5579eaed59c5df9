"""Input file access."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def iter_lines(path: Path) -> Iterator[str]:
    """Lazily yield the lines of a UTF-8 text file without line terminators.

    The file is opened on first iteration, so a missing file raises
    :exc:`OSError` from ``next()`` rather than from this call.
    """
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\r\n")
