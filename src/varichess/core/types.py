"""Cell value object and coordinate helpers.

Board layout (column-major naming, row 0 at the bottom)::

    a1=(0, 0), b1=(1, 0), ..., a2=(0, 1)
    z99=(25, 98) is the largest addressable cell.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_WIDTH = 26
MAX_HEIGHT = 99

_CELL_RE = re.compile(r"([a-z])(\d{1,2})")


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable board coordinate; ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Cell:
        """Neighbouring cell, possibly off the board."""
        return Cell(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        """Human-readable name, e.g. ``Cell(0, 1)`` -> ``'a2'``."""
        return column_letter(self.x) + str(self.y + 1)


def column_letter(x: int) -> str:
    """Column letter for *x*; off-board columns fall back to ``'?'``."""
    if 0 <= x < MAX_WIDTH:
        return chr(ord("a") + x)
    return "?"


def parse_cell(name: str) -> Cell:
    """Parse a cell name, e.g. ``'e4'`` -> ``Cell(4, 3)``, ``'b10'`` -> ``Cell(1, 9)``."""
    match = _CELL_RE.fullmatch(name.strip().lower())
    if match is None or int(match.group(2)) < 1:
        raise ValueError(f"Invalid cell name: {name!r}")
    return Cell(ord(match.group(1)) - ord("a"), int(match.group(2)) - 1)
