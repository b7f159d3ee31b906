"""Move value object (long-algebraic style representation)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from varichess.core.types import Cell, parse_cell

_MOVE_RE = re.compile(r"([a-z]\d{1,2})([a-z]\d{1,2})")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a source/destination pair."""

    from_cell: Cell
    to_cell: Cell

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_cell}{self.to_cell}"

    @property
    def notation(self) -> str:
        """``<from><to>`` notation, e.g. ``a2a4``."""
        return str(self)


def parse_move(text: str) -> Move:
    """Parse ``<from><to>`` notation such as ``'a2a4'`` or ``'b10b9'``."""
    match = _MOVE_RE.fullmatch(text.strip().lower())
    if match is None:
        raise ValueError(f"Invalid move notation: {text!r}")
    return Move(parse_cell(match.group(1)), parse_cell(match.group(2)))
