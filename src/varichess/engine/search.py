"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from varichess.core.board import Board
    from varichess.core.enums import Team
    from varichess.core.move import Move

DEFAULT_DEPTH = 3


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = DEFAULT_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {self.max_depth}")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``best_index`` points into the move list handed to the search.
    """

    best_index: int
    best_move: Move
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for move-search engines used by the game layer."""

    def search(
        self,
        board: Board,
        moves: list[Move],
        team: Team,
        limits: SearchLimits,
    ) -> SearchResult: ...
