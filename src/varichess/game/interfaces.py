"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs,
not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from varichess.core.enums import Team

if TYPE_CHECKING:
    from varichess.core.board import Board
    from varichess.core.move import Move


class IPlayer(ABC):
    """Interface for a game participant (human, scripted or AI)."""

    @property
    @abstractmethod
    def team(self) -> Team: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def get_move(self, board: Board, moves: list[Move]) -> Move:
        """Choose one of *moves* for the position on *board*.

        Implementations read *board* but never mutate it; *moves* is never
        empty.
        """
