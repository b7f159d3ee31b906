"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Team(IntEnum):
    """Side owning a piece. ``NONE`` marks empty cells and "no winner yet"."""

    NONE = 0
    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> Team:
        if self == Team.WHITE:
            return Team.BLACK
        if self == Team.BLACK:
            return Team.WHITE
        return Team.NONE

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceKind(IntEnum):
    """Piece types ordered by conventional value."""

    EMPTY = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
    CUSTOM = 7


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def for_winner(cls, team: Team) -> GameResult:
        if team == Team.WHITE:
            return cls.WHITE_WINS
        if team == Team.BLACK:
            return cls.BLACK_WINS
        return cls.IN_PROGRESS

    @property
    def winner(self) -> Team:
        if self == GameResult.WHITE_WINS:
            return Team.WHITE
        if self == GameResult.BLACK_WINS:
            return Team.BLACK
        return Team.NONE

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
