"""Repeated games between two player policies and their tally."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from varichess.core.board import Board
from varichess.core.enums import GameResult, Team
from varichess.game.controller import GameController
from varichess.game.interfaces import IPlayer
from varichess.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# Receives the game index so factories can derive per-game seeds.
PlayerFactory = Callable[[Team, int], IPlayer]


@dataclass(slots=True)
class MatchTally:
    """Win/draw counts across a series of games."""

    white_wins: int = 0
    black_wins: int = 0
    draws: int = 0

    def record(self, result: GameResult) -> None:
        if result == GameResult.WHITE_WINS:
            self.white_wins += 1
        elif result == GameResult.BLACK_WINS:
            self.black_wins += 1
        elif result == GameResult.DRAW:
            self.draws += 1
        else:
            raise ValueError(f"Cannot tally an unfinished game: {result!r}")

    @property
    def total(self) -> int:
        return self.white_wins + self.black_wins + self.draws

    def as_dict(self) -> dict[str, int]:
        return {
            "White": self.white_wins,
            "Black": self.black_wins,
            "None": self.draws,
        }


def run_match(
    white_factory: PlayerFactory,
    black_factory: PlayerFactory,
    games: int,
    settings: GameSettings | None = None,
    board: Board | None = None,
) -> MatchTally:
    """Play *games* fresh games and tally their results.

    Each game starts from a copy of *board* when given, otherwise from the
    standard layout for the configured dimensions.
    """
    if games < 1:
        raise ValueError(f"games must be >= 1, got {games}")
    settings = settings if settings is not None else GameSettings()

    tally = MatchTally()
    for index in range(games):
        controller = GameController(
            white_factory(Team.WHITE, index),
            black_factory(Team.BLACK, index),
            board=board.copy() if board is not None else None,
            settings=settings,
        )
        result = controller.play()
        tally.record(result)
        _LOGGER.debug(
            "game %d/%d: %s after %d plies",
            index + 1,
            games,
            result,
            controller.turns_played,
        )

    _LOGGER.info(
        "match finished: White %d, Black %d, drawn %d",
        tally.white_wins,
        tally.black_wins,
        tally.draws,
    )
    return tally
