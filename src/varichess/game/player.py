"""Concrete player implementations."""

from __future__ import annotations

import logging
import random
import sys
from typing import TYPE_CHECKING, TextIO

from varichess.core.enums import PieceKind, Team
from varichess.core.move import parse_move
from varichess.engine import (
    DEFAULT_DEPTH,
    IEngine,
    MinimaxSearchEngine,
    SearchLimits,
    WeightTable,
)
from varichess.game.interfaces import IPlayer

if TYPE_CHECKING:
    from varichess.core.board import Board
    from varichess.core.move import Move

_LOGGER = logging.getLogger(__name__)


class _Player(IPlayer):
    """Shared team/name bookkeeping."""

    __slots__ = ("_team", "_name")

    def __init__(self, team: Team, name: str = "") -> None:
        if team == Team.NONE:
            raise ValueError("A player must play White or Black")
        self._team = team
        self._name = name or str(team)

    @property
    def team(self) -> Team:
        return self._team

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._team}, {self._name!r})"


class HumanPlayer(_Player):
    """A human participant typing moves such as ``a2a4`` on a text stream.

    Invalid input is answered with the list of legal moves and the prompt
    repeats until a legal move arrives. End of input raises ``EOFError``.
    """

    __slots__ = ("_stdin", "_stdout")

    def __init__(
        self,
        team: Team,
        name: str = "",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        super().__init__(team, name)
        self._stdin = stdin
        self._stdout = stdout

    @property
    def is_human(self) -> bool:
        return True

    def get_move(self, board: Board, moves: list[Move]) -> Move:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        stdout = self._stdout if self._stdout is not None else sys.stdout
        while True:
            stdout.write("What's your move?: ")
            stdout.flush()
            line = stdin.readline()
            if not line:
                raise EOFError(f"{self._name}: no more input")
            text = line.strip()
            stdout.write("\n")
            try:
                move = parse_move(text)
            except ValueError:
                move = None
            if move is not None and move in moves:
                return move
            _LOGGER.debug("%s rejected input %r", self._name, text)
            stdout.write(
                f"{text} is not a valid move! "
                "Please choose one of the following moves: \n"
            )
            stdout.write(" ".join(m.notation for m in moves) + "\n")


class RandomPlayer(_Player):
    """Plays a uniformly random legal move."""

    __slots__ = ("_rng",)

    def __init__(self, team: Team, name: str = "", seed: int | None = None) -> None:
        super().__init__(team, name)
        self._rng = random.Random(seed)

    def get_move(self, board: Board, moves: list[Move]) -> Move:
        return self._rng.choice(moves)


class CapturePlayer(_Player):
    """Plays a random capturing move, or a random move when nothing captures."""

    __slots__ = ("_rng",)

    def __init__(self, team: Team, name: str = "", seed: int | None = None) -> None:
        super().__init__(team, name)
        self._rng = random.Random(seed)

    def _shuffled(self, moves: list[Move]) -> list[Move]:
        shuffled = list(moves)
        self._rng.shuffle(shuffled)
        return shuffled

    def get_move(self, board: Board, moves: list[Move]) -> Move:
        shuffled = self._shuffled(moves)
        for move in shuffled:
            if board[move.from_cell].is_opposite_team(board[move.to_cell]):
                return move
        return shuffled[0]


class KingCapturePlayer(CapturePlayer):
    """Like :class:`CapturePlayer`, but takes the opposing king whenever it can."""

    __slots__ = ()

    def get_move(self, board: Board, moves: list[Move]) -> Move:
        shuffled = self._shuffled(moves)
        captures = [
            move
            for move in shuffled
            if board[move.from_cell].is_opposite_team(board[move.to_cell])
        ]
        for move in captures:
            if board[move.to_cell].kind == PieceKind.KING:
                return move
        if captures:
            return captures[0]
        return shuffled[0]


class AIPlayer(_Player):
    """Minimax-driven participant.

    Args:
        team: Side the AI plays.
        name: Display name.
        depth: Search depth in plies.
        weights: Material table; defaults to the standard values.
        engine: Search engine; defaults to :class:`MinimaxSearchEngine`.
    """

    __slots__ = ("_engine", "_limits")

    def __init__(
        self,
        team: Team,
        name: str = "",
        depth: int = DEFAULT_DEPTH,
        weights: WeightTable | None = None,
        engine: IEngine | None = None,
    ) -> None:
        super().__init__(team, name or f"{team} AI")
        self._engine = engine if engine is not None else MinimaxSearchEngine(weights)
        self._limits = SearchLimits(max_depth=depth)

    @property
    def depth(self) -> int:
        return self._limits.max_depth

    def get_move(self, board: Board, moves: list[Move]) -> Move:
        result = self._engine.search(board, moves, self._team, self._limits)
        _LOGGER.debug(
            "%s chose %s (score=%d, nodes=%d)",
            self._name,
            result.best_move,
            result.score,
            result.nodes,
        )
        return moves[result.best_index]
