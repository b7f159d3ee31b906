"""GameController — the orchestrator of a single game.

Coordinates: Players, Board, GameSettings.
Emits events via simple callbacks so the console driver / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from varichess.core.board import Board
from varichess.core.enums import GameResult, Team
from varichess.core.errors import InvalidMoveError
from varichess.core.move import Move
from varichess.core.piece import Piece
from varichess.game.interfaces import IPlayer
from varichess.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One applied move, as reported to ``on_move`` listeners."""

    ply: int
    player: IPlayer
    move: Move
    piece: Piece
    captured: Piece

    @property
    def is_capture(self) -> bool:
        return self.piece.is_opposite_team(self.captured)


# ── Event definitions ────────────────────────────────────────────────────────

TurnCallback = Callable[[Board, IPlayer], None]
MoveCallback = Callable[[MoveRecord, Board], None]
GameOverCallback = Callable[[GameResult, Board], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn: list[TurnCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs a game: asks the side to move for a move, validates it against
    the legal-move list, applies it and notifies listeners.

    The controller is the only caller of ``Board.make_move`` during a game.
    """

    __slots__ = (
        "_board",
        "_players",
        "_settings",
        "_turns_played",
        "_result",
        "events",
    )

    def __init__(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        if white.team != Team.WHITE or black.team != Team.BLACK:
            raise ValueError(
                f"Expected a White and a Black player, got {white.team} and {black.team}"
            )
        self._settings = settings if settings is not None else GameSettings()
        self._board = (
            board
            if board is not None
            else Board(self._settings.width, self._settings.height)
        )
        self._players: dict[Team, IPlayer] = {Team.WHITE: white, Team.BLACK: black}
        self._turns_played = 0
        self._result = self._board.result()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def turns_played(self) -> int:
        return self._turns_played

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._result != GameResult.IN_PROGRESS

    @property
    def current_player(self) -> IPlayer:
        return self._players[self._board.turn]

    def player(self, team: Team) -> IPlayer:
        return self._players[team]

    # ── Game loop ────────────────────────────────────────────────────────

    def play(self) -> GameResult:
        """Play turns until the game is decided."""
        while not self.is_game_over:
            self.play_turn()
        return self._result

    def play_turn(self) -> MoveRecord | None:
        """Play one ply. Returns ``None`` when the game is (or becomes) over
        without a move being made.
        """
        if self.is_game_over:
            return None

        board = self._board
        player = self.current_player
        moves = board.get_moves()
        if not moves:
            _LOGGER.info("%s has no legal moves; the game is drawn", player.name)
            self._finish(GameResult.DRAW)
            return None

        self._emit_turn(player)
        move = self._request_move(player, moves)

        record = MoveRecord(
            ply=self._turns_played + 1,
            player=player,
            move=move,
            piece=board[move.from_cell],
            captured=board[move.to_cell],
        )
        board.make_move(move)
        self._turns_played += 1
        _LOGGER.debug("ply %d: %s played %s", record.ply, player.name, move)
        self._emit_move(record)

        result = board.result()
        if result != GameResult.IN_PROGRESS:
            self._finish(result)
        elif (
            self._settings.max_turns is not None
            and self._turns_played >= self._settings.max_turns
        ):
            _LOGGER.info("Turn limit of %d reached", self._settings.max_turns)
            self._finish(GameResult.DRAW)
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _request_move(self, player: IPlayer, moves: list[Move]) -> Move:
        for attempt in range(1, self._settings.move_retries + 1):
            move = player.get_move(self._board, moves)
            if move in moves:
                return move
            _LOGGER.warning(
                "%s proposed illegal move %s (attempt %d/%d)",
                player.name,
                move,
                attempt,
                self._settings.move_retries,
            )
        raise InvalidMoveError(
            f"{player.name} did not propose a legal move in "
            f"{self._settings.move_retries} attempts"
        )

    def _finish(self, result: GameResult) -> None:
        self._result = result
        _LOGGER.info("Game over after %d plies: %s", self._turns_played, result)
        for cb in self.events.on_game_over:
            cb(result, self._board)

    def _emit_turn(self, player: IPlayer) -> None:
        for cb in self.events.on_turn:
            cb(self._board, player)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._board)
