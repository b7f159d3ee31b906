"""Depth-limited minimax search over board copies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from varichess.core.enums import Team
from varichess.engine.search import IEngine, SearchLimits, SearchResult
from varichess.engine.weights import WeightTable

if TYPE_CHECKING:
    from varichess.core.board import Board
    from varichess.core.move import Move

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _SearchContext:
    """State owned by a single ``search`` call."""

    team: Team
    nodes: int = 0


class MinimaxSearchEngine(IEngine):
    """Material-scoring minimax with a capture-first opponent model.

    On the opponent's plies only capturing replies are explored when any
    exist, so the search assumes the opponent always takes material.
    """

    __slots__ = ("_weights",)

    def __init__(self, weights: WeightTable | None = None) -> None:
        self._weights = weights if weights is not None else WeightTable.standard()

    @property
    def weights(self) -> WeightTable:
        return self._weights

    def search(
        self,
        board: Board,
        moves: list[Move],
        team: Team,
        limits: SearchLimits,
    ) -> SearchResult:
        if not moves:
            raise ValueError("Cannot search a position without legal moves")
        if team == Team.NONE:
            raise ValueError("Search team must be White or Black")

        ctx = _SearchContext(team)
        score, index = self._minimax(
            board.copy(), moves, limits.max_depth, board.turn, ctx
        )
        _LOGGER.debug(
            "minimax %s depth=%d: best=%s score=%d nodes=%d",
            team,
            limits.max_depth,
            moves[index],
            score,
            ctx.nodes,
        )
        return SearchResult(index, moves[index], score, limits.max_depth, ctx.nodes)

    def _minimax(
        self,
        board: Board,
        moves: list[Move],
        depth: int,
        to_move: Team,
        ctx: _SearchContext,
    ) -> tuple[int, int]:
        """Return ``(score, index into moves)`` for the side *to_move*."""
        ctx.nodes += 1
        if depth == 0 or not moves or board.winner() != Team.NONE:
            return self.evaluate(board, ctx.team), 0

        next_team = to_move.opposite

        if to_move == ctx.team:
            best_score = 0
            best_index = -1
            for i, move in enumerate(moves):
                score = self._child_score(board, move, depth, next_team, ctx)
                if best_index < 0 or score > best_score:
                    best_score = score
                    best_index = i
            return best_score, best_index

        candidates = self._capture_candidates(board, moves)
        best_score = 0
        best_index = -1
        for i, move in candidates:
            score = self._child_score(board, move, depth, next_team, ctx)
            if best_index < 0 or score < best_score:
                best_score = score
                best_index = i
        return best_score, best_index

    def _child_score(
        self,
        board: Board,
        move: Move,
        depth: int,
        next_team: Team,
        ctx: _SearchContext,
    ) -> int:
        child = board.copy()
        child.make_move(move)
        score, _ = self._minimax(child, child.get_moves(), depth - 1, next_team, ctx)
        return score

    @staticmethod
    def _capture_candidates(board: Board, moves: list[Move]) -> list[tuple[int, Move]]:
        """Capturing moves with their original indices, or every move if none capture."""
        captures = [
            (i, move)
            for i, move in enumerate(moves)
            if board[move.from_cell].is_opposite_team(board[move.to_cell])
        ]
        return captures or list(enumerate(moves))

    def evaluate(self, board: Board, team: Team) -> int:
        """Material balance from *team*'s point of view."""
        white_total = 0
        black_total = 0
        weight = self._weights.weight
        for _, piece in board.cells():
            if piece.team == Team.WHITE:
                white_total += weight(piece)
            elif piece.team == Team.BLACK:
                black_total += weight(piece)

        score = white_total - black_total
        return score if team == Team.WHITE else -score
