"""Tests for the minimax search engine and material weights."""

import pytest

from varichess.core.board import Board
from varichess.core.enums import PieceKind, Team
from varichess.core.move import parse_move
from varichess.core.piece import (
    BLACK_KING,
    BLACK_PAWN,
    BLACK_ROOK,
    WHITE_KING,
    WHITE_PAWN,
    WHITE_QUEEN,
    WHITE_ROOK,
    Piece,
)
from varichess.engine import (
    DEFAULT_DEPTH,
    MinimaxSearchEngine,
    SearchLimits,
    WeightTable,
)


class TestSearchLimits:
    def test_default_depth(self) -> None:
        assert SearchLimits().max_depth == DEFAULT_DEPTH == 3

    def test_depth_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            SearchLimits(max_depth=0)


class TestWeightTable:
    def test_standard_values(self) -> None:
        table = WeightTable.standard()
        assert table.weight(WHITE_PAWN) == 1
        assert table.weight(BLACK_ROOK) == 5
        assert table.weight(WHITE_QUEEN) == 9
        assert table.weight(WHITE_KING) == 100
        assert table.weight(BLACK_KING) == 100

    def test_unknown_piece_uses_fallback(self) -> None:
        custom = Piece(Team.WHITE, PieceKind.CUSTOM, "C")
        assert WeightTable.standard().weight(custom) == 5
        assert WeightTable.standard(custom_weight=7).weight(custom) == 7

    def test_lookup_is_by_identity(self) -> None:
        lookalike = Piece(Team.WHITE, PieceKind.QUEEN, "Q")
        assert WeightTable.standard().weight(lookalike) == 5

    def test_with_weight_copies(self) -> None:
        table = WeightTable.standard()
        heavier = table.with_weight(WHITE_PAWN, 2)
        assert heavier.weight(WHITE_PAWN) == 2
        assert table.weight(WHITE_PAWN) == 1

    def test_weights_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            WeightTable.standard().weights[WHITE_PAWN] = 3  # type: ignore[index]


class TestEvaluate:
    def test_starting_position_is_balanced(self) -> None:
        engine = MinimaxSearchEngine()
        assert engine.evaluate(Board(), Team.WHITE) == 0
        assert engine.evaluate(Board(), Team.BLACK) == 0

    def test_material_from_each_side(self, make_board) -> None:
        board = make_board(4, 4, {"a1": WHITE_KING, "b1": WHITE_ROOK, "d4": BLACK_KING})
        engine = MinimaxSearchEngine()
        assert engine.evaluate(board, Team.WHITE) == 5
        assert engine.evaluate(board, Team.BLACK) == -5

    def test_custom_weights(self, make_board) -> None:
        board = make_board(4, 4, {"a1": WHITE_KING, "b1": WHITE_ROOK, "d4": BLACK_KING})
        engine = MinimaxSearchEngine(WeightTable.standard().with_weight(WHITE_ROOK, 50))
        assert engine.evaluate(board, Team.WHITE) == 50


class TestMinimaxSearch:
    def test_returns_legal_move_from_start(self) -> None:
        board = Board()
        moves = board.get_moves()
        result = MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits())
        assert result.best_move in moves
        assert moves[result.best_index] == result.best_move
        assert result.depth == 3
        assert result.nodes > len(moves)

    def test_search_is_deterministic(self) -> None:
        board = Board(6, 6)
        moves = board.get_moves()
        engine = MinimaxSearchEngine()
        first = engine.search(board, moves, Team.WHITE, SearchLimits())
        second = engine.search(board, moves, Team.WHITE, SearchLimits())
        assert first == second

    def test_live_board_untouched(self) -> None:
        board = Board(5, 6)
        before = board.copy()
        moves = board.get_moves()
        MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits())
        assert board == before

    def test_captures_the_king(self, make_board) -> None:
        board = make_board(4, 4, {"a1": WHITE_ROOK, "d1": WHITE_KING, "a4": BLACK_KING})
        moves = board.get_moves()
        result = MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits())
        assert result.best_move == parse_move("a1a4")
        assert result.score == 105

    def test_black_captures_the_king(self, make_board) -> None:
        board = make_board(
            4, 4, {"a1": WHITE_KING, "a4": BLACK_ROOK, "d4": BLACK_KING}, turn=Team.BLACK
        )
        moves = board.get_moves()
        result = MinimaxSearchEngine().search(board, moves, Team.BLACK, SearchLimits())
        assert result.best_move == parse_move("a4a1")
        assert result.score == 105

    def test_depth_one_takes_most_material(self, make_board) -> None:
        board = make_board(
            4, 4,
            {"a1": WHITE_KING, "b2": WHITE_QUEEN, "b4": BLACK_ROOK,
             "d2": BLACK_PAWN, "c4": BLACK_KING},
        )
        moves = board.get_moves()
        result = MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits(1))
        assert result.best_move == parse_move("b2b4")
        assert result.score == 8

    def test_avoids_hanging_the_rook(self, make_board) -> None:
        board = make_board(4, 4, {"b1": WHITE_ROOK, "d1": WHITE_KING, "a4": BLACK_KING})
        moves = board.get_moves()
        result = MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits(2))
        assert result.best_move not in (parse_move("b1b3"), parse_move("b1b4"))
        assert result.score == 5

    def test_empty_moves_rejected(self) -> None:
        with pytest.raises(ValueError):
            MinimaxSearchEngine().search(Board(), [], Team.WHITE, SearchLimits())

    def test_team_none_rejected(self) -> None:
        board = Board()
        with pytest.raises(ValueError):
            MinimaxSearchEngine().search(board, board.get_moves(), Team.NONE, SearchLimits())


class _NestingEngine(MinimaxSearchEngine):
    """Starts a second search on itself from inside the first one."""

    def __init__(self) -> None:
        super().__init__()
        self.nested = None

    def evaluate(self, board, team) -> int:
        if self.nested is None:
            inner = Board(4, 4)
            self.nested = self.search(inner, inner.get_moves(), Team.WHITE, SearchLimits(2))
        return super().evaluate(board, team)


class TestTieBreaking:
    def test_maximizing_ply_keeps_first_best(self) -> None:
        board = Board()
        moves = board.get_moves()
        result = MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits(1))
        assert result.score == 0
        assert result.best_index == 0
        assert result.best_move == moves[0]

    def test_minimizing_ply_keeps_first_best_capture(self, make_board) -> None:
        board = make_board(
            4, 4,
            {"d1": WHITE_KING, "a4": WHITE_PAWN, "c4": WHITE_PAWN,
             "a1": BLACK_KING, "b4": BLACK_ROOK},
            turn=Team.BLACK,
        )
        moves = board.get_moves()
        captures = [str(m) for m in moves if board[m.to_cell] is WHITE_PAWN]
        assert captures == ["b4a4", "b4c4"]

        result = MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits(1))
        assert result.best_move == parse_move("b4a4")
        assert result.best_index == moves.index(parse_move("b4a4"))
        assert result.score == -4


class TestReentrancy:
    def test_nested_search_does_not_disturb_outer(self, make_board) -> None:
        board = make_board(4, 4, {"a1": WHITE_ROOK, "d1": WHITE_KING, "a4": BLACK_KING})
        moves = board.get_moves()
        expected = MinimaxSearchEngine().search(board, moves, Team.WHITE, SearchLimits())

        engine = _NestingEngine()
        result = engine.search(board, moves, Team.WHITE, SearchLimits())

        assert engine.nested is not None
        assert result == expected


class TestCaptureCandidates:
    def test_keeps_original_indices(self, make_board) -> None:
        board = make_board(
            4, 4,
            {"a1": WHITE_KING, "c1": WHITE_ROOK, "c3": BLACK_PAWN, "d4": BLACK_KING},
        )
        moves = board.get_moves()
        candidates = MinimaxSearchEngine._capture_candidates(board, moves)
        assert [moves[i] for i, _ in candidates] == [m for _, m in candidates]
        assert [str(m) for _, m in candidates] == ["c1c3"]
        assert candidates[0][0] > 0

    def test_all_moves_when_nothing_captures(self) -> None:
        board = Board()
        moves = board.get_moves()
        candidates = MinimaxSearchEngine._capture_candidates(board, moves)
        assert candidates == list(enumerate(moves))
