"""Tests for the board text format."""

import io

import pytest

from varichess.core.board import Board
from varichess.core.enums import PieceKind, Team
from varichess.core.errors import BoardFormatError, GlyphLookupError
from varichess.core.move import parse_move
from varichess.core.notation import (
    board_from_text,
    board_to_text,
    read_board,
    read_boards,
    write_board,
)
from varichess.core.piece import STANDARD_CATALOG, WHITE_KING, Piece
from varichess.core.types import Cell

STARTING_TEXT = (
    "   abcdefgh\n"
    " 8 ♜♞♝♛♚♝♞♜ 8\n"
    " 7 ♟♟♟♟♟♟♟♟ 7\n"
    " 6 ........ 6\n"
    " 5 ........ 5\n"
    " 4 ........ 4\n"
    " 3 ........ 3\n"
    " 2 ♙♙♙♙♙♙♙♙ 2\n"
    " 1 ♖♘♗♕♔♗♘♖ 1\n"
    "   abcdefgh\n"
)


class TestBoardToText:
    def test_starting_position(self) -> None:
        assert board_to_text(Board()) == STARTING_TEXT

    def test_str_uses_text_format(self) -> None:
        assert str(Board()) == STARTING_TEXT

    def test_two_digit_rows_are_right_aligned(self) -> None:
        lines = board_to_text(Board(3, 10)).splitlines()
        assert lines[0] == "    abc"
        assert lines[1] == " 10 ♛♚♝ 10"
        assert lines[2] == "  9 ♟♟♟ 9"
        assert lines[10] == "  1 ♕♔♗ 1"
        assert lines[11] == "    abc"

    def test_line_count(self) -> None:
        assert len(board_to_text(Board(5, 7)).splitlines()) == 7 + 2


class TestBoardFromText:
    def test_starting_position(self) -> None:
        assert board_from_text(STARTING_TEXT) == Board()

    def test_decoded_board_has_white_to_move(self) -> None:
        board = Board()
        board.make_move(parse_move("e2e4"))
        decoded = board_from_text(board_to_text(board))
        assert decoded.turn == Team.WHITE
        assert decoded[Cell(4, 3)] is board[Cell(4, 3)]

    def test_non_square_board(self) -> None:
        board = Board(12, 15)
        decoded = board_from_text(board_to_text(board))
        assert (decoded.width, decoded.height) == (12, 15)
        assert decoded == board

    def test_leading_blank_lines_skipped(self) -> None:
        assert board_from_text("\n\n" + STARTING_TEXT) == Board()

    def test_unknown_glyph(self) -> None:
        text = STARTING_TEXT.replace(" 4 ........ 4", " 4 ...X.... 4")
        with pytest.raises(GlyphLookupError):
            board_from_text(text)

    def test_custom_catalog(self) -> None:
        amazon = Piece(Team.WHITE, PieceKind.CUSTOM, "A")
        text = STARTING_TEXT.replace(" 4 ........ 4", " 4 ...A.... 4")
        board = board_from_text(text, STANDARD_CATALOG.extended(amazon))
        assert board[Cell(3, 3)] is amazon

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   abc\n",
            "   abcdefgh\n 8 ♜♞♝♛♚♝♞♜ 8\n",
            STARTING_TEXT.replace(" 5 ........ 5", " 5 ....... 5"),
            STARTING_TEXT.replace(" 5 ........ 5", " 6 ........ 6"),
            STARTING_TEXT.replace(" 5 ........ 5", " x ........ x"),
            STARTING_TEXT.replace(" 5 ........ 5", " 5 ........"),
            STARTING_TEXT[: -len("   abcdefgh\n")],
            "   a\n 1 ♔ 1\n   a\n",
        ],
        ids=[
            "empty",
            "header-only",
            "truncated",
            "short-rank",
            "wrong-row-number",
            "bad-row-number",
            "missing-right-number",
            "missing-footer",
            "too-small",
        ],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(BoardFormatError):
            board_from_text(text)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            board_from_text("   ab\n 200 .. 200\n")


class TestStreams:
    def test_write_appends(self) -> None:
        stream = io.StringIO()
        write_board(Board(), stream)
        write_board(Board(3, 4), stream)
        assert stream.getvalue().startswith(STARTING_TEXT)
        assert stream.getvalue().endswith(board_to_text(Board(3, 4)))

    def test_read_board_consumes_one_board(self) -> None:
        stream = io.StringIO(STARTING_TEXT + board_to_text(Board(4, 5)))
        first = read_board(stream)
        second = read_board(stream)
        assert first == Board()
        assert second == Board(4, 5)
        with pytest.raises(BoardFormatError):
            read_board(stream)

    def test_read_boards_yields_all(self) -> None:
        boards = [Board(), Board(3, 3), Board(10, 12)]
        stream = io.StringIO("\n".join(board_to_text(b) for b in boards))
        assert list(read_boards(stream)) == boards

    def test_read_boards_empty_stream(self) -> None:
        assert list(read_boards(io.StringIO(""))) == []

    def test_king_survives_round_trip(self) -> None:
        decoded = board_from_text(board_to_text(Board(2, 2)))
        assert decoded.has_piece(WHITE_KING)
