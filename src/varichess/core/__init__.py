"""Core domain layer — pure board logic with zero external dependencies.

Quick start::

    from varichess.core import Board

    board = Board(width=10, height=10)
    for move in board.get_moves():
        print(move)
    print(board)
"""

from varichess.core.board import Board
from varichess.core.enums import GameResult, PieceKind, Team
from varichess.core.errors import (
    BoardError,
    BoardFormatError,
    BoardSizeError,
    GlyphLookupError,
    InvalidMoveError,
    OutOfBoundsError,
    PieceRuleError,
)
from varichess.core.move import Move, parse_move
from varichess.core.notation import (
    board_from_text,
    board_to_text,
    read_board,
    read_boards,
    write_board,
)
from varichess.core.piece import STANDARD_CATALOG, Piece, PieceCatalog
from varichess.core.types import Cell, parse_cell

__all__ = [
    # Enums
    "GameResult",
    "PieceKind",
    "Team",
    # Errors
    "BoardError",
    "BoardFormatError",
    "BoardSizeError",
    "GlyphLookupError",
    "InvalidMoveError",
    "OutOfBoundsError",
    "PieceRuleError",
    # Types / helpers
    "Cell",
    "parse_cell",
    "parse_move",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "PieceCatalog",
    "STANDARD_CATALOG",
    # Notation
    "board_from_text",
    "board_to_text",
    "read_board",
    "read_boards",
    "write_board",
]
