"""Notation package: board text format parsing and serialization."""

from varichess.core.notation.board_text import (
    board_from_text,
    board_to_text,
    read_board,
    read_boards,
    write_board,
)

__all__ = [
    "board_from_text",
    "board_to_text",
    "read_board",
    "read_boards",
    "write_board",
]
