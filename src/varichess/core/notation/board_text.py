"""Board text format: parsing and serialization.

Example (8x8 starting position)::

       abcdefgh
     8 ♜♞♝♛♚♝♞♜ 8
     7 ♟♟♟♟♟♟♟♟ 7
     ...
     1 ♖♘♗♕♔♗♘♖ 1
       abcdefgh

The side to move is not part of the format; decoded boards start with
White to move. Several boards may follow each other in one stream.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import TextIO

from varichess.core.board import Board, check_dimensions
from varichess.core.errors import BoardFormatError, BoardSizeError
from varichess.core.piece import STANDARD_CATALOG, Piece, PieceCatalog
from varichess.core.types import Cell, column_letter


def _column_header(width: int, height: int) -> str:
    return " " * (len(str(height)) + 2) + "".join(column_letter(x) for x in range(width))


def board_to_text(board: Board) -> str:
    """Serialise *board* to the text format (with a trailing newline)."""
    digits = len(str(board.height))
    header = _column_header(board.width, board.height)
    lines = [header]
    for y in range(board.height - 1, -1, -1):
        glyphs = "".join(board[Cell(x, y)].glyph for x in range(board.width))
        lines.append(f" {y + 1:>{digits}} {glyphs} {y + 1}")
    lines.append(header)
    return "\n".join(lines) + "\n"


def write_board(board: Board, stream: TextIO) -> None:
    """Append *board* to *stream*."""
    stream.write(board_to_text(board))


def _next_content_line(stream: TextIO) -> str | None:
    """Next non-blank line without its newline, or ``None`` at end of stream."""
    while line := stream.readline():
        if line.strip():
            return line.rstrip("\r\n")
    return None


def _required_line(stream: TextIO, what: str) -> str:
    line = stream.readline()
    if not line:
        raise BoardFormatError(f"Board text ended before the {what}")
    return line.rstrip("\r\n")


def _parse_row_number(token: str, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise BoardFormatError(f"Invalid row number {token!r} in line {line!r}") from None


def _read_board(stream: TextIO, catalog: PieceCatalog) -> Board | None:
    header = _next_content_line(stream)
    if header is None:
        return None
    width = sum(1 for ch in header if not ch.isspace())

    first = _required_line(stream, "first rank")
    tokens = first.split()
    if not tokens:
        raise BoardFormatError(f"Missing row number in line {first!r}")
    height = _parse_row_number(tokens[0], first)
    try:
        check_dimensions(width, height)
    except BoardSizeError as exc:
        raise BoardFormatError(str(exc)) from exc

    rows: list[list[Piece]] = [[] for _ in range(height)]
    line = first
    for row_number in range(height, 0, -1):
        if row_number != height:
            line = _required_line(stream, f"rank {row_number}")
        parts = line.split()
        if len(parts) != 3:
            raise BoardFormatError(f"Malformed rank line {line!r}")
        left, glyphs, right = parts
        if (
            _parse_row_number(left, line) != row_number
            or _parse_row_number(right, line) != row_number
        ):
            raise BoardFormatError(f"Expected rank {row_number}, got line {line!r}")
        if len(glyphs) != width:
            raise BoardFormatError(
                f"Rank {row_number} has {len(glyphs)} cells, expected {width}"
            )
        rows[row_number - 1] = [catalog.from_glyph(glyph) for glyph in glyphs]

    _required_line(stream, "column footer")
    return Board.from_rows(rows)


def read_board(stream: TextIO, catalog: PieceCatalog = STANDARD_CATALOG) -> Board:
    """Consume exactly one board from *stream*."""
    board = _read_board(stream, catalog)
    if board is None:
        raise BoardFormatError("No board found in stream")
    return board


def read_boards(
    stream: TextIO, catalog: PieceCatalog = STANDARD_CATALOG
) -> Iterator[Board]:
    """Yield every board stored in *stream*."""
    while (board := _read_board(stream, catalog)) is not None:
        yield board


def board_from_text(text: str, catalog: PieceCatalog = STANDARD_CATALOG) -> Board:
    """Parse the first board in *text*."""
    return read_board(io.StringIO(text), catalog)
