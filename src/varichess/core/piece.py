"""Flyweight pieces and the immutable piece catalog.

Every (kind, team) pair exists exactly once per process. Boards store
references to these instances and compare them by identity, which is also
how the search weight table looks them up.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from varichess.core.enums import PieceKind, Team
from varichess.core.errors import GlyphLookupError
from varichess.core.move_generator import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    gen_pawn,
    gen_sliding,
    gen_steps,
    is_enemy,
    pawn_last_row,
)

if TYPE_CHECKING:
    from varichess.core.board import Board
    from varichess.core.move import Move
    from varichess.core.types import Cell


@dataclass(frozen=True, eq=False, repr=False)
class Piece:
    """Immutable piece identity with its movement and execution rules.

    Subclasses override :meth:`generate` and, when a move has effects beyond
    the classical swap-and-clear, :meth:`apply`. Equality is identity.
    """

    team: Team
    kind: PieceKind
    glyph: str

    def __post_init__(self) -> None:
        if len(self.glyph) != 1 or self.glyph.isspace():
            raise ValueError(f"Piece glyph must be one visible character: {self.glyph!r}")

    # ── Rules ────────────────────────────────────────────────────────────

    def generate(self, board: Board, at: Cell, moves: list[Move]) -> None:
        """Append the moves of this piece standing on *at* to *moves*."""

    def apply(self, board: Board, move: Move) -> None:
        """Execute *move*; the default is the classical swap-and-clear."""
        board.make_classical_move(move)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return self.team == Team.NONE

    def is_opposite_team(self, other: Piece) -> bool:
        """Whether *other* belongs to the opposing side."""
        return is_enemy(self.team, other.team)

    def __str__(self) -> str:
        return self.glyph

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.team}, {self.glyph!r})"


class EmptySpace(Piece):
    """The shared empty-cell sentinel; it never moves."""


class Pawn(Piece):
    def generate(self, board: Board, at: Cell, moves: list[Move]) -> None:
        gen_pawn(board, at, self.team, moves)

    def apply(self, board: Board, move: Move) -> None:
        """Classical move, promoting to a queen on the far row."""
        if move.to_cell.y == pawn_last_row(board, self.team):
            board.make_classical_move(move, placed=_QUEENS[self.team])
        else:
            board.make_classical_move(move)


class Knight(Piece):
    def generate(self, board: Board, at: Cell, moves: list[Move]) -> None:
        gen_steps(board, at, self.team, KNIGHT_OFFSETS, moves)


class Bishop(Piece):
    def generate(self, board: Board, at: Cell, moves: list[Move]) -> None:
        gen_sliding(board, at, self.team, BISHOP_DIRS, moves)


class Rook(Piece):
    def generate(self, board: Board, at: Cell, moves: list[Move]) -> None:
        gen_sliding(board, at, self.team, ROOK_DIRS, moves)


class Queen(Piece):
    def generate(self, board: Board, at: Cell, moves: list[Move]) -> None:
        gen_sliding(board, at, self.team, QUEEN_DIRS, moves)


class King(Piece):
    def generate(self, board: Board, at: Cell, moves: list[Move]) -> None:
        gen_steps(board, at, self.team, KING_OFFSETS, moves)


# ── Built-in instances ──────────────────────────────────────────────────────

EMPTY = EmptySpace(Team.NONE, PieceKind.EMPTY, ".")

WHITE_PAWN = Pawn(Team.WHITE, PieceKind.PAWN, "♙")
WHITE_KNIGHT = Knight(Team.WHITE, PieceKind.KNIGHT, "♘")
WHITE_BISHOP = Bishop(Team.WHITE, PieceKind.BISHOP, "♗")
WHITE_ROOK = Rook(Team.WHITE, PieceKind.ROOK, "♖")
WHITE_QUEEN = Queen(Team.WHITE, PieceKind.QUEEN, "♕")
WHITE_KING = King(Team.WHITE, PieceKind.KING, "♔")

BLACK_PAWN = Pawn(Team.BLACK, PieceKind.PAWN, "♟")
BLACK_KNIGHT = Knight(Team.BLACK, PieceKind.KNIGHT, "♞")
BLACK_BISHOP = Bishop(Team.BLACK, PieceKind.BISHOP, "♝")
BLACK_ROOK = Rook(Team.BLACK, PieceKind.ROOK, "♜")
BLACK_QUEEN = Queen(Team.BLACK, PieceKind.QUEEN, "♛")
BLACK_KING = King(Team.BLACK, PieceKind.KING, "♚")

_QUEENS: dict[Team, Piece] = {Team.WHITE: WHITE_QUEEN, Team.BLACK: BLACK_QUEEN}

KINGS: dict[Team, Piece] = {Team.WHITE: WHITE_KING, Team.BLACK: BLACK_KING}

_STANDARD: dict[tuple[Team, PieceKind], Piece] = {
    (piece.team, piece.kind): piece
    for piece in (
        WHITE_PAWN,
        WHITE_KNIGHT,
        WHITE_BISHOP,
        WHITE_ROOK,
        WHITE_QUEEN,
        WHITE_KING,
        BLACK_PAWN,
        BLACK_KNIGHT,
        BLACK_BISHOP,
        BLACK_ROOK,
        BLACK_QUEEN,
        BLACK_KING,
    )
}


def standard_piece(team: Team, kind: PieceKind) -> Piece:
    """Built-in piece for *team* and *kind*, e.g. ``(WHITE, ROOK)`` → ♖."""
    if kind == PieceKind.EMPTY:
        return EMPTY
    try:
        return _STANDARD[(team, kind)]
    except KeyError:
        raise ValueError(f"No built-in {kind.name} for team {team}") from None


# ── Catalog ─────────────────────────────────────────────────────────────────


class PieceCatalog:
    """Immutable glyph ↔ piece table used to decode boards.

    Custom pieces are added with :meth:`extended`, which returns a new
    catalog and leaves this one untouched.
    """

    __slots__ = ("_by_glyph",)

    def __init__(self, pieces: Iterable[Piece]) -> None:
        by_glyph: dict[str, Piece] = {}
        for piece in pieces:
            existing = by_glyph.get(piece.glyph)
            if existing is not None and existing is not piece:
                raise ValueError(
                    f"Glyph {piece.glyph!r} already used by {existing!r}"
                )
            by_glyph[piece.glyph] = piece
        self._by_glyph = MappingProxyType(by_glyph)

    def from_glyph(self, glyph: str) -> Piece:
        """Piece encoded by *glyph*; unknown glyphs raise :class:`GlyphLookupError`."""
        try:
            return self._by_glyph[glyph]
        except KeyError:
            raise GlyphLookupError(f"Unknown piece glyph: {glyph!r}") from None

    def extended(self, *pieces: Piece) -> PieceCatalog:
        """New catalog holding this catalog's pieces plus *pieces*."""
        return PieceCatalog([*self._by_glyph.values(), *pieces])

    def __contains__(self, piece: object) -> bool:
        return isinstance(piece, Piece) and self._by_glyph.get(piece.glyph) is piece

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._by_glyph.values())

    def __len__(self) -> int:
        return len(self._by_glyph)


STANDARD_CATALOG = PieceCatalog([EMPTY, *_STANDARD.values()])
