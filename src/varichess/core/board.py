"""Board - piece placement on a variable-size grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from varichess.core.enums import GameResult, PieceKind, Team
from varichess.core.errors import BoardSizeError, OutOfBoundsError, PieceRuleError
from varichess.core.move import Move
from varichess.core.piece import EMPTY, KINGS, Piece, standard_piece
from varichess.core.types import MAX_HEIGHT, MAX_WIDTH, Cell

MIN_SIZE = 2

# Filled outward from the king/queen pair while columns remain.
_OUTER_PIECES: tuple[PieceKind, ...] = (
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def check_dimensions(width: int, height: int) -> None:
    """Raise :class:`BoardSizeError` unless the dimensions are supported."""
    if not MIN_SIZE <= width <= MAX_WIDTH:
        raise BoardSizeError(
            f"width must be between {MIN_SIZE} and {MAX_WIDTH} (inclusive), got {width}"
        )
    if not MIN_SIZE <= height <= MAX_HEIGHT:
        raise BoardSizeError(
            f"height must be between {MIN_SIZE} and {MAX_HEIGHT} (inclusive), got {height}"
        )


class Board:
    """Mutable ``height x width`` grid of piece references plus the side to move.

    ``make_move`` is the only public way to change the contents once the
    board is built.
    """

    __slots__ = ("_grid", "_width", "_height", "turn")

    def __init__(self, width: int = 8, height: int = 8) -> None:
        check_dimensions(width, height)
        self._width = width
        self._height = height
        self._grid: list[list[Piece]] = []
        self.turn = Team.WHITE
        self.reset()

    # -- Dimensions ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def contains(self, cell: Cell) -> bool:
        """Whether *cell* lies on the board."""
        return 0 <= cell.x < self._width and 0 <= cell.y < self._height

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Piece:
        if not self.contains(cell):
            raise OutOfBoundsError(f"Cell {cell} ({cell.x}, {cell.y}) is not on the board")
        return self._grid[cell.y][cell.x]

    def cells(self) -> Iterator[tuple[Cell, Piece]]:
        """All ``(cell, piece)`` pairs, row by row from the bottom."""
        for y, row in enumerate(self._grid):
            for x, piece in enumerate(row):
                yield Cell(x, y), piece

    def rows(self) -> list[tuple[Piece, ...]]:
        """Snapshot of the grid, row 0 first."""
        return [tuple(row) for row in self._grid]

    # -- Layout -------------------------------------------------------------

    def reset(self) -> None:
        """Restore the standard starting layout and give White the move."""
        width = self._width
        last = self._height - 1
        grid = [[EMPTY] * width for _ in range(self._height)]

        if self._height >= 4:
            grid[1] = [standard_piece(Team.WHITE, PieceKind.PAWN)] * width
            grid[last - 1] = [standard_piece(Team.BLACK, PieceKind.PAWN)] * width

        def place(x: int, kind: PieceKind) -> None:
            grid[0][x] = standard_piece(Team.WHITE, kind)
            grid[last][x] = standard_piece(Team.BLACK, kind)

        place(width // 2, PieceKind.KING)
        place(width // 2 - 1, PieceKind.QUEEN)
        for i, kind in enumerate(_OUTER_PIECES):
            right = width // 2 + i + 1
            if right >= width:
                break
            place(right, kind)
            left = width // 2 - i - 2
            if left < 0:
                break
            place(left, kind)

        self._grid = grid
        self.turn = Team.WHITE

    # -- Moves --------------------------------------------------------------

    def get_moves(self) -> list[Move]:
        """Every move available to the side to move, in row/column order."""
        moves: list[Move] = []
        turn = self.turn
        for y, row in enumerate(self._grid):
            for x, piece in enumerate(row):
                if piece.team != turn:
                    continue
                at = Cell(x, y)
                try:
                    piece.generate(self, at, moves)
                except OutOfBoundsError as exc:
                    raise PieceRuleError(
                        f"The rule of {piece!r} at {at} read a cell that is not "
                        f"on the board: {exc}"
                    ) from exc

        for move in moves:
            if not (self.contains(move.from_cell) and self.contains(move.to_cell)):
                raise PieceRuleError(
                    "Board.get_moves got a move that moves to or from a cell "
                    f"that is not on the board: {move}"
                )
        return moves

    def make_move(self, move: Move) -> None:
        """Apply *move* through the rule of the piece standing on its source."""
        if not (self.contains(move.from_cell) and self.contains(move.to_cell)):
            raise OutOfBoundsError(
                "Board.make_move called with a move that moves to or from a cell "
                f"that is not on the board: {move}"
            )
        self[move.from_cell].apply(self, move)

    def make_classical_move(self, move: Move, placed: Piece | None = None) -> None:
        """Swap-and-clear: move the source piece (or *placed*) to the
        destination, empty the source and pass the turn.
        """
        src = move.from_cell
        dst = move.to_cell
        mover = self._grid[src.y][src.x]
        self._grid[dst.y][dst.x] = mover if placed is None else placed
        self._grid[src.y][src.x] = EMPTY
        self.turn = self.turn.opposite

    # -- Game state ---------------------------------------------------------

    def winner(self) -> Team:
        """Side whose opponent has lost its king, or ``NONE``."""
        found_white = found_black = False
        white_king = KINGS[Team.WHITE]
        black_king = KINGS[Team.BLACK]
        for row in self._grid:
            for piece in row:
                if piece is white_king:
                    found_white = True
                elif piece is black_king:
                    found_black = True
        if not found_white and found_black:
            return Team.BLACK
        if not found_black and found_white:
            return Team.WHITE
        return Team.NONE

    def result(self) -> GameResult:
        """Game outcome; a board without any king is a draw."""
        winner = self.winner()
        if winner != Team.NONE:
            return GameResult.for_winner(winner)
        if not self.has_piece(KINGS[Team.WHITE]):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def has_piece(self, piece: Piece) -> bool:
        return any(p is piece for row in self._grid for p in row)

    # -- Copying / construction --------------------------------------------

    def copy(self) -> Board:
        """Copy the grid of references; pieces themselves are shared."""
        b = Board.__new__(Board)
        b._width = self._width
        b._height = self._height
        b._grid = [row.copy() for row in self._grid]
        b.turn = self.turn
        return b

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Piece]],
        turn: Team = Team.WHITE,
    ) -> Board:
        """Build a board from rows of pieces, row 0 (White's back rank) first."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        check_dimensions(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise BoardSizeError(f"Row {y + 1} has {len(row)} cells, expected {width}")
        b = cls.__new__(cls)
        b._width = width
        b._height = height
        b._grid = [list(row) for row in rows]
        b.turn = turn
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self.turn == other.turn
            and all(
                a is b
                for row_a, row_b in zip(self._grid, other._grid)
                for a, b in zip(row_a, row_b)
            )
        )

    def __str__(self) -> str:
        from varichess.core.notation.board_text import board_to_text

        return board_to_text(self)

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, turn={self.turn})"
