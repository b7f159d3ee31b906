"""Movement geometry shared by the piece rules.

Boards have variable dimensions, so instead of precomputed per-square tables
the generators walk offsets and rays on demand, using ``board.contains`` as
the only authority on which cells exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from varichess.core.enums import Team
from varichess.core.move import Move
from varichess.core.types import Cell

if TYPE_CHECKING:
    from varichess.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


def is_enemy(team: Team, other: Team) -> bool:
    """Whether *other* is the opposing side of *team* (never ``NONE``)."""
    return team != Team.NONE and other != Team.NONE and team != other


def gen_steps(
    board: Board,
    at: Cell,
    team: Team,
    offsets: tuple[tuple[int, int], ...],
    moves: list[Move],
) -> None:
    """Single-step jumps onto empty or opposing cells (knight, king)."""
    for dx, dy in offsets:
        to_cell = at.offset(dx, dy)
        if board.contains(to_cell) and board[to_cell].team != team:
            moves.append(Move(at, to_cell))


def gen_sliding(
    board: Board,
    at: Cell,
    team: Team,
    directions: tuple[tuple[int, int], ...],
    moves: list[Move],
) -> None:
    """Rays that stop before an own piece and on the first opposing piece."""
    for dx, dy in directions:
        to_cell = at.offset(dx, dy)
        while board.contains(to_cell):
            target = board[to_cell]
            if target.team == Team.NONE:
                moves.append(Move(at, to_cell))
                to_cell = to_cell.offset(dx, dy)
                continue
            if target.team != team:
                moves.append(Move(at, to_cell))
            break


def pawn_direction(team: Team) -> int:
    """Row delta of a forward pawn step."""
    return 1 if team == Team.WHITE else -1


def pawn_start_row(board: Board, team: Team) -> int:
    return 1 if team == Team.WHITE else board.height - 2


def pawn_last_row(board: Board, team: Team) -> int:
    return board.height - 1 if team == Team.WHITE else 0


def gen_pawn(board: Board, at: Cell, team: Team, moves: list[Move]) -> None:
    """Forward pushes (double from the start row) and diagonal captures."""
    dy = pawn_direction(team)

    one_step = at.offset(0, dy)
    if board.contains(one_step) and board[one_step].team == Team.NONE:
        moves.append(Move(at, one_step))
        if at.y == pawn_start_row(board, team):
            two_step = one_step.offset(0, dy)
            if board.contains(two_step) and board[two_step].team == Team.NONE:
                moves.append(Move(at, two_step))

    for dx in (-1, 1):
        cap_cell = at.offset(dx, dy)
        if board.contains(cap_cell) and is_enemy(team, board[cap_cell].team):
            moves.append(Move(at, cap_cell))
