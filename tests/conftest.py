"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Mapping

import pytest

from varichess.core.board import Board
from varichess.core.enums import Team
from varichess.core.piece import EMPTY, Piece
from varichess.core.types import parse_cell
from varichess.settings import ENV_PREFIX

BoardFactory = Callable[..., Board]


def build_board(
    width: int,
    height: int,
    pieces: Mapping[str, Piece],
    turn: Team = Team.WHITE,
) -> Board:
    """Board of the given size holding only *pieces*, keyed by cell name."""
    rows = [[EMPTY] * width for _ in range(height)]
    for name, piece in pieces.items():
        cell = parse_cell(name)
        rows[cell.y][cell.x] = piece
    return Board.from_rows(rows, turn=turn)


@pytest.fixture
def make_board() -> BoardFactory:
    """Factory fixture: ``make_board(width, height, {"a1": piece}, turn)``."""
    return build_board


@pytest.fixture
def board() -> Board:
    """Fresh 8x8 board in the starting layout."""
    return Board()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep ``VARICHESS_*`` variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    yield
