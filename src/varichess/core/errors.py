"""Error taxonomy for board and policy failures."""

from __future__ import annotations


class BoardError(Exception):
    """Base class for failures raised by the board layer."""


class BoardSizeError(BoardError, ValueError):
    """Board dimensions outside the supported range."""


class OutOfBoundsError(BoardError, IndexError):
    """A supplied move references a cell outside the board."""


class PieceRuleError(BoardError, RuntimeError):
    """A piece rule generated a move that leaves the board.

    This signals a defect in a piece implementation, not bad input.
    """


class GlyphLookupError(BoardError, LookupError):
    """A serialized glyph does not map to any known piece."""


class BoardFormatError(BoardError, ValueError):
    """Board text is structurally malformed."""


class InvalidMoveError(ValueError):
    """A player proposed a move that is not in the legal-move list."""
