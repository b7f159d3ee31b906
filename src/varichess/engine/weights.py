"""Material weights keyed by piece identity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from varichess.core.enums import PieceKind, Team
from varichess.core.piece import Piece, standard_piece

DEFAULT_KING_WEIGHT = 100
DEFAULT_CUSTOM_WEIGHT = 5

_KIND_VALUES: dict[PieceKind, int] = {
    PieceKind.PAWN: 1,
    PieceKind.KNIGHT: 3,
    PieceKind.BISHOP: 3,
    PieceKind.ROOK: 5,
    PieceKind.QUEEN: 9,
}


@dataclass(frozen=True, slots=True)
class WeightTable:
    """Piece identity -> material value, with a fallback for unknown pieces."""

    weights: Mapping[Piece, int] = field(default_factory=dict)
    fallback: int = DEFAULT_CUSTOM_WEIGHT

    def __post_init__(self) -> None:
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    def weight(self, piece: Piece) -> int:
        return self.weights.get(piece, self.fallback)

    def with_weight(self, piece: Piece, value: int) -> WeightTable:
        """Copy of this table with *piece* valued at *value*."""
        return WeightTable({**self.weights, piece: value}, self.fallback)

    @classmethod
    def standard(
        cls,
        king_weight: int = DEFAULT_KING_WEIGHT,
        custom_weight: int = DEFAULT_CUSTOM_WEIGHT,
    ) -> WeightTable:
        """Classical material values for both teams; the king dominates."""
        values = {**_KIND_VALUES, PieceKind.KING: king_weight}
        weights = {
            standard_piece(team, kind): value
            for team in (Team.WHITE, Team.BLACK)
            for kind, value in values.items()
        }
        return cls(weights, custom_weight)
