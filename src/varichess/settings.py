"""Game and engine settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from varichess.core.board import check_dimensions
from varichess.engine.search import DEFAULT_DEPTH

ENV_PREFIX = "VARICHESS_"


def _env_int(
    env: Mapping[str, str],
    name: str,
    default: int | None,
    *,
    optional: bool = False,
) -> int | None:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    if optional and raw.strip().lower() == "none":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class GameSettings:
    """All user-configurable settings."""

    # Board
    width: int = 8
    height: int = 8

    # Engine
    search_depth: int = DEFAULT_DEPTH

    # Game loop
    max_turns: int | None = 1000  # plies; None plays until a king falls
    move_retries: int = 3

    # Randomised players
    seed: int | None = None

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        if self.search_depth < 1:
            raise ValueError(f"search_depth must be >= 1, got {self.search_depth}")
        if self.max_turns is not None and self.max_turns < 1:
            raise ValueError(f"max_turns must be >= 1 or None, got {self.max_turns}")
        if self.move_retries < 1:
            raise ValueError(f"move_retries must be >= 1, got {self.move_retries}")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> GameSettings:
        """Settings with defaults overridden by ``VARICHESS_*`` variables."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            width=_env_int(env, "WIDTH", defaults.width),
            height=_env_int(env, "HEIGHT", defaults.height),
            search_depth=_env_int(env, "DEPTH", defaults.search_depth),
            max_turns=_env_int(env, "MAX_TURNS", defaults.max_turns, optional=True),
            move_retries=_env_int(env, "MOVE_RETRIES", defaults.move_retries),
            seed=_env_int(env, "SEED", defaults.seed, optional=True),
        )
