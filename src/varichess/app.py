"""Application entry point: console games, batch simulations, board display."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from varichess.core.board import Board
from varichess.core.enums import GameResult, Team
from varichess.core.errors import BoardError, InvalidMoveError
from varichess.core.notation import read_board, read_boards, write_board
from varichess.game.controller import GameController, MoveRecord
from varichess.game.interfaces import IPlayer
from varichess.game.match import run_match
from varichess.game.player import (
    AIPlayer,
    CapturePlayer,
    HumanPlayer,
    KingCapturePlayer,
    RandomPlayer,
)
from varichess.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

PLAYER_KINDS = ("human", "random", "capture", "king-capture", "ai")


def make_player(
    kind: str,
    team: Team,
    settings: GameSettings,
    game_index: int = 0,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> IPlayer:
    """Build the player policy called *kind* for *team*."""
    seed = None
    if settings.seed is not None:
        seed = settings.seed + 2 * game_index + (0 if team == Team.WHITE else 1)

    if kind == "human":
        return HumanPlayer(team, stdin=stdin, stdout=stdout)
    if kind == "random":
        return RandomPlayer(team, seed=seed)
    if kind == "capture":
        return CapturePlayer(team, seed=seed)
    if kind == "king-capture":
        return KingCapturePlayer(team, seed=seed)
    if kind == "ai":
        return AIPlayer(team, depth=settings.search_depth)
    raise ValueError(f"Unknown player kind: {kind!r}")


def _load_board(path: Path) -> Board:
    with path.open(encoding="utf-8") as stream:
        return read_board(stream)


# ── Sub-commands ─────────────────────────────────────────────────────────────


def _cmd_play(args: argparse.Namespace, settings: GameSettings, out: TextIO) -> int:
    board = _load_board(args.board) if args.board is not None else None
    controller = GameController(
        make_player(args.white, Team.WHITE, settings, stdout=out),
        make_player(args.black, Team.BLACK, settings, stdout=out),
        board=board,
        settings=settings,
    )

    def show_turn(board: Board, player: IPlayer) -> None:
        out.write(f"{board}\n{player.name}'s turn.\n")

    def show_move(record: MoveRecord, board: Board) -> None:
        out.write(
            f"{record.player.name} chose to move {record.piece} from "
            f"{record.move.from_cell} to {record.move.to_cell} ({record.captured})\n\n"
        )

    controller.events.on_turn.append(show_turn)
    controller.events.on_move.append(show_move)

    result = controller.play()
    out.write(f"{controller.board}\n")
    if result == GameResult.DRAW:
        out.write(f"The game is drawn after {controller.turns_played} plies.\n")
    else:
        out.write(f"{result.winner} won!\n")

    if args.save is not None:
        with args.save.open("a", encoding="utf-8") as stream:
            write_board(controller.board, stream)
        _LOGGER.info("Final board appended to %s", args.save)
    return 0


def _cmd_simulate(args: argparse.Namespace, settings: GameSettings, out: TextIO) -> int:
    if "human" in (args.white, args.black):
        raise ValueError("simulate only supports non-interactive players")

    tally = run_match(
        lambda team, index: make_player(args.white, team, settings, index),
        lambda team, index: make_player(args.black, team, settings, index),
        args.games,
        settings,
        board=_load_board(args.board) if args.board is not None else None,
    )
    for name, count in tally.as_dict().items():
        out.write(f"{name} won {count}\n")
    return 0


def _cmd_show(args: argparse.Namespace, settings: GameSettings, out: TextIO) -> int:
    if args.board is None:
        out.write(str(Board(settings.width, settings.height)))
        return 0
    with args.board.open(encoding="utf-8") as stream:
        for board in read_boards(stream):
            out.write(f"{board}\n")
    return 0


# ── Parser ───────────────────────────────────────────────────────────────────


def _add_board_arguments(parser: argparse.ArgumentParser, defaults: GameSettings) -> None:
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument(
        "--board",
        type=Path,
        default=None,
        help="Read board(s) from a board text file",
    )


def _add_game_arguments(
    parser: argparse.ArgumentParser,
    defaults: GameSettings,
    white: str,
    black: str,
) -> None:
    parser.add_argument("--white", choices=PLAYER_KINDS, default=white)
    parser.add_argument("--black", choices=PLAYER_KINDS, default=black)
    parser.add_argument(
        "--depth",
        type=int,
        default=defaults.search_depth,
        help="Minimax search depth in plies",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=defaults.max_turns,
        help="Declare a draw after this many plies",
    )
    parser.add_argument("--seed", type=int, default=defaults.seed)


def create_parser(defaults: GameSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="varichess",
        description="Chess-like games on variable-size boards",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play one game on the console")
    _add_board_arguments(play, defaults)
    _add_game_arguments(play, defaults, white="human", black="ai")
    play.add_argument(
        "--save",
        type=Path,
        default=None,
        help="Append the final board to this file",
    )
    play.set_defaults(handler=_cmd_play)

    simulate = sub.add_parser("simulate", help="Play many games and tally the winners")
    _add_board_arguments(simulate, defaults)
    _add_game_arguments(simulate, defaults, white="random", black="capture")
    simulate.add_argument("--games", type=int, default=100)
    simulate.set_defaults(handler=_cmd_simulate)

    show = sub.add_parser("show", help="Print the starting board or a board file")
    _add_board_arguments(show, defaults)
    show.set_defaults(handler=_cmd_show)
    return parser


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the ``varichess`` command line."""
    out = out if out is not None else sys.stdout
    try:
        defaults = GameSettings.from_env()
    except ValueError as exc:
        sys.stderr.write(f"varichess: {exc}\n")
        return 2
    args = create_parser(defaults).parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        overrides = {"width": args.width, "height": args.height}
        if hasattr(args, "depth"):
            overrides.update(
                search_depth=args.depth,
                max_turns=args.max_turns,
                seed=args.seed,
            )
        settings = replace(defaults, **overrides)
        return args.handler(args, settings, out)
    except (BoardError, InvalidMoveError, ValueError, OSError) as exc:
        _LOGGER.error("%s", exc)
        return 1
    except (EOFError, KeyboardInterrupt):
        _LOGGER.warning("Input closed; game abandoned")
        return 1


if __name__ == "__main__":
    sys.exit(main())
