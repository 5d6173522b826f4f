"""Command-line entrypoint: generate a board and play an unattended match."""

from __future__ import annotations

import argparse
import logging

from hexdice.config import Settings, get_settings
from hexdice.domain.autoplay import play_match
from hexdice.domain.game import GameState
from hexdice.domain.generation import generation_stats

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a self-driven Hex Dice match")
    parser.add_argument(
        "--players", type=int, default=settings.number_of_players, help="Number of players (2-8)"
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Match seed")
    parser.add_argument(
        "--max-combats",
        type=int,
        default=settings.max_combats,
        help="Stop after this many combats",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final game snapshot as JSON",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    state = GameState.new_game(args.players, seed=args.seed, rules=settings.rules())
    for player, stats in generation_stats(state.board).items():
        logger.info(
            "player %d: %d regions, %d hexes, %d dice",
            player,
            stats["regions"],
            stats["hexes"],
            stats["dice"],
        )

    summary = play_match(state, max_combats=args.max_combats)
    if summary.winner is not None:
        print(f"Player {summary.winner + 1} wins after {summary.combats} combats")
    else:
        print(f"No winner after {summary.combats} combats ({summary.turns} turns)")

    if args.json:
        print(state.snapshot().model_dump_json(indent=2))
    return 0
