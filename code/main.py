#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from dungeon import Dungeon
from dungeon_config import DungeonConfig
from dungeon_constants import RANDOM_SEED
from dungeon_errors import DungeonError
from random_source import make_random_source


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a dungeon and let the player wander randomly to the destination."
    )
    parser.add_argument("rows", type=int, help="Number of grid rows")
    parser.add_argument("columns", type=int, help="Number of grid columns")
    parser.add_argument("interconnectivity", type=int, help="Extra edges beyond the spanning tree")
    parser.add_argument("--wrapping", action="store_true", help="Wrap the grid around its edges")
    parser.add_argument(
        "--treasure-percentage",
        type=float,
        default=25.0,
        help="Percentage of caves holding treasure (default: 25)",
    )
    parser.add_argument("--player", default="Player", help="Player name (default: Player)")
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Seed for reproducible runs; a random seed is drawn and printed when omitted",
    )
    parser.add_argument(
        "--fixed",
        action="store_true",
        help="Use the predictable lower-bound random source instead of a seeded one",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=10_000,
        help="Give up the random walk after this many moves (default: 10000)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    seed = args.seed
    if seed is None and not args.fixed:
        # Pick a seed and print it, so a surprising dungeon can be reproduced with --seed.
        seed = random.randint(0, 1000000)
    rng = make_random_source(not args.fixed, seed)
    print(f"Using random source {rng!r}")

    try:
        config = DungeonConfig(
            rows=args.rows,
            columns=args.columns,
            interconnectivity=args.interconnectivity,
            wrapping=args.wrapping,
            treasure_percentage=args.treasure_percentage,
            player_name=args.player,
        )
        dungeon = Dungeon(config, rng)
    except DungeonError as exc:
        print(f"Cannot build dungeon: {exc}", file=sys.stderr)
        return 2

    player = dungeon.player
    dungeon.collect_all_treasures()
    dungeon.print_grid()
    print(f"Collected treasures: {format_treasures(player.collected_treasures)}")

    steps = 0
    while not dungeon.is_destination_reached():
        if steps >= args.max_steps:
            print(f"Gave up after {steps} moves.")
            return 1
        moves = player.location.directions
        move = moves[rng.randrange(0, len(moves))]
        location = dungeon.move_player(move)
        steps += 1
        print()
        print(f"{player.name} moved {move.name}")
        print(f"Current location in grid: {location.pos.row},{location.pos.col}")
        print(f"Possible moves: {', '.join(direction.name for direction in location.directions)}")
        dungeon.collect_all_treasures()
        print(f"Collected treasures: {format_treasures(player.collected_treasures)}")
        dungeon.print_grid()

    print(f"Destination reached in {steps} moves!")
    return 0


def format_treasures(collected) -> str:
    return ", ".join(f"{kind.name}={count}" for kind, count in collected.items())


if __name__ == "__main__":
    sys.exit(main())
