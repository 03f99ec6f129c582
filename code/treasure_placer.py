"""Scatter treasure over a share of the caves."""

from __future__ import annotations

from typing import List, Sequence

from dungeon_constants import MAX_TREASURES_PER_CAVE_EXCLUSIVE, MIN_TREASURES_PER_CAVE
from dungeon_models import Cell, Treasure
from random_source import RandomSource


def treasure_cave_count(cave_count: int, percentage: float) -> int:
    """Number of caves that receive treasure, rounded down."""
    return int(cave_count * percentage / 100)


def place_treasures(
    caves: Sequence[Cell],
    percentage: float,
    rng: RandomSource,
) -> List[Cell]:
    """Fill ``percentage`` percent of ``caves`` with one to three random treasures each.

    Caves are picked without replacement. For every pick the treasure count is
    drawn first, then each treasure kind, then the cave itself. Tunnels passed
    in by mistake are rejected.
    """
    if any(cave.is_tunnel for cave in caves):
        raise ValueError("Treasure can only be placed in caves")
    pool = list(caves)
    kinds = list(Treasure)
    filled: List[Cell] = []
    for _ in range(treasure_cave_count(len(pool), percentage)):
        count = rng.randrange(MIN_TREASURES_PER_CAVE, MAX_TREASURES_PER_CAVE_EXCLUSIVE)
        loot = [kinds[rng.randrange(0, len(kinds))] for _ in range(count)]
        cave = pool.pop(rng.randrange(0, len(pool)))
        cave.add_treasures(loot)
        filled.append(cave)
    return filled
