"""Pick the start and destination caves."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from dungeon_errors import DungeonGenerationError
from dungeon_models import Cell
from random_source import RandomSource

logger = logging.getLogger(__name__)

DistanceFn = Callable[[Cell, Cell], int]


def _find_destination(
    source: Cell,
    caves: Sequence[Cell],
    distance: DistanceFn,
    rng: RandomSource,
    min_distance: int,
) -> Optional[Cell]:
    """Draw destinations for ``source`` until one is far enough away or the pool runs dry."""
    pool: List[Cell] = list(caves)
    while pool:
        candidate = pool.pop(rng.randrange(0, len(pool)))
        if distance(source, candidate) >= min_distance:
            return candidate
    return None


def choose_start_and_destination(
    caves: Sequence[Cell],
    distance: DistanceFn,
    rng: RandomSource,
    min_distance: int,
) -> Tuple[Cell, Cell]:
    """Return a (start, destination) pair of caves at least ``min_distance`` moves apart.

    Sources are drawn at random without replacement. Each source gets a fresh
    destination pool of every cave. Unreachable pairs never qualify.
    """
    sources: List[Cell] = list(caves)
    attempts = 0
    while sources:
        source = sources.pop(rng.randrange(0, len(sources)))
        attempts += 1
        destination = _find_destination(source, caves, distance, rng, min_distance)
        if destination is not None:
            logger.debug(
                "Start %d and destination %d chosen after %d source attempts",
                source.id,
                destination.id,
                attempts,
            )
            return source, destination
    raise DungeonGenerationError(
        "Dungeon too small or too interconnected: no two caves are "
        f"at least {min_distance} moves apart"
    )
