"""Uniform integer sources consumed by dungeon generation.

Generation never touches the global ``random`` module: every draw goes
through a ``RandomSource`` handed to the dungeon at construction, so a
deterministic source reproduces the same dungeon call for call.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Produces uniformly distributed integers in ``[lower, upper)``."""

    def randrange(self, lower: int, upper: int) -> int:
        ...


def _check_bounds(lower: int, upper: int) -> None:
    if upper <= lower:
        raise ValueError(f"Empty range [{lower}, {upper})")


class LowerBoundRandom:
    """Predictable source that always answers with the lower bound."""

    def randrange(self, lower: int, upper: int) -> int:
        _check_bounds(lower, upper)
        return lower

    def __repr__(self) -> str:
        return "LowerBoundRandom()"


class SeededRandom:
    """Reproducible pseudo-random source backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randrange(self, lower: int, upper: int) -> int:
        _check_bounds(lower, upper)
        return self._rng.randrange(lower, upper)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"


class EntropyRandom:
    """Non-reproducible source drawing from the operating system's entropy pool."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def randrange(self, lower: int, upper: int) -> int:
        _check_bounds(lower, upper)
        return self._rng.randrange(lower, upper)

    def __repr__(self) -> str:
        return "EntropyRandom()"


def make_random_source(is_random: bool, seed: Optional[int] = None) -> RandomSource:
    """Pick a source: lower-bound when not random, seeded when a seed is given, entropy otherwise."""
    if not is_random:
        return LowerBoundRandom()
    if seed is not None:
        return SeededRandom(seed)
    return EntropyRandom()
