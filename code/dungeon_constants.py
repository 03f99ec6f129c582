"""Shared constants for dungeon generation and play."""

from __future__ import annotations

RANDOM_SEED = None  # Set to a number for reproducible runs of main.py; None draws a fresh seed each run.

# Smallest allowed rows + columns for each topology.
MIN_SPAN_WRAPPING = 7
MIN_SPAN_NON_WRAPPING = 9

# Start and destination must be at least this many moves apart.
MIN_START_DESTINATION_DISTANCE = 5

# Each treasure cave receives a count drawn from [MIN, MAX_EXCLUSIVE).
MIN_TREASURES_PER_CAVE = 1
MAX_TREASURES_PER_CAVE_EXCLUSIVE = 4
