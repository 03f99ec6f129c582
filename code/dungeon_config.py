"""Configuration container for dungeon construction."""

from __future__ import annotations

from dataclasses import dataclass

from dungeon_constants import MIN_SPAN_NON_WRAPPING, MIN_SPAN_WRAPPING
from dungeon_errors import DungeonConfigError


def candidate_edge_count(rows: int, columns: int, wrapping: bool) -> int:
    """Number of adjacent cell pairs on the grid."""
    if wrapping:
        return 2 * rows * columns
    return 2 * rows * columns - rows - columns


def max_interconnectivity(rows: int, columns: int, wrapping: bool) -> int:
    """Most extra edges a spanning tree can take before every candidate is used."""
    return candidate_edge_count(rows, columns, wrapping) - rows * columns + 1


@dataclass
class DungeonConfig:
    """Aggregates the parameters of one dungeon."""

    rows: int
    columns: int
    # Extra edges added on top of the spanning tree.
    interconnectivity: int
    wrapping: bool
    # Share of caves, in percent, that receive treasure.
    treasure_percentage: float
    player_name: str
    collect_metrics: bool = False

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise DungeonConfigError("DungeonConfig rows and columns must be positive")
        min_span = MIN_SPAN_WRAPPING if self.wrapping else MIN_SPAN_NON_WRAPPING
        if self.rows + self.columns < min_span:
            raise DungeonConfigError(
                f"Too small dungeon: rows + columns must be at least {min_span}"
                f" for a {'wrapping' if self.wrapping else 'non-wrapping'} dungeon"
            )
        if self.interconnectivity < 0:
            raise DungeonConfigError("DungeonConfig interconnectivity cannot be negative")
        if self.interconnectivity > self.max_interconnectivity:
            raise DungeonConfigError(
                f"Invalid interconnectivity {self.interconnectivity}:"
                f" at most {self.max_interconnectivity} for this grid"
            )
        if not (0 <= self.treasure_percentage <= 100):
            raise DungeonConfigError("DungeonConfig treasure_percentage must lie within [0, 100]")
        if not self.player_name:
            raise DungeonConfigError("Player name cannot be empty")

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    @property
    def candidate_edge_count(self) -> int:
        return candidate_edge_count(self.rows, self.columns, self.wrapping)

    @property
    def max_interconnectivity(self) -> int:
        return max_interconnectivity(self.rows, self.columns, self.wrapping)
