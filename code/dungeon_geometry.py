"""Grid geometry helpers: cardinal directions and row/column positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(Enum):
    """Cardinal directions with (row, column) unit steps on the dungeon grid."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    def opposite(self) -> Direction:
        return Direction((-self.d_row, -self.d_col))


@dataclass(frozen=True, order=True)
class GridPos:
    """Integer (row, column) coordinate of a cell."""

    row: int
    col: int

    def cell_id(self, columns: int) -> int:
        """Row-major id of this position in a grid ``columns`` wide."""
        return self.row * columns + self.col

    def step(
        self,
        direction: Direction,
        rows: int,
        columns: int,
        wrapping: bool,
    ) -> Optional[GridPos]:
        """Return the neighbouring position, or None when it falls off a non-wrapping grid."""
        row = self.row + direction.d_row
        col = self.col + direction.d_col
        if wrapping:
            return GridPos(row % rows, col % columns)
        if 0 <= row < rows and 0 <= col < columns:
            return GridPos(row, col)
        return None
