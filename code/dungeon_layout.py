"""Data container for the dungeon grid and its accepted connections."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Set

from dungeon_config import DungeonConfig
from dungeon_geometry import Direction, GridPos
from dungeon_models import Cell, Edge


class DungeonLayout:
    """Stores the cells of the grid and the edges chosen to exist between them."""

    def __init__(self, config: DungeonConfig) -> None:
        self.config = config
        self.rows = config.rows
        self.columns = config.columns
        self.wrapping = config.wrapping
        self.grid: List[List[Cell]] = [
            [self._make_cell(GridPos(row, col)) for col in range(self.columns)]
            for row in range(self.rows)
        ]
        self.accepted_edges: List[Edge] = []
        self.tree_edge_count = 0
        self._edge_lookup: Set[Edge] = set()

    def _make_cell(self, pos: GridPos) -> Cell:
        return Cell(id=pos.cell_id(self.columns), pos=pos)

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def cell_at(self, row: int, col: int) -> Cell:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexError(f"Cell ({row}, {col}) out of range")
        return self.grid[row][col]

    def cell_by_id(self, cell_id: int) -> Cell:
        if not (0 <= cell_id < self.cell_count):
            raise IndexError(f"Cell id {cell_id} out of range")
        row, col = divmod(cell_id, self.columns)
        return self.grid[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.grid:
            yield from row

    def caves(self) -> List[Cell]:
        """All non-tunnel cells in row-major order."""
        return [cell for cell in self.iter_cells() if cell.is_cave]

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Geometric neighbour of ``cell``, wrapping around the edges when enabled."""
        pos = cell.pos.step(direction, self.rows, self.columns, self.wrapping)
        if pos is None:
            return None
        return self.grid[pos.row][pos.col]

    def accept_edges(self, edges: Iterable[Edge], tree: bool = False) -> int:
        count = 0
        for edge in edges:
            self.accepted_edges.append(edge)
            self._edge_lookup.add(edge)
            count += 1
        if tree:
            self.tree_edge_count += count
        return count

    def has_edge(self, cell_a: int, cell_b: int) -> bool:
        return Edge(cell_a, cell_b) in self._edge_lookup

    def move_target(self, cell: Cell, direction: Direction) -> Cell:
        """Cell reached by leaving ``cell`` through an open ``direction``."""
        target = self.neighbor(cell, direction)
        if target is None:
            raise IndexError(f"No cell {direction.name} of cell {cell.id}")
        return target
