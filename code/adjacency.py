"""Derive each cell's open directions from the accepted edge set."""

from __future__ import annotations

from typing import List

from dungeon_geometry import Direction
from dungeon_layout import DungeonLayout
from dungeon_models import Cell


def open_directions(layout: DungeonLayout, cell: Cell) -> List[Direction]:
    """Directions from ``cell`` whose neighbour is joined to it by an accepted edge."""
    directions: List[Direction] = []
    for direction in Direction:
        neighbor = layout.neighbor(cell, direction)
        if neighbor is not None and layout.has_edge(cell.id, neighbor.id):
            directions.append(direction)
    return directions


def resolve_directions(layout: DungeonLayout) -> int:
    """Record open directions on every cell; return how many cells became tunnels."""
    tunnels = 0
    for cell in layout.iter_cells():
        cell.set_directions(open_directions(layout, cell))
        if cell.is_tunnel:
            tunnels += 1
    return tunnels
