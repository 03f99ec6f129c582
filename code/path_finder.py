"""Breadth-first shortest paths over the open directions of the grid."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, Set, Tuple

from dungeon_layout import DungeonLayout
from dungeon_models import Cell

UNREACHABLE = -1


def _open_neighbors(layout: DungeonLayout, cell: Cell) -> Iterator[Cell]:
    for direction in cell.directions:
        neighbor = layout.neighbor(cell, direction)
        if neighbor is not None:
            yield neighbor


def shortest_distance(layout: DungeonLayout, source: Cell, target: Cell) -> int:
    """Number of moves from ``source`` to ``target``, or ``UNREACHABLE``."""
    visited: Set[int] = {source.id}
    queue = deque([(source, 0)])
    while queue:
        current, distance = queue.popleft()
        if current.id == target.id:
            return distance
        for neighbor in _open_neighbors(layout, current):
            if neighbor.id in visited:
                continue
            visited.add(neighbor.id)
            queue.append((neighbor, distance + 1))
    return UNREACHABLE


class PathFinder:
    """Caches pairwise distances for one finished layout."""

    def __init__(self, layout: DungeonLayout) -> None:
        self.layout = layout
        self._distance_cache: Dict[Tuple[int, int], int] = {}

    def distance(self, source: Cell, target: Cell) -> int:
        key = (min(source.id, target.id), max(source.id, target.id))
        if key not in self._distance_cache:
            self._distance_cache[key] = shortest_distance(self.layout, source, target)
        return self._distance_cache[key]
