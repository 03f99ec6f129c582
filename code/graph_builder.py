"""Builds the dungeon's edge set: a random spanning tree plus extra connections."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from disjoint_set import DisjointSetUnion
from dungeon_errors import InterconnectivityExhaustedError
from dungeon_models import Edge
from random_source import RandomSource

logger = logging.getLogger(__name__)


def candidate_edges(rows: int, columns: int, wrapping: bool) -> List[Edge]:
    """List every pair of physically adjacent cells, in a fixed scan order.

    Interior cells contribute their right and bottom neighbours, then the last
    row and last column are swept. Wrapping grids add each row's first/last
    column pair and each column's first/last row pair.
    """
    if rows <= 0 or columns <= 0:
        raise ValueError("Grid dimensions must be positive")

    def cell(row: int, col: int) -> int:
        return row * columns + col

    edges: List[Edge] = []
    for row in range(rows - 1):
        for col in range(columns - 1):
            edges.append(Edge(cell(row, col), cell(row, col + 1)))
            edges.append(Edge(cell(row, col), cell(row + 1, col)))

    for col in range(columns - 1):
        edges.append(Edge(cell(rows - 1, col), cell(rows - 1, col + 1)))
    for row in range(rows - 1):
        edges.append(Edge(cell(row, columns - 1), cell(row + 1, columns - 1)))

    if wrapping:
        for row in range(rows):
            edges.append(Edge(cell(row, 0), cell(row, columns - 1)))
        for col in range(columns):
            edges.append(Edge(cell(0, col), cell(rows - 1, col)))
    return edges


@dataclass
class SpanningTreeResult:
    """Edge pools left behind by the spanning-tree pass."""

    tree_edges: List[Edge]
    # Candidates that were drawn but would have closed a cycle.
    leftover_edges: List[Edge]
    # Candidates never drawn.
    remaining_edges: List[Edge]
    extra_edges: List[Edge] = field(default_factory=list)

    @property
    def accepted_edges(self) -> List[Edge]:
        return [*self.tree_edges, *self.extra_edges]


def build_spanning_tree(
    candidates: List[Edge],
    cell_count: int,
    rng: RandomSource,
) -> SpanningTreeResult:
    """Randomized Kruskal: draw candidates until ``cell_count - 1`` tree edges exist."""
    remaining = list(candidates)
    tree_edges: List[Edge] = []
    leftover: List[Edge] = []
    dsu = DisjointSetUnion(cell_count)

    while len(tree_edges) < cell_count - 1 and remaining:
        edge = remaining.pop(rng.randrange(0, len(remaining)))
        root_a = dsu.find(edge.first)
        root_b = dsu.find(edge.second)
        if root_a != root_b:
            tree_edges.append(edge)
            dsu.union(root_a, root_b)
        else:
            leftover.append(edge)

    logger.debug(
        "Spanning tree: %d edges accepted, %d left over, %d never drawn",
        len(tree_edges),
        len(leftover),
        len(remaining),
    )
    return SpanningTreeResult(
        tree_edges=tree_edges,
        leftover_edges=leftover,
        remaining_edges=remaining,
    )


def add_interconnections(
    result: SpanningTreeResult,
    interconnectivity: int,
    rng: RandomSource,
) -> List[Edge]:
    """Move ``interconnectivity`` random edges into the accepted set.

    Leftover edges are used first; once they run out, never-drawn candidates
    are used. Running out of both is an error rather than a silent shortfall.
    """
    added: List[Edge] = []
    for _ in range(interconnectivity):
        if result.leftover_edges:
            pool = result.leftover_edges
        elif result.remaining_edges:
            pool = result.remaining_edges
        else:
            raise InterconnectivityExhaustedError(
                f"Only {len(added)} of {interconnectivity} extra connections could be added"
            )
        added.append(pool.pop(rng.randrange(0, len(pool))))
    result.extra_edges.extend(added)
    logger.debug("Interconnectivity: %d extra edges accepted", len(added))
    return added
