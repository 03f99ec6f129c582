"""DungeonGenerator runs the generation pipeline over a fresh layout."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, Optional, TypeVar

from adjacency import resolve_directions
from dungeon_config import DungeonConfig
from dungeon_constants import MIN_START_DESTINATION_DISTANCE
from dungeon_layout import DungeonLayout
from dungeon_models import Cell
from endpoint_selector import choose_start_and_destination
from graph_builder import add_interconnections, build_spanning_tree, candidate_edges
from metrics import GenerationMetrics
from path_finder import PathFinder
from random_source import RandomSource
from treasure_placer import place_treasures

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DungeonGenerator:
    """Manages the one-shot process of turning a config into a playable layout.

    Steps run in a fixed order because they share one random stream:
    spanning tree, extra connections, direction resolution, treasure, and
    finally the start/destination search.
    """

    def __init__(self, config: DungeonConfig, rng: RandomSource) -> None:
        self.config = config
        self.rng = rng
        self.layout = DungeonLayout(config)
        self.path_finder = PathFinder(self.layout)
        self.metrics = GenerationMetrics() if config.collect_metrics else None
        self.start: Optional[Cell] = None
        self.destination: Optional[Cell] = None

    def _run_step(self, name: str, func: Callable[..., T], *args, **kwargs) -> T:
        if self.metrics is None:
            return func(*args, **kwargs)

        edges_before = len(self.layout.accepted_edges)
        start = perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = perf_counter() - start
            edges_delta = len(self.layout.accepted_edges) - edges_before
            self.metrics.record_step(name, duration, edges_delta)

    def _spanning_tree_step(self):
        candidates = candidate_edges(self.config.rows, self.config.columns, self.config.wrapping)
        result = build_spanning_tree(candidates, self.layout.cell_count, self.rng)
        self.layout.accept_edges(result.tree_edges, tree=True)
        return result

    def _interconnect_step(self, tree_result) -> int:
        extra = add_interconnections(tree_result, self.config.interconnectivity, self.rng)
        return self.layout.accept_edges(extra)

    def generate(self) -> DungeonLayout:
        """Build edges, directions, treasure and endpoints; return the finished layout."""
        tree_result = self._run_step("spanning_tree", self._spanning_tree_step)
        self._run_step("interconnect", self._interconnect_step, tree_result)
        tunnels = self._run_step("resolve_directions", resolve_directions, self.layout)
        filled = self._run_step(
            "place_treasures",
            place_treasures,
            self.layout.caves(),
            self.config.treasure_percentage,
            self.rng,
        )
        self.start, self.destination = self._run_step(
            "select_endpoints",
            choose_start_and_destination,
            self.layout.caves(),
            self.path_finder.distance,
            self.rng,
            MIN_START_DESTINATION_DISTANCE,
        )

        logger.info(
            "Generated %dx%d %s dungeon: %d edges (%d tree), %d tunnels, %d treasure caves,"
            " start %d, destination %d",
            self.config.rows,
            self.config.columns,
            "wrapping" if self.config.wrapping else "non-wrapping",
            len(self.layout.accepted_edges),
            self.layout.tree_edge_count,
            tunnels,
            len(filled),
            self.start.id,
            self.destination.id,
        )
        return self.layout
