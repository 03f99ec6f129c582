"""The playable dungeon: a generated layout plus the player exploring it."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from dungeon_config import DungeonConfig
from dungeon_errors import DungeonConfigError, InvalidMoveError, InvalidTreasureListError
from dungeon_generator import DungeonGenerator
from dungeon_geometry import Direction
from dungeon_models import Cell, Edge, Player, Treasure
from dungeon_views import CellView, PlayerView
from grid_renderer import GridRendererMixin
from metrics import GenerationMetrics
from random_source import RandomSource

logger = logging.getLogger(__name__)


class Dungeon(GridRendererMixin):
    """A network of caves and tunnels that a single player explores one move at a time.

    Construction validates nothing itself beyond the random source; the config
    has already been validated. Generation runs once, here, and every cell is
    reachable from every other cell afterwards because the spanning tree
    always grows until it covers the whole grid. Gameplay methods mutate only
    the player's position, the player's tally and the treasure in cells.
    """

    def __init__(self, config: DungeonConfig, rng: RandomSource) -> None:
        if rng is None:
            raise DungeonConfigError("Random source cannot be None")
        self.config = config
        self.rows = config.rows
        self.columns = config.columns
        self._generator = DungeonGenerator(config, rng)
        self._layout = self._generator.generate()
        assert self._generator.start is not None and self._generator.destination is not None
        self._start: Cell = self._generator.start
        self._destination: Cell = self._generator.destination
        self._player = Player(config.player_name, self._start)

    @classmethod
    def create(
        cls,
        rows: int,
        columns: int,
        interconnectivity: int,
        wrapping: bool,
        treasure_percentage: float,
        player_name: str,
        rng: RandomSource,
    ) -> Dungeon:
        """Validate the parameters and build a dungeon in one call."""
        config = DungeonConfig(
            rows=rows,
            columns=columns,
            interconnectivity=interconnectivity,
            wrapping=wrapping,
            treasure_percentage=treasure_percentage,
            player_name=player_name,
        )
        return cls(config, rng)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def player(self) -> PlayerView:
        return self._player

    @property
    def player_location(self) -> CellView:
        return self._player.location

    @property
    def start(self) -> CellView:
        return self._start

    @property
    def destination(self) -> CellView:
        return self._destination

    @property
    def wrapping(self) -> bool:
        return self.config.wrapping

    @property
    def accepted_edges(self) -> Tuple[Edge, ...]:
        return tuple(self._layout.accepted_edges)

    @property
    def tree_edge_count(self) -> int:
        return self._layout.tree_edge_count

    @property
    def metrics(self) -> Optional[GenerationMetrics]:
        return self._generator.metrics

    def cell_at(self, row: int, col: int) -> CellView:
        return self._layout.cell_at(row, col)

    def cell_by_id(self, cell_id: int) -> CellView:
        return self._layout.cell_by_id(cell_id)

    def cells(self) -> Iterator[CellView]:
        return self._layout.iter_cells()

    def neighbor(self, cell: CellView, direction: Direction) -> Optional[CellView]:
        return self._layout.neighbor(self._layout.cell_by_id(cell.id), direction)

    def shortest_distance(self, cell_a: CellView, cell_b: CellView) -> int:
        return self._generator.path_finder.distance(
            self._layout.cell_by_id(cell_a.id),
            self._layout.cell_by_id(cell_b.id),
        )

    def is_destination_reached(self) -> bool:
        return self._player.location.id == self._destination.id

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def move_player(self, direction: Direction) -> CellView:
        """Move one step; raises ``InvalidMoveError`` and leaves the player put if the way is shut."""
        current = self._player.location
        if not isinstance(direction, Direction) or not current.can_move(direction):
            raise InvalidMoveError(f"Cannot move {direction} from cell {current.id}")
        target = self._layout.move_target(current, direction)
        self._player.move_to(target)
        logger.debug("%s moved %s to cell %d", self._player.name, direction.name, target.id)
        return target

    def collect_all_treasures(self) -> List[Treasure]:
        return self._player.collect(list(Treasure))

    def collect_treasure(self, kinds: Iterable[Treasure]) -> List[Treasure]:
        """Collect only the given kinds; ``None`` is rejected, an empty list does nothing."""
        if kinds is None:
            raise InvalidTreasureListError("Treasure list cannot be None")
        return self._player.collect(list(kinds))

    # ------------------------------------------------------------------
    # Rendering contract
    # ------------------------------------------------------------------
    def cell_rows(self) -> List[List[CellView]]:
        return [list(row) for row in self._layout.grid]

    def marker_ids(self) -> Tuple[int, int, int]:
        return self._player.location.id, self._start.id, self._destination.id

    def __str__(self) -> str:
        return self.render()
