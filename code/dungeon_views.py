from __future__ import annotations

from typing import Dict, List, Protocol, Tuple

from dungeon_geometry import Direction, GridPos
from dungeon_models import Treasure


class CellView(Protocol):
    """Read-only face of a cell handed out to callers outside generation."""

    @property
    def id(self) -> int:
        ...

    @property
    def pos(self) -> GridPos:
        ...

    @property
    def directions(self) -> Tuple[Direction, ...]:
        ...

    @property
    def treasures(self) -> Tuple[Treasure, ...]:
        ...

    @property
    def is_tunnel(self) -> bool:
        ...

    @property
    def is_cave(self) -> bool:
        ...


class PlayerView(Protocol):
    """Read-only face of the player."""

    @property
    def name(self) -> str:
        ...

    @property
    def location(self) -> CellView:
        ...

    @property
    def collected_treasures(self) -> Dict[Treasure, int]:
        ...


class RenderableDungeon(Protocol):
    """
    Defines what GridRendererMixin needs from the class it is mixed into.
    The per-cell directions and the three marker ids are all the renderer reads.
    """

    rows: int
    columns: int

    def cell_rows(self) -> List[List[CellView]]:
        ...

    def marker_ids(self) -> Tuple[int, int, int]:
        """Return (player cell id, start cell id, destination cell id)."""
        ...
