"""Core dataclasses used by the dungeon generator and the game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from dungeon_geometry import Direction, GridPos


class Treasure(Enum):
    """Kinds of loot that can lie in a cave."""
    RUBY = "ruby"
    DIAMOND = "diamond"
    SAPPHIRE = "sapphire"


@dataclass(frozen=True, order=True)
class Edge:
    """Undirected connection between two cell ids; ``Edge(a, b) == Edge(b, a)``."""

    first: int
    second: int

    def __post_init__(self) -> None:
        if self.first > self.second:
            first, second = self.second, self.first
            object.__setattr__(self, "first", first)
            object.__setattr__(self, "second", second)

    def __iter__(self):
        yield self.first
        yield self.second


@dataclass(eq=False)
class Cell:
    """A location in the dungeon grid.

    Cells are compared by identity: the layout owns exactly one object per
    grid position and everybody else holds references to it. Directions and
    treasures are only changed through the mutator methods, which are meant
    for generation and player actions; other callers should stick to the
    read-only properties described by ``dungeon_views.CellView``.
    """

    id: int
    pos: GridPos
    _directions: Tuple[Direction, ...] = field(default=(), repr=False)
    _treasures: List[Treasure] = field(default_factory=list, repr=False)

    @property
    def row(self) -> int:
        return self.pos.row

    @property
    def col(self) -> int:
        return self.pos.col

    @property
    def directions(self) -> Tuple[Direction, ...]:
        return self._directions

    @property
    def treasures(self) -> Tuple[Treasure, ...]:
        return tuple(self._treasures)

    @property
    def is_tunnel(self) -> bool:
        return len(self._directions) == 2

    @property
    def is_cave(self) -> bool:
        return not self.is_tunnel

    @property
    def label(self) -> str:
        return "T" if self.is_tunnel else "C"

    def can_move(self, direction: Direction) -> bool:
        return direction in self._directions

    def set_directions(self, directions: Iterable[Direction]) -> None:
        # Stored in enum order so iteration is stable regardless of discovery order.
        wanted = set(directions)
        self._directions = tuple(direction for direction in Direction if direction in wanted)

    def add_treasures(self, treasures: Iterable[Treasure]) -> None:
        self._treasures.extend(treasures)

    def remove_treasures(self, kinds: Iterable[Treasure]) -> List[Treasure]:
        """Remove every treasure whose kind is in ``kinds`` and return the removed items."""
        wanted = {kind for kind in kinds if isinstance(kind, Treasure)}
        if not wanted:
            return []
        removed = [treasure for treasure in self._treasures if treasure in wanted]
        self._treasures = [treasure for treasure in self._treasures if treasure not in wanted]
        return removed

    def __str__(self) -> str:
        return self.label


class Player:
    """The explorer walking through the dungeon."""

    def __init__(self, name: str, location: Cell) -> None:
        if not name:
            raise ValueError("Player name cannot be empty")
        if location is None:
            raise ValueError("Player location cannot be None")
        self._name = name
        self._location = location
        self._collected: Dict[Treasure, int] = {kind: 0 for kind in Treasure}

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> Cell:
        return self._location

    @property
    def collected_treasures(self) -> Dict[Treasure, int]:
        return dict(self._collected)

    def move_to(self, cell: Cell) -> None:
        if cell is None:
            raise ValueError("Player location cannot be None")
        self._location = cell

    def collect(self, kinds: Iterable[Treasure]) -> List[Treasure]:
        """Pick up every treasure of the given kinds from the current cell."""
        removed = self._location.remove_treasures(kinds)
        for treasure in removed:
            self._collected[treasure] += 1
        return removed

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, cell={self._location.id})"
