import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon import Dungeon
from dungeon_config import DungeonConfig
from dungeon_layout import DungeonLayout
from random_source import LowerBoundRandom, SeededRandom


@pytest.fixture
def lower_bound_rng() -> LowerBoundRandom:
    return LowerBoundRandom()


@pytest.fixture
def make_config() -> Callable[..., DungeonConfig]:
    def _make_config(
        *,
        rows: int = 6,
        columns: int = 4,
        interconnectivity: int = 4,
        wrapping: bool = False,
        treasure_percentage: float = 25,
        player_name: str = "Ada",
        collect_metrics: bool = False,
    ) -> DungeonConfig:
        return DungeonConfig(
            rows=rows,
            columns=columns,
            interconnectivity=interconnectivity,
            wrapping=wrapping,
            treasure_percentage=treasure_percentage,
            player_name=player_name,
            collect_metrics=collect_metrics,
        )

    return _make_config


@pytest.fixture
def make_dungeon(make_config) -> Callable[..., Dungeon]:
    def _make_dungeon(*, seed: int | None = None, **kwargs) -> Dungeon:
        rng = LowerBoundRandom() if seed is None else SeededRandom(seed)
        return Dungeon(make_config(**kwargs), rng)

    return _make_dungeon


@pytest.fixture
def fixed_dungeon(make_dungeon) -> Dungeon:
    """6x4 non-wrapping dungeon built with the lower-bound source."""
    return make_dungeon()


@pytest.fixture
def empty_layout(make_config) -> DungeonLayout:
    return DungeonLayout(make_config(rows=5, columns=4, interconnectivity=0))
