"""Exceptions raised while building or playing a dungeon."""

from __future__ import annotations


class DungeonError(Exception):
    """Base class for every dungeon failure."""


class DungeonConfigError(DungeonError, ValueError):
    """Construction parameters were rejected before generation started."""


class DungeonGenerationError(DungeonError, RuntimeError):
    """Generation ran but could not produce a dungeon for the given parameters."""


class InterconnectivityExhaustedError(DungeonGenerationError):
    """No candidate edges were left while adding extra connections."""


class InvalidMoveError(DungeonError, ValueError):
    """The player tried to move in a direction the current cell does not allow."""


class InvalidTreasureListError(DungeonError, ValueError):
    """A treasure collection call was given no list at all."""
