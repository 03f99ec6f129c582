"""Render the dungeon state to an ASCII grid."""

from __future__ import annotations

from typing import List

from dungeon_geometry import Direction
from dungeon_views import CellView

PASSAGE_VERTICAL = "     |     "
PASSAGE_NONE = " " * len(PASSAGE_VERTICAL)
PASSAGE_WEST = "--- "
PASSAGE_EAST = " ---"
NO_PASSAGE_SIDE = "    "


class GridRendererMixin:
    """Provides drawing helpers for the class implementing ``RenderableDungeon``.

    Every cell takes three text lines: passages leading north, the cell
    itself flanked by east/west passages, and passages leading south.
    """

    def _cell_symbol(self, cell: CellView) -> str:
        player_id, start_id, destination_id = self.marker_ids()  # type: ignore[attr-defined]
        if cell.id == player_id:
            return "P"
        if cell.id == start_id:
            return "S"
        if cell.id == destination_id:
            return "D"
        return "T" if cell.is_tunnel else "C"

    @staticmethod
    def _vertical_line(row: List[CellView], direction: Direction) -> str:
        return "".join(
            PASSAGE_VERTICAL if direction in cell.directions else PASSAGE_NONE for cell in row
        )

    def _cell_line(self, row: List[CellView]) -> str:
        parts = []
        for cell in row:
            parts.append(PASSAGE_WEST if Direction.WEST in cell.directions else NO_PASSAGE_SIDE)
            parts.append(f"[{self._cell_symbol(cell)}]")
            parts.append(PASSAGE_EAST if Direction.EAST in cell.directions else NO_PASSAGE_SIDE)
        return "".join(parts)

    def render(self) -> str:
        """Return the whole grid as text, one trailing newline per line."""
        lines: List[str] = []
        for row in self.cell_rows():  # type: ignore[attr-defined]
            lines.append(self._vertical_line(row, Direction.NORTH))
            lines.append(self._cell_line(row))
            lines.append(self._vertical_line(row, Direction.SOUTH))
        return "".join(line + "\n" for line in lines)

    def print_grid(self) -> None:
        """Prints the ASCII grid to the console."""
        print(self.render(), end="")
