"""
Selection validation: build a cell path from pointer events, read the string
it spells, and check it against the known words.
"""

from typing import Collection, List

from pydantic import BaseModel, Field

from .geometry import in_bounds, is_adjacent
from .grid import Grid
from .models import Coordinate


def resolve(grid: Grid, path: List[Coordinate]) -> str:
    """Return the string spelled by the cells of `path`, in order."""
    for coord in path:
        if not in_bounds(Coordinate(*coord), grid.size):
            raise ValueError(f"Cell {tuple(coord)} is outside the {grid.size}x{grid.size} grid")
    return "".join(grid[coord] for coord in path)


def is_winning_word(text: str, known_words: Collection[str]) -> bool:
    """Exact, case-sensitive membership check."""
    return bool(text) and text in known_words


class SelectionPath(BaseModel):
    """
    The path a user is dragging across the grid.

    Consecutive cells are always 8-adjacent and no cell appears twice;
    moves that would break either rule are ignored.

    Attributes:
        cells: Selected cells in drag order
        active: Whether a drag is in progress
    """

    cells: List[Coordinate] = Field(default_factory=list)
    active: bool = False

    def begin(self, coord: Coordinate) -> None:
        """Start a new drag at `coord`, discarding any previous path."""
        self.cells = [Coordinate(*coord)]
        self.active = True

    def extend(self, coord: Coordinate) -> bool:
        """
        Append `coord` if it continues the path.

        Returns:
            True if the cell was added, False if the move was ignored
        """
        coord = Coordinate(*coord)
        if not self.active or not self.cells:
            return False
        if coord in self.cells:
            return False
        if not is_adjacent(self.cells[-1], coord):
            return False
        self.cells.append(coord)
        return True

    def end(self) -> List[Coordinate]:
        """Finish the drag and hand back the path; the selection is cleared."""
        path = self.cells
        self.cells = []
        self.active = False
        return path

    def text(self, grid: Grid) -> str:
        """Live preview of the string under the current drag."""
        if not self.active:
            return ""
        return resolve(grid, self.cells)
