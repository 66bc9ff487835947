"""Enumerate every string readable in a straight line from a grid."""

from typing import Optional, Set

from .geometry import DIRECTIONS, in_bounds, step
from .grid import Grid
from .models import Coordinate, Direction


def _read(grid: Grid, origin: Coordinate, direction: Direction, length: int) -> Optional[str]:
    """Read `length` letters from `origin`, or None if the read leaves the grid or hits an empty cell."""
    letters = []
    for i in range(length):
        coord = step(origin, direction, i)
        if not in_bounds(coord, grid.size) or grid.is_empty(coord):
            return None
        letters.append(grid[coord])
    return "".join(letters)


def enumerate_words(grid: Grid, min_length: int = 3) -> Set[str]:
    """
    Collect every distinct string of min_length..N letters read in any of
    the 8 directions from any cell.

    Placed words and accidental letter runs are included alike.
    """
    words: Set[str] = set()
    for origin in grid.coordinates():
        for direction in DIRECTIONS:
            for length in range(min_length, grid.size + 1):
                text = _read(grid, origin, direction, length)
                if text is not None:
                    words.add(text)
    return words
