"""
Placement engine: check and commit word placements on a grid.

Checking (`try_place`) never touches the grid, so callers can evaluate many
origins and directions, or explore branches on private copies, before
writing anything with `commit`.
"""

from typing import Iterator, List, Optional, Tuple

from .geometry import DIRECTIONS, in_bounds, step
from .grid import Grid
from .models import Coordinate, Direction


def try_place(
    grid: Grid,
    word: str,
    origin: Coordinate,
    direction: Direction,
) -> Optional[List[Coordinate]]:
    """
    Return the cells `word` would occupy starting at `origin`, or None.

    Fails when a step leaves the grid or lands on a cell holding a
    different letter. Cells already holding the same letter are shared.
    """
    positions: List[Coordinate] = []
    for i, letter in enumerate(word):
        coord = step(origin, direction, i)
        if not in_bounds(coord, grid.size):
            return None
        if not grid.is_empty(coord) and grid[coord] != letter:
            return None
        positions.append(coord)
    return positions


def commit(grid: Grid, word: str, positions: List[Coordinate]) -> None:
    """Write each letter of `word` into its coordinate."""
    if len(word) != len(positions):
        raise ValueError(
            f"Cannot commit '{word}': {len(positions)} positions for {len(word)} letters"
        )
    for letter, coord in zip(word, positions):
        grid.set(coord, letter)


def find_placements(
    grid: Grid,
    word: str,
) -> Iterator[Tuple[Coordinate, Direction, List[Coordinate]]]:
    """Yield every legal placement, scanning cells row-major, then directions in order."""
    for origin in grid.coordinates():
        for direction in DIRECTIONS:
            positions = try_place(grid, word, origin, direction)
            if positions is not None:
                yield origin, direction, positions
