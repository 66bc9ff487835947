"""Direction vectors and bounds-checked coordinate stepping."""

from typing import Tuple

from .models import Coordinate, Direction


# Fixed scan order used by the placement engine and the enumerator
DIRECTIONS: Tuple[Direction, ...] = (
    Direction(1, 0, "down"),
    Direction(0, 1, "right"),
    Direction(-1, 0, "up"),
    Direction(0, -1, "left"),
    Direction(1, 1, "down-right"),
    Direction(-1, -1, "up-left"),
    Direction(-1, 1, "up-right"),
    Direction(1, -1, "down-left"),
)


def step(origin: Coordinate, direction: Direction, i: int) -> Coordinate:
    """Return the cell `i` steps away from `origin` along `direction`."""
    return Coordinate(origin.row + i * direction.drow, origin.col + i * direction.dcol)


def in_bounds(coord: Coordinate, size: int) -> bool:
    """True iff both axes of `coord` fall inside a size x size grid."""
    return 0 <= coord.row < size and 0 <= coord.col < size


def is_adjacent(a: Coordinate, b: Coordinate) -> bool:
    """True iff `b` is one of the 8 neighbours of `a`."""
    return max(abs(a.row - b.row), abs(a.col - b.col)) == 1
