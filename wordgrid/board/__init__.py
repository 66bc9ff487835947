"""Word-search board core: geometry, placement, filling, enumeration and selection."""

from .models import Coordinate, Direction, PlacedWord
from .geometry import DIRECTIONS, step, in_bounds, is_adjacent
from .grid import EMPTY, Grid, render_grid
from .placement import try_place, commit, find_placements
from .filler import FillResult, Strategy, fill_board, fill_greedy, fill_exhaustive, fill_random
from .enumerator import enumerate_words
from .selection import SelectionPath, resolve, is_winning_word

__all__ = [
    # Models
    "Coordinate",
    "Direction",
    "PlacedWord",
    # Geometry
    "DIRECTIONS",
    "step",
    "in_bounds",
    "is_adjacent",
    # Grid
    "EMPTY",
    "Grid",
    "render_grid",
    # Placement
    "try_place",
    "commit",
    "find_placements",
    # Filling
    "FillResult",
    "Strategy",
    "fill_board",
    "fill_greedy",
    "fill_exhaustive",
    "fill_random",
    # Enumeration
    "enumerate_words",
    # Selection
    "SelectionPath",
    "resolve",
    "is_winning_word",
]
