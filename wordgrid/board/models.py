"""Data models for the board core."""

from typing import Tuple, NamedTuple
from pydantic import BaseModel, ConfigDict, Field


class Coordinate(NamedTuple):
    """A cell on the grid, addressed as (row, col)."""
    row: int
    col: int


class Direction(NamedTuple):
    """A unit step vector used to place and read words."""
    drow: int
    dcol: int
    name: str


class PlacedWord(BaseModel):
    """A word on the board together with the cells that spell it."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1)
    positions: Tuple[Coordinate, ...]
