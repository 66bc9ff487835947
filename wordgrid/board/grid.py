"""Grid model and rendering utilities."""

from typing import Iterator, List

from pydantic import BaseModel, Field, model_validator

from .models import Coordinate


EMPTY = ""


class Grid(BaseModel):
    """
    A square letter grid.

    Every cell holds either EMPTY or a single uppercase letter. The size is
    fixed at construction; cells are addressed with Coordinate(row, col).
    """

    size: int = Field(default=4, ge=1)
    cells: List[List[str]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shape(self) -> "Grid":
        if not self.cells:
            self.cells = [[EMPTY] * self.size for _ in range(self.size)]

        if len(self.cells) != self.size or any(len(row) != self.size for row in self.cells):
            raise ValueError(f"Grid cells must be {self.size}x{self.size}")

        for row in self.cells:
            for cell in row:
                if cell != EMPTY and not (len(cell) == 1 and cell.isalpha() and cell.isupper()):
                    raise ValueError(f"Invalid cell value {cell!r}: expected one uppercase letter")
        return self

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a grid from row strings, with '.' marking an empty cell."""
        cells = [[EMPTY if ch == "." else ch for ch in row] for row in rows]
        return cls(size=len(rows), cells=cells)

    def __getitem__(self, coord: Coordinate) -> str:
        return self.cells[coord[0]][coord[1]]

    def set(self, coord: Coordinate, letter: str) -> None:
        self.cells[coord[0]][coord[1]] = letter

    def is_empty(self, coord: Coordinate) -> bool:
        return self[coord] == EMPTY

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every cell in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Coordinate(row, col)

    def empty_cells(self) -> List[Coordinate]:
        return [coord for coord in self.coordinates() if self.is_empty(coord)]

    def is_full(self) -> bool:
        return not self.empty_cells()

    def copy(self) -> "Grid":
        """Private working copy; skips validation since the source is already valid."""
        return Grid.model_construct(size=self.size, cells=[row[:] for row in self.cells])

    def rows(self) -> List[str]:
        return ["".join(cell or "." for cell in row) for row in self.cells]


def render_grid(grid: Grid) -> str:
    """Render the grid to a string, one row per line."""
    return "\n".join(" ".join(row) for row in grid.rows())
