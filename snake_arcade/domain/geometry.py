"""
Grid geometry: board bounds and cell-to-pixel mapping.
"""

import random
from typing import Iterator, Tuple

from .constants import GRID_CELL_SIZE, VERTICAL_OFFSET, WALL_MARGIN, MIN_SIZE, MAX_SIZE

Cell = Tuple[int, int]


def cell_to_pixel(cell: Cell) -> Tuple[int, int, int, int]:
    """Return the (x, y, w, h) draw rectangle for a grid cell."""
    x, y = cell
    return (
        x * GRID_CELL_SIZE,
        y * GRID_CELL_SIZE + VERTICAL_OFFSET,
        GRID_CELL_SIZE,
        GRID_CELL_SIZE,
    )


class Grid:
    """
    The board, including its one-cell wall ring.

    Attributes:
        width, height: total size in cells, walls included
    """

    def __init__(self, width: int, height: int):
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ValueError(f"Grid {width}x{height} is smaller than {MIN_SIZE}x{MIN_SIZE}.")
        self.width = width
        self.height = height

    @classmethod
    def from_interior(cls, interior_width: int, interior_height: int) -> "Grid":
        """Build a grid from a menu-selected interior size by adding the wall margin."""
        for value in (interior_width, interior_height):
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise ValueError(f"Map size {value} outside [{MIN_SIZE}, {MAX_SIZE}].")
        return cls(interior_width + WALL_MARGIN, interior_height + WALL_MARGIN)

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    @property
    def interior_area(self) -> int:
        return (self.width - WALL_MARGIN) * (self.height - WALL_MARGIN)

    def is_wall(self, cell: Cell) -> bool:
        x, y = cell
        return x < 1 or x >= self.width - 1 or y < 1 or y >= self.height - 1

    def wall_cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                if self.is_wall((x, y)):
                    yield (x, y)

    def random_interior_cell(self, rng: random.Random) -> Cell:
        # No occupancy check: spawns may land on the snake or another entity.
        return (
            rng.randrange(self.width - WALL_MARGIN) + 1,
            rng.randrange(self.height - WALL_MARGIN) + 1,
        )

    def __eq__(self, other):
        return isinstance(other, Grid) and (self.width, self.height) == (other.width, other.height)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"
