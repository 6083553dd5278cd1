"""Occupancy grid with row-major cell storage and world/cell conversions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

UNKNOWN = -1
FREE = 0
OCCUPIED = 100


@dataclass(frozen=True)
class OccupancyGrid:
    """A 2-D occupancy grid stored row by row, starting at the bottom row (y = 0)."""

    width: int
    height: int
    resolution: float
    origin_x: float
    origin_y: float
    data: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid must have a positive width and height")
        if self.resolution <= 0:
            raise ValueError("resolution must be positive")
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"grid data holds {len(self.data)} cells, expected "
                f"{self.width * self.height}"
            )

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[int]],
        resolution: float = 0.05,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
    ) -> OccupancyGrid:
        """Build a grid from rows of cell values; the first row is y = 0."""
        materialized = [tuple(int(v) for v in row) for row in rows]
        if not materialized:
            raise ValueError("grid needs at least one row")
        width = len(materialized[0])
        if any(len(row) != width for row in materialized):
            raise ValueError("all rows must have the same length")
        data = tuple(v for row in materialized for v in row)
        return cls(width, len(materialized), float(resolution),
                   float(origin_x), float(origin_y), data)

    def index(self, x: int, y: int) -> int:
        """Flat index of the cell at column x, row y."""
        if not self.contains(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return y * self.width + x

    def cell(self, index: int) -> tuple[int, int]:
        """Column and row of a flat index."""
        if not 0 <= index < len(self.data):
            raise IndexError(f"index {index} is outside the grid")
        return index % self.width, index // self.width

    def contains(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the grid and not on its border."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def cell_center(self, x: int, y: int) -> tuple[float, float]:
        """World coordinates of the centre of cell (x, y)."""
        half = self.resolution / 2
        return (
            x * self.resolution + self.origin_x + half,
            y * self.resolution + self.origin_y + half,
        )

    def world_to_cell(self, wx: float, wy: float) -> tuple[int, int]:
        """Cell holding a world position, truncating toward zero; not range-checked."""
        half = self.resolution / 2
        return (
            int((wx - self.origin_x - half) / self.resolution),
            int((wy - self.origin_y - half) / self.resolution),
        )