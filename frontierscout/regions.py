"""Room segmentation lookups and region factors for frontier clusters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from frontierscout.clustering import FrontierCluster
from frontierscout.grid import FREE, OccupancyGrid

#: Offsets tried around a cluster's centre, applied to both axes at once.
_PROBE_OFFSETS = (-1, 0, 1, 0)

#: Region factor given by the median-cell variant.
MEDIAN_REGION_FACTOR = 0.5
#: Region factor given by the centroid variant.
CENTROID_REGION_FACTOR = 1.0


def depth_to_mono(image: object) -> np.ndarray:
    """Convert a single-channel image to 8 bits.

    Each value becomes its absolute value, rounded half to even and saturated
    to the range 0..255. NaN becomes 0.
    """
    values = np.asarray(image, dtype=np.float64)
    if values.ndim != 2:
        raise ValueError("segmentation image must be two-dimensional")
    values = np.abs(np.nan_to_num(values, nan=0.0, posinf=255.0, neginf=255.0))
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


def collect_regions(image: object) -> tuple[int, ...]:
    """Distinct non-zero pixel values, in order of first appearance.

    Pixels are scanned column by column, top to bottom within a column.
    """
    pixels = np.asarray(image)
    if pixels.ndim != 2:
        raise ValueError("segmentation image must be two-dimensional")
    return tuple(dict.fromkeys(int(v) for v in pixels.T.ravel() if v))


@dataclass(frozen=True, eq=False)
class RegionMap:
    """An 8-bit segmentation image aligned with the map, plus its region list.

    Row 0 of ``image`` matches grid row y = 0. A pixel value is used as a
    position into ``regions``; the entry found there is the pixel's region.
    """

    image: np.ndarray
    regions: tuple[int, ...]

    @classmethod
    def from_image(cls, image: object) -> RegionMap:
        """Build a region map from a raw segmentation image (top row first)."""
        mono = np.ascontiguousarray(np.flipud(depth_to_mono(image)))
        return cls(mono, collect_regions(mono))

    @property
    def is_empty(self) -> bool:
        """Whether there is no image or no region to look up."""
        return self.image.size == 0 or not self.regions

    def region_at(self, row: int, col: int) -> int | None:
        """Region of the pixel at (row, col), or None if its value has no entry."""
        rows, cols = self.image.shape
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(f"pixel ({row}, {col}) is outside the image")
        pixel = int(self.image[row, col])
        if pixel < len(self.regions):
            return self.regions[pixel]
        return None

    def background(self) -> int | None:
        """Region of the corner pixel, treated as the unsegmented area."""
        return self.region_at(0, 0)


def _robot_region(
    grid: OccupancyGrid, region_map: RegionMap, robot_x: float, robot_y: float
) -> int | None:
    rx, ry = grid.world_to_cell(robot_x, robot_y)
    return region_map.region_at(ry, rx)


def mark_regions_by_median(
    clusters: Sequence[FrontierCluster],
    valid: Iterable[int],
    grid: OccupancyGrid,
    region_map: RegionMap | None,
    robot_x: float,
    robot_y: float,
) -> list[int]:
    """Give a region factor of 0.5 to clusters sharing the robot's region.

    The cluster's median cell is looked up, unless a free cell is found among
    the diagonal probes around it, in which case that cell's region is used.
    A cluster in the background region is marked as well. Returns the
    positions of the marked clusters.
    """
    if region_map is None or region_map.is_empty:
        return []
    robot_region = _robot_region(grid, region_map, robot_x, robot_y)
    background = region_map.background()
    marked = []
    for position in valid:
        cluster = clusters[position]
        tx, ty = cluster.median_cell(grid.width)
        include = region_map.region_at(ty, tx)
        for offset in _PROBE_OFFSETS:
            nx, ny = tx + offset, ty + offset
            if grid.data[grid.index(nx, ny)] == FREE:
                include = region_map.region_at(ny, nx)
                break
        if include == robot_region or include == background:
            cluster.region_factor = MEDIAN_REGION_FACTOR
            marked.append(position)
    return marked


def mark_regions_by_centroid(
    clusters: Sequence[FrontierCluster],
    valid: Iterable[int],
    grid: OccupancyGrid,
    region_map: RegionMap | None,
    robot_x: float,
    robot_y: float,
) -> list[int]:
    """Give a region factor of 1.0 to clusters sharing the robot's region.

    For the i-th entry of ``valid`` the location is the triple centroid of
    ``clusters[i]``, while the factor is set on ``clusters[valid[i]]``.
    A location in the background region counts as a match. Returns the
    positions of the marked clusters.
    """
    if region_map is None or region_map.is_empty:
        return []
    robot_region = _robot_region(grid, region_map, robot_x, robot_y)
    background = region_map.background()
    marked = []
    for i, position in enumerate(list(valid)):
        tx, ty = clusters[i].triple_centroid(grid.width)
        include = region_map.region_at(ty, tx)
        if include == robot_region or include == background:
            clusters[position].region_factor = CENTROID_REGION_FACTOR
            marked.append(position)
    return marked