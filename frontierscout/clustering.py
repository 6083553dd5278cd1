"""Grouping of frontier cells into connected clusters and picking their centres."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from frontierscout.grid import OccupancyGrid
from frontierscout.markers import Point

#: Neighbour offsets searched while growing a cluster (8-connectivity).
_NEIGHBOURS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, 1), (-1, -1), (1, -1), (1, 1),
)

#: Height at which cluster centre points are drawn.
_CENTER_Z = 0.5

DEFAULT_MIN_CLUSTER_SIZE = 20


class CenterMode(Enum):
    """How a cluster's representative cell is chosen."""

    #: The cell stored in the middle of the cluster's index list.
    MEDIAN = "median"
    #: The integer mean of the first, middle and last stored cells.
    TRIPLE_CENTROID = "triple_centroid"


@dataclass
class FrontierCluster:
    """A group of connected frontier cells and the factors scored for it.

    ``indices`` keeps the order in which the search recorded cells; a cell may
    appear more than once, and that order decides the cluster's centre.
    """

    id: int
    indices: list[int] = field(default_factory=list)
    num_factor: float = 0.0
    dist_factor: float = 0.0
    region_factor: float = 0.0
    obj: float = 0.0

    def __len__(self) -> int:
        return len(self.indices)

    def _require_cells(self) -> None:
        if not self.indices:
            raise ValueError(f"cluster {self.id} holds no cells")

    def median_cell(self, width: int) -> tuple[int, int]:
        """Column and row of the middle entry of the index list."""
        self._require_cells()
        index = self.indices[len(self.indices) // 2]
        return index % width, index // width

    def triple_centroid(self, width: int) -> tuple[int, int]:
        """Integer mean of the first, middle and last recorded cells."""
        self._require_cells()
        picks = (
            self.indices[0],
            self.indices[len(self.indices) // 2],
            self.indices[-1],
        )
        xs = sum(index % width for index in picks)
        ys = sum(index // width for index in picks)
        return xs // 3, ys // 3

    def center_cell(
        self, width: int, mode: CenterMode = CenterMode.TRIPLE_CENTROID
    ) -> tuple[int, int]:
        """Representative cell of the cluster under ``mode``."""
        if mode is CenterMode.MEDIAN:
            return self.median_cell(width)
        return self.triple_centroid(width)


def _grow_cluster(
    grid: OccupancyGrid,
    start: int,
    cluster_id: int,
    is_frontier: Sequence[bool],
    visited: list[bool],
) -> FrontierCluster:
    cluster = FrontierCluster(id=cluster_id)
    queue = deque([start])
    visited[start] = True
    last = start
    while queue:
        # The most recently discovered cell is recorded once per expansion.
        cluster.indices.append(last)
        x, y = grid.cell(queue.popleft())
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if not grid.contains(nx, ny):
                continue
            neighbour = grid.index(nx, ny)
            if is_frontier[neighbour] and not visited[neighbour]:
                visited[neighbour] = True
                last = neighbour
                cluster.indices.append(neighbour)
                queue.append(neighbour)
    return cluster


def cluster_frontiers(
    grid: OccupancyGrid, frontiers: Iterable[int]
) -> list[FrontierCluster]:
    """Group frontier cells by breadth-first search over 8-neighbours.

    A search is started from every frontier cell in turn, so the result has
    one cluster per frontier; starting from a cell already reached by an
    earlier search gives a cluster holding only that cell.
    """
    frontier_list = list(frontiers)
    is_frontier = [False] * len(grid.data)
    for index in frontier_list:
        grid.cell(index)  # range check
        is_frontier[index] = True
    visited = [False] * len(grid.data)
    return [
        _grow_cluster(grid, start, cluster_id, is_frontier, visited)
        for cluster_id, start in enumerate(frontier_list)
    ]


def select_clusters(
    clusters: Sequence[FrontierCluster],
    min_size: int = DEFAULT_MIN_CLUSTER_SIZE,
    total_frontiers: int = 0,
) -> list[int]:
    """Positions of clusters larger than ``min_size``.

    Each selected cluster gets ``num_factor`` set to its size relative to
    ``total_frontiers``.
    """
    valid = []
    for position, cluster in enumerate(clusters):
        if len(cluster) > min_size:
            if total_frontiers <= 0:
                raise ValueError("total_frontiers must be positive")
            cluster.num_factor = len(cluster) / total_frontiers
            valid.append(position)
    return valid


def cluster_centers(
    clusters: Sequence[FrontierCluster],
    valid: Iterable[int],
    grid: OccupancyGrid,
    mode: CenterMode = CenterMode.TRIPLE_CENTROID,
) -> list[Point]:
    """World positions of the centres of the selected clusters."""
    points = []
    for position in valid:
        cx, cy = clusters[position].center_cell(grid.width, mode)
        wx, wy = grid.cell_center(cx, cy)
        points.append(Point(wx, wy, _CENTER_Z))
    return points