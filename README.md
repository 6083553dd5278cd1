# frontierscout

A library for finding and grouping exploration frontiers on 2-D occupancy grids.

Cells hold `-1` for unknown, `0` for free and up to `100` for occupied. They are
stored row by row, the first row being y = 0 at the map origin.

## Modules

- `frontierscout.grid`: `OccupancyGrid`, built with `OccupancyGrid.from_rows(rows,
  resolution, origin_x, origin_y)`. It converts between flat indices and cells
  (`index`, `cell`), checks bounds (`contains`, `is_interior`) and converts between
  cells and world coordinates (`cell_center`, `world_to_cell`).
- `frontierscout.frontiers`: `detect_frontiers(grid, rule)` returns the flat indices
  of known, non-border cells that have an unknown 4-neighbour and are not blocked by
  an obstacle neighbour. `FrontierRule.OCCUPIED` (the default) blocks on a neighbour
  equal to 100; `FrontierRule.COST_THRESHOLD` blocks on a right, left or lower
  neighbour above 80.
- `frontierscout.clustering`: `cluster_frontiers(grid, frontiers)` groups frontier
  cells with an 8-connected breadth-first search into `FrontierCluster` objects.
  `select_clusters(clusters, min_size, total_frontiers)` returns the positions of
  clusters larger than `min_size` (20 by default) and sets their `num_factor`;
  `cluster_centers(clusters, valid, grid, mode)` gives their centres as world points,
  using `CenterMode.MEDIAN` or `CenterMode.TRIPLE_CENTROID`.
- `frontierscout.regions`: `RegionMap.from_image(image)` turns a segmentation image
  into an 8-bit map aligned with the grid (`depth_to_mono`, `collect_regions`).
  `mark_regions_by_median` and `mark_regions_by_centroid` set `region_factor` on
  clusters that lie in the robot's region or in the background region.
- `frontierscout.markers`: `Marker`, `Point`, `Color` and `MarkerType`, with
  `frontier_points_marker`, `center_points_marker`, `label_marker` and `goal_marker`
  to build display markers.

## Example

```python
from frontierscout.grid import OccupancyGrid
from frontierscout.frontiers import detect_frontiers
from frontierscout.clustering import cluster_frontiers, select_clusters, cluster_centers
from frontierscout.markers import frontier_points_marker, center_points_marker

grid = OccupancyGrid.from_rows(rows, resolution=0.05, origin_x=0.0, origin_y=0.0)
frontiers = detect_frontiers(grid)
clusters = cluster_frontiers(grid, frontiers)
valid = select_clusters(clusters, min_size=20, total_frontiers=len(frontiers))
centers = cluster_centers(clusters, valid, grid)

markers = [frontier_points_marker(grid, frontiers), center_points_marker(centers)]
```

`select_clusters` raises `ValueError` if a cluster is selected while
`total_frontiers` is not positive.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What it does not do

frontierscout is a library only. It has no command-line program, does not score
clusters by travel distance, does not pick a next goal to drive to, and does not
run an exploration loop that receives maps, odometry or costmaps. Markers are
plain data objects; nothing is published or drawn.