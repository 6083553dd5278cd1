import pytest

from frontierscout.clustering import (
    CenterMode,
    FrontierCluster,
    cluster_centers,
    cluster_frontiers,
    select_clusters,
)
from frontierscout.frontiers import detect_frontiers
from frontierscout.grid import OccupancyGrid

WIDTH = 30


def _strip_grid(blocked_x=None):
    rows = [
        [0] * WIDTH,
        [0] * WIDTH,
        [-1] * WIDTH,
        [-1] * WIDTH,
    ]
    if blocked_x is not None:
        rows[1][blocked_x] = 100
    return OccupancyGrid.from_rows(rows, resolution=0.1)


def test_one_cluster_per_frontier():
    grid = _strip_grid()
    frontiers = detect_frontiers(grid)
    clusters = cluster_frontiers(grid, frontiers)
    assert len(clusters) == len(frontiers)
    assert [c.id for c in clusters] == list(range(len(frontiers)))


def test_first_search_covers_connected_strip():
    grid = _strip_grid()
    frontiers = detect_frontiers(grid)
    clusters = cluster_frontiers(grid, frontiers)
    assert set(clusters[0].indices) == set(frontiers)
    for start, cluster in zip(frontiers[1:], clusters[1:]):
        assert cluster.indices == [start]


def test_two_adjacent_cells_worked_example():
    grid = _strip_grid()
    a = grid.index(5, 1)
    b = grid.index(6, 1)
    clusters = cluster_frontiers(grid, [a, b])
    assert clusters[0].indices == [a, b, b]
    assert clusters[1].indices == [b]


def test_gap_splits_clusters():
    grid = _strip_grid(blocked_x=10)
    frontiers = detect_frontiers(grid)
    clusters = cluster_frontiers(grid, frontiers)
    left = {i for i in frontiers if grid.cell(i)[0] < 10}
    right = {i for i in frontiers if grid.cell(i)[0] > 10}
    assert set(clusters[0].indices) == left
    first_right = frontiers.index(min(right))
    assert set(clusters[first_right].indices) == right


def test_diagonal_neighbours_join():
    grid = OccupancyGrid.from_rows([[0] * 5 for _ in range(5)])
    a = grid.index(1, 1)
    b = grid.index(2, 2)
    clusters = cluster_frontiers(grid, [a, b])
    assert set(clusters[0].indices) == {a, b}


def test_out_of_range_frontier_raises():
    grid = _strip_grid()
    with pytest.raises(IndexError):
        cluster_frontiers(grid, [len(grid.data)])


def test_select_clusters_sets_num_factor():
    grid = _strip_grid()
    frontiers = detect_frontiers(grid)
    clusters = cluster_frontiers(grid, frontiers)
    valid = select_clusters(clusters, 20, len(frontiers))
    assert valid == [0]
    assert clusters[0].num_factor == pytest.approx(len(clusters[0]) / len(frontiers))
    assert clusters[1].num_factor == 0.0


def test_select_clusters_threshold_is_strict():
    clusters = [FrontierCluster(0, [1] * 20), FrontierCluster(1, [1] * 21)]
    assert select_clusters(clusters, 20, 41) == [1]


def test_median_and_centroid_of_single_cell():
    cluster = FrontierCluster(0, [37])
    assert cluster.median_cell(10) == (7, 3)
    assert cluster.triple_centroid(10) == (7, 3)


def test_center_cell_dispatches_on_mode():
    cluster = FrontierCluster(0, [12, 14, 16, 18, 29])
    assert cluster.center_cell(10, CenterMode.MEDIAN) == cluster.median_cell(10)
    assert cluster.center_cell(10, CenterMode.TRIPLE_CENTROID) == cluster.triple_centroid(10)
    assert cluster.center_cell(10) == cluster.triple_centroid(10)


def test_centroid_of_evenly_spaced_row_is_middle():
    cluster = FrontierCluster(0, [12, 14, 16])
    assert cluster.triple_centroid(10) == cluster.median_cell(10)


def test_empty_cluster_has_no_center():
    cluster = FrontierCluster(3)
    assert len(cluster) == 0
    with pytest.raises(ValueError):
        cluster.median_cell(10)
    with pytest.raises(ValueError):
        cluster.triple_centroid(10)


def test_cluster_centers_use_cell_centres():
    grid = _strip_grid()
    frontiers = detect_frontiers(grid)
    clusters = cluster_frontiers(grid, frontiers)
    valid = select_clusters(clusters, 20, len(frontiers))
    for mode in CenterMode:
        points = cluster_centers(clusters, valid, grid, mode)
        assert len(points) == len(valid)
        expected = grid.cell_center(*clusters[0].center_cell(grid.width, mode))
        assert (points[0].x, points[0].y) == pytest.approx(expected)
        assert points[0].z == 0.5


def test_cluster_centers_empty_selection():
    grid = _strip_grid()
    assert cluster_centers([], [], grid) == []