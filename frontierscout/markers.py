"""Visualization markers describing frontiers, cluster centres and goals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from frontierscout.grid import OccupancyGrid


class MarkerType(IntEnum):
    """Marker shapes, numbered as in the visualization message format."""

    POINTS = 8
    TEXT_VIEW_FACING = 9


class MarkerAction(Enum):
    ADD = 0


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0


@dataclass(frozen=True)
class Marker:
    """A visualization marker in the map frame."""

    type: MarkerType
    frame_id: str = "map"
    ns: str = ""
    id: int = 0
    action: MarkerAction = MarkerAction.ADD
    scale: Point = Point()
    color: Color = Color()
    points: tuple[Point, ...] = ()
    position: Point = Point()
    orientation_w: float = 1.0
    text: str = ""
    lifetime: float = 0.0
    extra: dict = field(default_factory=dict, compare=False, repr=False)


def frontier_points_marker(
    grid: OccupancyGrid, frontiers: Iterable[int]
) -> Marker:
    """Small red points at the centre of every frontier cell."""
    points = []
    for index in frontiers:
        wx, wy = grid.cell_center(*grid.cell(index))
        points.append(Point(wx, wy, 0.3))
    return Marker(
        type=MarkerType.POINTS,
        scale=Point(0.05, 0.05),
        color=Color(r=1.0, a=2.0),
        points=tuple(points),
    )


def center_points_marker(
    points: Iterable[Point], scale: float = 0.2, lifetime: float = 0.0
) -> Marker:
    """Yellow points marking the centres of frontier clusters."""
    return Marker(
        type=MarkerType.POINTS,
        ns="points_and_lines",
        scale=Point(scale, scale),
        color=Color(1.0, 1.0, 0.0, 1.0),
        points=tuple(points),
        lifetime=lifetime,
    )


def label_marker(label: object, marker_id: int, x: float, y: float) -> Marker:
    """Text label floating at (x, y), used to number valid clusters."""
    return Marker(
        type=MarkerType.TEXT_VIEW_FACING,
        id=marker_id,
        scale=Point(0.0, 0.0, 1.0),
        color=Color(a=1.0),
        position=Point(x, y),
        text=str(label),
        lifetime=1.0,
    )


def goal_marker(point: Point) -> Marker:
    """Magenta point showing the chosen exploration goal."""
    return Marker(
        type=MarkerType.POINTS,
        ns="goal_point",
        scale=Point(0.3, 0.3),
        color=Color(1.0, 0.0, 1.0, 1.0),
        points=(point,),
    )