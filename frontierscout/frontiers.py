"""Detection of frontier cells: known cells bordering unknown space."""

from __future__ import annotations

from enum import Enum

from frontierscout.grid import OCCUPIED, UNKNOWN, OccupancyGrid


class FrontierRule(Enum):
    """How obstacles next to a candidate cell disqualify it."""

    #: Any 4-neighbour exactly equal to the occupied value blocks the cell.
    OCCUPIED = "occupied"
    #: A right, left or lower neighbour above 80 blocks the cell; the upper
    #: neighbour is not consulted.
    COST_THRESHOLD = "cost_threshold"

    def blocks(self, right: int, left: int, down: int, up: int) -> bool:
        """Whether the given neighbour values exclude the cell."""
        if self is FrontierRule.OCCUPIED:
            return OCCUPIED in (right, left, down, up)
        return right > 80 or left > 80 or down > 80


def detect_frontiers(
    grid: OccupancyGrid, rule: FrontierRule = FrontierRule.OCCUPIED
) -> list[int]:
    """Flat indices of frontier cells, in ascending order.

    A frontier cell is known, not on the grid border, not blocked by an
    obstacle neighbour under ``rule``, and has an unknown 4-neighbour.
    """
    data = grid.data
    width = grid.width
    frontiers = []
    for index, value in enumerate(data):
        if value == UNKNOWN:
            continue
        x, y = index % width, index // width
        if not grid.is_interior(x, y):
            continue
        right = data[index + 1]
        left = data[index - 1]
        down = data[index - width]
        up = data[index + width]
        if rule.blocks(right, left, down, up):
            continue
        if UNKNOWN in (right, left, down, up):
            frontiers.append(index)
    return frontiers