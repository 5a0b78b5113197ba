"""
Connectivity definitions for decomposition.

A connectivity defines which cells are "neighbors" of each other,
enabling connected component extraction. Only orthogonal (4-)connectivity
is used: two filled cells touching by a corner belong to different shapes.

Neighbor functions are bounded by the grid proportions and return
neighbors in a fixed order, so flood fills built on them are deterministic.
"""

from collections.abc import Sequence
from typing import Callable

from constants import TOWER_DELTAS
from localtypes import Point, Proportions

# A neighbor function takes a cell and the grid proportions,
# returns the in-bounds neighbors in expansion order
PointNeighborFunc = Callable[[Point, Proportions], tuple[Point, ...]]


def make_point_neighbors(deltas: Sequence[tuple[int, int]]) -> PointNeighborFunc:
    """
    Create a neighbor function from a sequence of (drow, dcol) steps.

    The returned function computes which cells are reachable from a given
    cell by moving one step in any of the deltas, keeping the order of
    the deltas and dropping cells outside the grid.

    Example:
        >>> neighbors = make_point_neighbors(TOWER_DELTAS)
        >>> neighbors(Point(0, 0), Proportions(2, 2))
        (Point(row=1, col=0), Point(row=0, col=1))
    """
    steps: tuple[tuple[int, int], ...] = tuple(deltas)

    def neighbors(point: Point, proportions: Proportions) -> tuple[Point, ...]:
        row, col = point
        height, width = proportions
        return tuple(
            Point(row + drow, col + dcol)
            for drow, dcol in steps
            if 0 <= row + drow < height and 0 <= col + dcol < width
        )

    return neighbors


# Down, up, right, left
tower_neighbors: PointNeighborFunc = make_point_neighbors(TOWER_DELTAS)
