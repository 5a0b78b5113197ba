"""
Shape extraction via connected components.

Shapes are maximal connected sets of filled cells. What constitutes
"connected" is determined by the neighbor function (connectivity),
4-connectivity by default.

The flood fill works on an explicit stack and a visited scratch buffer,
so the size of a shape is never bounded by the interpreter's recursion limit.
"""

import logging

import numpy as np

from localtypes import GlyphGrid, Point, Shape
from utils.grid import GridOperations

from .connectivity import PointNeighborFunc, tower_neighbors

logger = logging.getLogger(__name__)


def flood_fill(
    grid: GlyphGrid,
    start: Point,
    visited: np.ndarray,
    neighbors: PointNeighborFunc = tower_neighbors,
) -> list[Point]:
    """
    Collect every filled cell reachable from `start` without crossing an empty cell.

    Cells are returned in depth-first preorder, expanding neighbors in the
    order given by `neighbors`. Each collected cell is marked in `visited`
    exactly once.

    Args:
        grid: A validated glyph grid.
        start: Cell the traversal starts from.
        visited: Boolean buffer of the grid's proportions, updated in place.
        neighbors: Connectivity to follow.

    Returns:
        The cells of the shape containing `start`, empty if `start`
        is empty or already visited.
    """
    proportions = GridOperations.proportions(grid)
    points: list[Point] = []
    stack = [start]

    while stack:
        current = stack.pop()
        row, col = current

        # Nothing there, or reached through another branch
        if not GridOperations.is_filled(grid, current) or visited[row, col]:
            continue

        visited[row, col] = True
        points.append(current)
        # Reversed so the first neighbor is expanded first
        stack.extend(reversed(neighbors(current, proportions)))

    return points


def grid_to_shapes(
    grid: GlyphGrid, neighbors: PointNeighborFunc = tower_neighbors
) -> tuple[Shape, ...]:
    """
    Partition the filled cells of a grid into shapes.

    The grid is scanned row-major, top row first and left to right, and a
    new shape is started at every filled cell not yet part of one. Shapes are
    returned in that discovery order.

    Args:
        grid: A validated glyph grid.
        neighbors: Connectivity defining adjacency between filled cells.

    Returns:
        Tuple of shapes (each a frozenset of points), pairwise disjoint,
        whose union is the set of filled cells.
    """
    height, width = GridOperations.proportions(grid)
    visited = np.zeros((height, width), dtype=bool)
    shapes: list[Shape] = []

    # Points sort by (row, col): row-major order
    for start in sorted(GridOperations.filled_points(grid)):
        if not visited[start.row, start.col]:
            points = flood_fill(grid, start, visited, neighbors)
            shapes.append(frozenset(points))

    logger.debug(f"Found {len(shapes)} shape(s) in a {height}x{width} grid")
    return tuple(shapes)
