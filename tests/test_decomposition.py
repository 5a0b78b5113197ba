"""
Tests for the decomposition package.

Tests 4-connectivity and shape extraction in row-major discovery order.
"""

import numpy as np

from decomposition import (
    flood_fill,
    grid_to_shapes,
    make_point_neighbors,
    tower_neighbors,
)
from localtypes import Point, Proportions
from utils.grid import GridOperations, lines_to_grid


class TestTowerNeighbors:
    """Tests for tower_neighbors (4-connectivity)."""

    def test_expansion_order(self):
        """Down, up, right, left."""
        result = tower_neighbors(Point(1, 1), Proportions(3, 3))
        assert result == (Point(2, 1), Point(0, 1), Point(1, 2), Point(1, 0))

    def test_corner_is_bounded(self):
        result = tower_neighbors(Point(0, 0), Proportions(2, 2))
        assert result == (Point(1, 0), Point(0, 1))

    def test_single_cell_grid(self):
        assert tower_neighbors(Point(0, 0), Proportions(1, 1)) == ()

    def test_no_diagonals(self):
        result = set(tower_neighbors(Point(1, 1), Proportions(3, 3)))
        assert Point(0, 0) not in result
        assert Point(2, 2) not in result

    def test_custom_deltas(self):
        neighbors = make_point_neighbors([(1, 1)])
        assert neighbors(Point(0, 0), Proportions(2, 2)) == (Point(1, 1),)


class TestFloodFill:
    def test_collects_the_block(self):
        grid = lines_to_grid(["*--*", "-**-", "-**-", "*---"])
        visited = np.zeros((4, 4), dtype=bool)
        points = flood_fill(grid, Point(1, 1), visited)
        assert sorted(points) == [
            Point(1, 1),
            Point(1, 2),
            Point(2, 1),
            Point(2, 2),
        ]

    def test_depth_first_preorder(self):
        """Same order as a recursion expanding down, up, right, left."""
        grid = lines_to_grid(["*--*", "-**-", "-**-", "*---"])
        visited = np.zeros((4, 4), dtype=bool)
        points = flood_fill(grid, Point(1, 1), visited)
        assert points == [Point(1, 1), Point(2, 1), Point(2, 2), Point(1, 2)]

    def test_marks_visited(self):
        grid = lines_to_grid(["**", "-*"])
        visited = np.zeros((2, 2), dtype=bool)
        flood_fill(grid, Point(0, 0), visited)
        assert visited.tolist() == [[True, True], [False, True]]

    def test_visited_start_yields_nothing(self):
        grid = lines_to_grid(["**"])
        visited = np.zeros((1, 2), dtype=bool)
        flood_fill(grid, Point(0, 0), visited)
        assert flood_fill(grid, Point(0, 1), visited) == []

    def test_empty_start_yields_nothing(self):
        grid = lines_to_grid(["-*"])
        visited = np.zeros((1, 2), dtype=bool)
        assert flood_fill(grid, Point(0, 0), visited) == []
        assert not visited.any()


class TestGridToShapes:
    def test_empty_grid(self):
        assert grid_to_shapes(lines_to_grid(["---", "---"])) == ()

    def test_single_cell(self):
        assert grid_to_shapes(lines_to_grid(["*"])) == (frozenset({Point(0, 0)}),)

    def test_diagonal_cells_are_separate_shapes(self):
        shapes = grid_to_shapes(lines_to_grid(["*-", "-*"]))
        assert shapes == (frozenset({Point(0, 0)}), frozenset({Point(1, 1)}))

    def test_row_major_discovery_order(self):
        shapes = grid_to_shapes(lines_to_grid(["--*--", "***--", "----*"]))
        assert shapes == (
            frozenset({Point(0, 2), Point(1, 0), Point(1, 1), Point(1, 2)}),
            frozenset({Point(2, 4)}),
        )

    def test_shape_discovered_at_its_first_cell(self):
        """A U shape starts at its top-left arm, before the top-right arm."""
        shapes = grid_to_shapes(lines_to_grid(["*-*", "*-*", "***", "-*-"]))
        assert len(shapes) == 1
        assert len(shapes[0]) == 8

    def test_partition_of_filled_cells(self):
        grid = lines_to_grid(["**--*", "**--*", "----*", "*-*-*"])
        shapes = grid_to_shapes(grid)
        assert set().union(*shapes) == GridOperations.filled_points(grid)
        assert sum(len(shape) for shape in shapes) == len(
            GridOperations.filled_points(grid)
        )

    def test_large_shape_does_not_recurse(self):
        """A snake of 10 100 cells would exceed the default recursion limit."""
        height, width = 200, 100
        lines = []
        for row in range(height):
            if row % 2 == 0:
                lines.append("*" * width)
            elif row % 4 == 1:
                lines.append("-" * (width - 1) + "*")
            else:
                lines.append("*" + "-" * (width - 1))
        shapes = grid_to_shapes(lines_to_grid(lines))
        assert len(shapes) == 1
        assert len(shapes[0]) == (height // 2) * width + height // 2

    def test_full_grid_is_one_shape(self):
        shapes = grid_to_shapes(lines_to_grid(["*" * 50] * 50))
        assert len(shapes) == 1
        assert len(shapes[0]) == 2500
