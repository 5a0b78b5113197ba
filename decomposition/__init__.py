"""
Decomposition of glyph grids into shapes.

**Connectivity** (connectivity.py)
    Defines adjacency relations between grid cells.
    - tower_neighbors: 4-connectivity (down, up, right, left)

**Objects** (objects.py)
    Connected component extraction parameterized by connectivity.
    - flood_fill(grid, start, visited, neighbors) -> cells of one shape
    - grid_to_shapes(grid, neighbors) -> shapes in row-major discovery order
"""

from .connectivity import (
    PointNeighborFunc,
    make_point_neighbors,
    tower_neighbors,
)
from .objects import (
    flood_fill,
    grid_to_shapes,
)

__all__ = [
    # Connectivity
    "PointNeighborFunc",
    "make_point_neighbors",
    "tower_neighbors",
    # Objects
    "flood_fill",
    "grid_to_shapes",
]
