"""
Type definitions for glyph grid processing.

This module contains the custom types used throughout the box finding
pipeline, organized by their primary use cases.

Coordinate Convention:
    All points use (row, col) order, matching grid indexing grid[row][col]:
    - row: increases downward (0 to height-1)
    - col: increases rightward (0 to width-1)
    Rendering is 1-based: Point(0, 0) prints as "(1,1)".
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, TypeAlias

# Grid representations
Glyph: TypeAlias = str
GlyphGrid: TypeAlias = list[list[Glyph]]  # Functional: grid[row][col] -> glyph


# Coordinate systems
class Point(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row + 1},{self.col + 1})"


Shape: TypeAlias = frozenset[Point]  # Maximal 4-connected set of filled cells


class Proportions(NamedTuple):
    height: int
    width: int


# Sweep events
class IntervalKind(IntEnum):
    """Event kinds, ordered so that starts sort before ends at equal columns"""

    START = 0
    END = 1


class Interval(NamedTuple):
    """
    Sweep event for one side of a bounding box.

    Field order is the sort order: column, then kind, then box identity,
    then the row range.
    """

    col: int
    kind: IntervalKind
    box_id: int
    top: int
    bottom: int


# Active sweep entry: (bottom, top, box_id)
ActiveRange: TypeAlias = tuple[int, int, int]

# Box identity: index of the shape the box was built from
BoxId: TypeAlias = int


__all__ = [
    # Grid types
    "Glyph",
    "GlyphGrid",
    # Coordinate types
    "Point",
    "Shape",
    "Proportions",
    # Sweep types
    "IntervalKind",
    "Interval",
    "ActiveRange",
    "BoxId",
]
