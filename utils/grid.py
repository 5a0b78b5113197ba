r"""
Glyph Grid Library

Validation and basic operations on two-glyph grids.

Raw input lines become a GlyphGrid only through `lines_to_grid`, which
rejects anything that is not a non-empty rectangle of FILLED / EMPTY glyphs.
Every other function in this module assumes a validated grid.
    1\ validate_lines / lines_to_grid
    2\ GridOperations
"""

import logging
from collections.abc import Sequence

from constants import ALPHABET, EMPTY, FILLED
from errors import InvalidInput
from localtypes import GlyphGrid, Point, Proportions

logger = logging.getLogger(__name__)


# helpers
def matrix_to_proportions(matrix: Sequence[Sequence]) -> Proportions:
    height, width = len(matrix), len(matrix[0])
    return Proportions(height, width)


# Validation


def validate_lines(lines: Sequence[str]) -> None:
    """
    Check that the lines describe a non-empty rectangular two-glyph grid.

    Lines are checked in order and only the first violation is reported.

    Raises:
        InvalidInput: if there are no lines (or only zero-length ones),
            if two lines differ in length,
            or if a character is not one of the two glyphs.
    """
    if not lines or all(len(line) == 0 for line in lines):
        raise InvalidInput("Input cannot be empty")

    width = len(lines[0])
    for row, line in enumerate(lines):
        if len(line) != width:
            raise InvalidInput(
                f"Lines must be the same length: line {row + 1} has "
                f"{len(line)} characters, expected {width}"
            )
        for col, char in enumerate(line):
            if char not in ALPHABET:
                raise InvalidInput(
                    f"Characters must be either '{EMPTY}' or '{FILLED}': "
                    f"found {char!r} at line {row + 1}, column {col + 1}"
                )


def lines_to_grid(lines: Sequence[str]) -> GlyphGrid:
    """Validate the lines and split them into a grid[row][col] of glyphs."""
    validate_lines(lines)
    grid = [list(line) for line in lines]
    logger.debug(f"Validated grid of proportions {matrix_to_proportions(grid)}")
    return grid


# Grid Base Operations
class GridOperations:
    """Basic operations on validated glyph grids"""

    # Operations
    @staticmethod
    def proportions(grid: GlyphGrid) -> Proportions:
        return matrix_to_proportions(grid)

    @staticmethod
    def is_filled(grid: GlyphGrid, point: Point) -> bool:
        return grid[point.row][point.col] == FILLED

    @staticmethod
    def filled_points(grid: GlyphGrid) -> frozenset[Point]:
        height, width = GridOperations.proportions(grid)
        return frozenset(
            Point(row, col)
            for row in range(height)
            for col in range(width)
            if grid[row][col] == FILLED
        )
