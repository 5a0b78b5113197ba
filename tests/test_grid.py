"""
Tests for grid validation and basic grid operations.
"""

import pytest

from errors import InvalidInput
from localtypes import Point, Proportions
from utils.grid import GridOperations, lines_to_grid, validate_lines


class TestValidateLines:
    """Tests for validate_lines: first violation only, no partial results."""

    def test_valid_grid(self):
        validate_lines(["*-", "-*"])

    def test_single_cell(self):
        validate_lines(["*"])

    def test_empty_sequence(self):
        with pytest.raises(InvalidInput, match="empty"):
            validate_lines([])

    def test_only_zero_length_lines(self):
        with pytest.raises(InvalidInput, match="empty"):
            validate_lines(["", ""])

    def test_ragged_rows(self):
        with pytest.raises(InvalidInput, match="same length"):
            validate_lines(["**", "***"])

    def test_ragged_message_names_the_line(self):
        with pytest.raises(InvalidInput, match="line 3"):
            validate_lines(["--", "--", "-", "--"])

    def test_zero_length_line_among_others(self):
        with pytest.raises(InvalidInput, match="same length"):
            validate_lines(["--", ""])

    def test_invalid_symbol(self):
        with pytest.raises(InvalidInput, match="'x' at line 2, column 3"):
            validate_lines(["---", "--x"])

    def test_whitespace_is_not_a_glyph(self):
        with pytest.raises(InvalidInput):
            validate_lines(["* "])

    def test_first_violation_is_reported(self):
        """Line 2 is ragged and line 3 has a bad symbol: only the length is reported."""
        with pytest.raises(InvalidInput, match="same length"):
            validate_lines(["---", "--", "-o-"])

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_lines([])

    @pytest.mark.parametrize(
        "lines", [[], ["*", "**"], ["*?"], ["--", "--"], ["*"]]
    )
    def test_idempotent(self, lines):
        def verdict():
            try:
                validate_lines(lines)
            except InvalidInput as error:
                return type(error), str(error)
            return None

        assert verdict() == verdict()


class TestLinesToGrid:
    def test_split_into_glyphs(self):
        assert lines_to_grid(["*-", "--"]) == [["*", "-"], ["-", "-"]]

    def test_invalid_lines_raise(self):
        with pytest.raises(InvalidInput):
            lines_to_grid(["*-", "-"])


class TestGridOperations:
    def test_proportions(self):
        grid = lines_to_grid(["---", "---"])
        assert GridOperations.proportions(grid) == Proportions(height=2, width=3)

    def test_filled_points(self):
        grid = lines_to_grid(["*-", "-*", "--"])
        assert GridOperations.filled_points(grid) == {Point(0, 0), Point(1, 1)}

    def test_filled_points_of_empty_grid(self):
        grid = lines_to_grid(["--", "--"])
        assert GridOperations.filled_points(grid) == frozenset()

    def test_is_filled(self):
        grid = lines_to_grid(["*-"])
        assert GridOperations.is_filled(grid, Point(0, 0))
        assert not GridOperations.is_filled(grid, Point(0, 1))
