"""
Rendering of box finding results.

Results are printed as one "(r1,c1)(r2,c2)" line per box. The grid view
colors every cell by the status of the shape it belongs to and is meant for
humans only: it is written to the console given, stderr by default.
"""

import sys
from collections.abc import Iterable, Sequence, Set
from typing import TextIO

from rich.console import Console
from rich.text import Text

from boxes import BoundingBox
from constants import STATUS_BG, STATUS_RGB
from localtypes import BoxId, GlyphGrid, Shape
from utils.grid import GridOperations
from utils.io.tui import supports_true_color, swatch


def print_boxes(boxes: Iterable[BoundingBox], file: TextIO | None = None) -> None:
    file = file if file is not None else sys.stdout
    for box in boxes:
        print(box, file=file)


def grid_to_statuses(
    grid: GlyphGrid,
    shapes: Sequence[Shape],
    overlapping: Set[BoxId],
    selected: Set[BoxId],
) -> list[list[str]]:
    """
    Status of every cell: "empty", or for a filled cell the status of its shape's box,
    "selected" over "overlapping" over "shape".
    """
    height, width = GridOperations.proportions(grid)
    statuses = [["empty" for _ in range(width)] for _ in range(height)]
    for box_id, shape in enumerate(shapes):
        if box_id in selected:
            status = "selected"
        elif box_id in overlapping:
            status = "overlapping"
        else:
            status = "shape"
        for row, col in shape:
            statuses[row][col] = status
    return statuses


def statuses_to_rich_text(statuses: list[list[str]], cell_width: int = 2) -> Text:
    """Convert a status grid to a Rich Text object with colored blocks."""
    text = Text()
    for row in statuses:
        for status in row:
            r, g, b = STATUS_RGB[status]
            text.append(" " * cell_width, style=f"on rgb({r},{g},{b})")
        text.append("\n")
    return text


def legend() -> str:
    if supports_true_color():
        return "  ".join(swatch(bg, status) for status, bg in STATUS_BG.items())
    return "  ".join(STATUS_RGB)


def selected_corners(boxes: Sequence[BoundingBox], selected: Set[BoxId]) -> list[str]:
    """One line per selected box: its identity and its four corners, 1-based."""
    return [
        f"#{box_id} " + " ".join(str(corner) for corner in boxes[box_id].corners())
        for box_id in sorted(selected)
    ]


def display_grid(
    grid: GlyphGrid,
    shapes: Sequence[Shape],
    boxes: Sequence[BoundingBox],
    overlapping: Set[BoxId],
    selected: Set[BoxId],
    console: Console | None = None,
) -> None:
    console = console if console is not None else Console(stderr=True)
    statuses = grid_to_statuses(grid, shapes, overlapping, selected)
    console.print(statuses_to_rich_text(statuses), end="")
    console.print(Text.from_ansi(legend()))
    for line in selected_corners(boxes, selected):
        console.print(line, markup=False, highlight=False)
