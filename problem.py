"""
Find the largest bounding boxes that overlap no other one.

Pipeline:
1. lines_to_grid: validate the lines into a glyph grid
2. grid_to_shapes: extract the 4-connected shapes, in row-major order
3. shapes_to_boxes: one bounding box per shape
4. classify_overlaps: boxes overlapping at least one other box
5. largest_non_overlapping_ids: the remaining boxes of maximal size

Usage:
    boxsweep [FILE] [--method {sweep,pairwise}] [--show] [--debug]
    python problem.py < grid.txt
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from boxes import BoundingBox, largest_non_overlapping_ids, shapes_to_boxes
from decomposition import grid_to_shapes
from errors import InvalidInput
from localtypes import BoxId, GlyphGrid, Shape
from utils.algorithms.sweep import OverlapMethod, classify_overlaps
from utils.display import display_grid, print_boxes
from utils.grid import lines_to_grid
from utils.loader import read_grid_file, read_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoxReport:
    """Every intermediate result of one run, box identities being shape indices"""

    grid: GlyphGrid
    shapes: tuple[Shape, ...]
    boxes: tuple[BoundingBox, ...]
    overlapping: frozenset[BoxId]
    selected_ids: tuple[BoxId, ...]

    @property
    def selected(self) -> list[BoundingBox]:
        return [self.boxes[i] for i in self.selected_ids]


def analyse(
    lines: Sequence[str], method: OverlapMethod = OverlapMethod.SWEEP
) -> BoxReport:
    """
    Run the whole pipeline on raw lines.

    Raises:
        InvalidInput: if the lines are not a non-empty rectangle of glyphs.
            Nothing else is computed in that case.
    """
    grid = lines_to_grid(lines)

    shapes = grid_to_shapes(grid)
    boxes = shapes_to_boxes(shapes)
    overlapping = classify_overlaps(boxes, method)
    selected_ids = tuple(largest_non_overlapping_ids(boxes, overlapping))

    logger.debug(
        f"{len(shapes)} shape(s), {len(overlapping)} overlapping, "
        f"{len(selected_ids)} selected"
    )
    return BoxReport(grid, shapes, boxes, overlapping, selected_ids)


def find_boxes(
    lines: Sequence[str], method: OverlapMethod = OverlapMethod.SWEEP
) -> list[BoundingBox]:
    """Largest non-overlapping bounding boxes, in shape discovery order."""
    return analyse(lines, method).selected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxsweep",
        description="Print the largest bounding boxes of '*' shapes overlapping no other box",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Grid file, read up to its first blank line (default: standard input)",
    )
    parser.add_argument(
        "--method",
        choices=[method.value for method in OverlapMethod],
        default=OverlapMethod.SWEEP.value,
        help="Overlap classifier to use",
    )
    parser.add_argument(
        "--show", action="store_true", help="Render the grid on standard error"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s | %(message)s",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.file is not None:
            lines = read_grid_file(args.file)
        else:
            lines = list(read_lines(sys.stdin))
        report = analyse(lines, OverlapMethod(args.method))
    except (InvalidInput, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if args.show:
        display_grid(
            report.grid,
            report.shapes,
            report.boxes,
            report.overlapping,
            frozenset(report.selected_ids),
        )
    print_boxes(report.selected)
    return 0


if __name__ == "__main__":
    sys.exit(main())
