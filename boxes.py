"""
Bounding boxes are the smallest axis-aligned rectangles containing a shape.

A box is parametrized by its row range [bottom, top] and its column range
[left, right], both closed. Rows increase downward, so `bottom` is the
smallest row index and `top` the largest one.

Boxes are compared as closed rectangles: sharing a single row or column
edge is an overlap, not an adjacency.
"""

from collections.abc import Iterable, Sequence, Set
from dataclasses import dataclass, field

from errors import InternalInvariantViolation
from localtypes import BoxId, Point
from utils.algorithms.sweep import rectangles_intersect


@dataclass(frozen=True)
class BoundingBox:
    """Bounding box of one shape, immutable once built"""

    top: int  # max row
    bottom: int  # min row
    left: int  # min col
    right: int  # max col
    size: int = field(init=False)

    def __post_init__(self):
        if self.top < self.bottom or self.right < self.left:
            raise InternalInvariantViolation(
                f"Inverted bounds: rows [{self.bottom}, {self.top}], "
                f"cols [{self.left}, {self.right}]"
            )
        object.__setattr__(self, "size", self.height * self.width)

    @property
    def height(self) -> int:
        return self.top - self.bottom + 1

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def min_corner(self) -> Point:
        return Point(self.bottom, self.left)

    @property
    def max_corner(self) -> Point:
        return Point(self.top, self.right)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """(min row, min col), (min row, max col), (max row, min col), (max row, max col)"""
        return (
            Point(self.bottom, self.left),
            Point(self.bottom, self.right),
            Point(self.top, self.left),
            Point(self.top, self.right),
        )

    def contains(self, point: Point) -> bool:
        return (
            self.bottom <= point.row <= self.top
            and self.left <= point.col <= self.right
        )

    def intersects(self, other: "BoundingBox") -> bool:
        return rectangles_intersect(self, other)

    def __str__(self) -> str:
        return f"{self.min_corner}{self.max_corner}"


def points_to_bounding_box(points: Iterable[Point]) -> BoundingBox:
    """
    Build the tightest bounding box of a non-empty set of points, in a single pass.

    Raises:
        InternalInvariantViolation: if there are no points. Shapes are never
            empty, so this is a defect upstream, not a user error.
    """
    iterator = iter(points)
    try:
        row_min, col_min = row_max, col_max = next(iterator)
    except StopIteration:
        raise InternalInvariantViolation(
            "Cannot build a bounding box from an empty set of points"
        ) from None

    for row, col in iterator:
        if row < row_min:
            row_min = row
        elif row > row_max:
            row_max = row
        if col < col_min:
            col_min = col
        elif col > col_max:
            col_max = col

    return BoundingBox(top=row_max, bottom=row_min, left=col_min, right=col_max)


def shapes_to_boxes(shapes: Sequence[Iterable[Point]]) -> tuple[BoundingBox, ...]:
    """Bounding boxes in shape order: the box identity is the shape's index"""
    return tuple(points_to_bounding_box(shape) for shape in shapes)


def largest_non_overlapping_ids(
    boxes: Sequence[BoundingBox], overlapping: Set[BoxId]
) -> list[BoxId]:
    """
    Identities of the non-overlapping boxes of maximal size.

    Ties are all kept, in the order of `boxes` (shape discovery order).
    Empty when every box overlaps another one.
    """
    candidates = [i for i in range(len(boxes)) if i not in overlapping]
    if not candidates:
        return []

    largest_size = max(boxes[i].size for i in candidates)
    return [i for i in candidates if boxes[i].size == largest_size]


def select_largest_non_overlapping(
    boxes: Sequence[BoundingBox], overlapping: Set[BoxId]
) -> list[BoundingBox]:
    """Fresh list of the boxes picked by `largest_non_overlapping_ids`"""
    return [boxes[i] for i in largest_non_overlapping_ids(boxes, overlapping)]
