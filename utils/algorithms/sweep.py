"""
Overlap detection between axis-aligned boxes.

Two classifiers return the identities (indices) of the boxes overlapping at
least one other box:

    overlapping_boxes           - column-ordered interval sweep
    pairwise_overlapping_boxes  - every pair tested, the O(n²) baseline

Both treat boxes as closed rectangles, so touching edges count as overlap.
"""

import logging
from bisect import bisect_right, insort
from collections.abc import Sequence
from enum import StrEnum
from itertools import combinations
from typing import Protocol

from localtypes import ActiveRange, BoxId, Interval, IntervalKind

logger = logging.getLogger(__name__)


class Rectangular(Protocol):
    """Closed row range [bottom, top] and closed column range [left, right]"""

    @property
    def top(self) -> int: ...
    @property
    def bottom(self) -> int: ...
    @property
    def left(self) -> int: ...
    @property
    def right(self) -> int: ...


class OverlapMethod(StrEnum):
    """Available overlap classifiers"""

    SWEEP = "sweep"
    PAIRWISE = "pairwise"


def boxes_to_intervals(boxes: Sequence[Rectangular]) -> list[Interval]:
    """
    Two events per box, a start at its left column and an end at its right one,
    sorted by their natural order (column, kind, identity, rows).

    At an equal column every start comes before every end, so boxes sharing
    a single boundary column are both active at the same time.
    """
    intervals = []
    for box_id, box in enumerate(boxes):
        intervals.append(
            Interval(box.left, IntervalKind.START, box_id, box.top, box.bottom)
        )
        intervals.append(
            Interval(box.right, IntervalKind.END, box_id, box.top, box.bottom)
        )
    intervals.sort()
    return intervals


def _ranges_intersect(low: int, high: int, other_low: int, other_high: int) -> bool:
    return not (low > other_high or high < other_low)


def rectangles_intersect(a: Rectangular, b: Rectangular) -> bool:
    """Closed rectangles intersect when both their row and column ranges do"""
    return _ranges_intersect(a.bottom, a.top, b.bottom, b.top) and _ranges_intersect(
        a.left, a.right, b.left, b.right
    )


def overlapping_boxes(boxes: Sequence[Rectangular]) -> frozenset[BoxId]:
    """
    Find the boxes overlapping another box with a sweep over columns.

    The active set holds the row ranges of the boxes whose column range
    contains the current column, as (bottom, top, box_id) entries sorted
    with bisect. An incoming box is only compared with the active ones, and
    only with those whose bottom row is not below its top row.

    Args:
        boxes: Bounding boxes, identified by their index.

    Returns:
        Identities of the overlapping boxes. Marking is symmetric:
        both boxes of an intersecting pair are returned.
    """
    active: list[ActiveRange] = []
    overlapping: set[BoxId] = set()

    for interval in boxes_to_intervals(boxes):
        entry = (interval.bottom, interval.top, interval.box_id)

        if interval.kind == IntervalKind.END:
            active.pop(bisect_right(active, entry) - 1)
            continue

        # Entries whose bottom row exceeds the incoming top row cannot intersect
        candidates = active[: bisect_right(active, (interval.top, float("inf")))]
        hits = [
            box_id
            for bottom, top, box_id in candidates
            if _ranges_intersect(interval.bottom, interval.top, bottom, top)
        ]
        if hits:
            overlapping.add(interval.box_id)
            overlapping.update(hits)

        # Inserted after the test, so a box never overlaps itself
        insort(active, entry)

    logger.debug(f"Sweep: {len(overlapping)} of {len(boxes)} box(es) overlap")
    return frozenset(overlapping)


def pairwise_overlapping_boxes(boxes: Sequence[Rectangular]) -> frozenset[BoxId]:
    """Same classification as `overlapping_boxes`, testing every pair of boxes."""
    overlapping: set[BoxId] = set()
    for (i, box_a), (j, box_b) in combinations(enumerate(boxes), 2):
        if rectangles_intersect(box_a, box_b):
            overlapping.update((i, j))

    logger.debug(f"Pairwise: {len(overlapping)} of {len(boxes)} box(es) overlap")
    return frozenset(overlapping)


def classify_overlaps(
    boxes: Sequence[Rectangular], method: OverlapMethod = OverlapMethod.SWEEP
) -> frozenset[BoxId]:
    match method:
        case OverlapMethod.SWEEP:
            return overlapping_boxes(boxes)
        case OverlapMethod.PAIRWISE:
            return pairwise_overlapping_boxes(boxes)
        case _:
            raise ValueError(f"Unknown overlap method: {method}")
