"""
Global constants used throughout the project
"""
from typing import Final

from utils.io.tui import bg_color_24b


FILLED: Final[str] = "*"
EMPTY: Final[str] = "-"
ALPHABET: Final[frozenset[str]] = frozenset({FILLED, EMPTY})

# 4-connectivity, in flood fill expansion order: down, up, right, left
# (drow, dcol)
TOWER_DELTAS: Final[tuple[tuple[int, int], ...]] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
)

# Cell status -> RGB, used by the grid views
STATUS_RGB: Final[dict[str, tuple[int, int, int]]] = {
    "empty": (85, 85, 85),  # Grey (#555555)
    "shape": (30, 147, 255),  # Blue (#1E93FF)
    "overlapping": (249, 60, 49),  # Red (#F93C31)
    "selected": (79, 204, 48),  # Green (#4FCC30)
}

STATUS_BG: Final[dict[str, str]] = {
    status: bg_color_24b(*rgb) for status, rgb in STATUS_RGB.items()
}
