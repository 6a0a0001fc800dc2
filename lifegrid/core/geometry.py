"""Row-major addressing and neighbor geometry for a hard-edged grid.

Every neighbor lookup returns ``None`` when the offset would leave the
``width x height`` rectangle. The grid does not wrap: a cell on the top
row has no neighbor above it, a cell in the last column has none to its
right, and diagonals are absent when either component is absent.

Presence is always decided before an index is computed, so callers can
index the cell buffer with any non-``None`` result.
"""

from typing import List, Optional


def get_index(width: int, row: int, column: int) -> int:
    """Map ``(row, column)`` to its position in a row-major buffer."""
    return row * width + column


def index_above(width: int, height: int, row: int, column: int) -> Optional[int]:
    if row == 0:
        return None
    return get_index(width, row - 1, column)


def index_below(width: int, height: int, row: int, column: int) -> Optional[int]:
    if row >= height - 1:
        return None
    return get_index(width, row + 1, column)


def index_left(width: int, height: int, row: int, column: int) -> Optional[int]:
    if column == 0:
        return None
    return get_index(width, row, column - 1)


def index_right(width: int, height: int, row: int, column: int) -> Optional[int]:
    if column >= width - 1:
        return None
    return get_index(width, row, column + 1)


def index_above_right(width: int, height: int, row: int, column: int) -> Optional[int]:
    if row == 0 or column >= width - 1:
        return None
    return get_index(width, row - 1, column + 1)


def index_below_right(width: int, height: int, row: int, column: int) -> Optional[int]:
    if row >= height - 1 or column >= width - 1:
        return None
    return get_index(width, row + 1, column + 1)


def index_below_left(width: int, height: int, row: int, column: int) -> Optional[int]:
    if row >= height - 1 or column == 0:
        return None
    return get_index(width, row + 1, column - 1)


def index_above_left(width: int, height: int, row: int, column: int) -> Optional[int]:
    if row == 0 or column == 0:
        return None
    return get_index(width, row - 1, column - 1)


# Clockwise from directly above
NEIGHBOR_LOOKUPS = (
    index_above,
    index_above_right,
    index_right,
    index_below_right,
    index_below,
    index_below_left,
    index_left,
    index_above_left,
)


def neighbor_indices(width: int, height: int, row: int, column: int) -> List[int]:
    """Return buffer indices of every neighbor that exists.

    Args:
        width: Grid width in cells
        height: Grid height in cells
        row: Cell row (0 to height-1)
        column: Cell column (0 to width-1)

    Returns:
        Between 3 and 8 indices for grids of at least 2x2; fewer on
        single-row or single-column grids.
    """
    indices = []
    for lookup in NEIGHBOR_LOOKUPS:
        index = lookup(width, height, row, column)
        if index is not None:
            indices.append(index)
    return indices
