"""Classic Game of Life patterns and placement into a universe."""

import logging
from typing import Dict

import numpy as np

from .core.cell import Cell
from .core.universe import Universe

logger = logging.getLogger(__name__)


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def create_blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells, period 2)."""
    return np.array([[True, True, True]], dtype=bool)


def create_glider_pattern() -> np.ndarray:
    """Create classic glider travelling toward the bottom-right."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


def create_toad_pattern() -> np.ndarray:
    """Create toad oscillator (period 2)."""
    return np.array([
        [False, True, True, True],
        [True, True, True, False]
    ], dtype=bool)


PATTERNS: Dict[str, np.ndarray] = {
    "block": create_block_pattern(),
    "blinker": create_blinker_pattern(),
    "glider": create_glider_pattern(),
    "toad": create_toad_pattern(),
}


def load_pattern(universe: Universe, pattern: np.ndarray, row: int, column: int) -> None:
    """Stamp a pattern's live cells into a universe.

    Args:
        universe: Target universe (modified in-place)
        pattern: 2D boolean array representing the pattern
        row: Top row for placement
        column: Left column for placement

    Raises:
        ValueError: If the pattern does not fit inside the universe
    """
    pattern = np.asarray(pattern, dtype=bool)
    pattern_height, pattern_width = pattern.shape

    # No wrapping: the whole pattern must land inside the edges
    if (row < 0 or column < 0 or
            row + pattern_height > universe.height or
            column + pattern_width > universe.width):
        raise ValueError(
            f"Pattern {pattern_width}x{pattern_height} at ({row}, {column}) "
            f"does not fit in {universe.width}x{universe.height} universe"
        )

    for py, px in zip(*np.nonzero(pattern)):
        universe.set_cell(row + int(py), column + int(px), Cell.ALIVE)

    logger.debug(f"Loaded {int(pattern.sum())}-cell pattern at ({row}, {column})")


def universe_from_pattern(pattern: np.ndarray, pad: int = 2, **kwargs) -> Universe:
    """Create a universe just large enough for a pattern plus padding.

    Args:
        pattern: 2D boolean array representing the pattern
        pad: Dead cells on each side of the pattern
        **kwargs: Passed through to the Universe constructor
    """
    pattern = np.asarray(pattern, dtype=bool)
    height, width = pattern.shape
    universe = Universe(width + 2 * pad, height + 2 * pad, **kwargs)
    load_pattern(universe, pattern, pad, pad)
    return universe
