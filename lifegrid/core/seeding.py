"""Probabilistic reseeding of a universe's cells.

Reseeding is one-directional: a draw can force a cell alive but never
kills one. Each cell gets an independent uniform integer draw in
``[0, draw_range)``; draws strictly greater than ``threshold`` turn the
cell on. With the defaults (65 of 100) roughly 34% of cells are forced
alive per reseed.
"""

import logging
from typing import Optional, Union

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 65
DEFAULT_DRAW_RANGE = 100

SeedLike = Union[None, int, np.random.SeedSequence]


class ReseedConfig:
    """Threshold and draw range for reseeding."""

    def __init__(self,
                 threshold: int = DEFAULT_THRESHOLD,
                 draw_range: int = DEFAULT_DRAW_RANGE):
        """Initialize reseed configuration.

        Args:
            threshold: Draws strictly above this value force a cell alive
            draw_range: Exclusive upper bound of the uniform draw

        Raises:
            ValueError: If a value is not an integer, draw_range is not
                positive, or threshold is outside [0, draw_range)
        """
        for name, value in (("threshold", threshold), ("draw_range", draw_range)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Reseed {name} must be an integer, got {value!r}")

        if draw_range <= 0:
            raise ValueError(f"Draw range must be positive, got {draw_range}")
        if not 0 <= threshold < draw_range:
            raise ValueError(f"Threshold {threshold} must lie in [0, {draw_range})")

        self.threshold = int(threshold)
        self.draw_range = int(draw_range)

    @property
    def alive_probability(self) -> float:
        """Chance that a single draw forces a cell alive."""
        return (self.draw_range - 1 - self.threshold) / self.draw_range

    def copy(self) -> 'ReseedConfig':
        return ReseedConfig(threshold=self.threshold, draw_range=self.draw_range)

    def __repr__(self) -> str:
        return f"ReseedConfig(threshold={self.threshold}, draw_range={self.draw_range})"


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Build an independent random generator (unseeded when seed is None)."""
    return np.random.default_rng(seed)


def reseed_cells(cells: np.ndarray,
                 rng: np.random.Generator,
                 config: Optional[ReseedConfig] = None) -> np.ndarray:
    """Return a reseeded copy of a flat cell buffer.

    Args:
        cells: Flat uint8 cell buffer (not modified)
        rng: Random generator supplying the per-cell draws
        config: Threshold and draw range (defaults to 65 of 100)

    Returns:
        New buffer where cells whose draw exceeded the threshold are alive
        and every other cell keeps its previous state
    """
    config = config or ReseedConfig()

    draws = rng.integers(0, config.draw_range, size=cells.shape[0])
    forced = draws > config.threshold

    reseeded = cells.copy()
    reseeded[forced] = Cell.ALIVE

    logger.debug(f"Reseed forced {int(np.count_nonzero(forced))}/{cells.shape[0]} draws above {config.threshold}")
    return reseeded
