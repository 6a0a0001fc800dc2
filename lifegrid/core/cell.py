"""Cell state for the Game of Life universe.

A cell is either dead or alive. The numeric values matter: neighbor
counting sums raw cell values, so Dead must be 0 and Alive must be 1.
"""

from enum import IntEnum


DEAD_GLYPH = "◻"
ALIVE_GLYPH = "◼"


class Cell(IntEnum):
    """Two-valued cell state stored as a single byte."""
    DEAD = 0
    ALIVE = 1

    @property
    def glyph(self) -> str:
        """Single-character rendering of this cell."""
        if self is Cell.ALIVE:
            return ALIVE_GLYPH
        return DEAD_GLYPH

    def __str__(self) -> str:
        return self.glyph
