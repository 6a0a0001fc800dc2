"""Game of Life universe: the grid simulation engine.

The universe owns a flat, row-major buffer of one-byte cells. Cell
``(row, column)`` lives at ``row * width + column``. Advancing computes
the whole next generation into a fresh buffer and swaps it in once the
scan is complete, so every neighbor count reads the previous generation
only. Edges are hard: cells beyond the border simply do not exist.
"""

import copy
import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .geometry import get_index, neighbor_indices
from .rules import LifeRules
from .seeding import ReseedConfig, SeedLike, make_rng, reseed_cells

logger = logging.getLogger(__name__)


def _validate_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"Universe {name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Universe {name} must be non-negative, got {value}")
    return int(value)


class Universe:
    """Rectangular Game of Life universe with non-wrapping boundaries.

    Attributes:
        width: Number of columns
        height: Number of rows
        generation: Number of generations advanced since construction
        rules: Birth/survival parameters applied by ``tick``
        reseed_config: Threshold and draw range used by ``randomize``
    """

    def __init__(self,
                 width: int,
                 height: int,
                 seed: SeedLike = None,
                 reseed_config: Optional[ReseedConfig] = None,
                 rules: Optional[LifeRules] = None):
        """Initialize an all-dead universe.

        Args:
            width: Universe width in cells (0 allowed)
            height: Universe height in cells (0 allowed)
            seed: Seed for this universe's random generator; None draws
                fresh OS entropy and makes reseeding non-reproducible
            reseed_config: Reseed threshold settings (defaults to 65 of 100)
            rules: Transition rules (defaults to standard Conway rules)

        Raises:
            ValueError: If a dimension is negative or not an integer
        """
        self.width = _validate_dimension("width", width)
        self.height = _validate_dimension("height", height)
        self.generation = 0
        self.rules = rules or LifeRules.standard()
        self.reseed_config = reseed_config or ReseedConfig()

        self._rng = make_rng(seed)
        self._cells = np.zeros(self.width * self.height, dtype=np.uint8)

        logger.debug(f"Created universe {self.width}x{self.height}")

    @classmethod
    def new(cls, size: int, seed: SeedLike = None) -> 'Universe':
        """Create a square ``size x size`` universe with every cell dead."""
        return cls(size, size, seed=seed)

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[int], **kwargs) -> 'Universe':
        """Create a universe from an explicit row-major cell sequence.

        Args:
            width: Universe width in cells
            height: Universe height in cells
            cells: ``width * height`` values, each a ``Cell`` or 0/1
            **kwargs: Passed through to the constructor

        Raises:
            ValueError: If the sequence length or any value is invalid
        """
        universe = cls(width, height, **kwargs)
        buffer = np.fromiter((int(cell) for cell in cells), dtype=np.int64)

        if buffer.shape[0] != universe.width * universe.height:
            raise ValueError(
                f"Expected {universe.width * universe.height} cells for "
                f"{universe.width}x{universe.height} universe, got {buffer.shape[0]}"
            )
        if np.any((buffer != Cell.DEAD) & (buffer != Cell.ALIVE)):
            raise ValueError("Cell values must be 0 (dead) or 1 (alive)")

        universe._cells = buffer.astype(np.uint8)
        return universe

    def get_index(self, row: int, column: int) -> int:
        """Row-major buffer position of ``(row, column)``."""
        return get_index(self.width, row, column)

    def _check_bounds(self, row: int, column: int) -> None:
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(
                f"Cell ({row}, {column}) out of bounds for {self.width}x{self.height} universe"
            )

    def get_cell(self, row: int, column: int) -> Cell:
        """Get cell state at ``(row, column)``.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, column)
        return Cell(int(self._cells[self.get_index(row, column)]))

    def set_cell(self, row: int, column: int, cell: Cell) -> None:
        """Set cell state at ``(row, column)``.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, column)
        self._cells[self.get_index(row, column)] = Cell(cell)

    def set_cells(self, coordinates: Iterable[Tuple[int, int]], cell: Cell = Cell.ALIVE) -> None:
        """Set every ``(row, column)`` in coordinates to the given state."""
        for row, column in coordinates:
            self.set_cell(row, column, cell)

    def clear(self) -> None:
        """Kill every cell."""
        self._cells.fill(Cell.DEAD)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Immutable row-major snapshot of the current generation."""
        return tuple(Cell(value) for value in self._cells.tolist())

    def to_array(self) -> np.ndarray:
        """Get the universe as a ``(height, width)`` numpy array copy."""
        return self._cells.reshape(self.height, self.width).copy()

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count live neighbors of ``(row, column)`` among those that exist.

        Returns:
            Number of live neighbors (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, column)
        return self._live_neighbor_count(row, column)

    def _live_neighbor_count(self, row: int, column: int) -> int:
        return sum(int(self._cells[index])
                   for index in neighbor_indices(self.width, self.height, row, column))

    def tick(self) -> None:
        """Advance the universe by one generation.

        The next generation is built in a separate buffer and replaces the
        current one only after every cell has been evaluated.
        """
        next_cells = self._cells.copy()

        for row in range(self.height):
            for column in range(self.width):
                index = self.get_index(row, column)
                cell = Cell(int(self._cells[index]))
                live_neighbors = self._live_neighbor_count(row, column)
                next_cells[index] = self.rules.update_cell(cell, live_neighbors)

        self._cells = next_cells
        self.generation += 1

        logger.debug(f"Generation {self.generation}: {self.count_alive()} alive")

    def run(self, generations: int) -> List[int]:
        """Advance several generations.

        Args:
            generations: Number of ticks to apply

        Returns:
            Live cell count after each tick

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        live_counts = []
        for _ in range(generations):
            self.tick()
            live_counts.append(self.count_alive())
        return live_counts

    def randomize(self,
                  rng: Optional[np.random.Generator] = None,
                  config: Optional[ReseedConfig] = None) -> None:
        """Reseed the universe, forcing some cells alive.

        Cells are only ever turned on; live cells stay alive.

        Args:
            rng: Generator to draw from instead of this universe's own
            config: Reseed settings to use instead of ``reseed_config``
        """
        self._cells = reseed_cells(self._cells,
                                   rng if rng is not None else self._rng,
                                   config or self.reseed_config)
        logger.debug(f"Reseeded universe: {self.count_alive()} alive")

    def render(self) -> str:
        """Render one line per row, one glyph per cell, each row newline-terminated."""
        glyphs = (Cell.DEAD.glyph, Cell.ALIVE.glyph)
        lines = []
        for row in range(self.height):
            start = self.get_index(row, 0)
            row_cells = self._cells[start:start + self.width].tolist()
            lines.append(''.join(glyphs[value] for value in row_cells) + '\n')
        return ''.join(lines)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self._cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self._cells)

    def copy(self) -> 'Universe':
        """Create a deep copy of the cells, rules and random generator state."""
        new_universe = Universe(self.width, self.height,
                                reseed_config=self.reseed_config.copy(),
                                rules=self.rules.copy())
        new_universe._cells = self._cells.copy()
        new_universe._rng = copy.deepcopy(self._rng)
        new_universe.generation = self.generation
        return new_universe

    def __eq__(self, other: object) -> bool:
        """Universes are equal when their dimensions and cells match."""
        if not isinstance(other, Universe):
            return False
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"Universe({self.width}x{self.height}, generation={self.generation}, "
                f"alive={self.count_alive()})")
