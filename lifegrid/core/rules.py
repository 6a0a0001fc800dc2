"""
Game of Life transition rules.

Birth and survival are expressed as sets of live-neighbor counts. The
defaults are the standard B3/S23 rules; ``LifeRules`` lets a universe
carry a different rule set without touching the engine.
"""

from typing import Optional, Set

from .cell import Cell


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def update_cell(cell: Cell, live_neighbors: int) -> Cell:
    """Apply the standard rules to determine a cell's next state.

    Args:
        cell: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if cell == Cell.ALIVE:
        return Cell.ALIVE if live_neighbors in SURVIVAL_SET else Cell.DEAD
    return Cell.ALIVE if live_neighbors in BIRTH_SET else Cell.DEAD


class LifeRules:
    """Birth/survival parameters for a universe.

    Defaults to standard Conway rules.
    """

    def __init__(self,
                 survival_set: Optional[Set[int]] = None,
                 birth_set: Optional[Set[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})

        Raises:
            ValueError: If any neighbor count lies outside 0-8
        """
        self.survival_set: Set[int] = set(survival_set) if survival_set is not None else SURVIVAL_SET.copy()
        self.birth_set: Set[int] = set(birth_set) if birth_set is not None else BIRTH_SET.copy()

        for count in self.survival_set | self.birth_set:
            if not 0 <= count <= 8:
                raise ValueError(f"Neighbor count {count} outside 0-8")

    @classmethod
    def standard(cls) -> 'LifeRules':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET.copy(), BIRTH_SET.copy())

    def update_cell(self, cell: Cell, live_neighbors: int) -> Cell:
        """Apply these rule parameters to a cell."""
        if cell == Cell.ALIVE:
            return Cell.ALIVE if live_neighbors in self.survival_set else Cell.DEAD
        return Cell.ALIVE if live_neighbors in self.birth_set else Cell.DEAD

    def copy(self) -> 'LifeRules':
        return LifeRules(self.survival_set, self.birth_set)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeRules):
            return False
        return self.survival_set == other.survival_set and self.birth_set == other.birth_set

    def __repr__(self) -> str:
        return f"LifeRules(survival={sorted(self.survival_set)}, birth={sorted(self.birth_set)})"
