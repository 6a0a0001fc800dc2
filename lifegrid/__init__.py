"""
lifegrid: Conway's Game of Life on a fixed, hard-edged grid.

Construct a universe, advance it one generation at a time, reseed it
and render it as text.
"""

from .core import Cell, LifeRules, ReseedConfig, Universe

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'LifeRules',
    'ReseedConfig',
    'Universe',
]
