"""Grid simulation engine: cells, geometry, rules, reseeding and the universe."""

from .cell import Cell, ALIVE_GLYPH, DEAD_GLYPH
from .rules import LifeRules, SURVIVAL_SET, BIRTH_SET, update_cell
from .seeding import ReseedConfig, reseed_cells
from .universe import Universe

__all__ = [
    'Cell',
    'ALIVE_GLYPH',
    'DEAD_GLYPH',
    'LifeRules',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'update_cell',
    'ReseedConfig',
    'reseed_cells',
    'Universe',
]
