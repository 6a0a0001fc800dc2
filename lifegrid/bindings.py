"""
Host-facing adapter for the universe engine.

Hosts (a UI loop, a script, a test harness) drive a universe through
these functions and only ever receive plain values: an opaque
``Universe`` handle, ``None`` or a ``str``.
"""

from typing import Optional

from .core.universe import Universe

TITLE = "Game of Life"


def new(size: int, seed: Optional[int] = None) -> Universe:
    """Construct a square universe of dead cells."""
    return Universe.new(size, seed=seed)


def tick(universe: Universe) -> None:
    """Advance the universe one generation."""
    universe.tick()


def render(universe: Universe) -> str:
    """Render the universe as newline-terminated rows of glyphs."""
    return universe.render()


def randomize(universe: Universe) -> None:
    """Reseed the universe using its own generator and settings."""
    universe.randomize()
