"""Tests for cell values and glyphs."""

from lifegrid.core.cell import Cell, ALIVE_GLYPH, DEAD_GLYPH


def test_numeric_encoding():
    """Dead is 0 and Alive is 1 so neighbor counts can sum raw values."""
    assert int(Cell.DEAD) == 0
    assert int(Cell.ALIVE) == 1
    assert Cell.ALIVE + Cell.ALIVE + Cell.DEAD == 2


def test_display_for_cell():
    assert str(Cell.ALIVE) == "◼"
    assert str(Cell.DEAD) == "◻"


def test_glyphs_distinct():
    assert Cell.ALIVE.glyph == ALIVE_GLYPH
    assert Cell.DEAD.glyph == DEAD_GLYPH
    assert ALIVE_GLYPH != DEAD_GLYPH
    assert len(ALIVE_GLYPH) == len(DEAD_GLYPH) == 1
