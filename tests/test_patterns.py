"""Tests for classic patterns and their placement."""

import pytest
import numpy as np
from lifegrid.core.universe import Universe
from lifegrid.patterns import (PATTERNS, create_block_pattern, create_blinker_pattern,
                               create_glider_pattern, create_toad_pattern,
                               load_pattern, universe_from_pattern)


class TestPatternPlacement:
    """Test loading patterns into a universe."""

    def test_load_glider(self):
        universe = Universe.new(8)
        load_pattern(universe, create_glider_pattern(), 2, 3)

        assert universe.count_alive() == 5
        assert np.array_equal(universe.to_array()[2:5, 3:6], create_glider_pattern())

    def test_pattern_must_fit(self):
        """Patterns never wrap around the edges."""
        universe = Universe.new(4)
        with pytest.raises(ValueError, match="does not fit"):
            load_pattern(universe, create_glider_pattern(), 2, 2)
        with pytest.raises(ValueError, match="does not fit"):
            load_pattern(universe, create_block_pattern(), -1, 0)
        assert universe.is_empty()

    def test_universe_from_pattern(self):
        universe = universe_from_pattern(create_blinker_pattern(), pad=1)
        assert (universe.width, universe.height) == (5, 3)
        assert universe.render() == "◻◻◻◻◻\n◻◼◼◼◻\n◻◻◻◻◻\n"

    def test_universe_from_pattern_passes_seed(self):
        first = universe_from_pattern(create_block_pattern(), seed=8)
        second = universe_from_pattern(create_block_pattern(), seed=8)
        first.randomize()
        second.randomize()
        assert first == second


class TestPatternDynamics:
    """Known behaviors of the classic patterns."""

    def test_block_still_life(self):
        universe = universe_from_pattern(create_block_pattern())
        before = universe.cells
        universe.run(5)
        assert universe.cells == before

    @pytest.mark.parametrize("name", ["blinker", "toad"])
    def test_oscillators_period_2(self, name):
        universe = universe_from_pattern(PATTERNS[name])
        initial = universe.cells

        universe.tick()
        assert universe.cells != initial

        universe.tick()
        assert universe.cells == initial

    def test_glider_conserves_mass(self):
        universe = Universe.new(20)
        load_pattern(universe, create_glider_pattern(), 1, 1)
        assert universe.run(30) == [5] * 30

    def test_toad_shape(self):
        assert create_toad_pattern().sum() == 6
