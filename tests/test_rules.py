"""Tests for the birth/survival transition rules."""

import pytest
from lifegrid.core.cell import Cell
from lifegrid.core.rules import LifeRules, update_cell, SURVIVAL_SET, BIRTH_SET


class TestStandardRules:
    """Standard B3/S23 behavior for every neighbor count."""

    @pytest.mark.parametrize("live_neighbors", range(9))
    def test_alive_cell(self, live_neighbors):
        expected = Cell.ALIVE if live_neighbors in (2, 3) else Cell.DEAD
        assert update_cell(Cell.ALIVE, live_neighbors) is expected

    @pytest.mark.parametrize("live_neighbors", range(9))
    def test_dead_cell(self, live_neighbors):
        expected = Cell.ALIVE if live_neighbors == 3 else Cell.DEAD
        assert update_cell(Cell.DEAD, live_neighbors) is expected

    def test_rule_sets(self):
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}


class TestLifeRules:
    """Test the rule parameter object."""

    def test_standard_matches_module_rules(self):
        rules = LifeRules.standard()
        for cell in Cell:
            for live_neighbors in range(9):
                assert rules.update_cell(cell, live_neighbors) is update_cell(cell, live_neighbors)

    def test_underpopulation_and_overcrowding(self):
        rules = LifeRules.standard()
        assert rules.update_cell(Cell.ALIVE, 0) is Cell.DEAD
        assert rules.update_cell(Cell.ALIVE, 1) is Cell.DEAD
        assert rules.update_cell(Cell.ALIVE, 4) is Cell.DEAD
        assert rules.update_cell(Cell.ALIVE, 8) is Cell.DEAD

    def test_custom_rules(self):
        """HighLife (B36/S23) births on six neighbors."""
        rules = LifeRules(survival_set={2, 3}, birth_set={3, 6})
        assert rules.update_cell(Cell.DEAD, 6) is Cell.ALIVE
        assert rules.update_cell(Cell.ALIVE, 6) is Cell.DEAD

    def test_standard_sets_are_copies(self):
        rules = LifeRules.standard()
        rules.birth_set.add(6)
        assert BIRTH_SET == {3}

    def test_invalid_neighbor_count(self):
        with pytest.raises(ValueError, match="outside 0-8"):
            LifeRules(survival_set={2, 9})

    def test_copy_and_equality(self):
        rules = LifeRules(birth_set={3, 6})
        clone = rules.copy()
        assert clone == rules
        clone.birth_set.discard(6)
        assert clone != rules

    def test_repr(self):
        assert repr(LifeRules.standard()) == "LifeRules(survival=[2, 3], birth=[3])"
