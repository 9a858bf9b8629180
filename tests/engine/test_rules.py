"""
Speed Dice - House Rules Tests
"""

import pytest

from src.engine.base import RollLabel
from src.engine.rules import RuleConfig


class TestDefaults:
    """Tests for the default RuleConfig."""

    def test_all_rules_on(self):
        rules = RuleConfig()
        assert rules.double_trouble is True
        assert rules.triple_threat is True
        assert rules.sequence_bonus is True

    def test_speed_mode_off(self):
        assert RuleConfig().speed_mode is False


class TestGate:
    """Tests for RuleConfig.gate()."""

    @pytest.mark.parametrize("label", [RollLabel.DOUBLE, RollLabel.TRIPLE, RollLabel.SEQUENCE])
    def test_enabled_rule_passes_label(self, label):
        assert RuleConfig().gate(label) == label

    def test_disabled_double_suppressed(self, no_doubles_rules):
        assert no_doubles_rules.gate(RollLabel.DOUBLE) == RollLabel.NONE

    def test_disabled_triple_suppressed(self):
        rules = RuleConfig(triple_threat=False)
        assert rules.gate(RollLabel.TRIPLE) == RollLabel.NONE

    def test_disabled_sequence_suppressed(self):
        rules = RuleConfig(sequence_bonus=False)
        assert rules.gate(RollLabel.SEQUENCE) == RollLabel.NONE

    def test_other_rules_unaffected(self, no_doubles_rules):
        assert no_doubles_rules.gate(RollLabel.TRIPLE) == RollLabel.TRIPLE

    def test_none_stays_none(self):
        assert RuleConfig().gate(RollLabel.NONE) == RollLabel.NONE


class TestSetters:
    """Tests for the individual rule setters."""

    def test_set_double_trouble(self):
        rules = RuleConfig()
        rules.set_double_trouble(False)
        assert rules.double_trouble is False
        assert rules.is_enabled(RollLabel.DOUBLE) is False

    def test_set_triple_threat(self):
        rules = RuleConfig()
        rules.set_triple_threat(False)
        assert rules.triple_threat is False

    def test_set_sequence_bonus(self):
        rules = RuleConfig()
        rules.set_sequence_bonus(False)
        assert rules.sequence_bonus is False

    def test_set_rule_for_none_raises(self):
        with pytest.raises(ValueError, match="No house rule"):
            RuleConfig().set_rule(RollLabel.NONE, True)


class TestSpeedMode:
    """Tests for RuleConfig.set_speed_mode()."""

    def test_enabling_turns_all_rules_on(self):
        rules = RuleConfig(double_trouble=False, triple_threat=False, sequence_bonus=False)
        assert rules.set_speed_mode(True) is True
        assert rules.speed_mode is True
        assert rules.double_trouble and rules.triple_threat and rules.sequence_bonus

    def test_rules_editable_while_active(self):
        rules = RuleConfig()
        rules.set_speed_mode(True)
        rules.set_double_trouble(False)
        assert rules.double_trouble is False
        assert rules.speed_mode is True

    def test_disabling_keeps_rules(self):
        rules = RuleConfig()
        rules.set_speed_mode(True)
        rules.set_sequence_bonus(False)
        assert rules.set_speed_mode(False) is False
        assert rules.speed_mode is False
        assert rules.sequence_bonus is False
        assert rules.double_trouble is True

    def test_enabling_twice_is_one_shot(self):
        rules = RuleConfig()
        rules.set_speed_mode(True)
        rules.set_triple_threat(False)
        assert rules.set_speed_mode(True) is False
        assert rules.triple_threat is False
