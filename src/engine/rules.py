"""
Speed Dice - House Rules

Which special rolls the table is currently reacting to. A roll label is only
acted on (turn repeat, history highlight) when its rule is enabled.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.engine.base import RollLabel


@dataclass
class RuleConfig:
    """
    Mutable house-rule toggles.

    Attributes:
        double_trouble: Roll again on doubles
        triple_threat: Triples count as special
        sequence_bonus: Sequences count as special
        speed_mode: Preset that forced 3 dice and all rules on when enabled
    """
    double_trouble: bool = True
    triple_threat: bool = True
    sequence_bonus: bool = True
    speed_mode: bool = False

    _RULE_FIELDS: ClassVar[dict[RollLabel, str]] = {
        RollLabel.DOUBLE: "double_trouble",
        RollLabel.TRIPLE: "triple_threat",
        RollLabel.SEQUENCE: "sequence_bonus",
    }

    def is_enabled(self, label: RollLabel) -> bool:
        """Whether the rule for ``label`` is on. NONE has no rule."""
        field_name = self._RULE_FIELDS.get(label)
        if field_name is None:
            return False
        return getattr(self, field_name)

    def set_rule(self, label: RollLabel, enabled: bool) -> None:
        """Enable or disable the rule for one special label.

        Allowed while speed mode is on; speed mode does not pin the rules.
        """
        field_name = self._RULE_FIELDS.get(label)
        if field_name is None:
            raise ValueError(f"No house rule exists for {label.name}.")
        setattr(self, field_name, bool(enabled))

    def set_double_trouble(self, enabled: bool) -> None:
        self.set_rule(RollLabel.DOUBLE, enabled)

    def set_triple_threat(self, enabled: bool) -> None:
        self.set_rule(RollLabel.TRIPLE, enabled)

    def set_sequence_bonus(self, enabled: bool) -> None:
        self.set_rule(RollLabel.SEQUENCE, enabled)

    def set_speed_mode(self, enabled: bool) -> bool:
        """Toggle speed mode.

        Turning it on switches every rule on once. Turning it off leaves the
        rules as they are.

        Returns:
            True if speed mode was just switched on, so the caller should
            force 3 dice.
        """
        enabled = bool(enabled)
        activated = enabled and not self.speed_mode
        self.speed_mode = enabled
        if activated:
            self.double_trouble = True
            self.triple_threat = True
            self.sequence_bonus = True
        return activated

    def gate(self, label: RollLabel) -> RollLabel:
        """Suppress ``label`` to NONE unless its rule is enabled."""
        return label if self.is_enabled(label) else RollLabel.NONE
