"""
Speed Dice - Pattern Classifier

Labels the dice in play as a double, triple, sequence, or nothing special.

Rules:
- 2 dice: double when both faces match
- 3 dice: triple when all faces match; otherwise sequence when the sorted
  faces are consecutive (e.g. 3-4-5) or one of 1-2-4, 1-3-5, 2-4-6

Classification ignores house rules; see RuleConfig.gate for that.
"""

from typing import ClassVar, Sequence

from src.engine.base import SPECIAL_SEQUENCES, DiceSet, RollLabel
from src.engine.validators import validate_dice_values


class RollClassifier:
    """Stateless classifier for dice patterns."""

    MESSAGES: ClassVar[dict[RollLabel, str]] = {
        RollLabel.DOUBLE: "Double! Roll Again!",
        RollLabel.TRIPLE: "Triple Threat! Collect from each player!",
        RollLabel.SEQUENCE: "Sequence! Bonus Activated!",
        RollLabel.NONE: "",
    }

    @classmethod
    def is_double(cls, values: Sequence[int]) -> bool:
        """Two dice showing the same face."""
        return len(values) == 2 and values[0] == values[1]

    @classmethod
    def is_triple(cls, values: Sequence[int]) -> bool:
        """Three dice showing the same face."""
        return len(values) == 3 and values[0] == values[1] == values[2]

    @classmethod
    def is_sequence(cls, values: Sequence[int]) -> bool:
        """Three dice forming a run or one of the special spaced sets."""
        if len(values) != 3:
            return False

        low, mid, high = sorted(values)
        if low + 1 == mid and mid + 1 == high:
            return True
        return (low, mid, high) in SPECIAL_SEQUENCES

    @classmethod
    def classify(cls, values: DiceSet | Sequence[int]) -> RollLabel:
        """Classify the active dice.

        Args:
            values: A DiceSet (its active slice is used) or 2-3 face values

        Returns:
            The matching RollLabel

        Raises:
            ValueError: If fewer than 2 or more than 3 values are given
        """
        active = values.active if isinstance(values, DiceSet) else values
        active = validate_dice_values(active, min_count=2, max_count=3)

        if len(active) == 2:
            return RollLabel.DOUBLE if cls.is_double(active) else RollLabel.NONE

        # Triple takes precedence over sequence
        if cls.is_triple(active):
            return RollLabel.TRIPLE
        if cls.is_sequence(active):
            return RollLabel.SEQUENCE
        return RollLabel.NONE

    @classmethod
    def message_for(cls, label: RollLabel) -> str:
        """Banner text shown for a special roll."""
        return cls.MESSAGES[label]
