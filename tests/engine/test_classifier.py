"""
Speed Dice - Pattern Classifier Tests
"""

import pytest

from src.engine.base import DiceSet, RollLabel
from src.engine.classifier import RollClassifier


class TestClassify:
    """Tests for RollClassifier.classify()."""

    def test_common_patterns(self, classified_rolls):
        for name, (values, expected) in classified_rolls.items():
            assert RollClassifier.classify(values) == expected, name

    def test_double(self):
        assert RollClassifier.classify([3, 3]) == RollLabel.DOUBLE

    def test_two_dice_no_pattern(self):
        assert RollClassifier.classify([2, 5]) == RollLabel.NONE

    def test_triple(self):
        assert RollClassifier.classify([4, 4, 4]) == RollLabel.TRIPLE

    @pytest.mark.parametrize("values", [[1, 2, 3], [2, 4, 6], [1, 2, 4], [1, 3, 5]])
    def test_sequences(self, values):
        assert RollClassifier.classify(values) == RollLabel.SEQUENCE

    def test_near_miss_is_none(self):
        assert RollClassifier.classify([1, 2, 5]) == RollLabel.NONE

    def test_three_dice_never_double(self):
        """A pair within three dice is not a double."""
        assert RollClassifier.classify([6, 6, 1]) == RollLabel.NONE

    @pytest.mark.parametrize("values", [[3, 4, 5], [5, 4, 3], [4, 3, 5]])
    def test_sequence_order_independent(self, values):
        assert RollClassifier.classify(values) == RollLabel.SEQUENCE

    def test_uses_active_slice_of_dice_set(self):
        dice = DiceSet(values=(5, 5, 2), dice_count=2)
        assert RollClassifier.classify(dice) == RollLabel.DOUBLE

    def test_three_dice_set(self):
        dice = DiceSet(values=(2, 3, 4), dice_count=3)
        assert RollClassifier.classify(dice) == RollLabel.SEQUENCE

    @pytest.mark.parametrize("values", [[4], [1, 2, 3, 4]])
    def test_wrong_length_raises(self, values):
        with pytest.raises(ValueError):
            RollClassifier.classify(values)

    def test_invalid_face_raises(self):
        with pytest.raises(ValueError, match="between 1 and 6"):
            RollClassifier.classify([0, 3])


class TestHelpers:
    """Tests for the individual pattern predicates."""

    def test_is_double_requires_two_dice(self):
        assert RollClassifier.is_double([2, 2]) is True
        assert RollClassifier.is_double([2, 2, 2]) is False

    def test_is_triple_requires_three_dice(self):
        assert RollClassifier.is_triple([5, 5, 5]) is True
        assert RollClassifier.is_triple([5, 5]) is False

    def test_is_sequence_special_sets(self):
        assert RollClassifier.is_sequence([4, 2, 1]) is True
        assert RollClassifier.is_sequence([6, 2, 4]) is True
        assert RollClassifier.is_sequence([1, 3, 6]) is False

    def test_triple_is_not_sequence(self):
        assert RollClassifier.is_sequence([3, 3, 3]) is False


class TestMessages:
    """Tests for RollClassifier.message_for()."""

    def test_double_message(self):
        assert RollClassifier.message_for(RollLabel.DOUBLE) == "Double! Roll Again!"

    def test_triple_message(self):
        assert "Triple Threat" in RollClassifier.message_for(RollLabel.TRIPLE)

    def test_sequence_message(self):
        assert "Sequence" in RollClassifier.message_for(RollLabel.SEQUENCE)

    def test_none_message_empty(self):
        assert RollClassifier.message_for(RollLabel.NONE) == ""
