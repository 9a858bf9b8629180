"""
Speed Dice - Feedback Cue Tests
"""

import pytest

from src.engine.base import RollLabel
from src.engine.feedback import ROLL_SOUND, cue_for


class TestCueFor:
    """Tests for cue_for()."""

    def test_roll_start_cue(self):
        cue = cue_for(None)
        assert cue.sounds == (ROLL_SOUND,)
        assert cue.vibration == (100, 50, 100)

    def test_none_label_uses_default(self):
        assert cue_for(RollLabel.NONE) == cue_for(None)

    @pytest.mark.parametrize(
        "label, pattern",
        [
            (RollLabel.DOUBLE, (100, 30, 100, 30, 300)),
            (RollLabel.TRIPLE, (100, 30, 100, 30, 100, 30, 500)),
            (RollLabel.SEQUENCE, (300, 100, 300)),
        ],
    )
    def test_special_cues(self, label, pattern):
        cue = cue_for(label)
        assert cue.sounds == (label.value,)
        assert cue.vibration == pattern
