"""
Speed Dice - Feedback Cues

Maps a roll label to the sounds and vibration pattern a presentation layer
should play. The engine never plays anything itself; it only hands labels to
a FeedbackSink supplied by the caller.
"""

from dataclasses import dataclass
from typing import Callable

from src.engine.base import RollLabel


# Called with None when a roll starts, then with the effective label if special
FeedbackSink = Callable[[RollLabel | None], None]

ROLL_SOUND = "roll"

# Vibration patterns in milliseconds (on, off, on, ...)
_DEFAULT_VIBRATION: tuple[int, ...] = (100, 50, 100)
_VIBRATION_PATTERNS: dict[RollLabel, tuple[int, ...]] = {
    RollLabel.DOUBLE: (100, 30, 100, 30, 300),
    RollLabel.TRIPLE: (100, 30, 100, 30, 100, 30, 500),
    RollLabel.SEQUENCE: (300, 100, 300),
}


@dataclass(frozen=True)
class FeedbackCue:
    """
    Presentation hints for a single feedback event.

    Attributes:
        sounds: Sound effect names, in play order
        vibration: Vibration pattern in milliseconds
    """
    sounds: tuple[str, ...]
    vibration: tuple[int, ...]


def cue_for(label: RollLabel | None) -> FeedbackCue:
    """Cue for a feedback event.

    ``None`` (or NONE) is the start-of-roll cue; a special label gets its own
    sound and vibration pattern.
    """
    if label is None or not label.is_special:
        return FeedbackCue(sounds=(ROLL_SOUND,), vibration=_DEFAULT_VIBRATION)
    return FeedbackCue(sounds=(label.value,), vibration=_VIBRATION_PATTERNS[label])
