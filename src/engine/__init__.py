"""
Speed Dice Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, pattern classification, house rules, turn rotation
and roll history.
"""

from src.engine.base import (
    DiceSet,
    GameStatus,
    InvalidActionError,
    PlayerStats,
    RollLabel,
    RollOutcome,
    RollRecord,
    TurnPhase,
    TurnState,
)
from src.engine.classifier import RollClassifier
from src.engine.dice import DiceSource
from src.engine.feedback import FeedbackCue, FeedbackSink, cue_for
from src.engine.ledger import RollLedger
from src.engine.rules import RuleConfig
from src.engine.session import SessionController
from src.engine.turn import TurnStateMachine, next_player

__all__ = [
    # Data Classes
    "DiceSet",
    "FeedbackCue",
    "PlayerStats",
    "RollOutcome",
    "RollRecord",
    "TurnState",
    # Enums
    "GameStatus",
    "RollLabel",
    "TurnPhase",
    # Errors
    "InvalidActionError",
    # Components
    "DiceSource",
    "RollClassifier",
    "RollLedger",
    "RuleConfig",
    "SessionController",
    "TurnStateMachine",
    # Functions
    "FeedbackSink",
    "cue_for",
    "next_player",
]
