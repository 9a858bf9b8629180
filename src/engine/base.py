"""
Speed Dice - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are frozen dataclasses so a roll, once made,
can be shared between the ledger and the UI without defensive copies.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto


DICE_FACES = 6
DICE_CAPACITY = 3
VALID_DICE_COUNTS = (2, 3)
DEFAULT_DICE_COUNT = 2
MIN_PLAYERS = 2
MAX_PLAYERS = 6

# Sorted triples that count as a sequence even though they are not consecutive
SPECIAL_SEQUENCES = frozenset({(1, 2, 4), (1, 3, 5), (2, 4, 6)})


class InvalidActionError(ValueError):
    """Raised when an action is not allowed in the current game state."""


class RollLabel(Enum):
    """Classification of a dice roll against the house rules."""
    NONE = "none"
    DOUBLE = "double"
    TRIPLE = "triple"
    SEQUENCE = "sequence"

    @property
    def is_special(self) -> bool:
        return self is not RollLabel.NONE


class TurnPhase(Enum):
    """Per-turn sub-state."""
    AWAITING_ROLL = auto()
    ROLLED = auto()


class GameStatus(Enum):
    """Session lifecycle status."""
    NOT_STARTED = auto()
    ACTIVE = auto()


@dataclass(frozen=True)
class DiceSet:
    """
    The dice on the table.

    Attributes:
        values: Face values; always holds at least DICE_CAPACITY entries
        dice_count: How many of the leading values are in play (2 or 3)
    """
    values: tuple[int, ...]
    dice_count: int = DEFAULT_DICE_COUNT

    def __post_init__(self) -> None:
        """Validate capacity, dice count and face values."""
        if len(self.values) < DICE_CAPACITY:
            raise ValueError(
                f"DiceSet needs at least {DICE_CAPACITY} values, got {len(self.values)}."
            )
        if self.dice_count not in VALID_DICE_COUNTS:
            raise ValueError(
                f"Dice count must be one of {VALID_DICE_COUNTS}, got {self.dice_count}."
            )
        for value in self.values:
            if not (1 <= value <= DICE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {DICE_FACES}."
                )

    @property
    def active(self) -> tuple[int, ...]:
        """Values of the dice in play."""
        return self.values[:self.dice_count]

    @property
    def total(self) -> int:
        """Sum of the dice in play."""
        return sum(self.active)

    @classmethod
    def initial(cls, dice_count: int = DEFAULT_DICE_COUNT) -> "DiceSet":
        """Dice as they sit before the first roll of a session."""
        return cls(values=(1,) * DICE_CAPACITY, dice_count=dice_count)


@dataclass(frozen=True)
class TurnState:
    """
    Snapshot of whose turn it is and where the turn stands.

    Attributes:
        current_player: Zero-based index of the active player
        has_rolled: Whether the active player has rolled this turn
        game_started: Whether any roll has happened since the last reset
    """
    current_player: int = 0
    has_rolled: bool = False
    game_started: bool = False


@dataclass(frozen=True)
class RollRecord:
    """
    One completed roll in the session history.

    Attributes:
        values: Active dice values at roll time
        total: Sum of values
        effective_roll: Label after house-rule gating
        player: Index of the player who rolled
        timestamp: When the roll happened (UTC)
    """
    values: tuple[int, ...]
    total: int
    effective_roll: RollLabel
    player: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.total != sum(self.values):
            raise ValueError(
                f"Roll total {self.total} does not match dice {self.values}."
            )
        if self.player < 0:
            raise ValueError(f"Player index cannot be negative, got {self.player}.")

    @property
    def is_special(self) -> bool:
        return self.effective_roll.is_special

    @classmethod
    def from_dice(
        cls,
        dice: DiceSet,
        effective_roll: RollLabel,
        player: int,
    ) -> "RollRecord":
        """Build a record from the dice currently in play."""
        return cls(
            values=dice.active,
            total=dice.total,
            effective_roll=effective_roll,
            player=player,
        )


@dataclass(frozen=True)
class PlayerStats:
    """
    Aggregate statistics for one player, derived from the roll ledger.

    Attributes:
        player: Player index
        rolls: Number of rolls by this player
        average_total: Mean roll total, or None when the player has not rolled
        special_rolls: Rolls whose effective label was not NONE
    """
    player: int
    rolls: int = 0
    average_total: float | None = None
    special_rolls: int = 0

    def __str__(self) -> str:
        average = "-" if self.average_total is None else f"{self.average_total:.1f}"
        return f"Rolls: {self.rolls} | Avg: {average} | Special: {self.special_rolls}"


@dataclass(frozen=True)
class RollOutcome:
    """
    Everything the UI needs to display after a roll.

    Attributes:
        dice: The new dice on the table
        raw_roll: Classification before house-rule gating
        effective_roll: Classification after gating
        player: Index of the player who rolled
    """
    dice: DiceSet
    raw_roll: RollLabel
    effective_roll: RollLabel
    player: int

    @property
    def total(self) -> int:
        return self.dice.total

    @property
    def values(self) -> tuple[int, ...]:
        return self.dice.active
