"""
Speed Dice - Turn State Machine

Tracks whose turn it is and whether they have rolled.

Lifecycle:
    NOT_STARTED --first roll--> ACTIVE --reset--> NOT_STARTED

Per turn:
    AWAITING_ROLL --record_roll--> ROLLED --advance_turn--> AWAITING_ROLL

A double repeats the turn, but still passes through advance_turn: the same
player is handed the dice again and must roll from AWAITING_ROLL.
"""

from src.engine.base import (
    GameStatus,
    InvalidActionError,
    RollLabel,
    TurnPhase,
    TurnState,
)
from src.engine.validators import validate_player_count


def next_player(current: int, player_count: int, effective_roll: RollLabel) -> int:
    """Index of the player who rolls next.

    Args:
        current: Index of the player who just rolled
        player_count: Number of players at the table
        effective_roll: The gated label of the roll just made

    Returns:
        ``current`` on a double, otherwise the next index, wrapping to 0
    """
    if effective_roll is RollLabel.DOUBLE:
        return current
    return (current + 1) % player_count


class TurnStateMachine:
    """Mutable turn and lifecycle state for one game session."""

    def __init__(self) -> None:
        self._current_player = 0
        self._phase = TurnPhase.AWAITING_ROLL
        self._status = GameStatus.NOT_STARTED

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def game_status(self) -> GameStatus:
        return self._status

    @property
    def has_rolled(self) -> bool:
        return self._phase is TurnPhase.ROLLED

    @property
    def game_started(self) -> bool:
        return self._status is GameStatus.ACTIVE

    @property
    def state(self) -> TurnState:
        """Immutable snapshot of the current turn."""
        return TurnState(
            current_player=self._current_player,
            has_rolled=self.has_rolled,
            game_started=self.game_started,
        )

    def record_roll(self) -> None:
        """Mark the current player as having rolled.

        Raises:
            InvalidActionError: If the player already rolled this turn
        """
        if self._phase is not TurnPhase.AWAITING_ROLL:
            raise InvalidActionError(
                f"Player {self._current_player + 1} has already rolled; advance the turn first."
            )
        self._phase = TurnPhase.ROLLED
        self._status = GameStatus.ACTIVE

    def advance_turn(self, effective_roll: RollLabel, player_count: int) -> int:
        """Hand the dice to the next player, or back to the same one on a double.

        Args:
            effective_roll: Gated label of the roll just made
            player_count: Number of players at the table

        Returns:
            Index of the player now awaiting a roll

        Raises:
            InvalidActionError: If the current player has not rolled yet
            ValueError: If player_count is out of range
        """
        validate_player_count(player_count)
        if self._phase is not TurnPhase.ROLLED:
            raise InvalidActionError(
                f"Player {self._current_player + 1} must roll before the turn can advance."
            )
        self._current_player = next_player(self._current_player, player_count, effective_roll)
        self._phase = TurnPhase.AWAITING_ROLL
        return self._current_player

    def end_roll(self) -> None:
        """Discard a pending roll without moving to another player."""
        self._phase = TurnPhase.AWAITING_ROLL

    def clamp_player(self, player_count: int) -> None:
        """Return to player 0 if the current index no longer exists."""
        if self._current_player >= player_count:
            self._current_player = 0

    def reset(self) -> None:
        """Back to a fresh, unstarted game. Always succeeds."""
        self._current_player = 0
        self._phase = TurnPhase.AWAITING_ROLL
        self._status = GameStatus.NOT_STARTED
