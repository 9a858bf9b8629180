"""
Speed Dice - Session Controller

Owns all mutable state for one game session and runs the user-facing
actions: roll, advance turn, switch dice count, change players, toggle house
rules and reset.

Each SessionController is independent; there is no module-level state, so
any number of sessions (one per browser tab, one per test) can coexist.
Precondition violations raise InvalidActionError and leave state untouched.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from src.engine.base import (
    DEFAULT_DICE_COUNT,
    MIN_PLAYERS,
    DiceSet,
    InvalidActionError,
    PlayerStats,
    RollLabel,
    RollOutcome,
    RollRecord,
    TurnState,
)
from src.engine.classifier import RollClassifier
from src.engine.dice import DiceSource
from src.engine.feedback import FeedbackSink
from src.engine.ledger import RollLedger
from src.engine.rules import RuleConfig
from src.engine.turn import TurnStateMachine
from src.engine.validators import (
    validate_dice_count,
    validate_dice_values,
    validate_player_count,
)

logger = logging.getLogger(__name__)


class SessionController:
    """A single game session: dice, house rules, turn order and history."""

    def __init__(
        self,
        player_count: int = MIN_PLAYERS,
        rules: RuleConfig | None = None,
        feedback: FeedbackSink | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._player_count = validate_player_count(player_count)
        self._rules = rules if rules is not None else RuleConfig()
        self._feedback = feedback
        self._rng = rng
        self._turn = TurnStateMachine()
        self._ledger = RollLedger()
        self._dice = DiceSet.initial()
        self._last_outcome: RollOutcome | None = None

    # -- Read-only views -------------------------------------------------

    @property
    def dice(self) -> DiceSet:
        return self._dice

    @property
    def active_values(self) -> tuple[int, ...]:
        return self._dice.active

    @property
    def total(self) -> int:
        return self._dice.total

    @property
    def dice_count(self) -> int:
        return self._dice.dice_count

    @property
    def player_count(self) -> int:
        return self._player_count

    @property
    def rules(self) -> RuleConfig:
        return self._rules

    @property
    def ledger(self) -> RollLedger:
        return self._ledger

    @property
    def last_outcome(self) -> RollOutcome | None:
        """The pending roll, cleared by dice-count changes and resets."""
        return self._last_outcome

    @property
    def effective_roll(self) -> RollLabel | None:
        """Gated label of the pending roll, or None if there is none."""
        if self._last_outcome is None:
            return None
        return self._last_outcome.effective_roll

    @property
    def special_message(self) -> str:
        if self._last_outcome is None:
            return ""
        return RollClassifier.message_for(self._last_outcome.effective_roll)

    @property
    def current_player(self) -> int:
        return self._turn.current_player

    @property
    def has_rolled(self) -> bool:
        return self._turn.has_rolled

    @property
    def game_started(self) -> bool:
        return self._turn.game_started

    @property
    def turn_state(self) -> TurnState:
        return self._turn.state

    def stats_for(self, player: int) -> PlayerStats:
        return self._ledger.stats_for(player)

    def all_stats(self) -> list[PlayerStats]:
        return self._ledger.stats_for_all(self._player_count)

    # -- Turn actions ----------------------------------------------------

    def roll(self, values: Sequence[int] | None = None) -> RollOutcome:
        """Roll the dice for the current player.

        Args:
            values: Optional predetermined active values (for testing or
                replaying a physical roll); must match the dice count

        Returns:
            RollOutcome with the new dice, raw and effective labels

        Raises:
            InvalidActionError: If the current player has already rolled
            ValueError: If ``values`` is malformed
        """
        if self._turn.has_rolled:
            raise InvalidActionError(
                f"Player {self._turn.current_player + 1} has already rolled; advance the turn first."
            )

        count = self._dice.dice_count
        if values is None:
            dice = DiceSource.roll_dice_set(count, previous=self._dice, rng=self._rng)
        else:
            active = validate_dice_values(values, min_count=count, max_count=count)
            dice = DiceSet(values=active + self._dice.values[count:], dice_count=count)

        self._notify(None)

        raw_roll = RollClassifier.classify(dice)
        effective_roll = self._rules.gate(raw_roll)
        player = self._turn.current_player

        self._turn.record_roll()
        self._dice = dice
        self._ledger.append(RollRecord.from_dice(dice, effective_roll, player))
        self._last_outcome = RollOutcome(
            dice=dice,
            raw_roll=raw_roll,
            effective_roll=effective_roll,
            player=player,
        )

        logger.debug(
            "Player %d rolled %s (raw=%s, effective=%s)",
            player, dice.active, raw_roll.value, effective_roll.value,
        )

        if effective_roll.is_special:
            self._notify(effective_roll)

        return self._last_outcome

    def advance_turn(self) -> int:
        """Pass the dice on, or back to the same player after a double.

        Returns:
            Index of the player now due to roll

        Raises:
            InvalidActionError: If the current player has not rolled yet
        """
        effective = self.effective_roll or RollLabel.NONE
        return self._turn.advance_turn(effective, self._player_count)

    # -- Configuration ---------------------------------------------------

    def toggle_dice_count(self) -> int:
        """Switch between 2 and 3 dice.

        Returns:
            The new dice count
        """
        new_count = 3 if self._dice.dice_count == 2 else 2
        self._apply_dice_count(new_count)
        return new_count

    def set_dice_count(self, count: int) -> None:
        """Play with exactly ``count`` dice (2 or 3).

        Raises:
            ValueError: If count is not 2 or 3
        """
        validate_dice_count(count)
        if count != self._dice.dice_count:
            self._apply_dice_count(count)

    def set_player_count(self, count: int) -> None:
        """Change the number of players before the game has started.

        Raises:
            InvalidActionError: If a game is in progress
            ValueError: If count is not 2-6
        """
        validate_player_count(count)
        if self._turn.game_started:
            raise InvalidActionError("Player count cannot change once the game has started.")
        self._player_count = count
        self._turn.clamp_player(count)
        logger.info("Player count set to %d", count)

    def set_rule(self, label: RollLabel, enabled: bool) -> None:
        """Enable or disable the house rule for ``label``."""
        self._rules.set_rule(label, enabled)

    def set_speed_mode(self, enabled: bool) -> None:
        """Toggle speed mode; switching it on forces 3 dice and all rules."""
        if self._rules.set_speed_mode(enabled):
            self.set_dice_count(3)

    def clear_history(self) -> None:
        """Empty the roll history without touching turn state."""
        self._ledger.clear()

    def reset_session(self) -> None:
        """Start over: no rolls, player 1 up, 2 dice showing ones.

        House rules, speed mode and player count are kept.
        """
        self._ledger.clear()
        self._turn.reset()
        self._dice = DiceSet.initial(DEFAULT_DICE_COUNT)
        self._last_outcome = None
        logger.info("Session reset")

    # -- Internals -------------------------------------------------------

    def _apply_dice_count(self, count: int) -> None:
        self._dice = DiceSource.roll_dice_set(count, previous=self._dice, rng=self._rng)
        self._last_outcome = None
        self._turn.end_roll()

    def _notify(self, label: RollLabel | None) -> None:
        """Send a feedback event; sink errors never reach the caller."""
        if self._feedback is None:
            return
        try:
            self._feedback(label)
        except Exception:
            logger.exception("Feedback sink failed for %s", label)
