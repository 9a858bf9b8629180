"""
Speed Dice - Dice Source

Uniform D6 rolls for 2 or 3 dice. Rolls are stateless; the only side effect
is drawing from the random source.
"""

import random

from src.engine.base import DICE_CAPACITY, DICE_FACES, DiceSet
from src.engine.validators import validate_dice_count


class DiceSource:
    """Stateless dice roller. All methods are class methods."""

    DIE_FACES = DICE_FACES

    @classmethod
    def roll(cls, count: int, rng: random.Random | None = None) -> tuple[int, ...]:
        """Roll ``count`` independent D6.

        Args:
            count: Number of dice to roll (2 or 3)
            rng: Optional seeded generator; the module-level one is used otherwise

        Returns:
            Tuple of ``count`` values, each 1-6
        """
        source = rng if rng is not None else random
        return tuple(source.randint(1, cls.DIE_FACES) for _ in range(count))

    @classmethod
    def roll_dice_set(
        cls,
        count: int,
        previous: DiceSet | None = None,
        rng: random.Random | None = None,
    ) -> DiceSet:
        """Roll a fresh DiceSet with ``count`` dice in play.

        Dice beyond ``count`` keep their face from ``previous`` so that
        switching back to 3 dice shows the last value of the hidden die.

        Args:
            count: Number of dice in play (2 or 3)
            previous: Dice currently on the table, if any
            rng: Optional seeded generator

        Returns:
            DiceSet with at least DICE_CAPACITY values
        """
        validate_dice_count(count)
        rolled = cls.roll(count, rng=rng)
        if previous is not None:
            hidden = previous.values[count:]
        else:
            hidden = (1,) * (DICE_CAPACITY - count)
        return DiceSet(values=rolled + hidden, dice_count=count)
