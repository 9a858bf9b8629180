"""
Speed Dice - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from src.engine.base import DICE_FACES, MAX_PLAYERS, MIN_PLAYERS, VALID_DICE_COUNTS


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 1,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    if not values:
        if min_count > 0:
            raise ValueError(f"At least {min_count} dice required.")
        return tuple()

    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DICE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DICE_FACES}."
            )

    return values_tuple


def validate_dice_count(count: int) -> int:
    """
    Validate the number of dice in play.

    Raises:
        ValueError: If count is not 2 or 3
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Dice count must be an integer, got {type(count).__name__}.")

    if count not in VALID_DICE_COUNTS:
        raise ValueError(f"Dice count must be one of {VALID_DICE_COUNTS}, got {count}.")

    return count


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Args:
        count: Number of players

    Returns:
        Validated count

    Raises:
        ValueError: If count is not 2-6
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if not (MIN_PLAYERS <= count <= MAX_PLAYERS):
        raise ValueError(f"Player count must be {MIN_PLAYERS}-{MAX_PLAYERS}, got {count}.")

    return count
