"""
Speed Dice - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from src.engine.base import RollLabel
from src.engine.rules import RuleConfig
from src.engine.session import SessionController


# =============================================================================
# CLASSIFICATION TEST DATA
# =============================================================================

@pytest.fixture
def classified_rolls() -> dict[str, tuple[tuple[int, ...], RollLabel]]:
    """
    Common roll patterns with their expected raw labels.

    Returns:
        Dict mapping name to (active_values, expected_label)
    """
    return {
        # Two dice
        "double_threes": ((3, 3), RollLabel.DOUBLE),
        "double_sixes": ((6, 6), RollLabel.DOUBLE),
        "two_five": ((2, 5), RollLabel.NONE),

        # Triples
        "triple_fours": ((4, 4, 4), RollLabel.TRIPLE),
        "triple_ones": ((1, 1, 1), RollLabel.TRIPLE),

        # Consecutive sequences
        "run_123": ((1, 2, 3), RollLabel.SEQUENCE),
        "run_456": ((4, 5, 6), RollLabel.SEQUENCE),
        "run_shuffled": ((5, 3, 4), RollLabel.SEQUENCE),

        # Special spaced sequences
        "spaced_124": ((1, 2, 4), RollLabel.SEQUENCE),
        "spaced_135": ((5, 1, 3), RollLabel.SEQUENCE),
        "spaced_246": ((2, 4, 6), RollLabel.SEQUENCE),

        # Nothing special
        "plain_125": ((1, 2, 5), RollLabel.NONE),
        "pair_in_three": ((2, 2, 5), RollLabel.NONE),
        "plain_346": ((3, 4, 6), RollLabel.NONE),
    }


# =============================================================================
# SESSION FIXTURES
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible rolls."""
    return random.Random(1234)


@pytest.fixture
def session(rng) -> SessionController:
    """Two-player session with default house rules."""
    return SessionController(player_count=2, rng=rng)


@pytest.fixture
def three_player_session(rng) -> SessionController:
    """Three-player session with default house rules."""
    return SessionController(player_count=3, rng=rng)


@pytest.fixture
def no_doubles_rules() -> RuleConfig:
    """House rules with Double Trouble switched off."""
    return RuleConfig(double_trouble=False)
