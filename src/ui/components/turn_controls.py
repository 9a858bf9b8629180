"""Turn control buttons - Roll, Next Player, dice count and reset."""

from __future__ import annotations

import streamlit as st

from src.engine.base import RollLabel


def render_turn_controls(
    has_rolled: bool,
    dice_count: int,
    effective_roll: RollLabel | None,
    roll_count: int,
) -> str | None:
    """Render contextual turn-action buttons.

    Args:
        has_rolled: Whether the current player has rolled this turn.
        dice_count: Dice currently in play (2 or 3).
        effective_roll: Gated label of the pending roll, if any.
        roll_count: Rolls so far this session (used in button keys).

    Returns:
        ``"roll"``, ``"advance"``, ``"toggle_dice"``, ``"reset"``, or
        ``None`` if no action taken.
    """
    cols = st.columns(2)

    # --- Roll button ---
    with cols[0]:
        if st.button(
            "Roll Dice",
            key=f"btn_roll_{roll_count}",
            use_container_width=True,
            disabled=has_rolled,
            type="primary",
        ):
            return "roll"

    # --- Next player button ---
    with cols[1]:
        if effective_roll is RollLabel.DOUBLE:
            advance_label = "Roll Again"
        else:
            advance_label = "Next Player"
        if st.button(
            advance_label,
            key=f"btn_advance_{roll_count}",
            use_container_width=True,
            disabled=not has_rolled,
        ):
            return "advance"

    cols = st.columns(2)
    with cols[0]:
        toggle_label = "Switch to 3 Dice" if dice_count == 2 else "Switch to 2 Dice"
        if st.button(toggle_label, key="btn_toggle_dice", use_container_width=True):
            return "toggle_dice"
    with cols[1]:
        if st.button("Reset Game", key="btn_reset", use_container_width=True):
            return "reset"

    return None
