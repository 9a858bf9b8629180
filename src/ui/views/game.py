"""Game page - dice, turn controls, settings and history."""

from __future__ import annotations

import time

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import InvalidActionError
from src.engine.session import SessionController
from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.history import player_icon, render_history
from src.ui.components.settings_panel import render_settings_panel
from src.ui.components.turn_controls import render_turn_controls
from src.ui.themes.animations import render_special_roll_banner, render_turn_indicator
from src.ui.themes.sounds import queue_feedback


def get_session() -> SessionController:
    """The SessionController for this browser session, created on first use."""
    ss = st.session_state
    if "session" not in ss:
        ss["session"] = SessionController(
            player_count=get_settings().default_player_count,
            feedback=queue_feedback,
        )
    return ss["session"]


def _handle_action(session: SessionController, action: str, tray) -> None:
    """Apply a turn-control action to the session."""
    try:
        if action == "roll":
            outcome = session.roll()
            # Values are final already; the delay only hides them briefly
            with tray.container():
                render_dice_tray(outcome.values, outcome.total, rolling=True)
            time.sleep(get_settings().rolling_delay)
        elif action == "advance":
            session.advance_turn()
        elif action == "toggle_dice":
            session.toggle_dice_count()
        elif action == "reset":
            session.reset_session()
    except InvalidActionError as exc:
        st.warning(str(exc))
        return
    st.rerun()


def render_game_page() -> None:
    """Render the main game page."""
    session = get_session()

    render_settings_panel(session)

    render_turn_indicator(session.current_player, player_icon(session.current_player))

    tray = st.empty()
    with tray.container():
        render_dice_tray(session.active_values, session.total)

    outcome = session.last_outcome
    if outcome is not None:
        render_special_roll_banner(outcome.effective_roll, session.special_message)

    action = render_turn_controls(
        has_rolled=session.has_rolled,
        dice_count=session.dice_count,
        effective_roll=session.effective_roll,
        roll_count=len(session.ledger),
    )
    if action:
        _handle_action(session, action, tray)

    st.divider()
    if render_history(session.ledger, session.all_stats(), session.current_player):
        session.clear_history()
        st.rerun()
