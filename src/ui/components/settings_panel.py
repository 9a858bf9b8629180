"""Game settings panel - player count, house rules and speed mode."""

from __future__ import annotations

from typing import NamedTuple

import streamlit as st

from src.engine.base import MAX_PLAYERS, MIN_PLAYERS, InvalidActionError, RollLabel
from src.engine.rules import RuleConfig
from src.engine.session import SessionController

_RULE_TOGGLES: tuple[tuple[RollLabel, str, str], ...] = (
    (RollLabel.DOUBLE, "Double Trouble", "Roll again on doubles."),
    (RollLabel.TRIPLE, "Triple Threat", "Collect from each player on triples."),
    (RollLabel.SEQUENCE, "Sequence Bonus", "Trigger a bonus on sequences."),
)


class RuleToggle(NamedTuple):
    """Display state of one house-rule toggle."""
    label: RollLabel
    title: str
    help: str
    value: bool
    disabled: bool


def rule_toggles(rules: RuleConfig) -> list[RuleToggle]:
    """House-rule toggles as they should be drawn for ``rules``.

    Speed mode locks the individual toggles in the panel. The engine still
    accepts rule changes; only the widgets are read-only.
    """
    return [
        RuleToggle(
            label=label,
            title=title,
            help=help_text,
            value=rules.is_enabled(label),
            disabled=rules.speed_mode,
        )
        for label, title, help_text in _RULE_TOGGLES
    ]


def render_settings_panel(session: SessionController) -> None:
    """Render the collapsible settings panel and apply changes to ``session``.

    The player count is locked while a game is in progress; reset the game
    to change it.
    """
    with st.expander("Game Settings"):
        options = list(range(MIN_PLAYERS, MAX_PLAYERS + 1))
        count = st.selectbox(
            "Number of Players",
            options,
            index=options.index(session.player_count),
            disabled=session.game_started,
            key=f"_player_count_{session.player_count}",
        )
        if session.game_started:
            st.caption("Player count is locked during a game. Reset to change it.")
        elif count != session.player_count:
            try:
                session.set_player_count(count)
            except InvalidActionError as exc:
                st.warning(str(exc))
            st.rerun()

        speed = st.toggle(
            "Speed Mode",
            value=session.rules.speed_mode,
            help="Play with 3 dice and every house rule switched on.",
        )
        if speed != session.rules.speed_mode:
            session.set_speed_mode(speed)
            st.rerun()

        st.markdown("**House Rules**")
        if session.rules.speed_mode:
            st.caption("Rules are locked in Speed Mode.")
        for toggle in rule_toggles(session.rules):
            enabled = st.toggle(
                toggle.title,
                value=toggle.value,
                help=toggle.help,
                disabled=toggle.disabled,
                key=f"_rule_{toggle.label.value}_{toggle.value}",
            )
            if not toggle.disabled and enabled != toggle.value:
                session.set_rule(toggle.label, enabled)
                st.rerun()
