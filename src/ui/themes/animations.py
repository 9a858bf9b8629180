"""CSS injection and HTML helpers for the board-game theme."""

from pathlib import Path

import streamlit as st

from src.engine.base import RollLabel


def load_css() -> None:
    """Inject the board-game CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "board_game.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_special_roll_banner(label: RollLabel, message: str) -> None:
    """Render the animated banner for a double, triple or sequence."""
    if not label.is_special:
        return
    st.markdown(
        f'<div class="special-banner special-{label.value}">{message}</div>',
        unsafe_allow_html=True,
    )


def render_turn_indicator(player: int, icon: str) -> None:
    """Render the "Player N's turn" badge."""
    st.markdown(
        f'<div class="turn-indicator">{icon} Player {player + 1}\'s turn</div>',
        unsafe_allow_html=True,
    )
