"""Game history component - player stats and the roll log."""

from __future__ import annotations

import streamlit as st

from src.engine.base import PlayerStats
from src.engine.ledger import RollLedger

PLAYER_ICONS = ("👑", "🚀", "🏆", "🎯", "🎮", "🎲")


def player_icon(index: int) -> str:
    """Icon shown next to a player's name."""
    return PLAYER_ICONS[index % len(PLAYER_ICONS)]


def _render_player_stats(stats: list[PlayerStats], current_player: int) -> None:
    html = ['<div style="display:flex;flex-wrap:wrap;gap:0.5rem;">']
    for entry in stats:
        classes = "player-stat active" if entry.player == current_player else "player-stat"
        average = "-" if entry.average_total is None else f"{entry.average_total:.1f}"
        html.append(
            f'<div class="{classes}">'
            f"<b>Player {entry.player + 1}</b> {player_icon(entry.player)}<br>"
            f"Rolls: {entry.rolls}<br>Avg: {average}<br>Special: {entry.special_rolls}"
            f"</div>"
        )
    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)


def render_history(
    ledger: RollLedger,
    stats: list[PlayerStats],
    current_player: int,
) -> bool:
    """Render per-player stats and the newest-first roll log.

    Args:
        ledger: The session's roll ledger.
        stats: Per-player statistics, one entry per seat.
        current_player: Index of the player whose turn it is.

    Returns:
        True if the user asked to clear the history.
    """
    header_cols = st.columns([3, 1])
    with header_cols[0]:
        st.markdown("### Game History")
    with header_cols[1]:
        clear = st.button(
            "Clear",
            key="btn_clear_history",
            use_container_width=True,
            disabled=not ledger,
        )

    if not ledger:
        st.caption("No rolls yet. Start rolling!")
        return clear

    st.markdown("**Player Stats**")
    _render_player_stats(stats, current_player)

    expanded = st.toggle("Show full history", key="_history_expanded")
    records = ledger.records if expanded else ledger.records[:5]

    html = []
    for index, record in enumerate(records):
        dice_html = "".join(f'<span class="die history">{v}</span>' for v in record.values)
        badge = ""
        if record.is_special:
            label = record.effective_roll.value
            badge = f'<span class="special-banner special-{label}">{label.title()}</span>'
        html.append(
            '<div class="history-row">'
            f"<b>Player {record.player + 1}</b> {player_icon(record.player)}"
            f"{dice_html}<b>= {record.total}</b>{badge}"
            f'<span class="roll-number">Roll #{ledger.roll_number(index)}</span>'
            "</div>"
        )
    st.markdown("".join(html), unsafe_allow_html=True)
    return clear
