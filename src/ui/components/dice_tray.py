"""Dice tray component - renders the dice in play and their total."""

from __future__ import annotations

import streamlit as st


def render_dice_tray(dice: tuple[int, ...], total: int, rolling: bool = False) -> None:
    """Render the active dice and their total.

    Args:
        dice: Face values of the dice in play.
        total: Sum of the dice in play.
        rolling: Show the rolling animation with hidden faces instead.
    """
    classes = "die rolling" if rolling else "die"
    html_parts = ['<div class="dice-tray">']
    for val in dice:
        face = "?" if rolling else str(val)
        html_parts.append(f'<div class="{classes}">{face}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    shown_total = "?" if rolling else str(total)
    st.markdown(
        f'<div class="dice-total">Total: {shown_total}</div>',
        unsafe_allow_html=True,
    )
