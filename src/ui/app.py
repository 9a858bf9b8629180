"""Speed Dice - Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_RULES = """\
**Goal:** Take turns rolling; special rolls trigger house rules.

**Special rolls:**
| Roll | Dice | Effect |
|---|---|---|
| Double | 2 | Same player rolls again |
| Triple | 3 | Collect from each player |
| Sequence | 3 | Bonus activated |

**Sequences:** three in a row (e.g. 2-3-4), or 1-2-4, 1-3-5, 2-4-6.

**Speed Mode:** 3 dice with every house rule switched on.
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.divider()
        st.markdown("### Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Speed Dice",
        page_icon="🎲",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from src.config.settings import configure_logging
    from src.ui.themes import (
        load_css,
        render_feedback_controls,
        render_feedback_system,
    )
    from src.ui.views.game import render_game_page

    if "_logging_configured" not in st.session_state:
        configure_logging()
        st.session_state["_logging_configured"] = True

    load_css()
    st.title("Speed Dice")

    render_game_page()

    # Sound and vibration (sidebar controls + queued browser playback)
    render_feedback_controls()
    render_feedback_system()
    _render_sidebar_rules()


if __name__ == "__main__":
    main()
