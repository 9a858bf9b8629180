"""Board-game theme for Speed Dice."""

from src.ui.themes.animations import (
    load_css,
    render_special_roll_banner,
    render_turn_indicator,
)
from src.ui.themes.sounds import (
    queue_feedback,
    render_feedback_controls,
    render_feedback_system,
)

__all__ = [
    "load_css",
    "queue_feedback",
    "render_feedback_controls",
    "render_feedback_system",
    "render_special_roll_banner",
    "render_turn_indicator",
]
