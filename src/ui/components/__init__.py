"""UI components for Speed Dice."""

from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.history import render_history
from src.ui.components.settings_panel import render_settings_panel
from src.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_dice_tray",
    "render_history",
    "render_settings_panel",
    "render_turn_controls",
]
