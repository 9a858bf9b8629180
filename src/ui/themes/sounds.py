"""Sound and vibration feedback for Speed Dice.

The engine reports feedback events through a sink callable. The sink built
here (:func:`queue_feedback`) only records the cue in session state; the
actual browser playback happens once per render in
:func:`render_feedback_system`, so a missing audio device or a browser that
refuses ``navigator.vibrate`` can never interrupt a roll.

Audio data (base64-encoded MP3) is sent to the browser ONCE per sound and
cached as JavaScript data URLs in ``window.parent._sd_audio``. Preferences
(sound on/off, vibration on/off) live in non-widget session-state keys
(``_sfx_pref``, ``_vibration_pref``) so they survive widget cleanup on reruns.

The MP3 files themselves are not shipped. Supply them in ``assets/sounds/``
at the repository root under the names in ``_SFX_FILES`` (``dice-roll.mp3``,
``double.mp3``, ``triple.mp3``, ``sequence.mp3``). A missing file is skipped
with a one-time warning in the log; vibration still works without them.
"""

from __future__ import annotations

import base64
import json
import logging
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components

from src.config.settings import get_settings
from src.engine.base import RollLabel
from src.engine.feedback import ROLL_SOUND, cue_for

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Asset paths and mappings
# ---------------------------------------------------------------------------

_SOUNDS_DIR = Path(__file__).resolve().parents[3] / "assets" / "sounds"

_SFX_FILES: dict[str, str] = {
    ROLL_SOUND: "dice-roll.mp3",
    RollLabel.DOUBLE.value: "double.mp3",
    RollLabel.TRIPLE.value: "triple.mp3",
    RollLabel.SEQUENCE.value: "sequence.mp3",
}

# Let the roll sound finish before the special-roll sound starts
_SPECIAL_SFX_DELAY_MS = 600

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@st.cache_data(show_spinner=False)
def _load_audio_b64(filename: str) -> str | None:
    """Read an audio file and return its base64-encoded string.

    Returns ``None`` if the file doesn't exist.
    """
    path = _SOUNDS_DIR / filename
    if not path.exists():
        return None
    return base64.b64encode(path.read_bytes()).decode("ascii")


def available_sounds() -> set[str]:
    """Names of the sound effects whose audio file is present."""
    return {name for name, filename in _SFX_FILES.items() if (_SOUNDS_DIR / filename).exists()}


def _warn_missing_sounds(names: list[str], warned: set[str]) -> None:
    """Log each requested sound that has no audio file, skipping ``warned`` names."""
    present = available_sounds()
    for name in names:
        if name in present or name in warned:
            continue
        logger.warning(
            "Sound '%s' skipped: %s not found in %s",
            name, _SFX_FILES[name], _SOUNDS_DIR,
        )
        warned.add(name)


# ---------------------------------------------------------------------------
# Public API - feedback sink
# ---------------------------------------------------------------------------


def queue_feedback(label: RollLabel | None) -> None:
    """Feedback sink handed to the SessionController.

    Queues the sounds and vibration for the event; playback happens in
    :func:`render_feedback_system` on the next render.
    """
    cue = cue_for(label)
    pending = st.session_state.setdefault("_feedback_pending", {"sounds": [], "vibration": []})
    pending["sounds"].extend(cue.sounds)
    # A special roll's pattern replaces the generic one
    pending["vibration"] = list(cue.vibration)


# ---------------------------------------------------------------------------
# Public API - sidebar controls
# ---------------------------------------------------------------------------


def _sync_sfx_pref() -> None:
    st.session_state["_sfx_pref"] = st.session_state["_sfx_widget"]


def _sync_vibration_pref() -> None:
    st.session_state["_vibration_pref"] = st.session_state["_vibration_widget"]


def _sync_sfx_volume() -> None:
    st.session_state["_sfx_volume"] = st.session_state["_sfx_vol_widget"]


def render_feedback_controls() -> None:
    """Render sound and vibration toggles in the sidebar."""
    settings = get_settings()
    with st.sidebar:
        st.session_state.setdefault("_sfx_pref", settings.enable_sounds)
        st.session_state.setdefault("_vibration_pref", settings.enable_vibration)
        st.session_state.setdefault("_sfx_volume", 50)

        st.toggle(
            "Sound Effects",
            value=st.session_state["_sfx_pref"],
            key="_sfx_widget",
            on_change=_sync_sfx_pref,
        )
        if st.session_state["_sfx_pref"]:
            st.slider(
                "SFX Volume",
                min_value=0,
                max_value=100,
                value=st.session_state["_sfx_volume"],
                key="_sfx_vol_widget",
                on_change=_sync_sfx_volume,
                format="%d%%",
            )

        st.toggle(
            "Vibration",
            value=st.session_state["_vibration_pref"],
            key="_vibration_widget",
            on_change=_sync_vibration_pref,
            help="Only works on devices that support vibration.",
        )


# ---------------------------------------------------------------------------
# Public API - feedback renderer
# ---------------------------------------------------------------------------


def render_feedback_system() -> None:
    """Play any queued feedback in the browser.

    Emits a single ``components.html`` call. Base64 audio is included only the
    first time a sound is needed; later reruns send play commands only.
    """
    pending = st.session_state.pop("_feedback_pending", None)
    if not pending:
        return

    sfx_enabled = st.session_state.get("_sfx_pref", True)
    vibration_enabled = st.session_state.get("_vibration_pref", True)
    sfx_volume = st.session_state.get("_sfx_volume", 50) / 100.0

    sounds = [s for s in pending["sounds"] if s in _SFX_FILES] if sfx_enabled else []
    vibration = pending["vibration"] if vibration_enabled else []
    if not sounds and not vibration:
        return

    _warn_missing_sounds(sounds, st.session_state.setdefault("_sfx_missing_warned", set()))

    # --- Build JS for one-time data preloads --------------------------
    loaded: set[str] = st.session_state.get("_audio_loaded", set())
    preload_parts: list[str] = []
    for name in sounds:
        if name in loaded:
            continue
        b64 = _load_audio_b64(_SFX_FILES[name])
        if b64:
            preload_parts.append(
                f"sd.sfx['{name}'] = 'data:audio/mpeg;base64,{b64}';"
            )
            loaded.add(name)
    st.session_state["_audio_loaded"] = loaded

    # --- Build lightweight control JS ---------------------------------
    control_parts: list[str] = []
    for position, name in enumerate(sounds):
        delay = position * _SPECIAL_SFX_DELAY_MS
        control_parts.append(
            f"setTimeout(function() {{\n"
            f"  if (sd.sfx['{name}']) {{\n"
            f"    var s = new p.Audio(sd.sfx['{name}']);\n"
            f"    s.volume = {sfx_volume};\n"
            f"    s.play().catch(function(){{}});\n"
            f"  }}\n"
            f"}}, {delay});"
        )

    if vibration:
        control_parts.append(
            "if (p.navigator && p.navigator.vibrate) "
            f"p.navigator.vibrate({json.dumps(vibration)});"
        )

    preload_js = "\n".join(preload_parts)
    control_js = "\n".join(control_parts)

    html = (
        "<script>\n"
        "(function() {\n"
        "  try {\n"
        "    var p = window.parent;\n"
        "    if (!p._sd_audio) p._sd_audio = { sfx: {} };\n"
        "    var sd = p._sd_audio;\n"
        + preload_js + "\n"
        + control_js + "\n"
        "  } catch(e) { console.warn('Speed Dice feedback:', e); }\n"
        "})();\n"
        "</script>"
    )

    components.html(html, height=0)
