"""
Speed Dice - Sound Asset Tests

Tests for locating sound effect files and reporting missing ones.
"""

import logging

import pytest

from src.engine.feedback import ROLL_SOUND
from src.ui.themes import sounds


@pytest.fixture
def sounds_dir(tmp_path, monkeypatch):
    """Point the sound lookup at an empty temporary directory."""
    monkeypatch.setattr(sounds, "_SOUNDS_DIR", tmp_path)
    return tmp_path


class TestAvailableSounds:
    """Tests for available_sounds()."""

    def test_none_present(self, sounds_dir):
        assert sounds.available_sounds() == set()

    def test_only_existing_files(self, sounds_dir):
        (sounds_dir / "dice-roll.mp3").write_bytes(b"ID3")
        (sounds_dir / "triple.mp3").write_bytes(b"ID3")
        assert sounds.available_sounds() == {ROLL_SOUND, "triple"}

    def test_every_effect_has_a_file_name(self):
        assert set(sounds._SFX_FILES) == {ROLL_SOUND, "double", "triple", "sequence"}


class TestMissingSoundWarning:
    """Tests for _warn_missing_sounds()."""

    def test_warns_once_per_sound(self, sounds_dir, caplog):
        warned = set()
        with caplog.at_level(logging.WARNING):
            sounds._warn_missing_sounds([ROLL_SOUND, "double"], warned)
            sounds._warn_missing_sounds([ROLL_SOUND], warned)

        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 2
        assert "dice-roll.mp3" in messages[0]
        assert "double.mp3" in messages[1]
        assert warned == {ROLL_SOUND, "double"}

    def test_present_sound_not_reported(self, sounds_dir, caplog):
        (sounds_dir / "double.mp3").write_bytes(b"ID3")
        warned = set()
        with caplog.at_level(logging.WARNING):
            sounds._warn_missing_sounds(["double"], warned)
        assert caplog.records == []
        assert warned == set()
