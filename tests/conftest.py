"""Shared pytest fixtures for voicelog tests."""

import pytest

from voicelog.models.types import VoiceEntry


@pytest.fixture
def make_entry():
    """Factory for VoiceEntry with neutral defaults; override any field."""
    counter = {"n": 0}

    def _make(**overrides) -> VoiceEntry:
        counter["n"] += 1
        fields = {
            "id": str(counter["n"]),
            "user_id": "test",
            "audio_url": None,
            "transcript_raw": "test",
            "transcript_user": "test",
            "language_detected": None,
            "language_rendered": None,
            "tags_model": [],
            "tags_user": [],
            "category": None,
            "created_at": None,
            "updated_at": None,
            "emotion_score_score": None,
            "embedding": None,
        }
        fields.update(overrides)
        return VoiceEntry(**fields)

    return _make
