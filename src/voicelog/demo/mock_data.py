"""Mock voice entries for demo/testing.

A fixed week of entries from one user covering several languages and
categories, with mixed audio and embedding coverage. Every entry carries
the user tag "reflection" exactly once.
"""

from __future__ import annotations

from voicelog.models.types import VoiceEntry

MOCK_USER_ID = "mock-user"

MOCK_VOICE_ENTRIES: list[VoiceEntry] = [
    VoiceEntry(
        id="entry-001",
        user_id=MOCK_USER_ID,
        audio_url="https://storage.example.com/audio/entry-001.webm",
        transcript_raw="rough start to the week, too many meetings",
        transcript_user="Rough start to the week. Too many meetings.",
        language_detected="en",
        language_rendered="en",
        tags_model=["work", "stress"],
        tags_user=["reflection", "work"],
        category="work",
        created_at="2024-03-04T08:15:00Z",
        updated_at="2024-03-04T08:20:00Z",
        emotion_score_score=0.35,
        embedding=[0.12, -0.08, 0.33, 0.05],
    ),
    VoiceEntry(
        id="entry-002",
        user_id=MOCK_USER_ID,
        audio_url="https://storage.example.com/audio/entry-002.webm",
        transcript_raw="went for a long run by the river",
        transcript_user="Went for a long run by the river.",
        language_detected="en",
        language_rendered="en",
        tags_model=["exercise", "positive"],
        tags_user=["reflection", "health"],
        category="health",
        created_at="2024-03-05T18:40:00Z",
        updated_at="2024-03-05T18:41:00Z",
        emotion_score_score=0.82,
        embedding=[0.44, 0.10, -0.21, 0.09],
    ),
    VoiceEntry(
        id="entry-003",
        user_id=MOCK_USER_ID,
        audio_url=None,
        transcript_raw="hoy cené con mi familia",
        transcript_user="Hoy cené con mi familia.",
        language_detected="es",
        language_rendered="en",
        tags_model=["family", "positive"],
        tags_user=["reflection"],
        category="personal",
        created_at="2024-03-06T21:05:00Z",
        updated_at="2024-03-06T21:05:00Z",
        emotion_score_score=0.9,
        embedding=None,
    ),
    VoiceEntry(
        id="entry-004",
        user_id=MOCK_USER_ID,
        audio_url="https://storage.example.com/audio/entry-004.webm",
        transcript_raw="deadline moved again",
        transcript_user="Deadline moved again.",
        language_detected="en",
        language_rendered="en",
        tags_model=["work", "stress"],
        tags_user=["reflection", "deadline"],
        category="work",
        created_at="2024-03-08T12:30:00Z",
        updated_at="2024-03-08T12:31:00Z",
        emotion_score_score=0.2,
        embedding=[],
    ),
    VoiceEntry(
        id="entry-005",
        user_id=MOCK_USER_ID,
        audio_url="https://storage.example.com/audio/entry-005.webm",
        transcript_raw="journée calme, lecture au parc",
        transcript_user="Journée calme, lecture au parc.",
        language_detected="fr",
        language_rendered="en",
        tags_model=["reading", "calm"],
        tags_user=["reflection", "gratitude"],
        category="personal",
        created_at="2024-03-10T16:00:00Z",
        updated_at="2024-03-10T16:02:00Z",
        emotion_score_score=0.74,
        embedding=[0.05, 0.31, 0.27, -0.14],
    ),
]


def get_mock_entries() -> list[VoiceEntry]:
    """Return deep copies of the mock entries."""
    return [entry.model_copy(deep=True) for entry in MOCK_VOICE_ENTRIES]
