"""Pydantic models for voicelog.

VoiceEntry mirrors the stored voice entry record. The aggregator reads it
defensively and also accepts plain mappings with the same keys.
"""

from pydantic import BaseModel, ConfigDict, Field


class VoiceEntry(BaseModel):
    """A single voice journal entry."""

    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str
    audio_url: str | None = None
    transcript_raw: str | None = None
    transcript_user: str | None = None
    language_detected: str | None = None
    language_rendered: str | None = None
    tags_model: list[str | None] | None = None
    tags_user: list[str | None] | None = None
    category: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    emotion_score_score: float | None = None
    embedding: list[float] | None = None


class ProcessedResult(BaseModel):
    """Summary report for a batch of voice entries."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    tag_frequencies: dict[str, int] = Field(alias="tagFrequencies")  # tag -> count
