"""Voice entry summary aggregation.

Counts tag frequencies across user and model tags and builds a one-line
textual summary of a batch of entries. Pure - no IO, no input mutation.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from voicelog.models.types import ProcessedResult, VoiceEntry

logger = logging.getLogger(__name__)

EMPTY_SUMMARY = "No entries to analyze"
SECONDS_PER_DAY = 86400
EMOTION_SCORE_DECIMALS = 2
EMOTION_SCORE_QUANTUM = Decimal(1).scaleb(-EMOTION_SCORE_DECIMALS)

Entry = VoiceEntry | Mapping[str, Any]


@dataclass
class EntryStats:
    """Running totals collected in a single pass over the entries."""

    total_entries: int = 0
    tag_frequencies: dict[str, int] = field(default_factory=dict)
    language_counts: dict[str, int] = field(default_factory=dict)
    category_counts: dict[str, int] = field(default_factory=dict)
    emotion_score_sum: float = 0.0
    emotion_score_count: int = 0
    entries_with_audio: int = 0
    entries_with_embedding: int = 0
    earliest: datetime | None = None
    latest: datetime | None = None

    @property
    def total_tags(self) -> int:
        return len(self.tag_frequencies)

    @property
    def total_languages(self) -> int:
        return len(self.language_counts)

    @property
    def total_categories(self) -> int:
        return len(self.category_counts)

    @property
    def avg_emotion_score(self) -> float | None:
        if self.emotion_score_count == 0:
            return None
        return self.emotion_score_sum / self.emotion_score_count

    @property
    def most_common_tag(self) -> tuple[str, int] | None:
        """Tag with the highest count; on ties the first one counted wins."""
        if not self.tag_frequencies:
            return None
        return max(self.tag_frequencies.items(), key=lambda item: item[1])

    @property
    def day_span(self) -> int | None:
        """Whole days (rounded up) between earliest and latest timestamps."""
        if self.earliest is None or self.latest is None:
            return None
        delta = self.latest - self.earliest
        return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def process_entries(entries: Sequence[Entry] | None) -> ProcessedResult:
    """Summarize voice entries into tag frequencies and a summary line.

    Malformed fields never raise; they are treated as absent and the
    matching clause is left out of the summary.

    created_at counts toward the date span when it is a datetime, a date,
    or an ISO 8601 string such as "2023-01-08", "2023-01-08T09:30:00Z" or
    "2023-01-08T09:30:00+02:00". Values without an offset are read as UTC.
    Other formats ("2023/01/08", "Jan 8, 2023") are skipped.

    Args:
        entries: VoiceEntry models or mappings with the same keys. None
            and an empty sequence both yield the empty report.

    Returns:
        ProcessedResult with the summary string and tag -> count table.
    """
    if not entries:
        logger.debug("No entries supplied, returning empty summary")
        return ProcessedResult(summary=EMPTY_SUMMARY, tag_frequencies={})

    stats = collect_entry_stats(entries)
    summary = render_summary(stats)

    logger.debug(
        f"Summarized {stats.total_entries} entries: {stats.total_tags} tags, "
        f"{stats.total_languages} languages, {stats.total_categories} categories"
    )

    return ProcessedResult(
        summary=summary,
        tag_frequencies=dict(stats.tag_frequencies),
    )


def collect_entry_stats(entries: Sequence[Entry]) -> EntryStats:
    """Collect tag, distribution, coverage and date totals in one pass.

    Args:
        entries: VoiceEntry models or mappings with the same keys.

    Returns:
        EntryStats with the running totals.
    """
    stats = EntryStats(total_entries=len(entries))

    for entry in entries:
        # User and model tags count independently
        _count_tags(stats.tag_frequencies, _get_field(entry, "tags_user"))
        _count_tags(stats.tag_frequencies, _get_field(entry, "tags_model"))

        _count_label(stats.language_counts, _get_field(entry, "language_detected"), "language")
        _count_label(stats.category_counts, _get_field(entry, "category"), "category")

        # 0 is a valid score
        score = _get_field(entry, "emotion_score_score")
        if score is not None:
            if _is_valid_score(score):
                stats.emotion_score_sum += score
                stats.emotion_score_count += 1
            else:
                logger.debug(f"Skipping malformed emotion score: {score!r}")

        if _get_field(entry, "audio_url"):
            stats.entries_with_audio += 1

        embedding = _get_field(entry, "embedding")
        if isinstance(embedding, (list, tuple)) and len(embedding) > 0:
            stats.entries_with_embedding += 1

        created_at = _get_field(entry, "created_at")
        if created_at:
            timestamp = _parse_timestamp(created_at)
            if timestamp is None:
                logger.debug(f"Skipping unparseable created_at: {created_at!r}")
            else:
                if stats.earliest is None or timestamp < stats.earliest:
                    stats.earliest = timestamp
                if stats.latest is None or timestamp > stats.latest:
                    stats.latest = timestamp

    return stats


def render_summary(stats: EntryStats) -> str:
    """Assemble the summary line from collected stats.

    Clauses are appended in a fixed order and only when they have data.
    """
    summary = f"Analyzed {stats.total_entries} entries"

    most_common = stats.most_common_tag
    if most_common is not None:
        tag, count = most_common
        summary += (
            f' with {stats.total_tags} unique tags (most common: "{tag}" - {count} occurrences)'
        )

    if stats.total_languages > 0:
        summary += f", {stats.total_languages} language(s)"

    if stats.total_categories > 0:
        summary += f", {stats.total_categories} categories"

    avg_score = stats.avg_emotion_score
    if avg_score is not None:
        summary += f", average emotion score: {_format_score(avg_score)}"

    if stats.entries_with_audio > 0:
        summary += f", {stats.entries_with_audio} with audio"

    if stats.entries_with_embedding > 0:
        summary += f", {stats.entries_with_embedding} with embeddings"

    day_span = stats.day_span
    if day_span is not None:
        summary += f", spanning {day_span} days"

    return summary


def _get_field(entry: Any, name: str) -> Any:
    """Read a field from a model or mapping; missing reads as None."""
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _count_tags(frequencies: dict[str, int], tags: Any) -> None:
    """Add non-empty string tags to the frequency table."""
    if not isinstance(tags, (list, tuple)):
        return
    for tag in _string_tags(tags):
        frequencies[tag] = frequencies.get(tag, 0) + 1


def _string_tags(tags: Iterable[Any]) -> Iterable[str]:
    return (tag for tag in tags if isinstance(tag, str) and tag)


def _count_label(counts: dict[str, int], label: Any, kind: str) -> None:
    """Count a non-empty string label; anything else is skipped."""
    if not label:
        return
    if not isinstance(label, str):
        logger.debug(f"Skipping malformed {kind}: {label!r}")
        return
    counts[label] = counts.get(label, 0) + 1


def _is_valid_score(score: Any) -> bool:
    # bool is an int subclass but not a score
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False
    return math.isfinite(score)


def _format_score(score: float) -> str:
    """Round half up on the exact binary value, like JS toFixed."""
    if not math.isfinite(score):
        return f"{score:.{EMOTION_SCORE_DECIMALS}f}"
    with localcontext() as ctx:
        # Enough digits for any finite float
        ctx.prec = 400
        return str(Decimal(score).quantize(EMOTION_SCORE_QUANTUM, rounding=ROUND_HALF_UP))


def _parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp; None if it is not a valid date.

    Naive timestamps are taken as UTC so results do not depend on the
    host timezone.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
