"""Aggregation module for voice entry summaries.

Pure transforms from entry records to reports:
- summary: tag frequencies and the one-line batch summary
"""

from voicelog.aggregation.summary import (
    EMPTY_SUMMARY,
    EntryStats,
    collect_entry_stats,
    process_entries,
    render_summary,
)

__all__ = [
    "EMPTY_SUMMARY",
    "EntryStats",
    "collect_entry_stats",
    "process_entries",
    "render_summary",
]
