#!/usr/bin/env python3
"""Summarize voice entries and print the report.

Usage:
    python scripts/summarize_demo.py [entries.json] [-v]

Without a file, the built-in mock entries are summarized. The file must
hold a JSON list of voice entry objects.

Exit codes:
    0: Summary printed
    1: Entries file missing or invalid
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pydantic import TypeAdapter, ValidationError  # noqa: E402

from voicelog.aggregation import process_entries  # noqa: E402
from voicelog.demo.mock_data import get_mock_entries  # noqa: E402
from voicelog.models.types import VoiceEntry  # noqa: E402

logger = logging.getLogger("summarize_demo")

_entries_adapter = TypeAdapter(list[VoiceEntry])


def load_entries(path: Path) -> list[VoiceEntry]:
    """Load and validate entries from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValidationError: If the content is not a list of valid entries.
    """
    return _entries_adapter.validate_json(path.read_bytes())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Summarize voice entries.")
    parser.add_argument("entries_file", nargs="?", type=Path, help="JSON list of entries")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.entries_file is None:
        entries = get_mock_entries()
        source = "mock entries"
    else:
        try:
            entries = load_entries(args.entries_file)
        except OSError as e:
            logger.error(f"Could not read {args.entries_file}: {e}")
            return 1
        except ValidationError as e:
            logger.error(f"Invalid entries in {args.entries_file}: {e}")
            return 1
        source = str(args.entries_file)

    result = process_entries(entries)

    print(f"Source: {source}")
    print(result.summary)

    if result.tag_frequencies:
        print("\nTags:")
        ranked = sorted(result.tag_frequencies.items(), key=lambda item: item[1], reverse=True)
        for tag, count in ranked:
            print(f"    {count:>4}  {tag}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
