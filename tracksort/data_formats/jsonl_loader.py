"""
JSONL seed file loader.

Each non-blank line of a JSONL seed file holds one track object.
"""

from __future__ import annotations

import json
from typing import Any, Iterator

from tracksort.data_formats.base import SeedLoader


class JSONLLoader(SeedLoader):
    """Seed loader for JSONL (JSON Lines) files.

    Attributes:
        format_name: Returns 'jsonl'.
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "jsonl"

    def load(self, filename: str) -> Iterator[dict[str, Any]]:
        """Lazily load track records from a JSONL file.

        Blank lines are skipped.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If a line contains invalid JSON.
            ValueError: If a line holds something other than an object.

        Examples:
            >>> loader = JSONLLoader()
            >>> for record in loader.load("tracks.jsonl"):
            ...     print(record["title"])
        """
        with open(filename, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                record = json.loads(line)
                if not isinstance(record, dict):
                    raise ValueError(
                        f"Line {line_number} is not an object (got {type(record).__name__})"
                    )
                yield record
