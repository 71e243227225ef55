"""
JSON seed file loader.

A JSON seed file holds either an array of track objects or a single
track object.
"""

from __future__ import annotations

import json
from typing import Any, Iterator

from tracksort.data_formats.base import SeedLoader


class JSONLoader(SeedLoader):
    """Seed loader for JSON files.

    A single top-level object is treated as a list with one element.

    Attributes:
        format_name: Returns 'json'.
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "json"

    def _load_json_data(self, filename: str) -> list[dict[str, Any]]:
        """Parse the whole file and return its records as a list.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file contains invalid JSON.
            ValueError: If the JSON is not an object or array of objects.
        """
        with open(filename, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, list):
            for i, item in enumerate(data):
                if not isinstance(item, dict):
                    raise ValueError(
                        f"JSON array item at index {i} is not an object (got {type(item).__name__})"
                    )
            return data

        if isinstance(data, dict):
            return [data]

        raise ValueError(
            f"JSON file must contain an object or array of objects (got {type(data).__name__})"
        )

    def load(self, filename: str) -> Iterator[dict[str, Any]]:
        """Load track records from a JSON file.

        The file is parsed in one go; records are then yielded one at a time.
        """
        yield from self._load_json_data(filename)
