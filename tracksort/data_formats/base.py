"""
Abstract base class for seed data loaders.

This module defines the SeedLoader interface that all format-specific
loaders must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator


class SeedLoader(ABC):
    """Abstract base class for loading raw track records from a file.

    Loaders yield plain dictionaries; turning them into Track values is
    left to the caller, after schema normalization.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'jsonl', 'json', 'parquet')."""
        pass

    @abstractmethod
    def load(self, filename: str) -> Iterator[dict[str, Any]]:
        """Lazily load records from file.

        Args:
            filename: Path to the file.

        Yields:
            Each record as a dictionary.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file format is invalid.
        """
        pass

    def load_all(self, filename: str, max_records: int | None = None) -> list[dict[str, Any]]:
        """Load records from file into memory.

        Args:
            filename: Path to the file.
            max_records: Maximum number of records to load (None = all).

        Returns:
            A list of records as dictionaries, in file order.
        """
        records: list[dict[str, Any]] = []
        for i, record in enumerate(self.load(filename)):
            if max_records is not None and i >= max_records:
                break
            records.append(record)
        return records
