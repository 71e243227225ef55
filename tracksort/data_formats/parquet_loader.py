"""
Parquet seed file loader.

Track columns are read batch by batch with pyarrow. ``to_pylist()`` already
yields Python values, so a 'length' column may be stored either as a
duration string or as a pyarrow duration type (which arrives as timedelta).
"""

from __future__ import annotations

from typing import Any, Iterator

import pyarrow.parquet as pq

from tracksort.data_formats.base import SeedLoader


class ParquetLoader(SeedLoader):
    """Seed loader for Apache Parquet files.

    Attributes:
        format_name: Returns 'parquet'.
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "parquet"

    def load(self, filename: str) -> Iterator[dict[str, Any]]:
        """Lazily load track records from a Parquet file.

        Raises:
            FileNotFoundError: If the file does not exist.
            pyarrow.ArrowInvalid: If the file is not a valid Parquet file.
        """
        parquet_file = pq.ParquetFile(filename)

        for batch in parquet_file.iter_batches():
            yield from batch.to_pylist()
