"""
Seed file format detection and loader lookup.

The extension decides when it is known. Otherwise the first bytes of the
file are inspected: Parquet files start with the ``PAR1`` magic, a JSON
document with ``[`` and a JSONL file with ``{``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tracksort.data_formats.base import SeedLoader


EXTENSION_MAP: dict[str, str] = {
    ".jsonl": "jsonl",
    ".json": "json",
    ".parquet": "parquet",
    ".pq": "parquet",
}

SUPPORTED_FORMATS = frozenset(EXTENSION_MAP.values())

PARQUET_MAGIC = b"PAR1"
SNIFF_BYTES = 1024

# First non-blank character of a text seed file
_LEADING_CHAR_FORMATS: dict[str, str] = {
    "[": "json",
    "{": "jsonl",
}


def _sniff_format(path: Path) -> str | None:
    """Guess the format from the head of the file, or None if unsure."""
    if not path.is_file():
        return None
    with path.open("rb") as f:
        head = f.read(SNIFF_BYTES)

    if head.startswith(PARQUET_MAGIC):
        return "parquet"

    text = head.decode("utf-8", errors="ignore").lstrip()
    return _LEADING_CHAR_FORMATS.get(text[:1])


def detect_format(filename: str) -> str:
    """Detect a seed file's format from its extension or content.

    Returns:
        Format name: "jsonl", "json", or "parquet"

    Raises:
        ValueError: If the format cannot be determined.

    Examples:
        >>> detect_format("tracks.jsonl")
        'jsonl'
        >>> detect_format("tracks.pq")
        'parquet'
    """
    path = Path(filename)
    format_name = EXTENSION_MAP.get(path.suffix.lower()) or _sniff_format(path)
    if format_name is None:
        raise ValueError(
            f"Cannot determine format for '{filename}'. "
            f"Supported extensions: {', '.join(sorted(EXTENSION_MAP))}"
        )
    return format_name


def get_loader_for_format(format_name: str) -> "SeedLoader":
    """Get a loader for a specific format name.

    Raises:
        ValueError: If the format name is not supported.
    """
    # Import loaders here to avoid circular imports
    from tracksort.data_formats.json_loader import JSONLoader
    from tracksort.data_formats.jsonl_loader import JSONLLoader
    from tracksort.data_formats.parquet_loader import ParquetLoader

    loaders: dict[str, type[SeedLoader]] = {
        "jsonl": JSONLLoader,
        "json": JSONLoader,
        "parquet": ParquetLoader,
    }

    if format_name not in loaders:
        raise ValueError(
            f"Unsupported format '{format_name}'. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )
    return loaders[format_name]()


def get_loader(filename: str) -> "SeedLoader":
    """Get the loader matching a seed file's detected format.

    Raises:
        ValueError: If the format cannot be determined.
    """
    return get_loader_for_format(detect_format(filename))
