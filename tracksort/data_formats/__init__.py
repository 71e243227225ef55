"""
Seed file loading for track records.

Usage:
    from tracksort.data_formats import get_loader, normalize_record

    loader = get_loader("tracks.parquet")
    for record in loader.load("tracks.parquet"):
        print(normalize_record(record)["title"])
"""

from tracksort.data_formats.base import SeedLoader
from tracksort.data_formats.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    detect_format,
    get_loader,
    get_loader_for_format,
)
from tracksort.data_formats.json_loader import JSONLoader
from tracksort.data_formats.jsonl_loader import JSONLLoader
from tracksort.data_formats.parquet_loader import ParquetLoader
from tracksort.data_formats.schema_normalizer import FIELD_ALIASES, normalize_record

__all__ = [
    # Base class
    "SeedLoader",
    # Format detection
    "detect_format",
    "get_loader",
    "get_loader_for_format",
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    # Schema normalization
    "normalize_record",
    "FIELD_ALIASES",
    # Loaders
    "JSONLLoader",
    "JSONLoader",
    "ParquetLoader",
]
