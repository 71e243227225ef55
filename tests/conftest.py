"""Pytest configuration and shared fixtures for tracksort tests."""

from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path
from typing import Any

import pytest

from tracksort.records import Track
from tracksort.sample_data import load_sample_tracks


@pytest.fixture
def sample_tracks() -> list[Track]:
    """Return a fresh list of the four built-in tracks, in declared order."""
    return load_sample_tracks()


@pytest.fixture
def varied_tracks() -> list[Track]:
    """Return tracks with many ties, for ordering property tests."""
    return [
        Track("B", "x", "one", 2000, timedelta(seconds=120)),
        Track("A", "y", "two", 2000, timedelta(seconds=120.5)),
        Track("B", "x", "two", 1999, timedelta(seconds=90)),
        Track("A", "x", "one", 2001, timedelta(seconds=120)),
        Track("C", "z", "one", 1999, timedelta(seconds=120.5)),
        Track("B", "y", "one", 2000, timedelta(seconds=60)),
        Track("a", "Y", "three", 2001, timedelta(seconds=90)),
    ]


@pytest.fixture
def track_records() -> list[dict[str, Any]]:
    """Return raw seed records as they would appear in a seed file."""
    return [
        {"title": "Go", "artist": "Delilah", "album": "From the Roots Up", "year": 2012, "length": "3m38s"},
        {"title": "Go", "artist": "Moby", "album": "Moby", "year": 1992, "length": "3m37s"},
        {"title": "Go Ahead", "artist": "Alicia Keys", "album": "As I Am", "year": 2007, "length": "4m36s"},
    ]


@pytest.fixture
def seed_jsonl(tmp_path: Path, track_records: list[dict[str, Any]]) -> Path:
    """Write track_records to a JSONL seed file and return its path."""
    path = tmp_path / "tracks.jsonl"
    with open(path, 'w', encoding='utf-8') as f:
        for record in track_records:
            f.write(json.dumps(record, ensure_ascii=False) + '\n')
    return path
