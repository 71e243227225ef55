#!/usr/bin/env python3
"""
Track Sorter

Prints a table of tracks and re-sorts it each time a column name is typed.
The newest column name has the highest priority; older ones break ties.
Unknown names are reported with "there is no such header".

Columns: Title, Artist, Album, Year, Length (names are case-insensitive)

Usage:
    python -m tracksort.main                     Use the built-in tracks
    python -m tracksort.main tracks.jsonl        Load tracks from a file
    python -m tracksort.main tracks.pq -n 10     Load the first 10 tracks

Supported Seed Formats:
    - JSONL (.jsonl): One track object per line
    - JSON (.json): Array of track objects
    - Parquet (.parquet, .pq): Apache Parquet columnar format
"""

from __future__ import annotations

import argparse
import os
import sys

from tracksort.data_formats import get_loader, get_loader_for_format, normalize_record
from tracksort.records import Track, track_from_dict
from tracksort.renderer import DEFAULT_PADDING, TableRenderer
from tracksort.sample_data import load_sample_tracks
from tracksort.session import SortSession


def load_tracks(filename: str | None, input_format: str = "auto", limit: int | None = None) -> list[Track]:
    """Load the session's tracks: from a seed file, or the built-in set.

    Args:
        filename: Path to the seed file, or None for the built-in tracks.
        input_format: Format hint ('auto', 'jsonl', 'json', 'parquet').
        limit: Maximum number of tracks to load (None = all).

    Raises:
        ValueError: If the format is unknown or a record is malformed.
        OSError: If the seed file cannot be read.
    """
    if filename is None:
        tracks = load_sample_tracks()
        return tracks if limit is None else tracks[:limit]

    if input_format == "auto":
        loader = get_loader(filename)
    else:
        loader = get_loader_for_format(input_format)

    tracks = []
    for index, record in enumerate(loader.load_all(filename, max_records=limit)):
        try:
            tracks.append(track_from_dict(normalize_record(record)))
        except ValueError as exc:
            raise ValueError(f"Record {index}: {exc}") from exc
    return tracks


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Track Sorter - type column names to re-sort the table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('file', nargs='?', help='Seed file of tracks (JSONL, JSON, or Parquet)')
    parser.add_argument(
        '--input-format',
        choices=['auto', 'jsonl', 'json', 'parquet'],
        default='auto',
        help='Seed file format (default: auto-detect)'
    )
    parser.add_argument('-n', '--limit', type=int, help='Load at most this many tracks')
    parser.add_argument(
        '--padding',
        type=int,
        default=DEFAULT_PADDING,
        help=f'Spaces between columns (default: {DEFAULT_PADDING})'
    )

    args = parser.parse_args()

    if args.file is not None and not os.path.exists(args.file):
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)
    if args.limit is not None and args.limit < 0:
        print(f"Error: --limit cannot be negative (got {args.limit})", file=sys.stderr)
        sys.exit(1)

    try:
        tracks = load_tracks(args.file, args.input_format, args.limit)
        renderer = TableRenderer(padding=args.padding)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    session = SortSession(tracks, renderer=renderer, output=sys.stdout)
    session.run(sys.stdin)


if __name__ == "__main__":
    main()
