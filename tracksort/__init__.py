"""
Interactive track table sorter.

Prints a table of music tracks, then reads column names from standard
input, one per line. Each name becomes the new highest-priority sort key
and the table is printed again.

Usage:
    tracksort
    tracksort tracks.jsonl
    python -m tracksort.main tracks.parquet --padding 3

Components:
    - Track, COLUMNS, HEADERS: record model and static column table
    - CascadingSorter: priority-stack multi-key ordering
    - TableRenderer: aligned text table output
    - SortSession: the line-by-line interactive loop
"""

from tracksort.records import COLUMNS, HEADERS, Column, Track, find_column, get_column
from tracksort.renderer import TableRenderer, TableWriter
from tracksort.session import REJECTION_MESSAGE, SessionState, SortSession
from tracksort.sorter import DEFAULT_TIE_BREAK, CascadingSorter

__all__ = [
    "CascadingSorter",
    "COLUMNS",
    "Column",
    "DEFAULT_TIE_BREAK",
    "HEADERS",
    "REJECTION_MESSAGE",
    "SessionState",
    "SortSession",
    "TableRenderer",
    "TableWriter",
    "Track",
    "find_column",
    "get_column",
]
