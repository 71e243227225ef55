"""Built-in track set used when no seed file is given."""

from __future__ import annotations

from tracksort.durations import parse_duration
from tracksort.records import Track

SAMPLE_TRACKS: tuple[tuple[str, str, str, int, str], ...] = (
    ("Go", "Delilah", "From the Roots Up", 2012, "3m38s"),
    ("Go", "Moby", "Moby", 1992, "3m37s"),
    ("Go Ahead", "Alicia Keys", "As I Am", 2007, "4m36s"),
    ("Ready 2 Go", "Martin Solveig", "Smash", 2011, "4m24s"),
)


def load_sample_tracks() -> list[Track]:
    """Return a fresh, mutable list of the sample tracks.

    Raises:
        ValueError: If a sample length is not a valid duration.
    """
    return [
        Track(title, artist, album, year, parse_duration(length))
        for title, artist, album, year, length in SAMPLE_TRACKS
    ]
