"""
Track record model and the static column table.

The column table is the single source of truth for the table headers,
the value each header sorts on and how each cell is rendered:

    Title   str         ordinal text order
    Artist  str         ordinal text order
    Album   str         ordinal text order
    Year    int         numeric order
    Length  timedelta   total elapsed seconds, formatted like "3m38s"
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from operator import attrgetter
from typing import Any, Callable

from tracksort.durations import format_duration, parse_duration


@dataclass(frozen=True)
class Track:
    """A single music track."""

    title: str
    artist: str
    album: str
    year: int
    length: timedelta


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class Column:
    """A named, sortable and printable field of a Track.

    Attributes:
        name: Header text shown in the table.
        accessor: Extracts the raw field value from a track.
        comparable: Maps the raw value to the value used for ordering.
        formatter: Maps the raw value to its cell text.
    """

    name: str
    accessor: Callable[[Track], Any]
    comparable: Callable[[Any], Any] = _identity
    formatter: Callable[[Any], str] = str

    def sort_value(self, track: Track) -> Any:
        return self.comparable(self.accessor(track))

    def format(self, track: Track) -> str:
        return self.formatter(self.accessor(track))

    def compare(self, a: Track, b: Track) -> int:
        """Three-way ascending comparison of two tracks on this column."""
        left = self.sort_value(a)
        right = self.sort_value(b)
        return (left > right) - (left < right)


COLUMNS: tuple[Column, ...] = (
    Column("Title", attrgetter("title")),
    Column("Artist", attrgetter("artist")),
    Column("Album", attrgetter("album")),
    Column("Year", attrgetter("year")),
    Column(
        "Length",
        attrgetter("length"),
        comparable=timedelta.total_seconds,
        formatter=format_duration,
    ),
)

HEADERS: tuple[str, ...] = tuple(column.name for column in COLUMNS)

_COLUMNS_BY_KEY: dict[str, Column] = {column.name.casefold(): column for column in COLUMNS}


def find_column(name: str) -> Column | None:
    """Look up a column by header name, ignoring case.

    Returns:
        The matching column, or None if no header has that name.
    """
    return _COLUMNS_BY_KEY.get(name.casefold())


def get_column(name: str) -> Column:
    """Like find_column(), but an unknown name raises KeyError."""
    column = find_column(name)
    if column is None:
        raise KeyError(f"Unknown column: {name!r}")
    return column


def _parse_length(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid length {value!r}")
    if isinstance(value, (int, float)):
        try:
            return timedelta(seconds=value)
        except (OverflowError, ValueError) as exc:
            raise ValueError(f"Invalid length {value!r}") from exc
    if isinstance(value, str):
        return parse_duration(value.strip())
    raise ValueError(f"Invalid length {value!r}")


def _parse_year(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid year {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValueError(f"Invalid year {value!r}")


def track_from_dict(data: dict[str, Any]) -> Track:
    """Build a Track from a normalized seed record.

    Args:
        data: Mapping with 'title', 'artist', 'album', 'year' and 'length'.
            'length' may be a duration string ("3m38s") or a number of
            seconds.

    Returns:
        The constructed Track.

    Raises:
        ValueError: If a field is missing or cannot be converted.
    """
    missing = [name for name in ("title", "artist", "album", "year", "length") if data.get(name) is None]
    if missing:
        raise ValueError(f"Missing track field(s): {', '.join(missing)}")

    return Track(
        title=str(data["title"]),
        artist=str(data["artist"]),
        album=str(data["album"]),
        year=_parse_year(data["year"]),
        length=_parse_length(data["length"]),
    )
