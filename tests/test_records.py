"""Tests for the track model and column table in tracksort/records.py."""

from __future__ import annotations

import dataclasses
from datetime import timedelta

import pytest

from tracksort.records import COLUMNS, HEADERS, Track, find_column, get_column, track_from_dict
from tracksort.sample_data import SAMPLE_TRACKS, load_sample_tracks


class TestHeaders:
    """Tests for the static header set."""

    def test_declared_order(self):
        """Headers follow the declared field order."""
        assert HEADERS == ("Title", "Artist", "Album", "Year", "Length")

    def test_one_column_per_header(self):
        """Every header names exactly one column."""
        assert [column.name for column in COLUMNS] == list(HEADERS)
        assert len(set(name.casefold() for name in HEADERS)) == len(HEADERS)


class TestFindColumn:
    """Tests for find_column() and get_column()."""

    @pytest.mark.parametrize("name", ["year", "YEAR", "Year", "yEaR"])
    def test_case_insensitive(self, name):
        """Lookup ignores case."""
        assert find_column(name).name == "Year"

    def test_unknown_returns_none(self):
        """Unknown names are not an error for find_column."""
        assert find_column("bogus") is None
        assert find_column("") is None

    def test_get_column_unknown_raises(self):
        """get_column treats an unknown name as a programming error."""
        with pytest.raises(KeyError):
            get_column("bogus")


class TestColumnCompare:
    """Tests for single-field comparison semantics."""

    def test_text_is_ordinal(self):
        """Uppercase sorts before lowercase, as raw text does."""
        a = Track("Zed", "", "", 0, timedelta(0))
        b = Track("alpha", "", "", 0, timedelta(0))
        assert get_column("Title").compare(a, b) < 0

    def test_year_is_numeric(self):
        """Years compare as integers, not text."""
        a = Track("", "", "", 999, timedelta(0))
        b = Track("", "", "", 1000, timedelta(0))
        assert get_column("Year").compare(a, b) < 0

    def test_length_uses_elapsed_time(self):
        """Lengths compare by elapsed time, not by their text."""
        a = Track("", "", "", 0, timedelta(seconds=59))   # "59s"
        b = Track("", "", "", 0, timedelta(seconds=100))  # "1m40s"
        assert get_column("Length").compare(a, b) < 0
        assert get_column("Length").format(a) > get_column("Length").format(b)

    def test_length_keeps_fraction(self):
        """Sub-second differences are significant."""
        a = Track("", "", "", 0, timedelta(seconds=1.25))
        b = Track("", "", "", 0, timedelta(seconds=1.5))
        assert get_column("Length").compare(a, b) < 0

    def test_equal(self):
        """Equal values compare as zero."""
        a = Track("Go", "Moby", "Moby", 1992, timedelta(seconds=217))
        assert all(column.compare(a, a) == 0 for column in COLUMNS)


class TestTrack:
    """Tests for the Track value."""

    def test_frozen(self, sample_tracks):
        """Tracks cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_tracks[0].title = "Changed"

    def test_formatting(self, sample_tracks):
        """Cells use the natural text of each field."""
        track = sample_tracks[0]
        assert [column.format(track) for column in COLUMNS] == [
            "Go", "Delilah", "From the Roots Up", "2012", "3m38s",
        ]


class TestSampleData:
    """Tests for the built-in track set."""

    def test_loads_all(self):
        """All sample tracks are loaded in declared order."""
        tracks = load_sample_tracks()
        assert len(tracks) == len(SAMPLE_TRACKS)
        assert tracks[1].artist == "Moby"
        assert tracks[1].length == timedelta(minutes=3, seconds=37)

    def test_fresh_list_each_call(self):
        """Sorting one loaded list does not affect the next."""
        first = load_sample_tracks()
        first.reverse()
        assert load_sample_tracks()[0].artist == "Delilah"


class TestTrackFromDict:
    """Tests for track_from_dict()."""

    def test_duration_string(self, track_records):
        """A duration string is parsed."""
        track = track_from_dict(track_records[0])
        assert track == Track("Go", "Delilah", "From the Roots Up", 2012, timedelta(seconds=218))

    def test_numeric_seconds(self):
        """A number is taken as seconds."""
        track = track_from_dict({"title": "t", "artist": "a", "album": "b", "year": 2000, "length": 61.5})
        assert track.length == timedelta(seconds=61.5)

    def test_year_string(self):
        """A digit string year is accepted."""
        track = track_from_dict({"title": "t", "artist": "a", "album": "b", "year": "1999", "length": "1s"})
        assert track.year == 1999

    def test_missing_fields(self):
        """Missing fields are named in the error."""
        with pytest.raises(ValueError, match="album, length"):
            track_from_dict({"title": "t", "artist": "a", "year": 2000})

    def test_bad_duration(self):
        """An unparseable length aborts the load."""
        with pytest.raises(ValueError, match="Invalid duration"):
            track_from_dict({"title": "t", "artist": "a", "album": "b", "year": 2000, "length": "3 minutes"})

    @pytest.mark.parametrize("length", [1e20, float("nan")])
    def test_numeric_length_out_of_range(self, length):
        """A number of seconds timedelta cannot hold aborts the load."""
        with pytest.raises(ValueError, match="Invalid length"):
            track_from_dict({"title": "t", "artist": "a", "album": "b", "year": 2000, "length": length})

    @pytest.mark.parametrize("year", [2000.5, "MMXII", True])
    def test_bad_year(self, year):
        """A non-integral year aborts the load."""
        with pytest.raises(ValueError, match="Invalid year"):
            track_from_dict({"title": "t", "artist": "a", "album": "b", "year": year, "length": "1s"})
