"""
Cascading multi-key ordering for track lists.

Keys form a priority stack: the most recently added key is consulted
first, and each older key only breaks ties left by the newer ones. When
every key ties (or no key has been added yet) the tracks are ordered by
artist, so the order is always deterministic.

Usage:
    sorter = CascadingSorter()
    sorter.add_key("Year")
    sorter.add_key("Title")   # now sorts by title, then year, then artist
    sorter.sort(tracks)
"""

from __future__ import annotations

from functools import cmp_to_key

from tracksort.records import Column, Track, get_column

DEFAULT_TIE_BREAK = "Artist"


class CascadingSorter:
    """Orders tracks by a stack of column keys, newest key first."""

    def __init__(self, tie_break: str = DEFAULT_TIE_BREAK) -> None:
        self._keys: list[str] = []
        self._tie_break: Column = get_column(tie_break)

    @property
    def keys(self) -> list[str]:
        """Key names from highest to lowest priority."""
        return list(self._keys)

    def add_key(self, name: str) -> None:
        """Push a key on top of the stack.

        The name is not validated and nothing is re-sorted. A blank name
        is kept on the stack but never takes part in a comparison.
        """
        self._keys.insert(0, name)

    def compare(self, a: Track, b: Track) -> int:
        """Three-way comparison: negative, zero or positive."""
        for name in self._keys:
            if not name.strip():
                continue
            result = get_column(name).compare(a, b)
            if result:
                return result
        return self._tie_break.compare(a, b)

    def sort(self, tracks: list[Track]) -> None:
        """Sort tracks in place; fully equal tracks keep their order."""
        tracks.sort(key=cmp_to_key(self.compare))
