"""
Aligned plain-text table output.

TableWriter buffers rows of cells and, on flush, pads every cell to the
width of the widest cell in its column plus a fixed padding. TableRenderer
builds the header row, the divider row and one row per track on top of it.

Example output (padding=2; every cell, the last included, is padded):

    Title  Artist  Album  Year  Length
    -----  ------  -----  ----  ------
    Go     Moby    Moby   1992  3m37s
"""

from __future__ import annotations

import io
from typing import Iterable, Sequence, TextIO

from tracksort.records import Track, get_column

DEFAULT_PADDING = 2


class TableWriter:
    """Collects rows of cells and writes them as aligned columns.

    Nothing is written until flush() is called, since a column's width
    depends on every cell in it.
    """

    def __init__(self, output: TextIO, padding: int = DEFAULT_PADDING, padchar: str = " ") -> None:
        if padding < 0:
            raise ValueError(f"Padding cannot be negative (got {padding})")
        if len(padchar) != 1:
            raise ValueError(f"Pad character must be a single character (got {padchar!r})")
        self._output = output
        self._padding = padding
        self._padchar = padchar
        self._rows: list[list[str]] = []

    def write_row(self, cells: Iterable[object]) -> None:
        self._rows.append([str(cell) for cell in cells])

    def column_widths(self) -> list[int]:
        """Padded width of each column over the buffered rows."""
        widths: list[int] = []
        for row in self._rows:
            for index, cell in enumerate(row):
                if index == len(widths):
                    widths.append(0)
                widths[index] = max(widths[index], len(cell))
        return [width + self._padding for width in widths]

    def flush(self) -> None:
        """Write all buffered rows and clear the buffer."""
        widths = self.column_widths()
        for row in self._rows:
            line = "".join(cell.ljust(widths[index], self._padchar) for index, cell in enumerate(row))
            self._output.write(line + "\n")
        self._rows = []
        self._output.flush()


def divider(header: str) -> str:
    """One dash per character of the header."""
    return "-" * len(header)


class TableRenderer:
    """Renders tracks under a header row and a divider row."""

    def __init__(self, padding: int = DEFAULT_PADDING) -> None:
        if padding < 0:
            raise ValueError(f"Padding cannot be negative (got {padding})")
        self.padding = padding

    def write(self, output: TextIO, headers: Sequence[str], tracks: Iterable[Track]) -> None:
        """Write the table for tracks, in the order given, to output.

        Args:
            output: Text stream receiving the table.
            headers: Column names, in display order.
            tracks: Tracks already in display order.

        Raises:
            KeyError: If a header does not name a known column.
        """
        columns = [get_column(header) for header in headers]
        writer = TableWriter(output, padding=self.padding)
        writer.write_row(headers)
        writer.write_row(divider(header) for header in headers)
        for track in tracks:
            writer.write_row(column.format(track) for column in columns)
        writer.flush()

    def render(self, headers: Sequence[str], tracks: Iterable[Track]) -> str:
        """Return the table text instead of writing it to a stream."""
        buffer = io.StringIO()
        self.write(buffer, headers, tracks)
        return buffer.getvalue()
