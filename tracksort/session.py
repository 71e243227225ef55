"""
Interactive sort session.

Reads one column name per line, pushes each accepted name onto the sort
key stack, re-sorts and prints the table again. Unknown names are
reported and otherwise ignored. The session ends when input runs out.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Sequence, TextIO

from tracksort.records import HEADERS, Track, find_column
from tracksort.renderer import TableRenderer
from tracksort.sorter import CascadingSorter

REJECTION_MESSAGE = "there is no such header"


class SessionState(Enum):
    """Lifecycle of a session."""

    IDLE = "idle"
    TERMINATED = "terminated"


class SortSession:
    """Wires the sorter and the renderer to a pair of text streams."""

    def __init__(
        self,
        tracks: list[Track],
        *,
        sorter: CascadingSorter | None = None,
        renderer: TableRenderer | None = None,
        headers: Sequence[str] = HEADERS,
        output: TextIO | None = None,
    ) -> None:
        self.tracks = tracks
        self.sorter = sorter if sorter is not None else CascadingSorter()
        self.renderer = renderer if renderer is not None else TableRenderer()
        self.headers = tuple(headers)
        self.output = output if output is not None else sys.stdout
        self.state = SessionState.IDLE

    def render(self) -> None:
        self.renderer.write(self.output, self.headers, self.tracks)

    def start(self) -> None:
        """Show the table ordered by the default tie-break."""
        self.sorter.sort(self.tracks)
        self.render()

    def resolve_header(self, name: str) -> str | None:
        """Canonical spelling of a displayed header, matched ignoring case."""
        column = find_column(name)
        if column is None or column.name not in self.headers:
            return None
        return column.name

    def handle_line(self, line: str) -> bool:
        """Process one input line.

        Returns:
            True if the line was accepted as a sort key, False if rejected.
        """
        if self.state is SessionState.TERMINATED:
            raise RuntimeError("Session has already terminated")

        token = line.rstrip("\r\n")
        if not token.strip():
            key = ""
        else:
            key = self.resolve_header(token)
            if key is None:
                print(REJECTION_MESSAGE, file=self.output, flush=True)
                return False

        self.sorter.add_key(key)
        self.sorter.sort(self.tracks)
        self.render()
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Render once, then handle lines until the input is exhausted."""
        self.start()
        for line in lines:
            self.handle_line(line)
        self.state = SessionState.TERMINATED
