"""Line windows: parsing ``path:start-end`` and projecting a version onto one."""

from __future__ import annotations

from dataclasses import dataclass

from garch.core.blame import BlameLine
from garch.core.versions import FileVersion


@dataclass(frozen=True)
class LineWindow:
    """An inclusive 1-based line window. ``end`` of None means unbounded."""

    path: str
    start: int = 1
    end: int | None = None

    @property
    def bounded(self) -> bool:
        return self.end is not None

    def describe(self) -> str:
        end = "" if self.end is None else str(self.end)
        return f"{self.path}:{self.start}-{end}"


def _parse_line_number(raw: str, default: int) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 1 else default


def parse_file_range(file_range: str) -> LineWindow:
    """Parse ``path:S-E``, ``path:N`` or a bare ``path``.

    The last colon separates path from range. Unparseable bounds fall back to
    line 1 for the start and to the start for the end; a reversed window is
    swapped.
    """
    path, sep, range_part = file_range.rpartition(":")
    if not sep or not path:
        return LineWindow(path=file_range)

    start_raw, dash, end_raw = range_part.partition("-")
    start = _parse_line_number(start_raw, 1)
    end = _parse_line_number(end_raw, start) if dash else start
    if end < start:
        start, end = end, start
    return LineWindow(path=path, start=start, end=end)


def filter_lines(version: FileVersion, start: int, end: int | None) -> list[BlameLine]:
    """Lines of ``version`` inside ``[start, end]``, clamped to its last line.

    An empty result is valid: the file may once have had fewer than ``start``
    lines.
    """
    last = version.max_line_number
    upper = last if end is None else min(end, last)
    return [line for line in version.blame_lines if start <= line.line_number <= upper]
