"""Navigation state of one interactive session.

All scroll and version-switch semantics live here as plain methods so they
can be exercised without a terminal. The Textual app only forwards input
events and reads the state back when it redraws.

Invariant: after every mutation ``0 <= scroll_offset`` and
``scroll_offset + content_height`` never passes the filtered row count
(unless the rows fit on screen, in which case the offset is 0).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from garch.core.blame import BlameLine
from garch.core.line_range import filter_lines
from garch.core.versions import FileVersion
from garch.tui.line_tracker import clamp_offset, focus_line, resolve_anchor

HEADER_ROWS = 3
FOOTER_ROWS = 1
WHEEL_STEP = 3


@dataclass
class ViewerState:
    versions: Sequence[FileVersion]
    start: int = 1
    end: int | None = None
    current_version_index: int = 0
    scroll_offset: int = 0
    target_line: int | None = None
    width: int = 80
    height: int = 24
    _rows_cache: tuple[int, list[BlameLine]] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.versions:
            raise ValueError("ViewerState needs at least one version")

    # ─── Derived ───────────────────────────────────────────────────────

    @property
    def content_height(self) -> int:
        return max(0, self.height - HEADER_ROWS - FOOTER_ROWS)

    @property
    def version_count(self) -> int:
        return len(self.versions)

    @property
    def current_version(self) -> FileVersion:
        return self.versions[self.current_version_index]

    def filtered_rows(self) -> list[BlameLine]:
        """Rows of the current version inside the requested window."""
        cached = self._rows_cache
        if cached is not None and cached[0] == self.current_version_index:
            return cached[1]
        rows = filter_lines(self.current_version, self.start, self.end)
        self._rows_cache = (self.current_version_index, rows)
        return rows

    @property
    def total_rows(self) -> int:
        return len(self.filtered_rows())

    @property
    def max_offset(self) -> int:
        return max(0, self.total_rows - self.content_height)

    def visible_rows(self) -> list[BlameLine]:
        return self.filtered_rows()[self.scroll_offset:self.scroll_offset + self.content_height]

    # ─── Redraw cycle ──────────────────────────────────────────────────

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.scroll_offset = self._clamp(self.scroll_offset)

    def resolve_pending_anchor(self) -> None:
        """Recenter on the anchored line, if a version switch armed one."""
        if self.target_line is None:
            return
        self.scroll_offset = resolve_anchor(
            self.filtered_rows(), self.target_line, self.content_height
        )

    # ─── Input ─────────────────────────────────────────────────────────

    def switch_version(self, delta: int) -> bool:
        """Move ``delta`` versions; a no-op past either end.

        The focused line of the current view becomes the anchor for the next
        redraw. Returns whether the version changed.
        """
        new_index = self.current_version_index + delta
        if new_index < 0 or new_index >= self.version_count:
            return False
        anchor = focus_line(self.filtered_rows(), self.scroll_offset, self.content_height)
        self.current_version_index = new_index
        if anchor is not None:
            self.target_line = anchor
        if self.target_line is None:
            self.scroll_offset = self._clamp(self.scroll_offset)
        self.resolve_pending_anchor()
        return True

    def next_version(self) -> bool:
        return self.switch_version(1)

    def prev_version(self) -> bool:
        return self.switch_version(-1)

    def scroll_by(self, delta: int) -> None:
        """Manual scroll; leaves anchored mode."""
        self.target_line = None
        self.scroll_offset = self._clamp(self.scroll_offset + delta)

    def scroll_up(self) -> None:
        self.scroll_by(-1)

    def scroll_down(self) -> None:
        self.scroll_by(1)

    def page_up(self) -> None:
        self.scroll_by(-(self.content_height // 2))

    def page_down(self) -> None:
        self.scroll_by(self.content_height // 2)

    def scroll_home(self) -> None:
        self.target_line = None
        self.scroll_offset = 0

    def scroll_end(self) -> None:
        self.target_line = None
        self.scroll_offset = self.max_offset

    def wheel(self, direction: int) -> None:
        """Mouse wheel: ``direction`` < 0 scrolls up, > 0 down."""
        step = WHEEL_STEP if direction > 0 else -WHEEL_STEP
        self.scroll_by(step)

    def _clamp(self, offset: int) -> int:
        return clamp_offset(offset, self.total_rows, self.content_height)
