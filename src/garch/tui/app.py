"""Interactive history viewer using Textual.

// [LAW:locality-or-seam] Thin coordinator: navigation semantics live in
//   viewer_state, frame layout in rendering. This module only forwards input
//   and asks for redraws.

Textual's driver puts the terminal in raw mode, switches to the alternate
screen and captures the mouse when the app starts, and restores all three on
every exit path, including an exception inside the app. In that case
``return_code`` is nonzero once run() returns.
"""

from __future__ import annotations

import logging
from typing import Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget

import garch.tui.keymap
import garch.tui.rendering
from garch.core.versions import FileVersion
from garch.tui.viewer_state import ViewerState

logger = logging.getLogger(__name__)

_NEWLINE = Text("\n")


class HistoryView(Widget):
    """Full-screen frame: header, blamed lines, footer."""

    DEFAULT_CSS = """
    HistoryView {
        width: 100%;
        height: 100%;
    }
    """

    ALLOW_SELECT = False

    def __init__(self, path: str, state: ViewerState) -> None:
        super().__init__()
        self._path = path
        self._state = state

    def render(self) -> Text:
        # One frame per cycle: read dimensions, settle any anchor, lay out.
        self._state.resize(self.size.width, self.size.height)
        self._state.resolve_pending_anchor()
        rows = garch.tui.rendering.render_screen(self._path, self._state)
        return _NEWLINE.join(rows)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self._state.wheel(-1)
        self.refresh()

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self._state.wheel(1)
        self.refresh()


class HistoryViewerApp(App):
    """TUI application stepping through the versions of one file."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        overflow: hidden;
    }
    """

    def __init__(
        self,
        path: str,
        versions: Sequence[FileVersion],
        start: int = 1,
        end: int | None = None,
    ) -> None:
        super().__init__()
        self._path = path
        self.state = ViewerState(versions=versions, start=start, end=end)

    def compose(self) -> ComposeResult:
        yield HistoryView(self._path, self.state)

    def on_mount(self) -> None:
        logger.info(
            "viewer started path=%s versions=%d window=%s-%s",
            self._path,
            self.state.version_count,
            self.state.start,
            self.state.end if self.state.end is not None else "",
        )

    def _redraw(self) -> None:
        self.query_one(HistoryView).refresh()

    # ─── Actions ───────────────────────────────────────────────────────

    def action_prev_version(self) -> None:
        if self.state.prev_version():
            self._redraw()

    def action_next_version(self) -> None:
        if self.state.next_version():
            self._redraw()

    def action_scroll_up(self) -> None:
        self.state.scroll_up()
        self._redraw()

    def action_scroll_down(self) -> None:
        self.state.scroll_down()
        self._redraw()

    def action_page_up(self) -> None:
        self.state.page_up()
        self._redraw()

    def action_page_down(self) -> None:
        self.state.page_down()
        self._redraw()

    def action_scroll_home(self) -> None:
        self.state.scroll_home()
        self._redraw()

    def action_scroll_end(self) -> None:
        self.state.scroll_end()
        self._redraw()

    # ─── Key dispatch ──────────────────────────────────────────────────

    async def on_key(self, event: events.Key) -> None:
        """// [LAW:single-enforcer] on_key is the sole key dispatcher."""
        action_name = garch.tui.keymap.KEYMAP.get(event.key)
        if action_name:
            event.prevent_default()
            event.stop()
            await self.run_action(action_name)


def run_viewer(
    path: str,
    versions: Sequence[FileVersion],
    start: int = 1,
    end: int | None = None,
) -> int:
    """Run the viewer until quit. Returns the app's exit status."""
    app = HistoryViewerApp(path, versions, start=start, end=end)
    app.run()
    return app.return_code or 0
