"""Viewer tests using the Textual in-process harness.

Assertions are on ViewerState, not on screen bytes.
"""

import pytest

from garch.tui.app import HistoryView
from tests.harness import (
    numbered_version,
    press_and_settle,
    press_sequence,
    resize_and_settle,
    run_app,
    version_with_lines,
    wheel_and_settle,
)

pytestmark = pytest.mark.textual

# size (100, 24) -> content_height 20


async def test_state_picks_up_terminal_size():
    async with run_app([numbered_version("a" * 40, 100)], size=(100, 24)) as (pilot, app):
        assert app.state.width == 100
        assert app.state.height == 24
        assert app.state.content_height == 20


async def test_arrow_keys_scroll():
    async with run_app([numbered_version("a" * 40, 100)], size=(100, 24)) as (pilot, app):
        await press_sequence(pilot, ["down", "down", "down"])
        assert app.state.scroll_offset == 3
        await press_and_settle(pilot, "up")
        assert app.state.scroll_offset == 2


async def test_page_home_end():
    async with run_app([numbered_version("a" * 40, 100)], size=(100, 24)) as (pilot, app):
        await press_and_settle(pilot, "pagedown")
        assert app.state.scroll_offset == 10
        await press_and_settle(pilot, "end")
        assert app.state.scroll_offset == 80
        await press_and_settle(pilot, "home")
        assert app.state.scroll_offset == 0


async def test_end_on_short_file_is_zero():
    async with run_app([numbered_version("a" * 40, 5)], size=(100, 24)) as (pilot, app):
        await press_and_settle(pilot, "end")
        assert app.state.scroll_offset == 0


async def test_left_right_switch_versions_with_anchor():
    old = numbered_version("a" * 40, 100)
    new = version_with_lines("b" * 40, range(1, 131))
    async with run_app([old, new], size=(100, 24)) as (pilot, app):
        await press_and_settle(pilot, "left")
        assert app.state.current_version_index == 0

        for _ in range(40):
            await pilot.press("down")
        await pilot.pause()
        assert app.state.scroll_offset == 40

        await press_and_settle(pilot, "right")
        assert app.state.current_version_index == 1
        assert app.state.target_line == 51
        assert app.state.scroll_offset == 40

        await press_and_settle(pilot, "right")
        assert app.state.current_version_index == 1

        await press_and_settle(pilot, "down")
        assert app.state.target_line is None


async def test_mouse_wheel_scrolls_three_rows():
    async with run_app([numbered_version("a" * 40, 100)], size=(100, 24)) as (pilot, app):
        view = app.query_one(HistoryView)
        await wheel_and_settle(pilot, view, 1)
        assert app.state.scroll_offset == 3
        await wheel_and_settle(pilot, view, 1)
        assert app.state.scroll_offset == 6
        await wheel_and_settle(pilot, view, -1)
        assert app.state.scroll_offset == 3


async def test_resize_changes_content_height():
    async with run_app([numbered_version("a" * 40, 100)], size=(100, 24)) as (pilot, app):
        await press_and_settle(pilot, "end")
        await resize_and_settle(pilot, 100, 44)
        assert app.state.content_height == 40
        assert app.state.scroll_offset == 60


async def test_empty_window_renders():
    async with run_app([numbered_version("a" * 40, 3)], start=10, end=20, size=(100, 24)) as (pilot, app):
        await press_sequence(pilot, ["down", "end", "pagedown"])
        assert app.state.filtered_rows() == []
        assert app.state.scroll_offset == 0


async def test_q_quits():
    async with run_app([numbered_version("a" * 40, 3)]) as (pilot, app):
        await pilot.press("q")
        assert app.return_code == 0
