"""Tests for frame layout: header, author blocks, gutters and content layouts."""

from rich.cells import cell_len
from rich.text import Text

from garch.core.blame import BlameLine
from garch.palette import author_color
from garch.tui.rendering import (
    EMPTY_RANGE_MESSAGE,
    TRUNCATE_LAYOUT,
    WRAP_LAYOUT,
    gutter_digits,
    render_author_header,
    render_body,
    render_commit_line,
    render_footer,
    render_header,
    render_screen,
    select_layout,
    wrap_plain,
)
from garch.tui.viewer_state import ViewerState
from tests.harness import make_version, numbered_version


def _line(n, content, *, author="Jane D.", styled=None):
    return BlameLine(
        line_number=n,
        author=author,
        date="2024-01-01",
        commit_hash="abcdef1",
        summary="init",
        content=content,
        styled=styled,
    )


class TestWrapPlain:
    def test_short_content_is_one_chunk(self):
        assert wrap_plain("hello", 10) == ["hello"]

    def test_breaks_at_late_space(self):
        assert wrap_plain("aaaaaaaa bbbb", 10) == ["aaaaaaaa", "bbbb"]

    def test_hard_split_when_space_is_early(self):
        assert wrap_plain("ab cdefghijklmnop", 10) == ["ab cdefghi", "jklmnop"]

    def test_no_spaces(self):
        assert wrap_plain("x" * 25, 10) == ["x" * 10, "x" * 10, "x" * 5]

    def test_every_chunk_fits(self):
        content = "the quick brown fox jumps over the lazy dog " * 4
        assert all(len(chunk) <= 12 for chunk in wrap_plain(content, 12))


class TestLayouts:
    def test_plain_content_wraps(self):
        line = _line(1, "x" * 25)
        assert select_layout(line) is WRAP_LAYOUT
        rows = WRAP_LAYOUT.layout(line, 10)
        assert [r.plain for r in rows] == ["x" * 10, "x" * 10, "x" * 5]

    def test_styled_content_truncates_with_ellipsis(self):
        styled = Text("y" * 25, style="bold")
        styled.stylize("red", 0, 3)
        line = _line(1, "y" * 25, styled=styled)
        assert select_layout(line) is TRUNCATE_LAYOUT
        [row] = TRUNCATE_LAYOUT.layout(line, 10)
        assert len(row.plain) == 10
        assert row.plain.endswith("…")
        # source Text is untouched
        assert styled.plain == "y" * 25

    def test_base_style_alone_counts_as_styling(self):
        line = _line(1, "v" * 25, styled=Text("v" * 25, style="bold"))
        assert line.has_styling
        assert select_layout(line) is TRUNCATE_LAYOUT

    def test_unstyled_text_object_still_wraps(self):
        line = _line(1, "z" * 25, styled=Text("z" * 25))
        assert select_layout(line) is WRAP_LAYOUT

    def test_tabs_are_expanded(self):
        [row] = WRAP_LAYOUT.layout(_line(1, "\tx"), 40)
        assert row.plain == "    x"


class TestBody:
    def test_author_header_starts_each_block(self):
        rows = [
            _line(1, "a", author="Jane D."),
            _line(2, "b", author="Jane D."),
            _line(3, "c", author="Bo"),
        ]
        body = [r.plain for r in render_body(rows, 0, 20, 80)]
        assert body[0].startswith("┌─ Jane D. (2024-01-01) abcdef1 init")
        assert body[1] == "│   1 │ a"
        assert body[2] == "│   2 │ b"
        assert body[3].startswith("┌─ Bo ")
        assert body[4] == "│   3 │ c"

    def test_first_visible_row_gets_a_header(self):
        rows = [_line(n, str(n)) for n in range(1, 6)]
        body = [r.plain for r in render_body(rows, 2, 20, 80)]
        assert body[0].startswith("┌─ Jane D.")
        assert body[1] == "│   3 │ 3"

    def test_body_never_exceeds_content_height(self):
        rows = [_line(n, "w" * 200, author=f"A{n % 2} X") for n in range(1, 50)]
        assert len(render_body(rows, 0, 7, 40)) == 7

    def test_continuation_rows_have_blank_gutter(self):
        body = [r.plain for r in render_body([_line(1, "x" * 30)], 0, 20, 30)]
        assert body[1].startswith("│   1 │ ")
        assert body[2].startswith("│     │ ")

    def test_empty_rows_render_message(self):
        body = render_body([], 0, 20, 80)
        assert [r.plain for r in body] == [EMPTY_RANGE_MESSAGE]

    def test_zero_height(self):
        assert render_body([_line(1, "a")], 0, 0, 80) == []

    def test_gutter_widens_for_large_line_numbers(self):
        assert gutter_digits([_line(12345, "a")]) == 5
        assert gutter_digits([_line(7, "a")]) == 3
        assert gutter_digits([]) == 3

    def test_author_header_is_colored_by_author(self):
        header = render_author_header(_line(1, "a", author="Jane D."), 80)
        styles = [str(span.style) for span in header.spans]
        assert f"bold {author_color('Jane D.')}" in styles


class TestFrame:
    def test_header_shows_position_and_date(self):
        version = numbered_version("a" * 40, 3, date="2024-05-06")
        state = ViewerState(versions=[version, version])
        state.resize(100, 24)
        header = render_header("src/app.py", state)
        assert "src/app.py (commit 1 of 2) - 2024-05-06" in header.plain
        assert cell_len(header.plain) == 100

    def test_commit_line_is_truncated_to_width(self):
        version = make_version("a" * 40, [(1, "Bo", "x")], message="m" * 200)
        line = render_commit_line(version, 40)
        assert len(line.plain) == 40
        assert line.plain.startswith("Commit: aaaaaaa - ")
        assert line.plain.endswith("…")

    def test_footer_fills_width(self):
        assert cell_len(render_footer(200).plain) == 200
        assert "q : Quit" in render_footer(200).plain

    def test_footer_hints_fit_standard_width(self):
        footer = render_footer(80).plain
        assert cell_len(footer) == 80
        assert "q : Quit" in footer
        assert "…" not in footer

    def test_screen_has_terminal_height_rows(self):
        state = ViewerState(versions=[numbered_version("a" * 40, 3)])
        state.resize(80, 24)
        rows = render_screen("f.py", state)
        assert len(rows) == 24
        assert "Quit" in rows[-1].plain
        assert rows[2].plain == "─" * 80

    def test_end_shows_last_line_on_bottom_row(self, long_version):
        state = ViewerState(versions=[long_version])
        state.resize(80, 24)
        state.scroll_end()
        rows = render_screen("f.py", state)
        body = rows[3:-1]
        assert len(body) == state.content_height
        assert body[-1].plain == "│ 100 │ line 100"
        assert body[-2].plain == "│  99 │ line 99"

    def test_end_keeps_last_line_visible_when_rows_wrap(self):
        version = make_version(
            "a" * 40, [(n, "Bo", "w" * 60) for n in range(1, 31)]
        )
        state = ViewerState(versions=[version])
        state.resize(40, 24)
        state.scroll_end()
        body = render_screen("f.py", state)[3:-1]
        gutters = [r.plain[:7] for r in body]
        assert "│  30 │" in gutters
        assert body[-1].plain.startswith("│     │ ")

    def test_home_on_a_single_page_shows_first_line(self):
        version = make_version("a" * 40, [(n, f"A{n} X", str(n)) for n in range(1, 11)])
        state = ViewerState(versions=[version])
        state.resize(80, 24)
        state.scroll_home()
        body = [r.plain for r in render_screen("f.py", state)[3:-1]]
        assert body[0].startswith("┌─ ")
        assert body[1] == "│   1 │ 1"


class TestPinnedBody:
    def test_pinned_body_ends_with_last_row(self):
        rows = [_line(n, str(n)) for n in range(1, 30)]
        body = [r.plain for r in render_body(rows, 19, 10, 80, pin_bottom=True)]
        assert len(body) == 10
        assert body[-1] == "│  29 │ 29"

    def test_pinned_body_that_fits_starts_with_header(self):
        rows = [_line(n, str(n)) for n in range(1, 4)]
        body = [r.plain for r in render_body(rows, 0, 10, 80, pin_bottom=True)]
        assert body[0].startswith("┌─ Jane D.")
        assert body[-1] == "│   3 │ 3"
