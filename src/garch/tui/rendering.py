"""Screen rendering for the history viewer.

Converts ViewerState into Rich Text rows: a three-row header, the body and a
one-row footer. Nothing here touches the terminal; the widget joins the rows.

Body rows are grouped into author blocks. Each blamed line gets a gutter with
its line number; content that does not fit is laid out by a ContentLayout:
plain content word-wraps, highlighted content is truncated with an ellipsis.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from rich.text import Text

from garch.core.blame import BlameLine
from garch.core.versions import FileVersion
from garch.palette import author_color
from garch.tui.viewer_state import ViewerState

HEADER_STYLE = "bold white on dark_blue"
COMMIT_STYLE = "grey70"
RULE_STYLE = "grey42"
GUTTER_STYLE = "grey42"
FOOTER_STYLE = "white on grey30"
META_STYLE = "grey50"

RULE_CHAR = "─"
ELLIPSIS = "…"
TAB_SIZE = 4
MIN_GUTTER_DIGITS = 3

FOOTER_HINTS = "← → Versions   ↑ ↓ Scroll   PgUp PgDn Home End   Wheel   q : Quit"
EMPTY_RANGE_MESSAGE = "(no lines in this range at this revision)"


def _pad(text: Text, width: int) -> Text:
    """Truncate or pad ``text`` to exactly ``width`` cells."""
    text.truncate(width, overflow="ellipsis", pad=True)
    return text


# ─── Header / footer ──────────────────────────────────────────────────────


def render_header(path: str, state: ViewerState) -> Text:
    version = state.current_version
    label = "\U0001f4dc {} (commit {} of {}) - {}".format(
        path,
        state.current_version_index + 1,
        state.version_count,
        version.commit_date,
    )
    return _pad(Text(label, style=HEADER_STYLE), state.width)


def render_commit_line(version: FileVersion, width: int) -> Text:
    text = Text("Commit: {} - {}".format(version.short_hash, version.commit_message), style=COMMIT_STYLE)
    text.truncate(width, overflow="ellipsis")
    return text


def render_rule(width: int) -> Text:
    return Text(RULE_CHAR * width, style=RULE_STYLE)


def render_footer(width: int) -> Text:
    return _pad(Text(FOOTER_HINTS, style=FOOTER_STYLE), width)


# ─── Content layouts ──────────────────────────────────────────────────────


class ContentLayout(Protocol):
    """Lays one line's content out into rows no wider than ``width``."""

    def layout(self, line: BlameLine, width: int) -> list[Text]: ...


def wrap_plain(content: str, width: int) -> list[str]:
    """Word-wrap ``content`` into chunks of at most ``width`` characters.

    Breaks at the last space when it falls in the final third of the chunk,
    otherwise splits hard. Leading spaces of continuation chunks are dropped.
    """
    if width <= 0 or len(content) <= width:
        return [content]
    chunks: list[str] = []
    remaining = content
    while remaining:
        chunk_size = min(width, len(remaining))
        split_pos = chunk_size
        if split_pos < len(remaining):
            space_pos = remaining.rfind(" ", 0, chunk_size)
            if space_pos > chunk_size * 2 // 3:
                split_pos = space_pos
        chunks.append(remaining[:split_pos])
        remaining = remaining[split_pos:].lstrip(" ")
    return chunks


class WrapLayout:
    """Plain content: word-wrap onto continuation rows."""

    def layout(self, line: BlameLine, width: int) -> list[Text]:
        content = line.content.expandtabs(TAB_SIZE)
        return [Text(chunk) for chunk in wrap_plain(content, width)]


class TruncateLayout:
    """Styled content: one row, cut with a trailing ellipsis."""

    def layout(self, line: BlameLine, width: int) -> list[Text]:
        assert line.styled is not None
        text = line.styled.copy()
        text.expand_tabs(TAB_SIZE)
        if width > 0:
            text.truncate(width, overflow="ellipsis")
        return [text]


WRAP_LAYOUT = WrapLayout()
TRUNCATE_LAYOUT = TruncateLayout()


def select_layout(line: BlameLine) -> ContentLayout:
    """// [LAW:dataflow-not-control-flow] Styling in the data picks the layout."""
    return TRUNCATE_LAYOUT if line.has_styling else WRAP_LAYOUT


# ─── Body ─────────────────────────────────────────────────────────────────


def gutter_digits(rows: Sequence[BlameLine]) -> int:
    """Width of the line-number column for a set of rows."""
    if not rows:
        return MIN_GUTTER_DIGITS
    return max(MIN_GUTTER_DIGITS, len(str(rows[-1].line_number)))


def render_author_header(line: BlameLine, width: int) -> Text:
    text = Text("┌─ ")
    text.append(line.author or "?", style=f"bold {author_color(line.author)}")
    text.append(f" ({line.date}) ", style=META_STYLE)
    text.append(line.commit_hash, style="yellow")
    if line.summary:
        text.append(f" {line.summary}", style=META_STYLE)
    text.truncate(width, overflow="ellipsis")
    return text


def _gutter(line_number: int | None, digits: int) -> Text:
    label = " " * digits if line_number is None else str(line_number).rjust(digits)
    return Text(f"│ {label} │ ", style=GUTTER_STYLE)


def _layout_rows(
    lines: Sequence[BlameLine],
    width: int,
    digits: int,
    limit: int | None = None,
) -> list[Text]:
    content_width = max(1, width - len(_gutter(None, digits)))
    out: list[Text] = []
    last_author: str | None = None

    for line in lines:
        if line.author != last_author:
            last_author = line.author
            out.append(render_author_header(line, width))
            if limit is not None and len(out) >= limit:
                return out

        for i, chunk in enumerate(select_layout(line).layout(line, content_width)):
            row = _gutter(line.line_number if i == 0 else None, digits)
            row.append_text(chunk)
            out.append(row)
            if limit is not None and len(out) >= limit:
                return out
    return out


def _bottom_rows(
    rows: Sequence[BlameLine], content_height: int, width: int, digits: int
) -> list[Text]:
    """Rows laid out upwards from the last line so it ends the viewport."""
    start = len(rows) - 1
    laid = _layout_rows(rows[start:], width, digits)
    while start > 0 and len(laid) < content_height:
        start -= 1
        laid = _layout_rows(rows[start:], width, digits)
    return laid[-content_height:]


def render_body(
    rows: Sequence[BlameLine],
    scroll_offset: int,
    content_height: int,
    width: int,
    *,
    pin_bottom: bool = False,
) -> list[Text]:
    """Body rows for the viewport, at most ``content_height`` of them.

    A block header precedes the first visible line and every line whose
    author differs from the one above it. With ``pin_bottom`` the last row
    is laid out first, so block headers and wrapped rows never push it off
    screen.
    """
    if content_height <= 0:
        return []
    if not rows:
        return [Text(EMPTY_RANGE_MESSAGE, style=META_STYLE)]

    digits = gutter_digits(rows)
    if pin_bottom:
        return _bottom_rows(rows, content_height, width, digits)
    return _layout_rows(
        rows[scroll_offset:scroll_offset + content_height], width, digits, limit=content_height
    )


def render_screen(path: str, state: ViewerState) -> list[Text]:
    """All rows of one frame; the footer always lands on the last row."""
    # At the last page the final line must stay on screen.
    at_end = state.max_offset > 0 and state.scroll_offset == state.max_offset
    body = render_body(
        state.filtered_rows(),
        state.scroll_offset,
        state.content_height,
        state.width,
        pin_bottom=at_end,
    )
    body.extend(Text("") for _ in range(state.content_height - len(body)))
    return [
        render_header(path, state),
        render_commit_line(state.current_version, state.width),
        render_rule(state.width),
        *body,
        render_footer(state.width),
    ]
