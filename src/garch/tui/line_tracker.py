"""Keeps the line the reader is looking at on screen across version switches.

// [LAW:one-source-of-truth] target_line (a file line number) is the canonical
//   jump target shape; row indices are recomputed per version.

Absolute line numbers drift between versions, so keeping the scroll offset
would show unrelated content. Before a switch the focused line number is
captured; afterwards the closest surviving line is centered.
"""

from __future__ import annotations

from typing import Sequence

from garch.core.blame import BlameLine


def clamp_offset(offset: int, total_rows: int, content_height: int) -> int:
    """Clamp a scroll offset into ``[0, max(0, total_rows - content_height)]``."""
    max_offset = max(0, total_rows - content_height)
    return max(0, min(offset, max_offset))


def focus_line(
    rows: Sequence[BlameLine], scroll_offset: int, content_height: int
) -> int | None:
    """Line number the reader is focused on, or None when nothing is visible.

    That is the first visible row, or the vertical middle when several are
    visible.
    """
    visible = rows[scroll_offset:scroll_offset + max(0, content_height)]
    if not visible:
        return None
    return visible[len(visible) // 2].line_number


def nearest_row_index(rows: Sequence[BlameLine], target_line: int) -> int | None:
    """Index of the row for ``target_line``, else of the closest line number.

    On equal distance the line after the target wins, so a deleted line
    resolves to its successor.
    """
    best_index: int | None = None
    best_distance = 0
    for index, row in enumerate(rows):
        distance = abs(row.line_number - target_line)
        if distance == 0:
            return index
        if (
            best_index is None
            or distance < best_distance
            or (distance == best_distance and row.line_number > target_line)
        ):
            best_index = index
            best_distance = distance
    return best_index


def anchor_scroll_offset(index: int, total_rows: int, content_height: int) -> int:
    """Scroll offset that puts row ``index`` in the middle of the viewport."""
    return clamp_offset(index - content_height // 2, total_rows, content_height)


def resolve_anchor(
    rows: Sequence[BlameLine], target_line: int, content_height: int
) -> int:
    """Scroll offset for ``rows`` that keeps ``target_line`` (or its nearest) centered."""
    index = nearest_row_index(rows, target_line)
    if index is None:
        return 0
    return anchor_scroll_offset(index, len(rows), content_height)
