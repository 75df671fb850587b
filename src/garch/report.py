"""ANSI summary of a line range's history, for ``garch lines --summary``.

Consumes CommitInfo and LineChange records and produces ANSI-colored strings.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TextIO

from garch.colors import BOLD, CYAN, DIM, GREEN, RED, RESET, SEPARATOR, YELLOW
from garch.core.commits import CommitInfo
from garch.core.diff_changes import CHANGE_MARKERS, ChangeType, LineChange

_CHANGE_COLORS: dict[ChangeType, str] = {
    ChangeType.ADDED: GREEN,
    ChangeType.REMOVED: RED,
    ChangeType.MODIFIED: YELLOW,
}


def render_commit_header(commit: CommitInfo) -> str:
    return (
        BOLD + CYAN + commit.short_hash + RESET
        + " " + commit.message
        + DIM + " ({}, {})".format(commit.author, commit.date) + RESET
    )


def render_change(change: LineChange) -> str:
    color = _CHANGE_COLORS[change.kind]
    marker = CHANGE_MARKERS[change.kind]
    return "│ {:>4} {}{}{} {}".format(
        change.line_number, color, marker, RESET, change.content
    )


def render_commit(commit: CommitInfo, changes: Sequence[LineChange]) -> list[str]:
    lines = [render_commit_header(commit)]
    if not changes:
        lines.append(DIM + "│  (no line changes in range)" + RESET)
    lines.extend(render_change(change) for change in changes)
    return lines


def write_summary(
    out: TextIO,
    title: str,
    commits: Iterable[CommitInfo],
    changes_for: Callable[[CommitInfo], Sequence[LineChange]],
) -> int:
    """Write one section per commit. Returns the number of commits written."""
    out.write(BOLD + title + RESET + "\n")
    count = 0
    for commit in commits:
        out.write(SEPARATOR + "\n")
        for line in render_commit(commit, changes_for(commit)):
            out.write(line + "\n")
        count += 1
    return count
