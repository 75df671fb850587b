"""Per-line changes of one commit, read from its unified diff.

Used by the non-interactive summary; the viewer never needs diffs.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from garch.errors import DecodeFailure, QueryFailure

logger = logging.getLogger(__name__)

_HUNK_NEW_START_RE = re.compile(r"\+(\d+)(?:,\d+)?")


class ChangeType(Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


# Marker shown in front of each change in plain output.
CHANGE_MARKERS: dict[ChangeType, str] = {
    ChangeType.ADDED: "+",
    ChangeType.REMOVED: "-",
    ChangeType.MODIFIED: "~",
}


@dataclass(frozen=True)
class LineChange:
    line_number: int
    kind: ChangeType
    content: str


class DiffQueries(Protocol):
    def diff_at(self, revision: str, path: str, start: int, end: int) -> str: ...


def parse_hunk_new_start(header: str) -> int:
    """New-file start line of a ``@@ -a,b +c,d @@`` header (1 if absent)."""
    body = header[2:]
    close = body.find("@@")
    if close != -1:
        body = body[:close]
    match = _HUNK_NEW_START_RE.search(body)
    if match is None:
        return 1
    return int(match.group(1))


def _ends_diff(line: str) -> bool:
    return line.startswith("commit ") or line.startswith("diff --git")


def parse_diff_output(diff_text: str) -> list[LineChange]:
    """Extract added and removed lines from a unified diff.

    Everything before the first hunk is ignored and parsing stops at the next
    commit or file boundary. Removed lines do not exist in the new file, so
    they do not advance the line counter.
    """
    changes: list[LineChange] = []
    in_hunk = False
    line_number = 0

    for line in diff_text.splitlines():
        if line.startswith("@@"):
            in_hunk = True
            line_number = parse_hunk_new_start(line)
            continue
        if not in_hunk:
            continue
        if _ends_diff(line):
            break

        if line.startswith("+") and not line.startswith("+++"):
            changes.append(LineChange(line_number, ChangeType.ADDED, line[1:]))
            line_number += 1
        elif line.startswith("-") and not line.startswith("---"):
            changes.append(LineChange(line_number, ChangeType.REMOVED, line[1:]))
        elif line.startswith(" "):
            line_number += 1

    return changes


def commit_changes(
    queries: DiffQueries, revision: str, path: str, start: int, end: int
) -> list[LineChange]:
    """Changes ``revision`` made inside the window. A failed query yields []."""
    try:
        diff_text = queries.diff_at(revision, path, start, end)
    except (QueryFailure, DecodeFailure) as exc:
        logger.warning("no diff for %s: %s", revision[:7], exc)
        return []
    return parse_diff_output(diff_text)
