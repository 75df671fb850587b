"""Commit log parsing.

Input is one ``hash|date|author|message`` record per line, as produced by
``git log --pretty=format:%H|%ad|%an|%s``. The subject may itself contain the
delimiter, so everything from the fourth field on is rejoined.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"

_HASH_RE = re.compile(r"^[0-9a-fA-F]{7,}$")


@dataclass(frozen=True)
class CommitInfo:
    """One commit touching the traced file."""

    hash: str
    date: str
    author: str
    message: str

    @property
    def short_hash(self) -> str:
        return self.hash[:7]


def parse_commit_line(line: str) -> CommitInfo | None:
    """Parse one log record. Returns None for records with fewer than four fields."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 4:
        return None
    return CommitInfo(
        hash=parts[0],
        date=parts[1],
        author=parts[2],
        message=FIELD_SEPARATOR.join(parts[3:]),
    )


def parse_commit_log(text: str) -> list[CommitInfo]:
    """Parse ``git log`` output, preserving order and dropping malformed lines."""
    commits: list[CommitInfo] = []
    skipped = 0
    for line in text.splitlines():
        commit = parse_commit_line(line)
        if commit is None:
            skipped += 1
            continue
        commits.append(commit)
    if skipped:
        logger.debug("skipped %d malformed commit record(s)", skipped)
    return commits


def parse_line_log(text: str) -> list[CommitInfo]:
    """Parse ``git log -L`` output.

    Line-range logs interleave each record with its diff, so a record must
    also start with something shaped like a commit id.
    """
    commits: list[CommitInfo] = []
    for line in text.splitlines():
        if FIELD_SEPARATOR not in line:
            continue
        commit = parse_commit_line(line)
        if commit is not None and _HASH_RE.match(commit.hash):
            commits.append(commit)
    return commits
