"""Version assembly: one blamed snapshot of the file per commit.

// [LAW:dataflow-not-control-flow] One blame query per commit, in log order.
//   A failed blame drops that commit; partial history beats no history.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from garch.core.blame import BlameLine, parse_blame_output
from garch.core.commits import CommitInfo, parse_commit_log
from garch.core.highlight import Highlighter
from garch.errors import DecodeFailure, QueryFailure

logger = logging.getLogger(__name__)


class HistoryQueries(Protocol):
    """The subset of GitQueryService the assembler needs."""

    def file_history(self, path: str) -> str: ...

    def blame_at(self, revision: str, path: str) -> str: ...


@dataclass(frozen=True)
class FileVersion:
    """Full content and provenance of a file at exactly one commit."""

    commit_hash: str
    commit_date: str
    commit_message: str
    blame_lines: tuple[BlameLine, ...]

    @property
    def short_hash(self) -> str:
        return self.commit_hash[:7]

    @property
    def max_line_number(self) -> int:
        if not self.blame_lines:
            return 0
        return self.blame_lines[-1].line_number

    @classmethod
    def from_blame(cls, commit: CommitInfo, blame_lines: Sequence[BlameLine]) -> "FileVersion":
        return cls(
            commit_hash=commit.hash,
            commit_date=commit.date,
            commit_message=commit.message,
            blame_lines=tuple(sorted(blame_lines, key=lambda line: line.line_number)),
        )


def assemble_versions(
    queries: HistoryQueries,
    path: str,
    commits: Sequence[CommitInfo],
    highlighter: Highlighter | None = None,
) -> list[FileVersion]:
    """Blame ``path`` at each commit, keeping the order of ``commits``."""
    versions: list[FileVersion] = []
    for commit in commits:
        try:
            blame_text = queries.blame_at(commit.hash, path)
        except (QueryFailure, DecodeFailure) as exc:
            logger.warning("skipping %s: blame failed: %s", commit.short_hash, exc)
            continue
        blame_lines = parse_blame_output(blame_text, highlighter)
        versions.append(FileVersion.from_blame(commit, blame_lines))
    logger.info(
        "assembled %d of %d version(s) for %s", len(versions), len(commits), path
    )
    return versions


def build_file_versions(
    queries: HistoryQueries,
    path: str,
    highlighter: Highlighter | None = None,
) -> list[FileVersion]:
    """Query the rename-following history of ``path`` and blame every commit.

    Result is newest-first, as git returns it. Failure of the history query
    itself propagates.
    """
    commits = parse_commit_log(queries.file_history(path))
    return assemble_versions(queries, path, commits, highlighter)


def order_versions(versions: Sequence[FileVersion], newest_first: bool) -> list[FileVersion]:
    """Apply the display order chosen at session start.

    Input is newest-first; the default display is oldest-first.
    """
    if newest_first:
        return list(versions)
    return list(reversed(versions))
