"""History query adapter: the only place garch spawns git.

This module is a STABLE BOUNDARY.
Import as: import garch.io.git_queries

// [LAW:single-enforcer] GitQueryService is the sole subprocess owner.
// [LAW:locality-or-seam] All subprocess logic isolated here; callers get text
//   back or an exception, never a CompletedProcess.

Every query is attempted exactly once, blocks until git exits and has no
timeout. A nonzero exit always raises QueryFailure, never returns "".
"""

from __future__ import annotations

import logging
import subprocess

from garch.errors import DecodeFailure, QueryFailure

logger = logging.getLogger(__name__)

# One record per commit: hash|date|author|subject
COMMIT_FORMAT = "--pretty=format:%H|%ad|%an|%s"
DATE_FORMAT = "--date=short"


def line_range_arg(start: int, end: int, path: str) -> str:
    """Build the ``-L`` argument for a line window."""
    return f"{start},{end}:{path}"


class GitQueryService:
    """Runs the four history queries against a working tree."""

    def __init__(self, git_command: str = "git", cwd: str | None = None) -> None:
        self._git_command = git_command
        self._cwd = cwd

    def line_history(self, path: str, start: int, end: int) -> str:
        """Commit log for an inclusive line window, newest first."""
        return self._run(
            ["log", "-L", line_range_arg(start, end, path), COMMIT_FORMAT, DATE_FORMAT]
        )

    def file_history(self, path: str) -> str:
        """Commit log for a whole file, following renames, newest first."""
        return self._run(["log", "--follow", COMMIT_FORMAT, DATE_FORMAT, "--", path])

    def blame_at(self, revision: str, path: str) -> str:
        """Per-line porcelain blame of ``path`` as of ``revision``."""
        return self._run(["blame", "--line-porcelain", revision, "--", path])

    def diff_at(self, revision: str, path: str, start: int, end: int) -> str:
        """Unified diff of one commit restricted to a line window."""
        return self._run(["show", revision, "-L", line_range_arg(start, end, path)])

    def _run(self, args: list[str]) -> str:
        cmd = [self._git_command, *args]
        logger.debug("running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, cwd=self._cwd)
        except FileNotFoundError:
            raise QueryFailure(cmd, 127, f"command not found: {self._git_command}")
        except OSError as exc:
            raise QueryFailure(cmd, 126, str(exc)) from exc

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace")
            logger.debug("git exited %d: %s", result.returncode, stderr.strip())
            raise QueryFailure(cmd, result.returncode, stderr)

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeFailure(cmd, str(exc)) from exc
