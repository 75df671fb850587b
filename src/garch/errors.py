"""Error taxonomy for garch.

Malformed commit records and truncated blame blocks are not errors: the
parsers drop them. Everything that can stop a run derives from GarchError.
"""

from __future__ import annotations


class GarchError(Exception):
    """Base exception for garch failures."""


class QueryFailure(GarchError):
    """An external git query exited nonzero (or could not be started)."""

    def __init__(self, command: list[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "(no stderr)"
        super().__init__(f"git command failed ({returncode}): {detail}")


class DecodeFailure(GarchError):
    """An external query produced output that is not valid UTF-8 text."""

    def __init__(self, command: list[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"invalid UTF-8 in output of {' '.join(command)}: {reason}")


class RenderFailure(GarchError):
    """The interactive session aborted on a terminal I/O error."""
