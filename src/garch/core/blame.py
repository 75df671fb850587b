"""Parsing of ``git blame --line-porcelain`` output.

A record starts with ``<sha> <orig_line> <final_line> [<group_size>]``,
continues with ``key value`` metadata lines and ends with the line content
prefixed by a tab. Only ``author``, ``author-time`` and ``summary`` are kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from rich.text import Text

if TYPE_CHECKING:
    from garch.core.highlight import Highlighter

logger = logging.getLogger(__name__)

SHORT_HASH_LEN = 7
# Longer lines are stored unstyled; lexing them per version is too slow.
HIGHLIGHT_MAX_CHARS = 200

UNKNOWN_DATE = "unknown"


@dataclass(frozen=True)
class BlameLine:
    """Provenance of one line of a file at one revision."""

    line_number: int
    author: str
    date: str
    commit_hash: str
    summary: str
    content: str
    styled: Text | None = None

    @property
    def has_styling(self) -> bool:
        """True when the content carries highlighting spans or a base style."""
        if self.styled is None:
            return False
        return bool(self.styled.spans) or bool(self.styled.style)


def abbreviate_author(author: str) -> str:
    """``"Jane Doe"`` -> ``"Jane D."``; a single name is left unchanged."""
    parts = author.split()
    if len(parts) >= 2:
        return f"{parts[0]} {parts[1][0]}."
    return author


def format_timestamp(timestamp: int) -> str:
    """Format unix seconds as a UTC ``YYYY-MM-DD`` date."""
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_DATE


def format_timestamp_coarse(timestamp: int) -> str:
    """Approximate ``YYYY-MM-DD`` using 365-day years and 30-day months.

    Display-only; kept for fixtures recorded against the approximate dates.
    """
    if timestamp < 0:
        return UNKNOWN_DATE
    days = timestamp // 86400
    year = 1970 + days // 365
    day_of_year = days % 365
    month = min(day_of_year // 30 + 1, 12)
    day = min(day_of_year % 30 + 1, 31)
    return f"{year:04d}-{month:02d}-{day:02d}"


def _is_record_header(tokens: list[str]) -> bool:
    return len(tokens) >= 3 and len(tokens[0]) >= SHORT_HASH_LEN


def _style_content(content: str, highlighter: Highlighter | None) -> Text | None:
    if highlighter is None:
        return None
    if len(content) > HIGHLIGHT_MAX_CHARS:
        return Text(content)
    return highlighter.highlight(content)


def parse_blame_output(
    blame_text: str,
    highlighter: Highlighter | None = None,
    *,
    date_formatter=format_timestamp,
) -> list[BlameLine]:
    """Parse porcelain blame into BlameLines in input order.

    A record whose content line never arrives (truncated input) is dropped.
    """
    blame_lines: list[BlameLine] = []
    lines = blame_text.splitlines()
    i = 0
    while i < len(lines):
        tokens = lines[i].split()
        i += 1
        if not _is_record_header(tokens):
            continue

        full_hash = tokens[0]
        try:
            line_number = int(tokens[2])
        except ValueError:
            line_number = 0

        author = ""
        date = ""
        summary = ""
        content: str | None = None
        while i < len(lines):
            info_line = lines[i]
            i += 1
            if info_line.startswith("\t"):
                content = info_line[1:]
                break
            if info_line.startswith("author "):
                author = info_line[len("author "):]
            elif info_line.startswith("author-time "):
                try:
                    date = date_formatter(int(info_line[len("author-time "):].strip()))
                except ValueError:
                    pass
            elif info_line.startswith("summary "):
                summary = info_line[len("summary "):]

        if content is None:
            logger.debug("dropping truncated blame record for %s", full_hash)
            break

        blame_lines.append(
            BlameLine(
                line_number=line_number,
                author=abbreviate_author(author),
                date=date,
                commit_hash=full_hash[:SHORT_HASH_LEN],
                summary=summary,
                content=content,
                styled=_style_content(content, highlighter),
            )
        )
    return blame_lines
