"""Author colors for blame block headers.

// [LAW:one-source-of-truth] AUTHOR_PALETTE is the sole author color list.

author_color is a pure function of the author string: a stable digest modulo
the palette size. Distinct authors may share a color.
"""

import hashlib

AUTHOR_PALETTE: tuple[str, ...] = (
    "bright_red",
    "dark_cyan",
    "green4",
    "yellow4",
    "dodger_blue2",
    "magenta3",
    "red3",
)


def author_color(author: str) -> str:
    """Rich color name for ``author``; identical across runs and processes."""
    digest = hashlib.md5(author.encode("utf-8")).digest()
    return AUTHOR_PALETTE[int.from_bytes(digest[:8], "big") % len(AUTHOR_PALETTE)]
