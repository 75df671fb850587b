"""Syntax highlighting for blamed line content.

Pygments does the lexing, Rich's Syntax applies the theme. A Highlighter is
built once per version-build pass and handed to the blame parser, so the
lexer and theme are resolved once rather than per line.
"""

from __future__ import annotations

import os

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound
from rich.syntax import Syntax
from rich.text import Text

# Single fixed dark theme.
CODE_THEME = "monokai"

# Extensions Pygments guesses poorly (or not at all) from a bare filename.
_EXT_TO_LANG: dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".rs": "rust",
    ".go": "go",
    ".js": "javascript",
    ".mjs": "javascript",
    ".jsx": "jsx",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".rb": "ruby",
    ".java": "java",
    ".kt": "kotlin",
    ".c": "c",
    ".h": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".cs": "csharp",
    ".sh": "bash",
    ".bash": "bash",
    ".zsh": "bash",
    ".md": "markdown",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
    ".sql": "sql",
    ".html": "html",
    ".css": "css",
    ".lua": "lua",
    ".ex": "elixir",
    ".exs": "elixir",
    ".zig": "zig",
    ".dockerfile": "docker",
    ".tf": "terraform",
    ".proto": "protobuf",
}


def _infer_lang_from_path(path: str) -> str:
    """Infer a Pygments lexer name from a file path's extension.

    Returns empty string for extensions not in the table.
    """
    _, ext = os.path.splitext(path)
    return _EXT_TO_LANG.get(ext.lower(), "")


def lexer_for_path(path: str) -> Lexer:
    """Pick a lexer by extension, falling back to plain text."""
    lang = _infer_lang_from_path(path)
    try:
        if lang:
            return get_lexer_by_name(lang)
        return get_lexer_for_filename(os.path.basename(path))
    except ClassNotFound:
        return TextLexer()


class Highlighter:
    """Stateless content styler bound to one grammar and the fixed theme."""

    def __init__(self, lexer: Lexer, theme: str = CODE_THEME) -> None:
        self._lexer = lexer
        self._syntax = Syntax("", lexer, theme=theme, background_color="default")

    @classmethod
    def for_path(cls, path: str, theme: str = CODE_THEME) -> "Highlighter":
        return cls(lexer_for_path(path), theme=theme)

    @property
    def lexer_name(self) -> str:
        return self._lexer.name

    def highlight(self, content: str) -> Text:
        """Return ``content`` as styled Text (no trailing newline)."""
        text = self._syntax.highlight(content)
        text.rstrip_end(len(content))
        return text
