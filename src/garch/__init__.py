"""garch: replay the evolution of a file, or a line range within it, through git history."""

__version__ = "0.3.0"
