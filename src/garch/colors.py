"""Terminal color constants for plain (non-interactive) output."""

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

# Foreground
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"

SEPARATOR = DIM + "─" * 70 + RESET
