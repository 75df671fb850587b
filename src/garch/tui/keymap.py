"""Key -> action mapping for the history viewer.

All keyboard input routes through HistoryViewerApp.on_key.
Textual BINDINGS are not used - on_key is the sole dispatcher.
"""

# [LAW:one-source-of-truth] Key→action mapping.
KEYMAP: dict[str, str] = {
    # Versions
    "left": "prev_version",
    "right": "next_version",
    # Scrolling
    "up": "scroll_up",
    "down": "scroll_down",
    "pageup": "page_up",
    "pagedown": "page_down",
    "home": "scroll_home",
    "end": "scroll_end",
    # Session
    "q": "quit",
}
