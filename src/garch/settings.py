"""Settings file reading for garch.

Reads a JSON settings file at XDG_CONFIG_HOME/garch/settings.json. The file is
optional and never written: garch keeps no state between sessions.

Recognized keys:
    git_command  executable used for history queries (env GARCH_GIT wins)
    highlight    syntax-highlight line content (default true)
"""

import json
import os
from pathlib import Path

DEFAULT_GIT_COMMAND = "git"


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / garch / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "garch" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def load_setting(key: str, default=None):
    """Load a single setting by key. Returns default if absent."""
    return load_settings().get(key, default)


def load_git_command() -> str:
    """Resolve the git executable: GARCH_GIT env, then settings, then "git"."""
    env_value = os.environ.get("GARCH_GIT", "").strip()
    if env_value:
        return env_value
    configured = load_setting("git_command", DEFAULT_GIT_COMMAND)
    return str(configured or DEFAULT_GIT_COMMAND)


def load_highlight_enabled() -> bool:
    """Whether line content should be syntax highlighted by default."""
    return bool(load_setting("highlight", True))
