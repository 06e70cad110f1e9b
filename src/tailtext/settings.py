"""Settings for tailtext.

Reads a JSON settings file at XDG_CONFIG_HOME/tailtext/settings.json and
the TAILTEXT_* environment variables. Environment variables win over the
file; the file wins over built-in defaults.

Import as: import tailtext.settings
"""

import json
import os
from pathlib import Path

BACKGROUND_ENV = "TAILTEXT_BACKGROUND"
LOG_LEVEL_ENV = "TAILTEXT_LOG_LEVEL"
LOG_FILE_ENV = "TAILTEXT_LOG_FILE"

BACKGROUND_CHOICES = ("auto", "dark", "light")
DEFAULT_LOG_LEVEL = "WARNING"


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / tailtext / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "tailtext" / "settings.json"


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


def _normalize_background(raw) -> str | None:
    value = str(raw or "").strip().lower()
    return value if value in BACKGROUND_CHOICES else None


def load_background_preference() -> str:
    """``dark``, ``light`` or ``auto``.

    TAILTEXT_BACKGROUND beats the settings file; unknown values fall through.
    """
    env = _normalize_background(os.environ.get(BACKGROUND_ENV))
    if env is not None:
        return env
    return _normalize_background(load_setting("background")) or "auto"


def load_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV) or str(load_setting("log_level", DEFAULT_LOG_LEVEL))


def load_log_file() -> str | None:
    return os.environ.get(LOG_FILE_ENV) or load_setting("log_file")
