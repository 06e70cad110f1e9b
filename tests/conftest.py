"""Pytest configuration and shared fixtures for tailtext tests."""

import pytest

import tailtext.colors


_ENV_VARS = (
    "TAILTEXT_BACKGROUND",
    "TAILTEXT_LOG_LEVEL",
    "TAILTEXT_LOG_FILE",
    "COLORFGBG",
    "NO_COLOR",
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
    "TTY_INTERACTIVE",
)


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user settings and terminal env vars out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def light_background(monkeypatch):
    """Pin the process-wide background cache to "not dark" (the probe fallback)."""
    cache = tailtext.colors.fixed_background(False)
    monkeypatch.setattr(tailtext.colors, "BACKGROUND", cache)
    return cache


# ---------------------------------------------------------------------------
# Background caches
# ---------------------------------------------------------------------------

@pytest.fixture
def dark():
    return tailtext.colors.fixed_background(True)


@pytest.fixture
def light():
    return tailtext.colors.fixed_background(False)


@pytest.fixture
def settings_file(tmp_path):
    """Path of the settings file under the isolated XDG_CONFIG_HOME."""
    path = tmp_path / "config" / "tailtext" / "settings.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
