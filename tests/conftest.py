"""Pytest configuration and shared fixtures for garch tests."""

import pytest

import garch.io.logging_setup
from tests.harness import numbered_version


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path, monkeypatch):
    """Keep logs and settings inside tmp_path; never read the user's config."""
    monkeypatch.setenv("GARCH_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("GARCH_LOG_FILE", raising=False)
    monkeypatch.delenv("GARCH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GARCH_GIT", raising=False)
    garch.io.logging_setup.reset()
    yield
    garch.io.logging_setup.reset()


# ---------------------------------------------------------------------------
# Versions
# ---------------------------------------------------------------------------

@pytest.fixture
def long_version():
    """One version with 100 lines by a single author."""
    return numbered_version("a" * 40, 100)
