"""Test harness for garch.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, FakeQueries, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.builders import (
    commit_log,
    commit_record,
    porcelain,
    porcelain_lines,
    porcelain_record,
)
from tests.harness.fake_queries import FakeQueries
from tests.harness.versions import make_version, numbered_version, version_with_lines
from tests.harness.interactions import (
    press_and_settle,
    press_sequence,
    resize_and_settle,
    wheel_and_settle,
)

__all__ = [
    "run_app",
    "commit_log",
    "commit_record",
    "porcelain",
    "porcelain_lines",
    "porcelain_record",
    "FakeQueries",
    "make_version",
    "numbered_version",
    "version_with_lines",
    "press_and_settle",
    "press_sequence",
    "resize_and_settle",
    "wheel_and_settle",
]
