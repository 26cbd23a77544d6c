"""Shared pytest fixtures for the brewavail test suite.

Guidelines
----------
* No test runs a real ``brew``; registries are faked or subprocess is patched.
* Logs go to a throwaway directory, never to stdout.
"""

from __future__ import annotations

import os
import tempfile

os.environ["BREWAVAIL_LOG_DIR"] = tempfile.mkdtemp(prefix="brewavail-logs-")
os.environ["HOMEBREW_PREFIX"] = "/opt/homebrew"
os.environ.pop("BREWAVAIL_LOG_CONSOLE", None)

from pathlib import Path  # noqa: E402
from typing import Iterable  # noqa: E402

import pytest  # noqa: E402

from brewavail.core.config import Settings  # noqa: E402
from brewavail.core.logging import configure_logging  # noqa: E402
from brewavail.core.models import Cask, Formula  # noqa: E402

configure_logging(level="DEBUG")


class FakeRegistry:
    """In-memory registry returning fixed records."""

    def __init__(self, records: Iterable[object] = ()) -> None:
        self.records = list(records)
        self.calls = 0

    def all(self) -> list[object]:
        self.calls += 1
        return list(self.records)


class FailingRegistry:
    """Registry whose enumeration blows up."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def all(self) -> list[object]:
        self.calls += 1
        raise self.error


def make_formula(**overrides: object) -> Formula:
    defaults: dict[str, object] = {
        "name": "wget",
        "version": "1.21",
        "desc": "Internet file retriever",
        "outdated": False,
        "installed": True,
        "path": Path("/opt/homebrew/Library/Taps/homebrew/homebrew-core/Formula/w/wget.rb"),
        "deps": ["openssl@3", "libidn2"],
        "required_by": [],
    }
    defaults.update(overrides)
    return Formula(**defaults)  # type: ignore[arg-type]


def make_cask(**overrides: object) -> Cask:
    defaults: dict[str, object] = {
        "token": "foo",
        "version": "1.2",
        "desc": "Foo tool",
        "outdated": False,
        "installed": True,
        "path": "/opt/foo",
    }
    defaults.update(overrides)
    return Cask(**defaults)  # type: ignore[arg-type]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        brew="brew",
        prefix=Path("/opt/homebrew"),
        timeout=5,
        log_level="DEBUG",
        log_dir=tmp_path,
        log_console=False,
    )
