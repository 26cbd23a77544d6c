"""Tests for environment-driven settings (core/config.py)."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from brewavail.core import config


def test_prefix_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOMEBREW_PREFIX", "/usr/local")
    assert config.discover_prefix() == Path("/usr/local")


def test_prefix_falls_back_when_brew_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOMEBREW_PREFIX", raising=False)

    def missing(*args: object, **kwargs: object) -> str:
        raise FileNotFoundError("brew")

    monkeypatch.setattr(subprocess, "check_output", missing)
    assert config.discover_prefix() == Path("/opt/homebrew")


def test_load_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BREWAVAIL_BREW", "/opt/homebrew/bin/brew")
    monkeypatch.setenv("BREWAVAIL_TIMEOUT", "30")
    monkeypatch.setenv("BREWAVAIL_LOG_LEVEL", "debug")
    monkeypatch.setenv("BREWAVAIL_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("BREWAVAIL_LOG_CONSOLE", "yes")

    s = config.load_settings()
    assert s.brew == "/opt/homebrew/bin/brew"
    assert s.timeout == 30
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.log_console is True
    assert s.taps == Path("/opt/homebrew/Library/Taps")


def test_bad_timeout_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BREWAVAIL_TIMEOUT", "soon")
    assert config.load_settings().timeout == 120


@pytest.mark.parametrize(
    "error",
    [
        PermissionError("brew"),
        subprocess.TimeoutExpired(cmd=["brew", "--prefix"], timeout=15),
        subprocess.CalledProcessError(1, ["brew", "--prefix"]),
    ],
)
def test_prefix_falls_back_on_brew_failures(
    monkeypatch: pytest.MonkeyPatch, error: Exception
) -> None:
    monkeypatch.delenv("HOMEBREW_PREFIX", raising=False)
    seen: dict[str, object] = {}

    def failing(*args: object, **kwargs: object) -> str:
        seen.update(kwargs)
        raise error

    monkeypatch.setattr(subprocess, "check_output", failing)
    assert config.discover_prefix() == Path("/opt/homebrew")
    assert seen["timeout"] == 15
