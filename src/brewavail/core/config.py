"""Configuration module for the brewavail environment."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

_DEF_PREFIX = Path("/opt/homebrew")
_DEF_LOG_DIR = Path.home() / ".brewavail" / "logs"
_DEF_TIMEOUT = 120
_PREFIX_TIMEOUT = 15
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for brewavail."""

    brew: str
    prefix: Path
    timeout: int
    log_level: str
    log_dir: Path
    log_console: bool

    @property
    def taps(self) -> Path:
        return self.prefix / "Library" / "Taps"


def discover_prefix(brew: str = "brew") -> Path:
    """Discover the Homebrew prefix from the environment or from brew itself."""
    env_prefix = os.environ.get("HOMEBREW_PREFIX")
    if env_prefix:
        return Path(env_prefix)

    try:
        output = subprocess.check_output(
            [brew, "--prefix"], text=True, timeout=_PREFIX_TIMEOUT
        ).strip()
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError):
        return _DEF_PREFIX

    return Path(output) if output else _DEF_PREFIX


def load_settings() -> Settings:
    """Load settings from environment variables.

    Returns:
        A Settings instance reflecting the current environment.
    """
    brew = os.environ.get("BREWAVAIL_BREW", "brew")

    try:
        timeout = int(os.environ.get("BREWAVAIL_TIMEOUT", _DEF_TIMEOUT))
    except ValueError:
        timeout = _DEF_TIMEOUT

    log_dir = os.environ.get("BREWAVAIL_LOG_DIR")

    return Settings(
        brew=brew,
        prefix=discover_prefix(brew),
        timeout=timeout,
        log_level=os.environ.get("BREWAVAIL_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(log_dir) if log_dir else _DEF_LOG_DIR,
        log_console=os.environ.get("BREWAVAIL_LOG_CONSOLE", "").lower() in _TRUTHY,
    )
