"""Homebrew Cask registry."""

from __future__ import annotations

import time
from typing import Any, List

from brewavail.core.config import Settings
from brewavail.core.logging import get_logger
from brewavail.core.models import Cask
from brewavail.providers.brew_common import brew_info, source_path

log = get_logger(__name__)


def cask_from_item(settings: Settings, c: dict[str, Any]) -> Cask:
    """Build a Cask record from a ``brew info`` entry."""
    return Cask(
        token=c.get("token"),
        version=c.get("version"),
        desc=c.get("desc"),
        outdated=bool(c.get("outdated")),
        installed=c.get("installed") is not None,
        path=source_path(settings, c),
    )


class BrewCaskRegistry:
    """Every cask Homebrew can evaluate locally."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def all(self) -> List[Cask]:
        """List all available Homebrew casks.

        Returns:
            A list of Cask records in brew's order.
        """
        start = time.perf_counter()
        log.debug("cask_list_start")

        items = brew_info(self.settings, "--cask", "casks")
        casks = [cask_from_item(self.settings, c) for c in items]

        duration_ms = int((time.perf_counter() - start) * 1000)
        log.info(
            "cask_list_complete",
            count=len(casks),
            duration_ms=duration_ms
        )

        return casks
