"""Homebrew formula registry."""

from __future__ import annotations

import time
from typing import Any, List

from brewavail.core.config import Settings
from brewavail.core.logging import get_logger
from brewavail.core.models import Formula
from brewavail.providers.brew_common import brew_info, source_path

log = get_logger(__name__)


def required_by_index(items: list[dict[str, Any]]) -> dict[str, list[str]]:
    """Reverse the direct dependency lists.

    Args:
        items: Formula entries from ``brew info --json=v2``.

    Returns:
        A mapping of formula name to the names that depend on it, in
        enumeration order.
    """
    index: dict[str, list[str]] = {}
    for f in items:
        name = f.get("name")
        if not name:
            continue
        for dep in f.get("dependencies") or []:
            index.setdefault(dep, []).append(name)

    return index


def formula_from_item(
    settings: Settings, f: dict[str, Any], required_by: list[str] | None = None
) -> Formula:
    """Build a Formula record from a ``brew info`` entry."""
    versions = f.get("versions") or {}

    return Formula(
        name=f.get("name"),
        version=versions.get("stable") or versions.get("head"),
        desc=f.get("desc"),
        outdated=bool(f.get("outdated")),
        installed=bool(f.get("installed")),
        path=source_path(settings, f),
        deps=list(f.get("dependencies") or []),
        required_by=list(required_by or []),
    )


class BrewFormulaRegistry:
    """Every formula Homebrew can evaluate locally."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def all(self) -> List[Formula]:
        """List all available Homebrew formulae.

        Returns:
            A list of Formula records in brew's order.
        """
        start = time.perf_counter()
        log.debug("formula_list_start")

        items = brew_info(self.settings, "--formula", "formulae")
        index = required_by_index(items)
        formulae = [
            formula_from_item(self.settings, f, index.get(f.get("name") or "", []))
            for f in items
        ]

        duration_ms = int((time.perf_counter() - start) * 1000)
        log.info(
            "formula_list_complete",
            count=len(formulae),
            duration_ms=duration_ms
        )

        return formulae
