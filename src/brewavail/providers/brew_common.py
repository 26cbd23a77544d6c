"""Common Homebrew registry helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from brewavail.core.config import Settings
from brewavail.core.errors import BrewCommandError
from brewavail.core.logging import get_logger
from brewavail.core.shell import run_json

log = get_logger(__name__)


def brew_info(settings: Settings, kind_flag: str, key: str) -> list[dict[str, Any]]:
    """Run ``brew info --json=v2 --eval-all`` for one kind.

    Args:
        settings: Runtime settings (brew executable, timeout).
        kind_flag: Either "--formula" or "--cask".
        key: The document key holding the entries, "formulae" or "casks".

    Returns:
        The entries listed under ``key``.

    Raises:
        BrewCommandError: If the document is not an object holding a list under ``key``.
    """
    cmd = (settings.brew, "info", "--json=v2", "--eval-all", kind_flag)
    data = run_json(*cmd, timeout=settings.timeout)

    items = data.get(key) if isinstance(data, dict) else None
    if not isinstance(items, list):
        log.error("unexpected_json_document", command=" ".join(cmd), key=key)
        raise BrewCommandError(
            "Unexpected JSON document",
            command=" ".join(cmd),
            error=f"expected a list under '{key}'",
            context={"document_type": type(data).__name__},
        )

    return items


def source_path(settings: Settings, item: dict[str, Any]) -> Path | None:
    """Resolve the on-disk definition file for a formula or cask.

    Args:
        settings: Runtime settings holding the Homebrew prefix.
        item: A formula or cask entry from ``brew info --json=v2``.

    Returns:
        The path inside the tap checkout, or None when the entry has no source path.
    """
    rel = item.get("ruby_source_path")
    if not rel:
        return None

    tap = item.get("tap") or ""
    if "/" not in tap:
        return settings.prefix / rel

    user, repo = tap.split("/", 1)

    return settings.taps / user / f"homebrew-{repo}" / rel
