"""Renderers for the package listing."""

from __future__ import annotations

import json
from typing import Iterable

import typer
from rich.console import Console

from brewavail.core.models import PackageDescriptor

err_console = Console(stderr=True)


def render_line(item: PackageDescriptor) -> str:
    """Format one descriptor as ``<kind>: <name> (<version>) - <info>``."""
    return f"{item.kind.value}: {item.name} ({item.version}) - {item.info}"


def render_lines(items: Iterable[PackageDescriptor]) -> str:
    """Render descriptors one per line, without a trailing newline.

    Args:
        items: The descriptors in output order.

    Returns:
        The joined lines, or an empty string for no items.
    """
    return "\n".join(render_line(item) for item in items)


def render_json(items: Iterable[PackageDescriptor]) -> str:
    """Render descriptors as a pretty-printed JSON array.

    Absent optional fields are left out of each object rather than emitted
    as null.

    Args:
        items: The descriptors in output order.

    Returns:
        The JSON document, without a trailing newline.
    """
    return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)


def emit(items: list[PackageDescriptor], as_json: bool) -> None:
    """Write the complete listing to stdout.

    Args:
        items: The fully gathered descriptors.
        as_json: Whether to write JSON instead of text lines.
    """
    if as_json:
        typer.echo(render_json(items))
    elif items:
        typer.echo(render_lines(items))
