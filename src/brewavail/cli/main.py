"""CLI entry point for brewavail."""

from __future__ import annotations

import sys

import typer

from brewavail.cli.renderers import emit, err_console
from brewavail.core.config import load_settings
from brewavail.core.errors import (
    BrewError,
    exit_code_for,
    format_error_message,
)
from brewavail.core.logging import LOG_FILE_NAME, configure_logging, get_logger
from brewavail.core.repo import default_repository
from brewavail.core.selection import Selection

log = get_logger(__name__)

app = typer.Typer(
    help="List all available formulae and casks in a clean format.",
    add_completion=False,
)


def handle_error(error: Exception) -> int:
    """Report an error on stderr and return the exit code.

    Args:
        error: The exception to handle.

    Returns:
        An integer exit code.
    """
    if isinstance(error, BrewError):
        log.error(
            "cli_error",
            error_type=type(error).__name__,
            message=error.message,
            context=error.context,
        )
        err_console.print(f"\n{format_error_message(error)}\n", style="bold red", markup=False)
    else:
        log.error(
            "unexpected_error",
            error=str(error),
            exc_info=True
        )
        err_console.print(
            f"\n⚠️ Unexpected error occurred: {error}\n",
            style="bold red",
            markup=False,
        )

    return exit_code_for(error)


@app.command()
def available(
    casks: bool = typer.Option(False, "--casks", help="List only casks."),
    formulae: bool = typer.Option(False, "--formulae", help="List only formulae."),
    as_json: bool = typer.Option(False, "--json", help="Output in clean JSON format."),
    deps: bool = typer.Option(
        False, "--deps", help="Include dependencies and dependents."
    ),
) -> None:
    """List all available formulae and casks in a clean format.

    Args:
        casks: Only list casks. Takes precedence over --formulae.
        formulae: Only list formulae.
        as_json: Emit a JSON array instead of text lines.
        deps: Include dependency and dependent names.
    """
    selection = Selection.from_flags(
        casks=casks, formulae=formulae, as_json=as_json, deps=deps
    )

    try:
        settings = load_settings()
        configure_logging(
            level=settings.log_level,
            log_file=settings.log_dir / LOG_FILE_NAME,
            enable_console=settings.log_console,
        )
        items = default_repository(settings).gather(selection)
    except Exception as e:
        sys.exit(handle_error(e))

    emit(items, selection.as_json)
    log.info("listing_written", count=len(items), json=selection.as_json)


if __name__ == "__main__":
    app()
