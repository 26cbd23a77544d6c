"""structlog setup for brewavail.

stdout carries the package listing, so log records only ever reach the
rotating log file and, when asked for, stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.types import FilteringBoundLogger, Processor

LOG_FILE_NAME = "brewavail.log"
MAX_LOG_BYTES = 2_000_000
LOG_BACKUPS = 2

_CONFIGURED = False


def sanitise_context(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Drop None values and coerce ``error`` to a string."""
    sanitised = {k: v for k, v in event_dict.items() if v is not None}

    if "error" in sanitised and not isinstance(sanitised["error"], str):
        sanitised["error"] = str(sanitised["error"])

    return sanitised


def default_log_file() -> Path:
    env_dir = os.environ.get("BREWAVAIL_LOG_DIR")
    log_dir = Path(env_dir) if env_dir else Path.home() / ".brewavail" / "logs"
    return log_dir / LOG_FILE_NAME


def _processors(colors: bool) -> list[Processor]:
    chain: list[Processor] = [
        sanitise_context,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if colors:
        chain += [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    return chain


def configure_logging(
    level: str = "INFO", log_file: Path | None = None, enable_console: bool = False
) -> None:
    """Route structlog through stdlib logging to a rotating file.

    structlog is configured before the log directory is touched, so a
    failure to open the file still leaves logging pointed away from stdout.

    Args:
        level: The logging level name, e.g. "DEBUG".
        log_file: Log file path; defaults to ``$BREWAVAIL_LOG_DIR/brewavail.log``.
        enable_console: Also write human-readable records to stderr.

    Raises:
        OSError: If the log directory or file cannot be created.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=_processors(colors=enable_console),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.root.setLevel(numeric_level)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.root.addHandler(console_handler)

    log_file = log_file or default_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
    )
    file_handler.setLevel(numeric_level)
    logging.root.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str = "brewavail") -> FilteringBoundLogger:
    """Get a structlog logger.

    The logger is a lazy proxy bound on first use, so module-level loggers
    pick up whatever configure_logging() installs before they log.

    Usage:
        log = get_logger(__name__)
        log.info("gather_complete", kinds="formula,cask", count=12)
    """
    return structlog.get_logger(name)
