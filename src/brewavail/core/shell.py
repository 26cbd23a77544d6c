"""Blocking shell command execution with timeout and JSON parsing."""

from __future__ import annotations

import json
import os
import subprocess
import time
from typing import Any, Optional

from brewavail.core.errors import BrewCommandError, BrewNotFoundError, BrewTimeoutError
from brewavail.core.logging import get_logger

log = get_logger(__name__)

ENV_OVERRIDES = {
    "LANG": "C",
    "HOMEBREW_NO_COLOR": "1",
    "HOMEBREW_NO_AUTO_UPDATE": "1",
}


def run_capture(
    *cmd: str, timeout: Optional[int] = 120
) -> tuple[str, str, int]:
    """Run a command and wait for it to finish.

    Args:
        *cmd: Command and its arguments to run.
        timeout: Timeout in seconds.

    Returns:
        A tuple of (stdout, stderr, returncode).

    Raises:
        BrewTimeoutError: If the command times out.
        BrewNotFoundError: If the executable cannot be started.
    """
    start = time.perf_counter()
    command = " ".join(cmd)
    log.debug("command_start", command=command, timeout=timeout)

    try:
        proc = subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            timeout=timeout,
            env={**os.environ, **ENV_OVERRIDES},
        )
    except subprocess.TimeoutExpired as e:
        duration_ms = int((time.perf_counter() - start) * 1000)
        log.error(
            "command_timeout",
            command=command,
            timeout=timeout,
            duration_ms=duration_ms
        )
        raise BrewTimeoutError(
            command=command,
            timeout=timeout,
            context={"duration_ms": duration_ms}
        ) from e
    except OSError as e:
        log.error("command_not_started", command=command, error=str(e))
        raise BrewNotFoundError(command=cmd[0], context={"error": str(e)}) from e

    duration_ms = int((time.perf_counter() - start) * 1000)
    log.info(
        "command_complete",
        command=command,
        returncode=proc.returncode,
        duration_ms=duration_ms
    )

    return proc.stdout.strip(), proc.stderr.strip(), proc.returncode


def run_json(*cmd: str, timeout: Optional[int] = 120) -> Any:
    """Run a command and parse its JSON output.

    Args:
        *cmd: Command and its arguments to run.
        timeout: Timeout in seconds.

    Returns:
        Parsed JSON output.

    Raises:
        BrewCommandError: If the command fails or JSON parsing fails.
        BrewTimeoutError: If the command times out.
    """
    command = " ".join(cmd)
    out, err, code = run_capture(*cmd, timeout=timeout)

    if code != 0:
        log.error(
            "command_failed",
            command=command,
            error=err or out,
            returncode=code
        )
        raise BrewCommandError(
            command=command,
            returncode=code,
            error=err or out,
        )

    try:
        result = json.loads(out)
    except json.JSONDecodeError as e:
        log.error(
            "json_parse_failed",
            command=command,
            error=str(e),
            exc_info=True
        )
        raise BrewCommandError(
            "Failed to parse JSON output",
            command=command,
            returncode=code,
            error=str(e),
            context={"output_preview": out[:200] if out else ""}
        ) from e

    log.debug("json_parsed", command=command)

    return result
