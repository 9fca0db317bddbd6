"""Command execution wrapper."""

from __future__ import annotations

import logging
import subprocess

from executor.errors import ToolTimeout, ToolUnavailable

logger = logging.getLogger("wm.executor")


def run_command(command: list[str], timeout: float | None = None) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr).

    Output is decoded as UTF-8 with undecodable bytes replaced, since window
    titles are not guaranteed to be valid UTF-8. Raises ToolUnavailable when
    the executable cannot be spawned and ToolTimeout when ``timeout``
    elapses first.
    """
    logger.debug("Running %s", command)
    try:
        proc = subprocess.run(
            command,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = exc.stderr or ""
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")
        raise ToolTimeout(command, float(timeout or 0), stderr) from exc
    except OSError as exc:
        raise ToolUnavailable(command[0], exc) from exc
    return proc.returncode, proc.stdout, proc.stderr
