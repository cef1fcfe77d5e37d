"""
Shell command adapter — run an external tool and capture its output.

The generator shells out twice: once to compile sources into ABI
artifacts, once to format the generated script. Both go through
``run_command``, which never raises; the outcome is a Receipt.
"""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from deployer_kit.core.models.action import Receipt

logger = logging.getLogger(__name__)


def run_command(
    command: list[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> Receipt:
    """Run *command* (argv list, no shell) to completion.

    Args:
        command: Program and arguments.
        cwd: Working directory (default: current directory).
        timeout: Seconds before giving up; None waits indefinitely.

    Returns:
        Receipt with status ``ok`` on exit code 0, ``failed`` otherwise.
    """
    if not command:
        return Receipt.failure(command=[], error="Empty command")

    logger.debug("Executing: %s (cwd=%s)", " ".join(command), cwd or ".")
    start = time.monotonic()

    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        return Receipt.failure(
            command=command,
            error=f"Command not found: {command[0]}",
        )
    except subprocess.TimeoutExpired:
        return Receipt.failure(
            command=command,
            error=f"Command timed out after {timeout}s",
            metadata={"timeout": timeout},
        )
    except OSError as e:
        return Receipt.failure(command=command, error=f"Command execution error: {e}")

    elapsed_ms = int((time.monotonic() - start) * 1000)
    output = result.stdout.strip()
    stderr = result.stderr.strip()

    if result.returncode == 0:
        return Receipt.success(
            command=command,
            output=output,
            duration_ms=elapsed_ms,
            return_code=result.returncode,
            metadata={"stderr": stderr},
        )

    return Receipt.failure(
        command=command,
        error=stderr or output or f"Command exited with code {result.returncode}",
        duration_ms=elapsed_ms,
        return_code=result.returncode,
    )
