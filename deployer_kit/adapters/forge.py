"""
Foundry adapter — the compile and format steps around generation.

Both commands come from KitConfig so projects can swap in their own
toolchain. A disabled command yields a skipped receipt.
"""

from __future__ import annotations

import logging
from pathlib import Path

from deployer_kit.adapters.shell.command import run_command
from deployer_kit.core.models.action import Receipt
from deployer_kit.core.models.config import CommandConfig

logger = logging.getLogger(__name__)


def build(config: CommandConfig, *, cwd: Path | None = None) -> Receipt:
    """Compile sources so the artifact directory is current."""
    if not config.enabled:
        return Receipt.skip(command=config.command, reason="build disabled")

    logger.info("Building: %s", " ".join(config.command))
    return run_command(config.command, cwd=cwd, timeout=config.timeout)


def format_file(config: CommandConfig, path: Path, *, cwd: Path | None = None) -> Receipt:
    """Run the formatter on one generated file."""
    command = [*config.command, str(path)]
    if not config.enabled:
        return Receipt.skip(command=command, reason="format disabled")

    logger.info("Formatting: %s", " ".join(command))
    return run_command(command, cwd=cwd, timeout=config.timeout)
