"""
Kit configuration — loaded from deployer-kit.yml (all keys optional).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from deployer_kit.core.models.request import DEFAULT_OUTPUT_DIR


class CommandConfig(BaseModel):
    """An external command the generator shells out to."""

    enabled: bool = True
    command: list[str]
    timeout: float | None = None   # seconds; None = wait forever


def _default_build() -> CommandConfig:
    return CommandConfig(command=["forge", "build", "--skip", "s.sol", "--skip", "t.sol"])


def _default_format() -> CommandConfig:
    return CommandConfig(command=["forge", "fmt"])


class KitConfig(BaseModel):
    """Generator settings.

    Relative paths are resolved against the directory holding the
    config file by the loader; built-in defaults stay relative to the
    working directory.
    """

    output_dir: str = DEFAULT_OUTPUT_DIR
    artifacts_dir: str = "out"
    template: str | None = None

    build: CommandConfig = Field(default_factory=_default_build)
    format: CommandConfig = Field(default_factory=_default_format)
