"""
Error hierarchy for the deployer generator.

Every failure that aborts a generation run derives from
``DeployerKitError``. The ``kind`` attribute is the stable label
reported in ``--json`` output.
"""

from __future__ import annotations


class DeployerKitError(Exception):
    """Base class for all generator errors."""

    kind = "error"


class ConfigError(DeployerKitError):
    """Raised when deployer-kit.yml is unreadable or invalid."""

    kind = "config"


class BuildError(DeployerKitError):
    """Raised when the external build command fails.

    Attributes:
        receipt: The failed command receipt, when the command was started.
    """

    kind = "build"

    def __init__(self, message: str, receipt=None):
        super().__init__(message)
        self.receipt = receipt


class ArtifactNotFoundError(DeployerKitError):
    """Raised when the compiled artifact for a contract cannot be read."""

    kind = "artifact_not_found"

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class ArtifactParseError(DeployerKitError):
    """Raised when an artifact is not valid JSON or has no usable ``abi``."""

    kind = "parse"


class TemplateError(DeployerKitError):
    """Raised when a template hole is unknown or left without a value."""

    kind = "template"


class GenerationWriteError(DeployerKitError):
    """Raised when the generated file cannot be written."""

    kind = "write"
