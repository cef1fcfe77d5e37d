"""
Generate use case — build, load the ABI, render and write one deployer.

Pipeline (each stage aborts the rest on failure):

    build → locate + parse artifact → resolve arguments → render → write → format

Only the final format step is allowed to fail softly: the file is
already on disk, so a formatter failure becomes a warning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from deployer_kit.adapters import forge
from deployer_kit.core.errors import BuildError, DeployerKitError, GenerationWriteError
from deployer_kit.core.models.abi import ResolvedArguments
from deployer_kit.core.models.config import KitConfig
from deployer_kit.core.models.request import GenerationRequest
from deployer_kit.core.models.template import GeneratedFile
from deployer_kit.core.services.abi_args import resolve_arguments
from deployer_kit.core.services.artifacts import artifact_path, load_artifact
from deployer_kit.core.services.generators.deployer import generate_deployer
from deployer_kit.core.services.template_engine import read_template

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of one generator run."""

    ok: bool = False
    contract_name: str = ""
    artifact_path: Path | None = None
    output_path: Path | None = None
    resolved: ResolvedArguments | None = None
    built: bool = False
    formatted: bool = False
    error: str | None = None
    error_kind: str | None = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        resolved = self.resolved
        return {
            "ok": self.ok,
            "contract_name": self.contract_name,
            "artifact_path": str(self.artifact_path) if self.artifact_path else None,
            "output_path": str(self.output_path) if self.output_path else None,
            "initializable": resolved.initializable if resolved else None,
            "constructor_params": (
                [p.name for p in resolved.constructor_params] if resolved else []
            ),
            "init_params": (
                [p.name for p in resolved.init_params]
                if resolved and resolved.init_params is not None
                else None
            ),
            "built": self.built,
            "formatted": self.formatted,
            "error": self.error,
            "error_kind": self.error_kind,
            "warnings": self.warnings,
        }


def write_generated(generated: GeneratedFile) -> Path:
    """Write *generated* to disk, creating parent directories.

    Raises:
        GenerationWriteError: The directory or file could not be written.
    """
    path = Path(generated.path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(generated.content, encoding="utf-8")
    except OSError as e:
        raise GenerationWriteError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %s (%d bytes)", path, len(generated.content))
    return path


def run_generate(
    request: GenerationRequest,
    config: KitConfig | None = None,
    *,
    build: bool = True,
    fmt: bool = True,
) -> GenerateResult:
    """Generate the deployer script for *request*.

    Args:
        request: Normalized CLI input.
        config: Loaded configuration (default: built-in defaults).
        build: Run the build command before loading the artifact.
        fmt: Run the formatter on the written file.

    Returns:
        GenerateResult. ``error`` / ``error_kind`` are set on failure;
        ``warnings`` carries a formatter failure on success.
    """
    config = config or KitConfig()
    result = GenerateResult(contract_name=request.resolved_contract_name)

    try:
        if build:
            receipt = forge.build(config.build)
            if receipt.failed:
                raise BuildError(f"Build failed: {receipt.error}", receipt=receipt)
            result.built = receipt.ok

        result.artifact_path = artifact_path(request, config.artifacts_dir)
        artifact = load_artifact(result.artifact_path)

        result.resolved = resolve_arguments(artifact.abi)

        template = read_template(config.template) if config.template else None
        generated = generate_deployer(
            request,
            result.resolved,
            output_dir=request.resolve_output_dir(config.output_dir),
            template=template,
        )
        result.output_path = write_generated(generated)

    except DeployerKitError as e:
        logger.debug("Generation aborted (%s): %s", e.kind, e)
        result.error = str(e)
        result.error_kind = e.kind
        return result

    result.ok = True

    if fmt:
        receipt = forge.format_file(config.format, result.output_path)
        if receipt.failed:
            warning = f"Formatter failed, {result.output_path} left unformatted: {receipt.error}"
            logger.info("Formatter failed: %s", receipt.error)
            result.warnings.append(warning)
        result.formatted = receipt.ok

    return result
