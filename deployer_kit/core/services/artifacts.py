"""
Artifact locator — find and parse the compiler output for a contract.

Foundry writes one JSON file per contract under
``<artifacts_dir>/<SourceFile>.<ext>/<ContractName>.json``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from deployer_kit.core.errors import ArtifactNotFoundError, ArtifactParseError
from deployer_kit.core.models.abi import ContractArtifact
from deployer_kit.core.models.request import GenerationRequest

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Contract not found. Did you provide the correct contract name?"


def artifact_path(request: GenerationRequest, artifacts_dir: str | Path = "out") -> Path:
    """Path of the compiled artifact for the request's contract."""
    return (
        Path(artifacts_dir)
        / f"{request.stem}.{request.source_ext}"
        / f"{request.resolved_contract_name}.json"
    )


def load_artifact(path: Path) -> ContractArtifact:
    """Read and parse a compiled artifact.

    Raises:
        ArtifactNotFoundError: The file does not exist or cannot be read.
        ArtifactParseError: The file is not JSON or has no valid ``abi`` list.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Cannot read artifact %s: %s", path, e)
        raise ArtifactNotFoundError(f"{NOT_FOUND_MESSAGE} (looked for {path})", path=path) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ArtifactParseError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict) or "abi" not in data:
        raise ArtifactParseError(f"No 'abi' field in {path}")

    try:
        artifact = ContractArtifact.model_validate(data)
    except ValidationError as e:
        raise ArtifactParseError(f"Malformed ABI in {path}: {e}") from e

    logger.debug("Loaded %d ABI entries from %s", len(artifact.abi), path)
    return artifact
