"""
Domain models — Pydantic types for the deployer generator.

All models are re-exported here for convenient access:

    from deployer_kit.core.models import AbiEntry, GenerationRequest, KitConfig
"""

from deployer_kit.core.models.abi import (
    AbiEntry,
    AbiParameter,
    ContractArtifact,
    FormattedParameter,
    ResolvedArguments,
)
from deployer_kit.core.models.action import Receipt
from deployer_kit.core.models.config import CommandConfig, KitConfig
from deployer_kit.core.models.request import GenerationRequest
from deployer_kit.core.models.template import GeneratedFile

__all__ = [
    # abi.py
    "AbiEntry",
    "AbiParameter",
    # config.py
    "CommandConfig",
    "ContractArtifact",
    "FormattedParameter",
    # template.py
    "GeneratedFile",
    # request.py
    "GenerationRequest",
    "KitConfig",
    # action.py
    "Receipt",
    "ResolvedArguments",
]
