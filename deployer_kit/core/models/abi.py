"""
ABI models — the parts of a compiler artifact the generator reads.

Only constructor and function entries with their ``inputs`` matter here;
every other ABI key (outputs, stateMutability, events, errors) is ignored.
All models are frozen: renaming a parameter produces a copy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AbiParameter(BaseModel):
    """One entry of a constructor's or function's ``inputs`` list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    internal_type: str = Field(alias="internalType")

    @model_validator(mode="before")
    @classmethod
    def _default_internal_type(cls, data: Any) -> Any:
        # Older compilers only emit the canonical ``type``.
        if isinstance(data, dict) and "internalType" not in data and "internal_type" not in data:
            if "type" in data:
                return {**data, "internalType": data["type"]}
        return data


class AbiEntry(BaseModel):
    """A member of the ABI array (constructor, function, event, ...)."""

    model_config = ConfigDict(frozen=True)

    type: str = "function"   # the ABI format lets functions omit it
    name: str | None = None
    inputs: tuple[AbiParameter, ...] = ()


class ContractArtifact(BaseModel):
    """A compiler output file for one contract (``out/<File>.sol/<Name>.json``)."""

    model_config = ConfigDict(frozen=True)

    abi: tuple[AbiEntry, ...]


class FormattedParameter(BaseModel):
    """An ABI parameter rendered as a Solidity parameter declaration."""

    model_config = ConfigDict(frozen=True)

    name: str
    declaration: str


class ResolvedArguments(BaseModel):
    """Constructor and initializer parameter lists for one contract.

    ``init_params`` is None when the contract has no ``initialize``
    function, and an empty tuple when it has one with no parameters.
    """

    model_config = ConfigDict(frozen=True)

    constructor_params: tuple[AbiParameter, ...] = ()
    init_params: tuple[AbiParameter, ...] | None = None

    @property
    def initializable(self) -> bool:
        return self.init_params is not None
