"""
Generation request — one normalized CLI invocation.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict

DEFAULT_OUTPUT_DIR = "script/deployers"
DEFAULT_SOURCE_EXT = "sol"


class GenerationRequest(BaseModel):
    """What to generate: source file, where to put it, which contract.

    Attributes:
        source_path:   Path to the contract source, exactly as given.
        output_dir:    Output directory (None = config / built-in default).
        contract_name: Contract inside the source file (None = file stem).
    """

    model_config = ConfigDict(frozen=True)

    source_path: str
    output_dir: str | None = None
    contract_name: str | None = None

    @property
    def file_name(self) -> str:
        return PurePosixPath(self.source_path.replace("\\", "/")).name

    @property
    def stem(self) -> str:
        """File name without its last extension (``My.Token.sol`` → ``My.Token``)."""
        name = self.file_name
        if "." not in name:
            return name
        return name.rsplit(".", 1)[0]

    @property
    def source_ext(self) -> str:
        name = self.file_name
        if "." not in name:
            return DEFAULT_SOURCE_EXT
        return name.rsplit(".", 1)[1] or DEFAULT_SOURCE_EXT

    @property
    def resolved_contract_name(self) -> str:
        return self.contract_name or self.stem

    def resolve_output_dir(self, default: str = DEFAULT_OUTPUT_DIR) -> str:
        """The ``--output`` value, or *default* (config / built-in) when absent."""
        return self.output_dir or default
