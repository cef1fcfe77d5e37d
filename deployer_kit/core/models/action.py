"""
Receipt model — the result of one external command run.

Command runners return Receipts, never exceptions. The caller decides
whether a failed receipt is fatal (build) or only worth a warning (format).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Receipt(BaseModel):
    """Outcome of an external command."""

    command: list[str]
    status: Literal["ok", "skipped", "failed"] = "ok"
    duration_ms: int = 0

    output: str = ""
    error: str | None = None
    return_code: int | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the command failed."""
        return self.status == "failed"

    @classmethod
    def success(cls, command: list[str], output: str = "", **kwargs: Any) -> Receipt:
        """Create a success receipt."""
        return cls(command=command, status="ok", output=output, **kwargs)

    @classmethod
    def failure(cls, command: list[str], error: str, **kwargs: Any) -> Receipt:
        """Create a failure receipt."""
        return cls(command=command, status="failed", error=error, **kwargs)

    @classmethod
    def skip(cls, command: list[str], reason: str = "", **kwargs: Any) -> Receipt:
        """Create a skip receipt."""
        return cls(command=command, status="skipped", output=reason, **kwargs)
