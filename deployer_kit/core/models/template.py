"""
Generated file model — the rendered deployer before it is written.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:    Output path, relative to the working directory or absolute.
        content: Full file content.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""
