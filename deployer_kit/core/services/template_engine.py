"""
Template engine — conditional blocks and named holes.

Templates are real Solidity files with two kinds of markers:

  1. Conditional blocks, written as comments so the file stays valid:

        // __IF_FEATURE_xxx__
        ... kept only if feature 'xxx' is enabled ...
        // __ENDIF__

        // __IF_NOT_FEATURE_xxx__
        ... kept only if feature 'xxx' is DISABLED ...
        // __ENDIF__

  2. Named holes:  __HOLE_NAME__  (upper case, digits, underscores)

Holes are filled in a single pass, so text inserted into one hole is
never scanned for other holes. A hole without a value is an error.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

from deployer_kit.core.errors import TemplateError

# Innermost block first: the body may not open another block.
_BLOCK = re.compile(
    r"[ \t]*//[ \t]*__IF_(NOT_)?FEATURE_(\w+?)__[ \t]*\n"
    r"((?:(?!//[ \t]*__IF_(?:NOT_)?FEATURE_).)*?)"
    r"[ \t]*//[ \t]*__ENDIF__[ \t]*(?:\n|\Z)",
    re.DOTALL,
)

_HOLE = re.compile(r"__([A-Z][A-Z0-9_]*?)__")

_LEFTOVER_MARKER = re.compile(r"//[ \t]*__(?:IF_(?:NOT_)?FEATURE_\w+?|ENDIF)__")


def process_blocks(content: str, features: Mapping[str, bool]) -> str:
    """Keep or drop every conditional block according to *features*."""

    def _replace(m: re.Match) -> str:
        negate, key, body = m.group(1), m.group(2), m.group(3)
        enabled = bool(features.get(key, False))
        return body if enabled != bool(negate) else ""

    while True:
        content, count = _BLOCK.subn(_replace, content)
        if count == 0:
            break

    leftover = _LEFTOVER_MARKER.search(content)
    if leftover:
        raise TemplateError(f"Unbalanced conditional marker: {leftover.group(0)}")
    return content


def holes(content: str) -> set[str]:
    """Names of every hole in *content*."""
    return set(_HOLE.findall(content))


def fill_holes(content: str, values: Mapping[str, str]) -> str:
    """Replace every ``__NAME__`` with ``values[NAME]`` in one pass.

    Raises:
        TemplateError: A hole has no value.
    """
    missing = sorted(holes(content) - set(values))
    if missing:
        raise TemplateError(f"Template holes without a value: {', '.join(missing)}")
    return _HOLE.sub(lambda m: values[m.group(1)], content)


def process_template(
    content: str,
    features: Mapping[str, bool],
    values: Mapping[str, str],
) -> str:
    """Resolve conditional blocks, then fill holes."""
    content = process_blocks(content, features)
    content = fill_holes(content, values)

    # Clean up empty lines left by removed blocks (max 2 consecutive)
    return re.sub(r"\n{3,}", "\n\n", content)


def read_template(path: str | Path) -> str:
    """Read a custom template file."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Cannot read template {path}: {e}") from e
