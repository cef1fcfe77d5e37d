"""
Type formatter — ABI ``internalType`` → Solidity parameter declaration.

Rules are checked top to bottom and the first match wins. Order
matters: ``enum Color[3]`` must hit the enum-array rule before the
generic array rule and the bare-enum rule.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from deployer_kit.core.models.abi import AbiParameter, FormattedParameter

MEMORY = " memory"

_ARRAY_SUFFIX = re.compile(r"\[\d*\]$")

Predicate = Callable[[str], bool]
Transform = Callable[[str], str]


def _is_array(t: str) -> bool:
    return _ARRAY_SUFFIX.search(t) is not None


def _strip(prefix: str) -> Transform:
    return lambda t: t[len(prefix):]


def _memory(t: str) -> str:
    return t + MEMORY


def _strip_memory(prefix: str) -> Transform:
    return lambda t: t[len(prefix):] + MEMORY


# (label, predicate, transform)
FORMAT_RULES: list[tuple[str, Predicate, Transform]] = [
    ("string", lambda t: t.startswith("string"), _memory),
    ("bytes", lambda t: t.startswith("bytes"), _memory),
    ("contract", lambda t: t.startswith("contract"), _strip("contract ")),
    ("struct-array", lambda t: t.startswith("struct") and _is_array(t), _strip_memory("struct ")),
    ("enum-array", lambda t: t.startswith("enum") and _is_array(t), _strip_memory("enum ")),
    ("array", _is_array, _memory),
    ("enum", lambda t: t.startswith("enum"), _strip("enum ")),
    ("struct", lambda t: t.startswith("struct"), _strip_memory("struct ")),
]


def format_type(internal_type: str) -> str:
    """Apply the first matching rule; value types pass through unchanged."""
    for _label, predicate, transform in FORMAT_RULES:
        if predicate(internal_type):
            return transform(internal_type)
    return internal_type


def format_input(internal_type: str, name: str) -> FormattedParameter:
    """Render one parameter as ``<type> <name>``."""
    return FormattedParameter(declaration=f"{format_type(internal_type)} {name}", name=name)


def format_params(params: Iterable[AbiParameter]) -> list[FormattedParameter]:
    """Format every parameter, keeping order."""
    return [format_input(p.internal_type, p.name) for p in params]
