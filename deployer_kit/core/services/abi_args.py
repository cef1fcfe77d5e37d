"""
Argument resolver — constructor and initializer parameters from an ABI.

Both lists land in one generated function signature, so a constructor
parameter that shares its name with an initializer parameter is
renamed to ``c_<name>``. Initializer names are never touched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from deployer_kit.core.models.abi import AbiEntry, AbiParameter, ResolvedArguments

logger = logging.getLogger(__name__)

INITIALIZER_NAME = "initialize"
COLLISION_PREFIX = "c_"


def find_constructor(abi: Sequence[AbiEntry]) -> AbiEntry | None:
    """First entry of type ``constructor``, if any."""
    return next((e for e in abi if e.type == "constructor"), None)


def find_initializer(abi: Sequence[AbiEntry]) -> AbiEntry | None:
    """First function named ``initialize``, if any.

    Overloads are not disambiguated; the first one declared wins and a
    warning is logged.
    """
    matches = [e for e in abi if e.type == "function" and e.name == INITIALIZER_NAME]
    if len(matches) > 1:
        logger.warning(
            "Found %d '%s' overloads, using the first (%d parameter(s))",
            len(matches),
            INITIALIZER_NAME,
            len(matches[0].inputs),
        )
    return matches[0] if matches else None


def disambiguate(
    constructor_params: Sequence[AbiParameter],
    init_params: Sequence[AbiParameter],
) -> tuple[AbiParameter, ...]:
    """Return constructor params with initializer-colliding names prefixed.

    The inputs are left untouched; renamed params are copies.
    """
    taken = {p.name for p in init_params}
    renamed = []
    for param in constructor_params:
        if param.name in taken:
            new_name = COLLISION_PREFIX + param.name
            logger.info("Renaming constructor parameter '%s' to '%s'", param.name, new_name)
            param = param.model_copy(update={"name": new_name})
        renamed.append(param)
    return tuple(renamed)


def resolve_arguments(abi: Sequence[AbiEntry]) -> ResolvedArguments:
    """Extract both parameter lists, renaming constructor-side collisions."""
    constructor = find_constructor(abi)
    initializer = find_initializer(abi)

    constructor_params: tuple[AbiParameter, ...] = tuple(constructor.inputs) if constructor else ()
    init_params = tuple(initializer.inputs) if initializer else None

    if constructor is not None and init_params is not None:
        constructor_params = disambiguate(constructor_params, init_params)

    return ResolvedArguments(constructor_params=constructor_params, init_params=init_params)
