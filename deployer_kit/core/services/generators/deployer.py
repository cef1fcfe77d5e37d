"""
Deployer generator — produce ``<Contract>Deployer.s.sol`` from resolved ABI arguments.

The default template deploys the contract behind a
TransparentUpgradeableProxy and wires the ``initialize`` call. Contracts
without an initializer still get a deployer, but its init data reverts.
"""

from __future__ import annotations

import re
from pathlib import Path

from deployer_kit.core.models.abi import FormattedParameter, ResolvedArguments
from deployer_kit.core.models.request import GenerationRequest
from deployer_kit.core.models.template import GeneratedFile
from deployer_kit.core.services.template_engine import process_template
from deployer_kit.core.services.type_format import format_params

DEPLOYER_SUFFIX = "Deployer.s.sol"

# ERC-1967 admin slot: bytes32(uint256(keccak256("eip1967.proxy.admin")) - 1)
_ADMIN_SLOT = "b53127684a568b3173ae13b9f8a6016e243e63b6e8ee1178d6a717850b5d6103"

DEPLOYER_TEMPLATE = """\
// SPDX-License-Identifier: UNLICENSED
pragma solidity ^0.8.0;

////////////////////////////////////////////////////
// AUTOGENERATED - DO NOT EDIT THIS FILE DIRECTLY //
////////////////////////////////////////////////////

import "forge-std/Script.sol";

import "__SOURCE_PATH__";
import {ProxyAdmin} from "@openzeppelin/contracts/proxy/transparent/ProxyAdmin.sol";
import {TransparentUpgradeableProxy} from "@openzeppelin/contracts/proxy/transparent/TransparentUpgradeableProxy.sol";

abstract contract __CONTRACT__Deployer is Script {
    __CONTRACT__ internal __INSTANCE__;
    ProxyAdmin internal __INSTANCE__ProxyAdmin;
    address internal __INSTANCE__Implementation;

    // __IF_FEATURE_initializable__
    /// @dev Deploys __CONTRACT__ behind a TransparentUpgradeableProxy and calls initialize.
    // __ENDIF__
    // __IF_NOT_FEATURE_initializable__
    /// @dev __CONTRACT__ has no initialize function; this helper always reverts, use deploy__CONTRACT__Implementation.
    // __ENDIF__
    function deploy__CONTRACT__Transparent(address proxyAdminOwner__CONSTRUCTOR_ARGS____INIT_ARGS__)
        internal
        returns (address)
    {
        bytes memory initData = __INIT_DATA__;

        vm.startBroadcast(msg.sender);

        __INSTANCE__Implementation = address(new __CONTRACT__(__CONSTRUCTOR_ARG_NAMES__));
        __INSTANCE__ = __CONTRACT__(
            address(new TransparentUpgradeableProxy(__INSTANCE__Implementation, proxyAdminOwner, initData))
        );

        vm.stopBroadcast();

        __INSTANCE__ProxyAdmin =
            ProxyAdmin(address(uint160(uint256(vm.load(address(__INSTANCE__), hex"%s")))));

        return address(__INSTANCE__);
    }
    // __IF_NOT_FEATURE_initializable__

    /// @dev Deploys __CONTRACT__ without a proxy.
    function deploy__CONTRACT__Implementation(__CONSTRUCTOR_PARAMS__) internal returns (address) {
        vm.broadcast(msg.sender);
        __INSTANCE__Implementation = address(new __CONTRACT__(__CONSTRUCTOR_ARG_NAMES__));
        __INSTANCE__ = __CONTRACT__(__INSTANCE__Implementation);

        return __INSTANCE__Implementation;
    }
    // __ENDIF__
}
""" % _ADMIN_SLOT


def instance_name(contract_name: str) -> str:
    """lowerCamel variable name: non-alphanumerics dropped, first char lowered."""
    cleaned = re.sub(r"[^a-zA-Z0-9]", "", contract_name)
    return cleaned[:1].lower() + cleaned[1:]


def deployer_path(output_dir: str | Path, contract_name: str) -> Path:
    """Where the deployer for *contract_name* is written."""
    return Path(output_dir) / f"{contract_name}{DEPLOYER_SUFFIX}"


def _declarations(params: list[FormattedParameter]) -> str:
    # Leading separator only when non-empty, so signatures never dangle.
    if not params:
        return ""
    return ", " + ", ".join(p.declaration for p in params)


def _names(params: list[FormattedParameter]) -> str:
    return ", ".join(p.name for p in params)


def init_data(contract_name: str, init_params: list[FormattedParameter] | None) -> str:
    """The initializer call expression, or a reverting stub without one."""
    if init_params is None:
        return f'"";\n        revert("{contract_name} is not initializable")'
    return f"abi.encodeCall({contract_name}.initialize, ({_names(init_params)}))"


def build_values(request: GenerationRequest, resolved: ResolvedArguments) -> dict[str, str]:
    """Hole values for one contract."""
    contract_name = request.resolved_contract_name
    constructor = format_params(resolved.constructor_params)
    init = format_params(resolved.init_params) if resolved.init_params is not None else None

    return {
        "CONTRACT": contract_name,
        "INSTANCE": instance_name(contract_name),
        "CONSTRUCTOR_ARGS": _declarations(constructor),
        "CONSTRUCTOR_PARAMS": ", ".join(p.declaration for p in constructor),
        "CONSTRUCTOR_ARG_NAMES": _names(constructor),
        "INIT_ARGS": _declarations(init or []),
        "INIT_ARG_NAMES": _names(init or []),
        "INIT_DATA": init_data(contract_name, init),
        "SOURCE_PATH": request.source_path,
    }


def generate_deployer(
    request: GenerationRequest,
    resolved: ResolvedArguments,
    *,
    output_dir: str | Path,
    template: str | None = None,
) -> GeneratedFile:
    """Render the deployer script for *request*.

    Args:
        request: The normalized CLI request.
        resolved: Constructor / initializer parameters from the ABI.
        output_dir: Directory the file will be written to.
        template: Custom template text (default: DEPLOYER_TEMPLATE).

    Returns:
        GeneratedFile (not yet written).
    """
    contract_name = request.resolved_contract_name
    content = process_template(
        template if template is not None else DEPLOYER_TEMPLATE,
        features={"initializable": resolved.initializable},
        values=build_values(request, resolved),
    )
    return GeneratedFile(
        path=str(deployer_path(output_dir, contract_name)),
        content=content,
        reason=f"Deployer for {contract_name} ({request.source_path})",
    )
