"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest

from deployer_kit.adapters import forge
from deployer_kit.core.models.action import Receipt


def constructor(*inputs: tuple[str, str]) -> dict:
    """ABI constructor entry from (name, internalType) pairs."""
    return {
        "type": "constructor",
        "inputs": [{"name": n, "type": t.split(" ")[-1], "internalType": t} for n, t in inputs],
        "stateMutability": "nonpayable",
    }


def function(name: str, *inputs: tuple[str, str]) -> dict:
    """ABI function entry from (name, internalType) pairs."""
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t.split(" ")[-1], "internalType": t} for n, t in inputs],
        "outputs": [],
        "stateMutability": "nonpayable",
    }


VAULT_ABI = [
    constructor(("owner", "address")),
    function("initialize", ("cap", "uint256")),
    function("deposit", ("amount", "uint256")),
    {"type": "event", "name": "Deposit", "inputs": [], "anonymous": False},
]


@pytest.fixture
def write_artifact(tmp_path: Path):
    """Write ``out/<File>.sol/<Contract>.json`` under tmp_path and return its path."""

    def _write(abi: list[dict], file_name: str = "Vault.sol", contract: str = "Vault") -> Path:
        path = tmp_path / "out" / file_name / f"{contract}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"abi": abi, "bytecode": {"object": "0x"}}))
        return path

    return _write


@pytest.fixture
def fake_forge(monkeypatch):
    """Replace the command runner used by the forge adapter; record commands."""
    calls: list[list[str]] = []
    failures: dict[str, str] = {}

    def _run(command, *, cwd=None, timeout=None):
        calls.append(list(command))
        for marker, error in failures.items():
            if marker in command:
                return Receipt.failure(command=command, error=error, return_code=1)
        return Receipt.success(command=command, return_code=0)

    monkeypatch.setattr(forge, "run_command", _run)
    _run.calls = calls
    _run.failures = failures
    return _run
