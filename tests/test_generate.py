"""
Tests for the generate use case — the full pipeline with a fake toolchain.
"""

from pathlib import Path

import pytest

from deployer_kit.core.models.config import CommandConfig, KitConfig
from deployer_kit.core.models.request import GenerationRequest
from deployer_kit.core.use_cases.generate import run_generate

from conftest import VAULT_ABI, constructor


@pytest.fixture
def config(tmp_path: Path) -> KitConfig:
    return KitConfig(
        output_dir=str(tmp_path / "script" / "deployers"),
        artifacts_dir=str(tmp_path / "out"),
    )


class TestRunGenerate:
    def test_vault_end_to_end(self, tmp_path, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        result = run_generate(GenerationRequest(source_path="src/Vault.sol"), config)

        assert result.ok, result.error
        assert result.output_path == tmp_path / "script" / "deployers" / "VaultDeployer.s.sol"
        content = result.output_path.read_text()
        assert "address owner" in content
        assert "uint256 cap" in content
        assert "abi.encodeCall(Vault.initialize, (cap))" in content

        assert fake_forge.calls[0][:2] == ["forge", "build"]
        assert fake_forge.calls[1] == ["forge", "fmt", str(result.output_path)]
        assert result.built and result.formatted

    def test_build_runs_before_load(self, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        run_generate(GenerationRequest(source_path="src/Vault.sol"), config)
        assert ["forge", "build", "--skip", "s.sol", "--skip", "t.sol"] in fake_forge.calls

    def test_missing_contract(self, tmp_path, config, fake_forge):
        result = run_generate(GenerationRequest(source_path="src/Vault.sol"), config)
        assert not result.ok
        assert result.error_kind == "artifact_not_found"
        assert "Contract not found" in result.error
        assert not (tmp_path / "script" / "deployers" / "VaultDeployer.s.sol").exists()
        assert len(fake_forge.calls) == 1  # build only, no format

    def test_wrong_contract_name(self, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        result = run_generate(GenerationRequest(source_path="src/Vault.sol", contract_name="Nope"), config)
        assert result.error_kind == "artifact_not_found"

    def test_parse_error(self, tmp_path, config, fake_forge):
        path = tmp_path / "out" / "Vault.sol" / "Vault.json"
        path.parent.mkdir(parents=True)
        path.write_text("{")
        result = run_generate(GenerationRequest(source_path="src/Vault.sol"), config)
        assert result.error_kind == "parse"

    def test_build_failure_is_fatal(self, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        fake_forge.failures["build"] = "Compiler run failed"
        result = run_generate(GenerationRequest(source_path="src/Vault.sol"), config)
        assert result.error_kind == "build"
        assert "Compiler run failed" in result.error
        assert result.output_path is None

    def test_format_failure_is_a_warning(self, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        fake_forge.failures["fmt"] = "fmt exploded"
        result = run_generate(GenerationRequest(source_path="src/Vault.sol"), config)
        assert result.ok
        assert result.output_path.exists()
        assert not result.formatted
        assert any("fmt exploded" in w for w in result.warnings)

    def test_skip_build_and_format(self, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        result = run_generate(
            GenerationRequest(source_path="src/Vault.sol"), config, build=False, fmt=False
        )
        assert result.ok
        assert fake_forge.calls == []
        assert not result.built and not result.formatted

    def test_disabled_commands_in_config(self, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        config = config.model_copy(update={
            "build": CommandConfig(enabled=False, command=["forge", "build"]),
            "format": CommandConfig(enabled=False, command=["forge", "fmt"]),
        })
        assert run_generate(GenerationRequest(source_path="src/Vault.sol"), config).ok
        assert fake_forge.calls == []

    def test_request_output_dir_wins(self, tmp_path, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        out = tmp_path / "custom" / "nested"
        result = run_generate(
            GenerationRequest(source_path="src/Vault.sol", output_dir=str(out)), config
        )
        assert result.output_path == out / "VaultDeployer.s.sol"
        assert result.output_path.exists()

    def test_write_error(self, tmp_path, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        result = run_generate(
            GenerationRequest(source_path="src/Vault.sol", output_dir=str(blocker / "sub")), config
        )
        assert result.error_kind == "write"

    def test_custom_template(self, tmp_path, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        template = tmp_path / "deployer.tmpl"
        template.write_text("contract __CONTRACT__Deployer {} // __INIT_DATA__\n")
        config = config.model_copy(update={"template": str(template)})
        result = run_generate(GenerationRequest(source_path="src/Vault.sol"), config, fmt=False)
        assert result.output_path.read_text() == (
            "contract VaultDeployer {} // abi.encodeCall(Vault.initialize, (cap))\n"
        )

    def test_idempotent(self, config, write_artifact, fake_forge):
        write_artifact(VAULT_ABI)
        request = GenerationRequest(source_path="src/Vault.sol")
        first = run_generate(request, config).output_path.read_bytes()
        second = run_generate(request, config).output_path.read_bytes()
        assert first == second

    def test_to_dict(self, config, write_artifact, fake_forge):
        write_artifact([constructor(("owner", "address"))])
        data = run_generate(GenerationRequest(source_path="src/Vault.sol"), config).to_dict()
        assert data["ok"] is True
        assert data["initializable"] is False
        assert data["init_params"] is None
        assert data["constructor_params"] == ["owner"]
        assert data["output_path"].endswith("VaultDeployer.s.sol")
