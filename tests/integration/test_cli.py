"""
CLI integration tests using Click's test runner.

Tests verify that the CLI commands work end-to-end via the Click
CliRunner, without requiring network access, the aptos CLI or chain
interaction.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from movepub.cli import cli
from movepub.config import DeployConfig, load_env
from movepub.deployment import DeploymentResult
from movepub.errors import CompilationError
from movepub.sigil.mnemonic import derive_account

VALID_PHRASE = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def clean_env():
    env = {k: v for k, v in os.environ.items() if k not in ("SEED_PHRASE", "APTOS_NODE_URL", "APTOS_CHAIN_ID")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestVersionAndInfo:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_info_without_seed(self, runner: CliRunner, clean_env) -> None:
        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0
        assert "not configured" in result.output
        assert "fullnode.mainnet.aptoslabs.com" in result.output

    def test_info_with_seed(self, runner: CliRunner, clean_env) -> None:
        result = runner.invoke(cli, ["info"], env={"SEED_PHRASE": VALID_PHRASE})
        assert result.exit_code == 0
        assert derive_account(VALID_PHRASE).address in result.output


class TestWhoami:
    def test_whoami(self, runner: CliRunner, clean_env) -> None:
        result = runner.invoke(cli, ["whoami"], env={"SEED_PHRASE": VALID_PHRASE})
        assert result.exit_code == 0
        assert f"Address: {derive_account(VALID_PHRASE).address}" in result.output

    def test_whoami_invalid_seed(self, runner: CliRunner, clean_env) -> None:
        result = runner.invoke(cli, ["whoami"], env={"SEED_PHRASE": "abandon " * 12})
        assert result.exit_code == 2
        assert "No valid seed phrase" in result.output


class TestDeploy:
    def test_builds_config_from_options(self, runner: CliRunner, clean_env, tmp_path: Path) -> None:
        fake = DeploymentResult(address="0x" + "00" * 32, cli_published=True)
        with patch("movepub.theurgy.deploy.run_deployment", return_value=fake) as run:
            result = runner.invoke(
                cli,
                [
                    "deploy",
                    "--package-dir", str(tmp_path),
                    "--gas-limit", "5000",
                    "--via-sdk",
                ],
                env={"SEED_PHRASE": VALID_PHRASE, "APTOS_NODE_URL": "https://node.test"},
            )

        assert result.exit_code == 0, result.output
        assert "Deployment Complete" in result.output

        config: DeployConfig = run.call_args[0][0]
        assert config.seed_phrase == VALID_PHRASE
        assert config.node_url == "https://node.test"
        assert config.package_dir == tmp_path
        assert config.package_file == Path("Move.toml")
        assert config.gas_limit == 5000
        assert config.gas_unit_price == 100
        assert config.chain_id == 1
        assert config.submit_via_sdk is True

    def test_defaults_to_cli_only(self, runner: CliRunner, clean_env) -> None:
        fake = DeploymentResult(address="0x" + "00" * 32, cli_published=True)
        with patch("movepub.theurgy.deploy.run_deployment", return_value=fake) as run:
            result = runner.invoke(cli, ["deploy"], env={"SEED_PHRASE": VALID_PHRASE})
        assert result.exit_code == 0
        assert run.call_args[0][0].submit_via_sdk is False

    def test_deploy_error_exit_code(self, runner: CliRunner, clean_env) -> None:
        with patch(
            "movepub.theurgy.deploy.run_deployment",
            side_effect=CompilationError("Compilation failed: exit code 1"),
        ):
            result = runner.invoke(cli, ["deploy"], env={"SEED_PHRASE": VALID_PHRASE})
        assert result.exit_code == 3
        assert "Compilation failed" in result.output

    def test_invalid_seed_skips_network(self, runner: CliRunner, clean_env, tmp_path: Path) -> None:
        with patch("movepub.deployment.compile_package"), patch(
            "movepub.deployment.get_sequence_number"
        ) as seq, patch("movepub.deployment.publish_package_cli") as publish:
            result = runner.invoke(
                cli,
                ["deploy", "--package-dir", str(tmp_path), "--via-sdk"],
                env={"SEED_PHRASE": "abandon " * 12},
            )
        assert result.exit_code == 2
        assert "Invalid seed phrase" in result.output
        seq.assert_not_called()
        publish.assert_not_called()


class TestBalance:
    def test_balance(self, runner: CliRunner, clean_env) -> None:
        with patch("movepub.theurgy.balance.get_balance", return_value=250_000_000) as get:
            result = runner.invoke(cli, ["balance"], env={"SEED_PHRASE": VALID_PHRASE})
        assert result.exit_code == 0
        assert "2.50000000 APT" in result.output
        get.assert_called_once_with(
            derive_account(VALID_PHRASE).address,
            node_url="https://fullnode.mainnet.aptoslabs.com",
        )

    def test_balance_query_failure(self, runner: CliRunner, clean_env) -> None:
        with patch("movepub.theurgy.balance.get_balance", side_effect=RuntimeError("down")):
            result = runner.invoke(cli, ["balance"], env={"SEED_PHRASE": VALID_PHRASE})
        assert result.exit_code == 1
        assert "Balance query failed" in result.output


class TestEnvFile:
    def test_env_file_does_not_override(self, tmp_path: Path, clean_env) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SEED_PHRASE=from-file\nAPTOS_CHAIN_ID=2\n", encoding="utf-8")
        with patch.dict(os.environ, {"SEED_PHRASE": "from-env"}):
            load_env(env_file)
            config = DeployConfig.from_env()
            assert config.seed_phrase == "from-env"
            assert config.chain_id == 2
