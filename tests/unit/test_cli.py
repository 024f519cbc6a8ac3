"""Unit tests for the command-line interface."""

import json
import logging
import sys
import types
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
from typer.testing import CliRunner
from web3_providers_eip1193.cli import app

runner = CliRunner()

CLIENT_TARGET = "in_memory_client:create_in_memory_client"


@pytest.fixture(autouse=True)
def restore_root_handlers() -> Iterator[None]:
    """Undo the logging setup performed by the request command."""
    root = logging.getLogger()
    package_logger = logging.getLogger("web3_providers_eip1193")
    handlers, level = list(root.handlers), root.level
    package_level = package_logger.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package_logger.setLevel(package_level)


@pytest.fixture
def fake_clients(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    """Register an importable module holding valid and invalid clients."""
    module = types.ModuleType("fake_clients")
    module.empty = {}  # type: ignore[attr-defined]
    module.failing = types.SimpleNamespace(  # type: ignore[attr-defined]
        request=AsyncMock(side_effect=RuntimeError("node unreachable")), on=Mock()
    )
    monkeypatch.setitem(sys.modules, "fake_clients", module)
    return module


class TestEventsCommand:
    """Test cases for the events command."""

    def test_lists_all_events(self) -> None:
        """Test that every provider event is listed."""
        result = runner.invoke(app, ["events"])

        assert result.exit_code == 0
        for name in ["connect", "disconnect", "chainChanged", "accountsChanged"]:
            assert name in result.output


class TestCheckCommand:
    """Test cases for the check command."""

    def test_valid_client(self) -> None:
        """Test checking a valid client factory."""
        result = runner.invoke(app, ["check", CLIENT_TARGET])

        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "InMemoryClient" in result.output

    def test_valid_client_class(self) -> None:
        """Test that classes are instantiated before validation."""
        result = runner.invoke(app, ["check", "in_memory_client:InMemoryClient"])

        assert result.exit_code == 0

    def test_invalid_client(self, fake_clients: types.ModuleType) -> None:
        """Test checking an object without request/on."""
        result = runner.invoke(app, ["check", "fake_clients:empty"])

        assert result.exit_code == 1
        assert "invalidClient" in result.output

    def test_bad_target_format(self) -> None:
        """Test that targets must be module:attribute."""
        result = runner.invoke(app, ["check", "in_memory_client"])

        assert result.exit_code == 1
        assert "module:attribute" in result.output

    def test_missing_module(self) -> None:
        """Test reporting an unknown module."""
        result = runner.invoke(app, ["check", "no_such_module_here:client"])

        assert result.exit_code == 1
        assert "Failed to import" in result.output

    def test_missing_attribute(self) -> None:
        """Test reporting an unknown attribute."""
        result = runner.invoke(app, ["check", "in_memory_client:nothing"])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestRequestCommand:
    """Test cases for the request command."""

    def test_request_prints_response(self) -> None:
        """Test sending a request through the adapter."""
        result = runner.invoke(app, ["request", CLIENT_TARGET, "eth_chainId"])

        assert result.exit_code == 0
        assert '"result": "0x1"' in result.output
        assert '"jsonrpc": "2.0"' in result.output

    def test_request_with_params(self) -> None:
        """Test that params are parsed as JSON."""
        result = runner.invoke(
            app, ["request", CLIENT_TARGET, "eth_accounts", "--params", "[]"]
        )

        assert result.exit_code == 0
        assert "0xabab" in result.output

    def test_invalid_params(self) -> None:
        """Test that malformed JSON params are rejected."""
        result = runner.invoke(
            app, ["request", CLIENT_TARGET, "eth_chainId", "--params", "[1,"]
        )

        assert result.exit_code == 1
        assert "Invalid request" in result.output

    def test_invalid_client(self, fake_clients: types.ModuleType) -> None:
        """Test that invalid clients are reported."""
        result = runner.invoke(app, ["request", "fake_clients:empty", "eth_chainId"])

        assert result.exit_code == 1
        assert "invalidClient" in result.output

    def test_client_failure(self, fake_clients: types.ModuleType) -> None:
        """Test that client errors are reported."""
        result = runner.invoke(app, ["request", "fake_clients:failing", "eth_chainId"])

        assert result.exit_code == 1
        assert "node unreachable" in result.output

    def test_config_file(self, tmp_path: Path) -> None:
        """Test loading configuration from YAML and JSON files."""
        yaml_config = tmp_path / "provider.yaml"
        yaml_config.write_text("log_level: debug\npackage:\n  package_version: 9.9.9\n")
        json_config = tmp_path / "provider.json"
        json_config.write_text(json.dumps({"log_level": "ERROR"}))

        for config_file in [yaml_config, json_config]:
            result = runner.invoke(
                app,
                ["request", CLIENT_TARGET, "eth_blockNumber", "-c", str(config_file)],
            )

            assert result.exit_code == 0
            assert '"result": "0x0"' in result.output

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        """Test that invalid configuration is reported."""
        config_file = tmp_path / "provider.yaml"
        config_file.write_text("log_level: loud\n")

        result = runner.invoke(
            app, ["request", CLIENT_TARGET, "eth_chainId", "-c", str(config_file)]
        )

        assert result.exit_code == 1
        assert "Failed to load config file" in result.output

    def test_invalid_log_level(self) -> None:
        """Test that unknown log levels are rejected."""
        result = runner.invoke(
            app, ["request", CLIENT_TARGET, "eth_chainId", "--log-level", "loud"]
        )

        assert result.exit_code == 1
        assert "Invalid log level" in result.output
