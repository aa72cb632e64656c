"""Tests for CLI main module."""

import pytest
from unittest.mock import MagicMock, patch

import typer
from typer.testing import CliRunner
from ruamel.yaml import YAML

from meshsidecar.cli.main import _run_cli_command, app
from meshsidecar.errors import ConfigError, InvalidQuantity
from meshsidecar.models.resources import ResourceField


runner = CliRunner()

CONFIG = """
mesh_name: m1
virtual_node_name: vn1
sidecar_image: envoy:v1.29
aws_region: us-west-2
datadog:
  enabled: true
  address: ref:status.hostIP
cpu_request: 250m
"""


@pytest.fixture
def config_file(tmp_path):
    """Write a sidecar config file."""
    path = tmp_path / "sidecar.yaml"
    path.write_text(CONFIG)
    return path


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring the root logger during tests."""
    with patch("meshsidecar.cli.main.setup_logging") as mock_setup:
        yield mock_setup


@patch("meshsidecar.cli.main.console")
def test_run_cli_command_success(mock_console, no_logging_setup):
    """Test the CLI command runner on a successful execution."""
    mock_handler = MagicMock()

    _run_cli_command(mock_handler, log_level="DEBUG", arg1="value1")

    no_logging_setup.assert_called_once_with("DEBUG")
    mock_handler.assert_called_once_with(arg1="value1")
    mock_console.print.assert_not_called()


@pytest.mark.parametrize("error", [
    ConfigError("Config not found: x.yaml"),
    InvalidQuantity(ResourceField.CPU_LIMIT, "2xyz"),
])
@patch("meshsidecar.cli.main.console")
def test_run_cli_command_error(mock_console, error):
    """Test the CLI command runner when a handled error is raised."""
    mock_handler = MagicMock(side_effect=error)

    with pytest.raises(typer.Exit) as exc_info:
        _run_cli_command(mock_handler, log_level="INFO")

    mock_console.print.assert_called_once_with(f"[red]Error:[/red] {error}")
    assert exc_info.value.exit_code == 1


def test_render_command(config_file):
    """Test rendering a config file to YAML."""
    result = runner.invoke(app, ["render", str(config_file), "--env", "APP=blue", "-e", "AWS_REGION=eu-west-1"])

    assert result.exit_code == 0, result.output
    manifest = YAML(typ="safe").load(result.stdout)
    env = {e["name"]: e for e in manifest["env"]}

    assert manifest["name"] == "envoy"
    assert manifest["ports"][0]["containerPort"] == 9901
    assert env["APP"]["value"] == "blue"
    assert env["AWS_REGION"]["value"] == "us-west-2"
    assert env["DATADOG_TRACER_ADDRESS"]["valueFrom"] == {"fieldRef": {"fieldPath": "status.hostIP"}}
    assert manifest["resources"] == {"requests": {"cpu": "250m"}}
    assert manifest["readinessProbe"]["failureThreshold"] == 3


def test_render_command_invalid_quantity(tmp_path):
    """Test rendering fails on a malformed quantity."""
    path = tmp_path / "bad.yaml"
    path.write_text(CONFIG.replace("cpu_request: 250m", "cpu_request: 2xyz"))

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 1


def test_render_command_missing_config(tmp_path):
    """Test rendering a missing config file."""
    result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1


def test_validate_command(config_file):
    """Test validating a good config file."""
    result = runner.invoke(app, ["validate", str(config_file)])

    assert result.exit_code == 0, result.output
    assert "Configuration is valid" in result.stdout
    assert "mesh/m1/virtualNode/vn1" in result.stdout
