"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Any, Callable, List, Optional

import typer
from rich.console import Console

from meshsidecar.cli.commands import render_command_output, validate_config
from meshsidecar.config import parse_env_assignments
from meshsidecar.errors import ConfigError, InvalidQuantity
from meshsidecar.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="meshsidecarctl",
    help="Mesh Sidecar - render Envoy sidecar specs for App Mesh injection",
    add_completion=False,
)

# Console for rich output
console = Console(stderr=True)


def _run_cli_command(handler: Callable[..., Any], log_level: str, **kwargs: Any):
    """Helper to run a CLI command with logging and error handling."""
    setup_logging(log_level)
    try:
        handler(**kwargs)
    except (ConfigError, InvalidQuantity) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command("render")
def render_command(
    config: Path = typer.Argument(..., help="Sidecar config file (YAML)"),
    env: Optional[List[str]] = typer.Option(
        None, "--env", "-e", help="Caller-supplied env var as KEY=VALUE"
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", help="Log level"
    ),
):
    """Render the Envoy sidecar container as YAML."""
    def handler(config_path: Path, assignments: List[str]):
        render_command_output(config_path, parse_env_assignments(assignments))

    _run_cli_command(handler, log_level=log_level, config_path=config, assignments=env or [])


@app.command("validate")
def validate_command(
    config: Path = typer.Argument(..., help="Sidecar config file (YAML)"),
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", help="Log level"
    ),
):
    """Validate a sidecar config file."""
    _run_cli_command(validate_config, log_level=log_level, config_path=config)


def main():
    """Main entry point for CLI."""
    app()
