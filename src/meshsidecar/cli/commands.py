"""Command implementations for CLI."""

import io
from pathlib import Path
from typing import Dict, Optional

from rich.console import Console
from rich.table import Table
from ruamel.yaml import YAML

from meshsidecar.builders.resources import resources_from_config
from meshsidecar.builders.sidecar import effective_admin_port, render_sidecar
from meshsidecar.config import load_sidecar_config
from meshsidecar.models.config import SidecarConfig


console = Console()

# Manifests go to stdout untouched: no markup, highlighting or wrapping
manifest_console = Console(highlight=False, soft_wrap=True, markup=False, emoji=False)


def _dump_yaml(data) -> str:
    """Serialize a manifest as block-style YAML."""
    yaml = YAML()
    yaml.default_flow_style = False
    stream = io.StringIO()
    yaml.dump(data, stream)
    return stream.getvalue()


def render_config(config_path: Path, env: Optional[Dict[str, str]] = None) -> str:
    """Render the sidecar container manifest for a config file."""
    config = load_sidecar_config(config_path)
    container = render_sidecar(config, dict(env or {}))
    return _dump_yaml(container.to_dict())


def render_command_output(config_path: Path, env: Optional[Dict[str, str]] = None):
    """Print the rendered manifest."""
    manifest_console.print(render_config(config_path, env), end="")


def _features_table(config: SidecarConfig) -> Table:
    """Table of feature toggles."""
    table = Table(title="Features")
    table.add_column("Feature", style="cyan")
    table.add_column("Enabled")

    for feature in ("sds", "xray", "datadog", "statsd", "stats_tags", "jaeger"):
        enabled = getattr(config, feature).enabled
        table.add_row(feature, "[green]●[/green]" if enabled else "[dim]○[/dim]")
    return table


def validate_config(config_path: Path):
    """Validate a config file, including its resource quantities."""
    config = load_sidecar_config(config_path)
    resources_from_config(config)

    console.print("[green]✓[/green] Configuration is valid")
    console.print(f"  Virtual node: {config.virtual_node_ref}")
    console.print(f"  Image: {config.sidecar_image}")
    console.print(f"  Admin port: {effective_admin_port(config)}")
    console.print(_features_table(config))
