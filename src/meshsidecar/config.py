"""Loading sidecar configuration from YAML."""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from meshsidecar.errors import ConfigError
from meshsidecar.models.config import SidecarConfig


logger = logging.getLogger(__name__)


def load_sidecar_config(path: Path, yaml: Optional[YAML] = None) -> SidecarConfig:
    """Read and validate a sidecar config file."""
    config_file = Path(path)
    if not config_file.exists():
        raise ConfigError(f"Config not found: {config_file}")

    yaml = yaml or YAML(typ="safe")
    try:
        data = yaml.load(config_file.read_text())
    except YAMLError as e:
        logger.error(f"Invalid YAML in {config_file}: {e}")
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {config_file}")

    try:
        config = SidecarConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid sidecar config {config_file}: {e}")
        raise ConfigError(f"Invalid sidecar config {config_file}: {e}") from e

    logger.debug(f"Loaded sidecar config from {config_file}")
    return config


def parse_env_assignments(assignments: Iterable[str]) -> Dict[str, str]:
    """Turn ``KEY=VALUE`` strings into an environment map."""
    env = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            raise ConfigError(f"Expected KEY=VALUE, got {assignment!r}")
        env[key] = value
    return env
