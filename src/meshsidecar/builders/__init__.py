"""Builders for the pieces of an Envoy sidecar."""

from meshsidecar.builders.env import ENV_RULES, EnvRule, assemble_env, managed_entries, render_env_var
from meshsidecar.builders.probe import build_readiness_probe
from meshsidecar.builders.quantity import parse_quantity
from meshsidecar.builders.resources import build_resources, resources_from_config
from meshsidecar.builders.sidecar import build_envoy_sidecar, effective_admin_port, render_sidecar

__all__ = [
    "ENV_RULES",
    "EnvRule",
    "assemble_env",
    "managed_entries",
    "render_env_var",
    "build_readiness_probe",
    "parse_quantity",
    "build_resources",
    "resources_from_config",
    "build_envoy_sidecar",
    "effective_admin_port",
    "render_sidecar",
]
