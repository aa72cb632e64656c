"""
Mesh Sidecar - Envoy sidecar spec generation for App Mesh injection.

Turns one workload's mesh and feature settings into the Envoy container,
readiness probe and resource requirements an injector adds to the pod.
"""

__version__ = "1.0.0"
__author__ = "Mesh Sidecar Development Team"

# Re-export key components for easier access
from meshsidecar.builders import (
    assemble_env,
    build_envoy_sidecar,
    build_readiness_probe,
    build_resources,
    parse_quantity,
    render_sidecar,
)
from meshsidecar.errors import InvalidQuantity
from meshsidecar.models.config import SidecarConfig
from meshsidecar.models.container import ContainerSpec

__all__ = [
    "SidecarConfig",
    "ContainerSpec",
    "InvalidQuantity",
    "assemble_env",
    "build_envoy_sidecar",
    "build_readiness_probe",
    "build_resources",
    "parse_quantity",
    "render_sidecar",
]
