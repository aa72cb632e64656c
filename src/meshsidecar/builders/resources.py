"""Resource requirements for the sidecar container."""

import logging
from typing import Optional

from meshsidecar.builders.quantity import parse_quantity
from meshsidecar.errors import InvalidQuantity
from meshsidecar.models.config import SidecarConfig
from meshsidecar.models.resources import ResourceField, ResourceList, ResourceRequirements


logger = logging.getLogger(__name__)


def _build_group(
    cpu: str,
    memory: str,
    cpu_field: ResourceField,
    memory_field: ResourceField,
) -> Optional[ResourceList]:
    """Build one requests/limits group, or None when both are empty."""
    if not cpu and not memory:
        return None

    return ResourceList(
        cpu=parse_quantity(cpu, cpu_field) if cpu else None,
        memory=parse_quantity(memory, memory_field) if memory else None,
    )


def build_resources(
    cpu_request: str = "",
    memory_request: str = "",
    cpu_limit: str = "",
    memory_limit: str = "",
) -> ResourceRequirements:
    """Build requests and limits from quantity strings.

    Empty strings are left out. Any malformed quantity raises
    InvalidQuantity and nothing is returned.
    """
    try:
        requests = _build_group(
            cpu_request, memory_request,
            ResourceField.CPU_REQUEST, ResourceField.MEMORY_REQUEST,
        )
        limits = _build_group(
            cpu_limit, memory_limit,
            ResourceField.CPU_LIMIT, ResourceField.MEMORY_LIMIT,
        )
    except InvalidQuantity as e:
        logger.error(f"Sidecar resources rejected: {e}")
        raise

    return ResourceRequirements(requests=requests, limits=limits)


def resources_from_config(config: SidecarConfig) -> ResourceRequirements:
    """Build resource requirements from a sidecar config."""
    return build_resources(
        cpu_request=config.cpu_request,
        memory_request=config.memory_request,
        cpu_limit=config.cpu_limit,
        memory_limit=config.memory_limit,
    )
