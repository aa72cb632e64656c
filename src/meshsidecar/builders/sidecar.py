"""Envoy sidecar container assembly."""

import logging
from typing import MutableMapping, Optional

from meshsidecar import constants as c
from meshsidecar.builders.env import assemble_env
from meshsidecar.builders.probe import build_readiness_probe
from meshsidecar.builders.resources import resources_from_config
from meshsidecar.models.config import SidecarConfig
from meshsidecar.models.container import (
    ContainerPort,
    ContainerSpec,
    ExecAction,
    SecurityContext,
    VolumeMount,
)
from meshsidecar.models.env import RawEnvValue
from meshsidecar.utils.templates import PRE_STOP_COMMAND, shell_command


logger = logging.getLogger(__name__)


def effective_admin_port(config: SidecarConfig) -> int:
    """Admin port Envoy will listen on."""
    return config.admin_access_port or c.DEFAULT_ADMIN_PORT


def build_envoy_sidecar(
    config: SidecarConfig,
    env: Optional[MutableMapping[str, RawEnvValue]] = None,
) -> ContainerSpec:
    """Build the Envoy container for one workload.

    ``env`` holds caller-supplied variables (e.g. from pod annotations) and
    is updated in place with the controller-managed ones.
    """
    if env is None:
        env = {}

    volume_mounts = []
    if config.jaeger.enabled:
        volume_mounts.append(
            VolumeMount(name=config.jaeger.volume_name, mount_path=c.TRACING_CONFIG_MOUNT_PATH)
        )

    container = ContainerSpec(
        name=c.SIDECAR_CONTAINER_NAME,
        image=config.sidecar_image,
        security_context=SecurityContext(run_as_user=c.SIDECAR_RUN_AS_USER),
        ports=[
            ContainerPort(
                name=c.STATS_PORT_NAME,
                container_port=effective_admin_port(config),
                protocol=c.STATS_PORT_PROTOCOL,
            )
        ],
        pre_stop=ExecAction(command=shell_command(PRE_STOP_COMMAND, delay=config.pre_stop_delay)),
        volume_mounts=volume_mounts,
        env=assemble_env(config, env),
    )
    logger.debug(
        f"Built sidecar for {config.virtual_node_ref} with {len(container.env)} env vars"
    )
    return container


def render_sidecar(
    config: SidecarConfig,
    env: Optional[MutableMapping[str, RawEnvValue]] = None,
) -> ContainerSpec:
    """Build the Envoy container with readiness probe and resources attached.

    Raises InvalidQuantity if any configured resource quantity is malformed.
    """
    resources = resources_from_config(config)
    container = build_envoy_sidecar(config, env)
    container.resources = resources
    container.readiness_probe = build_readiness_probe(
        config.readiness_probe_initial_delay,
        config.readiness_probe_period,
        str(effective_admin_port(config)),
    )
    return container
