"""Environment assembly for the Envoy sidecar.

Controller-managed variables are written over whatever the caller put in
the environment map, so pod annotations can never shadow them. Optional
features are described by ``ENV_RULES``; each rule owns a disjoint set of
keys and is gated only by its own toggle.
"""

import logging
from typing import Callable, Dict, List, MutableMapping, NamedTuple

from meshsidecar import constants as c
from meshsidecar.models.config import SidecarConfig
from meshsidecar.models.container import EnvVar, EnvVarSource, FieldRef
from meshsidecar.models.env import EnvFieldRef, RawEnvValue, to_env_value


logger = logging.getLogger(__name__)


class EnvRule(NamedTuple):
    """Feature toggle and the variables it contributes."""
    name: str
    enabled: Callable[[SidecarConfig], bool]
    entries: Callable[[SidecarConfig], Dict[str, str]]


def base_entries(config: SidecarConfig) -> Dict[str, str]:
    """Variables present on every sidecar."""
    return {
        c.ENV_VIRTUAL_NODE_NAME: config.virtual_node_ref,
        c.ENV_AWS_REGION: config.aws_region,
        c.ENV_PREVIEW: config.preview,
        c.ENV_LOG_LEVEL: config.log_level,
    }


ENV_RULES = (
    EnvRule(
        name="sds",
        enabled=lambda cfg: cfg.sds.enabled,
        entries=lambda cfg: {c.ENV_SDS_SOCKET_PATH: cfg.sds.socket_path},
    ),
    # Envoy defaults to 9901
    EnvRule(
        name="admin_access_port",
        enabled=lambda cfg: cfg.admin_access_port != 0,
        entries=lambda cfg: {c.ENV_ADMIN_ACCESS_PORT: str(cfg.admin_access_port)},
    ),
    # Envoy defaults to /tmp/envoy_admin_access.log
    EnvRule(
        name="admin_access_log_file",
        enabled=lambda cfg: cfg.admin_access_log_file != "",
        entries=lambda cfg: {c.ENV_ADMIN_ACCESS_LOG_FILE: cfg.admin_access_log_file},
    ),
    EnvRule(
        name="xray",
        enabled=lambda cfg: cfg.xray.enabled,
        entries=lambda cfg: {
            c.ENV_XRAY_ENABLE: "1",
            c.ENV_XRAY_DAEMON_PORT: str(cfg.xray.daemon_port),
        },
    ),
    EnvRule(
        name="datadog",
        enabled=lambda cfg: cfg.datadog.enabled,
        entries=lambda cfg: {
            c.ENV_DATADOG_ENABLE: "1",
            c.ENV_DATADOG_PORT: str(cfg.datadog.port),
            c.ENV_DATADOG_ADDRESS: cfg.datadog.address,
        },
    ),
    EnvRule(
        name="stats_tags",
        enabled=lambda cfg: cfg.stats_tags.enabled,
        entries=lambda cfg: {c.ENV_STATS_TAGS_ENABLE: "1"},
    ),
    EnvRule(
        name="statsd",
        enabled=lambda cfg: cfg.statsd.enabled,
        entries=lambda cfg: {
            c.ENV_STATSD_ENABLE: "1",
            c.ENV_STATSD_PORT: str(cfg.statsd.port),
            c.ENV_STATSD_ADDRESS: cfg.statsd.address,
        },
    ),
    # The file itself is provisioned by the injector through the mounted volume
    EnvRule(
        name="jaeger",
        enabled=lambda cfg: cfg.jaeger.enabled,
        entries=lambda cfg: {c.ENV_TRACING_CFG_FILE: c.TRACING_CONFIG_FILE},
    ),
)


def managed_entries(config: SidecarConfig) -> Dict[str, str]:
    """All controller-managed variables for ``config``."""
    entries = base_entries(config)
    for rule in ENV_RULES:
        if rule.enabled(config):
            logger.debug(f"Applying env rule {rule.name}")
            entries.update(rule.entries(config))
    return entries


def render_env_var(name: str, raw: RawEnvValue) -> EnvVar:
    """Render one map entry as a literal or a field reference."""
    value = to_env_value(name, raw)
    if isinstance(value, EnvFieldRef):
        return EnvVar(
            name=name,
            value_from=EnvVarSource(field_ref=FieldRef(field_path=value.field_path)),
        )
    return EnvVar(name=name, value=value.value)


def assemble_env(config: SidecarConfig, env: MutableMapping[str, RawEnvValue]) -> List[EnvVar]:
    """Merge managed variables into ``env`` and render it, sorted by name.

    ``env`` is updated in place. A caller value that differs from the
    managed one is replaced and a warning names the key.
    """
    for key, value in managed_entries(config).items():
        previous = env.get(key)
        if previous is not None and to_env_value(key, previous) != to_env_value(key, value):
            logger.warning(f"Overriding caller-supplied env {key} with controller-managed value")
        env[key] = value

    return [render_env_var(name, env[name]) for name in sorted(env)]
