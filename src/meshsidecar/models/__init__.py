"""Pydantic models for sidecar configuration and output."""

from meshsidecar.models.config import (
    SidecarConfig,
    SdsConfig,
    XrayConfig,
    DatadogConfig,
    StatsDConfig,
    StatsTagsConfig,
    JaegerConfig,
)
from meshsidecar.models.container import (
    ContainerSpec,
    ContainerPort,
    EnvVar,
    EnvVarSource,
    ExecAction,
    FieldRef,
    ProbeSpec,
    SecurityContext,
    VolumeMount,
)
from meshsidecar.models.env import EnvLiteral, EnvFieldRef, EnvValue, RawEnvValue, to_env_value
from meshsidecar.models.resources import Quantity, ResourceField, ResourceList, ResourceRequirements

__all__ = [
    "SidecarConfig",
    "SdsConfig",
    "XrayConfig",
    "DatadogConfig",
    "StatsDConfig",
    "StatsTagsConfig",
    "JaegerConfig",
    "ContainerSpec",
    "ContainerPort",
    "EnvVar",
    "EnvVarSource",
    "ExecAction",
    "FieldRef",
    "ProbeSpec",
    "SecurityContext",
    "VolumeMount",
    "EnvLiteral",
    "EnvFieldRef",
    "EnvValue",
    "RawEnvValue",
    "to_env_value",
    "Quantity",
    "ResourceField",
    "ResourceList",
    "ResourceRequirements",
]
