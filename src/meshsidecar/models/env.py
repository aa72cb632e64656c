"""Environment value models."""

from typing import Union

from pydantic import BaseModel, Field

from meshsidecar.constants import (
    HOST_IP_ELIGIBLE_KEYS,
    HOST_IP_FIELD_PATH,
    HOST_IP_SENTINEL,
)


class EnvLiteral(BaseModel):
    """Plain string value."""
    value: str = Field(..., description="Literal value")

    class Config:
        """Pydantic config."""
        frozen = True


class EnvFieldRef(BaseModel):
    """Pod field resolved by the kubelet at container start."""
    field_path: str = Field(..., description="Downward API field path")

    class Config:
        """Pydantic config."""
        frozen = True


EnvValue = Union[EnvLiteral, EnvFieldRef]

# What callers may put in an environment map
RawEnvValue = Union[str, EnvLiteral, EnvFieldRef]


def to_env_value(name: str, raw: RawEnvValue) -> EnvValue:
    """Tag a raw environment value.

    Strings become literals, except the host IP sentinel under one of the
    tracer/stats address keys, which becomes a host IP field reference.
    Values that are already tagged are returned unchanged.
    """
    if isinstance(raw, (EnvLiteral, EnvFieldRef)):
        return raw
    if name in HOST_IP_ELIGIBLE_KEYS and raw == HOST_IP_SENTINEL:
        return EnvFieldRef(field_path=HOST_IP_FIELD_PATH)
    return EnvLiteral(value=raw)
