"""Errors raised while building sidecar specs."""

from meshsidecar.models.resources import ResourceField


class InvalidQuantity(ValueError):
    """A resource quantity does not follow the Kubernetes quantity grammar."""

    def __init__(self, field: ResourceField, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field.value} quantity: {value!r}")


class ConfigError(Exception):
    """Sidecar configuration file could not be loaded."""
    pass
