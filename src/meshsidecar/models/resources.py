"""Compute resource models."""

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ResourceField(Enum):
    """The four quantities a sidecar may carry."""
    CPU_REQUEST = "cpu request"
    MEMORY_REQUEST = "memory request"
    CPU_LIMIT = "cpu limit"
    MEMORY_LIMIT = "memory limit"


class Quantity(BaseModel):
    """A validated resource quantity.

    Only built by :func:`meshsidecar.builders.quantity.parse_quantity`.
    """
    raw: str = Field(..., description="Quantity as written, e.g. 250m")
    amount: Decimal = Field(..., description="Value in base units")

    class Config:
        """Pydantic config."""
        frozen = True

    def __str__(self) -> str:
        return self.raw


class ResourceList(BaseModel):
    """CPU and memory for one group."""
    cpu: Optional[Quantity] = None
    memory: Optional[Quantity] = None

    def to_dict(self) -> Dict[str, str]:
        """Render as a Kubernetes resource list."""
        result = {}
        if self.cpu is not None:
            result["cpu"] = str(self.cpu)
        if self.memory is not None:
            result["memory"] = str(self.memory)
        return result


class ResourceRequirements(BaseModel):
    """Requests and limits; a group with nothing set is None."""
    requests: Optional[ResourceList] = None
    limits: Optional[ResourceList] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render as Kubernetes resource requirements."""
        result = {}
        if self.requests is not None:
            result["requests"] = self.requests.to_dict()
        if self.limits is not None:
            result["limits"] = self.limits.to_dict()
        return result
