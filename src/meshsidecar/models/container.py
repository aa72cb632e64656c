"""Container specification models."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from meshsidecar.models.resources import ResourceRequirements


class FieldRef(BaseModel):
    """Downward API field selector."""
    field_path: str


class EnvVarSource(BaseModel):
    """Source for an environment variable's value."""
    field_ref: FieldRef


class EnvVar(BaseModel):
    """Environment variable with either a value or a source."""
    name: str = Field(..., description="Variable name")
    value: Optional[str] = None
    value_from: Optional[EnvVarSource] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render as a Kubernetes EnvVar."""
        if self.value_from is not None:
            return {
                "name": self.name,
                "valueFrom": {"fieldRef": {"fieldPath": self.value_from.field_ref.field_path}},
            }
        return {"name": self.name, "value": self.value}


class ContainerPort(BaseModel):
    """Named container port."""
    name: str
    container_port: int = Field(..., gt=0, lt=65536)
    protocol: Literal["TCP", "UDP", "SCTP"] = Field(default="TCP")


class VolumeMount(BaseModel):
    """Volume mounted into the container."""
    name: str
    mount_path: str


class SecurityContext(BaseModel):
    """Container security context."""
    run_as_user: int


class ExecAction(BaseModel):
    """Command executed inside the container."""
    command: List[str]


class ProbeSpec(BaseModel):
    """Exec-based probe."""
    exec: ExecAction
    initial_delay_seconds: int = Field(default=0)
    timeout_seconds: int = Field(default=1, ge=1)
    period_seconds: int = Field(default=10)
    success_threshold: int = Field(default=1, ge=1)
    failure_threshold: int = Field(default=3, ge=1)

    def to_dict(self) -> Dict[str, Any]:
        """Render as a Kubernetes Probe."""
        return {
            "exec": {"command": list(self.exec.command)},
            "initialDelaySeconds": self.initial_delay_seconds,
            "timeoutSeconds": self.timeout_seconds,
            "periodSeconds": self.period_seconds,
            "successThreshold": self.success_threshold,
            "failureThreshold": self.failure_threshold,
        }


class ContainerSpec(BaseModel):
    """Sidecar container specification."""
    name: str = Field(..., description="Container name")
    image: str = Field(..., description="Container image")
    security_context: SecurityContext
    ports: List[ContainerPort] = Field(default_factory=list)
    pre_stop: Optional[ExecAction] = None
    volume_mounts: List[VolumeMount] = Field(default_factory=list)
    env: List[EnvVar] = Field(default_factory=list)
    resources: Optional[ResourceRequirements] = None
    readiness_probe: Optional[ProbeSpec] = None

    def env_by_name(self) -> Dict[str, EnvVar]:
        """Index environment variables by name."""
        return {var.name: var for var in self.env}

    def to_dict(self) -> Dict[str, Any]:
        """Render as a Kubernetes container manifest."""
        manifest: Dict[str, Any] = {
            "name": self.name,
            "image": self.image,
            "securityContext": {"runAsUser": self.security_context.run_as_user},
        }
        if self.ports:
            manifest["ports"] = [
                {"name": p.name, "containerPort": p.container_port, "protocol": p.protocol}
                for p in self.ports
            ]
        if self.pre_stop is not None:
            manifest["lifecycle"] = {"preStop": {"exec": {"command": list(self.pre_stop.command)}}}
        if self.volume_mounts:
            manifest["volumeMounts"] = [
                {"name": m.name, "mountPath": m.mount_path} for m in self.volume_mounts
            ]
        if self.env:
            manifest["env"] = [var.to_dict() for var in self.env]
        if self.resources is not None:
            resources = self.resources.to_dict()
            if resources:
                manifest["resources"] = resources
        if self.readiness_probe is not None:
            manifest["readinessProbe"] = self.readiness_probe.to_dict()
        return manifest
