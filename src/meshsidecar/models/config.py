"""Sidecar configuration models."""

from typing import Union

from pydantic import BaseModel, Field, validator


class SdsConfig(BaseModel):
    """Secret discovery service socket."""
    enabled: bool = Field(default=False)
    socket_path: str = Field(default="/run/spire/sockets/agent.sock")

    class Config:
        """Pydantic config."""
        frozen = True


class XrayConfig(BaseModel):
    """X-Ray tracing backend."""
    enabled: bool = Field(default=False)
    daemon_port: Union[int, str] = Field(default=2000)

    class Config:
        """Pydantic config."""
        frozen = True


class DatadogConfig(BaseModel):
    """Datadog tracing backend."""
    enabled: bool = Field(default=False)
    port: Union[int, str] = Field(default=8126)
    address: str = Field(default="127.0.0.1")

    class Config:
        """Pydantic config."""
        frozen = True


class StatsDConfig(BaseModel):
    """DogStatsD stats backend."""
    enabled: bool = Field(default=False)
    port: Union[int, str] = Field(default=8125)
    address: str = Field(default="127.0.0.1")

    class Config:
        """Pydantic config."""
        frozen = True


class StatsTagsConfig(BaseModel):
    """Mesh stats tags."""
    enabled: bool = Field(default=False)

    class Config:
        """Pydantic config."""
        frozen = True


class JaegerConfig(BaseModel):
    """Tracing config file mounted from a volume."""
    enabled: bool = Field(default=False)
    volume_name: str = Field(default="envoy-tracing-config")

    class Config:
        """Pydantic config."""
        frozen = True


class SidecarConfig(BaseModel):
    """Everything needed to render one Envoy sidecar.

    Feature toggles are independent: parameters of a disabled toggle are
    carried but never looked at.
    """
    mesh_name: str = Field(..., description="Mesh the workload belongs to")
    virtual_node_name: str = Field(..., description="Virtual node of the workload")
    sidecar_image: str = Field(..., description="Envoy image")
    aws_region: str = Field(..., description="Region of the mesh endpoint")
    preview: str = Field(default="0", description="1 selects the preview channel")
    log_level: str = Field(default="info", description="Envoy log level")
    admin_access_port: int = Field(default=0, ge=0, le=65535, description="0 keeps the Envoy default")
    admin_access_log_file: str = Field(default="", description="Empty keeps the Envoy default")
    pre_stop_delay: str = Field(default="20", description="Seconds to sleep before stop")

    sds: SdsConfig = Field(default_factory=SdsConfig)
    xray: XrayConfig = Field(default_factory=XrayConfig)
    datadog: DatadogConfig = Field(default_factory=DatadogConfig)
    statsd: StatsDConfig = Field(default_factory=StatsDConfig)
    stats_tags: StatsTagsConfig = Field(default_factory=StatsTagsConfig)
    jaeger: JaegerConfig = Field(default_factory=JaegerConfig)

    cpu_request: str = Field(default="")
    memory_request: str = Field(default="")
    cpu_limit: str = Field(default="")
    memory_limit: str = Field(default="")

    readiness_probe_initial_delay: int = Field(default=1, ge=0)
    readiness_probe_period: int = Field(default=10, ge=1)

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True

    @validator("mesh_name", "virtual_node_name", "sidecar_image")
    def validate_not_blank(cls, v):
        """Reject blank identity fields."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @validator("preview", "pre_stop_delay", pre=True)
    def coerce_numeric_text(cls, v):
        """Accept bare numbers from YAML for text settings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def virtual_node_ref(self) -> str:
        """Mesh-qualified virtual node reference."""
        return f"mesh/{self.mesh_name}/virtualNode/{self.virtual_node_name}"
