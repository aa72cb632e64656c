"""Policy table for the Envoy sidecar."""

# Container identity
SIDECAR_CONTAINER_NAME = "envoy"
SIDECAR_RUN_AS_USER = 1337
STATS_PORT_NAME = "stats"
STATS_PORT_PROTOCOL = "TCP"

# Envoy falls back to this admin port when none is configured
DEFAULT_ADMIN_PORT = 9901

# Readiness probe
PROBE_TIMEOUT_SECONDS = 1
PROBE_SUCCESS_THRESHOLD = 1
PROBE_FAILURE_THRESHOLD = 3
PROBE_LIVE_STATE = "LIVE"

# Tracing config file is provisioned into this directory by the injector
TRACING_CONFIG_MOUNT_PATH = "/tmp/envoy"
TRACING_CONFIG_FILE = "/tmp/envoy/envoyconf.yaml"

# Downward API
HOST_IP_SENTINEL = "ref:status.hostIP"
HOST_IP_FIELD_PATH = "status.hostIP"

# Environment variable names
ENV_VIRTUAL_NODE_NAME = "APPMESH_VIRTUAL_NODE_NAME"
ENV_AWS_REGION = "AWS_REGION"
ENV_PREVIEW = "APPMESH_PREVIEW"
ENV_LOG_LEVEL = "ENVOY_LOG_LEVEL"
ENV_SDS_SOCKET_PATH = "APPMESH_SDS_SOCKET_PATH"
ENV_ADMIN_ACCESS_PORT = "ENVOY_ADMIN_ACCESS_PORT"
ENV_ADMIN_ACCESS_LOG_FILE = "ENVOY_ADMIN_ACCESS_LOG_FILE"
ENV_XRAY_ENABLE = "ENABLE_ENVOY_XRAY_TRACING"
ENV_XRAY_DAEMON_PORT = "XRAY_DAEMON_PORT"
ENV_DATADOG_ENABLE = "ENABLE_ENVOY_DATADOG_TRACING"
ENV_DATADOG_PORT = "DATADOG_TRACER_PORT"
ENV_DATADOG_ADDRESS = "DATADOG_TRACER_ADDRESS"
ENV_STATS_TAGS_ENABLE = "ENABLE_ENVOY_STATS_TAGS"
ENV_STATSD_ENABLE = "ENABLE_ENVOY_DOG_STATSD"
ENV_STATSD_PORT = "STATSD_PORT"
ENV_STATSD_ADDRESS = "STATSD_ADDRESS"
ENV_TRACING_CFG_FILE = "ENVOY_TRACING_CFG_FILE"

# Only these keys may resolve the host IP sentinel to a field reference
HOST_IP_ELIGIBLE_KEYS = frozenset({ENV_STATSD_ADDRESS, ENV_DATADOG_ADDRESS})
