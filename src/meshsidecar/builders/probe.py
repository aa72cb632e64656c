"""Readiness probe for the Envoy sidecar."""

from meshsidecar.constants import (
    PROBE_FAILURE_THRESHOLD,
    PROBE_LIVE_STATE,
    PROBE_SUCCESS_THRESHOLD,
    PROBE_TIMEOUT_SECONDS,
)
from meshsidecar.models.container import ExecAction, ProbeSpec
from meshsidecar.utils.templates import READINESS_COMMAND, shell_command


def build_readiness_probe(initial_delay_seconds: int, period_seconds: int, admin_port: str) -> ProbeSpec:
    """Probe that passes once Envoy's admin endpoint reports the LIVE state.

    The check is a loopback call, so it gets a one second timeout. One
    success clears a failure while three consecutive failures are needed
    to mark the proxy unready.
    """
    command = shell_command(
        READINESS_COMMAND,
        admin_port=admin_port,
        live_state=PROBE_LIVE_STATE,
    )
    return ProbeSpec(
        exec=ExecAction(command=command),
        initial_delay_seconds=initial_delay_seconds,
        timeout_seconds=PROBE_TIMEOUT_SECONDS,
        period_seconds=period_seconds,
        success_threshold=PROBE_SUCCESS_THRESHOLD,
        failure_threshold=PROBE_FAILURE_THRESHOLD,
    )
