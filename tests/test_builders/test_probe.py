"""Tests for the readiness probe."""

from meshsidecar.builders.probe import build_readiness_probe


class TestBuildReadinessProbe:
    """Test build_readiness_probe."""

    def test_probe_fields(self):
        """Test command and timing for the default admin port."""
        probe = build_readiness_probe(5, 10, "9901")

        assert probe.exec.command == [
            "sh",
            "-c",
            "curl -s http://localhost:9901/server_info | grep state | grep -q LIVE",
        ]
        assert probe.initial_delay_seconds == 5
        assert probe.period_seconds == 10
        assert probe.timeout_seconds == 1
        assert probe.success_threshold == 1
        assert probe.failure_threshold == 3

    def test_custom_port(self):
        """Test the probe follows the admin port."""
        probe = build_readiness_probe(1, 10, "15000")

        assert "http://localhost:15000/server_info" in probe.exec.command[2]

    def test_to_dict(self):
        """Test Kubernetes rendering."""
        probe = build_readiness_probe(1, 10, "9901")

        assert probe.to_dict() == {
            "exec": {"command": probe.exec.command},
            "initialDelaySeconds": 1,
            "timeoutSeconds": 1,
            "periodSeconds": 10,
            "successThreshold": 1,
            "failureThreshold": 3,
        }

    def test_fresh_probe_per_call(self):
        """Test calls do not share state."""
        first = build_readiness_probe(1, 10, "9901")
        second = build_readiness_probe(1, 10, "9901")

        assert first == second
        assert first is not second
        assert first.exec.command is not second.exec.command
