"""Tests for sidecar config file loading."""

import pytest

from meshsidecar.config import load_sidecar_config, parse_env_assignments
from meshsidecar.errors import ConfigError


@pytest.fixture
def config_file(tmp_path):
    """Write a sidecar config file."""
    path = tmp_path / "sidecar.yaml"
    path.write_text("""
mesh_name: m1
virtual_node_name: vn1
sidecar_image: envoy:v1.29
aws_region: us-west-2
admin_access_port: 9901
statsd:
  enabled: true
  address: ref:status.hostIP
cpu_request: 250m
memory_limit: 256Mi
""")
    return path


class TestLoadSidecarConfig:
    """Test load_sidecar_config."""

    def test_load(self, config_file):
        """Test loading a valid file."""
        config = load_sidecar_config(config_file)

        assert config.mesh_name == "m1"
        assert config.admin_access_port == 9901
        assert config.statsd.enabled is True
        assert config.statsd.address == "ref:status.hostIP"
        assert config.statsd.port == 8125
        assert config.cpu_request == "250m"

    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(ConfigError) as exc_info:
            load_sidecar_config(tmp_path / "missing.yaml")

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        """Test a file that is not YAML."""
        path = tmp_path / "bad.yaml"
        path.write_text("mesh_name: [unclosed\n")

        with pytest.raises(ConfigError):
            load_sidecar_config(path)

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list instead of a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError) as exc_info:
            load_sidecar_config(path)

        assert "mapping" in str(exc_info.value)

    def test_validation_error(self, tmp_path):
        """Test a file missing required fields."""
        path = tmp_path / "partial.yaml"
        path.write_text("mesh_name: m1\n")

        with pytest.raises(ConfigError) as exc_info:
            load_sidecar_config(path)

        assert "virtual_node_name" in str(exc_info.value)


class TestParseEnvAssignments:
    """Test parse_env_assignments."""

    def test_assignments(self):
        """Test KEY=VALUE pairs, including values containing '='."""
        env = parse_env_assignments(["A=1", "B=x=y", "C="])

        assert env == {"A": "1", "B": "x=y", "C": ""}

    @pytest.mark.parametrize("assignment", ["NOVALUE", "=1"])
    def test_malformed(self, assignment):
        """Test assignments without a key or separator."""
        with pytest.raises(ConfigError):
            parse_env_assignments([assignment])
