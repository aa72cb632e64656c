"""Shared fixtures."""

import pytest

from meshsidecar.models.config import SidecarConfig


@pytest.fixture
def base_config():
    """Config with no optional features enabled."""
    return SidecarConfig(
        mesh_name="m1",
        virtual_node_name="vn1",
        sidecar_image="840364872350.dkr.ecr.us-west-2.amazonaws.com/aws-appmesh-envoy:v1.29.6.0-prod",
        aws_region="us-west-2",
        preview="0",
        log_level="info",
    )


@pytest.fixture
def make_config(base_config):
    """Build a config from the base one with overrides applied."""
    def _make(**overrides):
        data = base_config.dict()
        data.update(overrides)
        return SidecarConfig(**data)
    return _make
