"""Pytest fixtures for 802.1X configuration generator tests."""

import os

import pytest

# Set test environment variables before importing app
os.environ["API_AUTH_TOKEN"] = "test-token"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["CLOUD_NAC_API_URL"] = ""
os.environ["GENERATOR_NAME"] = "Dot1Xer Supreme"
os.environ["GENERATOR_URL"] = ""

# Import after setting env vars
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.core.session_store import get_session_store
from dot1x_app.schemas.deployment import (
    AuthMethod,
    DeploymentParameters,
    HostMode,
    PortControlMode,
)
from dot1x_app.schemas.servers import RadiusServer, TacacsServer
from dot1x_app.schemas.targets import VendorTarget


@pytest.fixture
def primary_radius() -> RadiusServer:
    """Configured primary RADIUS server."""
    return RadiusServer(address="10.1.1.10", shared_secret="s3cret")


@pytest.fixture
def single_server_pool(primary_radius) -> ServerPool:
    """Pool with one configured RADIUS server."""
    return ServerPool(radius=[primary_radius])


@pytest.fixture
def redundant_pool() -> ServerPool:
    """Pool with two configured RADIUS servers."""
    return ServerPool(radius=[
        RadiusServer(address="10.1.1.10", shared_secret="s3cret"),
        RadiusServer(address="10.1.1.11", shared_secret="s3cret2"),
    ])


@pytest.fixture
def tacacs_pool(primary_radius) -> ServerPool:
    """Pool with one RADIUS and one TACACS+ server."""
    return ServerPool(
        radius=[primary_radius],
        tacacs=[TacacsServer(address="10.2.2.20", shared_secret="tacKey", port=49, timeout_seconds=7)],
    )


@pytest.fixture
def closed_mode_params() -> DeploymentParameters:
    """802.1X with MAB fallback in closed mode."""
    return DeploymentParameters(
        auth_method=AuthMethod.DOT1X_MAB,
        port_control_mode=PortControlMode.CLOSED,
        host_mode=HostMode.MULTI_AUTH,
        data_vlan="10",
        use_mab=True,
        use_coa=True,
        use_local_fallback=False,
    )


@pytest.fixture
def ios_xe_target() -> VendorTarget:
    return VendorTarget(vendor="cisco", platform="ios-xe")


@pytest.fixture
def admin_headers() -> dict:
    """Bearer token headers accepted by the API."""
    return {"Authorization": "Bearer test-token"}


@pytest.fixture
def client():
    """Create test client with a clean session store."""
    from fastapi.testclient import TestClient

    from dot1x_app.main import app

    get_session_store().clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_session_store().clear()
