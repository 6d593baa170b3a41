"""Unit tests for the cloud NAC client."""

import json

import httpx
import pytest

from dot1x_app.core.cloud_nac_client import CloudNacClient, CloudNacError, apply_radius_server
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.cloud_nac import CloudRadiusServer
from dot1x_app.schemas.servers import RadiusServer


def make_client(handler, **kwargs) -> CloudNacClient:
    return CloudNacClient(
        api_url="https://nac.example.com/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.unit
class TestCloudNacClient:
    """Test cloud NAC API calls."""

    @pytest.mark.asyncio
    async def test_api_key_header(self):
        """Test API key authentication and URL building."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["key"] = request.headers.get("X-API-Key")
            return httpx.Response(200, json={"status": "ok"})

        client = make_client(handler, api_key="abc123")
        result = await client.test_connection()
        await client.close()

        assert result["success"] is True
        assert seen["url"] == "https://nac.example.com/api/status"
        assert seen["key"] == "abc123"

    @pytest.mark.asyncio
    async def test_token_exchange(self):
        """Test username/password are exchanged for a bearer token once."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            if request.url.path == "/api/auth/token":
                body = json.loads(request.content)
                assert body == {"username": "admin", "password": "pw"}
                return httpx.Response(200, json={"token": "tok-1"})
            assert request.headers["Authorization"] == "Bearer tok-1"
            return httpx.Response(200, json={"items": [{"name": "sw1"}]})

        client = make_client(handler, username="admin", password="pw")
        devices = await client.get_network_devices()
        await client.get_network_devices()
        await client.close()

        assert devices == [{"name": "sw1"}]
        assert calls == ["/api/auth/token", "/api/network-devices", "/api/network-devices"]

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        """Test non-2xx responses raise CloudNacError."""
        client = make_client(lambda request: httpx.Response(503), api_key="abc123")
        with pytest.raises(CloudNacError, match="HTTP 503"):
            await client.call("status")
        await client.close()

    @pytest.mark.asyncio
    async def test_connection_failure_reported(self):
        """Test connection test reports failures instead of raising."""
        client = make_client(lambda request: httpx.Response(401), api_key="bad")
        result = await client.test_connection()
        await client.close()
        assert result["success"] is False
        assert "401" in result["error"]

    @pytest.mark.asyncio
    async def test_create_radius_server(self):
        """Test provisioning parses the returned server."""
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/api/radius-servers"
            return httpx.Response(201, json={"ip": "203.0.113.5", "secret": "cloudsecret"})

        client = make_client(handler, api_key="abc123")
        server = await client.create_radius_server("eu-west")
        await client.close()

        assert server.address == "203.0.113.5"
        assert server.shared_secret == "cloudsecret"
        assert server.region == "eu-west"

    def test_not_configured_without_credentials(self):
        assert not CloudNacClient(api_url="https://nac.example.com").is_configured
        assert CloudNacClient(api_url="https://nac.example.com", api_key="k").is_configured


@pytest.mark.unit
class TestApplyRadiusServer:
    """Test writing a cloud server into the pool."""

    def test_overwrites_first_entry(self):
        """Test the first RADIUS entry receives the cloud server values."""
        pool = ServerPool(radius=[
            RadiusServer(address="10.0.0.1", shared_secret="old"),
            RadiusServer(address="10.0.0.2", shared_secret="keep"),
        ])
        apply_radius_server(pool, CloudRadiusServer(address="203.0.113.5", shared_secret="cloudsecret"))

        assert pool.radius[0].address == "203.0.113.5"
        assert pool.radius[0].shared_secret == "cloudsecret"
        assert pool.radius[1].shared_secret == "keep"

    def test_creates_entry_in_empty_pool(self):
        pool = ServerPool()
        entry = apply_radius_server(pool, CloudRadiusServer(ip="203.0.113.5", secret="s"))
        assert entry.index == 1
        assert pool.radius[0].is_configured
