"""Client for the cloud NAC service.

Used to provision a hosted RADIUS server and copy its address and secret
into a session's server pool. Authenticates with either an API key or a
username/password exchanged for a bearer token.
"""

import logging
from typing import Any, Optional

import httpx

from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.cloud_nac import CloudRadiusServer
from dot1x_app.schemas.servers import RadiusServer, ServerKind

logger = logging.getLogger(__name__)


class CloudNacError(Exception):
    """Cloud NAC API error."""
    pass


class CloudNacClient:
    """Async client for the cloud NAC REST API."""

    API_PREFIX = "/api"

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        """Initialize the client.

        Args:
            api_url: Service base URL, e.g. https://clear.portnox.com
            api_key: API key sent as ``X-API-Key``
            username: Account name, used when no API key is given
            password: Account password
            transport: Optional transport override
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.username = username
        self.password = password
        self._transport = transport
        self._timeout = timeout
        self._token: Optional[str] = None
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_url) and (
            bool(self.api_key) or bool(self.username and self.password)
        )

    def _url(self, endpoint: str) -> str:
        return f"{self.api_url}{self.API_PREFIX}/{endpoint.lstrip('/')}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _auth_headers(self) -> dict[str, str]:
        if self.api_key:
            return {"X-API-Key": self.api_key}
        if not (self.username and self.password):
            raise CloudNacError("No cloud NAC credentials configured")
        if self._token is None:
            client = await self._get_client()
            try:
                response = await client.post(
                    self._url("auth/token"),
                    json={"username": self.username, "password": self.password},
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise CloudNacError(f"Authentication failed: {e}") from e
            token = response.json().get("token")
            if not token:
                raise CloudNacError("Authentication response did not include a token")
            self._token = token
            logger.info("Obtained cloud NAC access token")
        return {"Authorization": f"Bearer {self._token}"}

    async def call(
        self,
        endpoint: str,
        method: str = "GET",
        data: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Send an authenticated request and return the decoded JSON body.

        Raises:
            CloudNacError: Transport failure or non-2xx response
        """
        client = await self._get_client()
        headers = await self._auth_headers()
        try:
            response = await client.request(
                method, self._url(endpoint), headers=headers, json=data,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CloudNacError(
                f"{method} {endpoint} failed: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise CloudNacError(f"{method} {endpoint} failed: {e}") from e
        if not response.content:
            return {}
        return response.json()

    async def test_connection(self) -> dict:
        """Check credentials against the status endpoint.

        Returns:
            Dict with ``success`` and ``message`` or ``error``
        """
        try:
            status = await self.call("status")
        except CloudNacError as e:
            logger.warning(f"Cloud NAC connection test failed: {e}")
            return {"success": False, "error": str(e)}
        return {"success": True, "message": "Connected to cloud NAC service", "status": status}

    async def create_radius_server(self, region: str) -> CloudRadiusServer:
        """Provision a hosted RADIUS server in ``region``."""
        payload = await self.call("radius-servers", method="POST", data={"region": region})
        try:
            server = CloudRadiusServer.model_validate({"region": region, **payload})
        except ValueError as e:
            raise CloudNacError(f"Unexpected RADIUS server response: {e}") from e
        logger.info(f"Provisioned cloud RADIUS server in {region}")
        return server

    async def get_network_devices(self) -> list[dict]:
        result = await self.call("network-devices")
        return result.get("items", [])


def apply_radius_server(pool: ServerPool, server: CloudRadiusServer) -> RadiusServer:
    """Write a provisioned server into the pool's first RADIUS entry."""
    fields = {
        "address": server.address,
        "shared_secret": server.shared_secret,
        "auth_port": server.auth_port,
        "acct_port": server.acct_port,
    }
    if not pool.entries(ServerKind.RADIUS):
        pool.add_server(ServerKind.RADIUS)
    return pool.update_server(ServerKind.RADIUS, 1, **fields)
