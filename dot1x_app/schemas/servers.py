"""Pydantic schemas for RADIUS, RadSec and TACACS+ server entries."""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class ServerKind(str, Enum):
    """Server pool list selector."""
    RADIUS = "radius"
    RADSEC = "radsec"
    TACACS = "tacacs"


class RadSecTransport(str, Enum):
    """RadSec transport protocol."""
    TLS = "tls"
    DTLS = "dtls"


class ServerEntry(BaseModel):
    """Fields shared by every server pool entry.

    An entry is *configured* only when both the address and the shared
    secret are non-empty. Unconfigured entries stay in the pool so the
    caller can fill them in later, but they are never rendered.
    """

    kind: ClassVar[ServerKind]
    label_prefix: ClassVar[str]
    field_names: ClassVar[tuple[str, ...]]

    model_config = {"extra": "forbid"}

    index: int = Field(default=1, ge=1, description="1-based position in the pool, maintained by the pool")
    address: str = Field(default="", max_length=255, description="Server IP address or hostname")
    shared_secret: str = Field(default="", max_length=255, description="Shared secret")

    @property
    def is_configured(self) -> bool:
        return bool(self.address.strip()) and bool(self.shared_secret)

    @property
    def label(self) -> str:
        return f"{self.label_prefix} {self.index}"

    @property
    def field_ids(self) -> dict[str, str]:
        """Form field identifiers for this entry, e.g. ``radius-ip-2``."""
        return {
            name: f"{self.kind.value}-{name}-{self.index}"
            for name in self.field_names
        }


class RadiusServer(ServerEntry):
    """RADIUS authentication/accounting server."""

    kind: ClassVar[ServerKind] = ServerKind.RADIUS
    label_prefix: ClassVar[str] = "RADIUS Server"
    field_names: ClassVar[tuple[str, ...]] = (
        "ip", "key", "auth-port", "acct-port", "coa-port", "enable-coa",
    )

    auth_port: int = Field(default=1812, ge=1, le=65535, description="Authentication port")
    acct_port: int = Field(default=1813, ge=1, le=65535, description="Accounting port")
    coa_port: int = Field(default=3799, ge=1, le=65535, description="Change of Authorization port")
    coa_enabled: bool = Field(default=True, description="Server accepts CoA requests")


class RadSecServer(ServerEntry):
    """RADIUS over TLS/DTLS server."""

    kind: ClassVar[ServerKind] = ServerKind.RADSEC
    label_prefix: ClassVar[str] = "RadSec Server"
    field_names: ClassVar[tuple[str, ...]] = (
        "ip", "key", "port", "protocol", "validate-server",
    )

    tls_port: int = Field(default=2083, ge=1, le=65535, description="TLS/DTLS port")
    transport: RadSecTransport = Field(default=RadSecTransport.TLS, description="Transport protocol")
    validate_peer_certificate: bool = Field(default=True, description="Check the server certificate identity")


class TacacsServer(ServerEntry):
    """TACACS+ device administration server."""

    kind: ClassVar[ServerKind] = ServerKind.TACACS
    label_prefix: ClassVar[str] = "TACACS+ Server"
    field_names: ClassVar[tuple[str, ...]] = ("ip", "key", "port", "timeout")

    port: int = Field(default=49, ge=1, le=65535, description="TACACS+ port")
    timeout_seconds: int = Field(default=5, description="Request timeout in seconds")


SERVER_TYPES: dict[ServerKind, type[ServerEntry]] = {
    ServerKind.RADIUS: RadiusServer,
    ServerKind.RADSEC: RadSecServer,
    ServerKind.TACACS: TacacsServer,
}
