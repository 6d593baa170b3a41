"""Pydantic schemas package."""

from .deployment import (
    AuthMethod,
    DeploymentParameters,
    HostMode,
    PortControlMode,
    VlanAssignment,
)
from .servers import (
    RadiusServer,
    RadSecServer,
    RadSecTransport,
    ServerEntry,
    ServerKind,
    TacacsServer,
)
from .targets import ProjectMetadata, VendorTarget

__all__ = [
    "AuthMethod",
    "DeploymentParameters",
    "HostMode",
    "PortControlMode",
    "VlanAssignment",
    "RadiusServer",
    "RadSecServer",
    "RadSecTransport",
    "ServerEntry",
    "ServerKind",
    "TacacsServer",
    "ProjectMetadata",
    "VendorTarget",
]
