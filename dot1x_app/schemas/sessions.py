"""Schemas for stateful configuration sessions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.targets import ProjectMetadata, VendorTarget


class SessionResponse(BaseModel):
    """Current state of a configuration session."""

    id: str = Field(..., description="Session identifier")
    created_at: datetime = Field(..., description="Creation timestamp")
    parameters: Optional[DeploymentParameters] = Field(None, description="Deployment parameters")
    servers: ServerPool = Field(..., description="Server pool")
    targets: list[VendorTarget] = Field(default_factory=list, description="Multi-vendor targets")
    project: Optional[ProjectMetadata] = Field(None, description="Project header details")


class ServerAddedResponse(BaseModel):
    kind: str = Field(..., description="Server list the entry was added to")
    index: int = Field(..., description="1-based index of the new entry")
    field_ids: dict[str, str] = Field(default_factory=dict, description="Form field identifiers")


class CloudRadiusRequest(BaseModel):
    """Provision a hosted RADIUS server and use it as the primary server."""

    region: str = Field(default="us-east", max_length=64, description="Cloud region")
