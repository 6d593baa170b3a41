"""Schemas for the cloud NAC service."""

from pydantic import BaseModel, Field


class CloudRadiusServer(BaseModel):
    """A hosted RADIUS server returned by the cloud NAC service."""

    model_config = {"populate_by_name": True}

    address: str = Field(..., alias="ip", description="Server address")
    shared_secret: str = Field(..., alias="secret", description="Shared secret")
    auth_port: int = Field(default=1812, description="Authentication port")
    acct_port: int = Field(default=1813, description="Accounting port")
    region: str = Field(default="", description="Hosting region")
