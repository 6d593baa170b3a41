"""Request and response schemas for configuration rendering."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.targets import ProjectMetadata, VendorTarget


class RenderResult(BaseModel):
    """Outcome of a multi-target render."""

    success: bool = Field(..., description="True when configuration text was produced")
    config: str = Field(default="", description="Combined configuration text")
    error: Optional[str] = Field(None, description="Reason nothing was rendered")
    targets: list[VendorTarget] = Field(default_factory=list, description="Targets rendered, in order")


class FindingSeverity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ReviewFinding(BaseModel):
    """One observation from the configuration review pass."""

    severity: FindingSeverity = Field(..., description="Finding severity")
    code: str = Field(..., description="Stable identifier for the check")
    message: str = Field(..., description="Human-readable message")


class GenerateRequest(BaseModel):
    """Stateless single-target render."""

    target: VendorTarget = Field(..., description="Vendor and platform to render")
    parameters: DeploymentParameters = Field(..., description="Deployment parameters")
    servers: ServerPool = Field(default_factory=ServerPool, description="Server pool")
    project: Optional[ProjectMetadata] = Field(None, description="Optional project header details")


class GenerateAllRequest(BaseModel):
    """Stateless multi-target render."""

    targets: list[VendorTarget] = Field(default_factory=list, description="Targets in output order")
    parameters: DeploymentParameters = Field(..., description="Deployment parameters")
    servers: ServerPool = Field(default_factory=ServerPool, description="Server pool")
    project: Optional[ProjectMetadata] = Field(None, description="Optional project header details")


class GenerateResponse(BaseModel):
    """Rendered configuration."""

    config: str = Field(..., description="Configuration text")
    filename: str = Field(..., description="Suggested download file name")
    findings: list[ReviewFinding] = Field(default_factory=list, description="Review findings")


class ReviewResponse(BaseModel):
    findings: list[ReviewFinding] = Field(default_factory=list, description="Review findings")
    has_errors: bool = Field(default=False, description="At least one finding has error severity")


class ReviewRequest(BaseModel):
    """Review parameters and servers, optionally for one target."""

    target: Optional[VendorTarget] = Field(None, description="Target the configuration is meant for")
    parameters: DeploymentParameters = Field(..., description="Deployment parameters")
    servers: ServerPool = Field(default_factory=ServerPool, description="Server pool")
