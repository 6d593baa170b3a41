"""Pydantic schemas for render targets and project metadata."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class VendorTarget(BaseModel):
    """A (vendor, platform) pair used as the renderer registry key."""

    model_config = {"frozen": True}

    vendor: str = Field(..., max_length=64, description="Vendor identifier, e.g. cisco")
    platform: str = Field(..., max_length=64, description="Platform identifier, e.g. ios-xe")

    @property
    def key(self) -> tuple[str, str]:
        return (self.vendor, self.platform)

    def __str__(self) -> str:
        return f"{self.vendor}/{self.platform}"


class ProjectMetadata(BaseModel):
    """Engagement details prepended to a configuration as comments."""

    company_name: Optional[str] = Field(None, max_length=255, description="Customer company name")
    opportunity_id: Optional[str] = Field(None, max_length=255, description="Sales opportunity identifier")
    contact_email: Optional[str] = Field(None, max_length=255, description="Engineer contact email")
    customer_email: Optional[str] = Field(None, max_length=255, description="Customer contact email")
    date_generated: date = Field(default_factory=date.today, description="Date stamped into the header")
