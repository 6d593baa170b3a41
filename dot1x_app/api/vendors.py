"""Vendor and platform catalog endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from dot1x_app.api.deps import AdminUser
from dot1x_app.core.renderers.registry import get_registry
from dot1x_app.core.vendors import VENDOR_CATALOG, VendorInfo, get_vendor
from dot1x_app.schemas.targets import VendorTarget

logger = logging.getLogger(__name__)

router = APIRouter()


class VendorCatalogResponse(BaseModel):
    """Selectable vendors and the targets with a dedicated renderer."""

    vendors: list[VendorInfo] = Field(default_factory=list, description="Vendor catalog")
    registered: list[VendorTarget] = Field(
        default_factory=list,
        description="Targets with a dedicated renderer; all others use the generic template",
    )


@router.get("/api/vendors", response_model=VendorCatalogResponse)
async def list_vendors(admin: AdminUser) -> VendorCatalogResponse:
    """List vendors, platforms and registered renderers."""
    return VendorCatalogResponse(
        vendors=VENDOR_CATALOG,
        registered=get_registry().list_registered(),
    )


@router.get("/api/vendors/{vendor_id}", response_model=VendorInfo)
async def get_vendor_platforms(vendor_id: str, admin: AdminUser) -> VendorInfo:
    """
    Platforms offered for one vendor.

    Raises:
        HTTPException: 404 if the vendor is not in the catalog
    """
    vendor = get_vendor(vendor_id)
    if vendor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown vendor: {vendor_id}")
    return vendor
