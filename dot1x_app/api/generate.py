"""Stateless configuration rendering endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from dot1x_app.api.deps import AdminUser, http_error
from dot1x_app.core.aggregator import render_all
from dot1x_app.core.augmentations import download_filename, generate_config
from dot1x_app.core.exceptions import Dot1xConfigError
from dot1x_app.core.review import review_configuration
from dot1x_app.core.targets import TargetList
from dot1x_app.core.validation import check_render_preconditions
from dot1x_app.schemas.config import (
    FindingSeverity,
    GenerateAllRequest,
    GenerateRequest,
    GenerateResponse,
    RenderResult,
    ReviewRequest,
    ReviewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/config/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest, admin: AdminUser) -> GenerateResponse:
    """
    Render configuration for a single vendor/platform target.

    Unknown targets are rendered with the generic template.

    Raises:
        HTTPException: 400 if the data VLAN, target or server pool is missing
    """
    logger.info(f"Config generation for {request.target} requested by {admin['sub']}")
    try:
        check_render_preconditions(request.target, request.parameters, request.servers)
    except Dot1xConfigError as e:
        raise http_error(e) from e

    config = generate_config(
        request.target, request.parameters, request.servers, project=request.project,
    )
    return GenerateResponse(
        config=config,
        filename=download_filename(request.target, request.project),
        findings=review_configuration(request.parameters, request.servers, request.target),
    )


@router.post("/api/config/generate-all", response_model=RenderResult)
async def generate_all(request: GenerateAllRequest, admin: AdminUser) -> RenderResult:
    """
    Render every target into one document separated by banners.

    An empty target list returns ``success: false`` with an error message.

    Raises:
        HTTPException: 409 on duplicate targets, 400 on missing inputs
    """
    logger.info(f"Multi-vendor generation for {len(request.targets)} target(s) by {admin['sub']}")
    try:
        targets = TargetList(request.targets)
        for target in targets:
            check_render_preconditions(target, request.parameters, request.servers)
    except Dot1xConfigError as e:
        raise http_error(e) from e

    return render_all(targets, request.parameters, request.servers, project=request.project)


@router.post("/api/config/review", response_model=ReviewResponse)
async def review(request: ReviewRequest, admin: AdminUser) -> ReviewResponse:
    """Review deployment parameters and servers without rendering."""
    findings = review_configuration(request.parameters, request.servers, request.target)
    return ReviewResponse(
        findings=findings,
        has_errors=any(f.severity == FindingSeverity.ERROR for f in findings),
    )


@router.post("/api/config/download", response_class=PlainTextResponse)
async def download(request: GenerateRequest, admin: AdminUser) -> PlainTextResponse:
    """Render a single target as a plain-text file attachment."""
    try:
        check_render_preconditions(request.target, request.parameters, request.servers)
    except Dot1xConfigError as e:
        raise http_error(e) from e

    config = generate_config(
        request.target, request.parameters, request.servers, project=request.project,
    )
    filename = download_filename(request.target, request.project)
    logger.info(f"Configuration download {filename} requested by {admin['sub']}")
    return PlainTextResponse(
        content=config,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
