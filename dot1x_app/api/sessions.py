"""Stateful configuration session endpoints.

A session keeps a server pool, deployment parameters, a multi-vendor
target list and project details between requests. Each mutation holds
the session's lock.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status
from pydantic import ValidationError

from dot1x_app.api.deps import AdminUser, CloudNac, Sessions, http_error
from dot1x_app.core.aggregator import render_all
from dot1x_app.core.cloud_nac_client import CloudNacError, apply_radius_server
from dot1x_app.core.exceptions import Dot1xConfigError, MissingRequiredFieldError
from dot1x_app.core.review import review_configuration
from dot1x_app.core.session_store import ConfigSession
from dot1x_app.core.validation import check_render_preconditions
from dot1x_app.schemas.config import RenderResult, ReviewResponse, FindingSeverity
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.servers import ServerEntry, ServerKind
from dot1x_app.schemas.sessions import (
    CloudRadiusRequest,
    ServerAddedResponse,
    SessionResponse,
)
from dot1x_app.schemas.targets import ProjectMetadata, VendorTarget

logger = logging.getLogger(__name__)

router = APIRouter()


def _session_response(session: ConfigSession) -> SessionResponse:
    return SessionResponse(
        id=session.id,
        created_at=session.created_at,
        parameters=session.parameters,
        servers=session.servers,
        targets=session.targets.to_list(),
        project=session.project,
    )


def _require_parameters(session: ConfigSession) -> DeploymentParameters:
    if session.parameters is None:
        raise MissingRequiredFieldError("parameters", "Deployment parameters have not been set.")
    return session.parameters


@router.post("/api/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(admin: AdminUser, store: Sessions) -> SessionResponse:
    """Create a session with one empty primary RADIUS entry."""
    session = store.create()
    return _session_response(session)


@router.get("/api/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, admin: AdminUser, store: Sessions) -> SessionResponse:
    try:
        with store.locked(session_id) as session:
            return _session_response(session)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.delete("/api/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, admin: AdminUser, store: Sessions) -> None:
    try:
        store.delete(session_id)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.post(
    "/api/sessions/{session_id}/servers/{kind}",
    response_model=ServerAddedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_server(
    session_id: str,
    kind: ServerKind,
    admin: AdminUser,
    store: Sessions,
    fields: dict[str, Any] = Body(default_factory=dict),
) -> ServerAddedResponse:
    """Append a server entry, optionally with initial field values."""
    try:
        with store.locked(session_id) as session:
            index = session.servers.add_server(kind, **fields)
            entry = session.servers.get_server(kind, index)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Dot1xConfigError as e:
        raise http_error(e) from e
    return ServerAddedResponse(kind=kind.value, index=index, field_ids=entry.field_ids)


@router.patch("/api/sessions/{session_id}/servers/{kind}/{index}")
async def update_server(
    session_id: str,
    kind: ServerKind,
    index: int,
    admin: AdminUser,
    store: Sessions,
    fields: dict[str, Any] = Body(...),
) -> dict:
    """Update fields of an existing server entry."""
    try:
        with store.locked(session_id) as session:
            entry: ServerEntry = session.servers.update_server(kind, index, **fields)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Dot1xConfigError as e:
        raise http_error(e) from e
    return entry.model_dump(mode="json")


@router.delete("/api/sessions/{session_id}/servers/{kind}/{index}", response_model=SessionResponse)
async def remove_server(
    session_id: str,
    kind: ServerKind,
    index: int,
    admin: AdminUser,
    store: Sessions,
) -> SessionResponse:
    """
    Remove a server entry and renumber the ones after it.

    Raises:
        HTTPException: 404 for an unknown index, 409 for the sole primary entry
    """
    try:
        with store.locked(session_id) as session:
            session.servers.remove_server(kind, index)
            logger.info(f"Removed {kind.value} server {index} from session {session_id}")
            return _session_response(session)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.put("/api/sessions/{session_id}/parameters", response_model=SessionResponse)
async def set_parameters(
    session_id: str,
    parameters: DeploymentParameters,
    admin: AdminUser,
    store: Sessions,
) -> SessionResponse:
    try:
        with store.locked(session_id) as session:
            session.parameters = parameters
            return _session_response(session)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.put("/api/sessions/{session_id}/project", response_model=SessionResponse)
async def set_project(
    session_id: str,
    project: ProjectMetadata,
    admin: AdminUser,
    store: Sessions,
) -> SessionResponse:
    try:
        with store.locked(session_id) as session:
            session.project = project
            return _session_response(session)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.post(
    "/api/sessions/{session_id}/targets",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_target(
    session_id: str,
    target: VendorTarget,
    admin: AdminUser,
    store: Sessions,
) -> SessionResponse:
    """
    Add a vendor/platform pair to the multi-vendor list.

    Raises:
        HTTPException: 409 if the pair is already in the list
    """
    try:
        with store.locked(session_id) as session:
            session.targets.add(target)
            return _session_response(session)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.delete("/api/sessions/{session_id}/targets/{vendor}/{platform}", response_model=SessionResponse)
async def remove_target(
    session_id: str,
    vendor: str,
    platform: str,
    admin: AdminUser,
    store: Sessions,
) -> SessionResponse:
    try:
        with store.locked(session_id) as session:
            session.targets.remove(VendorTarget(vendor=vendor, platform=platform))
            return _session_response(session)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.post("/api/sessions/{session_id}/render", response_model=RenderResult)
async def render_session(session_id: str, admin: AdminUser, store: Sessions) -> RenderResult:
    """
    Render every target in the session's list.

    Raises:
        HTTPException: 400 if parameters, the data VLAN or a configured
            RADIUS/RadSec server is missing
    """
    try:
        with store.locked(session_id) as session:
            parameters = _require_parameters(session)
            for target in session.targets:
                check_render_preconditions(target, parameters, session.servers)
            return render_all(session.targets, parameters, session.servers, project=session.project)
    except Dot1xConfigError as e:
        raise http_error(e) from e


@router.post("/api/sessions/{session_id}/review", response_model=ReviewResponse)
async def review_session(session_id: str, admin: AdminUser, store: Sessions) -> ReviewResponse:
    try:
        with store.locked(session_id) as session:
            parameters = _require_parameters(session)
            findings = review_configuration(parameters, session.servers)
    except Dot1xConfigError as e:
        raise http_error(e) from e
    return ReviewResponse(
        findings=findings,
        has_errors=any(f.severity == FindingSeverity.ERROR for f in findings),
    )


@router.post("/api/sessions/{session_id}/cloud-radius")
async def provision_cloud_radius(
    session_id: str,
    request: CloudRadiusRequest,
    admin: AdminUser,
    store: Sessions,
    cloud: CloudNac,
) -> dict:
    """
    Provision a hosted RADIUS server and make it the primary RADIUS entry.

    Raises:
        HTTPException: 400 if the cloud NAC service is not configured,
            502 if the service rejects the request
    """
    if not cloud.is_configured:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cloud NAC service is not configured",
        )
    try:
        store.get(session_id)
    except Dot1xConfigError as e:
        raise http_error(e) from e

    try:
        server = await cloud.create_radius_server(request.region)
    except CloudNacError as e:
        logger.error(f"Cloud RADIUS provisioning failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    try:
        with store.locked(session_id) as session:
            entry = apply_radius_server(session.servers, server)
    except Dot1xConfigError as e:
        raise http_error(e) from e

    logger.info(f"Session {session_id} primary RADIUS server set to cloud server in {request.region}")
    return {"success": True, "server": entry.model_dump(mode="json")}
