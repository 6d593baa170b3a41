"""API dependencies for authentication and shared services."""

import logging
from typing import Annotated, AsyncIterator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dot1x_app.config import get_settings
from dot1x_app.core.cloud_nac_client import CloudNacClient
from dot1x_app.core.exceptions import (
    Dot1xConfigError,
    DuplicateTargetError,
    EmptyServerPoolError,
    MissingRequiredFieldError,
    ProtectedEntryError,
    ServerNotFoundError,
    SessionNotFoundError,
    TargetNotFoundError,
)
from dot1x_app.core.session_store import SessionStore, get_session_store

logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)


async def verify_admin_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> dict:
    """Verify admin authentication token.

    Args
    ----
        request: FastAPI request object
        credentials: Bearer token credentials

    Returns
    -------
        Token payload dictionary with user info

    Raises
    ------
        HTTPException: If authentication fails
    """
    settings = get_settings()
    client_host = request.client.host if request.client else "unknown"

    if not settings.api_auth_token:
        logger.error("API_AUTH_TOKEN not configured - authentication required")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API authentication not configured",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not credentials:
        logger.warning(f"Missing authentication from {client_host}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if credentials.credentials != settings.api_auth_token:
        logger.warning(f"Invalid token from {client_host}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {
        "sub": "dot1x_admin",
        "type": "api_token",
        "ip": request.client.host if request.client else None,
    }


async def get_cloud_nac_client() -> AsyncIterator[CloudNacClient]:
    """Cloud NAC client built from settings, closed after the request."""
    settings = get_settings()
    client = CloudNacClient(
        api_url=settings.cloud_nac_api_url,
        api_key=settings.cloud_nac_api_key or None,
        username=settings.cloud_nac_username or None,
        password=settings.cloud_nac_password or None,
    )
    try:
        yield client
    finally:
        await client.close()


_ERROR_STATUS: dict[type[Dot1xConfigError], int] = {
    MissingRequiredFieldError: status.HTTP_400_BAD_REQUEST,
    EmptyServerPoolError: status.HTTP_400_BAD_REQUEST,
    SessionNotFoundError: status.HTTP_404_NOT_FOUND,
    ServerNotFoundError: status.HTTP_404_NOT_FOUND,
    TargetNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateTargetError: status.HTTP_409_CONFLICT,
    ProtectedEntryError: status.HTTP_409_CONFLICT,
}


def http_error(exc: Dot1xConfigError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the caller."""
    status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=str(exc))


# Type aliases for dependency injection
AdminUser = Annotated[dict, Depends(verify_admin_token)]
Sessions = Annotated[SessionStore, Depends(get_session_store)]
CloudNac = Annotated[CloudNacClient, Depends(get_cloud_nac_client)]
