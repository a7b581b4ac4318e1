"""
Alnwick Community Center - Bearer token authentication and admin gate.

Two configured tokens: ADMIN_TOKEN (role "admin") and MEMBER_TOKEN
(role "member"). Missing or unknown token -> 401, non-admin on an admin
route -> 403. The event routes trust this gate and check nothing else.
"""

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import GatewaySettings, get_settings

logger = structlog.get_logger()

security = HTTPBearer(auto_error=False)


async def verify_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: GatewaySettings = Depends(get_settings),
) -> dict[str, str]:
    """
    Verify the bearer token and resolve the caller's role.

    Returns user dict if valid, raises 401 if missing or invalid.
    """
    if not settings.admin_token:
        logger.error("admin_token_not_configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API token not configured",
        )

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = credentials.credentials
    if token == settings.admin_token:
        return {"username": "admin", "role": "admin"}
    if settings.member_token and token == settings.member_token:
        return {"username": "member", "role": "member"}

    logger.warning("invalid_token_attempt")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid authentication credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    user: dict[str, str] = Depends(verify_token),
) -> dict[str, str]:
    """Dependency to get the current authenticated user."""
    return user


async def require_admin(
    user: dict[str, str] = Depends(get_current_user),
) -> dict[str, str]:
    """Dependency for admin-only routes."""
    if user.get("role") != "admin":
        logger.warning("admin_access_denied", username=user.get("username"))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user
