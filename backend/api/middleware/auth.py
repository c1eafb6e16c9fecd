"""
Session authentication middleware.

Resolves the session cookie to the logged-in user.
"""

from typing import Optional
from fastapi import Depends, Request

from shared.config import Settings
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_app_settings, get_auth_service
from modules.auth.interfaces import IAuthService


async def get_current_user(
    request: Request,
    service: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. A missing,
    invalid or expired session raises an AuthenticationError (401).

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = request.cookies.get(settings.session_cookie_name)
    return await service.resolve_session(token)


async def get_optional_user(
    request: Request,
    service: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without a session.
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return None

    try:
        return await service.resolve_session(token)
    except AuthenticationError:
        return None


async def require_capture_access(
    request: Request,
    service: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> Optional[AuthenticatedUser]:
    """
    Gate for the capture and diagnostic routes.

    Requires a session when settings.capture_requires_auth is set,
    otherwise lets anonymous requests through.
    """
    if settings.capture_requires_auth:
        return await get_current_user(request, service, settings)
    return await get_optional_user(request, service, settings)


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
CaptureAccess = Depends(require_capture_access)
