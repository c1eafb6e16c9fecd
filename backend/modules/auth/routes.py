"""
Auth API endpoints.

Registration, login, session lookup and logout. The session travels in
an HTTP-only cookie.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from api.dependencies import get_app_settings, get_auth_service
from api.middleware.auth import get_optional_user
from shared.config import Settings
from shared.exceptions import StorageError
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import LoginRequest, MessageResponse, RegisterRequest, UserIdResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserIdResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> UserIdResponse:
    """
    Register a new user with email/password credentials.

    Returns 400 if a field is empty and 409 if the email is taken.
    """
    user_id = await service.register(request)
    return UserIdResponse(id=user_id)


@router.post("/login", response_model=UserIdResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> UserIdResponse:
    """
    Log in and start a session.

    On success the session cookie is set on the response.
    """
    user = await service.login(request)
    session = await service.create_session(user.id)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=session.max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    logger.info(f"User {user.id} logged in")
    return UserIdResponse(id=user.id)


@router.get("/currentUser", response_model=UserIdResponse)
async def current_user(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
):
    """Return the session's user ID, or 401 when there is no valid session."""
    if user is None:
        return JSONResponse(status_code=401, content={"message": "Not authenticated"})
    return UserIdResponse(id=user.id)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    service: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
):
    """Destroy the current session and clear the cookie."""
    token = request.cookies.get(settings.session_cookie_name)
    try:
        await service.destroy_session(token)
    except StorageError as e:
        logger.error(f"Logout failed: {e.message}")
        return JSONResponse(status_code=500, content={"message": "Logout failed"})

    response = JSONResponse(content=MessageResponse(message="Logged out").model_dump())
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response
