"""Auth Routes — register, login, logout, and the current user's profile.

Invariants:
    - The raw session token travels only in an HttpOnly cookie
    - Logout always clears the cookie, even without a valid session
"""

from fastapi import APIRouter, Depends, Request, Response, status

from introflow.api.dependencies import get_auth_service, get_current_user, session_token
from introflow.config import get_settings
from introflow.models import User
from introflow.schemas.auth import (
    LoginRequest, ProfileUpdate, RegisterRequest, UserResponse,
)
from introflow.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


def _set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_hours * 3600,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


@router.post(
    "/auth/register", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest, response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    user, token = await auth.register(body.username, body.password, body.name)
    _set_session_cookie(response, token)
    return user


@router.post("/auth/login", response_model=UserResponse)
async def login(
    body: LoginRequest, response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    user, token = await auth.login(body.username, body.password)
    _set_session_cookie(response, token)
    return user


@router.post("/auth/logout")
async def logout(
    request: Request, response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    await auth.logout(session_token(request))
    response.delete_cookie(get_settings().session_cookie_name)
    return {"status": "logged_out"}


@router.get("/auth/me", response_model=UserResponse)
@router.get("/user", response_model=UserResponse)
async def current_user(user: User = Depends(get_current_user)):
    return user


@router.patch("/user", response_model=UserResponse)
async def update_profile(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    return await auth.update_profile(user, body.model_dump(exclude_unset=True))
