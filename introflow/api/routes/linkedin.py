"""Network Account Routes — mark the user's professional-network account linked or not."""

from fastapi import APIRouter, Depends

from introflow.api.dependencies import get_auth_service, get_current_user
from introflow.models import User
from introflow.schemas.auth import LinkedInConnectRequest, UserResponse
from introflow.services.auth_service import AuthService

router = APIRouter(prefix="/api/linkedin", tags=["linkedin"])


@router.post("/connect", response_model=UserResponse)
async def connect(
    body: LinkedInConnectRequest,
    user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    return await auth.connect_linkedin(user, body.session_cookie)


@router.delete("/disconnect", response_model=UserResponse)
async def disconnect(
    user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    return await auth.disconnect_linkedin(user)
