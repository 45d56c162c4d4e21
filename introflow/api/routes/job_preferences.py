"""Job Preference Routes — the user's desired titles, locations and industries."""

from fastapi import APIRouter, Depends, Response, status

from introflow.api.dependencies import get_current_user, get_store
from introflow.models import User
from introflow.schemas.jobs import JobPreferencesPayload
from introflow.services.entity_store import Store
from introflow.services.job_service import JobService

router = APIRouter(prefix="/api/job-preferences", tags=["jobs"])


@router.get("", response_model=JobPreferencesPayload)
async def get_preferences(
    user: User = Depends(get_current_user), store: Store = Depends(get_store),
):
    return await JobService(store).get_preferences(user)


@router.post("", response_model=JobPreferencesPayload)
async def save_preferences(
    body: JobPreferencesPayload,
    response: Response,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Replace preferences wholesale. 201 when none existed yet, 200 otherwise."""
    preferences, created = await JobService(store).save_preferences(
        user, body.titles, body.locations, body.industries,
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return preferences
