"""Dashboard Stats Routes — counts computed on demand from the user's rows."""

from fastapi import APIRouter, Depends

from introflow.api.dependencies import get_current_user, get_store
from introflow.models import User
from introflow.schemas.outreach import StatsResponse
from introflow.services.entity_store import Store
from introflow.services.stats_service import StatsService

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
@router.get("/dashboard/stats", response_model=StatsResponse)
async def get_stats(
    user: User = Depends(get_current_user), store: Store = Depends(get_store),
):
    return await StatsService(store).compute_stats(user)
