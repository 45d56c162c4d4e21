"""Mutual Connection Routes — mounted under both /api/mutuals and /api/mutual-connections.

Invariants:
    - A mutual can only be attached to an employee of one of the user's jobs
    - PATCH applies only the fields present in the body
"""

from fastapi import APIRouter, Depends, Query, status

from introflow.api.dependencies import get_current_user, get_store
from introflow.core.domain_types import MAX_ENTITY_ID
from introflow.models import User
from introflow.schemas.outreach import MutualCreate, MutualResponse, MutualUpdate
from introflow.services.entity_store import Store
from introflow.services.outreach_service import OutreachService

# Prefix given at registration time (main.py), once per alias
router = APIRouter(tags=["mutuals"])


@router.get("", response_model=list[MutualResponse])
async def list_mutuals(
    employee_id: int | None = Query(None, alias="employeeId", gt=0, le=MAX_ENTITY_ID),
    limit: int | None = Query(None, ge=1, le=500),
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).list_mutuals(user, employee_id, limit)


@router.post("", response_model=MutualResponse, status_code=status.HTTP_201_CREATED)
async def create_mutual(
    body: MutualCreate,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).create_mutual(user, body.model_dump())


@router.get("/{mutual_id}", response_model=MutualResponse)
async def get_mutual(
    mutual_id: int,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).get_mutual(user, mutual_id)


@router.patch("/{mutual_id}", response_model=MutualResponse)
async def update_mutual(
    mutual_id: int,
    body: MutualUpdate,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).update_mutual(
        user, mutual_id, body.model_dump(exclude_unset=True),
    )
