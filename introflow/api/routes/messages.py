"""Message Routes — outreach queue, template drafts, and lifecycle updates.

Invariants:
    - Status filter accepts the same legacy spellings as request bodies
    - POST /draft never writes; POST "" may also update the mutual's rating
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.exceptions import RequestValidationError

from introflow.api.dependencies import get_current_user, get_store
from introflow.core.domain_types import MAX_ENTITY_ID, MessageStatus, parse_status
from introflow.models import User
from introflow.schemas.outreach import (
    DraftRequest, DraftResponse, MessageCreate, MessageResponse, MessageUpdate,
)
from introflow.services.entity_store import Store
from introflow.services.outreach_service import OutreachService

router = APIRouter(prefix="/api/messages", tags=["messages"])


def _status_filter(raw: str | None) -> MessageStatus | None:
    if raw is None:
        return None
    try:
        return parse_status(raw)
    except ValueError as e:
        raise RequestValidationError([{
            "loc": ("query", "status"), "msg": str(e), "type": "value_error",
        }])


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    mutual_id: int | None = Query(None, alias="mutualId", gt=0, le=MAX_ENTITY_ID),
    status_param: str | None = Query(None, alias="status"),
    limit: int | None = Query(None, ge=1, le=500),
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).list_messages(
        user, mutual_id, _status_filter(status_param), limit,
    )


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(
    body: MessageCreate,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).create_message(user, body.model_dump())


@router.post("/draft", response_model=DraftResponse)
async def draft_message(
    body: DraftRequest,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    draft = await OutreachService(store).draft(
        user,
        body.mutual_id,
        employee_id=body.employee_id,
        job_id=body.job_id,
        rated_strength=body.rated_strength,
        calendar_url=body.calendar_url,
    )
    return DraftResponse(
        mutual_id=draft.target.mutual.id,
        employee_id=draft.target.employee.id,
        job_id=draft.target.job.id if draft.target.job else None,
        rated_strength=draft.rated_strength,
        template=draft.tier,
        message_text=draft.message_text,
    )


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: int,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).get_message(user, message_id)


@router.patch("/{message_id}", response_model=MessageResponse)
async def update_message(
    message_id: int,
    body: MessageUpdate,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await OutreachService(store).update_message(
        user, message_id, body.model_dump(exclude_unset=True),
    )
