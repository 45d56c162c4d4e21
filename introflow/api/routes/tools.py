"""Career Tool Routes — AI-written resume, cover letter and profile copy.

Invariants:
    - Generation failures surface as 502 EXTERNAL_SERVICE_ERROR
    - Nothing generated here is stored
"""

from fastapi import APIRouter, Depends

from introflow.api.dependencies import get_content_generator, get_current_user, get_store
from introflow.core.domain_types import CareerTool
from introflow.core.repository_protocols import ContentGenerator
from introflow.models import User
from introflow.schemas.tools import ToolRequest, ToolResponse
from introflow.services.career_tools import run_career_tool
from introflow.services.entity_store import Store

router = APIRouter(prefix="/api/tools", tags=["tools"])


@router.post("/{tool}", response_model=ToolResponse)
async def generate(
    tool: CareerTool,
    body: ToolRequest | None = None,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
    generator: ContentGenerator = Depends(get_content_generator),
):
    preferences = await store.get_preferences_for_user(user.id)
    content = await run_career_tool(
        generator, tool, user, preferences, body.job_description if body else None,
    )
    return ToolResponse(content=content)
