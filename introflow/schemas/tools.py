"""Career Tool Schemas — AI-generated resume, cover letter, and profile copy."""

from pydantic import Field

from introflow.schemas.common import ApiModel


class ToolRequest(ApiModel):
    job_description: str | None = Field(None, max_length=20_000)


class ToolResponse(ApiModel):
    content: str
