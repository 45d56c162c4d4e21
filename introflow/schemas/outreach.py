"""Outreach Schemas — mutual connections, messages, drafts, and dashboard stats.

Invariants:
    - rated_strength is validated to 0–5 on every input
    - status/outcome inputs are normalized to the canonical vocabulary;
      the legacy `intro_made` status implies outcome IntroMade when none is given
    - Update bodies are partial: only fields present in the request are applied
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator, model_validator

from introflow.core.domain_types import (
    MAX_STRENGTH, MIN_STRENGTH, MessageOutcome, MessageStatus, TemplateTier,
    is_legacy_intro_status, parse_outcome, parse_status,
)
from introflow.schemas.common import ApiModel, reject_explicit_nulls


# --- Mutual connections ------------------------------------------------------

class MutualCreate(ApiModel):
    employee_id: int = Field(gt=0)
    name: str = Field(min_length=1, max_length=255)
    title: str = Field("", max_length=255)
    company: str | None = Field(None, max_length=255)
    linkedin_url: str = Field("", alias="linkedInUrl", max_length=2000)
    connected_since: datetime | None = None
    rated_strength: int = Field(0, ge=MIN_STRENGTH, le=MAX_STRENGTH)
    connection_context: str | None = Field(None, max_length=5000)


class MutualUpdate(ApiModel):
    """Partial update; the star-rating UI sends only ratedStrength."""
    name: str | None = Field(None, min_length=1, max_length=255)
    title: str | None = Field(None, max_length=255)
    company: str | None = Field(None, max_length=255)
    linkedin_url: str | None = Field(None, alias="linkedInUrl", max_length=2000)
    connected_since: datetime | None = None
    rated_strength: int | None = Field(None, ge=MIN_STRENGTH, le=MAX_STRENGTH)
    connection_context: str | None = Field(None, max_length=5000)

    @model_validator(mode="after")
    def check_required_not_null(self):
        reject_explicit_nulls(
            self, ("name", "title", "linkedin_url", "rated_strength"),
        )
        return self


class MutualResponse(ApiModel):
    id: int
    user_id: int
    employee_id: int
    name: str
    title: str
    company: str | None = None
    linkedin_url: str = Field(alias="linkedInUrl")
    connected_since: datetime | None = None
    rated_strength: int
    connection_context: str | None = None


# --- Messages ----------------------------------------------------------------

class _MessageFields(ApiModel):
    status: MessageStatus | None = None
    outcome: MessageOutcome | None = None
    message_text: str | None = Field(None, min_length=1, max_length=10_000)

    @model_validator(mode="before")
    @classmethod
    def expand_legacy_intro_status(cls, data: Any) -> Any:
        if isinstance(data, dict) and is_legacy_intro_status(data.get("status")):
            if data.get("outcome") is None:
                data = {**data, "outcome": MessageOutcome.INTRO_MADE.value}
        return data

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> Any:
        return parse_status(v) if isinstance(v, str) else v

    @field_validator("outcome", mode="before")
    @classmethod
    def normalize_outcome(cls, v: Any) -> Any:
        return parse_outcome(v) if isinstance(v, str) else v

    @field_validator("message_text")
    @classmethod
    def strip_message_text(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("messageText cannot be empty or whitespace")
        return v


class MessageCreate(_MessageFields):
    """Queue or send an outreach message.

    message_text omitted → rendered from the strength-rated template.
    rated_strength given and different from the mutual's → the mutual is updated.
    """
    mutual_id: int = Field(gt=0)
    employee_id: int | None = Field(None, gt=0)
    job_id: int | None = Field(None, gt=0)
    rated_strength: int | None = Field(None, ge=MIN_STRENGTH, le=MAX_STRENGTH)
    calendar_url: str | None = Field(None, max_length=2000)
    sent_date: datetime | None = None
    response_date: datetime | None = None
    intro_date: datetime | None = None


class MessageUpdate(_MessageFields):
    """Partial update of status, outcome and/or text. {} changes nothing."""

    @model_validator(mode="after")
    def check_required_not_null(self):
        reject_explicit_nulls(self, ("status", "outcome", "message_text"))
        return self


class MessageResponse(ApiModel):
    id: int
    user_id: int
    mutual_id: int
    employee_id: int
    job_id: int | None = None
    message_text: str
    status: MessageStatus
    outcome: MessageOutcome
    sent_date: datetime | None = None
    response_date: datetime | None = None
    intro_date: datetime | None = None
    created_at: datetime | None = None


class DraftRequest(ApiModel):
    """Preview the templated message for a mutual without saving it."""
    mutual_id: int = Field(gt=0)
    employee_id: int | None = Field(None, gt=0)
    job_id: int | None = Field(None, gt=0)
    rated_strength: int | None = Field(None, ge=MIN_STRENGTH, le=MAX_STRENGTH)
    calendar_url: str | None = Field(None, max_length=2000)


class DraftResponse(ApiModel):
    mutual_id: int
    employee_id: int
    job_id: int | None = None
    rated_strength: int
    template: TemplateTier
    message_text: str


# --- Stats -------------------------------------------------------------------

class StatsResponse(ApiModel):
    jobs_count: int
    mutuals_count: int
    messages_sent_count: int
    introductions_made_count: int
    status_counts: dict[str, int]
    outcome_counts: dict[str, int]
