"""Outreach Service — mutual connections, message drafting, and message lifecycle.

Invariants:
    - A message's mutual belongs to the sending user (404/403 otherwise)
    - A message's employee is its mutual's employee; job_id, when present,
      is that employee's job (400 INVALID_REFERENCE otherwise)
    - Queuing a message with a ratedStrength different from the mutual's
      overwrites the mutual's rating before the message row is written
    - Status/outcome changes go through core/message_lifecycle.py

Design Decisions:
    - Draft preview and message creation share _resolve_target and _render,
      so a previewed draft is exactly what an empty-text POST would store
    - Two independent writes (mutual rating, then message): no rollback if
      the second fails, the new rating stays
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from introflow.core.domain_types import (
    EmployeeId, JobId, MessageId, MessageOutcome, MessageStatus, MutualId,
    StrengthRating, TemplateTier,
)
from introflow.core.errors import InvalidReferenceError, ResourceNotFoundError
from introflow.core.message_lifecycle import (
    MessageState, initial_state_patch, transition_patch,
)
from introflow.core.message_templates import (
    TemplateContext, render_template, strength_tier,
)
from introflow.core.ownership import ensure_owned, ensure_owner_id
from introflow.models import Employee, Job, Message, MutualConnection, User
from introflow.services.entity_store import Store

logger = logging.getLogger(__name__)


@dataclass
class OutreachTarget:
    mutual: MutualConnection
    employee: Employee
    job: Job | None


@dataclass
class Draft:
    target: OutreachTarget
    rated_strength: int
    tier: TemplateTier
    message_text: str


def _state_of(message: Message) -> MessageState:
    return MessageState(
        status=MessageStatus(message.status),
        outcome=MessageOutcome(message.outcome or MessageOutcome.PENDING.value),
        sent_date=message.sent_date,
        response_date=message.response_date,
        intro_date=message.intro_date,
    )


class OutreachService:
    """Mutual connections and outreach messages for one user."""

    def __init__(self, store: Store):
        self.store = store

    # ─── Mutual connections ──────────────────────────────────────

    async def list_mutuals(
        self, user: User, employee_id: EmployeeId | None = None, limit: int | None = None,
    ) -> list[MutualConnection]:
        return await self.store.mutuals.list(
            user_id=user.id, employee_id=employee_id, limit=limit,
        )

    async def get_mutual(self, user: User, mutual_id: MutualId) -> MutualConnection:
        mutual = await self.store.mutuals.get(mutual_id)
        return ensure_owned(mutual, user.id, "MutualConnection", mutual_id)

    async def create_mutual(self, user: User, fields: dict[str, Any]) -> MutualConnection:
        employee_id = fields["employee_id"]
        owner_id = await self.store.employee_owner_id(employee_id)
        ensure_owner_id(owner_id, user.id, "Employee", employee_id)
        mutual = await self.store.mutuals.create(user_id=user.id, **fields)
        logger.info(
            "Mutual connection created",
            extra={"user_id": user.id, "mutual_id": mutual.id},
        )
        return mutual

    async def update_mutual(
        self, user: User, mutual_id: MutualId, patch: dict[str, Any],
    ) -> MutualConnection:
        await self.get_mutual(user, mutual_id)
        return await self.store.mutuals.update(mutual_id, patch)

    async def rate_mutual(
        self, user: User, mutual_id: MutualId, strength: StrengthRating,
    ) -> MutualConnection:
        return await self.update_mutual(user, mutual_id, {"rated_strength": strength})

    # ─── Drafting ────────────────────────────────────────────────

    async def _resolve_target(
        self,
        user: User,
        mutual_id: MutualId,
        employee_id: EmployeeId | None = None,
        job_id: JobId | None = None,
    ) -> OutreachTarget:
        mutual = await self.get_mutual(user, mutual_id)
        if employee_id is not None and employee_id != mutual.employee_id:
            raise InvalidReferenceError(
                f"Employee '{employee_id}' is not the contact of mutual '{mutual_id}'",
                "employeeId",
            )
        employee = await self.store.employees.get(mutual.employee_id)
        if employee is None:
            raise ResourceNotFoundError("Employee", mutual.employee_id)
        if job_id is not None and job_id != employee.job_id:
            raise InvalidReferenceError(
                f"Job '{job_id}' is not the job of employee '{employee.id}'",
                "jobId",
            )
        job = await self.store.jobs.get(employee.job_id)
        return OutreachTarget(mutual=mutual, employee=employee, job=job)

    def _render(
        self, user: User, target: OutreachTarget, strength: int,
        calendar_url: str | None,
    ) -> tuple[TemplateTier, str]:
        context = TemplateContext(
            friend_name=target.mutual.name,
            job_title=target.job.title if target.job else "",
            target_company=target.job.company if target.job else "",
            employee_name=target.employee.name,
            user_name=user.name or user.username,
            user_linkedin_url=user.linkedin_profile_url or "",
            calendar_url=calendar_url or user.calendar_url or "",
        )
        tier = strength_tier(strength)
        return tier, render_template(tier, context)

    async def draft(
        self,
        user: User,
        mutual_id: MutualId,
        employee_id: EmployeeId | None = None,
        job_id: JobId | None = None,
        rated_strength: int | None = None,
        calendar_url: str | None = None,
    ) -> Draft:
        """Preview the templated request. Writes nothing."""
        target = await self._resolve_target(user, mutual_id, employee_id, job_id)
        strength = (
            rated_strength if rated_strength is not None
            else target.mutual.rated_strength
        )
        tier, text = self._render(user, target, strength, calendar_url)
        return Draft(
            target=target, rated_strength=strength, tier=tier, message_text=text,
        )

    # ─── Messages ────────────────────────────────────────────────

    async def list_messages(
        self,
        user: User,
        mutual_id: MutualId | None = None,
        status: MessageStatus | None = None,
        limit: int | None = None,
    ) -> list[Message]:
        return await self.store.messages.list(
            user_id=user.id,
            mutual_id=mutual_id,
            status=status.value if status else None,
            limit=limit,
        )

    async def get_message(self, user: User, message_id: MessageId) -> Message:
        message = await self.store.messages.get(message_id)
        return ensure_owned(message, user.id, "Message", message_id)

    async def create_message(self, user: User, payload: dict[str, Any]) -> Message:
        """Queue (Draft) or record a sent message; cascade a changed rating."""
        target = await self._resolve_target(
            user, payload["mutual_id"], payload.get("employee_id"), payload.get("job_id"),
        )
        lifecycle = initial_state_patch(
            payload.get("status"),
            payload.get("outcome"),
            datetime.now(timezone.utc),
            sent_date=payload.get("sent_date"),
            response_date=payload.get("response_date"),
            intro_date=payload.get("intro_date"),
        )

        strength = payload.get("rated_strength")
        if strength is not None and strength != target.mutual.rated_strength:
            target.mutual = await self.rate_mutual(user, target.mutual.id, strength)
            logger.info(
                "Mutual rating updated from outreach",
                extra={"user_id": user.id, "mutual_id": target.mutual.id},
            )

        text = payload.get("message_text")
        if not text:
            _, text = self._render(
                user, target, target.mutual.rated_strength, payload.get("calendar_url"),
            )

        message = await self.store.messages.create(
            user_id=user.id,
            mutual_id=target.mutual.id,
            employee_id=target.employee.id,
            job_id=target.job.id if target.job else None,
            message_text=text,
            **lifecycle,
        )
        logger.info(
            "Message created",
            extra={"user_id": user.id, "message_id": message.id},
        )
        return message

    async def update_message(
        self, user: User, message_id: MessageId, changes: dict[str, Any],
    ) -> Message:
        """Apply a partial {status, outcome, message_text}. {} is a no-op."""
        message = await self.get_message(user, message_id)
        patch = transition_patch(
            _state_of(message),
            datetime.now(timezone.utc),
            status=changes.get("status"),
            outcome=changes.get("outcome"),
        )
        if changes.get("message_text") is not None:
            patch["message_text"] = changes["message_text"]
        if not patch:
            return message
        updated = await self.store.messages.update(message_id, patch)
        logger.info(
            "Message updated",
            extra={"user_id": user.id, "message_id": message_id},
        )
        return updated

    async def update_status(
        self, user: User, message_id: MessageId, status: MessageStatus,
    ) -> Message:
        return await self.update_message(user, message_id, {"status": status})

    async def update_outcome(
        self, user: User, message_id: MessageId, outcome: MessageOutcome,
    ) -> Message:
        return await self.update_message(user, message_id, {"outcome": outcome})
