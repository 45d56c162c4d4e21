"""Job Service — job preferences, tracked jobs, and the employees attached to them.

Invariants:
    - Every job read/mutation passes the ownership guard first
    - Employees are reachable only through a job the user owns
    - Preferences are replaced wholesale, never merged
    - A job referenced by any outreach message cannot be deleted

Design Decisions:
    - Ownership is checked here, not in routes: every caller (routes,
      discovery) gets the same 404-then-403 ordering
"""

import logging
from datetime import datetime, timezone
from typing import Any

from introflow.core.domain_types import JobId
from introflow.core.errors import JobHasOutreachError, ResourceNotFoundError
from introflow.core.ownership import ensure_owned
from introflow.models import Employee, Job, JobPreferences, User
from introflow.services.entity_store import Store

logger = logging.getLogger(__name__)


class JobService:
    """Preferences, jobs and employees for one user."""

    def __init__(self, store: Store):
        self.store = store

    # ─── Preferences ─────────────────────────────────────────────

    async def get_preferences(self, user: User) -> JobPreferences:
        preferences = await self.store.get_preferences_for_user(user.id)
        if preferences is None:
            raise ResourceNotFoundError("JobPreferences", user.id)
        return preferences

    async def save_preferences(
        self, user: User, titles: list[str], locations: list[str], industries: list[str],
    ) -> tuple[JobPreferences, bool]:
        """Replace the user's preferences. Returns (row, created)."""
        values = {"titles": titles, "locations": locations, "industries": industries}
        existing = await self.store.get_preferences_for_user(user.id)
        if existing is not None:
            updated = await self.store.preferences.update(existing.id, values)
            return updated, False
        created = await self.store.preferences.create(user_id=user.id, **values)
        return created, True

    # ─── Jobs ────────────────────────────────────────────────────

    async def list_jobs(self, user: User, limit: int | None = None) -> list[Job]:
        return await self.store.jobs.list(user_id=user.id, limit=limit)

    async def get_job(self, user: User, job_id: JobId) -> Job:
        job = await self.store.jobs.get(job_id)
        return ensure_owned(job, user.id, "Job", job_id)

    async def create_job(self, user: User, fields: dict[str, Any]) -> Job:
        if fields.get("posted_date") is None:
            fields["posted_date"] = datetime.now(timezone.utc)
        job = await self.store.jobs.create(user_id=user.id, **fields)
        logger.info(
            "Job created", extra={"user_id": user.id, "job_id": job.id},
        )
        return job

    async def delete_job(self, user: User, job_id: JobId) -> None:
        await self.get_job(user, job_id)
        message_count = await self.store.count_messages_for_job(job_id)
        if message_count:
            raise JobHasOutreachError(job_id, message_count)
        await self.store.jobs.delete(job_id)
        logger.info(
            "Job deleted", extra={"user_id": user.id, "job_id": job_id},
        )

    # ─── Employees ───────────────────────────────────────────────

    async def list_employees(self, user: User, job_id: JobId) -> list[Employee]:
        await self.get_job(user, job_id)
        return await self.store.employees.list(job_id=job_id)

    async def create_employee(
        self, user: User, job_id: JobId, fields: dict[str, Any],
    ) -> Employee:
        await self.get_job(user, job_id)
        employee = await self.store.employees.create(job_id=job_id, **fields)
        logger.info(
            "Employee created",
            extra={"user_id": user.id, "job_id": job_id, "employee_id": employee.id},
        )
        return employee
