"""Discovery Service — job import and connection discovery through the network provider.

Invariants:
    - Writes happen one row at a time, each committed on its own
    - A provider or store failure part-way leaves the rows already written;
      nothing is rolled back or cleaned up (logged with the count so far)
    - Imported jobs skip URLs the user already tracks
    - Discovery skips employees already on the job (same profile URL, or same
      name when there is no URL); their mutuals are not fetched again
    - Discovered mutuals are owned by the discovering user

Design Decisions:
    - Sequential awaits, no gather(): results arrive in provider order and a
      failure stops the loop at a well-defined row
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from introflow.core.domain_types import JobId
from introflow.core.repository_protocols import NetworkGateway
from introflow.models import Employee, Job, User
from introflow.schemas.network import JobSearchQuery
from introflow.services.entity_store import Store
from introflow.services.job_service import JobService

logger = logging.getLogger(__name__)


@dataclass
class DiscoveryOutcome:
    job_id: JobId
    employees: list[Employee] = field(default_factory=list)
    mutuals_created: int = 0
    employees_skipped: int = 0


class DiscoveryService:
    """Bulk creation of jobs, employees and mutuals from provider data."""

    def __init__(self, store: Store, gateway: NetworkGateway):
        self.store = store
        self.gateway = gateway
        self.jobs = JobService(store)

    async def import_jobs(self, user: User) -> list[Job]:
        """Fetch listings matching the user's preferences and track new ones."""
        preferences = await self.store.get_preferences_for_user(user.id)
        query = JobSearchQuery(
            titles=preferences.titles if preferences else [],
            locations=preferences.locations if preferences else [],
            industries=preferences.industries if preferences else [],
        )
        listings = await self.gateway.fetch_jobs(query)
        known_urls = await self.store.job_urls_for_user(user.id)

        created: list[Job] = []
        for listing in listings:
            if listing.url in known_urls:
                continue
            job = await self.store.jobs.create(
                user_id=user.id,
                title=listing.title,
                company=listing.company,
                location=listing.location,
                job_url=listing.url,
                logo_url=listing.logo_url,
                posted_date=listing.posted_date or datetime.now(timezone.utc),
                is_new=True,
            )
            known_urls.add(listing.url)
            created.append(job)

        logger.info(
            "Jobs imported",
            extra={"user_id": user.id, "created_count": len(created)},
        )
        return created

    async def discover_connections(self, user: User, job_id: JobId) -> DiscoveryOutcome:
        """Create employees at the job's company and each one's mutual connections."""
        job = await self.jobs.get_job(user, job_id)
        outcome = DiscoveryOutcome(job_id=job.id)
        known_employees = await self.store.employee_keys_for_job(job.id)
        try:
            profiles = await self.gateway.find_company_employees(job.company)
            for profile in profiles:
                key = profile.linkedin_url or profile.name
                if key in known_employees:
                    outcome.employees_skipped += 1
                    continue
                employee = await self.store.employees.create(
                    job_id=job.id,
                    name=profile.name,
                    title=profile.title,
                    linkedin_url=profile.linkedin_url,
                    department=profile.department,
                )
                outcome.employees.append(employee)
                known_employees.add(key)
                if not profile.linkedin_url:
                    continue
                mutuals = await self.gateway.find_mutual_connections(
                    profile.linkedin_url,
                )
                for mutual in mutuals:
                    await self.store.mutuals.create(
                        user_id=user.id,
                        employee_id=employee.id,
                        name=mutual.name,
                        title=mutual.title,
                        company=mutual.company,
                        linkedin_url=mutual.linkedin_url,
                        connected_since=mutual.connected_since,
                        rated_strength=mutual.strength_rating,
                        connection_context=mutual.connection_context,
                    )
                    outcome.mutuals_created += 1
        except Exception:
            logger.error(
                "Discovery stopped part-way; rows already written are kept",
                extra={
                    "user_id": user.id,
                    "job_id": job.id,
                    "created_count": len(outcome.employees) + outcome.mutuals_created,
                },
            )
            raise

        logger.info(
            "Discovery finished",
            extra={
                "user_id": user.id,
                "job_id": job.id,
                "created_count": len(outcome.employees) + outcome.mutuals_created,
                "skipped_count": outcome.employees_skipped,
            },
        )
        return outcome
