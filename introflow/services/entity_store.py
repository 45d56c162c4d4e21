"""Entity Store — per-entity CRUD over one AsyncSession, bundled per request.

Invariants:
    - Every write commits on its own; there are no cross-entity transactions
    - get() returns None for a missing id, never raises; ids outside the
      primary-key range are missing by definition and never reach the driver
    - update() is a shallow merge of the patch (last write wins per field)
    - list() applies equality filters first, then the optional limit

Design Decisions:
    - One generic EntityStore instead of six hand-written repositories: the
      CRUD surface is identical, entity-specific queries live on Store
    - Store is built per request from the injected session (no module-level
      map), which keeps tests isolated and lets the engine be swapped freely
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from introflow.core.domain_types import MAX_ENTITY_ID
from introflow.db.base import Base
from introflow.models import (
    AuthSession, Employee, Job, JobPreferences, Message, MutualConnection, User,
)

ModelT = TypeVar("ModelT", bound=Base)


def _storable_id(entity_id: int) -> bool:
    return 0 < entity_id <= MAX_ENTITY_ID


class EntityStore(Generic[ModelT]):
    """Typed CRUD for one ORM model, keyed by integer id."""

    def __init__(
        self, db: AsyncSession, model: type[ModelT],
        default_order: tuple[Any, ...] = (),
        delete_loads: tuple[Any, ...] = (),
    ):
        self._db = db
        self._model = model
        self._default_order = default_order or (model.id,)
        # Loader options for the collections a delete cascades through
        self._delete_loads = delete_loads

    async def create(self, **fields: Any) -> ModelT:
        entity = self._model(**fields)
        self._db.add(entity)
        await self._db.commit()
        await self._db.refresh(entity)
        return entity

    async def get(self, entity_id: int) -> ModelT | None:
        if not _storable_id(entity_id):
            return None
        return await self._db.get(self._model, entity_id)

    async def list(
        self, *, limit: int | None = None, order_by: tuple[Any, ...] = (),
        **filters: Any,
    ) -> list[ModelT]:
        query = select(self._model)
        for name, value in filters.items():
            if value is not None:
                query = query.where(getattr(self._model, name) == value)
        query = query.order_by(*(order_by or self._default_order))
        if limit is not None:
            query = query.limit(limit)
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def count(self, **filters: Any) -> int:
        query = select(func.count()).select_from(self._model)
        for name, value in filters.items():
            query = query.where(getattr(self._model, name) == value)
        result = await self._db.execute(query)
        return result.scalar_one()

    async def update(self, entity_id: int, patch: dict[str, Any]) -> ModelT | None:
        entity = await self.get(entity_id)
        if entity is None:
            return None
        if not patch:
            return entity
        for name, value in patch.items():
            setattr(entity, name, value)
        await self._db.commit()
        await self._db.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        entity = await self._get_for_delete(entity_id)
        if entity is None:
            return False
        await self._db.delete(entity)
        await self._db.commit()
        return True

    async def _get_for_delete(self, entity_id: int) -> ModelT | None:
        if not self._delete_loads:
            return await self.get(entity_id)
        if not _storable_id(entity_id):
            return None
        result = await self._db.execute(
            select(self._model)
            .where(self._model.id == entity_id)
            .options(*self._delete_loads)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()


class Store:
    """All entity stores for one request, plus the cross-entity read queries."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = EntityStore(db, User)
        self.auth_sessions = EntityStore(db, AuthSession)
        self.preferences = EntityStore(db, JobPreferences)
        self.jobs = EntityStore(
            db, Job,
            default_order=(Job.posted_date.desc(), Job.id.desc()),
            delete_loads=(selectinload(Job.employees).selectinload(Employee.mutuals),),
        )
        self.employees = EntityStore(
            db, Employee, delete_loads=(selectinload(Employee.mutuals),),
        )
        self.mutuals = EntityStore(db, MutualConnection)
        self.messages = EntityStore(db, Message, default_order=(Message.id.desc(),))

    async def get_user_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def get_auth_session(self, token_hash: str) -> AuthSession | None:
        result = await self.db.execute(
            select(AuthSession).where(AuthSession.token_hash == token_hash),
        )
        return result.scalar_one_or_none()

    async def get_preferences_for_user(self, user_id: int) -> JobPreferences | None:
        result = await self.db.execute(
            select(JobPreferences).where(JobPreferences.user_id == user_id),
        )
        return result.scalar_one_or_none()

    async def employee_owner_id(self, employee_id: int) -> int | None:
        """user_id of the job an employee hangs off; None if no such employee."""
        if not _storable_id(employee_id):
            return None
        result = await self.db.execute(
            select(Job.user_id)
            .join(Employee, Employee.job_id == Job.id)
            .where(Employee.id == employee_id),
        )
        return result.scalar_one_or_none()

    async def job_urls_for_user(self, user_id: int) -> set[str]:
        result = await self.db.execute(
            select(Job.job_url).where(Job.user_id == user_id),
        )
        return set(result.scalars().all())

    async def employee_keys_for_job(self, job_id: int) -> set[str]:
        """Profile URL (or name, when the URL is blank) of each employee on a job."""
        result = await self.db.execute(
            select(Employee.linkedin_url, Employee.name).where(Employee.job_id == job_id),
        )
        return {url or name for url, name in result.all()}

    async def count_messages_for_job(self, job_id: int) -> int:
        employee_ids = select(Employee.id).where(Employee.job_id == job_id)
        result = await self.db.execute(
            select(func.count()).select_from(Message).where(
                or_(
                    Message.job_id == job_id,
                    Message.employee_id.in_(employee_ids),
                ),
            ),
        )
        return result.scalar_one()

    async def message_states_for_user(
        self, user_id: int,
    ) -> list[tuple[str, str | None]]:
        result = await self.db.execute(
            select(Message.status, Message.outcome).where(
                Message.user_id == user_id,
            ),
        )
        return [(status, outcome) for status, outcome in result.all()]
