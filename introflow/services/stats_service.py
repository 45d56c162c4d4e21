"""Stats Service — loads a user's rows and hands them to the pure stats computation."""

from introflow.core.outreach_stats import compute_outreach_stats
from introflow.models import User
from introflow.services.entity_store import Store


class StatsService:

    def __init__(self, store: Store):
        self.store = store

    async def compute_stats(self, user: User) -> dict:
        jobs_count = await self.store.jobs.count(user_id=user.id)
        mutuals_count = await self.store.mutuals.count(user_id=user.id)
        states = await self.store.message_states_for_user(user.id)
        return compute_outreach_stats(jobs_count, mutuals_count, states)
