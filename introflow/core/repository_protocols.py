"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - External collaborators (network provider, content generation) are reached
      only through these Protocol types
    - Implementations provided by the shell via FastAPI dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; core functions that use the
      results stay synchronous
"""

from typing import Protocol

from introflow.core.domain_types import CareerTool
from introflow.schemas.network import (
    EmployeeProfile, JobListing, JobSearchQuery, MutualProfile,
)


class NetworkGateway(Protocol):
    """Professional-network provider: job feed, employees, mutual connections."""
    async def fetch_jobs(self, query: JobSearchQuery) -> list[JobListing]: ...
    async def find_company_employees(self, company: str) -> list[EmployeeProfile]: ...
    async def find_mutual_connections(
        self, employee_linkedin_url: str,
    ) -> list[MutualProfile]: ...


class ContentGenerator(Protocol):
    """Generates career documents from a system prompt and user material."""
    async def generate(
        self, tool: CareerTool, system_prompt: str, user_prompt: str,
    ) -> str: ...
