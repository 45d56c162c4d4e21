"""API test fixtures — FastAPI app against in-memory SQLite, fake collaborators.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db overridden to the test session factory; db_manager patched for
      the readiness probe
    - Network provider and content generator replaced by in-memory fakes
    - Each client keeps its own cookie jar, so two clients = two users

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

import introflow.infrastructure.database as db_module
from introflow.api.dependencies import get_content_generator, get_network_gateway
from introflow.core.errors import ExternalServiceError
from introflow.infrastructure.database import DatabaseSessionManager, get_db
from introflow.main import app
from introflow.schemas.network import EmployeeProfile, JobListing, MutualProfile
from tests.api.helpers import create_employee, create_job, create_mutual, register


class FakeNetworkGateway:
    """Configurable provider: set the lists, optionally fail mid-discovery."""

    def __init__(self):
        self.listings: list[JobListing] = []
        self.employees: list[EmployeeProfile] = []
        self.mutuals: dict[str, list[MutualProfile]] = {}
        self.fail_on_mutuals_for: str | None = None
        self.queries = []

    async def fetch_jobs(self, query):
        self.queries.append(query)
        return list(self.listings)

    async def find_company_employees(self, company):
        return list(self.employees)

    async def find_mutual_connections(self, employee_linkedin_url):
        if employee_linkedin_url == self.fail_on_mutuals_for:
            raise ExternalServiceError("Network provider", "HTTP 503")
        return list(self.mutuals.get(employee_linkedin_url, []))


class FakeContentGenerator:
    def __init__(self):
        self.calls = []
        self.error: Exception | None = None

    async def generate(self, tool, system_prompt, user_prompt):
        self.calls.append((tool, system_prompt, user_prompt))
        if self.error:
            raise self.error
        return f"Generated {tool.value}"


@pytest.fixture
def fake_gateway():
    return FakeNetworkGateway()


@pytest.fixture
def fake_generator():
    return FakeContentGenerator()


@pytest.fixture
async def make_client(test_engine, test_session_factory, fake_gateway, fake_generator):
    """Factory for independent clients (separate cookie jars) on one app/DB."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_network_gateway] = lambda: fake_gateway
    app.dependency_overrides[get_content_generator] = lambda: fake_generator

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    clients: list[AsyncClient] = []

    def _make() -> AsyncClient:
        c = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(make_client):
    return make_client()


@pytest.fixture
async def alice(make_client):
    c = make_client()
    await register(c, "alice@example.com")
    return c


@pytest.fixture
async def bob(make_client):
    c = make_client()
    await register(c, "bob@example.com")
    return c


@pytest.fixture
async def outreach_chain(alice):
    """alice's job → employee → mutual, returned as response bodies."""
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    mutual = await create_mutual(alice, employee["id"], ratedStrength=3)
    return {"job": job, "employee": employee, "mutual": mutual}
