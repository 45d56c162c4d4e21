"""Network Gateway — HTTP client for the professional-network provider.

Invariants:
    - Provider payloads are validated into schemas/network.py models
    - Transport errors, non-2xx responses and malformed payloads all raise
      ExternalServiceError; nothing is retried
    - NullNetworkGateway (no provider configured) returns empty results

Design Decisions:
    - httpx.AsyncClient per call: the provider is hit a handful of times per
      discovery run, pooling across requests buys nothing
    - transport injectable so tests use httpx.MockTransport instead of a server
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from introflow.core.errors import ExternalServiceError
from introflow.schemas.network import (
    EmployeeProfile, JobListing, JobSearchQuery, MutualProfile,
)

logger = logging.getLogger(__name__)

_SERVICE = "Network provider"

_listings = TypeAdapter(list[JobListing])
_employees = TypeAdapter(list[EmployeeProfile])
_mutuals = TypeAdapter(list[MutualProfile])


class HttpNetworkGateway:
    """NetworkGateway that talks JSON to a provider service."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self.timeout = timeout_seconds
        self.transport = transport

    async def fetch_jobs(self, query: JobSearchQuery) -> list[JobListing]:
        payload = await self._post("/jobs/search", query.model_dump())
        return self._parse(_listings, payload, "jobs")

    async def find_company_employees(self, company: str) -> list[EmployeeProfile]:
        payload = await self._get("/companies/employees", {"company": company})
        return self._parse(_employees, payload, "employees")

    async def find_mutual_connections(
        self, employee_linkedin_url: str,
    ) -> list[MutualProfile]:
        payload = await self._get(
            "/connections/mutual", {"profileUrl": employee_linkedin_url},
        )
        return self._parse(_mutuals, payload, "mutuals")

    async def _get(self, path: str, params: dict) -> object:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, body: dict) -> object:
        return await self._request("POST", path, json=body)

    async def _request(self, method: str, path: str, **kwargs) -> object:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"Provider returned {e.response.status_code} for {path}",
                    extra={"service": _SERVICE, "status_code": e.response.status_code},
                )
                raise ExternalServiceError(
                    _SERVICE, f"HTTP {e.response.status_code}",
                )
            except httpx.HTTPError as e:
                logger.error(
                    f"Provider request failed for {path}: {e}",
                    extra={"service": _SERVICE},
                )
                raise ExternalServiceError(_SERVICE, "request failed")
        try:
            return response.json()
        except ValueError:
            raise ExternalServiceError(_SERVICE, "response is not JSON")

    def _parse(self, adapter: TypeAdapter, payload: object, key: str) -> list:
        # Accept both a bare list and {"<key>": [...]}
        if isinstance(payload, dict):
            payload = payload.get(key, [])
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            logger.error(
                f"Malformed provider payload ({key}): {e.error_count()} error(s)",
                extra={"service": _SERVICE},
            )
            raise ExternalServiceError(_SERVICE, f"malformed {key} payload")


class NullNetworkGateway:
    """Used when no provider is configured: every lookup finds nothing."""

    async def fetch_jobs(self, query: JobSearchQuery) -> list[JobListing]:
        return []

    async def find_company_employees(self, company: str) -> list[EmployeeProfile]:
        return []

    async def find_mutual_connections(
        self, employee_linkedin_url: str,
    ) -> list[MutualProfile]:
        return []
