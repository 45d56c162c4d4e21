"""HTTP network gateway — payload parsing and error mapping via httpx.MockTransport."""

import httpx
import pytest

from introflow.core.errors import ExternalServiceError
from introflow.infrastructure.network_gateway import HttpNetworkGateway, NullNetworkGateway
from introflow.schemas.network import JobSearchQuery


def _gateway(handler) -> HttpNetworkGateway:
    return HttpNetworkGateway(
        "https://provider.test/v1/", api_key="k",
        transport=httpx.MockTransport(handler),
    )


async def test_fetch_jobs_posts_query_and_parses_listings():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = request.content
        return httpx.Response(200, json={"jobs": [
            {"title": "SRE", "company": "Acme", "jobUrl": "https://j/1", "extra": 1},
        ]})

    listings = await _gateway(handler).fetch_jobs(JobSearchQuery(titles=["SRE"]))
    assert seen["path"] == "/v1/jobs/search"
    assert seen["auth"] == "Bearer k"
    assert b"SRE" in seen["body"]
    assert listings[0].url == "https://j/1"
    assert listings[0].company == "Acme"


async def test_mutuals_accept_bare_list_and_strength_alias():
    def handler(request):
        assert request.url.params["profileUrl"] == "https://li/sam"
        return httpx.Response(200, json=[{"name": "Dana", "strengthRating": 4}])

    mutuals = await _gateway(handler).find_mutual_connections("https://li/sam")
    assert mutuals[0].strength_rating == 4


async def test_http_error_maps_to_external_service_error():
    gateway = _gateway(lambda request: httpx.Response(503))
    with pytest.raises(ExternalServiceError) as exc:
        await gateway.find_company_employees("Acme")
    assert exc.value.http_status == 502


async def test_transport_error_maps_to_external_service_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ExternalServiceError):
        await _gateway(handler).find_company_employees("Acme")


async def test_malformed_payload_maps_to_external_service_error():
    gateway = _gateway(lambda request: httpx.Response(200, json=[{"title": "no name"}]))
    with pytest.raises(ExternalServiceError):
        await gateway.find_company_employees("Acme")


async def test_null_gateway_finds_nothing():
    gateway = NullNetworkGateway()
    assert await gateway.fetch_jobs(JobSearchQuery()) == []
    assert await gateway.find_company_employees("Acme") == []
    assert await gateway.find_mutual_connections("x") == []
