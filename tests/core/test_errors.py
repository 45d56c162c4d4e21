"""Error hierarchy — status codes and the JSON envelope."""

from introflow.core.errors import (
    ExternalServiceError, InvalidTransitionError, JobHasOutreachError,
    ResourceNotFoundError, UnauthenticatedError,
)


def test_response_envelope_shape():
    body = ResourceNotFoundError("Job", 4).to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["context"] == {"resource_type": "Job", "resource_id": 4}
    assert "timestamp" in body


def test_status_codes():
    assert UnauthenticatedError().http_status == 401
    assert InvalidTransitionError("no").http_status == 409
    assert JobHasOutreachError(1, 2).http_status == 409
    assert ExternalServiceError("Anthropic", "down").http_status == 502
