"""Ownership Guard — 404 before 403, owned rows returned unchanged."""

from dataclasses import dataclass

import pytest

from introflow.core.errors import ForbiddenError, ResourceNotFoundError
from introflow.core.ownership import ensure_owned, ensure_owner_id


@dataclass
class _Row:
    id: int
    user_id: int


def test_owned_row_is_returned():
    row = _Row(id=7, user_id=1)
    assert ensure_owned(row, 1, "Job", 7) is row


def test_missing_row_is_not_found():
    with pytest.raises(ResourceNotFoundError) as exc:
        ensure_owned(None, 1, "Job", 7)
    assert exc.value.http_status == 404


def test_foreign_row_is_forbidden():
    with pytest.raises(ForbiddenError) as exc:
        ensure_owned(_Row(id=7, user_id=2), 1, "Job", 7)
    assert exc.value.http_status == 403
    assert exc.value.context.resource_id == 7


def test_indirect_ownership():
    ensure_owner_id(1, 1, "Employee", 3)
    with pytest.raises(ResourceNotFoundError):
        ensure_owner_id(None, 1, "Employee", 3)
    with pytest.raises(ForbiddenError):
        ensure_owner_id(2, 1, "Employee", 3)
