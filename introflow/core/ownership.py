"""Ownership Guard — pure checks that a row belongs to the session's user.

Invariants:
    - Missing rows raise ResourceNotFoundError before ownership is considered
    - Owner mismatch raises ForbiddenError; the row is never returned
    - Employees are owned through their Job (owner_id is the job's user_id)

Design Decisions:
    - Structural Protocol over ORM import: core never depends on models/
    - Authentication (who is the session user) is a separate gate in api/dependencies.py
"""

from typing import Protocol, TypeVar

from introflow.core.errors import ForbiddenError, ResourceNotFoundError


class Owned(Protocol):
    """Anything with an id and an owning user id."""
    id: int
    user_id: int


OwnedT = TypeVar("OwnedT", bound=Owned)


def ensure_owned(
    resource: OwnedT | None,
    user_id: int,
    resource_type: str,
    resource_id: int,
) -> OwnedT:
    """Return `resource` when it exists and belongs to `user_id`."""
    if resource is None:
        raise ResourceNotFoundError(resource_type, resource_id)
    if resource.user_id != user_id:
        raise ForbiddenError(resource_type, resource_id)
    return resource


def ensure_owner_id(
    owner_id: int | None,
    user_id: int,
    resource_type: str,
    resource_id: int,
) -> None:
    """Ownership check for rows owned indirectly (owner_id resolved by caller).

    owner_id None means the row itself was not found.
    """
    if owner_id is None:
        raise ResourceNotFoundError(resource_type, resource_id)
    if owner_id != user_id:
        raise ForbiddenError(resource_type, resource_id)
