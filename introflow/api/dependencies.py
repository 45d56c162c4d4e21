"""Route Dependencies — per-request store, authenticated user, and collaborators.

Invariants:
    - One Store (one AsyncSession) per request, shared by every service in it
    - get_current_user is the single authentication gate; routes that need a
      user depend on it and never read the cookie themselves
    - Collaborators are resolved through dependencies so tests override them

Design Decisions:
    - Collaborator instances cached per process (lru_cache), like get_settings
"""

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from introflow.config import get_settings
from introflow.core.repository_protocols import ContentGenerator, NetworkGateway
from introflow.infrastructure.anthropic_client import AnthropicContentGenerator
from introflow.infrastructure.database import get_db
from introflow.infrastructure.network_gateway import (
    HttpNetworkGateway, NullNetworkGateway,
)
from introflow.models import User
from introflow.services.auth_service import AuthService
from introflow.services.entity_store import Store


async def get_store(db: AsyncSession = Depends(get_db)) -> Store:
    return Store(db)


def get_auth_service(store: Store = Depends(get_store)) -> AuthService:
    settings = get_settings()
    return AuthService(
        store,
        session_ttl=timedelta(hours=settings.session_ttl_hours),
        hash_iterations=settings.password_hash_iterations,
    )


def session_token(request: Request) -> str | None:
    return request.cookies.get(get_settings().session_cookie_name)


async def get_current_user(
    request: Request, auth: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the session cookie to a User or raise UnauthenticatedError (401)."""
    return await auth.resolve_user(session_token(request))


@lru_cache
def get_network_gateway() -> NetworkGateway:
    settings = get_settings()
    if not settings.network_gateway_url:
        return NullNetworkGateway()
    return HttpNetworkGateway(
        settings.network_gateway_url,
        api_key=settings.network_gateway_api_key,
        timeout_seconds=settings.network_gateway_timeout_seconds,
    )


@lru_cache
def get_content_generator() -> ContentGenerator:
    settings = get_settings()
    return AnthropicContentGenerator(
        api_key=settings.anthropic_api_key,
        model=settings.anthropic_model,
        max_tokens=settings.anthropic_max_tokens,
        max_retries=settings.anthropic_max_retries,
        timeout_seconds=settings.anthropic_timeout_seconds,
    )
