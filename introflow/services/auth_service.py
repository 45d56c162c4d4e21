"""Auth Service — registration, login sessions, profile and network-account link.

Invariants:
    - Registration creates the user AND an empty JobPreferences row
    - Raw session tokens leave this module only to be set as a cookie
    - Unknown, missing or expired tokens raise UnauthenticatedError
    - Login failures never reveal whether the username exists

Design Decisions:
    - Server-side session rows over signed cookies: logout really revokes
    - Expired sessions are deleted lazily when they are next presented
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from introflow.core.domain_types import UserId
from introflow.core.errors import (
    ErrorContext, InvalidCredentialsError, ResourceNotFoundError,
    UnauthenticatedError, UsernameTakenError,
)
from introflow.core.passwords import hash_password, hash_session_token, verify_password
from introflow.models import User
from introflow.services.entity_store import Store

logger = logging.getLogger(__name__)

DEFAULT_JOB_TITLE = "Job Seeker"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AuthService:
    """Account and session operations."""

    def __init__(
        self,
        store: Store,
        session_ttl: timedelta = timedelta(days=14),
        hash_iterations: int = 390_000,
    ):
        self.store = store
        self.session_ttl = session_ttl
        self.hash_iterations = hash_iterations

    async def register(
        self, username: str, password: str, name: str | None = None,
    ) -> tuple[User, str]:
        """Create account + empty preferences; return (user, session token)."""
        if await self.store.get_user_by_username(username):
            raise UsernameTakenError(username)
        user = await self.store.users.create(
            username=username,
            password_hash=hash_password(password, self.hash_iterations),
            name=name or username.split("@")[0],
            job_title=DEFAULT_JOB_TITLE,
            linkedin_connected=False,
        )
        await self.store.preferences.create(
            user_id=user.id, titles=[], locations=[], industries=[],
        )
        token = await self._open_session(user.id)
        logger.info("User registered", extra={"user_id": user.id})
        return user, token

    async def login(self, username: str, password: str) -> tuple[User, str]:
        user = await self.store.get_user_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Login failed")
            raise InvalidCredentialsError()
        token = await self._open_session(user.id)
        logger.info("User logged in", extra={"user_id": user.id})
        return user, token

    async def logout(self, token: str | None) -> None:
        """Revoke the session if it exists. Idempotent."""
        if not token:
            return
        session = await self.store.get_auth_session(hash_session_token(token))
        if session is not None:
            await self.store.auth_sessions.delete(session.id)
            logger.info("User logged out", extra={"user_id": session.user_id})

    async def resolve_user(self, token: str | None) -> User:
        """Authentication gate: session token → User."""
        if not token:
            raise UnauthenticatedError()
        session = await self.store.get_auth_session(hash_session_token(token))
        if session is None:
            raise UnauthenticatedError()
        if _as_utc(session.expires_at) <= datetime.now(timezone.utc):
            await self.store.auth_sessions.delete(session.id)
            raise UnauthenticatedError("Session expired")
        user = await self.store.users.get(session.user_id)
        if user is None:
            raise UnauthenticatedError(
                context=ErrorContext(user_id=session.user_id),
            )
        return user

    async def update_profile(self, user: User, patch: dict[str, Any]) -> User:
        updated = await self.store.users.update(user.id, patch)
        if updated is None:
            raise ResourceNotFoundError("User", user.id)
        return updated

    async def connect_linkedin(self, user: User, session_cookie: str) -> User:
        """Mark the network account as linked. No OAuth exchange happens here."""
        updated = await self.update_profile(user, {
            "linkedin_connected": True,
            "linkedin_session_cookie": session_cookie,
        })
        logger.info("Network account linked", extra={"user_id": user.id})
        return updated

    async def disconnect_linkedin(self, user: User) -> User:
        updated = await self.update_profile(user, {
            "linkedin_connected": False,
            "linkedin_session_cookie": None,
        })
        logger.info("Network account unlinked", extra={"user_id": user.id})
        return updated

    async def _open_session(self, user_id: UserId) -> str:
        token = secrets.token_urlsafe(32)
        await self.store.auth_sessions.create(
            token_hash=hash_session_token(token),
            user_id=user_id,
            expires_at=datetime.now(timezone.utc) + self.session_ttl,
        )
        return token
