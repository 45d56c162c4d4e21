"""Error Hierarchy — typed, categorized exceptions for all IntroFlow failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope shared by every handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with IntroFlowError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
    - Not-found is checked before ownership, so a 403 never hides a missing row
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    resource_type: str | None = None
    resource_id: int | None = None
    debug_info: dict[str, Any] | None = None


class IntroFlowError(Exception):
    """Base exception for all IntroFlow errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class UnauthenticatedError(IntroFlowError):
    """No session, unknown session, or expired session."""
    def __init__(self, message: str = "Not authenticated", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidCredentialsError(IntroFlowError):
    """Username/password pair did not match."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(IntroFlowError):
    """Valid session, but the resource belongs to another user."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' is not owned by the current user",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx, 403,
        )


class ResourceNotFoundError(IntroFlowError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        if isinstance(resource_id, int):
            ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class UsernameTakenError(IntroFlowError):
    """Registration attempted with an existing username."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            "An account with this username already exists",
            "USERNAME_TAKEN", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.username = username


class InvalidReferenceError(IntroFlowError):
    """Request links rows that do not belong together (e.g. employee of another mutual)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_REFERENCE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidTransitionError(IntroFlowError):
    """Message status/outcome change not allowed from the current state."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )


class JobHasOutreachError(IntroFlowError):
    """Job deletion refused because messages still reference it."""
    def __init__(self, job_id: int, message_count: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = "Job"
        ctx.resource_id = job_id
        super().__init__(
            f"Job '{job_id}' has {message_count} outreach message(s) and cannot be deleted",
            "JOB_HAS_OUTREACH", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(IntroFlowError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class ExternalServiceError(IntroFlowError):
    """A collaborator service (network provider, Anthropic) failed."""
    def __init__(
        self, service: str, message: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{service} error: {message}",
            "EXTERNAL_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.service = service
