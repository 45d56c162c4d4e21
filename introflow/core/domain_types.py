"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, JobId, EmployeeId, MutualId, MessageId wrap ints — never mix them up
    - StrengthRating is 0–5 for stored ratings (0 = unrated)
    - Exactly one status vocabulary and one outcome vocabulary; legacy spellings
      are normalized through parse_status / parse_outcome

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - STATUS_ORDER encodes the single linear path Draft → Sent → ResponseReceived
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
JobId = NewType("JobId", int)
EmployeeId = NewType("EmployeeId", int)
MutualId = NewType("MutualId", int)
MessageId = NewType("MessageId", int)

# Primary keys are 32-bit INTEGER columns
MAX_ENTITY_ID = 2**31 - 1


# ─── Value Types ─────────────────────────────────────────────────

StrengthRating = NewType("StrengthRating", int)   # 0–5

MIN_STRENGTH = 0
MAX_STRENGTH = 5


# ─── Enums ───────────────────────────────────────────────────────

class MessageStatus(str, Enum):
    """Outreach message lifecycle — maps to DB `status` column."""
    DRAFT = "Draft"
    SENT = "Sent"
    RESPONSE_RECEIVED = "ResponseReceived"


class MessageOutcome(str, Enum):
    """Result of an outreach attempt, tracked alongside status."""
    PENDING = "Pending"
    INTRO_MADE = "IntroMade"
    DECLINED = "Declined"
    GHOSTED = "Ghosted"
    INTERVIEW = "Interview"


class TemplateTier(str, Enum):
    """Message template band selected from a strength rating."""
    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"


class CareerTool(str, Enum):
    """AI-generated career documents."""
    RESUME = "resume"
    COVER_LETTER = "cover-letter"
    LINKEDIN_PROFILE = "linkedin-profile"


STATUS_ORDER: dict[MessageStatus, int] = {
    MessageStatus.DRAFT: 0,
    MessageStatus.SENT: 1,
    MessageStatus.RESPONSE_RECEIVED: 2,
}

# Older clients sent lowercase/underscored values
_LEGACY_STATUS: dict[str, MessageStatus] = {
    "pending": MessageStatus.DRAFT,
    "draft": MessageStatus.DRAFT,
    "queued": MessageStatus.DRAFT,
    "sent": MessageStatus.SENT,
    "responded": MessageStatus.RESPONSE_RECEIVED,
    "response_received": MessageStatus.RESPONSE_RECEIVED,
    "responsereceived": MessageStatus.RESPONSE_RECEIVED,
    "intro_made": MessageStatus.RESPONSE_RECEIVED,
}

_LEGACY_OUTCOME: dict[str, MessageOutcome] = {
    "pending": MessageOutcome.PENDING,
    "intro_made": MessageOutcome.INTRO_MADE,
    "intromade": MessageOutcome.INTRO_MADE,
    "declined": MessageOutcome.DECLINED,
    "ghosted": MessageOutcome.GHOSTED,
    "interview": MessageOutcome.INTERVIEW,
}


def parse_status(value: str | MessageStatus) -> MessageStatus:
    """Map any accepted spelling to the canonical status. Raises ValueError."""
    if isinstance(value, MessageStatus):
        return value
    try:
        return MessageStatus(value)
    except ValueError:
        pass
    key = value.strip().lower()
    if key in _LEGACY_STATUS:
        return _LEGACY_STATUS[key]
    raise ValueError(f"unknown message status: {value!r}")


def parse_outcome(value: str | MessageOutcome) -> MessageOutcome:
    """Map any accepted spelling to the canonical outcome. Raises ValueError."""
    if isinstance(value, MessageOutcome):
        return value
    try:
        return MessageOutcome(value)
    except ValueError:
        pass
    key = value.strip().lower()
    if key in _LEGACY_OUTCOME:
        return _LEGACY_OUTCOME[key]
    raise ValueError(f"unknown message outcome: {value!r}")


def is_legacy_intro_status(value: str) -> bool:
    """True for the old `intro_made` status, which also implied an outcome."""
    return isinstance(value, str) and value.strip().lower() == "intro_made"
