"""Message Lifecycle — pure status/outcome transition rules for outreach messages.

Invariants:
    - Status only moves forward along Draft → Sent → ResponseReceived
    - A non-Pending outcome requires status != Draft
    - sent_date / response_date / intro_date are stamped once, never overwritten
    - Functions return the field patch to apply; they never touch the DB

Design Decisions:
    - Patch-returning functions over ORM mutation: the shell applies the patch
      through the entity store, core stays IO-free
    - `now` is a parameter so tests can pin timestamps
    - Same-status updates are no-ops, which keeps an empty/idempotent PATCH idempotent
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from introflow.core.domain_types import (
    MessageOutcome, MessageStatus, STATUS_ORDER,
)
from introflow.core.errors import InvalidTransitionError


@dataclass(frozen=True)
class MessageState:
    """The lifecycle-relevant slice of a Message row."""
    status: MessageStatus
    outcome: MessageOutcome
    sent_date: datetime | None = None
    response_date: datetime | None = None
    intro_date: datetime | None = None


def check_status_transition(
    current: MessageStatus, new: MessageStatus,
) -> None:
    """Raise InvalidTransitionError when `new` would move backward."""
    if STATUS_ORDER[new] < STATUS_ORDER[current]:
        raise InvalidTransitionError(
            f"Cannot move message status from {current.value} back to {new.value}",
        )


def check_outcome_allowed(
    status: MessageStatus, outcome: MessageOutcome,
) -> None:
    """Raise InvalidTransitionError for a resolved outcome on a draft."""
    if outcome is not MessageOutcome.PENDING and status is MessageStatus.DRAFT:
        raise InvalidTransitionError(
            f"Outcome {outcome.value} requires the message to be sent first",
        )


def _stamp(state: MessageState, status: MessageStatus, outcome: MessageOutcome, now: datetime) -> dict[str, Any]:
    patch: dict[str, Any] = {}
    if STATUS_ORDER[status] >= STATUS_ORDER[MessageStatus.SENT] and state.sent_date is None:
        patch["sent_date"] = now
    if status is MessageStatus.RESPONSE_RECEIVED and state.response_date is None:
        patch["response_date"] = now
    if outcome is MessageOutcome.INTRO_MADE and state.intro_date is None:
        patch["intro_date"] = now
    return patch


def initial_state_patch(
    status: MessageStatus | None,
    outcome: MessageOutcome | None,
    now: datetime,
    *,
    sent_date: datetime | None = None,
    response_date: datetime | None = None,
    intro_date: datetime | None = None,
) -> dict[str, Any]:
    """Fields for a new message. Defaults: Draft / Pending."""
    status = status or MessageStatus.DRAFT
    outcome = outcome or MessageOutcome.PENDING
    check_outcome_allowed(status, outcome)
    state = MessageState(
        status=status, outcome=outcome, sent_date=sent_date,
        response_date=response_date, intro_date=intro_date,
    )
    patch: dict[str, Any] = {
        "status": status.value,
        "outcome": outcome.value,
        "sent_date": sent_date,
        "response_date": response_date,
        "intro_date": intro_date,
    }
    patch.update(_stamp(state, status, outcome, now))
    return patch


def transition_patch(
    state: MessageState,
    now: datetime,
    *,
    status: MessageStatus | None = None,
    outcome: MessageOutcome | None = None,
) -> dict[str, Any]:
    """Validate a status and/or outcome change; return the fields to write.

    Omitted arguments keep their current value. Returns {} when nothing changes.
    """
    new_status = status or state.status
    new_outcome = outcome or state.outcome
    check_status_transition(state.status, new_status)
    check_outcome_allowed(new_status, new_outcome)

    patch: dict[str, Any] = {}
    if new_status is not state.status:
        patch["status"] = new_status.value
    if new_outcome is not state.outcome:
        patch["outcome"] = new_outcome.value
    if patch:
        patch.update(_stamp(state, new_status, new_outcome, now))
    return patch
