"""Outreach Stats — pure computation of dashboard counts from a user's rows.

Invariants:
    - No IO: callers pass the status/outcome values already loaded
    - messages_sent counts every status other than Draft
    - introductions_made counts outcome IntroMade only (Interview is separate)
    - Breakdowns always list every canonical status/outcome, zero-filled

Design Decisions:
    - Pure function, not a repository method: the store loads, core counts
    - Unknown stored values are ignored by the breakdowns instead of raising
"""

from collections.abc import Iterable

from introflow.core.domain_types import MessageOutcome, MessageStatus


def compute_outreach_stats(
    jobs_count: int,
    mutuals_count: int,
    messages: Iterable[tuple[str, str | None]],
) -> dict:
    """Compute dashboard stats. `messages` yields (status, outcome) pairs."""
    status_counts = {s.value: 0 for s in MessageStatus}
    outcome_counts = {o.value: 0 for o in MessageOutcome}
    sent = 0
    intros = 0

    for status, outcome in messages:
        if status in status_counts:
            status_counts[status] += 1
        if status != MessageStatus.DRAFT.value:
            sent += 1
        outcome = outcome or MessageOutcome.PENDING.value
        if outcome in outcome_counts:
            outcome_counts[outcome] += 1
        if outcome == MessageOutcome.INTRO_MADE.value:
            intros += 1

    return {
        "jobs_count": jobs_count,
        "mutuals_count": mutuals_count,
        "messages_sent_count": sent,
        "introductions_made_count": intros,
        "status_counts": status_counts,
        "outcome_counts": outcome_counts,
    }
