"""Outreach Service — status/outcome operations and the rating cascade, no HTTP."""

import pytest

from introflow.core.domain_types import MessageOutcome, MessageStatus
from introflow.core.errors import ForbiddenError, InvalidTransitionError
from introflow.services.entity_store import Store
from introflow.services.outreach_service import OutreachService


@pytest.fixture
async def seeded(test_db):
    store = Store(test_db)
    user = await store.users.create(username="a@example.com", password_hash="x", name="Alex")
    other = await store.users.create(username="b@example.com", password_hash="x")
    job = await store.jobs.create(user_id=user.id, title="SRE", company="Acme", job_url="u")
    employee = await store.employees.create(job_id=job.id, name="Sam")
    mutual = await store.mutuals.create(
        user_id=user.id, employee_id=employee.id, name="Dana", rated_strength=2,
    )
    return {
        "service": OutreachService(store), "user": user, "other": other,
        "mutual": mutual, "employee": employee, "job": job,
    }


async def test_update_status_then_outcome(seeded):
    service, user = seeded["service"], seeded["user"]
    message = await service.create_message(user, {"mutual_id": seeded["mutual"].id})
    assert message.status == "Draft"

    with pytest.raises(InvalidTransitionError):
        await service.update_outcome(user, message.id, MessageOutcome.INTERVIEW)

    sent = await service.update_status(user, message.id, MessageStatus.SENT)
    assert sent.status == "Sent"
    assert sent.sent_date is not None

    done = await service.update_outcome(user, message.id, MessageOutcome.INTRO_MADE)
    assert done.outcome == "IntroMade"
    assert done.intro_date is not None


async def test_create_message_fills_links_and_template(seeded):
    service, user = seeded["service"], seeded["user"]
    message = await service.create_message(user, {"mutual_id": seeded["mutual"].id})
    assert message.employee_id == seeded["employee"].id
    assert message.job_id == seeded["job"].id
    assert "imposition" in message.message_text


async def test_rating_cascade_happens_before_message_write(seeded):
    service, user = seeded["service"], seeded["user"]
    await service.create_message(
        user, {"mutual_id": seeded["mutual"].id, "rated_strength": 4},
    )
    mutual = await service.get_mutual(user, seeded["mutual"].id)
    assert mutual.rated_strength == 4


async def test_rejected_lifecycle_leaves_rating_alone(seeded):
    service, user = seeded["service"], seeded["user"]
    with pytest.raises(InvalidTransitionError):
        await service.create_message(user, {
            "mutual_id": seeded["mutual"].id,
            "rated_strength": 5,
            "outcome": MessageOutcome.DECLINED,
        })
    mutual = await service.get_mutual(user, seeded["mutual"].id)
    assert mutual.rated_strength == 2


async def test_other_user_cannot_rate(seeded):
    with pytest.raises(ForbiddenError):
        await seeded["service"].rate_mutual(seeded["other"], seeded["mutual"].id, 5)
