"""Message ORM — one outreach attempt asking a mutual for an introduction.

Invariants:
    - Owned by a User; mutual_id references a MutualConnection of the same user
    - status in MessageStatus, outcome in MessageOutcome (canonical values only)
    - Never hard-deleted

Design Decisions:
    - No relationship() back to mutual/employee: messages are read as flat rows
      and must never be swept up by a cascade
    - job_id nullable: a message may target an employee found outside a job
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from introflow.core.domain_types import MessageOutcome, MessageStatus
from introflow.db.base import Base


class Message(Base):
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    mutual_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("mutual_connections.id"), nullable=False, index=True,
    )
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False,
    )
    job_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("jobs.id"), nullable=True,
    )
    message_text: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=MessageStatus.DRAFT.value,
    )
    outcome: Mapped[str] = mapped_column(
        String(32), nullable=False, default=MessageOutcome.PENDING.value,
    )
    sent_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    response_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    intro_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
