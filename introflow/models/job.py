"""Job ORM — a job posting tracked by one user.

Invariants:
    - Always owned by a User (user_id FK)
    - Deleting a job deletes its employees (and their mutuals) through the ORM cascade

Design Decisions:
    - Employees are not eager-loaded: reads never touch the collection, and
      async sessions cannot lazy-load it, so the store loads it explicitly
      before a delete
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from introflow.db.base import Base


class Job(Base):
    """Tracked job posting."""
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    job_url: Mapped[str] = mapped_column(Text, nullable=False)
    posted_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_new: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    employees: Mapped[list["Employee"]] = relationship(
        "Employee", back_populates="job",
        cascade="all, delete-orphan",
    )
