"""User ORM — account identity, profile, and the linked network-account marker.

Invariants:
    - username is unique; password_hash is never serialized
    - linkedin_session_cookie is set only while linkedin_connected is true
    - Users are never deleted

Design Decisions:
    - Profile fields (linkedin_profile_url, calendar_url) live here: they feed
      every introduction template, so they are read on each draft
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from introflow.db.base import Base


class User(Base):
    """Registered job seeker."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    linkedin_profile_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    calendar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    linkedin_connected: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    linkedin_session_cookie: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    preferences: Mapped["JobPreferences | None"] = relationship(
        "JobPreferences", back_populates="user", uselist=False,
    )
