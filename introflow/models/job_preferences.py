"""JobPreferences ORM — one row per user of desired titles, locations, industries.

Invariants:
    - Exactly one row per user (unique user_id), created empty at registration
    - Saving replaces all three lists wholesale

Design Decisions:
    - JSON columns for the string lists: portable across PostgreSQL and SQLite
"""

from sqlalchemy import ForeignKey, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from introflow.db.base import Base


class JobPreferences(Base):
    __tablename__ = "job_preferences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, unique=True,
    )
    titles: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    locations: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    industries: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    user: Mapped["User"] = relationship("User", back_populates="preferences")
