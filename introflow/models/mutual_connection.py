"""MutualConnection ORM — a first-degree contact who also knows a target Employee.

Invariants:
    - Owned by a User (user_id FK) and references an Employee (employee_id FK)
    - rated_strength in [0, 5]; 0 means unrated
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from introflow.db.base import Base


class MutualConnection(Base):
    __tablename__ = "mutual_connections"
    __table_args__ = (
        CheckConstraint(
            "rated_strength >= 0 AND rated_strength <= 5",
            name="ck_mutual_rated_strength_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    linkedin_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    connected_since: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    rated_strength: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    connection_context: Mapped[str | None] = mapped_column(Text, nullable=True)

    employee: Mapped["Employee"] = relationship(
        "Employee", back_populates="mutuals",
    )
