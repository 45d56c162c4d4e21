"""Employee ORM — a contact at a target company, attached to a tracked Job.

Invariants:
    - Always belongs to a Job (job_id FK); ownership is the job's user_id
    - Deleting an employee deletes the mutual connections found for it
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from introflow.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("jobs.id"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    linkedin_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)

    job: Mapped["Job"] = relationship("Job", back_populates="employees")
    mutuals: Mapped[list["MutualConnection"]] = relationship(
        "MutualConnection", back_populates="employee",
        cascade="all, delete-orphan",
    )
