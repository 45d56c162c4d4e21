"""Initial schema — users, auth sessions, preferences, jobs, employees, mutuals, messages.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("job_title", sa.String(255), nullable=True),
        sa.Column("photo_url", sa.Text, nullable=True),
        sa.Column("linkedin_profile_url", sa.Text, nullable=True),
        sa.Column("calendar_url", sa.Text, nullable=True),
        sa.Column("linkedin_connected", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("linkedin_session_cookie", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "auth_sessions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("token_hash", sa.String(64), nullable=False),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_auth_sessions_token_hash", "auth_sessions", ["token_hash"], unique=True)
    op.create_index("ix_auth_sessions_user_id", "auth_sessions", ["user_id"])

    op.create_table(
        "job_preferences",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, unique=True),
        sa.Column("titles", sa.JSON, nullable=False),
        sa.Column("locations", sa.JSON, nullable=False),
        sa.Column("industries", sa.JSON, nullable=False),
    )

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=False, server_default=""),
        sa.Column("job_url", sa.Text, nullable=False),
        sa.Column("posted_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("logo_url", sa.Text, nullable=True),
        sa.Column("is_new", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_jobs_user_id", "jobs", ["user_id"])

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("job_id", sa.Integer, sa.ForeignKey("jobs.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("linkedin_url", sa.Text, nullable=False, server_default=""),
        sa.Column("department", sa.String(255), nullable=True),
    )
    op.create_index("ix_employees_job_id", "employees", ["job_id"])

    op.create_table(
        "mutual_connections",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("employee_id", sa.Integer, sa.ForeignKey("employees.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("linkedin_url", sa.Text, nullable=False, server_default=""),
        sa.Column("connected_since", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rated_strength", sa.Integer, nullable=False, server_default="0"),
        sa.Column("connection_context", sa.Text, nullable=True),
        sa.CheckConstraint(
            "rated_strength >= 0 AND rated_strength <= 5",
            name="ck_mutual_rated_strength_range",
        ),
    )
    op.create_index("ix_mutual_connections_user_id", "mutual_connections", ["user_id"])
    op.create_index("ix_mutual_connections_employee_id", "mutual_connections", ["employee_id"])

    op.create_table(
        "messages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("mutual_id", sa.Integer, sa.ForeignKey("mutual_connections.id"), nullable=False),
        sa.Column("employee_id", sa.Integer, sa.ForeignKey("employees.id"), nullable=False),
        sa.Column("job_id", sa.Integer, sa.ForeignKey("jobs.id"), nullable=True),
        sa.Column("message_text", sa.Text, nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="Draft"),
        sa.Column("outcome", sa.String(32), nullable=False, server_default="Pending"),
        sa.Column("sent_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("response_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("intro_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_messages_user_id", "messages", ["user_id"])
    op.create_index("ix_messages_mutual_id", "messages", ["mutual_id"])


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_table("mutual_connections")
    op.drop_table("employees")
    op.drop_table("jobs")
    op.drop_table("job_preferences")
    op.drop_table("auth_sessions")
    op.drop_table("users")
