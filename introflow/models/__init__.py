"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the ownership root; jobs, mutuals and messages carry user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from introflow.models.user import User  # noqa: F401
from introflow.models.auth_session import AuthSession  # noqa: F401
from introflow.models.job_preferences import JobPreferences  # noqa: F401
from introflow.models.job import Job  # noqa: F401
from introflow.models.employee import Employee  # noqa: F401
from introflow.models.mutual_connection import MutualConnection  # noqa: F401
from introflow.models.message import Message  # noqa: F401
