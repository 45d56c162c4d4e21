"""Auth & Profile Schemas — registration, login, user profile, network account link.

Invariants:
    - UserResponse never carries password_hash or linkedin_session_cookie
    - Usernames are stripped; whitespace-only values rejected
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from introflow.schemas.common import ApiModel, reject_explicit_nulls


class RegisterRequest(ApiModel):
    username: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=4, max_length=512)
    name: str | None = Field(None, max_length=255)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class LoginRequest(ApiModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=512)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()


class UserResponse(ApiModel):
    """Public user data."""
    id: int
    username: str
    name: str | None = None
    job_title: str | None = None
    photo_url: str | None = None
    linkedin_profile_url: str | None = Field(None, alias="linkedInProfileUrl")
    calendar_url: str | None = None
    linkedin_connected: bool = Field(False, alias="linkedInConnected")
    created_at: datetime | None = None


class ProfileUpdate(ApiModel):
    """Partial profile update. Omitted fields stay unchanged."""
    name: str | None = Field(None, min_length=1, max_length=255)
    job_title: str | None = Field(None, max_length=255)
    photo_url: str | None = Field(None, max_length=2000)
    linkedin_profile_url: str | None = Field(
        None, alias="linkedInProfileUrl", max_length=2000,
    )
    calendar_url: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def check_required_not_null(self):
        reject_explicit_nulls(self, ("name",))
        return self


class LinkedInConnectRequest(ApiModel):
    session_cookie: str = Field(min_length=1, max_length=4096)
