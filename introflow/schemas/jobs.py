"""Job Schemas — preferences, tracked jobs, employees, and discovery results.

Invariants:
    - Preference lists are replaced wholesale; blank entries are dropped
    - JobCreate.posted_date defaults to "now" when omitted
"""

from datetime import datetime

from pydantic import AliasChoices, Field, field_validator

from introflow.schemas.common import ApiModel


class JobPreferencesPayload(ApiModel):
    """Desired titles/locations/industries. Used for both request and response."""
    titles: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("titles", "jobTitles", "job_titles"),
    )
    locations: list[str] = Field(default_factory=list)
    industries: list[str] = Field(default_factory=list)

    @field_validator("titles", "locations", "industries")
    @classmethod
    def drop_blank_entries(cls, v: list[str]) -> list[str]:
        return [item.strip() for item in v if item and item.strip()]


class JobCreate(ApiModel):
    title: str = Field(min_length=1, max_length=255)
    company: str = Field(min_length=1, max_length=255)
    location: str = Field("", max_length=255)
    job_url: str = Field(
        min_length=1, max_length=2000,
        validation_alias=AliasChoices("jobUrl", "job_url", "url"),
    )
    posted_date: datetime | None = None
    logo_url: str | None = Field(None, max_length=2000)
    is_new: bool = True


class JobResponse(ApiModel):
    id: int
    user_id: int
    title: str
    company: str
    location: str
    job_url: str
    posted_date: datetime
    logo_url: str | None = None
    is_new: bool


class EmployeeCreate(ApiModel):
    name: str = Field(min_length=1, max_length=255)
    title: str = Field("", max_length=255)
    linkedin_url: str = Field(
        "", alias="linkedInUrl", max_length=2000,
    )
    department: str | None = Field(None, max_length=255)


class EmployeeResponse(ApiModel):
    id: int
    job_id: int
    name: str
    title: str
    linkedin_url: str = Field(alias="linkedInUrl")
    department: str | None = None


class DiscoveryResult(ApiModel):
    """Summary of one discovery run for a job."""
    job_id: int
    employees_created: int
    employees_skipped: int = 0
    mutuals_created: int
    employees: list[EmployeeResponse]
