"""Network Contracts — typed payloads exchanged with the professional-network provider.

Invariants:
    - Provider responses are parsed through these models before touching the DB
    - Unknown provider fields are ignored
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _ProviderModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JobSearchQuery(_ProviderModel):
    titles: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    industries: list[str] = Field(default_factory=list)


class JobListing(_ProviderModel):
    title: str
    company: str
    location: str = ""
    url: str = Field(validation_alias=AliasChoices("url", "jobUrl", "job_url"))
    logo_url: str | None = Field(
        None, validation_alias=AliasChoices("logoUrl", "logo_url"),
    )
    posted_date: datetime | None = Field(
        None, validation_alias=AliasChoices("postedDate", "posted_date"),
    )


class EmployeeProfile(_ProviderModel):
    name: str
    title: str = ""
    linkedin_url: str = Field(
        "", validation_alias=AliasChoices("linkedinUrl", "linkedInUrl", "linkedin_url"),
    )
    department: str | None = None


class MutualProfile(_ProviderModel):
    name: str
    title: str = ""
    company: str | None = None
    linkedin_url: str = Field(
        "", validation_alias=AliasChoices("linkedinUrl", "linkedInUrl", "linkedin_url"),
    )
    connected_since: datetime | None = Field(
        None, validation_alias=AliasChoices("connectedSince", "connected_since"),
    )
    strength_rating: int = Field(
        0, ge=0, le=5,
        validation_alias=AliasChoices("strengthRating", "strength_rating", "ratedStrength"),
    )
    connection_context: str | None = Field(
        None, validation_alias=AliasChoices("connectionContext", "connection_context"),
    )
