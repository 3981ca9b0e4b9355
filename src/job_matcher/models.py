"""
Pydantic model for job postings handed to the matching engine.

Jobs arrive from an external store in the camelCase shape produced by the
scraper (``postedDate``, ``experienceLevel``, ``isRemote``). Fields the
engine does not read are kept as extras so batch results can echo the
full record.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_matcher.utils.date_utils import ensure_aware, parse_job_date


class Job(BaseModel):
    """A single job posting (read-only)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    id: Optional[str] = Field(default=None, description="Identifier in the job store")
    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Hiring company")
    location: str = Field(default="", description="Location text, may contain Remote/Hybrid")
    description: str = Field(default="", description="Full job description")
    job_type: str = Field(
        default="",
        alias="type",
        description="Coarse functional label (e.g. Frontend, DevOps, Finance)",
    )
    category: Optional[str] = Field(default=None, description="Free-text category signal")
    experience_level: Optional[str] = Field(
        default=None,
        alias="experienceLevel",
        description="Internship, Junior, Mid, Senior or Lead",
    )
    posted_date: Optional[datetime] = Field(
        default=None, alias="postedDate", description="When the job was posted"
    )
    is_remote: Optional[bool] = Field(
        default=None, alias="isRemote", description="Explicit remote flag from the source"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("title", "company", "location", "description", "job_type", mode="before")
    @classmethod
    def _empty_string(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("posted_date", mode="before")
    @classmethod
    def _parse_posted_date(cls, value: Any) -> Optional[datetime]:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return ensure_aware(value)
        if isinstance(value, (int, float)):
            # Epoch milliseconds
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        return parse_job_date(str(value))

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys jobs arrive in, extras included."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
