"""Data model for the user profile consumed by the matching engine."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RemotePreference(str, Enum):
    """How the user wants to work."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    FLEXIBLE = "flexible"


class ExperienceLevel(str, Enum):
    """Experience tier the user places themselves in."""

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"


def _coerce_enum(enum_cls, value: Any):
    """Case-fold enum input; unknown or blank values become None (neutral)."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None


class UserProfile(BaseModel):
    """
    Job-search profile of a single user.

    Accepts the camelCase keys produced by the profile form
    (``desiredPosition``, ``primarySkills``...) as well as snake_case field
    names. Missing values never fail validation: collections default to
    empty and enums to None.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    desired_position: str = Field(
        "", alias="desiredPosition", description="Free-text target role"
    )
    job_types: List[str] = Field(
        default_factory=list,
        alias="jobTypes",
        description="Functional categories of interest (e.g. Frontend, Full Stack)",
    )

    # Location preferences
    current_location: str = Field("", alias="currentLocation", description="Where the user lives")
    preferred_locations: List[str] = Field(
        default_factory=list, alias="preferredLocations", description="Acceptable work locations"
    )
    willing_to_relocate: bool = Field(
        False, alias="willingToRelocate", description="Open to moving for a job"
    )
    remote_preference: Optional[RemotePreference] = Field(
        None,
        alias="remotePreference",
        description="Remote work preference (remote, hybrid, onsite, flexible)",
    )

    # Skills
    primary_skills: List[str] = Field(
        default_factory=list, alias="primarySkills", description="Core skills"
    )
    secondary_skills: List[str] = Field(
        default_factory=list, alias="secondarySkills", description="Supporting skills"
    )

    # Experience
    experience_level: Optional[ExperienceLevel] = Field(
        None, alias="experienceLevel", description="Experience tier (junior, mid, senior, lead)"
    )
    years_of_experience: int = Field(
        0, alias="yearsOfExperience", description="Total years of professional experience"
    )

    @field_validator("desired_position", "current_location", mode="before")
    @classmethod
    def _empty_string(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator(
        "job_types", "preferred_locations", "primary_skills", "secondary_skills", mode="before"
    )
    @classmethod
    def _string_list(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(v) for v in value if v is not None]

    @field_validator("willing_to_relocate", mode="before")
    @classmethod
    def _bool_default(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("remote_preference", mode="before")
    @classmethod
    def _remote_preference(cls, value: Any) -> Optional[RemotePreference]:
        return _coerce_enum(RemotePreference, value)

    @field_validator("experience_level", mode="before")
    @classmethod
    def _experience_level(cls, value: Any) -> Optional[ExperienceLevel]:
        return _coerce_enum(ExperienceLevel, value)

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _non_negative_years(cls, value: Any) -> int:
        if value is None:
            return 0
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            return 0

    def get_all_skills(self) -> List[str]:
        """Primary skills followed by secondary skills, in declared order."""
        return [*self.primary_skills, *self.secondary_skills]
