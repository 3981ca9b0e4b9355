"""User profile model and loaders."""

from job_matcher.profile.loader import ProfileLoader
from job_matcher.profile.schema import ExperienceLevel, RemotePreference, UserProfile

__all__ = [
    "UserProfile",
    "RemotePreference",
    "ExperienceLevel",
    "ProfileLoader",
]
