"""Job Matcher - rule-based scoring of job postings against a user profile."""

__version__ = "1.0.0"

from job_matcher.match_service import (
    JobMatchService,
    MatchedJob,
    MatchOptions,
    MatchStatistics,
    MatchSummary,
    match_all,
    match_statistics,
)
from job_matcher.models import Job
from job_matcher.profile import ExperienceLevel, ProfileLoader, RemotePreference, UserProfile
from job_matcher.scoring import MatchEngine, MatchResult, score_match
from job_matcher.storage import FileJobSource, InMemoryJobSource, JobSource

__all__ = [
    "Job",
    "UserProfile",
    "RemotePreference",
    "ExperienceLevel",
    "ProfileLoader",
    "MatchEngine",
    "MatchResult",
    "score_match",
    "MatchOptions",
    "MatchedJob",
    "MatchSummary",
    "MatchStatistics",
    "match_all",
    "match_statistics",
    "JobMatchService",
    "JobSource",
    "InMemoryJobSource",
    "FileJobSource",
]
