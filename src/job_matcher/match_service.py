"""
Batch matching over a job collection.

Scores every job for one profile, keeps the suitable ones above a minimum
score, sorts and truncates them, and reports match statistics. Scoring is
a pure per-job computation, so the batch can fan out over a thread pool
without coordination.
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from job_matcher.constants import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_MIN_SCORE,
    DEFAULT_SORT_BY,
    EXCELLENT_MATCH_THRESHOLD,
    GOOD_MATCH_THRESHOLD,
    MODERATE_MATCH_THRESHOLD,
)
from job_matcher.logging_config import get_structured_logger
from job_matcher.models import Job
from job_matcher.profile.schema import UserProfile
from job_matcher.scoring.engine import MatchEngine
from job_matcher.scoring.outcomes import MatchResult
from job_matcher.storage.job_source import JobSource
from job_matcher.utils.text_utils import round_half_up

slogger = get_structured_logger(__name__)

# Sort key for jobs without a posted date: older than anything real.
_NO_DATE = datetime.min.replace(tzinfo=timezone.utc)


class MatchOptions(BaseModel):
    """Options for a batch match request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    min_score: int = Field(default=DEFAULT_MIN_SCORE, ge=0, le=100, alias="minScore")
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, alias="maxResults")
    sort_by: str = Field(default=DEFAULT_SORT_BY, pattern="^(score|date)$", alias="sortBy")


@dataclass
class MatchedJob:
    """A job paired with its match result."""

    job: Job
    result: MatchResult

    @property
    def score(self) -> int:
        return self.result.score

    def to_dict(self) -> Dict[str, Any]:
        """Job fields plus matchScore, matchReasons, matchIssues and suitable."""
        data = self.job.to_dict()
        data.update(
            {
                "matchScore": self.result.score,
                "matchReasons": list(self.result.reasons),
                "matchIssues": list(self.result.issues),
                "suitable": self.result.suitable,
            }
        )
        return data


@dataclass
class MatchSummary:
    """Outcome of a batch match."""

    jobs: List[MatchedJob] = field(default_factory=list)
    total_matches: int = 0
    total_jobs: int = 0
    match_rate: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "jobs": [job.to_dict() for job in self.jobs],
            "totalMatches": self.total_matches,
            "totalJobs": self.total_jobs,
            "matchRate": self.match_rate,
        }


@dataclass
class MatchStatistics:
    """Score distribution of a profile across a job collection."""

    total: int = 0
    excellent: int = 0
    good: int = 0
    moderate: int = 0
    low: int = 0
    by_type: Dict[str, int] = field(default_factory=dict)
    by_location: Dict[str, int] = field(default_factory=dict)
    avg_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "excellent": self.excellent,
            "good": self.good,
            "moderate": self.moderate,
            "low": self.low,
            "byType": dict(self.by_type),
            "byLocation": dict(self.by_location),
            "avgScore": self.avg_score,
        }


def _score_all(
    profile: UserProfile,
    jobs: Sequence[Job],
    engine: MatchEngine,
    max_workers: Optional[int],
) -> List[MatchedJob]:
    """Score every job, preserving input order."""
    if max_workers and max_workers > 1 and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda job: engine.score(profile, job), jobs))
    else:
        results = [engine.score(profile, job) for job in jobs]
    return [MatchedJob(job, result) for job, result in zip(jobs, results)]


def _date_key(matched: MatchedJob) -> datetime:
    return matched.job.posted_date or _NO_DATE


def match_all(
    profile: UserProfile,
    jobs: Iterable[Job],
    options: Optional[MatchOptions] = None,
    engine: Optional[MatchEngine] = None,
    max_workers: Optional[int] = None,
) -> MatchSummary:
    """
    Match a profile against a collection of jobs.

    Keeps jobs that are suitable and score at least ``options.min_score``,
    sorts them by score (or by posted date, newest first), and truncates to
    ``options.max_results``. Ties keep their input order.

    Args:
        profile: User profile
        jobs: Jobs to score (not modified)
        options: Filter/sort options (defaults to MatchOptions())
        engine: Engine to score with (defaults to MatchEngine())
        max_workers: Thread pool size; None or 1 scores sequentially

    Returns:
        MatchSummary with the kept jobs, counts and match rate
    """
    options = options or MatchOptions()
    engine = engine or MatchEngine()
    job_list = list(jobs)

    scored = _score_all(profile, job_list, engine, max_workers)
    kept = [m for m in scored if m.result.suitable and m.score >= options.min_score]

    if options.sort_by == "date":
        kept.sort(key=_date_key, reverse=True)
    else:
        kept.sort(key=lambda m: m.score, reverse=True)

    kept = kept[: options.max_results]
    total_jobs = len(job_list)
    match_rate = round_half_up(len(kept) / total_jobs * 100) if total_jobs else 0

    slogger.match_activity(
        "batch_scored",
        {
            "total_jobs": total_jobs,
            "total_matches": len(kept),
            "match_rate": match_rate,
            "min_score": options.min_score,
            "sort_by": options.sort_by,
        },
    )

    return MatchSummary(
        jobs=kept,
        total_matches=len(kept),
        total_jobs=total_jobs,
        match_rate=match_rate,
    )


def match_statistics(
    profile: UserProfile,
    jobs: Iterable[Job],
    engine: Optional[MatchEngine] = None,
    max_workers: Optional[int] = None,
) -> MatchStatistics:
    """
    Compute the score distribution of a profile across jobs.

    Bands: excellent (80+), good (60-79), moderate (40-59), low (<40).
    Locations are counted by city, the text before the first comma.
    """
    engine = engine or MatchEngine()
    job_list = list(jobs)
    scored = _score_all(profile, job_list, engine, max_workers)

    stats = MatchStatistics(total=len(job_list))
    by_type: Counter = Counter()
    by_location: Counter = Counter()
    total_score = 0

    for matched in scored:
        score = matched.score
        total_score += score

        if score >= EXCELLENT_MATCH_THRESHOLD:
            stats.excellent += 1
        elif score >= GOOD_MATCH_THRESHOLD:
            stats.good += 1
        elif score >= MODERATE_MATCH_THRESHOLD:
            stats.moderate += 1
        else:
            stats.low += 1

        by_type[matched.job.job_type] += 1
        by_location[matched.job.location.split(",")[0].strip()] += 1

    stats.by_type = dict(by_type)
    stats.by_location = dict(by_location)
    stats.avg_score = round_half_up(total_score / len(job_list)) if job_list else 0

    slogger.match_activity("statistics", {"total_jobs": stats.total, "avg_score": stats.avg_score})
    return stats


class JobMatchService:
    """Matches profiles against the jobs of an injected job source."""

    def __init__(
        self,
        source: JobSource,
        engine: Optional[MatchEngine] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize the service.

        Args:
            source: Read-only job source
            engine: Engine to score with (defaults to MatchEngine())
            max_workers: Thread pool size for batch scoring
        """
        self.source = source
        self.engine = engine or MatchEngine()
        self.max_workers = max_workers

    def match(self, profile: UserProfile, options: Optional[MatchOptions] = None) -> MatchSummary:
        """Match the profile against every job in the source."""
        return match_all(
            profile,
            self.source.get_all_jobs(),
            options=options,
            engine=self.engine,
            max_workers=self.max_workers,
        )

    def score(self, profile: UserProfile, job: Job) -> MatchResult:
        """Score a single pair, e.g. to explain why a job was or wasn't suggested."""
        result = self.engine.score(profile, job)
        slogger.match_activity(
            "pair_scored",
            {
                "job_id": job.id,
                "job_title": job.title,
                "score": result.score,
                "suitable": result.suitable,
                "rejected_by": result.rejected_by,
            },
        )
        return result

    def statistics(self, profile: UserProfile) -> MatchStatistics:
        """Score distribution of the profile across every job in the source."""
        return match_statistics(
            profile,
            self.source.get_all_jobs(),
            engine=self.engine,
            max_workers=self.max_workers,
        )
