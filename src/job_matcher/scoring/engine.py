"""Deterministic match engine - no learned weights, pure rule-based scoring.

Calculates a bounded match score for one user profile against one job,
with human-readable reasons. All scoring logic is deterministic and
transparent; the engine holds no mutable state and is safe to share
between threads.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from job_matcher.constants import MAX_SCORE, MIN_SUITABLE_SCORE
from job_matcher.models import Job
from job_matcher.profile.schema import UserProfile
from job_matcher.scoring.category import classify
from job_matcher.scoring.experience import match_experience
from job_matcher.scoring.job_type import match_job_type
from job_matcher.scoring.location import match_location, match_remote
from job_matcher.scoring.outcomes import (
    Continue,
    MatcherOutcome,
    MatchResult,
    Reject,
    ScoreAdjustment,
)
from job_matcher.scoring.skills import match_skills
from job_matcher.utils.text_utils import round_half_up

logger = logging.getLogger(__name__)

Matcher = Callable[[UserProfile, Job], MatcherOutcome]

# Evaluation order. Category and location may reject; the rest only add points.
DEFAULT_MATCHERS: Tuple[Matcher, ...] = (
    classify,
    match_location,
    match_remote,
    match_skills,
    match_experience,
    match_job_type,
)


class MatchEngine:
    """
    Score a user profile against a job posting.

    The engine evaluates, in order:
    - Career category compatibility (hard filter)
    - Location / relocation (hard filter)
    - Remote-work preference alignment
    - Skills overlap
    - Experience-tier fit
    - Job-type affinity

    A hard filter returns a zero score immediately; nothing from later
    matchers leaks into the result.
    """

    def __init__(self, matchers: Optional[Sequence[Matcher]] = None):
        """
        Initialize the match engine.

        Args:
            matchers: Matchers to run, in order (defaults to DEFAULT_MATCHERS)
        """
        self.matchers: Tuple[Matcher, ...] = tuple(matchers or DEFAULT_MATCHERS)

    def score(self, profile: UserProfile, job: Job) -> MatchResult:
        """
        Calculate the match result for one profile/job pair.

        Args:
            profile: User profile
            job: Job posting

        Returns:
            MatchResult with score in [0, 100], reasons, issues and suitability
        """
        total = 0.0
        reasons: List[str] = []
        issues: List[str] = []
        adjustments: List[ScoreAdjustment] = []

        for matcher in self.matchers:
            outcome = matcher(profile, job)

            if isinstance(outcome, Reject):
                logger.debug(f"Hard filter '{outcome.component}' rejected '{job.title}'")
                adjustments.append(ScoreAdjustment(outcome.component, outcome.issue, 0))
                return MatchResult(
                    score=0,
                    reasons=reasons,
                    issues=issues + [outcome.issue],
                    suitable=False,
                    rejected_by=outcome.component,
                    adjustments=adjustments,
                )

            total += outcome.score
            self._collect(outcome, reasons, issues)
            adjustments.append(
                ScoreAdjustment(outcome.component, outcome.reason, outcome.score)
            )

        final_score = max(0, round_half_up(min(float(MAX_SCORE), total)))
        return MatchResult(
            score=final_score,
            reasons=reasons,
            issues=issues,
            suitable=final_score >= MIN_SUITABLE_SCORE,
            adjustments=adjustments,
        )

    @staticmethod
    def _collect(outcome: Continue, reasons: List[str], issues: List[str]) -> None:
        """Route reasons: matches explain the score, soft mismatches are issues."""
        target = reasons if outcome.match else issues
        target.extend(r for r in outcome.reasons if r)


_default_engine = MatchEngine()


def score_match(profile: UserProfile, job: Job) -> MatchResult:
    """Score one pair with the default engine."""
    return _default_engine.score(profile, job)
