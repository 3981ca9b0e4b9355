"""Deterministic job match scoring engine."""

from job_matcher.scoring.engine import MatchEngine, score_match
from job_matcher.scoring.outcomes import (
    Continue,
    MatcherOutcome,
    MatchResult,
    Reject,
    ScoreAdjustment,
    SkillsOutcome,
)

__all__ = [
    "MatchEngine",
    "MatchResult",
    "ScoreAdjustment",
    "Continue",
    "Reject",
    "SkillsOutcome",
    "MatcherOutcome",
    "score_match",
]
