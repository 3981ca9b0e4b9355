"""Matcher outcomes and the aggregate match result.

Every matcher returns either ``Continue`` (evaluation proceeds, points are
added) or ``Reject`` (hard filter, the aggregate short-circuits to zero).
The engine dispatches on the type rather than on ad hoc flags.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Continue:
    """
    Non-blocking matcher outcome.

    Attributes:
        component: Matcher name (category, location, remote, skills, experience, job_type)
        score: Points contributed to the aggregate
        match: False marks a soft penalty; its reasons surface as issues
        reasons: Human-readable explanations, in display order
    """

    component: str
    score: float
    match: bool = True
    reasons: Tuple[str, ...] = ()

    @property
    def reason(self) -> str:
        return self.reasons[0] if self.reasons else ""


@dataclass(frozen=True)
class SkillsOutcome(Continue):
    """Skills matcher outcome, also carrying the matched (case-folded) skills."""

    matched_skills: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Reject:
    """Hard-filter outcome. The aggregate score becomes 0."""

    component: str
    issue: str

    @property
    def score(self) -> int:
        return 0

    @property
    def match(self) -> bool:
        return False


MatcherOutcome = Union[Continue, Reject]


@dataclass
class ScoreAdjustment:
    """A single score contribution with category, reason, and points."""

    category: str
    reason: str
    points: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "category": self.category,
            "reason": self.reason,
            "points": self.points,
        }

    def __str__(self) -> str:
        """String representation for logging/debugging."""
        sign = "+" if self.points >= 0 else ""
        return f"[{self.category}] {self.reason} ({sign}{self.points:.1f})"


@dataclass
class MatchResult:
    """
    Result of scoring one profile against one job.

    A zero score with ``rejected_by`` set means the job was confidently
    rejected by a hard filter; a low score without it only means little
    positive signal was found.
    """

    score: int
    reasons: List[str] = field(default_factory=list)
    issues: List[str] = field(default_factory=list)
    suitable: bool = False
    rejected_by: Optional[str] = None
    adjustments: List[ScoreAdjustment] = field(default_factory=list)

    @property
    def rejected(self) -> bool:
        return self.rejected_by is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "reasons": list(self.reasons),
            "issues": list(self.issues),
            "suitable": self.suitable,
            "rejectedBy": self.rejected_by,
            "adjustments": [adj.to_dict() for adj in self.adjustments],
        }
