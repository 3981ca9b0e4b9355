"""Career-category compatibility filter.

Keeps a frontend-developer seeker from being shown a payroll-specialist
listing, while letting ambiguous titles through.
"""

import logging
from typing import Optional

from job_matcher.constants import (
    CATEGORY_RELATED_SCORE,
    CATEGORY_SAME_SCORE,
    CATEGORY_UNKNOWN_SCORE,
)
from job_matcher.models import Job
from job_matcher.profile.schema import UserProfile
from job_matcher.scoring.outcomes import Continue, MatcherOutcome, Reject
from job_matcher.scoring.taxonomy import compatible_categories, find_category
from job_matcher.utils.text_utils import fold, fold_all

logger = logging.getLogger(__name__)

COMPONENT = "category"


def user_category(profile: UserProfile) -> Optional[str]:
    """Category of the role the user is looking for, or None."""
    texts = [fold(profile.desired_position), *fold_all(profile.job_types)]
    return find_category([t for t in texts if t])


def job_category(job: Job) -> Optional[str]:
    """Category of the job from its title, type and category fields, or None."""
    texts = [fold(job.title), fold(job.job_type), fold(job.category)]
    return find_category([t for t in texts if t])


def classify(profile: UserProfile, job: Job) -> MatcherOutcome:
    """
    Decide whether the job's career field is compatible with the user's.

    Scoring:
    - Either side unclassified: lenient pass, 10 points, no reason
    - Same category: 20 points
    - Compatible category: 10 points
    - Incompatible: hard reject

    Args:
        profile: User profile
        job: Job posting

    Returns:
        Continue with the category points, or Reject naming both categories
    """
    wanted = user_category(profile)
    offered = job_category(job)

    if not wanted or not offered:
        return Continue(COMPONENT, CATEGORY_UNKNOWN_SCORE)

    if offered in compatible_categories(wanted):
        if wanted == offered:
            return Continue(
                COMPONENT,
                CATEGORY_SAME_SCORE,
                reasons=(f"{job.job_type} position matches your career path",),
            )
        return Continue(
            COMPONENT,
            CATEGORY_RELATED_SCORE,
            reasons=(f"Related field: {job.job_type}",),
        )

    logger.debug(f"Category mismatch for '{job.title}': job={offered}, user={wanted}")
    return Reject(
        COMPONENT,
        f"Job category ({offered}) doesn't match your desired field ({wanted})",
    )
