"""Experience-tier compatibility between the user and the job."""

from job_matcher.constants import (
    EXPERIENCE_MATCH_SCORE,
    EXPERIENCE_MISMATCH_SCORE,
    EXPERIENCE_NEUTRAL_SCORE,
)
from job_matcher.models import Job
from job_matcher.profile.schema import ExperienceLevel, UserProfile
from job_matcher.scoring.outcomes import Continue
from job_matcher.scoring.taxonomy import acceptable_levels
from job_matcher.utils.text_utils import fold

COMPONENT = "experience"


def match_experience(profile: UserProfile, job: Job) -> Continue:
    """
    Compare the user's tier with the job's declared tier.

    - User level acceptable for the job level: 15 points
    - Senior user on a Junior job (overqualified): 5 points, no match
    - Junior user on a Senior job (underqualified): 5 points, no match
    - Any other mismatch: 10 points, empty reason
    """
    user_level = profile.experience_level
    job_level = (job.experience_level or "").strip()
    job_level_key = fold(job_level)
    job_label = job_level or "unspecified"

    if user_level is not None and user_level in acceptable_levels(job_level):
        return Continue(
            COMPONENT,
            EXPERIENCE_MATCH_SCORE,
            reasons=(
                f"Experience level matches ({job_label} position, you're {user_level.value})",
            ),
        )

    if user_level == ExperienceLevel.SENIOR and job_level_key == "junior":
        return Continue(
            COMPONENT,
            EXPERIENCE_MISMATCH_SCORE,
            match=False,
            reasons=(f"You may be overqualified for this {job_level} position",),
        )

    if user_level == ExperienceLevel.JUNIOR and job_level_key == "senior":
        return Continue(
            COMPONENT,
            EXPERIENCE_MISMATCH_SCORE,
            match=False,
            reasons=(f"This {job_level} position may require more experience",),
        )

    return Continue(COMPONENT, EXPERIENCE_NEUTRAL_SCORE)
