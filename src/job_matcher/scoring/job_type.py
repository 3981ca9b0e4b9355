"""Affinity between the job's functional type and the user's interests."""

from job_matcher.constants import (
    JOB_TYPE_MATCH_SCORE,
    JOB_TYPE_MISMATCH_SCORE,
    JOB_TYPE_PARTIAL_SCORE,
)
from job_matcher.models import Job
from job_matcher.profile.schema import UserProfile
from job_matcher.scoring.outcomes import Continue
from job_matcher.scoring.taxonomy import FULL_STACK_ADJACENT_TYPES, FULL_STACK_TYPE
from job_matcher.utils.text_utils import contains_any, fold, fold_all

COMPONENT = "job_type"


def match_job_type(profile: UserProfile, job: Job) -> Continue:
    """
    Check the job type against the user's declared job types.

    - A declared type contains, or is contained in, the job type: 10 points
    - Full Stack user on a Frontend/Backend job: 8 points (partial credit)
    - Otherwise: 5 points, no match
    """
    user_types = fold_all(profile.job_types)
    job_type = fold(job.job_type)

    if job_type and any(t in job_type or job_type in t for t in user_types):
        return Continue(
            COMPONENT, JOB_TYPE_MATCH_SCORE, reasons=(f"{job.job_type} matches your interests",)
        )

    if FULL_STACK_TYPE in user_types and contains_any(job_type, FULL_STACK_ADJACENT_TYPES):
        return Continue(
            COMPONENT,
            JOB_TYPE_PARTIAL_SCORE,
            reasons=(f"{job.job_type} position (you're Full Stack)",),
        )

    return Continue(COMPONENT, JOB_TYPE_MISMATCH_SCORE, match=False)
