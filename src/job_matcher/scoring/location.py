"""Location and remote-work rule evaluation.

Two matchers live here:
- ``match_location``: hard filter on where the job is, relative to the
  user's preferred/current location, relocation willingness and remote
  preference.
- ``match_remote``: rewards alignment between the user's remote preference
  and the job's remote/hybrid/onsite nature. Never rejects.
"""

from __future__ import annotations

import logging

from job_matcher.constants import (
    LOCATION_CURRENT_SCORE,
    LOCATION_ONSITE_MISMATCH_SCORE,
    LOCATION_PREFERRED_SCORE,
    LOCATION_RELOCATION_SCORE,
    LOCATION_REMOTE_SCORE,
    REMOTE_FLEXIBLE_SCORE,
    REMOTE_MATCH_SCORE,
    REMOTE_MISMATCH_SCORE,
)
from job_matcher.models import Job
from job_matcher.profile.schema import RemotePreference, UserProfile
from job_matcher.scoring.outcomes import Continue, MatcherOutcome, Reject
from job_matcher.scoring.taxonomy import HYBRID_KEYWORD, REMOTE_KEYWORDS
from job_matcher.utils.text_utils import contains_any, fold, fold_all

logger = logging.getLogger(__name__)

LOCATION_COMPONENT = "location"
REMOTE_COMPONENT = "remote"

_ACCEPTS_REMOTE = {
    RemotePreference.REMOTE,
    RemotePreference.FLEXIBLE,
    RemotePreference.HYBRID,
}


def is_remote_job(job: Job) -> bool:
    """Remote or hybrid by location text, explicit flag, or description mention."""
    return (
        contains_any(fold(job.location), REMOTE_KEYWORDS)
        or job.is_remote is True
        or "remote" in fold(job.description)
    )


def is_hybrid_job(job: Job) -> bool:
    return HYBRID_KEYWORD in fold(job.location) or HYBRID_KEYWORD in fold(job.description)


def in_preferred_locations(profile: UserProfile, job: Job) -> bool:
    job_location = fold(job.location)
    return any(loc in job_location for loc in fold_all(profile.preferred_locations))


def in_current_location(profile: UserProfile, job: Job) -> bool:
    current = fold(profile.current_location)
    return bool(current) and current in fold(job.location)


def match_location(profile: UserProfile, job: Job) -> MatcherOutcome:
    """
    Apply location/relocation rules, in order.

    - Remote-only user, on-site job outside preferred locations: hard reject.
    - On-site user, remote-only (not hybrid) job: 10 points, soft mismatch.
    - Remote job, user accepts remote (remote/flexible/hybrid): 25 points.
    - Job in a preferred location: 25 points.
    - Job in the current location: 20 points.
    - Willing to relocate: 15 points.
    - Otherwise: hard reject.

    Args:
        profile: User profile
        job: Job posting

    Returns:
        Continue with location points, or Reject with the mismatch
    """
    preference = profile.remote_preference
    remote_job = is_remote_job(job)
    preferred = in_preferred_locations(profile, job)

    if preference == RemotePreference.REMOTE and not remote_job and not preferred:
        logger.debug(f"Location reject for '{job.title}': on-site job, remote-only user")
        return Reject(
            LOCATION_COMPONENT,
            f"Job requires on-site presence in {job.location}, but you prefer remote work",
        )

    if (
        preference == RemotePreference.ONSITE
        and remote_job
        and HYBRID_KEYWORD not in fold(job.location)
    ):
        return Continue(
            LOCATION_COMPONENT,
            LOCATION_ONSITE_MISMATCH_SCORE,
            match=False,
            reasons=("Remote position (you prefer on-site)",),
        )

    if remote_job and preference in _ACCEPTS_REMOTE:
        return Continue(
            LOCATION_COMPONENT,
            LOCATION_REMOTE_SCORE,
            reasons=(f"Remote position matching your {preference.value} preference",),
        )

    if preferred:
        return Continue(
            LOCATION_COMPONENT,
            LOCATION_PREFERRED_SCORE,
            reasons=(f"Location {job.location} is in your preferred areas",),
        )

    if in_current_location(profile, job):
        return Continue(
            LOCATION_COMPONENT,
            LOCATION_CURRENT_SCORE,
            reasons=(f"Job is in your current city ({profile.current_location})",),
        )

    if profile.willing_to_relocate:
        return Continue(
            LOCATION_COMPONENT,
            LOCATION_RELOCATION_SCORE,
            reasons=("Outside preferred locations, but you're open to relocation",),
        )

    logger.debug(f"Location reject for '{job.title}': {job.location} outside preferences")
    return Reject(
        LOCATION_COMPONENT,
        f"Job location {job.location} doesn't match your preferences "
        f"({', '.join(fold_all(profile.preferred_locations))})",
    )


def match_remote(profile: UserProfile, job: Job) -> Continue:
    """
    Score how well the job's work arrangement fits the remote preference.

    Point table:
    - remote user, remote job: 20
    - hybrid user, hybrid or remote job: 20
    - flexible user, any job: 15
    - onsite user, non-remote job: 20
    - anything else: 10, no match
    """
    preference = profile.remote_preference
    remote_job = is_remote_job(job)

    if preference == RemotePreference.REMOTE and remote_job:
        return Continue(REMOTE_COMPONENT, REMOTE_MATCH_SCORE, reasons=("Fully remote position",))

    if preference == RemotePreference.HYBRID and (is_hybrid_job(job) or remote_job):
        return Continue(
            REMOTE_COMPONENT, REMOTE_MATCH_SCORE, reasons=("Hybrid/flexible work arrangement",)
        )

    if preference == RemotePreference.FLEXIBLE:
        return Continue(
            REMOTE_COMPONENT, REMOTE_FLEXIBLE_SCORE, reasons=("Flexible with work arrangement",)
        )

    if preference == RemotePreference.ONSITE and not remote_job:
        return Continue(
            REMOTE_COMPONENT, REMOTE_MATCH_SCORE, reasons=("On-site position as preferred",)
        )

    return Continue(REMOTE_COMPONENT, REMOTE_MISMATCH_SCORE, match=False)
