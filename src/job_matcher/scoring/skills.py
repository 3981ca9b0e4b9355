"""Skill overlap between the user's declared skills and the job text."""

from job_matcher.constants import SKILLS_MAX_SCORE, SKILLS_NAMED_IN_REASON
from job_matcher.models import Job
from job_matcher.profile.schema import UserProfile
from job_matcher.scoring.outcomes import SkillsOutcome
from job_matcher.utils.text_utils import fold, fold_all

COMPONENT = "skills"


def job_text(job: Job) -> str:
    """Case-folded title and description, the text skills are searched in."""
    return f"{fold(job.title)} {fold(job.description)}"


def match_skills(profile: UserProfile, job: Job) -> SkillsOutcome:
    """
    Score the share of the user's skills that appear in the job text.

    A skill matches when it is a case-insensitive substring of the job title
    or description, so "React" matches "React.js". The score is
    ``matched / total * 25`` (0 when the user lists no skills). Two reasons
    may be produced: one naming up to three matched primary skills, and one
    counting the additional secondary matches.

    Args:
        profile: User profile
        job: Job posting

    Returns:
        SkillsOutcome with score in [0, 25], reasons and matched skills
    """
    text = job_text(job)
    user_skills = fold_all(profile.primary_skills) + fold_all(profile.secondary_skills)

    matched = tuple(skill for skill in user_skills if skill in text)
    primary_matched = [
        skill.strip()
        for skill in profile.primary_skills
        if skill and skill.strip() and fold(skill) in text
    ]

    if user_skills:
        score = min(float(SKILLS_MAX_SCORE), len(matched) / len(user_skills) * SKILLS_MAX_SCORE)
    else:
        score = 0.0

    reasons = []
    if primary_matched:
        named = ", ".join(primary_matched[:SKILLS_NAMED_IN_REASON])
        reasons.append(f"{len(primary_matched)} of your primary skills match: {named}")

    secondary_count = len(matched) - len(primary_matched)
    if secondary_count > 0:
        reasons.append(f"{secondary_count} additional skills match")

    return SkillsOutcome(
        COMPONENT,
        score,
        match=bool(matched),
        reasons=tuple(reasons),
        matched_skills=matched,
    )
