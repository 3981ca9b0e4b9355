"""Tests for experience-level matching."""

import pytest

from job_matcher.scoring.experience import match_experience


class TestMatchExperience:
    """Test experience tier compatibility."""

    def test_matching_level(self, profile, make_job):
        outcome = match_experience(profile, make_job())

        assert outcome.score == 15
        assert outcome.match is True
        assert outcome.reasons == ("Experience level matches (Mid position, you're mid)",)

    @pytest.mark.parametrize(
        "user_level,job_level",
        [
            ("junior", "Internship"),
            ("junior", "Junior"),
            ("mid", "Junior"),
            ("senior", "Mid"),
            ("lead", "Senior"),
            ("senior", "Lead"),
        ],
    )
    def test_compatible_pairs(self, make_profile, make_job, user_level, job_level):
        profile = make_profile(experienceLevel=user_level)
        assert match_experience(profile, make_job(experienceLevel=job_level)).score == 15

    def test_overqualified(self, make_profile, make_job):
        profile = make_profile(experienceLevel="senior")
        outcome = match_experience(profile, make_job(experienceLevel="Junior"))

        assert outcome.score == 5
        assert outcome.match is False
        assert outcome.reasons == ("You may be overqualified for this Junior position",)

    def test_underqualified(self, make_profile, make_job):
        profile = make_profile(experienceLevel="junior")
        outcome = match_experience(profile, make_job(experienceLevel="Senior"))

        assert outcome.score == 5
        assert outcome.match is False
        assert outcome.reasons == ("This Senior position may require more experience",)

    def test_other_mismatch_is_neutral(self, make_profile, make_job):
        """Lead user on a junior job: neutral points, no reason."""
        profile = make_profile(experienceLevel="lead")
        outcome = match_experience(profile, make_job(experienceLevel="Junior"))

        assert outcome.score == 10
        assert outcome.reasons == ()

    def test_unknown_job_level_accepts_mid_and_senior(self, make_profile, make_job):
        job = make_job(experienceLevel=None)

        assert match_experience(make_profile(experienceLevel="mid"), job).score == 15
        assert match_experience(make_profile(experienceLevel="junior"), job).score == 10

    def test_unknown_user_level_is_neutral(self, make_profile, make_job):
        profile = make_profile(experienceLevel="wizard")
        assert match_experience(profile, make_job()).score == 10

    def test_unknown_job_level_reason_names_it_unspecified(self, profile, make_job):
        outcome = match_experience(profile, make_job(experienceLevel=None))

        assert outcome.reasons == ("Experience level matches (unspecified position, you're mid)",)
