"""Tests for the career-category classifier and its lookup tables."""

from job_matcher.scoring.category import classify, job_category, user_category
from job_matcher.scoring.outcomes import Continue, Reject
from job_matcher.scoring.taxonomy import (
    CATEGORY_COMPATIBILITY,
    CATEGORY_GROUPS,
    acceptable_levels,
    compatible_categories,
    find_category,
)
from job_matcher.profile.schema import ExperienceLevel


class TestFindCategory:
    """Test keyword-based category lookup."""

    def test_first_group_wins(self):
        """A title with keywords from two groups takes the earlier group."""
        assert find_category(["sales engineer"]) == "tech"

    def test_substring_match(self):
        """Keywords match inside longer words."""
        assert find_category(["senior reactjs specialist"]) == "tech"

    def test_no_match(self):
        """Unrecognized text yields no category."""
        assert find_category(["chef de partie"]) is None

    def test_empty_texts(self):
        assert find_category([]) is None

    def test_every_group_has_compatibility_entry(self):
        """Each group accepts at least itself."""
        for name, _keywords in CATEGORY_GROUPS:
            assert name in CATEGORY_COMPATIBILITY[name]

    def test_compatibility_is_one_way(self):
        """Tech users may see management roles, finance users only finance."""
        assert "management" in compatible_categories("tech")
        assert "tech" not in compatible_categories("finance")

    def test_unknown_category_accepts_itself(self):
        assert compatible_categories("culinary") == frozenset({"culinary"})


class TestAcceptableLevels:
    """Test the experience compatibility table."""

    def test_case_insensitive(self):
        assert acceptable_levels("Senior") == acceptable_levels("senior")

    def test_internship_only_junior(self):
        assert acceptable_levels("Internship") == frozenset({ExperienceLevel.JUNIOR})

    def test_unknown_level_defaults_to_mid_and_senior(self):
        assert acceptable_levels("Principal") == frozenset(
            {ExperienceLevel.MID, ExperienceLevel.SENIOR}
        )
        assert acceptable_levels(None) == frozenset(
            {ExperienceLevel.MID, ExperienceLevel.SENIOR}
        )


class TestClassify:
    """Test the category hard filter."""

    def test_same_category(self, profile, make_job):
        """Frontend user on a frontend job gets full category points."""
        outcome = classify(profile, make_job())

        assert isinstance(outcome, Continue)
        assert outcome.score == 20
        assert outcome.reasons == ("Frontend position matches your career path",)

    def test_related_category(self, profile, make_job):
        """Tech user on a design job gets related-field points."""
        job = make_job(title="Graphic Artist", type="Design", description="")
        outcome = classify(profile, job)

        assert isinstance(outcome, Continue)
        assert outcome.score == 10
        assert outcome.reasons == ("Related field: Design",)

    def test_incompatible_category_rejects(self, profile, make_job):
        """Tech user on a payroll job is rejected with both categories named."""
        job = make_job(title="Payroll Specialist", type="Finance")
        outcome = classify(profile, job)

        assert isinstance(outcome, Reject)
        assert outcome.score == 0
        assert outcome.match is False
        assert outcome.issue == "Job category (finance) doesn't match your desired field (tech)"

    def test_unknown_job_category_is_lenient(self, profile, make_job):
        """An unclassifiable job passes with neutral points and no reason."""
        job = make_job(title="Chef", type="Kitchen")
        outcome = classify(profile, job)

        assert isinstance(outcome, Continue)
        assert outcome.score == 10
        assert outcome.reasons == ()

    def test_unknown_user_category_is_lenient(self, make_profile, make_job):
        """A profile without a recognizable position passes every job."""
        profile = make_profile(desiredPosition="Chef", jobTypes=[])
        job = make_job(title="Payroll Specialist", type="Finance")

        outcome = classify(profile, job)

        assert isinstance(outcome, Continue)
        assert outcome.score == 10

    def test_category_field_used_for_job(self, make_job):
        """The free-text category field also classifies the job."""
        job = make_job(title="Specialist", type="", category="Human Resources")
        assert job_category(job) == "hr"

    def test_user_category_from_job_types(self, make_profile):
        profile = make_profile(desiredPosition="", jobTypes=["Marketing"])
        assert user_category(profile) == "marketing"

    def test_blank_job_types_ignored(self, make_profile):
        """Blank entries don't classify the user."""
        profile = make_profile(desiredPosition="", jobTypes=["", "  "])
        assert user_category(profile) is None
