"""Tests for the deterministic match engine."""

import pytest

from job_matcher.models import Job
from job_matcher.profile.schema import UserProfile
from job_matcher.scoring.engine import MatchEngine, score_match
from job_matcher.scoring.outcomes import Continue, Reject
from job_matcher.utils.text_utils import round_half_up


@pytest.fixture
def engine():
    return MatchEngine()


def _points(result, component):
    return sum(a.points for a in result.adjustments if a.category == component)


class TestMatchEngine:
    """Test aggregation of matcher outcomes."""

    def test_good_match(self, engine, profile, make_job):
        """Frontend developer vs a matching frontend job in their city."""
        result = engine.score(profile, make_job())

        assert _points(result, "category") == 20
        assert _points(result, "location") == 25
        assert _points(result, "skills") == 25
        assert _points(result, "experience") == 15
        assert result.suitable is True
        assert result.score >= 60
        assert result.score == 100
        assert "2 of your primary skills match: React, JavaScript" in result.reasons
        assert result.issues == []
        assert result.rejected_by is None

    def test_category_mismatch_short_circuits(self, engine, profile, make_job):
        """Payroll job for a frontend developer is rejected outright."""
        job = make_job(title="Payroll Specialist", type="Finance")
        result = engine.score(profile, job)

        assert result.score == 0
        assert result.suitable is False
        assert result.reasons == []
        assert result.issues == [
            "Job category (finance) doesn't match your desired field (tech)"
        ]
        assert result.rejected_by == "category"
        assert [a.category for a in result.adjustments] == ["category"]

    def test_location_mismatch_short_circuits(self, engine, make_profile, make_job):
        """Remote-only user vs an on-site job in an unrelated city."""
        profile = make_profile(
            desiredPosition="Backend Developer",
            jobTypes=["Backend"],
            remotePreference="remote",
            preferredLocations=[],
            willingToRelocate=False,
        )
        job = make_job(
            title="Backend Developer",
            type="Backend",
            location="Berlin, Germany",
            description="Python services",
        )

        result = engine.score(profile, job)

        assert result.score == 0
        assert result.suitable is False
        assert result.rejected_by == "location"
        # Reasons accumulated before the filter are kept, nothing after it
        assert result.reasons == ["Backend position matches your career path"]
        assert result.issues == [
            "Job requires on-site presence in Berlin, Germany, but you prefer remote work"
        ]
        assert [a.category for a in result.adjustments] == ["category", "location"]

    def test_no_skills_scores_zero_for_skills(self, engine, make_profile, make_job):
        profile = make_profile(primarySkills=[], secondarySkills=[])
        result = engine.score(profile, make_job())

        assert _points(result, "skills") == 0
        assert result.score == 85

    def test_overqualified_is_soft_penalty(self, engine, make_profile, make_job):
        """Senior user on a junior job loses points but isn't filtered."""
        job = make_job(title="Junior Frontend Developer", experienceLevel="Junior")
        senior = make_profile(experienceLevel="senior", secondarySkills=["Kubernetes", "Go"])
        mid = make_profile(experienceLevel="mid", secondarySkills=["Kubernetes", "Go"])

        senior_result = engine.score(senior, job)
        mid_result = engine.score(mid, job)

        assert _points(senior_result, "experience") == 5
        assert senior_result.rejected_by is None
        assert "You may be overqualified for this Junior position" in senior_result.issues
        assert senior_result.score == 88
        assert mid_result.score == 98
        assert senior_result.score < mid_result.score
        assert senior_result.suitable is True

    def test_onsite_soft_mismatch_reported_as_issue(self, engine, make_profile, make_job):
        profile = make_profile(remotePreference="onsite")
        result = engine.score(profile, make_job(location="Remote"))

        assert result.rejected_by is None
        assert "Remote position (you prefer on-site)" in result.issues
        assert "Remote position (you prefer on-site)" not in result.reasons

    def test_score_capped_at_100(self, engine, profile, make_job):
        assert engine.score(profile, make_job()).score == 100

    def test_empty_profile_and_job(self, engine):
        """Missing optional fields never raise and stay within bounds."""
        result = engine.score(UserProfile(), Job())

        assert 0 <= result.score <= 100
        assert result.rejected_by == "location"

    def test_deterministic(self, engine, profile, make_job):
        job = make_job()
        first = engine.score(profile, job).to_dict()

        for _ in range(5):
            assert engine.score(profile, job).to_dict() == first

    def test_suitable_iff_score_at_least_40(self, engine, make_profile, make_job):
        """Suitability follows the threshold across a spread of inputs."""
        profiles = [
            make_profile(),
            make_profile(remotePreference="remote", preferredLocations=[]),
            make_profile(primarySkills=[], experienceLevel="junior"),
            make_profile(remotePreference=None, willingToRelocate=True, preferredLocations=[]),
        ]
        jobs = [
            make_job(),
            make_job(location="Remote"),
            make_job(location="Prague, Czechia", experienceLevel="Senior"),
            make_job(title="Payroll Specialist", type="Finance"),
            make_job(title="Chef", type="Kitchen", description=""),
        ]

        for p in profiles:
            for j in jobs:
                result = engine.score(p, j)
                assert 0 <= result.score <= 100
                assert result.suitable == (result.score >= 40)
                if result.rejected:
                    assert result.score == 0
                    assert result.issues

    def test_custom_matchers(self, profile, make_job):
        """The engine runs whatever matchers it's given, in order."""
        engine = MatchEngine(
            matchers=[
                lambda p, j: Continue("first", 30, reasons=("first",)),
                lambda p, j: Continue("second", 12.5, match=False, reasons=("meh",)),
            ]
        )
        result = engine.score(profile, make_job())

        assert result.score == round_half_up(42.5)
        assert result.score == 43
        assert result.reasons == ["first"]
        assert result.issues == ["meh"]
        assert result.suitable is True

    def test_reject_stops_later_matchers(self, profile, make_job):
        calls = []

        def rejecting(p, j):
            calls.append("reject")
            return Reject("custom", "nope")

        def never(p, j):
            calls.append("never")
            return Continue("never", 100)

        result = MatchEngine(matchers=[rejecting, never]).score(profile, make_job())

        assert calls == ["reject"]
        assert result.score == 0
        assert result.rejected_by == "custom"

    def test_score_match_uses_default_engine(self, profile, make_job):
        job = make_job()
        assert score_match(profile, job).to_dict() == MatchEngine().score(profile, job).to_dict()


class TestRoundHalfUp:
    """Test score rounding."""

    @pytest.mark.parametrize(
        "value,expected", [(0.5, 1), (2.5, 3), (96.5, 97), (87.4, 87), (0.0, 0), (100.0, 100)]
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected
