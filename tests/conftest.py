"""Shared pytest fixtures for all tests."""

import pytest

from job_matcher.models import Job
from job_matcher.profile.schema import UserProfile
from job_matcher.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def set_test_environment(monkeypatch):
    """
    Automatically set ENVIRONMENT variable for all tests.

    Also clears logging/config overrides from the developer's shell so
    settings and log output are predictable.
    """
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.delenv("JOB_MATCHER_CONFIG", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def profile_data():
    """
    Create a standardized profile dictionary (frontend developer in Bratislava).

    Individual tests can override specific fields by updating the returned dict.
    """
    return {
        "desiredPosition": "Frontend Developer",
        "jobTypes": ["Frontend"],
        "primarySkills": ["React", "JavaScript"],
        "secondarySkills": [],
        "currentLocation": "Bratislava, Slovakia",
        "preferredLocations": ["Bratislava, Slovakia"],
        "willingToRelocate": False,
        "remotePreference": "flexible",
        "experienceLevel": "mid",
    }


@pytest.fixture
def profile(profile_data):
    """UserProfile built from profile_data."""
    return UserProfile.model_validate(profile_data)


@pytest.fixture
def make_profile(profile_data):
    """Factory for profiles that differ from profile_data in a few fields."""

    def _make(**overrides):
        return UserProfile.model_validate({**profile_data, **overrides})

    return _make


@pytest.fixture
def job_data():
    """Create a standardized job dictionary that fits profile_data."""
    return {
        "id": "job-1",
        "title": "Frontend Developer (React)",
        "company": "Acme s.r.o.",
        "type": "Frontend",
        "location": "Bratislava, Slovakia",
        "description": "React, JavaScript, HTML, CSS",
        "experienceLevel": "Mid",
        "postedDate": "2024-03-01T09:00:00Z",
    }


@pytest.fixture
def make_job(job_data):
    """Factory for jobs that differ from job_data in a few fields."""

    def _make(**overrides):
        return Job.model_validate({**job_data, **overrides})

    return _make
