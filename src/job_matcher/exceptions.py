"""Custom exceptions for the job matcher.

This module defines domain-specific exceptions raised at the I/O and
validation boundaries (settings, profile and job loading, CLI). The scoring
engine itself never raises for a semantic non-match; it reports one through
``MatchResult.suitable`` and ``MatchResult.issues`` instead.
"""


class JobMatcherError(Exception):
    """Base exception for all job matcher errors.

    All custom exceptions in this module inherit from this base class,
    making it easy to catch all job-matcher-specific errors.
    """

    pass


class ConfigurationError(JobMatcherError):
    """Raised when there's an error in configuration.

    Examples:
    - Settings file is not valid YAML
    - Invalid value for minScore / maxResults / sortBy
    - Settings file path does not exist when explicitly requested
    """

    pass


class ProfileError(JobMatcherError):
    """Raised when profile operations fail.

    Examples:
    - Profile file not found
    - Profile file is not valid JSON
    - Profile data does not match the schema
    """

    pass


class JobSourceError(JobMatcherError):
    """Raised when the job collection cannot be loaded.

    Examples:
    - Jobs file not found
    - Jobs file is neither a list nor a ``{"jobs": [...]}`` mapping
    - A job record does not match the schema

    Attributes:
        source: Description of the source that failed (usually a file path)
    """

    def __init__(self, message: str, source: str = "unknown"):
        self.source = source
        super().__init__(message)
