"""Read-only job sources for the matcher."""

from job_matcher.storage.job_source import FileJobSource, InMemoryJobSource, JobSource

__all__ = ["JobSource", "InMemoryJobSource", "FileJobSource"]
