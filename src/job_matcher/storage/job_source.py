"""Job sources: where the matcher reads its job collection from.

Sources are read-only. The matcher never mutates the jobs it is handed,
so a source can be shared by concurrent match requests.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import (
    Any,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

import yaml
from pydantic import ValidationError

from job_matcher.exceptions import JobSourceError
from job_matcher.logging_config import get_structured_logger
from job_matcher.models import Job

logger = logging.getLogger(__name__)
slogger = get_structured_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@runtime_checkable
class JobSource(Protocol):
    """Anything that can hand out the current job collection."""

    def get_all_jobs(self) -> Sequence[Job]: ...


def _coerce_job(record: Union[Job, Any]) -> Job:
    if isinstance(record, Job):
        return record
    return Job.model_validate(record)


class InMemoryJobSource:
    """Job source over an in-memory collection."""

    def __init__(self, jobs: Iterable[Union[Job, dict]] = ()):
        """
        Initialize the source.

        Args:
            jobs: Job instances or raw job dictionaries

        Raises:
            JobSourceError: If a raw record doesn't match the job schema
        """
        try:
            self._jobs: Tuple[Job, ...] = tuple(_coerce_job(j) for j in jobs)
        except ValidationError as e:
            raise JobSourceError(f"Invalid job record: {str(e)}", source="memory") from e

    def get_all_jobs(self) -> Tuple[Job, ...]:
        return self._jobs

    def __len__(self) -> int:
        return len(self._jobs)


class FileJobSource:
    """
    Job source backed by a JSON or YAML file.

    The file holds either a list of jobs or a mapping with a ``jobs`` list.
    It is read on first access and cached; call ``reload()`` to pick up
    changes on disk.
    """

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)
        self._jobs: Optional[Tuple[Job, ...]] = None
        self._lock = threading.Lock()

    def get_all_jobs(self) -> Tuple[Job, ...]:
        """
        Get all jobs from the file, loading it on first call.

        Raises:
            JobSourceError: If the file is missing, unparseable or holds invalid jobs
        """
        with self._lock:
            if self._jobs is None:
                self._jobs = self._load()
            return self._jobs

    def reload(self) -> None:
        """Drop the cached jobs so the next access re-reads the file."""
        with self._lock:
            self._jobs = None
        logger.debug(f"Cleared cached jobs for {self.file_path}")

    def _load(self) -> Tuple[Job, ...]:
        source = str(self.file_path)

        if not self.file_path.exists():
            slogger.source_activity(source, "failed", {"error": "file not found"})
            raise JobSourceError(f"Jobs file not found: {source}", source=source)

        data = self._read(source)
        records = self._extract_records(data, source)

        jobs: List[Job] = []
        for index, record in enumerate(records):
            try:
                jobs.append(_coerce_job(record))
            except ValidationError as e:
                raise JobSourceError(
                    f"Invalid job at index {index} in {source}: {str(e)}", source=source
                ) from e

        slogger.source_activity(source, "loaded", {"jobs": len(jobs)})
        return tuple(jobs)

    def _read(self, source: str) -> Any:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                if self.file_path.suffix.lower() in YAML_SUFFIXES:
                    return yaml.safe_load(f)
                return json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            slogger.source_activity(source, "failed", {"error": str(e)})
            raise JobSourceError(f"Could not parse jobs file {source}: {e}", source=source) from e
        except (OSError, UnicodeDecodeError) as e:
            slogger.source_activity(source, "failed", {"error": str(e)})
            raise JobSourceError(f"Could not read jobs file {source}: {e}", source=source) from e

    @staticmethod
    def _extract_records(data: Any, source: str) -> List[Any]:
        if data is None:
            return []
        if isinstance(data, dict):
            data = data.get("jobs")
        if not isinstance(data, list):
            raise JobSourceError(
                f"Jobs file {source} must contain a list of jobs or a 'jobs' list",
                source=source,
            )
        return data
