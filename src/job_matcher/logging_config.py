"""Logging configuration with JSON output to stdout and (optionally) file."""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from job_matcher.constants import MAX_JOB_TITLE_LOG_LENGTH

# Global configuration cache
_logging_config: Optional[Dict] = None

SERVICE_NAME = "job-matcher"
DEFAULT_ENVIRONMENT = "development"


def _load_logging_config() -> Dict:
    """
    Load logging configuration from config/logging.yaml.

    Returns:
        Dict with logging configuration, or default config if file not found.
    """
    global _logging_config

    if _logging_config is not None:
        return _logging_config

    config_path = Path(__file__).parent.parent.parent / "config" / "logging.yaml"

    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                _logging_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            print(
                f"Failed to load logging config from {config_path}: {e}",
                file=sys.stderr,
            )
            _logging_config = {}
    else:
        _logging_config = {}

    _logging_config.setdefault("console", {})
    _logging_config["console"].setdefault("max_job_title_length", MAX_JOB_TITLE_LOG_LENGTH)

    return _logging_config


def format_job_title(job_title: str, max_length: Optional[int] = None) -> Tuple[str, str]:
    """
    Format a job title for logging with both full and display versions.

    Args:
        job_title: The full job title to format.
        max_length: Maximum length for display version. If None, uses config value.

    Returns:
        Tuple of (full_title, display_title)
    """
    if not job_title:
        return "", ""

    full_title = job_title.strip()

    if max_length is None:
        config = _load_logging_config()
        max_length = config["console"]["max_job_title_length"]

    if max_length <= 0 or len(full_title) <= max_length:
        return full_title, full_title

    if max_length <= 3:
        display_title = full_title[:max_length]
    else:
        display_title = full_title[: max_length - 3] + "..."

    return full_title, display_title


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, environment: str = DEFAULT_ENVIRONMENT):
        """
        Initialize JSON formatter.

        Args:
            environment: Environment name (staging, production, development)
        """
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with severity, timestamp, environment and message fields
        """
        severity_map = {
            logging.DEBUG: "DEBUG",
            logging.INFO: "INFO",
            logging.WARNING: "WARNING",
            logging.ERROR: "ERROR",
            logging.CRITICAL: "ERROR",
        }
        severity = severity_map.get(record.levelno, "INFO")

        log_entry: Dict[str, Any] = {
            "severity": severity,
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "environment": self.environment,
            "service": SERVICE_NAME,
            "logger": record.name,
        }

        if hasattr(record, "structured_fields"):
            log_entry.update(record.structured_fields)
        else:
            log_entry.update(
                {
                    "category": "system",
                    "action": "log",
                    "message": record.getMessage(),
                }
            )

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            log_entry["error"] = {
                "type": exc_type.__name__ if exc_type else "Exception",
                "message": str(exc_value),
                "stack": self.formatException(record.exc_info) if exc_tb else None,
            }

        return json.dumps(log_entry, default=str)


def _environment() -> str:
    return os.getenv("ENVIRONMENT") or DEFAULT_ENVIRONMENT


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging with JSON output to stdout and, if configured, a file.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path to log file. If None, only stdout is used unless LOG_FILE is set.

    Environment Variables:
        LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FILE: Override log file path.
        ENVIRONMENT: Environment name (staging, production, development).
    """
    log_level = os.getenv("LOG_LEVEL", log_level).upper()
    if not isinstance(getattr(logging, log_level, None), int):
        log_level = "INFO"
    log_file = os.getenv("LOG_FILE", log_file)

    json_formatter = JSONFormatter(environment=_environment())
    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(json_formatter)
    console_handler.setLevel(getattr(logging, log_level))
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(json_formatter)
        file_handler.setLevel(getattr(logging, log_level))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level),
        handlers=handlers,
        force=True,
    )

    structured = StructuredLogger(logging.getLogger(__name__))
    structured.service_status(
        "logging_configured",
        details={
            "environment": _environment(),
            "level": log_level,
            "file": log_file,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


class StructuredLogger:
    """Helper class for structured logging with JSON output."""

    def __init__(self, logger: logging.Logger):
        """
        Initialize structured logger.

        Args:
            logger: Base logger instance
        """
        self.logger = logger
        self.environment = _environment()

    def _log(self, level: str, structured_fields: Dict[str, Any]) -> None:
        """
        Log with structured fields.

        Args:
            level: Log level (debug, info, warning, error)
            structured_fields: Structured log entry fields
        """
        log_method = getattr(self.logger, level.lower())
        message = structured_fields.get("message", "")
        log_method(message, extra={"structured_fields": structured_fields})

    def match_activity(self, action: str, details: Optional[Dict] = None) -> None:
        """
        Log matching activity.

        Args:
            action: Action being performed (batch_scored, pair_scored, statistics)
            details: Optional additional details (counts, thresholds, job title)
        """
        details = dict(details or {})
        if "job_title" in details:
            full_title, display_title = format_job_title(details["job_title"])
            details["job_title"] = full_title
            details["job_title_display"] = display_title

        structured_fields = {
            "category": "matching",
            "action": action.lower(),
            "message": f"Match {action.lower()}",
            "details": details,
        }
        self._log("info", structured_fields)

    def source_activity(self, source: str, action: str, details: Optional[Dict] = None) -> None:
        """
        Log job source activity.

        Args:
            source: Source being read (file path or source name)
            action: Action being performed (loaded, failed)
            details: Optional additional details
        """
        structured_fields = {
            "category": "source",
            "action": action.lower(),
            "message": f"Job source {action.lower()}: {source}",
            "details": {"source": source, **(details or {})},
        }
        level = "error" if action.lower() in ["failed", "error"] else "info"
        self._log(level, structured_fields)

    def service_status(self, status: str, details: Optional[Dict] = None) -> None:
        """
        Log service status changes.

        Args:
            status: Service status (started, logging_configured, finished)
            details: Optional additional details
        """
        structured_fields = {
            "category": "service",
            "action": status.lower(),
            "message": f"Service {status}",
            "details": details or {},
        }
        self._log("info", structured_fields)


def get_structured_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.
    """
    return StructuredLogger(logging.getLogger(name))
