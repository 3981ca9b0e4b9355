"""Runtime settings loaded from a YAML config file with fallback to constants.

Only batch behaviour is configurable here. Scoring weights and thresholds
are fixed in constants.py so that scores stay comparable between runs.

Usage:
    from job_matcher.settings import get_match_settings

    settings = get_match_settings()
    min_score = settings.min_score
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from job_matcher.constants import DEFAULT_MAX_RESULTS, DEFAULT_MIN_SCORE, DEFAULT_SORT_BY
from job_matcher.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "JOB_MATCHER_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "matching.yaml"


class MatchSettings(BaseModel):
    """Batch matching defaults (``matching:`` section of the config file)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    min_score: int = Field(default=DEFAULT_MIN_SCORE, ge=0, le=100, alias="minScore")
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, alias="maxResults")
    sort_by: str = Field(default=DEFAULT_SORT_BY, pattern="^(score|date)$", alias="sortBy")
    max_workers: int = Field(default=1, ge=1, alias="maxWorkers")


def _get_config_path() -> Path:
    """Get config file path from environment."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def get_match_settings(config_path: Optional[str] = None) -> MatchSettings:
    """
    Get match settings from the config file with fallback to defaults.

    The path is resolved on every call, so a changed JOB_MATCHER_CONFIG is
    picked up. Parsed settings are cached per resolved path for the lifetime
    of the process.

    Args:
        config_path: Optional config path (uses JOB_MATCHER_CONFIG or config/matching.yaml)

    Returns:
        MatchSettings instance

    Raises:
        ConfigurationError: If an explicitly requested file is missing, or the
            file can't be read, parsed or validated
    """
    if config_path:
        return _load_match_settings(str(config_path), True)
    explicit = bool(os.environ.get(CONFIG_ENV_VAR))
    return _load_match_settings(str(_get_config_path()), explicit)


@lru_cache(maxsize=8)
def _load_match_settings(config_path: str, explicit: bool) -> MatchSettings:
    path = Path(config_path)

    if not path.exists():
        if explicit:
            raise ConfigurationError(f"Config file not found: {path}")
        logger.debug(f"No config file at {path}, using defaults")
        return MatchSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    section = data.get("matching") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'matching' section in {path} must be a mapping")

    try:
        settings = MatchSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid matching settings in {path}: {str(e)}") from e

    logger.debug(f"Loaded match settings from {path}")
    return settings


def clear_settings_cache() -> None:
    """Clear cached settings (useful for testing or config reload)."""
    _load_match_settings.cache_clear()
