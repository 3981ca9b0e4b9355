"""Date parsing and formatting utilities for job postings."""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

import dateutil.parser

logger = logging.getLogger(__name__)


def parse_job_date(date_string: Optional[str]) -> Optional[datetime]:
    """
    Parse a job posting date from various formats.

    Handles:
    - ISO 8601 dates (e.g., "2024-01-15T10:30:00Z")
    - RFC 2822 dates (e.g., "Mon, 15 Jan 2024 10:30:00 GMT")
    - Relative dates (e.g., "2 days ago")
    - Human-readable dates (e.g., "January 15, 2024")

    Args:
        date_string: Date string in various formats

    Returns:
        Parsed datetime object (timezone-aware) or None if parsing fails
    """
    if not date_string:
        return None

    lowered = date_string.strip().lower()
    now = datetime.now(timezone.utc)

    if lowered in {"today", "just posted", "posted today"}:
        return now
    if lowered == "yesterday":
        return now - timedelta(days=1)

    # Patterns like "2 days ago", "3 hrs ago", "5d ago", "30+ days ago"
    rel_match = re.search(
        r"^(?P<num>\d+)\+?\s*(?P<unit>days?|d|weeks?|w|hours?|hrs?|minutes?|mins?|months?|mo)\s*(ago)?$",
        lowered,
    )
    if rel_match:
        num = int(rel_match.group("num"))
        unit = rel_match.group("unit")

        if unit.startswith("mo"):
            delta = timedelta(days=num * 30)  # rough approximation
        elif unit.startswith("min"):
            delta = timedelta(minutes=num)
        elif unit.startswith(("day", "d")):
            delta = timedelta(days=num)
        elif unit.startswith(("week", "w")):
            delta = timedelta(weeks=num)
        else:
            delta = timedelta(hours=num)

        return now - delta

    try:
        parsed_date = dateutil.parser.parse(date_string)

        # Make timezone-aware if needed (assume UTC)
        if parsed_date.tzinfo is None:
            parsed_date = parsed_date.replace(tzinfo=timezone.utc)

        return parsed_date

    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Failed to parse date '{date_string}': {str(e)}")
        return None


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
