"""
Date utility functions for resolving and validating retrieval dates.
Dates are plain "YYYY-MM-DD" strings resolved in the configured timezone.
"""

import re
from datetime import datetime, timedelta
from typing import Optional

import pytz

from src.exceptions import InvalidArgumentError

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def _now(timezone_name: str, reference_time: Optional[datetime] = None) -> datetime:
    tz = pytz.timezone(timezone_name)
    if reference_time is None:
        return datetime.now(tz)
    if reference_time.tzinfo is None:
        # Naive reference times are taken to be local time already
        return tz.localize(reference_time)
    return reference_time.astimezone(tz)


def get_current_date(timezone_name: str, reference_time: Optional[datetime] = None) -> str:
    """
    Get today's date in the given timezone.

    Args:
        timezone_name: IANA timezone name, e.g. "Europe/Amsterdam"
        reference_time: Optional moment to use instead of the current time

    Returns:
        Date string in YYYY-MM-DD format
    """
    return _now(timezone_name, reference_time).strftime(DATE_FORMAT)


def get_tomorrow_date(timezone_name: str, reference_time: Optional[datetime] = None) -> str:
    """Get tomorrow's date in the given timezone as YYYY-MM-DD."""
    return (_now(timezone_name, reference_time) + timedelta(days=1)).strftime(DATE_FORMAT)


def validate_date(date_str: str) -> str:
    """
    Validate a YYYY-MM-DD date string, including calendar correctness.

    Raises:
        InvalidArgumentError: If the format is wrong or the date does not exist (e.g. 2025-02-30)
    """
    if not isinstance(date_str, str) or not DATE_PATTERN.fullmatch(date_str):
        raise InvalidArgumentError("Invalid date format. Date must be in YYYY-MM-DD format")

    try:
        parsed = datetime.strptime(date_str, DATE_FORMAT)
    except ValueError:
        raise InvalidArgumentError("Invalid date. Please provide a valid date")

    if parsed.strftime(DATE_FORMAT) != date_str:
        raise InvalidArgumentError("Invalid date. Please provide a valid date")

    return date_str
