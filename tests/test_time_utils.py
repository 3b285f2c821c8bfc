"""
Unit tests for date helpers.
"""

from datetime import datetime

import pytest
import pytz

from src.exceptions import InvalidArgumentError
from src.utils.time_utils import get_current_date, get_tomorrow_date, validate_date


class TestRetrievalDates:
    """Tests for today/tomorrow resolution."""

    def test_dates_follow_timezone(self):
        """Just after midnight in Amsterdam it is already the next day there."""
        reference = pytz.UTC.localize(datetime(2025, 6, 1, 22, 30))

        assert get_current_date("Europe/Amsterdam", reference) == "2025-06-02"
        assert get_tomorrow_date("Europe/Amsterdam", reference) == "2025-06-03"
        assert get_current_date("UTC", reference) == "2025-06-01"

    def test_tomorrow_crosses_month_end(self):
        """Tomorrow rolls over month boundaries."""
        assert get_tomorrow_date("Europe/Amsterdam", datetime(2025, 2, 28, 12, 0)) == "2025-03-01"


class TestValidateDate:
    """Tests for strict date validation."""

    def test_valid_date_returned(self):
        assert validate_date("2025-06-01") == "2025-06-01"

    @pytest.mark.parametrize("value", ["2025-06-01\n", "2025/06/01", "", None, 20250601])
    def test_bad_format(self, value):
        """Anything but exactly YYYY-MM-DD is rejected."""
        with pytest.raises(InvalidArgumentError, match="YYYY-MM-DD"):
            validate_date(value)

    @pytest.mark.parametrize("value", ["2025-02-30", "2025-13-01", "2025-04-31"])
    def test_impossible_dates(self, value):
        """Dates that do not exist on the calendar are rejected."""
        with pytest.raises(InvalidArgumentError, match="Please provide a valid date"):
            validate_date(value)
