"""
Tests for date parsing and ordinal formatting
"""

import pytest
from datetime import datetime

from taskbot.dates import (
    ORDINAL_SUFFIXES,
    format_datetime,
    ordinal,
    parse_datetime,
    to_input_format,
)
from taskbot.errors import DateFormatError, UserInputError


class TestOrdinal:
    """Test the day-of-month suffix table."""

    @pytest.mark.parametrize(
        "day,expected",
        [
            (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
            (11, "11th"), (12, "12th"), (13, "13th"),
            (21, "21st"), (22, "22nd"), (23, "23rd"),
            (30, "30th"), (31, "31st"),
        ],
    )
    def test_ordinal(self, day, expected):
        assert ordinal(day) == expected

    def test_table_covers_every_day(self):
        """Every day of month has a suffix."""
        assert sorted(ORDINAL_SUFFIXES) == list(range(1, 32))


class TestParseDatetime:
    """Test parsing the d/M/yyyy HHmm input pattern."""

    def test_parse_valid(self):
        assert parse_datetime("2/12/2019 1800") == datetime(2019, 12, 2, 18, 0)

    def test_parse_two_digit_day_and_month(self):
        assert parse_datetime("15/06/2020 0905") == datetime(2020, 6, 15, 9, 5)

    def test_parse_clamps_day_past_month_end(self):
        """Days 29-31 past the end of the month move to its last day."""
        assert parse_datetime("31/2/2019 1200") == datetime(2019, 2, 28, 12, 0)
        assert parse_datetime("31/4/2020 0000") == datetime(2020, 4, 30, 0, 0)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "tomorrow",
            "2/12/2019",
            "2/12/2019 6pm",
            "2-12-2019 1800",
            "2/12/19 1800",
            "0/12/2019 1800",
            "32/12/2019 1800",
            "2/13/2019 1800",
            "2/12/2019 2400",
            "2/12/2019 1860",
        ],
    )
    def test_parse_invalid(self, text):
        with pytest.raises(DateFormatError):
            parse_datetime(text)

    def test_date_format_error_is_user_input_error(self):
        with pytest.raises(UserInputError):
            parse_datetime("soon")


class TestFormatDatetime:
    """Test the human-readable rendering."""

    def test_format_evening(self):
        assert format_datetime(parse_datetime("2/12/2019 1800")) == "2nd of December 2019, 6:00PM"

    def test_format_midnight_and_noon(self):
        assert format_datetime(datetime(2020, 1, 11, 0, 5)) == "11th of January 2020, 12:05AM"
        assert format_datetime(datetime(2020, 3, 23, 12, 30)) == "23rd of March 2020, 12:30PM"

    def test_to_input_format(self):
        """Rendering back to the input pattern drops leading zeros on day and month."""
        assert to_input_format(datetime(2019, 12, 2, 18, 0)) == "2/12/2019 1800"
        assert to_input_format(datetime(2020, 6, 5, 9, 5)) == "5/6/2020 0905"
