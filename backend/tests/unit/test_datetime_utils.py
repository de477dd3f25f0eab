"""
Unit tests for datetime utilities.

Tests UTC normalisation, ISO parsing and hour truncation.
"""

import pytest
from datetime import datetime, timezone, timedelta

import utils.datetime_utils as datetime_utils
from utils.datetime_utils import (
    ensure_utc, get_business_timezone, parse_iso_datetime, start_of_hour, utc_now
)


class TestUtcNow:
    """Test utc_now function."""

    def test_utc_now_returns_timezone_aware_datetime(self):
        """Test that utc_now returns an aware UTC datetime."""
        now = utc_now()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_default_business_timezone_is_utc(self):
        """UTC resolves to the built-in timezone without a tz database."""
        assert get_business_timezone("UTC") is timezone.utc


class TestEnsureUtc:
    """Test ensure_utc function."""

    def test_naive_datetime_is_treated_as_utc(self):
        result = ensure_utc(datetime(2024, 1, 10, 14, 30))

        assert result == datetime(2024, 1, 10, 14, 30, tzinfo=timezone.utc)

    def test_aware_datetime_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        result = ensure_utc(datetime(2024, 1, 10, 16, 30, tzinfo=plus_two))

        assert result == datetime(2024, 1, 10, 14, 30, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_none_passes_through(self):
        assert ensure_utc(None) is None


class TestParseIsoDatetime:
    """Test parse_iso_datetime function."""

    def test_parse_with_z_suffix(self):
        result = parse_iso_datetime("2024-01-10T14:30:00Z")

        assert result == datetime(2024, 1, 10, 14, 30, tzinfo=timezone.utc)

    def test_parse_with_offset(self):
        result = parse_iso_datetime("2024-01-10T14:30:00-03:00")

        assert result == datetime(2024, 1, 10, 17, 30, tzinfo=timezone.utc)

    def test_parse_naive_uses_business_timezone(self):
        """Timestamps without an offset are read in the business timezone (UTC by default)."""
        result = parse_iso_datetime("2024-01-10T14:30:00")

        assert result.tzinfo is not None
        assert result == datetime(2024, 1, 10, 14, 30, tzinfo=timezone.utc)

    def test_parse_datetime_instance(self):
        dt = datetime(2024, 1, 10, 14, 30, tzinfo=timezone.utc)

        assert parse_iso_datetime(dt) is dt

    @pytest.mark.parametrize("value", ["", "tomorrow", "2024-13-01T10:00:00", "10/01/2024 14:00"])
    def test_invalid_strings_raise_value_error(self, value):
        with pytest.raises(ValueError):
            parse_iso_datetime(value)


class TestStartOfHour:
    """Test start_of_hour function."""

    def test_truncates_minutes_seconds_and_microseconds(self):
        dt = datetime(2024, 1, 10, 14, 59, 59, 999999, tzinfo=timezone.utc)

        assert start_of_hour(dt) == datetime(2024, 1, 10, 14, 0, tzinfo=timezone.utc)

    def test_exact_hour_is_unchanged(self):
        dt = datetime(2024, 1, 10, 14, 0, tzinfo=timezone.utc)

        assert start_of_hour(dt) == dt

    def test_result_is_utc(self):
        plus_two = timezone(timedelta(hours=2))
        dt = datetime(2024, 1, 10, 16, 45, tzinfo=plus_two)

        result = start_of_hour(dt)

        assert result.tzinfo == timezone.utc
        assert result == datetime(2024, 1, 10, 14, 0, tzinfo=timezone.utc)

    def test_uses_business_timezone_hour_boundaries(self, monkeypatch):
        """With a +05:30 business timezone, slots start at :30 UTC."""
        india = timezone(timedelta(hours=5, minutes=30))
        monkeypatch.setattr(datetime_utils, "get_business_timezone", lambda: india)

        # 14:45 UTC is 20:15 local, whose hour starts at 20:00 local == 14:30 UTC
        result = start_of_hour(datetime(2024, 1, 10, 14, 45, tzinfo=timezone.utc))

        assert result == datetime(2024, 1, 10, 14, 30, tzinfo=timezone.utc)
