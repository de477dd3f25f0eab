"""
Unit tests for NotificationFormatter.
"""

import pytest
from datetime import datetime, timezone, timedelta

from services.notification_formatter import NotificationFormatter


SLOT = datetime(2024, 1, 10, 14, 0, tzinfo=timezone.utc)


class TestNotificationFormatter:
    """Test notification text per locale."""

    def test_english_new_appointment(self):
        formatter = NotificationFormatter('en')

        message = formatter.new_appointment("Alice", SLOT)

        assert message == "New appointment from Alice for January 10 at 14:00"

    def test_portuguese_new_appointment(self):
        formatter = NotificationFormatter('pt_BR')

        message = formatter.new_appointment("Alice", SLOT)

        assert message == "Novo agendamento de Alice para dia 10 de janeiro, às 14:00h"

    def test_day_is_zero_padded(self):
        formatter = NotificationFormatter('en')

        assert formatter.format_date(datetime(2024, 3, 5, 9, 0, tzinfo=timezone.utc)) == "March 05 at 09:00"

    def test_date_is_rendered_in_business_timezone(self):
        """Datetimes in other offsets are converted before formatting (UTC by default)."""
        formatter = NotificationFormatter('en')
        minus_three = timezone(timedelta(hours=-3))

        assert formatter.format_date(datetime(2024, 1, 10, 11, 0, tzinfo=minus_three)) == "January 10 at 14:00"

    def test_unknown_locale_is_rejected(self):
        with pytest.raises(ValueError, match="Unsupported notification locale"):
            NotificationFormatter('xx')
