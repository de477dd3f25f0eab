"""
Locale-aware text for notifications sent to providers.

Datetimes are rendered in the business timezone. Supported locales are
registered in _LOCALES; anything else is a configuration error.
"""

from datetime import datetime
from typing import Callable, Dict

from utils.datetime_utils import to_business_timezone


_EN_MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

_PT_BR_MONTHS = [
    'janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho',
    'julho', 'agosto', 'setembro', 'outubro', 'novembro', 'dezembro',
]


def _format_date_en(dt: datetime) -> str:
    """Format like: January 10 at 14:00"""
    return f"{_EN_MONTHS[dt.month - 1]} {dt.day:02d} at {dt.hour:02d}:{dt.minute:02d}"


def _format_date_pt_br(dt: datetime) -> str:
    """Format like: dia 10 de janeiro, às 14:00h"""
    return f"dia {dt.day:02d} de {_PT_BR_MONTHS[dt.month - 1]}, às {dt.hour}:{dt.minute:02d}h"


_LOCALES: Dict[str, Dict[str, Callable[..., str]]] = {
    'en': {
        'date': _format_date_en,
        'new_appointment': lambda name, date: f"New appointment from {name} for {date}",
    },
    'pt_BR': {
        'date': _format_date_pt_br,
        'new_appointment': lambda name, date: f"Novo agendamento de {name} para {date}",
    },
}


class NotificationFormatter:
    """Builds notification text for one locale."""

    def __init__(self, locale: str = 'en'):
        if locale not in _LOCALES:
            raise ValueError(
                f"Unsupported notification locale '{locale}'. "
                f"Expected one of: {', '.join(sorted(_LOCALES))}"
            )
        self.locale = locale
        self._templates = _LOCALES[locale]

    def format_date(self, dt: datetime) -> str:
        return self._templates['date'](to_business_timezone(dt))

    def new_appointment(self, requester_name: str, slot_start: datetime) -> str:
        """
        Text for the provider when someone books one of their slots.

        Args:
            requester_name: Display name of the user who booked
            slot_start: Hour-normalized appointment time

        Returns:
            e.g. "New appointment from Alice for January 10 at 14:00"
        """
        return self._templates['new_appointment'](requester_name, self.format_date(slot_start))
