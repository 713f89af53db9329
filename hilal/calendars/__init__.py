"""Calendar systems.

This module keeps the registry of named calendars a PlainDate can be
bound to:
    - iso8601: ISO 8601 (proleptic Gregorian), the default for PlainDate
    - gregory: the Gregorian calendar under its own name
    - islamic-umalqura: Umm al-Qura (table based)
    - islamic-civil: tabular Islamic calendar, Friday epoch
    - islamic-tbla: tabular Islamic calendar, Thursday epoch

Functions:
    get_calendar: Look up a calendar system by name.
    available_calendars: List the registered calendar identifiers.

Examples:
    >>> get_calendar("islamic-umalqura").id
    'islamic-umalqura'
    >>> get_calendar("Gregory").id
    'gregory'
"""

from __future__ import annotations

import logging

from hilal.calendars.base import CalendarSystem
from hilal.calendars.gregorian import GregorianCalendar, IsoCalendar
from hilal.calendars.islamic import (
    ISLAMIC_CIVIL,
    ISLAMIC_TBLA,
    TabularIslamicCalendar,
    UmmAlQuraCalendar,
)
from hilal.errors import InvalidCalendarSystem

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, CalendarSystem] = {
    calendar.id: calendar
    for calendar in (
        IsoCalendar(),
        GregorianCalendar(),
        UmmAlQuraCalendar(),
        ISLAMIC_CIVIL,
        ISLAMIC_TBLA,
    )
}


def get_calendar(name: str | CalendarSystem) -> CalendarSystem:
    """Return the calendar system registered under a name.

    Lookup is case-insensitive. A CalendarSystem instance is returned as is.

    Raises:
        InvalidCalendarSystem: If the name is not registered.
    """
    if isinstance(name, CalendarSystem):
        return name
    if not isinstance(name, str):
        raise InvalidCalendarSystem(
            f"calendar must be a string, got {type(name).__name__}"
        )
    calendar = _REGISTRY.get(name.lower())
    if calendar is None:
        logger.debug("unknown calendar %r requested", name)
        raise InvalidCalendarSystem(
            f"unknown calendar {name!r}; expected one of {', '.join(available_calendars())}"
        )
    return calendar


def available_calendars() -> list[str]:
    """Return the registered calendar identifiers, sorted."""
    return sorted(_REGISTRY)


__all__: list[str] = [
    "CalendarSystem",
    "IsoCalendar",
    "GregorianCalendar",
    "TabularIslamicCalendar",
    "UmmAlQuraCalendar",
    "get_calendar",
    "available_calendars",
]
