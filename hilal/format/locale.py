"""Locale-aware date formatting.

Gregorian and ISO dates are formatted by Babel from CLDR data. Hijri
dates are assembled from Babel weekday names and the month names and era
notation shipped with hijridate, which knows English, Arabic and Bangla;
other languages fall back to English Hijri month names.

Date styles:
    full:   Saturday, 6 July 2024      / Sunday, 1 Muharram 1446 AH
    long:   6 July 2024                / 1 Muharram 1446 AH
    medium: 6 Jul 2024                 / 1 Muharram 1446
    short:  6/7/24                     / 1/1/1446 AH
(Gregorian examples for en-GB; exact Gregorian output follows CLDR.)
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING, Sequence, Union

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, get_day_names
from hijridate import Hijri

from hilal._internal.constants import DEFAULT_LOCALE, GREGORY_CALENDAR, ISO_CALENDAR
from hilal._internal.validation import validate_option
from hilal.calendars import get_calendar
from hilal.errors import InvalidOption, RangeError

if TYPE_CHECKING:
    from hilal.core.plain_date import PlainDate

logger = logging.getLogger(__name__)

DATE_STYLES: tuple[str, ...] = ("full", "long", "medium", "short")

# Languages with Hijri month names in hijridate
_HIJRI_LANGUAGES = ("en", "ar", "bn")

# Any year inside the Umm al-Qura tables; month names do not depend on it
_HIJRI_NAME_YEAR = 1445

_GREGORIAN_LIKE = (ISO_CALENDAR, GREGORY_CALENDAR)

LocalesLike = Union[str, Sequence[str], None]


def parse_locale(locales: LocalesLike) -> Locale:
    """Return the Babel Locale for a BCP 47 tag or the first of a list.

    Raises:
        InvalidOption: If the tag is malformed or unknown to CLDR.
    """
    if locales is None:
        tag = DEFAULT_LOCALE
    elif isinstance(locales, str):
        tag = locales
    else:
        tags = list(locales)
        tag = tags[0] if tags else DEFAULT_LOCALE
    try:
        return Locale.parse(tag.replace("_", "-"), sep="-")
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise InvalidOption(f"unsupported locale {tag!r}") from exc


def hijri_month_name(month: int, language: str = "en") -> str:
    """Return the Hijri month name in one of hijridate's languages."""
    if language not in _HIJRI_LANGUAGES:
        language = "en"
    return Hijri(_HIJRI_NAME_YEAR, month, 1).month_name(language)


def hijri_era(language: str = "en") -> str:
    """Return the Hijri era notation ("AH" in English)."""
    if language not in _HIJRI_LANGUAGES:
        language = "en"
    return Hijri(_HIJRI_NAME_YEAR, 1, 1).notation(language)


def _format_gregorian(date: PlainDate, style: str, locale: Locale) -> str:
    try:
        value = datetime.date(date.iso_year, date.iso_month, date.iso_day)
    except ValueError as exc:
        raise RangeError(
            f"year {date.iso_year} cannot be locale-formatted"
        ) from exc
    return format_date(value, format=style, locale=locale)


def _format_hijri(date: PlainDate, style: str, locale: Locale) -> str:
    language = locale.language
    if language not in _HIJRI_LANGUAGES:
        logger.debug("no Hijri month names for %r, using English", language)
    day, month, year = date.day, date.month, date.year
    month_name = hijri_month_name(month, language)
    era = hijri_era(language)

    if style == "full":
        weekday = get_day_names("wide", locale=locale)[date.day_of_week - 1]
        return f"{weekday}, {day} {month_name} {year} {era}"
    if style == "long":
        return f"{day} {month_name} {year} {era}"
    if style == "medium":
        return f"{day} {month_name} {year}"
    return f"{day}/{month}/{year} {era}"


def format_locale_date(
    date: PlainDate,
    locales: LocalesLike = None,
    *,
    date_style: str | None = None,
    calendar: str | None = None,
) -> str:
    """Format a date for display in a locale.

    Args:
        date: The date to format.
        locales: A BCP 47 tag ("en-SG") or a list of tags, the first of
            which is used. Defaults to DEFAULT_LOCALE.
        date_style: "full", "long", "medium" or "short" (default).
        calendar: Calendar to display in. An iso8601 date is converted to
            it; any other date must already be in that calendar.

    Raises:
        InvalidOption: For an unknown locale or date style.
        InvalidCalendarSystem: For an unknown calendar.
        RangeError: If calendar conflicts with the date's own calendar, or
            the date is outside what can be displayed.
    """
    locale = parse_locale(locales)
    style = validate_option(date_style or "short", "date_style", DATE_STYLES)

    if calendar is not None:
        target = get_calendar(calendar).id
        if date.calendar_id == ISO_CALENDAR:
            date = date.with_calendar(target)
        elif target != date.calendar_id:
            raise RangeError(
                f"cannot format a {date.calendar_id} date in the {target} calendar"
            )

    if date.calendar_id in _GREGORIAN_LIKE:
        return _format_gregorian(date, style, locale)
    return _format_hijri(date, style, locale)


__all__ = [
    "DATE_STYLES",
    "parse_locale",
    "hijri_month_name",
    "hijri_era",
    "format_locale_date",
]
