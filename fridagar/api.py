"""Lookup of Icelandic holidays, special days and business days."""

from __future__ import annotations

import datetime as _dt

from fridagar.calculations import calc_special_days
from fridagar.days import Day, DayKey

__all__ = [
    "get_all_days",
    "get_all_days_for_month",
    "get_all_days_keyed",
    "get_holidays",
    "get_holidays_for_month",
    "get_other_days",
    "get_other_days_for_month",
    "is_special_day",
    "is_holiday",
    "workdays_from_date",
    "truncate_to_utc_day",
]

_SATURDAY = 5


def _valid_month(month: int) -> bool:
    return 1 <= month <= 12


def get_all_days(year: int) -> list[Day]:
    """Return all holidays and special days of ``year``, sorted by date."""
    return calc_special_days(year)


def get_all_days_for_month(year: int, month: int) -> list[Day]:
    """Return all days of ``year`` in the 1-based ``month``; empty for an invalid month."""
    if not _valid_month(month):
        return []
    return [day for day in calc_special_days(year) if day.date.month == month]


def get_all_days_keyed(year: int) -> dict[DayKey, Day]:
    """Return all days of ``year`` keyed by their identifier."""
    return {day.key: day for day in calc_special_days(year)}


def get_holidays(year: int) -> list[Day]:
    """Return the official public holidays of ``year``."""
    return [day for day in calc_special_days(year) if day.holiday]


def get_holidays_for_month(year: int, month: int) -> list[Day]:
    """Return the official public holidays of ``year`` in the 1-based ``month``."""
    if not _valid_month(month):
        return []
    return [
        day for day in calc_special_days(year) if day.holiday and day.date.month == month
    ]


def get_other_days(year: int) -> list[Day]:
    """Return the unofficial special days of ``year``."""
    return [day for day in calc_special_days(year) if not day.holiday]


def get_other_days_for_month(year: int, month: int) -> list[Day]:
    """Return the unofficial special days of ``year`` in the 1-based ``month``."""
    if not _valid_month(month):
        return []
    return [
        day
        for day in calc_special_days(year)
        if not day.holiday and day.date.month == month
    ]


def truncate_to_utc_day(value: _dt.date | _dt.datetime) -> _dt.date:
    """Return the UTC calendar date of ``value``; naive datetimes are taken as UTC."""
    if isinstance(value, _dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(_dt.timezone.utc)
        return value.date()
    return value


def is_special_day(value: _dt.date | _dt.datetime) -> Day | None:
    """Return the holiday or special day falling on ``value``, or None."""
    date = truncate_to_utc_day(value)
    return next((day for day in calc_special_days(date.year) if day.date == date), None)


def is_holiday(value: _dt.date | _dt.datetime) -> Day | None:
    """Return the official public holiday falling on ``value``, or None."""
    day = is_special_day(value)
    if day is not None and day.holiday:
        return day
    return None


def _closed_dates(year: int, include_half_days: bool) -> frozenset[_dt.date]:
    return frozenset(
        day.date
        for day in calc_special_days(year)
        if day.holiday and not (include_half_days and day.half_day)
    )


def workdays_from_date(
    days: int, ref_date: _dt.date | _dt.datetime, include_half_days: bool = False
) -> _dt.date:
    """Return the date ``days`` business days after (or before, if negative) ``ref_date``.

    Half-day holidays count as workdays when ``include_half_days`` is true.
    A zero offset returns the reference date itself.
    """
    current = truncate_to_utc_day(ref_date)
    step = _dt.timedelta(days=1 if days > 0 else -1)
    remaining = abs(days)
    closed_by_year: dict[int, frozenset[_dt.date]] = {}

    while remaining:
        current += step
        if current.weekday() >= _SATURDAY:
            continue
        closed = closed_by_year.get(current.year)
        if closed is None:
            closed = closed_by_year[current.year] = _closed_dates(
                current.year, include_half_days
            )
        if current in closed:
            continue
        remaining -= 1

    return current