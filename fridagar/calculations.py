"""Computation of the Icelandic holidays and special days of a year."""

from __future__ import annotations

import calendar
import datetime as _dt
import math

from fridagar.days import Day, DayKey, sort_days
from fridagar.easter import easter

__all__ = ["rimspillir", "find_next_weekday", "solstice", "calc_special_days"]

_RIMSPILLIR_YEARS = frozenset({1911, 1939, 1967, 1995, 2023, 2051, 2079})

_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)
_DAY_MS = 24 * 3600 * 1000
# 365 days, 5 hours, 47 minutes and 56.5 seconds, in milliseconds
_SOLSTICE_INTERVAL_MS = (56.5 + 47 * 60 + 5 * 3600 + 365 * 86400) * 1000
_SOLSTICE_BASES = {
    "summer": _dt.datetime(2016, 6, 20, 22, 34, tzinfo=_dt.timezone.utc),
    "winter": _dt.datetime(2016, 12, 21, 10, 44, tzinfo=_dt.timezone.utc),
}


def rimspillir(year: int) -> int:
    """Return 1 if ``year`` is a rímspilliár, otherwise 0."""
    if year in _RIMSPILLIR_YEARS:
        return 1
    next_is_leap = calendar.isleap(year + 1)
    dec31 = _dt.date(year - 1, 12, 31)
    return int(next_is_leap and dec31.weekday() == calendar.SATURDAY)


def find_next_weekday(year: int, month: int, day: int, weekday: int) -> _dt.date:
    """Return the first date on or after the given one falling on ``weekday`` (Monday is 0)."""
    start = _dt.date(year, month, day)
    return start + _dt.timedelta(days=(weekday - start.weekday()) % 7)


def _ms_since_epoch(moment: _dt.datetime) -> int:
    return (moment - _EPOCH) // _dt.timedelta(milliseconds=1)


def solstice(year: int, season: str) -> _dt.date:
    """Approximate UTC date of the solstice; ``season`` "winter" or otherwise summer."""
    base = _SOLSTICE_BASES["winter" if season == "winter" else "summer"]
    time_ms = _ms_since_epoch(base) + _SOLSTICE_INTERVAL_MS * (year - 2016)
    time_ms -= math.fmod(time_ms, _DAY_MS)
    moment = _EPOCH + _dt.timedelta(milliseconds=int(time_ms))
    return moment.date()


def calc_special_days(year: int) -> list[Day]:
    """Return every holiday and special day of ``year``, sorted by date."""
    bondadagur = find_next_weekday(year, 1, 19 + rimspillir(year - 1), calendar.FRIDAY)
    easter_sunday = easter(year)

    def from_easter(offset: int) -> _dt.date:
        return easter_sunday + _dt.timedelta(days=offset)

    whitsunday = from_easter(49)
    whitsun_first_june_sunday = whitsunday.month == 6 and whitsunday.day < 8
    sjomanna_start = 8 if whitsun_first_june_sunday else 1

    def fixed(month: int, day: int) -> _dt.date:
        return _dt.date(year, month, day)

    entries = [
        (fixed(1, 1), "Nýársdagur", DayKey.NYARS, True, False),
        (fixed(1, 6), "Þrettándinn", DayKey.THRETTAND, False, False),
        (bondadagur, "Bóndadagur", DayKey.BONDA, False, False),
        (from_easter(-48), "Bolludagur", DayKey.BOLLU, False, False),
        (from_easter(-47), "Sprengidagur", DayKey.SPRENGI, False, False),
        (from_easter(-46), "Öskudagur", DayKey.OSKU, False, False),
        (fixed(2, 14), "Valentínusardagur", DayKey.VALENT, False, False),
        (bondadagur + _dt.timedelta(days=30), "Konudagur", DayKey.KONU, False, False),
        (from_easter(-3), "Skírdagur", DayKey.SKIR, True, False),
        (from_easter(-2), "Föstudagurinn langi", DayKey.FOSLANGI, True, False),
        (easter_sunday, "Páskadagur", DayKey.PASKA, True, False),
        (from_easter(1), "Annar í páskum", DayKey.PASKA2, True, False),
        (
            find_next_weekday(year, 4, 19, calendar.THURSDAY),
            "Sumardagurinn fyrsti",
            DayKey.SUMAR1,
            True,
            False,
        ),
        (fixed(5, 1), "Verkalýðsdagurinn", DayKey.MAI1, True, False),
        (from_easter(39), "Uppstigningardagur", DayKey.UPPST, True, False),
        (whitsunday, "Hvítasunnudagur", DayKey.HVITAS, True, False),
        (from_easter(50), "Annar í Hvítasunnu", DayKey.HVITAS2, True, False),
        (
            find_next_weekday(year, 6, sjomanna_start, calendar.SUNDAY),
            "Sjómannadagurinn",
            DayKey.SJOMANNA,
            False,
            False,
        ),
        (fixed(6, 17), "Þjóðhátíðardagurinn", DayKey.JUN17, True, False),
        (solstice(year, "summer"), "Sumarsólstöður", DayKey.SUMSOLST, False, False),
        (fixed(6, 24), "Jónsmessa", DayKey.JONSM, False, False),
        (
            find_next_weekday(year, 8, 1, calendar.MONDAY),
            "Frídagur verslunarmanna",
            DayKey.VERSLM,
            True,
            False,
        ),
        (
            find_next_weekday(year, 10, 21 + rimspillir(year), calendar.SATURDAY),
            "Fyrsti vetrardagur",
            DayKey.VETUR1,
            False,
            False,
        ),
        (fixed(10, 31), "Hrekkjavaka", DayKey.HREKKJA, False, False),
        (fixed(11, 16), "Dagur íslenskrar tungu", DayKey.ISLTUNGU, False, False),
        (fixed(12, 1), "Fullveldisdagurinn", DayKey.FULLV, False, False),
        (solstice(year, "winter"), "Vetrarsólstöður", DayKey.VETSOLST, False, False),
        (fixed(12, 23), "Þorláksmessa", DayKey.THORL, False, False),
        (fixed(12, 24), "Aðfangadagur", DayKey.ADFANGA, True, True),
        (fixed(12, 25), "Jóladagur", DayKey.JOLA, True, False),
        (fixed(12, 26), "Annar í Jólum", DayKey.JOLA2, True, False),
        (fixed(12, 31), "Gamlársdagur", DayKey.GAMLARS, True, True),
    ]

    return sort_days(
        Day(date=date, description=description, key=key, holiday=holiday, half_day=half_day)
        for date, description, key, holiday, half_day in entries
    )