"""Generation of an iCalendar feed of Icelandic holidays and special days."""

from __future__ import annotations

import datetime as _dt
import sys
from typing import Iterable

from fridagar.api import get_all_days
from fridagar.days import Day

__all__ = ["day_status", "build_calendar", "main"]

DEFAULT_OUTPUT = "pages/static/icelandic_holidays.ics"

_PRODID = "-//fridagar//Icelandic Holidays//IS"
_UID_DOMAIN = "fridagar"
_CALENDAR_NAME = "Icelandic Holidays"
_CALENDAR_DESCRIPTION = "Icelandic public holidays and special days"
_REFRESH_INTERVAL = "P1W"
_MAX_LINE_OCTETS = 75


def day_status(day: Day) -> str:
    """Return the Icelandic status text used as an event description."""
    if day.holiday:
        if day.half_day:
            return "Opinber hátíðardagur (hálfdagur)"
        return "Opinber hátíðardagur"
    return "Sérstakur dagur"


def _escape(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def _fold(line: str) -> list[str]:
    """Split a content line into pieces of at most 75 octets each."""
    pieces: list[str] = []
    current = ""
    size = 0
    for char in line:
        width = len(char.encode("utf-8"))
        if size + width > _MAX_LINE_OCTETS:
            pieces.append(current)
            current, size = " ", 1
        current += char
        size += width
    pieces.append(current)
    return pieces


def _timestamp(moment: _dt.datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(_dt.timezone.utc)
    return moment.strftime("%Y%m%dT%H%M%SZ")


def _event_lines(day: Day, year: int, stamp: str) -> list[str]:
    end = day.date + _dt.timedelta(days=1)
    return [
        "BEGIN:VEVENT",
        f"UID:{day.key}-{year}@{_UID_DOMAIN}",
        f"DTSTAMP:{stamp}",
        f"CREATED:{stamp}",
        f"SUMMARY:{_escape(day.description)}",
        f"DTSTART;VALUE=DATE:{day.date:%Y%m%d}",
        f"DTEND;VALUE=DATE:{end:%Y%m%d}",
        f"DESCRIPTION:{_escape(day_status(day))}",
        "CLASS:PUBLIC",
        "END:VEVENT",
    ]


def build_calendar(years: Iterable[int], now: _dt.datetime) -> str:
    """Return an iCalendar document with every day of ``years``, stamped ``now``."""
    stamp = _timestamp(now)
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{_PRODID}",
        f"METHOD:PUBLISH",
        f"NAME:{_escape(_CALENDAR_NAME)}",
        f"X-WR-CALNAME:{_escape(_CALENDAR_NAME)}",
        f"DESCRIPTION:{_escape(_CALENDAR_DESCRIPTION)}",
        f"X-WR-CALDESC:{_escape(_CALENDAR_DESCRIPTION)}",
        "X-WR-TIMEZONE:UTC",
        f"REFRESH-INTERVAL;VALUE=DURATION:{_REFRESH_INTERVAL}",
        f"X-PUBLISHED-TTL:{_REFRESH_INTERVAL}",
    ]
    for year in years:
        for day in get_all_days(year):
            lines.extend(_event_lines(day, year, stamp))
    lines.append("END:VCALENDAR")

    folded = (piece for line in lines for piece in _fold(line))
    return "".join(f"{piece}\r\n" for piece in folded)


def main(argv: list[str] | None = None) -> int:
    """Write a calendar of last, this and next year to the given path."""
    args = sys.argv[1:] if argv is None else argv
    now = _dt.datetime.now(_dt.timezone.utc)
    years = [now.year - 1, now.year, now.year + 1]
    output = args[0] if args else DEFAULT_OUTPUT

    document = build_calendar(years, now)
    try:
        with open(output, "w", encoding="utf-8", newline="") as handle:
            handle.write(document)
    except OSError as exc:
        print(f"failed to create output file: {exc}", file=sys.stderr)
        return 1

    print(f"Calendar written to {output}")
    print(f"Years included: {years[0]}, {years[1]}, {years[2]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())