"""Command that prints the Icelandic holidays and special days of a year."""

from __future__ import annotations

import datetime as _dt
import re
import sys

from fridagar.api import get_all_days
from fridagar.days import Day

__all__ = ["format_day", "main"]

_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_day(day: Day) -> str:
    """Return the listing line for ``day``."""
    marker = " "
    if day.holiday:
        marker = "½" if day.half_day else "*"
    return f"  {marker} {day.date.isoformat()}  {day.description:<30} [{day.key}]"


def main(argv: list[str] | None = None) -> int:
    """Print the days of the year given as first argument, or of the current year."""
    args = sys.argv[1:] if argv is None else argv
    year = _dt.date.today().year

    if args:
        text = args[0]
        if not _YEAR_PATTERN.fullmatch(text):
            print(f"invalid year: {text}", file=sys.stderr)
            return 1
        year = int(text)

    try:
        days = get_all_days(year)
    except (ValueError, OverflowError):
        print(f"invalid year: {args[0] if args else year}", file=sys.stderr)
        return 1

    print(f"Icelandic holidays and special days for {year}:\n")
    for day in days:
        print(format_day(day))
    print("\n  * = official public holiday, ½ = half-day holiday")
    return 0


if __name__ == "__main__":
    sys.exit(main())