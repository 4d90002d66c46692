"""Data types describing Icelandic holidays and special days."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

__all__ = ["DayKey", "Day", "sort_days"]


class DayKey(str, Enum):
    """Stable identifier of a holiday or special day."""

    # Official public holidays
    NYARS = "nyars"
    SKIR = "skir"
    FOSLANGI = "foslangi"
    PASKA = "paska"
    PASKA2 = "paska2"
    SUMAR1 = "sumar1"
    UPPST = "uppst"
    MAI1 = "mai1"
    HVITAS = "hvitas"
    HVITAS2 = "hvitas2"
    JUN17 = "jun17"
    VERSLM = "verslm"
    ADFANGA = "adfanga"
    JOLA = "jola"
    JOLA2 = "jola2"
    GAMLARS = "gamlars"

    # Special days
    THRETTAND = "þrettand"
    BONDA = "bonda"
    BOLLU = "bollu"
    SPRENGI = "sprengi"
    OSKU = "osku"
    VALENT = "valent"
    KONU = "konu"
    SJOMANNA = "sjomanna"
    SUMSOLST = "sumsolst"
    JONSM = "jonsm"
    VETUR1 = "vetur1"
    HREKKJA = "hrekkja"
    ISLTUNGU = "isltungu"
    FULLV = "fullv"
    VETSOLST = "vetsolst"
    THORL = "thorl"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


@dataclass(frozen=True)
class Day:
    """A public holiday or commonly celebrated special day."""

    date: _dt.date
    description: str
    key: DayKey
    holiday: bool
    half_day: bool = False


def sort_days(days: Iterable[Day]) -> list[Day]:
    """Return days ordered by date, holidays before special days on the same date."""
    return sorted(days, key=lambda day: (day.date, not day.holiday))