# fridagar

Icelandic public holidays and commonly celebrated special days, plus
business-day arithmetic that skips weekends and holidays.

All dates are `datetime.date` values for the UTC calendar day. Each day is a
frozen `fridagar.days.Day` with these fields:

- `date` – the calendar date
- `description` – the Icelandic name of the day
- `key` – a `fridagar.days.DayKey`, a string enum with a stable identifier
  useful for translations (for example `"bonda"`, `"jola"`, `"þrettand"`)
- `holiday` – whether it is an official public holiday (a non-working day)
- `half_day` – whether it is only a half-day holiday (Aðfangadagur and
  Gamlársdagur)

Days of a year come sorted by date; on a shared date, holidays come before
special days.

## Installation

```
pip install .
```

## Library use

```python
from datetime import date
from fridagar.api import (
    get_all_days,
    get_holidays,
    get_other_days_for_month,
    get_all_days_keyed,
    is_holiday,
    is_special_day,
    workdays_from_date,
)

for day in get_holidays(2024):
    print(day.date, day.description, day.key)

keyed = get_all_days_keyed(2024)
print(keyed["bonda"].date)                  # 2024-01-26, Bóndadagur

print(get_other_days_for_month(2024, 12))
print(is_special_day(date(2023, 12, 22)))   # Day for Vetrarsólstöður
print(is_holiday(date(2024, 3, 15)))        # None: not a holiday

# Two business days after Christmas Day 2023
print(workdays_from_date(2, date(2023, 12, 25)))          # 2023-12-28
# Half-day holidays counted as workdays
print(workdays_from_date(1, date(2021, 12, 23), True))    # 2021-12-24
```

Functions in `fridagar.api`:

- `get_all_days(year)`, `get_holidays(year)`, `get_other_days(year)` – all
  days, only official holidays, or only the unofficial special days.
- `get_all_days_for_month(year, month)`, `get_holidays_for_month(year, month)`,
  `get_other_days_for_month(year, month)` – the same, for a month from 1 to 12;
  any other month gives an empty list.
- `get_all_days_keyed(year)` – a dict from `DayKey` to `Day`.
- `is_special_day(value)` and `is_holiday(value)` – the `Day` falling on a date
  or datetime, or `None`. Aware datetimes are converted to UTC first; naive
  ones are taken as UTC.
- `workdays_from_date(days, ref_date, include_half_days=False)` – the date that
  many business days after `ref_date`, or before it if `days` is negative.
  Weekends and official holidays are skipped; with `include_half_days` true,
  half-day holidays count as workdays. A zero offset returns the reference
  date itself.
- `truncate_to_utc_day(value)` – the UTC calendar date of a date or datetime.

The lower-level pieces are in `fridagar.calculations` (`calc_special_days`,
`rimspillir`, `find_next_weekday`, `solstice`) and `fridagar.easter`
(`easter(year)`, Easter Sunday by the Gregorian computus). Solstice dates are
approximations computed from a fixed mean interval.

The days covered are Nýársdagur, Þrettándinn, Bóndadagur, Bolludagur,
Sprengidagur, Öskudagur, Valentínusardagur, Konudagur, the Easter and Whitsun
holidays, Uppstigningardagur, Sumardagurinn fyrsti, Verkalýðsdagurinn,
Sjómannadagurinn, Þjóðhátíðardagurinn, the two solstices, Jónsmessa,
Frídagur verslunarmanna, Fyrsti vetrardagur, Hrekkjavaka, Dagur íslenskrar
tungu, Fullveldisdagurinn and the Christmas season through Gamlársdagur.

## Command line

Print every holiday and special day for a year (the current year if none is
given):

```
fridagar 2024
```

Official holidays are marked `*`, half-day holidays `½`. An argument that is
not a whole number is reported as an invalid year and the command exits
with status 1.

Write an iCalendar file covering last year, this year and next year:

```
fridagar-ics holidays.ics
```

Without an argument the file is written to
`pages/static/icelandic_holidays.ics`; the directory must already exist.
Each day becomes an all-day public event whose description tells whether it
is an official holiday, a half-day holiday or a special day. The same
document can be built in code with `fridagar.ics.build_calendar(years, now)`.