import datetime as dt

import pytest

from fridagar.api import get_all_days
from fridagar.days import Day, DayKey
from fridagar.ics import build_calendar, day_status, main

NOW = dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt.timezone.utc)


def unfold(document):
    assert document.endswith("\r\n")
    raw = document[:-2].split("\r\n")
    lines = []
    for piece in raw:
        if piece.startswith(" "):
            lines[-1] += piece[1:]
        else:
            lines.append(piece)
    return lines


@pytest.mark.parametrize(
    "holiday, half_day, expected",
    [
        (True, True, "Opinber hátíðardagur (hálfdagur)"),
        (True, False, "Opinber hátíðardagur"),
        (False, False, "Sérstakur dagur"),
    ],
)
def test_day_status(holiday, half_day, expected):
    day = Day(dt.date(2024, 1, 1), "x", DayKey.NYARS, holiday, half_day)
    assert day_status(day) == expected


def test_event_count_matches_days():
    document = build_calendar([2023, 2024, 2025], NOW)
    lines = unfold(document)
    expected = sum(len(get_all_days(year)) for year in (2023, 2024, 2025))
    assert lines.count("BEGIN:VEVENT") == expected
    assert lines.count("END:VEVENT") == expected
    assert lines[0] == "BEGIN:VCALENDAR"
    assert lines[-1] == "END:VCALENDAR"


def test_lines_fit_octet_limit():
    document = build_calendar([2024], NOW)
    for piece in document.split("\r\n"):
        assert len(piece.encode("utf-8")) <= 75


def test_events_carry_day_data():
    lines = unfold(build_calendar([2024], NOW))
    for day in get_all_days(2024):
        assert f"SUMMARY:{day.description}" in lines
        assert f"UID:{day.key}-2024@fridagar" in lines
        start = day.date.strftime("%Y%m%d")
        end = (day.date + dt.timedelta(days=1)).strftime("%Y%m%d")
        assert f"DTSTART;VALUE=DATE:{start}" in lines
        assert f"DTEND;VALUE=DATE:{end}" in lines


def test_stamp_uses_utc():
    lines = unfold(build_calendar([2024], NOW))
    assert "DTSTAMP:20240102T030405Z" in lines
    offset = dt.timezone(dt.timedelta(hours=2))
    shifted = unfold(build_calendar([2024], NOW.astimezone(offset)))
    assert shifted == lines


def test_calendar_properties():
    lines = unfold(build_calendar([2024], NOW))
    assert "X-WR-CALNAME:Icelandic Holidays" in lines
    assert "X-WR-CALDESC:Icelandic public holidays and special days" in lines
    assert "REFRESH-INTERVAL;VALUE=DURATION:P1W" in lines


def test_main_writes_file(tmp_path, capsys):
    target = tmp_path / "holidays.ics"
    assert main([str(target)]) == 0
    text = target.read_bytes().decode("utf-8")
    lines = unfold(text)
    year = dt.datetime.now(dt.timezone.utc).year
    expected = sum(len(get_all_days(y)) for y in (year - 1, year, year + 1))
    assert lines.count("BEGIN:VEVENT") == expected
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Calendar written to {target}"
    assert out[1] == f"Years included: {year - 1}, {year}, {year + 1}"


def test_main_reports_unwritable_path(tmp_path, capsys):
    target = tmp_path / "missing" / "holidays.ics"
    assert main([str(target)]) == 1
    assert capsys.readouterr().err.startswith("failed to create output file:")