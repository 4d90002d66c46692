"""Date of Easter Sunday in the Gregorian calendar."""

from __future__ import annotations

import datetime as _dt

__all__ = ["easter"]


def easter(year: int) -> _dt.date:
    """Return Easter Sunday of ``year`` (anonymous Gregorian computus)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return _dt.date(year, month, day + 1)