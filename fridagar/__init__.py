"""Icelandic public holidays, special days, business-day arithmetic and iCalendar output."""

__version__ = "0.1.0"