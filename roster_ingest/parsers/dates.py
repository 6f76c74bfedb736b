"""
Date helpers: spreadsheet date-serials, week anchors, display formats.

A date-serial is a fractional day count from the epoch 1899-12-30. Using
the 30th rather than 1900-01-01 absorbs the extra day the spreadsheet
format inherits from treating 1900 as a leap year, so every serial from
61 (1900-03-01) onward maps to the right calendar day.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta

import pandas as pd

EXCEL_EPOCH = datetime(1899, 12, 30)
MS_PER_DAY = 86_400_000

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def serial_to_datetime(serial: float) -> datetime:
    """Convert a date-serial to a naive datetime.

    The fractional part is the time of day, rounded to the millisecond.
    """
    days = math.floor(serial)
    ms = round((serial - days) * MS_PER_DAY)
    return EXCEL_EPOCH + timedelta(days=days, milliseconds=ms)


def datetime_to_serial(value: datetime | date) -> float:
    """Inverse of ``serial_to_datetime``."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return (value - EXCEL_EPOCH) / timedelta(days=1)


def monday_of_week(value: datetime | date) -> date:
    """Return the Monday of the ISO week containing *value*.

    Sunday belongs to the week that started six days earlier.
    """
    if isinstance(value, datetime):
        value = value.date()
    return value - timedelta(days=value.weekday())


def format_date(value: datetime | date) -> str:
    """Format as ``DD-MM-YYYY``."""
    return value.strftime("%d-%m-%Y")


def day_name(value: datetime | date) -> str:
    """English weekday name, independent of the process locale."""
    return DAY_NAMES[value.weekday()]


def parse_date_text(text: str) -> date | None:
    """Parse a hand-typed date, or return ``None`` if it is not one.

    ISO dates (``2024-10-07``) are tried first; anything else is read
    day-first (``07/10/2024`` is 7 October).
    """
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    parsed = pd.to_datetime(text, dayfirst=True, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()
