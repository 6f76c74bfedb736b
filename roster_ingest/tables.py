"""
Flat tabular view of parsed weeks.

The JSON document is nested (week -> day -> shift -> assignment). For
spreadsheet users and analysis code, ``weeks_to_frame()`` flattens it to
one row per assignment, in document order.
"""

from __future__ import annotations

import pandas as pd

from roster_ingest.models import WeekRecord
from roster_ingest.parsers.dates import format_date

TABLE_COLUMNS = [
    "week",
    "day",
    "date",
    "shift",
    "start",
    "end",
    "type",
    "person",
    "assignType",
]


def weeks_to_frame(weeks: list[WeekRecord]) -> pd.DataFrame:
    """Flatten weeks into a DataFrame with ``TABLE_COLUMNS``.

    Dates are ``DD-MM-YYYY`` strings, matching the JSON document.
    """
    rows = [
        {
            "week": format_date(week.week),
            "day": day.day,
            "date": format_date(day.date),
            "shift": shift.name,
            "start": shift.time.start,
            "end": shift.time.end,
            "type": assignment.shift_type,
            "person": assignment.person,
            "assignType": assignment.state.value,
        }
        for week in weeks
        for day in week.days
        for shift in day.shifts
        for assignment in shift.assignments
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
