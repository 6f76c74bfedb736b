"""
Output record models for roster-ingest.

A parsed workbook becomes a list of ``WeekRecord``; each week holds its
``DayRecord`` entries, each day its ``ShiftRecord`` entries, and each
shift the ``Assignment`` entries read from the shift-type columns.

The models are frozen Pydantic models whose aliases match the JSON
document consumed downstream::

    [{"week": "07-10-2024",
      "parsedTimestamp": "2024-10-07T06:00:00.000Z",
      "data": [{"day": "Monday", "date": "07-10-2024",
                "shifts": [{"name": "Morning",
                            "time": {"start": "08:00", "end": "16:00"},
                            "assignments": [{"type": "Desk",
                                             "person": "Alice",
                                             "assignType": "assigned"}]}]}]}]

Calendar dates serialize as ``DD-MM-YYYY`` and are parsed back from the
same form, so an exported document can be re-loaded with
``reader.read_roster()``.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_serializer,
    field_validator,
)

DISPLAY_DATE_FORMAT = "%d-%m-%Y"


class AssignedState(str, Enum):
    """Whether a person was confirmed for a slot or only asked for it."""

    ASSIGNED = "assigned"
    REQUESTED = "requested"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


def _parse_display_date(value: Any) -> Any:
    if isinstance(value, str):
        return dt.datetime.strptime(value, DISPLAY_DATE_FORMAT).date()
    return value


class TimeRange(_Record):
    start: str
    end: str


class Assignment(_Record):
    shift_type: str = Field(..., alias="type")
    person: str
    state: AssignedState = Field(..., alias="assignType")


class ShiftRecord(_Record):
    name: str
    time: TimeRange
    assignments: list[Assignment]


class DayRecord(_Record):
    day: str
    date: dt.date
    shifts: list[ShiftRecord]

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Any:
        return _parse_display_date(value)

    @field_serializer("date")
    def _format_date(self, value: dt.date) -> str:
        return value.strftime(DISPLAY_DATE_FORMAT)


class WeekRecord(_Record):
    """One roster sheet's worth of days, keyed by the week's Monday."""

    week: dt.date
    parsed_timestamp: dt.datetime = Field(..., alias="parsedTimestamp")
    days: list[DayRecord] = Field(..., alias="data")

    @field_validator("week", mode="before")
    @classmethod
    def _parse_week(cls, value: Any) -> Any:
        return _parse_display_date(value)

    @field_serializer("week")
    def _format_week(self, value: dt.date) -> str:
        return value.strftime(DISPLAY_DATE_FORMAT)

    @field_serializer("parsed_timestamp")
    def _format_timestamp(self, value: dt.datetime) -> str:
        # Naive timestamps are taken as local time.
        utc = value.astimezone(dt.timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def content(self) -> dict[str, Any]:
        """Serialized form without the parse timestamp.

        Two parses of the same workbook differ only in
        ``parsedTimestamp``; comparing ``content()`` ignores it.
        """
        data = self.model_dump(mode="json", by_alias=True)
        data.pop("parsedTimestamp")
        return data


# Validates and serializes a whole roster document (a JSON array of weeks).
ROSTER_ADAPTER = TypeAdapter(list[WeekRecord])
