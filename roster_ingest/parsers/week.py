"""
Sheet-level parsing: roster sheet selection, week anchor, date-row scan,
and aggregation of day-blocks into week records.

Control flow for one workbook::

    parse_workbook
      -> is_roster_sheet          (per sheet name)
      -> parse_sheet
           -> resolve_week_anchor (cell A3 -> Monday)
           -> find_date_rows      (column A serials in the date window)
           -> parse_day_block     (per date row)
      -> WeekRecord               (only sheets with at least one day)

The whole pass is a pure function of the workbook, the settings and the
clock; nothing here touches the filesystem.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date, datetime

from roster_ingest.config import ParserSettings
from roster_ingest.exceptions import WorkbookReadError
from roster_ingest.models import DayRecord, WeekRecord
from roster_ingest.parsers.dates import (
    format_date,
    monday_of_week,
    parse_date_text,
    serial_to_datetime,
)
from roster_ingest.parsers.day import parse_day_block
from roster_ingest.workbook import Sheet, Workbook

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# ddmmyyyy; the digits are not checked against the calendar here.
_DATED_SHEET_NAME = re.compile(r"[0-9]{8}")


def local_now() -> datetime:
    """Default clock: the current local time, timezone-aware."""
    return datetime.now().astimezone()


def is_roster_sheet(name: str, names: list[str] | tuple[str, ...] = ("TA",)) -> bool:
    """True for a configured literal name (any case) or an 8-digit name."""
    folded = name.casefold()
    if any(folded == n.casefold() for n in names):
        return True
    return _DATED_SHEET_NAME.fullmatch(name) is not None


def resolve_week_anchor(sheet: Sheet, settings: ParserSettings) -> date | None:
    """Return the Monday of the week named by the anchor cell.

    Returns ``None`` when the anchor is empty, its text is not a date, or
    its number lies outside the representable calendar.
    """
    cell = sheet.cell(settings.anchor_row, settings.anchor_col)
    if cell.is_empty:
        return None
    if cell.is_number:
        try:
            anchor: date | None = serial_to_datetime(cell.value).date()  # type: ignore[arg-type]
        except (OverflowError, ValueError):
            logger.warning(
                "Sheet %s: anchor cell number %r is not a date",
                sheet.name, cell.value,
            )
            return None
    else:
        anchor = parse_date_text(cell.as_text())
        if anchor is None:
            logger.warning(
                "Sheet %s: anchor cell text %r is not a date",
                sheet.name, cell.as_text(),
            )
            return None
    return monday_of_week(anchor)


def is_date_row(sheet: Sheet, row: int, settings: ParserSettings) -> bool:
    cell = sheet.cell(row, 0)
    if not cell.is_number:
        return False
    return settings.date_serial_min < cell.value < settings.date_serial_max  # type: ignore[operator]


def find_date_rows(sheet: Sheet, settings: ParserSettings) -> list[int]:
    """Rows whose column-A cell is a date-serial inside the configured window."""
    return [r for r in range(sheet.max_row + 1) if is_date_row(sheet, r, settings)]


def parse_sheet(
    sheet: Sheet,
    settings: ParserSettings,
    clock: Clock = local_now,
) -> WeekRecord | None:
    """Parse one roster sheet into a ``WeekRecord``.

    Returns ``None`` when the anchor cannot be resolved or no day-block
    yields a shift.
    """
    monday = resolve_week_anchor(sheet, settings)
    if monday is None:
        logger.info("Sheet %s: week anchor missing or unreadable, skipping", sheet.name)
        return None
    logger.info("Sheet %s: week starting %s", sheet.name, format_date(monday))

    days: list[DayRecord] = []
    for row in find_date_rows(sheet, settings):
        day = parse_day_block(sheet, row, settings)
        if day is None:
            continue
        logger.debug(
            "Sheet %s row %d: %s with %d shift(s)",
            sheet.name, row, day.day, len(day.shifts),
        )
        days.append(day)

    if not days:
        logger.info("Sheet %s: no day-blocks with shifts", sheet.name)
        return None

    logger.info("Sheet %s: parsed %d day(s)", sheet.name, len(days))
    return WeekRecord(week=monday, parsed_timestamp=clock(), days=days)


def parse_workbook(
    workbook: Workbook,
    settings: ParserSettings | None = None,
    clock: Clock = local_now,
) -> list[WeekRecord]:
    """Parse every roster sheet of *workbook*, in sheet order.

    An empty list means no roster data was found; that is not an error.

    Raises:
        WorkbookReadError: If the workbook has no sheets at all.
    """
    if settings is None:
        settings = ParserSettings()
    if not workbook.sheets:
        raise WorkbookReadError(f"Workbook has no sheets: {workbook.source or '<memory>'}")

    weeks: list[WeekRecord] = []
    for sheet in workbook.sheets:
        if not is_roster_sheet(sheet.name, settings.roster_sheet_names):
            logger.info("Skipping non-roster sheet: %s", sheet.name)
            continue
        week = parse_sheet(sheet, settings, clock)
        if week is not None:
            weeks.append(week)

    logger.info("Parsed %d week(s) from %d sheet(s)", len(weeks), len(workbook.sheets))
    return weeks
