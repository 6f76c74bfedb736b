"""
Day-block parser.

A day-block starts at a date row and looks like::

    row d     : <date-serial>
    row d + 1 : Shift | <blank> | Type 1 | Type 2 | ...
    row d + 2 : Morning | 0800-1600 | Alice | Bob | ...
    ...

The block has no explicit end marker. It ends at the next number in
column A, or at a blank column-A cell when either a number follows
within ``lookahead_rows`` rows or more than ``max_block_rows`` rows have
been read past the header. Other blank rows are skipped.
"""

from __future__ import annotations

import logging

from roster_ingest.config import ParserSettings
from roster_ingest.models import DayRecord, ShiftRecord
from roster_ingest.parsers.dates import day_name, serial_to_datetime
from roster_ingest.parsers.shift import ShiftColumn, is_boundary_row, parse_shift_row
from roster_ingest.workbook import Sheet

logger = logging.getLogger(__name__)


def more_data_follows(sheet: Sheet, row: int, lookahead: int) -> bool:
    """True if any of the *lookahead* rows below *row* has a number in column A."""
    return any(sheet.cell(row + i, 0).is_number for i in range(1, lookahead + 1))


def is_header_row(sheet: Sheet, row: int, settings: ParserSettings) -> bool:
    cell = sheet.cell(row, 0)
    if cell.is_empty:
        return False
    return cell.as_text().casefold() == settings.header_label.casefold()


def read_headers(sheet: Sheet, row: int, settings: ParserSettings) -> list[ShiftColumn]:
    """Collect the shift-type columns of a header row, left to right."""
    headers: list[ShiftColumn] = []
    for col in range(settings.first_header_col, sheet.max_col + 1):
        cell = sheet.cell(row, col)
        if not cell.is_empty:
            headers.append(ShiftColumn(col=col, label=cell.as_text()))
    return headers


def parse_day_block(
    sheet: Sheet,
    date_row: int,
    settings: ParserSettings,
) -> DayRecord | None:
    """Parse the day-block starting at *date_row*.

    Returns ``None`` when the row is not followed by a header row, when
    the header names no shift types, or when no shift row yields an
    assignment.
    """
    date_cell = sheet.cell(date_row, 0)
    if not date_cell.is_number:
        return None
    day = serial_to_datetime(date_cell.value).date()  # type: ignore[arg-type]

    header_row = date_row + 1
    if not is_header_row(sheet, header_row, settings):
        logger.debug(
            "Sheet %s row %d: date not followed by a header row, ignoring",
            sheet.name, date_row,
        )
        return None

    headers = read_headers(sheet, header_row, settings)
    if not headers:
        logger.debug(
            "Sheet %s row %d: header row has no shift-type columns",
            sheet.name, header_row,
        )
        return None

    shifts: list[ShiftRecord] = []
    row = header_row + 1
    while row <= sheet.max_row:
        name_cell = sheet.cell(row, 0)

        if name_cell.is_empty:
            if (
                more_data_follows(sheet, row, settings.lookahead_rows)
                or row - header_row > settings.max_block_rows
            ):
                break
            row += 1
            continue

        if is_boundary_row(name_cell):
            break

        shift = parse_shift_row(sheet, row, headers, settings)
        if shift is not None:
            shifts.append(shift)
        row += 1

    if not shifts:
        return None
    return DayRecord(day=day_name(day), date=day, shifts=shifts)
