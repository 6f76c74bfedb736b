"""
Shift-row parser.

A shift row looks like::

    A: name | B: time range | C..: one person per shift-type column

A person's cell is *assigned* when it carries the confirmation fill
(yellow by default) and *requested* otherwise. Cell text never affects
the state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from roster_ingest.config import ParserSettings
from roster_ingest.models import AssignedState, Assignment, ShiftRecord
from roster_ingest.parsers.timerange import parse_time_range
from roster_ingest.workbook import Cell, Sheet

logger = logging.getLogger(__name__)

YELLOW = "FFFFFF00"


@dataclass(frozen=True)
class ShiftColumn:
    """A shift-type column discovered in a day-block header row."""
    col: int
    label: str


def normalize_argb(colour: str | None) -> str | None:
    """Upper-case a fill colour and widen 6-digit RGB to opaque ARGB.

    ``"ffff00"`` and ``"FFFFFF00"`` both normalize to ``"FFFFFF00"``.
    Other lengths are returned upper-cased but otherwise untouched.
    """
    if not colour:
        return None
    colour = colour.strip().upper()
    if len(colour) == 6:
        return "FF" + colour
    return colour


def _rgb(colour: str | None) -> str | None:
    normalized = normalize_argb(colour)
    if normalized is None or len(normalized) != 8:
        return None
    return normalized[2:]


def is_assigned_fill(colour: str | None, assigned_fill: str = YELLOW) -> bool:
    """True when *colour* has the same RGB as the confirmation fill.

    The alpha byte is ignored: openpyxl stores a 6-digit ``"FFFF00"`` as
    ``"00FFFF00"``, which is still yellow.
    """
    rgb = _rgb(colour)
    return rgb is not None and rgb == _rgb(assigned_fill)


def is_yellow(colour: str | None) -> bool:
    return is_assigned_fill(colour, YELLOW)


def is_boundary_row(cell: Cell) -> bool:
    """A number in column A starts the next day, so it is not a shift."""
    return cell.is_number


def parse_shift_row(
    sheet: Sheet,
    row: int,
    headers: list[ShiftColumn],
    settings: ParserSettings,
) -> ShiftRecord | None:
    """Parse one shift row.

    Returns ``None`` when column A holds a number (a date boundary, see
    ``is_boundary_row``), when column B is not a valid time range, or
    when no shift-type column names a person.
    """
    name_cell = sheet.cell(row, 0)
    if is_boundary_row(name_cell):
        return None
    name = name_cell.as_text().strip()

    time_range = parse_time_range(sheet.cell(row, 1).as_text())
    if time_range is None:
        logger.debug("Row %d (%s): no valid time range, skipping", row, name)
        return None

    assignments: list[Assignment] = []
    for header in headers:
        cell = sheet.cell(row, header.col)
        person = cell.as_text().strip()
        if not person:
            continue
        state = (
            AssignedState.ASSIGNED
            if is_assigned_fill(cell.fill, settings.assigned_fill)
            else AssignedState.REQUESTED
        )
        assignments.append(
            Assignment(shift_type=header.label, person=person, state=state)
        )

    if not assignments:
        return None
    return ShiftRecord(name=name, time=time_range, assignments=assignments)
