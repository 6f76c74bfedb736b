"""
Parsers sub-package for roster-ingest.

Turns an in-memory ``Workbook`` into ``WeekRecord`` objects. Modules are
layered leaves-first:

- timerange.py: ``0815-1630`` style time ranges.
- dates.py: date-serial conversion, Monday-of-week, display formats.
- shift.py: one shift row, including fill-based assignment state.
- day.py: one day-block (date row, header row, shift rows).
- week.py: roster sheet selection, week anchor, date-row scan, aggregation.

Nothing in this package performs I/O.
"""

from roster_ingest.parsers.week import is_roster_sheet, parse_sheet, parse_workbook

__all__ = ["is_roster_sheet", "parse_sheet", "parse_workbook"]
