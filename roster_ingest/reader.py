"""
Read side of roster-ingest.

- ``read_workbook()`` loads an ``.xlsx`` file with openpyxl and
  materializes it into the in-memory ``Workbook`` model, keeping each
  cell's fill colour. A reader that drops styling would make every
  assignment look like a request.
- ``find_latest_workbook()`` picks the newest workbook in the roster
  folder, for runs that reuse a previously downloaded file.
- ``read_roster()`` loads an exported JSON document back into
  ``WeekRecord`` models (the counterpart to ``export.py``).

Date cells: openpyxl returns ``datetime`` objects for date-formatted
cells. They are converted back to date-serials here so the parser sees
the same numbers the sheet stores.
"""

from __future__ import annotations

import logging
import zipfile
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.datetime import to_excel
from openpyxl.utils.exceptions import InvalidFileException

from roster_ingest.exceptions import WorkbookReadError
from roster_ingest.models import ROSTER_ADAPTER, WeekRecord
from roster_ingest.workbook import Cell, Sheet, Workbook

logger = logging.getLogger(__name__)

_WORKBOOK_SUFFIXES = (".xlsx", ".xls")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_workbook(path: str | Path) -> Workbook:
    """Read a workbook file into a ``Workbook``.

    Raises:
        WorkbookReadError: If the file is missing, is not a readable
            spreadsheet, or contains no sheets.
    """
    path = Path(path)
    if not path.exists():
        raise WorkbookReadError(f"Workbook not found: {path}")

    try:
        wb = load_workbook(path, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError) as exc:
        raise WorkbookReadError(f"Cannot read workbook {path}: {exc}") from exc

    try:
        sheets = [_read_sheet(ws) for ws in wb.worksheets]
    finally:
        wb.close()

    if not sheets:
        raise WorkbookReadError(f"Workbook has no sheets: {path}")

    logger.info("Read workbook %s (%d sheet(s): %s)", path.name, len(sheets),
                ", ".join(s.name for s in sheets))
    return Workbook(sheets=sheets, source=str(path))


def find_latest_workbook(folder: str | Path) -> Path:
    """Return the most recently modified workbook in *folder*.

    Office lock files (``~$...``) and ``.tmp`` files are ignored.

    Raises:
        FileNotFoundError: If the folder does not exist or holds no workbook.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise FileNotFoundError(f"Roster folder does not exist: {folder}")

    candidates = [
        p for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() in _WORKBOOK_SUFFIXES
        and not p.name.startswith("~")
        and ".tmp" not in p.name
    ]
    if not candidates:
        raise FileNotFoundError(f"No Excel files found in roster folder: {folder}")

    latest = max(candidates, key=lambda p: p.stat().st_mtime)
    logger.info(
        "Using latest roster file: %s (modified %s)",
        latest.name,
        datetime.fromtimestamp(latest.stat().st_mtime).isoformat(timespec="seconds"),
    )
    return latest


def read_roster(path: str | Path) -> list[WeekRecord]:
    """Load an exported roster JSON document.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the document does not match the schema.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Roster document not found: {path}")
    return ROSTER_ADAPTER.validate_json(path.read_bytes())


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _read_sheet(ws: Any) -> Sheet:
    sheet = Sheet(ws.title)
    for row in ws.iter_rows():
        for cell in row:
            value = _cell_value(cell.value)
            fill = _fill_colour(cell)
            if value is None:
                continue
            sheet.set_cell(cell.row - 1, cell.column - 1, Cell.from_value(value, fill))
    return sheet


def _cell_value(value: Any) -> Any:
    """Map openpyxl values onto what ``Cell.from_value`` expects."""
    if value is None or value == "":
        return None
    if isinstance(value, (datetime, date, time)):
        return to_excel(value)
    if isinstance(value, timedelta):
        return value / timedelta(days=1)
    return value


def _fill_colour(cell: Any) -> str | None:
    """Foreground colour of a cell's fill, when given as explicit RGB.

    Theme and indexed colours carry no RGB value and yield ``None``.
    """
    fill = cell.fill
    if fill is None or fill.fill_type is None:
        return None
    colour = fill.fgColor
    if colour is None or colour.type != "rgb":
        return None
    rgb = colour.rgb
    return rgb if isinstance(rgb, str) else None
