"""
Shared test fixtures and sheet builders for roster-ingest tests.

Sheets are built in memory from nested lists (``Sheet.from_rows``), so
unit tests never touch openpyxl. ``write_xlsx()`` writes the same
nested lists to a real workbook for reader and integration tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook as OpenpyxlWorkbook
from openpyxl.styles import PatternFill

from roster_ingest.workbook import Cell, Sheet, Workbook

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
YELLOW = "FFFFFF00"
GREEN = "FF00FF00"

MONDAY_SERIAL = 45572  # 07-10-2024
TUESDAY_SERIAL = 45573

FIXED_NOW = datetime(2024, 10, 7, 6, 30, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


def yellow(text: str) -> Cell:
    return Cell.text(text, fill=YELLOW)


# ---------------------------------------------------------------------------
# Sheet builders
# ---------------------------------------------------------------------------

def scenario_rows() -> list[list[Any]]:
    """The reference week: one Monday block with one shift."""
    return [
        ["Weekly roster"],
        [],
        [MONDAY_SERIAL],
        [],
        [MONDAY_SERIAL],
        ["Shift", None, "Desk", "Phones"],
        ["Morning", "0800-1600", yellow("Alice"), "Bob"],
    ]


def two_day_rows() -> list[list[Any]]:
    """Monday and Tuesday blocks with differing header columns."""
    return [
        ["Weekly roster"],
        [],
        [MONDAY_SERIAL],
        [],
        [MONDAY_SERIAL],
        ["Shift", None, "Desk", "Phones"],
        ["Morning", "0800-1600", yellow("Alice"), "Bob"],
        ["Evening", "1600-2200", None, yellow("Carol")],
        [],
        [TUESDAY_SERIAL],
        ["SHIFT", None, "Desk", None, "Floor"],
        ["Morning", "08:00 - 16:00", "Dan", None, yellow("Erin")],
    ]


def make_workbook(*sheets: tuple[str, list[list[Any]]]) -> Workbook:
    return Workbook(sheets=[Sheet.from_rows(name, rows) for name, rows in sheets])


def write_xlsx(path: Path, *sheets: tuple[str, list[list[Any]]]) -> Path:
    """Write nested-list sheets to an .xlsx file, keeping ``Cell`` fills."""
    wb = OpenpyxlWorkbook()
    wb.remove(wb.active)
    for name, rows in sheets:
        ws = wb.create_sheet(name)
        for r, row in enumerate(rows, start=1):
            for c, value in enumerate(row, start=1):
                fill = None
                if isinstance(value, Cell):
                    fill = value.fill
                    value = value.value
                if value is None and fill is None:
                    continue
                target = ws.cell(row=r, column=c, value=value)
                if fill is not None:
                    target.fill = PatternFill(fill_type="solid", fgColor=fill)
    wb.save(path)
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def scenario_workbook() -> Workbook:
    return make_workbook(("07102024", scenario_rows()))


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (writes and reads real workbooks)",
    )
