"""
Unit tests for the in-memory workbook model (roster_ingest.workbook).
"""

from __future__ import annotations

import pytest

from roster_ingest.workbook import EMPTY_CELL, Cell, CellKind, Sheet, Workbook


class TestCell:
    """Tests for Cell construction and rendering."""

    def test_from_value_kinds(self):
        assert Cell.from_value(None).kind is CellKind.EMPTY
        assert Cell.from_value("").kind is CellKind.EMPTY
        assert Cell.from_value(45572).kind is CellKind.NUMBER
        assert Cell.from_value(1.5).kind is CellKind.NUMBER
        assert Cell.from_value("Alice").kind is CellKind.TEXT

    def test_whitespace_text_is_not_empty(self):
        """Only a missing value is empty; blanks are trimmed by the parser."""
        assert Cell.from_value("  ").kind is CellKind.TEXT

    def test_bool_is_text(self):
        cell = Cell.from_value(True)
        assert cell.kind is CellKind.TEXT
        assert cell.as_text() == "TRUE"

    def test_number_stored_as_float(self):
        assert Cell.number(45572).value == 45572.0

    def test_as_text_drops_integral_fraction(self):
        assert Cell.number(45572).as_text() == "45572"
        assert Cell.number(800).as_text() == "800"

    def test_as_text_keeps_real_fraction(self):
        assert Cell.number(45572.5).as_text() == "45572.5"

    def test_empty_as_text(self):
        assert EMPTY_CELL.as_text() == ""

    def test_fill_is_kept(self):
        cell = Cell.text("Alice", fill="FFFFFF00")
        assert cell.fill == "FFFFFF00"


class TestSheet:
    """Tests for Sheet addressing and bounds."""

    def test_missing_cell_is_empty(self):
        sheet = Sheet("TA")
        assert sheet.cell(5, 5) is EMPTY_CELL

    def test_empty_sheet_bounds(self):
        sheet = Sheet("TA")
        assert sheet.max_row == -1
        assert sheet.max_col == -1

    def test_from_rows_bounds(self):
        sheet = Sheet.from_rows("TA", [["a"], [], [None, None, "c"]])
        assert sheet.max_row == 2
        assert sheet.max_col == 2
        assert sheet.cell(2, 2).as_text() == "c"

    def test_from_rows_skips_blank_values(self):
        sheet = Sheet.from_rows("TA", [["a", None, ""]])
        assert sheet.max_col == 0

    def test_from_rows_accepts_cells(self):
        sheet = Sheet.from_rows("TA", [[Cell.text("x", fill="FFFF00")]])
        assert sheet.cell(0, 0).fill == "FFFF00"

    def test_set_cell_extends_bounds(self):
        sheet = Sheet("TA")
        sheet.set_cell(3, 7, Cell.text("x"))
        assert (sheet.max_row, sheet.max_col) == (3, 7)

    def test_set_cell_rejects_negative(self):
        with pytest.raises(ValueError, match="Negative"):
            Sheet("TA").set_cell(-1, 0, Cell.text("x"))

    def test_init_with_cells_computes_bounds(self):
        sheet = Sheet("TA", {(4, 1): Cell.text("x")})
        assert (sheet.max_row, sheet.max_col) == (4, 1)


class TestWorkbook:
    """Tests for Workbook lookup."""

    def test_sheet_names_in_order(self):
        wb = Workbook([Sheet("Notes"), Sheet("TA"), Sheet("07102024")])
        assert wb.sheet_names == ["Notes", "TA", "07102024"]

    def test_sheet_lookup(self):
        ta = Sheet("TA")
        assert Workbook([ta]).sheet("TA") is ta

    def test_missing_sheet_raises(self):
        with pytest.raises(KeyError, match="No sheet named"):
            Workbook([Sheet("TA")]).sheet("Other")
