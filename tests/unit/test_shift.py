"""
Unit tests for the shift-row parser and fill classification
(roster_ingest.parsers.shift).
"""

from __future__ import annotations

import pytest

from roster_ingest.config import ParserSettings
from roster_ingest.models import AssignedState
from roster_ingest.parsers.shift import (
    ShiftColumn,
    is_assigned_fill,
    is_boundary_row,
    is_yellow,
    normalize_argb,
    parse_shift_row,
)
from roster_ingest.workbook import Cell, Sheet
from tests.conftest import GREEN, YELLOW, yellow

HEADERS = [ShiftColumn(col=2, label="Desk"), ShiftColumn(col=3, label="Phones")]


def _row(*values) -> Sheet:
    return Sheet.from_rows("TA", [list(values)])


# ---------------------------------------------------------------------------
# Fill colours
# ---------------------------------------------------------------------------

class TestFillColours:
    """Tests for normalize_argb() / is_yellow() / is_assigned_fill()."""

    def test_normalize_six_digit(self):
        assert normalize_argb("ffff00") == "FFFFFF00"

    def test_normalize_eight_digit(self):
        assert normalize_argb("ffffff00") == "FFFFFF00"

    def test_normalize_none(self):
        assert normalize_argb(None) is None
        assert normalize_argb("") is None

    @pytest.mark.parametrize(
        "colour", ["FFFF00", "ffff00", "FFFFFF00", "ffffff00", "00FFFF00", "80ffff00"]
    )
    def test_yellow_encodings(self, colour):
        assert is_yellow(colour)

    @pytest.mark.parametrize(
        "colour", [None, "", "FF00FF00", "00FFFFFF", "FFFFFFFF", "FFF", "FFFF0"]
    )
    def test_not_yellow(self, colour):
        assert not is_yellow(colour)

    def test_custom_assigned_fill(self):
        assert is_assigned_fill("00FF00", "FF00FF00")
        assert not is_assigned_fill("FFFF00", "FF00FF00")

    def test_alpha_ignored(self):
        assert is_assigned_fill("0000FF00", "FF00FF00")
        assert is_assigned_fill("FFFFFF00", "00FFFF00")


# ---------------------------------------------------------------------------
# Shift rows
# ---------------------------------------------------------------------------

class TestParseShiftRow:
    """Tests for parse_shift_row()."""

    def test_assigned_and_requested(self):
        sheet = _row("Morning", "0800-1600", yellow("Alice"), "Bob")
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())

        assert shift is not None
        assert shift.name == "Morning"
        assert (shift.time.start, shift.time.end) == ("08:00", "16:00")
        assert [(a.shift_type, a.person, a.state) for a in shift.assignments] == [
            ("Desk", "Alice", AssignedState.ASSIGNED),
            ("Phones", "Bob", AssignedState.REQUESTED),
        ]

    def test_other_fill_is_requested(self):
        sheet = _row("Morning", "0800-1600", Cell.text("Alice", fill=GREEN))
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())
        assert shift.assignments[0].state is AssignedState.REQUESTED

    def test_six_digit_yellow_is_assigned(self):
        sheet = _row("Morning", "0800-1600", Cell.text("Alice", fill="FFFF00"))
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())
        assert shift.assignments[0].state is AssignedState.ASSIGNED

    def test_empty_cell_yields_no_assignment(self):
        sheet = _row("Morning", "0800-1600", None, "Bob")
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())
        assert [a.person for a in shift.assignments] == ["Bob"]

    def test_yellow_blank_cell_yields_no_assignment(self):
        """A highlighted cell with only whitespace is still empty."""
        sheet = _row("Morning", "0800-1600", Cell.text("   ", fill=YELLOW), "Bob")
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())
        assert [a.person for a in shift.assignments] == ["Bob"]

    def test_names_are_trimmed(self):
        sheet = _row("  Late  ", "1600-2200", " Alice ")
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())
        assert shift.name == "Late"
        assert shift.assignments[0].person == "Alice"

    def test_no_assignments_yields_none(self):
        sheet = _row("Morning", "0800-1600")
        assert parse_shift_row(sheet, 0, HEADERS, ParserSettings()) is None

    def test_bad_time_yields_none(self):
        sheet = _row("Morning", "invalid", "Alice")
        assert parse_shift_row(sheet, 0, HEADERS, ParserSettings()) is None

    def test_missing_time_yields_none(self):
        sheet = _row("Morning", None, "Alice")
        assert parse_shift_row(sheet, 0, HEADERS, ParserSettings()) is None

    def test_numeric_name_is_boundary(self):
        sheet = _row(45573, "0800-1600", "Alice")
        assert is_boundary_row(sheet.cell(0, 0))
        assert parse_shift_row(sheet, 0, HEADERS, ParserSettings()) is None

    def test_columns_outside_headers_ignored(self):
        sheet = _row("Morning", "0800-1600", "Alice", None, "Stray")
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())
        assert [a.person for a in shift.assignments] == ["Alice"]

    def test_numeric_person_is_text(self):
        sheet = _row("Morning", "0800-1600", 42)
        shift = parse_shift_row(sheet, 0, HEADERS, ParserSettings())
        assert shift.assignments[0].person == "42"
