"""
In-memory workbook model for roster-ingest.

The parser never touches openpyxl directly. ``reader.read_workbook()``
materializes a file into these small types first, which keeps the
parsing layer free of I/O and lets tests build sheets from plain lists.

Each cell is one of three kinds:

- ``EMPTY``: no value (missing coordinates also read as empty).
- ``NUMBER``: a float. Date cells arrive here as spreadsheet date-serials.
- ``TEXT``: a string, stored as written (not trimmed).

A cell may also carry its raw fill colour (``"FFFFFF00"``-style hex),
which is the only signal used to tell a confirmed assignment from a
request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CellKind(Enum):
    EMPTY = "empty"
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True)
class Cell:
    """A single cell value plus its optional fill colour."""

    kind: CellKind
    value: float | str | None = None
    fill: str | None = None

    @classmethod
    def number(cls, value: float, fill: str | None = None) -> Cell:
        return cls(CellKind.NUMBER, float(value), fill)

    @classmethod
    def text(cls, value: str, fill: str | None = None) -> Cell:
        return cls(CellKind.TEXT, value, fill)

    @classmethod
    def from_value(cls, value: Any, fill: str | None = None) -> Cell:
        """Build a cell from a plain Python value.

        ``None`` and ``""`` become empty cells, ints and floats become
        numbers, everything else is stringified.
        """
        if value is None or value == "":
            return cls(CellKind.EMPTY, None, fill)
        if isinstance(value, bool):
            return cls.text(str(value).upper(), fill)
        if isinstance(value, (int, float)):
            return cls.number(value, fill)
        return cls.text(str(value), fill)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def is_number(self) -> bool:
        return self.kind is CellKind.NUMBER

    def as_text(self) -> str:
        """Render the value the way a spreadsheet displays a raw value.

        Integral numbers drop the trailing ``.0`` (``45572.0`` -> ``"45572"``).
        """
        if self.kind is CellKind.EMPTY:
            return ""
        if self.kind is CellKind.NUMBER:
            number = float(self.value)  # type: ignore[arg-type]
            if number.is_integer():
                return str(int(number))
            return repr(number)
        return str(self.value)


EMPTY_CELL = Cell(CellKind.EMPTY)


@dataclass
class Sheet:
    """A named, sparse grid of cells with 0-based coordinates."""

    name: str
    cells: dict[tuple[int, int], Cell] = field(default_factory=dict)
    max_row: int = field(init=False, default=-1)
    max_col: int = field(init=False, default=-1)

    def __post_init__(self) -> None:
        for row, col in self.cells:
            self._extend(row, col)

    def _extend(self, row: int, col: int) -> None:
        if row > self.max_row:
            self.max_row = row
        if col > self.max_col:
            self.max_col = col

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at ``(row, col)``, or ``EMPTY_CELL`` if unset."""
        return self.cells.get((row, col), EMPTY_CELL)

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        if row < 0 or col < 0:
            raise ValueError(f"Negative cell coordinates: ({row}, {col})")
        self.cells[(row, col)] = cell
        self._extend(row, col)

    @classmethod
    def from_rows(cls, name: str, rows: list[list[Any]]) -> Sheet:
        """Build a sheet from nested lists.

        Items may be plain values or ready-made ``Cell`` objects (use the
        latter to attach a fill colour). Empty values are skipped so they
        do not widen the used range.
        """
        sheet = cls(name)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                cell = value if isinstance(value, Cell) else Cell.from_value(value)
                if cell.is_empty and cell.fill is None:
                    continue
                sheet.set_cell(r, c, cell)
        return sheet


@dataclass
class Workbook:
    """Ordered collection of sheets read from one file."""

    sheets: list[Sheet] = field(default_factory=list)
    source: str | None = None

    @property
    def sheet_names(self) -> list[str]:
        return [s.name for s in self.sheets]

    def sheet(self, name: str) -> Sheet:
        for s in self.sheets:
            if s.name == name:
                return s
        raise KeyError(f"No sheet named '{name}'. Sheets: {self.sheet_names}")
