"""
Custom exception hierarchy for roster-ingest.

Only hard failures are raised. Layout irregularities inside a roster
sheet (missing anchor, a date row without a header, a shift row with
an unreadable time) are soft skips: they are logged and the affected
unit is left out of the output.
"""


class RosterIngestError(Exception):
    """Base exception for all roster-ingest errors."""


class WorkbookReadError(RosterIngestError):
    """Raised when the input workbook cannot be read at all.

    This covers a missing file, a file that is not a spreadsheet, and a
    workbook that contains no sheets.
    """


class ConfigValidationError(RosterIngestError):
    """Raised when rosterconfig.yaml is empty or cannot be used."""


class ExportError(RosterIngestError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
