"""
Exporter for roster-ingest.

Writes the parsed weeks as a JSON document, twice:

  {roster_dir}/{json_file_name}                       -- the current document
  {roster_dir}/{history_dir_name}/{stem}_DD-MM-YYYY-HH-MM.json
                                                      -- archival copy

The archival suffix comes from the clock reading passed to
``export_roster()``. The pipeline takes that reading after parsing, so it
is separate from (and not earlier than) each week's ``parsedTimestamp``.
Old archival copies are never deleted here.

When ``OutputConfig.table_format`` is set, a flat one-row-per-assignment
table is written next to the current document as ``{stem}.csv`` or
``{stem}.parquet``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Literal

import pandas as pd

from roster_ingest.config import OutputConfig
from roster_ingest.exceptions import ExportError
from roster_ingest.models import ROSTER_ADAPTER, WeekRecord
from roster_ingest.tables import weeks_to_frame

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def serialize_weeks(weeks: list[WeekRecord]) -> str:
    """Render weeks as the pretty-printed JSON document (2-space indent)."""
    return ROSTER_ADAPTER.dump_json(weeks, indent=2, by_alias=True).decode("utf-8")


def archive_suffix(now: datetime) -> str:
    """``_DD-MM-YYYY-HH-MM`` suffix for archival file names."""
    return now.strftime("_%d-%m-%Y-%H-%M")


def archive_name(file_name: str, now: datetime) -> str:
    """Insert the archival suffix before the extension.

    ``archive_name("Roster.json", now)`` -> ``"Roster_07-10-2024-06-30.json"``
    """
    p = Path(file_name)
    return f"{p.stem}{archive_suffix(now)}{p.suffix}"


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to write {path}: {exc}") from exc


def export_table(
    frame: pd.DataFrame,
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "csv",
) -> str:
    """Write a flat assignment table.

    Raises:
        ExportError: If *output_format* is unsupported, or if writing fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if output_format == "csv":
            frame.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            frame.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc
    logger.info("Exported table -> %s (%d rows)", path.name, len(frame))
    return str(path)


def export_roster(
    weeks: list[WeekRecord],
    output: OutputConfig,
    now: datetime,
) -> list[str]:
    """Write the current document and its archival copy.

    Args:
        weeks: Parsed weeks; must not be empty.
        output: Output folders and file names.
        now: Clock reading used for the archival suffix.

    Returns:
        Written file paths: current document, archival copy, then the
        flat table if one was requested.

    Raises:
        ExportError: If *weeks* is empty or any write fails.
    """
    if not weeks:
        raise ExportError("Refusing to export an empty roster")

    document = serialize_weeks(weeks)
    roster_dir = Path(output.roster_dir)

    current_path = roster_dir / output.json_file_name
    _write_text(current_path, document)
    logger.info("Written JSON to: %s", current_path)

    history_path = output.history_dir / archive_name(output.json_file_name, now)
    _write_text(history_path, document)
    logger.info("Written JSON to history: %s", history_path)

    written = [str(current_path), str(history_path)]

    if output.table_format is not None:
        stem = Path(output.json_file_name).stem
        table_path = roster_dir / f"{stem}.{output.table_format}"
        written.append(
            export_table(weeks_to_frame(weeks), table_path, output.table_format)
        )

    return written
