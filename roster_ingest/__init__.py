"""
roster-ingest: turn a weekly shift roster workbook into a normalized schedule.

Public API surface:

- ``parse(source, ...)`` -- Pure parse. Accepts a workbook path or an
  in-memory ``Workbook`` and returns a list of ``WeekRecord``. An empty
  list means no roster sheet yielded data.

- ``ingest(...)`` -- Full run. Loads ``rosterconfig.yaml`` (or uses the
  defaults), reads the workbook (explicit path or the newest one in the
  roster folder), parses it, and writes ``Roster.json`` plus a dated
  archival copy. Returns the written paths.

Downloading the workbook and pruning old archival copies are left to the
caller.
"""

from __future__ import annotations

import logging
from pathlib import Path

from roster_ingest._pipeline import run_parse_and_export
from roster_ingest.config import ParserSettings, RosterConfig, load_config
from roster_ingest.models import (
    AssignedState,
    Assignment,
    DayRecord,
    ShiftRecord,
    TimeRange,
    WeekRecord,
)
from roster_ingest.parsers.week import Clock, local_now, parse_workbook
from roster_ingest.reader import find_latest_workbook, read_workbook
from roster_ingest.workbook import Workbook

__all__ = [
    "parse",
    "ingest",
    "AssignedState",
    "Assignment",
    "DayRecord",
    "ShiftRecord",
    "TimeRange",
    "WeekRecord",
    "Workbook",
]

logger = logging.getLogger(__name__)


def _resolve_config(
    config: RosterConfig | None,
    config_path: str | Path | None,
) -> RosterConfig:
    if config is not None:
        return config
    if config_path is not None:
        return load_config(config_path)
    return RosterConfig()


def parse(
    source: str | Path | Workbook,
    config: RosterConfig | ParserSettings | None = None,
    clock: Clock = local_now,
) -> list[WeekRecord]:
    """Parse a roster workbook without writing anything.

    Args:
        source: Path to an ``.xlsx`` file, or an already-read ``Workbook``.
        config: Full ``RosterConfig`` or just its ``ParserSettings``;
            defaults apply when ``None``.
        clock: Supplies ``parsedTimestamp`` for each week.

    Returns:
        Weeks in sheet order (empty if no roster data was found).

    Raises:
        WorkbookReadError: If the file cannot be read or has no sheets.
    """
    if isinstance(config, RosterConfig):
        settings = config.parser
    else:
        settings = config or ParserSettings()

    workbook = source if isinstance(source, Workbook) else read_workbook(source)
    return parse_workbook(workbook, settings, clock)


def ingest(
    input_path: str | Path | None = None,
    config_path: str | Path | None = None,
    config: RosterConfig | None = None,
    clock: Clock = local_now,
) -> list[str]:
    """Read, parse and export a roster workbook.

    Orchestration:
      1. Resolve the config: *config*, else *config_path*, else defaults.
      2. Resolve the input: *input_path*, else the newest workbook in
         ``config.output.roster_dir``.
      3. ``read_workbook()`` -> ``parse_workbook()`` -> ``export_roster()``.

    Args:
        input_path: Workbook to parse. If ``None``, the newest workbook in
            the roster folder is used.
        config_path: Path to ``rosterconfig.yaml``; ignored if *config*
            is given.
        config: A ready ``RosterConfig``.
        clock: Supplies the parse timestamp and archival file suffix.

    Returns:
        Paths written, or an empty list when no roster data was found.

    Raises:
        FileNotFoundError: If no input was given and the roster folder
            holds no workbook, or *config_path* does not exist.
        WorkbookReadError: If the workbook cannot be read.
        ExportError: If the output files cannot be written.
    """
    config = _resolve_config(config, config_path)

    if input_path is None:
        input_path = find_latest_workbook(config.output.roster_dir)
    logger.info("ingest() -- input_path=%s, roster_dir=%s",
                input_path, config.output.roster_dir)

    workbook = read_workbook(input_path)
    return run_parse_and_export(config, workbook, clock)
