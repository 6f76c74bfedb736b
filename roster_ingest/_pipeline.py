"""
Internal pipeline orchestration for roster-ingest.

Extracted from ``__init__.py`` so that ``ingest()`` and the scripts can
reuse the same parse -> export sequence.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging

from roster_ingest.config import RosterConfig
from roster_ingest.export import export_roster
from roster_ingest.parsers.week import Clock, local_now, parse_workbook
from roster_ingest.workbook import Workbook

logger = logging.getLogger(__name__)


def run_parse_and_export(
    config: RosterConfig,
    workbook: Workbook,
    clock: Clock = local_now,
) -> list[str]:
    """Parse a workbook and export the result.

    Steps:
      1. Parse every roster sheet into ``WeekRecord`` objects.
      2. If nothing was found, log it and stop (no files written).
      3. Export the current document, its archival copy and, if
         configured, the flat table.

    Returns:
        List of output file paths that were written (empty when the
        workbook held no roster data).
    """
    weeks = parse_workbook(workbook, config.parser, clock)
    if not weeks:
        logger.warning(
            "No roster data found in %s", workbook.source or "<memory>"
        )
        return []

    written = export_roster(weeks, config.output, clock())
    logger.info(
        "Pipeline complete: %d week(s), wrote %d file(s)", len(weeks), len(written)
    )
    return written
