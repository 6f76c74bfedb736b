"""
Configuration models and YAML I/O for roster-ingest.

This module defines the Pydantic models that map 1:1 to rosterconfig.yaml,
plus helper functions for loading and saving the config.

Key models:
- RosterConfig: Top-level config (parser + output).
- ParserSettings: Layout heuristics used while reading a roster sheet
  (anchor cell, date-serial window, header label, lookahead distances,
  the fill colour that marks an assignment as confirmed).
- OutputConfig: Where the JSON document and its archival copies go.

Key functions:
- load_config(path) -> RosterConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

The parser never reads these values from module globals; a
``ParserSettings`` instance is passed into every parsing entry point.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from roster_ingest.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

_HEX_COLOUR = re.compile(r"^(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


class ParserSettings(BaseModel):
    """Heuristics for reading a roster sheet.

    Row and column indices are 0-based, so the default anchor
    (``anchor_row=2``, ``anchor_col=0``) is cell ``A3``.
    """

    roster_sheet_names: list[str] = Field(
        default_factory=lambda: ["TA"],
        description="Literal sheet names (case-insensitive) treated as rosters, "
        "in addition to 8-digit ddmmyyyy names",
    )
    anchor_row: int = Field(2, ge=0, description="Row of the week anchor cell")
    anchor_col: int = Field(0, ge=0, description="Column of the week anchor cell")
    date_serial_min: float = Field(
        40000, description="Exclusive lower bound for a date-row serial (~2009)"
    )
    date_serial_max: float = Field(
        50000, description="Exclusive upper bound for a date-row serial (~2036)"
    )
    header_label: str = Field(
        "shift", description="Column A text (case-insensitive) of a header row"
    )
    first_header_col: int = Field(
        2, ge=0, description="First shift-type column; A and B hold name and time"
    )
    lookahead_rows: int = Field(
        3, ge=0, description="Rows checked past a blank row for the next date"
    )
    max_block_rows: int = Field(
        10, ge=0, description="Rows past the header after which a blank row ends the block"
    )
    assigned_fill: str = Field(
        "FFFFFF00", description="Fill colour (RGB or ARGB) of a confirmed assignment"
    )

    @field_validator("assigned_fill")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        if not _HEX_COLOUR.match(value):
            raise ValueError(
                f"assigned_fill must be 6 or 8 hex digits, got '{value}'"
            )
        return value.upper()

    @model_validator(mode="after")
    def _check_serial_window(self) -> ParserSettings:
        if self.date_serial_min >= self.date_serial_max:
            raise ValueError(
                f"date_serial_min ({self.date_serial_min}) must be below "
                f"date_serial_max ({self.date_serial_max})"
            )
        return self


class OutputConfig(BaseModel):
    """Output settings."""

    roster_dir: str = Field("Roster", description="Folder holding workbooks and Roster.json")
    history_dir_name: str = Field(
        "History", description="Sub-folder of roster_dir for archival copies"
    )
    json_file_name: str = Field("Roster.json", description="Current JSON document name")
    table_format: Literal["csv", "parquet"] | None = Field(
        None, description="Also write a flat assignment table in this format"
    )

    @property
    def history_dir(self) -> Path:
        return Path(self.roster_dir) / self.history_dir_name


class RosterConfig(BaseModel):
    """Top-level configuration for roster-ingest.

    Maps 1:1 to rosterconfig.yaml. Every field has a default, so an
    empty ``RosterConfig()`` reproduces the stock layout rules.
    """

    parser: ParserSettings = Field(default_factory=ParserSettings)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> RosterConfig:
    """Load and validate rosterconfig.yaml into a RosterConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must hold a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return RosterConfig.model_validate(raw)


def save_config(config: RosterConfig, path: str | Path) -> None:
    """Serialize a RosterConfig to YAML.

    Writes a human-readable YAML file with a header comment.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# roster-ingest configuration\n")
        f.write("# Edit this file to adjust layout heuristics and output folders.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
