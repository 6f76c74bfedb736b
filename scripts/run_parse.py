"""
Demo script: parse the current roster workbook and write Roster.json.

Usage:
    uv run python scripts/run_parse.py                          # newest workbook in Roster/
    uv run python scripts/run_parse.py --input Roster/Roster.xlsx
    uv run python scripts/run_parse.py --config rosterconfig.yaml

Fetching the workbook from the portal is done elsewhere; this script
only reads what is already on disk. Without --config, the defaults of
``RosterConfig`` apply (Roster/ for input and output, Roster/History/
for archival copies).
"""

from __future__ import annotations

import argparse
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_parse")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import roster_ingest
    from roster_ingest.exceptions import RosterIngestError

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--input", help="Workbook to parse (default: newest in roster folder)")
    parser.add_argument("--config", help="Path to rosterconfig.yaml")
    args = parser.parse_args(argv)

    try:
        written = roster_ingest.ingest(input_path=args.input, config_path=args.config)
    except (RosterIngestError, FileNotFoundError) as exc:
        log.error("Parsing failed: %s", exc)
        return 1

    if not written:
        log.info("No roster data found; nothing written.")
        return 0

    for path in written:
        log.info("  wrote %s", path)
    log.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
