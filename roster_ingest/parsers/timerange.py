"""
Compact time-range notation, e.g. ``0815-1630`` or ``08:15 - 16:30``.
"""

from __future__ import annotations

import re

from roster_ingest.models import TimeRange

_NON_DIGIT = re.compile(r"\D")


def _format_time(part: str) -> str:
    # Anything that is not exactly four digits is passed through as written.
    digits = _NON_DIGIT.sub("", part)
    if len(digits) == 4:
        return f"{digits[:2]}:{digits[2:]}"
    return part


def parse_time_range(text: str | None) -> TimeRange | None:
    """Parse ``start-end`` into a ``TimeRange``.

    Returns ``None`` for empty input or when splitting on ``-`` does not
    yield exactly two parts. Never raises.

    Examples::

        >>> parse_time_range("0815-1630")
        TimeRange(start='08:15', end='16:30')
        >>> parse_time_range("08:15 - 16:30")
        TimeRange(start='08:15', end='16:30')
        >>> parse_time_range("invalid") is None
        True
    """
    if not text:
        return None
    parts = [p.strip() for p in text.split("-")]
    if len(parts) != 2:
        return None
    start, end = parts
    return TimeRange(start=_format_time(start), end=_format_time(end))
