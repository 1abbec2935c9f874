"""Parsing and display formatting for REMS dates and daylight times."""

import logging
from datetime import date, datetime, time
from enum import StrEnum

logger = logging.getLogger(__name__)

TERRESTRIAL_DATE_FORMAT = "%Y-%m-%d"
DAYLIGHT_TIME_FORMAT = "%H:%M"


class DateFormat(StrEnum):
    FULL = "full"  # June 1, 2023
    ABBREVIATED = "abbreviated"  # Jun 1, 2023


def parse_fixed_date(value: str) -> date | None:
    """Parse a yyyy-MM-dd terrestrial date. Returns None if it doesn't match."""
    try:
        return datetime.strptime(value, TERRESTRIAL_DATE_FORMAT).date()
    except (ValueError, TypeError):
        logger.debug("Could not parse terrestrial date %r", value)
        return None


def parse_daylight_time(value: str) -> time | None:
    """Parse an HH:MM sunrise/sunset time. Returns None if it doesn't match."""
    try:
        return datetime.strptime(value, DAYLIGHT_TIME_FORMAT).time()
    except (ValueError, TypeError):
        logger.debug("Could not parse daylight time %r", value)
        return None


def format_date(
    value: date | str,
    fmt: DateFormat = DateFormat.FULL,
    today: date | None = None,
) -> str:
    """Format a date for display.

    Strings are parsed as yyyy-MM-dd first; one that doesn't parse falls
    back to today's date in the full format.
    """
    if isinstance(value, str):
        parsed = parse_fixed_date(value)
        if parsed is None:
            return _render(today or date.today(), DateFormat.FULL)
        value = parsed
    return _render(value, fmt)


def _render(d: date, fmt: DateFormat) -> str:
    month = d.strftime("%b" if fmt == DateFormat.ABBREVIATED else "%B")
    return f"{month} {d.day}, {d.year}"
