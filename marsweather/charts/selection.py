"""Time range selection over a newest-first report list."""

from collections.abc import Sequence

from marsweather.models.common import TimeRange
from marsweather.models.errors import OutOfRangeError
from marsweather.models.report import Report


def select_reports(reports: Sequence[Report], time_range: TimeRange) -> list[Report]:
    """Return the most recent reports covered by the time range.

    Reports are expected newest first, so a range is a fixed-size prefix,
    not a date query. Raises OutOfRangeError if there are fewer reports
    than the range needs.
    """
    limit = time_range.limit
    if limit is None:
        return list(reports)
    if len(reports) < limit:
        raise OutOfRangeError(time_range.value, limit, len(reports))
    return list(reports[:limit])


def available_time_ranges(reports: Sequence[Report]) -> list[TimeRange]:
    """Time ranges that can be selected for these reports without error."""
    return [
        r for r in TimeRange
        if r.limit is None or r.limit <= len(reports)
    ]
