"""Summary values shown under each weather detail chart."""

import logging
from collections.abc import Sequence
from datetime import datetime

from marsweather.charts.series import build_temperature_series
from marsweather.ingest.date_parsing import parse_daylight_time
from marsweather.models.chart import ChartPoint, SeriesToggles
from marsweather.models.common import WeatherDetail
from marsweather.models.report import Report

logger = logging.getLogger(__name__)

NO_DATA = "No data"

STATIC_SUMMARIES = {
    WeatherDetail.CONDITIONS: "Conditions Summary",
    WeatherDetail.PRESSURE: "Pressure Summary",
    WeatherDetail.IRRADIANCE: "Irradiance Summary",
}


def summarize(
    detail: WeatherDetail, reports: Sequence[Report], toggles: SeriesToggles
) -> str:
    """Summary text for the given detail over the selected reports."""
    if detail == WeatherDetail.TEMPERATURE:
        points = build_temperature_series(
            reports, toggles.show_air_temp, toggles.show_ground_temp
        )
        average = average_temperature(points)
        if average is None:
            return NO_DATA
        return f"{average:.1f} °C"
    elif detail == WeatherDetail.DAYLIGHT:
        minutes = average_daylight_minutes(reports)
        if minutes is None:
            return NO_DATA
        return format_minutes(minutes)
    elif detail in STATIC_SUMMARIES:
        return STATIC_SUMMARIES[detail]
    else:
        raise ValueError(f"Unknown weather detail: {detail}")


def average_temperature(points: Sequence[ChartPoint]) -> float | None:
    """Mean of every point's value, max and min series alike.

    Returns None for an empty series.
    """
    if not points:
        return None
    return sum(p.y_axis for p in points) / len(points)


def daylight_minutes(report: Report) -> int | None:
    """Whole minutes from sunrise to sunset, or None if either is unusable."""
    sunrise = parse_daylight_time(report.sunrise)
    sunset = parse_daylight_time(report.sunset)
    if sunrise is None or sunset is None:
        return None
    day = report.terrestrial_date
    elapsed = datetime.combine(day, sunset) - datetime.combine(day, sunrise)
    minutes = int(elapsed.total_seconds()) // 60
    if minutes < 0:
        logger.debug(
            "Sol %d: sunset %s before sunrise %s", report.sol, sunset, sunrise
        )
        return None
    return minutes


def average_daylight_minutes(reports: Sequence[Report]) -> int | None:
    """Average daylight per report, truncated to whole minutes.

    Minutes are summed across contributing reports before dividing. Reports
    with unusable times are left out of both the sum and the count.
    """
    total = 0
    count = 0
    for report in reports:
        minutes = daylight_minutes(report)
        if minutes is None:
            logger.debug("Sol %d: excluded from daylight average", report.sol)
            continue
        total += minutes
        count += 1
    if count == 0:
        return None
    return total // count


def format_minutes(minutes: int) -> str:
    """Render minutes as "H Hours M Minutes", dropping a zero part."""
    hours, minutes = divmod(minutes, 60)
    if hours < 1:
        return f"{minutes} Minutes"
    elif minutes == 0:
        return f"{hours} Hours"
    return f"{hours} Hours {minutes} Minutes"
