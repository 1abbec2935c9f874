"""Map reports into chart points for each weather detail."""

import logging
from collections.abc import Sequence
from datetime import date

from marsweather.ingest.date_parsing import parse_daylight_time
from marsweather.models.chart import ChartPoint, SeriesKind, SeriesToggles
from marsweather.models.common import WeatherDetail
from marsweather.models.report import RawReading, Report

logger = logging.getLogger(__name__)

MISSING_LABELS = frozenset({"", "--"})


def parse_reading(value: RawReading) -> int | None:
    """Parse an integer sensor reading such as "-80". None if not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return None


def build_temperature_series(
    reports: Sequence[Report], show_air: bool, show_ground: bool
) -> list[ChartPoint]:
    """Max/min air and ground temperature points, in report order.

    A report whose max or min reading doesn't parse contributes nothing to
    that pair; the rest of the series is unaffected.
    """
    points: list[ChartPoint] = []
    for report in reports:
        day = report.terrestrial_date
        if show_air:
            points.extend(_temperature_pair(
                report, day, report.max_temp, report.min_temp,
                SeriesKind.MAX_AIR_TEMP, SeriesKind.MIN_AIR_TEMP,
            ))
        if show_ground:
            points.extend(_temperature_pair(
                report, day, report.max_gts_temp, report.min_gts_temp,
                SeriesKind.MAX_GROUND_TEMP, SeriesKind.MIN_GROUND_TEMP,
            ))
    return points


def _temperature_pair(
    report: Report,
    day: date,
    raw_max: RawReading,
    raw_min: RawReading,
    max_kind: SeriesKind,
    min_kind: SeriesKind,
) -> list[ChartPoint]:
    max_value = parse_reading(raw_max)
    min_value = parse_reading(raw_min)
    if max_value is None or min_value is None:
        logger.debug(
            "Sol %d: skipping %s/%s (%r, %r)",
            report.sol, max_kind, min_kind, raw_max, raw_min,
        )
        return []
    return [
        ChartPoint(x_axis=day, y_axis=max_value, series=max_kind),
        ChartPoint(x_axis=day, y_axis=min_value, series=min_kind),
    ]


def build_daylight_series(
    reports: Sequence[Report], show_sunrise: bool, show_sunset: bool
) -> list[ChartPoint]:
    """Sunrise and sunset time-of-day points. Unparseable times are skipped."""
    points: list[ChartPoint] = []
    for report in reports:
        if show_sunrise:
            points.extend(_time_point(report, report.sunrise, SeriesKind.SUNRISE))
        if show_sunset:
            points.extend(_time_point(report, report.sunset, SeriesKind.SUNSET))
    return points


def _time_point(report: Report, raw: str, kind: SeriesKind) -> list[ChartPoint]:
    parsed = parse_daylight_time(raw)
    if parsed is None:
        logger.debug("Sol %d: skipping %s %r", report.sol, kind, raw)
        return []
    return [ChartPoint(x_axis=report.terrestrial_date, y_axis=parsed, series=kind)]


def build_pressure_series(reports: Sequence[Report]) -> list[ChartPoint]:
    points: list[ChartPoint] = []
    for report in reports:
        value = parse_reading(report.pressure)
        if value is None:
            logger.debug("Sol %d: skipping pressure %r", report.sol, report.pressure)
            continue
        points.append(ChartPoint(
            x_axis=report.terrestrial_date, y_axis=value, series=SeriesKind.PRESSURE,
        ))
    return points


def build_irradiance_series(reports: Sequence[Report]) -> list[ChartPoint]:
    return _label_series(reports, "uv_irradiance_index", SeriesKind.IRRADIANCE)


def build_conditions_series(reports: Sequence[Report]) -> list[ChartPoint]:
    return _label_series(reports, "atmo_opacity", SeriesKind.CONDITIONS)


def _label_series(
    reports: Sequence[Report], attr: str, kind: SeriesKind
) -> list[ChartPoint]:
    # Labels are categorical ("Moderate", "Sunny"); blanks and "--" are gaps
    points: list[ChartPoint] = []
    for report in reports:
        label = (getattr(report, attr) or "").strip()
        if label in MISSING_LABELS:
            continue
        points.append(ChartPoint(
            x_axis=report.terrestrial_date, y_axis=label, series=kind,
        ))
    return points


def build_chart_data(
    detail: WeatherDetail, reports: Sequence[Report], toggles: SeriesToggles
) -> list[ChartPoint]:
    """Chart points for a weather detail, honouring the series toggles."""
    if detail == WeatherDetail.TEMPERATURE:
        return build_temperature_series(
            reports, toggles.show_air_temp, toggles.show_ground_temp
        )
    elif detail == WeatherDetail.DAYLIGHT:
        return build_daylight_series(
            reports, toggles.show_sunrise, toggles.show_sunset
        )
    elif detail == WeatherDetail.PRESSURE:
        return build_pressure_series(reports)
    elif detail == WeatherDetail.IRRADIANCE:
        return build_irradiance_series(reports)
    elif detail == WeatherDetail.CONDITIONS:
        return build_conditions_series(reports)
    else:
        raise ValueError(f"Unknown weather detail: {detail}")
