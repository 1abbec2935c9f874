"""Common enums shared across models."""

from enum import StrEnum


class TimeRange(StrEnum):
    THREE_MONTH = "three_month"
    SIX_MONTH = "six_month"
    YEAR = "year"
    TWO_YEAR = "two_year"
    ALL = "all"

    @property
    def limit(self) -> int | None:
        """Number of most recent reports covered, or None for every report."""
        return _TIME_RANGE_LIMITS[self]


_TIME_RANGE_LIMITS: dict[TimeRange, int | None] = {
    TimeRange.THREE_MONTH: 90,
    TimeRange.SIX_MONTH: 180,
    TimeRange.YEAR: 365,
    TimeRange.TWO_YEAR: 730,
    TimeRange.ALL: None,
}


class WeatherDetail(StrEnum):
    TEMPERATURE = "temperature"
    DAYLIGHT = "daylight"
    CONDITIONS = "conditions"
    PRESSURE = "pressure"
    IRRADIANCE = "irradiance"
