"""Chart-ready data points and series visibility toggles."""

from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum


class SeriesKind(StrEnum):
    MAX_AIR_TEMP = "max_air_temp"
    MIN_AIR_TEMP = "min_air_temp"
    MAX_GROUND_TEMP = "max_ground_temp"
    MIN_GROUND_TEMP = "min_ground_temp"
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    PRESSURE = "pressure"
    IRRADIANCE = "irradiance"
    CONDITIONS = "conditions"


@dataclass(frozen=True)
class ChartPoint:
    x_axis: date
    y_axis: int | time | str
    series: SeriesKind


@dataclass(frozen=True)
class SeriesToggles:
    show_air_temp: bool = True
    show_ground_temp: bool = False
    show_sunrise: bool = True
    show_sunset: bool = False
