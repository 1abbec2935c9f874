"""Weather details screen state and the values derived from it.

The state is immutable: every user action (picking a time range, flipping a
series toggle) returns a new state, and derived values are recomputed from
the state on access. Callers decide when to recompute and whether to cache.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, fields, replace

from marsweather.charts.selection import select_reports
from marsweather.charts.series import build_chart_data, parse_reading
from marsweather.charts.summary import summarize
from marsweather.models.chart import ChartPoint, SeriesToggles
from marsweather.models.common import TimeRange, WeatherDetail
from marsweather.models.errors import ToggleError
from marsweather.models.report import PressureRelative, Report
from marsweather.presentation.descriptions import (
    DESCRIPTIONS,
    ICONS,
    SUMMARY_TITLES,
)

# Toggles that may not both be off at once
_EXCLUSIVE_PAIRS = {
    "show_sunrise": "show_sunset",
    "show_sunset": "show_sunrise",
}

PRESSURE_ICONS = {
    PressureRelative.HIGHER: "gauge.high",
    PressureRelative.LOWER: "gauge.low",
    PressureRelative.NORMAL: "gauge.medium",
}


@dataclass(frozen=True)
class WeatherDetailsState:
    detail: WeatherDetail
    reports: tuple[Report, ...]
    time_range: TimeRange = TimeRange.THREE_MONTH
    toggles: SeriesToggles = field(default_factory=SeriesToggles)

    def __post_init__(self):
        if not (self.toggles.show_sunrise or self.toggles.show_sunset):
            raise ToggleError("Sunrise and sunset cannot both be hidden")

    @classmethod
    def create(
        cls,
        detail: WeatherDetail,
        reports: Sequence[Report],
        time_range: TimeRange = TimeRange.THREE_MONTH,
        toggles: SeriesToggles | None = None,
    ) -> "WeatherDetailsState":
        return cls(
            detail=detail,
            reports=tuple(reports),
            time_range=time_range,
            toggles=toggles or SeriesToggles(),
        )

    @property
    def selected_reports(self) -> list[Report]:
        """Raises OutOfRangeError if the time range exceeds the reports."""
        return select_reports(self.reports, self.time_range)

    @property
    def chart_data(self) -> list[ChartPoint]:
        return build_chart_data(self.detail, self.selected_reports, self.toggles)

    @property
    def summary(self) -> str:
        return summarize(self.detail, self.selected_reports, self.toggles)

    @property
    def summary_title(self) -> str:
        return SUMMARY_TITLES[self.detail]

    @property
    def icon(self) -> str:
        return ICONS[self.detail]

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self.detail]

    def with_time_range(self, time_range: TimeRange) -> "WeatherDetailsState":
        return replace(self, time_range=time_range)

    def toggle(self, name: str) -> "WeatherDetailsState":
        """Flip one series toggle, e.g. "show_ground_temp".

        Sunrise and sunset can't both be hidden; hiding the last visible one
        raises ToggleError.
        """
        if name not in {f.name for f in fields(SeriesToggles)}:
            raise ToggleError(f"Unknown toggle: {name}")
        new_value = not getattr(self.toggles, name)
        partner = _EXCLUSIVE_PAIRS.get(name)
        if partner and not new_value and not getattr(self.toggles, partner):
            raise ToggleError(f"Cannot hide {name} while {partner} is hidden")
        return replace(self, toggles=replace(self.toggles, **{name: new_value}))


def temperature_bounds(reports: Sequence[Report]) -> tuple[int, int] | None:
    """Lowest min and highest max air temperature across the reports.

    Used to scale the per-row temperature bars in the report list. Returns
    None if no report has a usable reading.
    """
    lows = [v for v in (parse_reading(r.min_temp) for r in reports) if v is not None]
    highs = [v for v in (parse_reading(r.max_temp) for r in reports) if v is not None]
    if not lows or not highs:
        return None
    return min(lows), max(highs)


def pressure_icon(report: Report) -> str:
    return PRESSURE_ICONS[report.pressure_relative]
