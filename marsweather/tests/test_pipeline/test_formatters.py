"""Tests for chart and summary formatters."""

import json
from datetime import date, time

from marsweather.models.chart import ChartPoint, SeriesKind
from marsweather.models.common import TimeRange, WeatherDetail
from marsweather.presentation.details import WeatherDetailsState
from marsweather.reporting.formatters import (
    format_chart_json,
    format_chart_text,
    format_details_text,
    format_summary_text,
)

DAY = date(2023, 9, 5)


class TestChartFormatters:
    def test_text(self):
        points = [
            ChartPoint(x_axis=DAY, y_axis=-18, series=SeriesKind.MAX_AIR_TEMP),
            ChartPoint(x_axis=DAY, y_axis=time(6, 0), series=SeriesKind.SUNRISE),
        ]
        lines = format_chart_text(points).splitlines()
        assert lines[0].startswith("2023-09-05  max_air_temp")
        assert lines[0].endswith("-18")
        assert lines[1].endswith("06:00")

    def test_text_empty(self):
        assert format_chart_text([]) == "(no chart data)"

    def test_json(self):
        points = [ChartPoint(x_axis=DAY, y_axis=time(18, 30), series=SeriesKind.SUNSET)]
        data = json.loads(format_chart_json(points))
        assert data == [{"x_axis": "2023-09-05", "y_axis": "18:30", "series": "sunset"}]


class TestSummaryFormatters:
    def test_summary_text(self, history):
        state = WeatherDetailsState.create(WeatherDetail.TEMPERATURE, history)
        text = format_summary_text(state)
        assert "Temperature | three_month" in text
        assert "Reports: 90" in text
        assert "Sols: 3856-3945 (Jun 8, 2023 to Sep 5, 2023)" in text
        assert "Average Temperature: -49.0 °C" in text

    def test_summary_text_no_reports(self):
        state = WeatherDetailsState.create(
            WeatherDetail.DAYLIGHT, [], time_range=TimeRange.ALL
        )
        text = format_summary_text(state)
        assert "Reports: 0" in text
        assert "Sols:" not in text
        assert "Average Daylight Duration: No data" in text

    def test_details_text(self):
        state = WeatherDetailsState.create(WeatherDetail.IRRADIANCE, [])
        text = format_details_text(state)
        assert text.startswith("Irradiance [sun.max.fill]")
        assert "ultraviolet" in text
