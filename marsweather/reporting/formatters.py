"""Output formatters for chart data and detail summaries."""

import json
from collections.abc import Sequence
from datetime import time

from marsweather.ingest.date_parsing import DateFormat, format_date
from marsweather.models.chart import ChartPoint
from marsweather.presentation.details import WeatherDetailsState


def _y_value(point: ChartPoint) -> int | str:
    if isinstance(point.y_axis, time):
        return point.y_axis.strftime("%H:%M")
    return point.y_axis


def format_chart_text(points: Sequence[ChartPoint]) -> str:
    """Plain text table, one point per line."""
    if not points:
        return "(no chart data)"
    width = max(len(p.series) for p in points)
    return "\n".join(
        f"{p.x_axis.isoformat()}  {p.series:<{width}}  {_y_value(p)}"
        for p in points
    )


def format_chart_json(points: Sequence[ChartPoint]) -> str:
    """JSON array for programmatic consumption."""
    data = [
        {
            "x_axis": p.x_axis.isoformat(),
            "y_axis": _y_value(p),
            "series": p.series.value,
        }
        for p in points
    ]
    return json.dumps(data, indent=2)


def format_summary_text(state: WeatherDetailsState) -> str:
    """Summary block for the selected detail and time range."""
    selected = state.selected_reports
    lines = [
        f"=== {state.detail.value.title()} | {state.time_range.value} ===",
        f"Reports: {len(selected)}",
    ]
    if selected:
        oldest, newest = selected[-1], selected[0]
        first = format_date(oldest.terrestrial_date, DateFormat.ABBREVIATED)
        last = format_date(newest.terrestrial_date, DateFormat.ABBREVIATED)
        lines.append(f"Sols: {oldest.sol}-{newest.sol} ({first} to {last})")
    lines.append(f"{state.summary_title}: {state.summary}")
    return "\n".join(lines)


def format_details_text(state: WeatherDetailsState) -> str:
    return "\n".join([
        f"{state.detail.value.title()} [{state.icon}]",
        "",
        state.description,
    ])
