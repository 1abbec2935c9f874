"""Error types raised by report loading, selection and presentation state."""


class MarsWeatherError(Exception):
    """Base class for all marsweather errors."""


class ReportParseError(MarsWeatherError):
    """A feed record could not be turned into a Report."""

    def __init__(self, message: str, raw: dict | None = None):
        super().__init__(message)
        self.raw = raw or {}


class OutOfRangeError(MarsWeatherError):
    """A time range asks for more reports than are available."""

    def __init__(self, time_range: str, requested: int, available: int):
        super().__init__(
            f"Time range {time_range} needs {requested} reports, "
            f"only {available} available"
        )
        self.time_range = time_range
        self.requested = requested
        self.available = available


class ToggleError(MarsWeatherError):
    """A series toggle change would leave the chart with nothing to show."""
