"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

from marsweather.ingest.rems_client import DEFAULT_USER_AGENT, REMS_FEED_URL
from marsweather.models.chart import SeriesToggles
from marsweather.models.common import TimeRange, WeatherDetail


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_url: str = REMS_FEED_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT
    reports_path: str = "data/rems_feed.json"


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    detail: WeatherDetail = WeatherDetail.TEMPERATURE
    time_range: TimeRange = TimeRange.THREE_MONTH
    show_air_temp: bool = True
    show_ground_temp: bool = False
    show_sunrise: bool = True
    show_sunset: bool = False

    @model_validator(mode="after")
    def _one_daylight_series_shown(self) -> "DisplayConfig":
        if not (self.show_sunrise or self.show_sunset):
            raise ValueError("show_sunrise and show_sunset cannot both be false")
        return self

    def toggles(self) -> SeriesToggles:
        return SeriesToggles(
            show_air_temp=self.show_air_temp,
            show_ground_temp=self.show_ground_temp,
            show_sunrise=self.show_sunrise,
            show_sunset=self.show_sunset,
        )


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: SourceConfig = SourceConfig()
    display: DisplayConfig = DisplayConfig()
