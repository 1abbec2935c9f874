"""Shared test fixtures."""

from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path

import pytest
import yaml

from marsweather.models.report import PressureRelative, Report

LATEST_DATE = date(2023, 9, 5)
LATEST_SOL = 3945


def make_report(
    sol: int = LATEST_SOL,
    terrestrial_date: date = LATEST_DATE,
    min_temp: str | int = "-80",
    max_temp: str | int = "-18",
    min_gts_temp: str | int = "-84",
    max_gts_temp: str | int = "-5",
    pressure: str = "739",
    pressure_relative: PressureRelative = PressureRelative.NORMAL,
    sunrise: str = "06:00",
    sunset: str = "18:30",
    atmo_opacity: str = "Sunny",
    uv_irradiance_index: str = "Moderate",
) -> Report:
    return Report(
        sol=sol,
        terrestrial_date=terrestrial_date,
        min_temp=min_temp,
        max_temp=max_temp,
        min_gts_temp=min_gts_temp,
        max_gts_temp=max_gts_temp,
        pressure=pressure,
        pressure_relative=pressure_relative,
        sunrise=sunrise,
        sunset=sunset,
        season="Month 3",
        atmo_opacity=atmo_opacity,
        uv_irradiance_index=uv_irradiance_index,
    )


@pytest.fixture
def report_factory() -> Callable[..., Report]:
    return make_report


@pytest.fixture
def history() -> list[Report]:
    """800 daily reports, newest first, index 0 is sol 3945."""
    return [
        make_report(
            sol=LATEST_SOL - i,
            terrestrial_date=LATEST_DATE - timedelta(days=i),
        )
        for i in range(800)
    ]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def feed_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "rems_feed.json"


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "source": {"timeout_seconds": 10.0},
        "display": {"detail": "daylight", "time_range": "year"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
