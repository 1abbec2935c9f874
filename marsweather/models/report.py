"""Daily REMS weather report model."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class PressureRelative(StrEnum):
    HIGHER = "Higher"
    LOWER = "Lower"
    NORMAL = "Normal"

    @classmethod
    def from_label(cls, label: str | None) -> "PressureRelative":
        """Map the feed's pressure_string; anything unrecognised is Normal."""
        for member in cls:
            if isinstance(label, str) and label.strip().lower() == member.value.lower():
                return member
        return cls.NORMAL


# Temperatures arrive as strings ("-80", or "--" when missing) or ints
RawReading = str | int


@dataclass(frozen=True)
class Report:
    sol: int
    terrestrial_date: date
    min_temp: RawReading
    max_temp: RawReading
    min_gts_temp: RawReading
    max_gts_temp: RawReading
    pressure: str
    pressure_relative: PressureRelative
    sunrise: str  # HH:MM
    sunset: str  # HH:MM
    season: str = ""
    atmo_opacity: str = ""
    uv_irradiance_index: str = ""

    @property
    def pressure_label(self) -> str:
        return f"{self.pressure} Pa"
