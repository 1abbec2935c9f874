"""Build Report records from the REMS weather feed payload."""

import json
import logging
from pathlib import Path

from marsweather.ingest.date_parsing import parse_fixed_date
from marsweather.models.errors import ReportParseError
from marsweather.models.report import PressureRelative, Report

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("sol", "terrestrial_date", "sunrise", "sunset")


def parse_report(raw: dict) -> Report:
    """Convert one feed record ("sole") into a Report.

    Raises ReportParseError when the record is not an object, a required key
    is missing, the sol is not an integer, or the terrestrial date is not
    yyyy-MM-dd.
    """
    if not isinstance(raw, dict):
        raise ReportParseError(f"Expected an object, got {type(raw).__name__}")

    missing = [k for k in REQUIRED_KEYS if k not in raw]
    if missing:
        raise ReportParseError(f"Missing keys: {', '.join(missing)}", raw)

    try:
        sol = int(raw["sol"])
    except (ValueError, TypeError) as e:
        raise ReportParseError(f"Invalid sol {raw['sol']!r}", raw) from e

    terrestrial_date = parse_fixed_date(raw["terrestrial_date"])
    if terrestrial_date is None:
        raise ReportParseError(
            f"Invalid terrestrial_date {raw['terrestrial_date']!r}", raw
        )

    return Report(
        sol=sol,
        terrestrial_date=terrestrial_date,
        min_temp=_reading(raw, "min_temp"),
        max_temp=_reading(raw, "max_temp"),
        min_gts_temp=_reading(raw, "min_gts_temp"),
        max_gts_temp=_reading(raw, "max_gts_temp"),
        pressure=str(_reading(raw, "pressure")),
        pressure_relative=PressureRelative.from_label(raw.get("pressure_string")),
        sunrise=str(raw["sunrise"]),
        sunset=str(raw["sunset"]),
        season=raw.get("season") or "",
        atmo_opacity=raw.get("atmo_opacity") or "",
        uv_irradiance_index=raw.get("local_uv_irradiance_index") or "",
    )


def _reading(raw: dict, key: str) -> str | int:
    # Absent and null readings both become the feed's "--" placeholder
    value = raw.get(key)
    return "--" if value is None else value


def parse_reports(payload: dict) -> list[Report]:
    """Parse every record under payload["soles"], newest first as delivered.

    Records that fail to parse are logged and skipped.
    """
    reports: list[Report] = []
    for raw in payload.get("soles") or []:
        try:
            reports.append(parse_report(raw))
        except ReportParseError as e:
            sol = raw.get("sol", "?") if isinstance(raw, dict) else "?"
            logger.warning("Skipping sol %s: %s", sol, e)
    logger.info("Parsed %d reports", len(reports))
    return reports


def load_reports(path: str | Path) -> list[Report]:
    """Load and parse reports from a saved feed JSON file."""
    with open(Path(path)) as f:
        payload = json.load(f)
    return parse_reports(payload)
