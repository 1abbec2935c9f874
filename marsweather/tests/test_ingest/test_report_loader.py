"""Tests for parsing REMS feed records into reports."""

import json
from datetime import date
from pathlib import Path

import pytest

from marsweather.charts.series import (
    build_conditions_series,
    build_irradiance_series,
    build_temperature_series,
)
from marsweather.ingest.report_loader import load_reports, parse_report, parse_reports
from marsweather.models.errors import ReportParseError
from marsweather.models.report import PressureRelative


def _raw(**overrides) -> dict:
    raw = {
        "terrestrial_date": "2023-09-05",
        "sol": "3945",
        "min_temp": "-80",
        "max_temp": "-18",
        "min_gts_temp": "-84",
        "max_gts_temp": "-5",
        "pressure": "739",
        "pressure_string": "Higher",
        "sunrise": "06:00",
        "sunset": "18:30",
        "atmo_opacity": "Sunny",
        "local_uv_irradiance_index": "Moderate",
    }
    raw.update(overrides)
    return raw


class TestParseReport:
    def test_valid(self):
        report = parse_report(_raw())
        assert report.sol == 3945
        assert report.terrestrial_date == date(2023, 9, 5)
        assert report.max_temp == "-18"
        assert report.pressure_relative == PressureRelative.HIGHER
        assert report.uv_irradiance_index == "Moderate"

    def test_missing_readings_default_to_placeholder(self):
        raw = _raw()
        del raw["min_gts_temp"]
        report = parse_report(raw)
        assert report.min_gts_temp == "--"

    def test_missing_required_key(self):
        raw = _raw()
        del raw["sunrise"]
        with pytest.raises(ReportParseError, match="sunrise"):
            parse_report(raw)

    def test_bad_date(self):
        with pytest.raises(ReportParseError, match="terrestrial_date"):
            parse_report(_raw(terrestrial_date="2023/09/05"))

    def test_not_an_object(self):
        with pytest.raises(ReportParseError, match="Expected an object"):
            parse_report("garbage")

    def test_bad_sol(self):
        with pytest.raises(ReportParseError, match="sol"):
            parse_report(_raw(sol="abc"))


class TestParseReports:
    def test_skips_bad_records(self):
        payload = {"soles": [_raw(), _raw(terrestrial_date="nope"), _raw(sol="3944")]}
        reports = parse_reports(payload)
        assert [r.sol for r in reports] == [3945, 3944]

    def test_empty_payload(self):
        assert parse_reports({}) == []

    def test_null_soles(self):
        assert parse_reports({"soles": None}) == []

    def test_non_object_records_skipped(self):
        payload = {"soles": ["garbage", None, 42, _raw()]}
        reports = parse_reports(payload)
        assert [r.sol for r in reports] == [3945]

    def test_null_labels_become_blank(self):
        raw = _raw(atmo_opacity=None, local_uv_irradiance_index=None, season=None)
        report = parse_reports({"soles": [raw]})[0]
        assert report.atmo_opacity == ""
        assert report.uv_irradiance_index == ""
        assert build_conditions_series([report]) == []
        assert build_irradiance_series([report]) == []

    def test_null_readings_become_placeholder(self):
        raw = _raw(min_temp=None, pressure=None, pressure_string=None)
        report = parse_reports({"soles": [raw]})[0]
        assert report.min_temp == "--"
        assert report.pressure == "--"
        assert report.pressure_relative == PressureRelative.NORMAL
        assert build_temperature_series([report], True, False) == []

    def test_zero_reading_kept(self):
        report = parse_report(_raw(max_gts_temp=0))
        assert report.max_gts_temp == 0


class TestLoadReports:
    def test_fixture_file(self, feed_path: Path):
        reports = load_reports(feed_path)
        # the record with an invalid date is dropped, placeholders are kept
        assert [r.sol for r in reports] == [3945, 3944, 3943]
        assert reports[0].terrestrial_date > reports[1].terrestrial_date

    def test_roundtrip_written_file(self, tmp_path: Path):
        path = tmp_path / "feed.json"
        path.write_text(json.dumps({"soles": [_raw()]}))
        assert len(load_reports(path)) == 1
