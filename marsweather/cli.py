"""CLI entry point for Mars weather charts and summaries."""

import argparse
import json
import logging
from pathlib import Path

import httpx
import yaml

from marsweather.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from marsweather.config.schema import AppConfig
from marsweather.ingest.rems_client import RemsClient
from marsweather.ingest.report_loader import load_reports
from marsweather.models.common import TimeRange, WeatherDetail
from marsweather.models.errors import MarsWeatherError
from marsweather.presentation.details import WeatherDetailsState
from marsweather.reporting.formatters import (
    format_chart_json,
    format_chart_text,
    format_details_text,
    format_summary_text,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "marsweather.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="marsweather",
        description="Curiosity REMS weather charts and summaries",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    view_opts = argparse.ArgumentParser(add_help=False)
    view_opts.add_argument("--reports", help="Saved feed JSON path")
    view_opts.add_argument(
        "--detail", choices=[d.value for d in WeatherDetail], help="Weather detail"
    )
    view_opts.add_argument(
        "--range", dest="time_range",
        choices=[r.value for r in TimeRange], help="Time range",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("summary", parents=[view_opts], help="Show detail summary")
    chart_p = sub.add_parser("chart", parents=[view_opts], help="Show chart points")
    chart_p.add_argument("--format", choices=["text", "json"], default="text")
    sub.add_parser("details", parents=[view_opts], help="Describe a detail")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Download the REMS feed")
    fetch_p.add_argument("--output", help="Where to save the feed JSON")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config)
    try:
        config = load_config(config_path) if config_path.exists() else AppConfig()
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid config {config_path}: {e}")
        return 1

    if args.command in ("summary", "chart", "details"):
        return _cmd_view(config, args)
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _build_state(config: AppConfig, args) -> WeatherDetailsState:
    display = config.display
    reports = []
    if args.command != "details":
        reports = load_reports(args.reports or config.source.reports_path)
    return WeatherDetailsState.create(
        detail=WeatherDetail(args.detail or display.detail),
        reports=reports,
        time_range=TimeRange(args.time_range or display.time_range),
        toggles=display.toggles(),
    )


def _cmd_view(config: AppConfig, args) -> int:
    try:
        state = _build_state(config, args)
        if args.command == "summary":
            print(format_summary_text(state))
        elif args.command == "chart":
            points = state.chart_data
            if args.format == "json":
                print(format_chart_json(points))
            else:
                print(format_chart_text(points))
        else:
            print(format_details_text(state))
        return 0
    except (MarsWeatherError, OSError, json.JSONDecodeError) as e:
        print(f"Error: {e}")
        return 1


def _cmd_fetch(config: AppConfig, args) -> int:
    client = RemsClient(
        base_url=config.source.api_url,
        user_agent=config.source.user_agent,
        timeout=config.source.timeout_seconds,
    )
    output = Path(args.output or config.source.reports_path)
    try:
        payload = client.get_feed()
    except httpx.HTTPError:
        logger.exception("Failed to fetch REMS feed from %s", client.base_url)
        return 1
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(payload))
    print(f"Saved {len(payload.get('soles', []))} reports to {output}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    if args.config_command != "set":
        print("Use: config show | config set key=value")
        return 1

    key, sep, value = args.keyvalue.partition("=")
    key = key.strip()
    if not sep or not key:
        print("Error: use key=value format")
        return 1
    try:
        new_config = set_config_value(config, key, value.strip())
    except (KeyError, TypeError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    save_config(new_config, args.config)
    logger.info("Saved config to %s", args.config)
    print(f"Set {key} = {get_config_value(new_config, key)}")
    return 0
