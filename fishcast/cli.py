"""CLI entry point for the fishing conditions engine."""

import argparse
import asyncio
import json
import logging
from pathlib import Path

import yaml

from fishcast.config.loader import (
    default_config,
    get_config_value,
    load_config,
    set_config_value,
)
from fishcast.config.schema import FishcastConfig
from fishcast.ingest.coordinator import AcquisitionCoordinator
from fishcast.models.common import ALL_SPECIES, Species
from fishcast.reporting.formatters import (
    format_catalog_json,
    format_catalog_text,
    format_forecast_text,
)
from fishcast.scoring.catalog import conditions_for_day, score_catalog

DEFAULT_CONFIG = "fishcast.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fishcast",
        description="Fishing conditions forecast and spot ratings",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    sub.add_parser("forecast", help="Show the weather and tide forecast")

    # rate
    rate_p = sub.add_parser("rate", help="Rate every spot for one day")
    rate_p.add_argument("--date", help="Forecast date YYYY-MM-DD (default: first forecast day)")
    rate_p.add_argument(
        "--species",
        default=ALL_SPECIES,
        choices=[ALL_SPECIES, *(s.value for s in Species)],
        help="Target species",
    )
    rate_p.add_argument("--format", choices=["text", "json"], default="text")

    # spots
    sub.add_parser("spots", help="List the spot catalog")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Print the effective config or one key")
    show_p.add_argument("key", nargs="?", help="Dotted key, e.g. forecast.days")
    set_p = config_sub.add_parser("set", help="Write one key to the config file")
    set_p.add_argument("assignment", help="key=value, e.g. scoring.model=tidal")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config)
    elif args.command == "rate":
        return _cmd_rate(config, args)
    elif args.command == "spots":
        return _cmd_spots(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _load(path: str) -> FishcastConfig:
    if Path(path).exists():
        return load_config(path)
    logging.getLogger(__name__).info("No config at %s, using defaults", path)
    return default_config()


def _cmd_forecast(config: FishcastConfig) -> int:
    result = asyncio.run(AcquisitionCoordinator(config).fetch_all())
    print(f"Tide station: {config.tides.station_name} ({config.tides.station})")
    print(format_forecast_text(result))
    return 0


def _cmd_rate(config: FishcastConfig, args) -> int:
    result = asyncio.run(AcquisitionCoordinator(config).fetch_all())
    if result.error:
        print(f"WARNING: live data unavailable ({result.error}), using fallback data")

    conditions = conditions_for_day(result, args.date)
    if conditions is None:
        print(f"Error: no forecast for {args.date}")
        return 1

    date = args.date or result.days[0].date
    results = score_catalog(config.spots, conditions, args.species, config.scoring.model)
    if args.format == "json":
        print(format_catalog_json(date, args.species, results))
    else:
        names = {s.id: s.name for s in config.spots}
        print(format_catalog_text(date, args.species, results, names))
    return 0


def _cmd_spots(config: FishcastConfig) -> int:
    print(f"Spots: {len(config.spots)}")
    for s in config.spots:
        species = ", ".join(s.species)
        print(f"  {s.id}: {s.name} ({s.lat:.4f}, {s.lng:.4f}) "
              f"{s.tide_preference} tide - {species}")
    return 0


def _cmd_config(config: FishcastConfig, args) -> int:
    if args.config_command == "show":
        if args.key is None:
            print(config.model_dump_json(indent=2))
            return 0
        try:
            print(json.dumps(get_config_value(config, args.key), indent=2))
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        return 0

    if args.config_command == "set":
        key, sep, value = args.assignment.partition("=")
        key = key.strip()
        if not sep or not key:
            print("Error: expected key=value")
            return 1
        try:
            updated = set_config_value(args.config, key, value.strip())
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        except (ValueError, yaml.YAMLError) as e:
            # pydantic's ValidationError is a ValueError
            print(f"Error: invalid value for {key}: {e}")
            return 1
        print(f"Saved {key} = {json.dumps(get_config_value(updated, key))} to {args.config}")
        return 0

    print("Use: config show [key] | config set key=value")
    return 1
