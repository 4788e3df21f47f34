import argparse
import json
import logging
from typing import Any

from algorithms import ChartMath, InvalidUnitError, UnitConverter
from chart_service import ActivityChartService
from config import YamlConfig


def load_activities(path: str) -> list[Any]:
    """Read an exported activities JSON file (a list or ``{"all": [...]}``)."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("all") or []
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a list of activities")
    return data


def convert_value(value: float, quantity: str, unit: str) -> float:
    converters = {
        "distance": UnitConverter.convert_distance,
        "elevation": UnitConverter.convert_elevation,
        "time": UnitConverter.convert_time,
        "speed": UnitConverter.convert_speed,
    }
    return converters[quantity](value, unit)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Activity chart utilities")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    hr = sub.add_parser("heartrate")
    hr.add_argument("--activities", required=True)
    hr.add_argument("--config", default="settings.yaml")
    hr.add_argument("--units", choices=UnitConverter.UNIT_SYSTEMS)

    st = sub.add_parser("start-times")
    st.add_argument("--activities", required=True)

    ticks = sub.add_parser("ticks")
    ticks.add_argument("--min", dest="min_value", type=float, required=True)
    ticks.add_argument("--max", dest="max_value", type=float, required=True)
    ticks.add_argument("--count", type=int, default=5)

    conv = sub.add_parser("convert")
    conv.add_argument("--value", type=float, required=True)
    conv.add_argument(
        "--quantity", choices=["distance", "elevation", "time", "speed"], required=True
    )
    conv.add_argument("--unit", required=True)

    init = sub.add_parser("init-config")
    init.add_argument("--config", default="settings.yaml")
    init.add_argument("--units", choices=UnitConverter.UNIT_SYSTEMS, default=UnitConverter.METRIC)
    init.add_argument("--tick-count", type=int, default=5)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.cmd == "heartrate":
        service = ActivityChartService.from_config(args.config)
        if args.units:
            service.units = args.units
        chart = service.heart_rate_vs_speed(load_activities(args.activities))
        print(json.dumps(chart, indent=2))
    elif args.cmd == "start-times":
        data = ActivityChartService.start_times(load_activities(args.activities))
        print(json.dumps(data, indent=2))
    elif args.cmd == "ticks":
        try:
            ticks = ChartMath.calculate_ticks(args.min_value, args.max_value, args.count)
        except ValueError as exc:
            parser.error(str(exc))
        print(json.dumps(ticks))
    elif args.cmd == "convert":
        try:
            result = convert_value(args.value, args.quantity, args.unit)
        except InvalidUnitError as exc:
            parser.error(str(exc))
        print(f"{args.value} -> {round(result, 4)} ({args.unit})")
    elif args.cmd == "init-config":
        YamlConfig(args.config).save({"units": args.units, "tick_count": args.tick_count})
        print(f"Wrote {args.config}")


if __name__ == "__main__":
    main()
