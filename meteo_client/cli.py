"""Command-line entry point: print current and historical weather for a coordinate."""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

from .client import WeatherClient
from .config import (
    DEFAULT_CURRENT_METRICS,
    DEFAULT_HISTORICAL_END,
    DEFAULT_HISTORICAL_METRICS,
    DEFAULT_HISTORICAL_START,
    LOG_FORMAT,
    LOG_LEVEL,
    NOT_SELECTED_LABEL,
    get_weather_description,
)
from .errors import ApiRequestError
from .metrics import WeatherMetric
from .models import HourlyObservationRecord, ObservationRecord

logger = logging.getLogger(__name__)

SEPARATOR = "-------"

# (record field, label, unit)
_FIELD_LINES: tuple[tuple[str, str, str], ...] = (
    ("temperature", "Temperatura", "°C"),
    ("precipitation", "Precipitaciones", "mm"),
    ("rain", "Lluvia", "mm"),
    ("windspeed", "Velocidad del viento", "km/h"),
    ("winddirection", "Dirección del viento", "°"),
    ("apparent_temperature", "Sensación térmica", "°C"),
    ("is_day", "Día/Noche", ""),
    ("relative_humidity", "Humedad relativa", "%"),
    ("showers", "Chubascos", "mm"),
    ("wind_gusts", "Ráfagas de viento", "km/h"),
    ("snowfall", "Nevadas", "cm"),
    ("weather_code", "Código meteorológico", ""),
    ("surface_pressure", "Presión en superficie", "hPa"),
    ("pressure_msl", "Presión a nivel del mar", "hPa"),
    ("cloud_cover", "Nubes", "%"),
)


def _format_number(value: Any) -> str:
    # 87.0 prints as 87
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_value(field: str, value: Any, unit: str) -> str:
    if value is None:
        return NOT_SELECTED_LABEL
    if field == "is_day":
        return "Día" if value == 1 else "Noche"
    if field == "weather_code":
        return f"{value} ({get_weather_description(value)})"
    text = _format_number(value)
    return f"{text} {unit}" if unit else text


def render_record(record: ObservationRecord) -> list[str]:
    """Render one record as display lines, one per field."""
    lines: list[str] = []
    if isinstance(record, HourlyObservationRecord):
        lines.append(f"Fecha: {record.time}")
    for field, label, unit in _FIELD_LINES:
        lines.append(f"{label}: {_format_value(field, getattr(record, field), unit)}")
    lines.append(SEPARATOR)
    return lines


def print_current(record: ObservationRecord, stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    print("Clima actual:", file=stream)
    for line in render_record(record):
        print(line, file=stream)


def print_historical(
    records: Sequence[HourlyObservationRecord], stream: TextIO | None = None
) -> None:
    stream = stream or sys.stdout
    print("Datos históricos:", file=stream)
    for record in records:
        for line in render_record(record):
            print(line, file=stream)


def _parse_date(value: str) -> dt.date:
    """Parse an ISO calendar date for argparse."""
    try:
        return dt.date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{value}'. Expected ISO 8601 format (YYYY-MM-DD)."
        ) from exc


def _parse_metric(value: str) -> WeatherMetric:
    try:
        return WeatherMetric.parse(value)
    except ValueError as exc:
        choices = ", ".join(metric.field_name for metric in WeatherMetric)
        raise argparse.ArgumentTypeError(f"{exc}. Choose from: {choices}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the weather CLI."""
    parser = argparse.ArgumentParser(
        prog="meteo-weather",
        description="Get current and historical weather from the Open-Meteo API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Current and historical weather for Madrid with the default metrics
  meteo-weather 40.4168 -3.7038

  # Only current temperature and wind
  meteo-weather 40.4168 -3.7038 --skip-historical --metrics temperature windspeed

  # One week of hourly temperature
  meteo-weather 40.4168 -3.7038 --skip-current \\
      --historical-metrics temperature --start 2025-04-01 --end 2025-04-07
        """,
    )
    parser.add_argument("lat", type=float, help="Latitude in decimal degrees")
    parser.add_argument("lng", type=float, help="Longitude in decimal degrees")
    parser.add_argument(
        "--metrics",
        nargs="+",
        type=_parse_metric,
        default=[WeatherMetric.parse(m) for m in DEFAULT_CURRENT_METRICS],
        help="Metrics for the current query (default: rain precipitation cloud_cover)",
    )
    parser.add_argument(
        "--historical-metrics",
        nargs="+",
        type=_parse_metric,
        default=[WeatherMetric.parse(m) for m in DEFAULT_HISTORICAL_METRICS],
        help="Metrics for the historical query (default: temperature precipitation)",
    )
    parser.add_argument(
        "--start",
        type=_parse_date,
        default=DEFAULT_HISTORICAL_START,
        help=f"First day of the historical range (default: {DEFAULT_HISTORICAL_START})",
    )
    parser.add_argument(
        "--end",
        type=_parse_date,
        default=DEFAULT_HISTORICAL_END,
        help=f"Last day of the historical range (default: {DEFAULT_HISTORICAL_END})",
    )
    parser.add_argument(
        "--skip-current", action="store_true", help="Do not query current weather"
    )
    parser.add_argument(
        "--skip-historical", action="store_true", help="Do not query historical weather"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    client_factory: Callable[[float, float], WeatherClient] = WeatherClient,
) -> int:
    """Run the CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
    )

    try:
        if not args.skip_current:
            with client_factory(args.lat, args.lng) as client:
                client.set_metrics(args.metrics)
                print_current(client.fetch_current())

        if not args.skip_historical:
            with client_factory(args.lat, args.lng) as client:
                client.set_metrics(args.historical_metrics)
                print_historical(client.fetch_historical(args.start, args.end))
    except ApiRequestError as e:
        logger.debug("Weather request failed", exc_info=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
