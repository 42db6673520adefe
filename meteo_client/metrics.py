"""
Open-Meteo metric catalogue.

The closed set of weather quantities the client can request, and the table
that maps each provider field name to the stable name exposed to callers.
https://open-meteo.com/en/docs
"""

from __future__ import annotations

from enum import Enum

from .errors import ConfigurationError


class RequestMode(str, Enum):
    """Which section of the forecast endpoint a request asks for."""

    CURRENT = "current"
    HOURLY = "hourly"

    @classmethod
    def parse(cls, value: str | RequestMode) -> RequestMode:
        try:
            return cls(value)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown request mode {value!r}", cause=exc) from exc


class WeatherMetric(str, Enum):
    """A weather quantity, valued by its provider-side identifier."""

    TEMPERATURE = "temperature_2m"
    PRECIPITATION = "precipitation"
    RAIN = "rain"
    WIND_SPEED = "wind_speed_10m"
    WIND_DIRECTION = "wind_direction_10m"
    APPARENT_TEMPERATURE = "apparent_temperature"
    IS_DAY = "is_day"
    RELATIVE_HUMIDITY = "relative_humidity_2m"
    SHOWERS = "showers"
    WIND_GUSTS = "wind_gusts_10m"
    SNOWFALL = "snowfall"
    WEATHER_CODE = "weather_code"
    SURFACE_PRESSURE = "surface_pressure"
    PRESSURE_MSL = "pressure_msl"
    CLOUD_COVER = "cloud_cover"

    @property
    def field_name(self) -> str:
        """Name of this metric in normalized observation records."""
        return FIELD_NAMES[self]

    @classmethod
    def parse(cls, value: str | WeatherMetric) -> WeatherMetric:
        """
        Resolve a metric from its provider id, member name or field name.

        ``"temperature_2m"``, ``"TEMPERATURE"`` and ``"temperature"`` all
        resolve to ``WeatherMetric.TEMPERATURE``.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for metric in cls:
            if text in (metric.value, metric.name.lower(), metric.field_name):
                return metric
        raise ValueError(f"Unknown weather metric: {value!r}")


# Provider field name -> normalized record field name.
FIELD_NAMES: dict[WeatherMetric, str] = {
    WeatherMetric.TEMPERATURE: "temperature",
    WeatherMetric.PRECIPITATION: "precipitation",
    WeatherMetric.RAIN: "rain",
    WeatherMetric.WIND_SPEED: "windspeed",
    WeatherMetric.WIND_DIRECTION: "winddirection",
    WeatherMetric.APPARENT_TEMPERATURE: "apparent_temperature",
    WeatherMetric.IS_DAY: "is_day",
    WeatherMetric.RELATIVE_HUMIDITY: "relative_humidity",
    WeatherMetric.SHOWERS: "showers",
    WeatherMetric.WIND_GUSTS: "wind_gusts",
    WeatherMetric.SNOWFALL: "snowfall",
    WeatherMetric.WEATHER_CODE: "weather_code",
    WeatherMetric.SURFACE_PRESSURE: "surface_pressure",
    WeatherMetric.PRESSURE_MSL: "pressure_msl",
    WeatherMetric.CLOUD_COVER: "cloud_cover",
}
