"""
Observation Models

Pydantic schemas for normalized weather observations, plus the table-driven
mapper that turns raw Open-Meteo ``current`` / ``hourly`` sections into them.

A field the provider did not return is ``None``. Every record always carries
all fields of the schema, whichever metrics were requested.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from .metrics import FIELD_NAMES, RequestMode


# -----------------------------------------------------------------------------
# Records
# -----------------------------------------------------------------------------


class ObservationRecord(BaseModel):
    """One weather snapshot under stable, provider-independent field names."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    temperature: float | None = None
    precipitation: float | None = None
    rain: float | None = None
    windspeed: float | None = None
    winddirection: float | None = None
    apparent_temperature: float | None = None
    is_day: int | None = None
    relative_humidity: float | None = None
    showers: float | None = None
    wind_gusts: float | None = None
    snowfall: float | None = None
    weather_code: int | None = None
    surface_pressure: float | None = None
    pressure_msl: float | None = None
    cloud_cover: float | None = None

    def selected_fields(self) -> dict[str, Any]:
        """Return only the fields the provider actually returned."""
        return {name: value for name, value in self.model_dump().items() if value is not None}


class HourlyObservationRecord(ObservationRecord):
    """An observation from an hourly series, stamped with its provider time."""

    time: str


# -----------------------------------------------------------------------------
# Normalization
# -----------------------------------------------------------------------------


def _value_at(series: Any, index: int) -> Any:
    if not isinstance(series, Sequence) or isinstance(series, str):
        return None
    if index >= len(series):
        return None
    return series[index]


def normalize_current(current: Mapping[str, Any]) -> ObservationRecord:
    """Map a provider ``current`` object onto an ObservationRecord."""
    values = {field: current.get(metric.value) for metric, field in FIELD_NAMES.items()}
    return ObservationRecord(**values)


def normalize_hourly(hourly: Mapping[str, Any]) -> list[HourlyObservationRecord]:
    """
    Map a provider ``hourly`` object of parallel arrays onto records.

    One record per entry of ``hourly["time"]``, in provider order. Each
    metric value is read at the same index; a missing array or a short one
    yields ``None`` for that field. A ``time`` entry that is not a list
    yields no records.
    """
    times = hourly.get("time")
    if not isinstance(times, list):
        times = []
    records: list[HourlyObservationRecord] = []
    for index, time in enumerate(times):
        values = {
            field: _value_at(hourly.get(metric.value), index)
            for metric, field in FIELD_NAMES.items()
        }
        records.append(HourlyObservationRecord(time=time, **values))
    return records


def map_weather_data(
    data: Mapping[str, Any], mode: RequestMode | str
) -> ObservationRecord | list[HourlyObservationRecord]:
    """Normalize the section of a provider response selected by ``mode``."""
    mode = RequestMode.parse(mode)
    if mode is RequestMode.CURRENT:
        return normalize_current(data[RequestMode.CURRENT.value])
    return normalize_hourly(data[RequestMode.HOURLY.value])
