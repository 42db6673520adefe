"""
Open-Meteo Weather Client

Fetches current and hourly historical observations for one coordinate from
the Open-Meteo forecast endpoint.

The client:
1. Holds the coordinate and the selected metrics
2. Builds a deterministic, percent-encoded request URL
3. Performs a single blocking GET through an httpx client
4. Validates the response and normalizes it into observation records

There is no caching, no retry, and no recovery. A fetch either returns a
fully normalized result or raises ApiRequestError.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError

from .config import HTTP_TIMEOUT_SECONDS, OPEN_METEO_FORECAST_URL
from .errors import ApiRequestError
from .metrics import RequestMode, WeatherMetric
from .models import (
    HourlyObservationRecord,
    ObservationRecord,
    normalize_current,
    normalize_hourly,
)

logger = logging.getLogger(__name__)

CURRENT_REQUEST_FAILED = "Error al obtener los datos del clima actual"
CURRENT_DATA_MISSING = "La API no devolvió datos de clima actual"
HISTORICAL_REQUEST_FAILED = "Error al obtener los datos históricos del clima"
HISTORICAL_DATA_MISSING = "La API no devolvió datos históricos del clima"


def format_coordinate(value: float) -> str:
    """Render a coordinate as a plain decimal, never in exponent notation."""
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = f"{value:.10f}".rstrip("0").rstrip(".")
    return text


def format_date(value: dt.date | dt.datetime | str) -> str:
    """
    Render a calendar date as ``YYYY-MM-DD``.

    Datetimes are truncated to their own date; no timezone conversion is
    applied. Strings must be ISO 8601 dates or datetimes.
    """
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    try:
        return dt.datetime.fromisoformat(value).date().isoformat()
    except ValueError as exc:
        raise ValueError(f"Invalid date {value!r}. Expected YYYY-MM-DD.") from exc


def _error_reason(response: httpx.Response) -> str | None:
    """Best-effort extraction of the provider's error explanation."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or None
    if isinstance(body, dict):
        return body.get("reason") or body.get("error")
    return None


class WeatherClient:
    """
    Client for the Open-Meteo forecast endpoint bound to one coordinate.

    The coordinate is fixed at construction. The metric selection starts
    empty and is replaced wholesale by every call to ``set_metrics``.

    Not thread-safe: do not change the metric selection while a fetch is
    in flight.
    """

    def __init__(
        self,
        lat: float,
        lng: float,
        *,
        http_client: httpx.Client | None = None,
        base_url: str = OPEN_METEO_FORECAST_URL,
    ) -> None:
        self._lat = float(lat)
        self._lng = float(lng)
        self.base_url = base_url
        self._metrics: tuple[WeatherMetric, ...] = ()
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lng(self) -> float:
        return self._lng

    @property
    def metrics(self) -> tuple[WeatherMetric, ...]:
        """Currently selected metrics, in selection order."""
        return self._metrics

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=HTTP_TIMEOUT_SECONDS)
        return self._client

    def close(self) -> None:
        """Clean up the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def set_metrics(self, *metrics: WeatherMetric | str | Iterable[WeatherMetric | str]) -> None:
        """
        Replace the metric selection.

        Accepts metrics as positional arguments or as a single iterable.
        Duplicates are dropped, keeping the first occurrence. An empty
        selection is accepted and left for the provider to judge.
        """
        if len(metrics) == 1 and not isinstance(metrics[0], str):
            metrics = tuple(metrics[0])

        selected: list[WeatherMetric] = []
        for item in metrics:
            metric = WeatherMetric.parse(item)
            if metric not in selected:
                selected.append(metric)
        self._metrics = tuple(selected)

    def build_request_url(
        self,
        mode: RequestMode | str,
        extra_params: Mapping[str, Any] | None = None,
    ) -> str:
        """
        Build the GET URL for a request.

        Parameter order is fixed: ``latitude``, ``longitude``, the mode
        parameter holding the comma-joined metric ids, then ``extra_params``
        in mapping order. Every value is percent-encoded; commas separating
        metric ids are kept literal.
        """
        mode = RequestMode.parse(mode)
        params: list[tuple[str, str]] = [
            ("latitude", format_coordinate(self._lat)),
            ("longitude", format_coordinate(self._lng)),
            (mode.value, ",".join(metric.value for metric in self._metrics)),
        ]
        for key, value in (extra_params or {}).items():
            params.append((str(key), str(value)))

        return f"{self.base_url}?{urlencode(params, safe=',', quote_via=quote)}"

    def fetch_current(self) -> ObservationRecord:
        """Fetch the latest observation for the coordinate."""
        url = self.build_request_url(RequestMode.CURRENT)
        data = self._get_json(url, CURRENT_REQUEST_FAILED)

        current = data.get(RequestMode.CURRENT.value)
        if not isinstance(current, Mapping):
            raise ApiRequestError(CURRENT_DATA_MISSING)

        try:
            record = normalize_current(current)
        except ValidationError as e:
            raise ApiRequestError(CURRENT_REQUEST_FAILED, cause=e) from e

        logger.debug("Normalized current observation at (%s, %s)", self._lat, self._lng)
        return record

    def fetch_historical(
        self,
        start_date: dt.date | dt.datetime | str,
        end_date: dt.date | dt.datetime | str,
    ) -> list[HourlyObservationRecord]:
        """
        Fetch hourly observations between two calendar dates, inclusive.

        Returns one record per provider timestamp, in provider order.
        """
        extra_params = {
            "start_date": format_date(start_date),
            "end_date": format_date(end_date),
        }
        url = self.build_request_url(RequestMode.HOURLY, extra_params)
        data = self._get_json(url, HISTORICAL_REQUEST_FAILED)

        hourly = data.get(RequestMode.HOURLY.value)
        if not isinstance(hourly, Mapping):
            raise ApiRequestError(HISTORICAL_DATA_MISSING)

        try:
            records = normalize_hourly(hourly)
        except ValidationError as e:
            raise ApiRequestError(HISTORICAL_REQUEST_FAILED, cause=e) from e

        logger.debug(
            "Normalized %d hourly observations for %s..%s",
            len(records),
            extra_params["start_date"],
            extra_params["end_date"],
        )
        return records

    def _get_json(self, url: str, error_message: str) -> Mapping[str, Any]:
        """
        Perform the GET and decode the body.

        Any transport error, non-2xx status, or undecodable body raises
        ApiRequestError carrying ``error_message``. A body that decodes to
        something other than an object is returned as an empty mapping so
        the caller reports the missing section.
        """
        logger.debug("GET %s", url)
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Open-Meteo request failed: %s", e)
            raise ApiRequestError(error_message, cause=e) from e

        if not response.is_success:
            logger.warning(
                "Open-Meteo returned HTTP %s: %s",
                response.status_code,
                _error_reason(response),
            )
            raise ApiRequestError(error_message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Open-Meteo returned a non-JSON body")
            raise ApiRequestError(
                error_message, status_code=response.status_code, cause=e
            ) from e

        if not isinstance(data, Mapping):
            return {}
        return data
