"""
Shared test fixtures for the Open-Meteo client tests.

Provides a recording mock transport, clients wired to it, and sample
provider payloads.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from meteo_client.client import WeatherClient


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


class MockTransport(httpx.BaseTransport):
    """
    Mock transport that returns one predefined response for every request.

    Useful for testing HTTP interactions without hitting the real API.
    """

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        *,
        content: bytes | None = None,
        error: httpx.HTTPError | None = None,
    ):
        """
        Initialize mock transport with a predefined response.

        Args:
            status_code: HTTP status to answer with
            payload: JSON body to answer with
            content: Raw body, used instead of ``payload`` when given
            error: Transport error to raise instead of answering
        """
        self.status_code = status_code
        self.payload = payload
        self.content = content
        self.error = error
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------

MADRID = (40.4168, -3.7038)

MOCK_CURRENT_DATA = {
    "latitude": 40.42,
    "longitude": -3.7,
    "current_units": {"time": "iso8601", "rain": "mm", "cloud_cover": "%"},
    "current": {
        "time": "2025-04-01T12:00",
        "interval": 900,
        "rain": 0.2,
        "precipitation": 0.3,
        "cloud_cover": 87,
    },
}

MOCK_HOURLY_DATA = {
    "latitude": 40.42,
    "longitude": -3.7,
    "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
    "hourly": {
        "time": ["2025-04-01T00:00", "2025-04-01T01:00", "2025-04-01T02:00"],
        "temperature_2m": [10.0, 10.5, 9.8],
        "precipitation": [0.0, 0.1, 0.0],
    },
}

MOCK_ERROR_DATA = {
    "error": True,
    "reason": "Latitude must be in range of -90 to 90°. Given: 123.0.",
}


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def make_client():
    """Factory for clients bound to Madrid and wired to a given transport."""
    clients: list[WeatherClient] = []

    def factory(transport: MockTransport, lat: float = MADRID[0], lng: float = MADRID[1]) -> WeatherClient:
        client = WeatherClient(lat, lng, http_client=httpx.Client(transport=transport))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.client.close()


@pytest.fixture
def current_transport() -> MockTransport:
    """Transport answering every request with the current payload."""
    return MockTransport(200, MOCK_CURRENT_DATA)


@pytest.fixture
def hourly_transport() -> MockTransport:
    """Transport answering every request with the hourly payload."""
    return MockTransport(200, MOCK_HOURLY_DATA)
