"""
Client Failure Types

Every failure the weather client raises on purpose is an instance of one of
these types. Raw transport or JSON exceptions never escape a fetch; they are
wrapped and kept on ``cause``.
"""

from __future__ import annotations


class MeteoClientFailure(Exception):
    """Base class for all weather client failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ApiRequestError(MeteoClientFailure):
    """
    A fetch against the weather provider did not produce usable data.

    Raised when:
    - the transport fails (connection refused, timeout, ...)
    - the provider answers with a non-2xx status
    - the body is not valid JSON or cannot be normalized
    - the expected top-level section (``current`` / ``hourly``) is missing

    A fetch either returns a fully normalized result or raises this. There
    is no partial success.
    """

    failure_category = "api_request"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code


class ConfigurationError(MeteoClientFailure):
    """
    The environment or a caller holds a value the client cannot use.

    Raised at import time of ``meteo_client.config`` for bad environment
    values, so a bad deployment fails before the first request is built,
    and when a request mode outside ``RequestMode`` is asked for.
    """

    failure_category = "configuration_error"
