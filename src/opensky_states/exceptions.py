"""Custom exception hierarchy for opensky_states.

Transport failures (``aiohttp.ClientError``, timeouts) are not wrapped and
reach the caller unchanged.
"""

from __future__ import annotations


class OpenSkyError(Exception):
    """Base exception for all opensky_states errors."""


class OpenSkyConfigError(OpenSkyError):
    """Invalid or missing configuration."""


class OpenSkyHttpStatusError(OpenSkyError):
    """The API answered with a status other than 200."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: int,
        reason: str = "",
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class OpenSkyDecodeError(OpenSkyError):
    """Response body is not JSON or does not have the expected shape.

    ``field`` names the offending state vector field (empty when the
    problem is with the envelope), ``index`` is the position of the
    offending row inside ``states``.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str = "",
        index: int | None = None,
    ) -> None:
        self.field = field
        self.index = index
        super().__init__(message)
