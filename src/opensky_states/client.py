"""High-level async client for the OpenSky Network REST API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from opensky_states._api.states import fetch_states
from opensky_states._transport import HttpTransport, Transport
from opensky_states.config import OpenSkyConfig
from opensky_states.exceptions import OpenSkyError
from opensky_states.models.requests import StatesRequest
from opensky_states.models.state import StatesResponse

_logger = logging.getLogger(__name__)


class OpenSkyClient:
    """Async client for the OpenSky ``/states/all`` endpoint.

    Usage::

        async with OpenSkyClient() as client:
            response = await client.get_states(StatesRequest(icao24=["3c6444"]))

    A caller-provided ``aiohttp.ClientSession`` is used as-is and never
    closed by the client.
    """

    def __init__(
        self,
        config: OpenSkyConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config if config is not None else OpenSkyConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> OpenSkyClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    @property
    def config(self) -> OpenSkyConfig:
        return self._config

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise OpenSkyError("Client not initialized. Use 'async with OpenSkyClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Read endpoints
    # ------------------------------------------------------------------

    async def get_states(
        self,
        request: StatesRequest | Mapping[str, Any] | None = None,
    ) -> StatesResponse:
        """Fetch state vectors, optionally filtered.

        Parameters
        ----------
        request : StatesRequest, mapping or None
            Filters. A mapping is validated into a :class:`StatesRequest`.
            ``None`` fetches every aircraft currently tracked.
        """
        if isinstance(request, Mapping):
            request = StatesRequest.model_validate(request)
        transport = self._require_transport()
        return await fetch_states(self._config, transport, request)
