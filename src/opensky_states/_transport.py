"""HTTP transport for the OpenSky REST API."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from opensky_states._log_summary import summarize_for_log
from opensky_states.config import OpenSkyConfig
from opensky_states.exceptions import OpenSkyDecodeError, OpenSkyHttpStatusError

_logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """``parse_constant`` hook: ``NaN`` and ``Infinity`` are not JSON."""
    raise ValueError(f"non-standard JSON constant {name}")


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any:
        ...


class HttpTransport:
    """Issues GET requests and returns the parsed JSON body.

    Connection failures and timeouts raised by aiohttp are not caught.
    """

    def __init__(
        self,
        config: OpenSkyConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session

    async def get_json(self, url: str) -> Any:
        """GET *url* and decode the JSON body.

        Raises
        ------
        OpenSkyHttpStatusError
            The response status is not 200.
        OpenSkyDecodeError
            The body is not valid JSON.
        """
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", url)

        async with self._http.get(url, headers=headers) as resp:
            if resp.status != 200:
                reason = resp.reason or ""
                raise OpenSkyHttpStatusError(
                    f"GET {url} not OK: {resp.status} {reason}".rstrip(),
                    url=url,
                    status_code=resp.status,
                    reason=reason,
                )
            payload = await resp.read()

        try:
            body = json.loads(payload, parse_constant=_reject_constant)
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            snippet = payload[:200].decode("utf-8", errors="replace")
            raise OpenSkyDecodeError(f"Invalid JSON from {url}: {snippet}") from exc

        if self._config.api_trace_enabled:
            _logger.debug("GET %s -> %s", url, summarize_for_log(body))

        return body
