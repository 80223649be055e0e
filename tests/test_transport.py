from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest

from opensky_states._transport import HttpTransport
from opensky_states.config import OpenSkyConfig
from opensky_states.exceptions import OpenSkyDecodeError, OpenSkyHttpStatusError


@dataclass
class _FakeResponse:
    status: int
    body: str | bytes
    reason: str | None = "OK"

    async def read(self) -> bytes:
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


@dataclass
class _FakeSession:
    response: _FakeResponse | None = None
    error: Exception | None = None
    requests: list[tuple[str, dict[str, str]]] = field(default_factory=list)

    def get(self, url: str, *, headers: dict[str, str]) -> _FakeResponse:
        self.requests.append((url, headers))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def _transport(session: _FakeSession, **config: Any) -> HttpTransport:
    return HttpTransport(OpenSkyConfig(**config), session)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_get_json_returns_parsed_body() -> None:
    session = _FakeSession(response=_FakeResponse(200, '{"time": 1458564121, "states": null}'))

    body = await _transport(session, user_agent="test-agent").get_json("https://example.test/states/all")

    assert body == {"time": 1458564121, "states": None}
    url, headers = session.requests[0]
    assert url == "https://example.test/states/all"
    assert headers["user-agent"] == "test-agent"
    assert headers["accept"] == "application/json"


@pytest.mark.asyncio
async def test_non_200_raises_status_error_with_url() -> None:
    session = _FakeSession(response=_FakeResponse(503, "busy", reason="Service Unavailable"))
    url = "https://example.test/states/all?icao24=3c6444"

    with pytest.raises(OpenSkyHttpStatusError) as exc_info:
        await _transport(session).get_json(url)

    exc = exc_info.value
    assert exc.url == url
    assert exc.status_code == 503
    assert exc.reason == "Service Unavailable"
    assert str(exc) == f"GET {url} not OK: 503 Service Unavailable"


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error() -> None:
    session = _FakeSession(response=_FakeResponse(200, "<html>maintenance</html>"))

    with pytest.raises(OpenSkyDecodeError, match="Invalid JSON"):
        await _transport(session).get_json("https://example.test/states/all")


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged() -> None:
    error = aiohttp.ClientConnectionError("connection refused")
    session = _FakeSession(error=error)

    with pytest.raises(aiohttp.ClientConnectionError) as exc_info:
        await _transport(session).get_json("https://example.test/states/all")

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_trace_logs_summarized_body(caplog: pytest.LogCaptureFixture) -> None:
    rows = [["3c6444"]] * 50
    session = _FakeSession(response=_FakeResponse(200, f'{{"time": 1, "states": {rows!r}}}'.replace("'", '"')))

    with caplog.at_level(logging.DEBUG, logger="opensky_states._transport"):
        await _transport(session, api_trace_enabled=True).get_json("https://example.test/states/all")

    assert any("<30 more>" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_invalid_utf8_body_raises_decode_error() -> None:
    session = _FakeSession(response=_FakeResponse(200, b'{"time": 1, "states": ["\xff\xfe"]}'))

    with pytest.raises(OpenSkyDecodeError, match="Invalid JSON"):
        await _transport(session).get_json("https://example.test/states/all")


@pytest.mark.asyncio
@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
async def test_non_standard_constants_raise_decode_error(constant: str) -> None:
    body = f'{{"time": 1, "states": [["3c6444", null, "Germany", 1, 1, {constant}]]}}'
    session = _FakeSession(response=_FakeResponse(200, body))

    with pytest.raises(OpenSkyDecodeError, match="Invalid JSON"):
        await _transport(session).get_json("https://example.test/states/all")
