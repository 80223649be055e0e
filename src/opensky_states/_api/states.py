"""State vector endpoint (``/states/all``).

The API encodes every aircraft as a JSON array of 17 positional values::

    ["3c6444", "DLH9LF  ", "Germany", 1458564120, 1458564120, 6.1546,
     50.1964, 9639.3, false, 232.88, 98.26, 4.55, null, 9547.86, "1000",
     false, 0]

Decoding maps JSON null to a zero value only for the fields the API
documents as nullable. A null anywhere else is a malformed response.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import urlencode

from opensky_states._constants import STATE_VECTOR_LENGTH, STATES_ALL_PATH, format_degrees
from opensky_states._transport import Transport
from opensky_states.config import OpenSkyConfig
from opensky_states.exceptions import OpenSkyDecodeError
from opensky_states.ingestion.normalize import (
    float_or_zero,
    int_list_or_empty,
    int_or_zero,
    require_bool,
    require_int,
    require_str,
    str_or_empty,
)
from opensky_states.models.requests import StatesRequest
from opensky_states.models.state import StatesResponse, StateVector

_logger = logging.getLogger(__name__)

# (field name, coercion) in wire order.
_STATE_FIELDS: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    ("icao24", require_str),
    ("callsign", str_or_empty),
    ("origin_country", require_str),
    ("time_position", int_or_zero),
    ("last_contact", require_int),
    ("longitude", float_or_zero),
    ("latitude", float_or_zero),
    ("baro_altitude", float_or_zero),
    ("on_ground", require_bool),
    ("velocity", float_or_zero),
    ("true_track", float_or_zero),
    ("vertical_rate", float_or_zero),
    ("sensors", int_list_or_empty),
    ("geo_altitude", float_or_zero),
    ("squawk", str_or_empty),
    ("spi", require_bool),
    ("position_source", require_int),
)


def build_states_query(request: StatesRequest | None) -> str:
    """Encode *request* as a ``/states/all`` query string.

    Parameter names are sorted; repeated ``icao24`` values keep their
    order. ``None`` or an empty request yields ``""``.
    """
    if request is None:
        return ""

    params: dict[str, list[str]] = {}
    if request.time != 0:
        params["time"] = [str(request.time)]

    if request.icao24:
        params["icao24"] = list(request.icao24)

    if request.bbox is not None:
        params["lamin"] = [format_degrees(request.bbox.lat_min)]
        params["lomin"] = [format_degrees(request.bbox.lon_min)]
        params["lamax"] = [format_degrees(request.bbox.lat_max)]
        params["lomax"] = [format_degrees(request.bbox.lon_max)]

    pairs = [(key, value) for key in sorted(params) for value in params[key]]
    return urlencode(pairs)


def states_url(config: OpenSkyConfig, request: StatesRequest | None) -> str:
    """Full ``/states/all`` URL for *request*."""
    url = f"{config.base_url}{STATES_ALL_PATH}"
    query = build_states_query(request)
    if query:
        url = f"{url}?{query}"
    return url


def deserialize_state(row: Any, *, index: int | None = None) -> StateVector:
    """Decode one positional state vector row.

    Raises
    ------
    OpenSkyDecodeError
        The row is not an array, has fewer than 17 values, or holds a value
        of the wrong type (including null where the API guarantees a value).
    """
    where = f"state {index}" if index is not None else "state"
    if not isinstance(row, list):
        raise OpenSkyDecodeError(f"{where}: expected array, got {type(row).__name__}", index=index)
    if len(row) < STATE_VECTOR_LENGTH:
        raise OpenSkyDecodeError(
            f"{where}: expected {STATE_VECTOR_LENGTH} values, got {len(row)}",
            index=index,
        )

    values: dict[str, Any] = {}
    for position, (name, coerce) in enumerate(_STATE_FIELDS):
        try:
            values[name] = coerce(row[position])
        except ValueError as exc:
            raise OpenSkyDecodeError(
                f"{where}: field {name!r} at position {position}: {exc}",
                field=name,
                index=index,
            ) from exc

    return StateVector(**values, raw=tuple(row))


def deserialize_states(raw_states: Any) -> tuple[StateVector, ...]:
    """Decode the ``states`` array. ``None`` means no aircraft."""
    if raw_states is None:
        return ()
    if not isinstance(raw_states, list):
        raise OpenSkyDecodeError(f"'states' must be an array, got {type(raw_states).__name__}", field="states")
    return tuple(deserialize_state(row, index=i) for i, row in enumerate(raw_states))


def parse_states_response(body: Any) -> StatesResponse:
    """Convert a parsed ``/states/all`` body into a :class:`StatesResponse`."""
    if not isinstance(body, Mapping):
        raise OpenSkyDecodeError(f"Response body must be an object, got {type(body).__name__}")

    if "time" not in body:
        raise OpenSkyDecodeError("Missing 'time' field", field="time")
    try:
        time = require_int(body["time"])
    except ValueError as exc:
        raise OpenSkyDecodeError(f"'time' field: {exc}", field="time") from exc

    return StatesResponse(time=time, states=deserialize_states(body.get("states")))


async def fetch_states(
    config: OpenSkyConfig,
    transport: Transport,
    request: StatesRequest | None = None,
) -> StatesResponse:
    """Query ``/states/all`` and decode the answer.

    Parameters
    ----------
    config : OpenSkyConfig
        Client configuration.
    transport : Transport
        HTTP transport.
    request : StatesRequest or None
        Filters. ``None`` fetches all current state vectors.

    Returns
    -------
    StatesResponse
        Decoded state vectors.

    Raises
    ------
    OpenSkyHttpStatusError
        The API answered with a non-200 status.
    OpenSkyDecodeError
        The body is not JSON or is malformed.
    """
    url = states_url(config, request)
    body = await transport.get_json(url)
    response = parse_states_response(body)
    _logger.debug("GET %s: time=%d states=%d", url, response.time, len(response.states))
    return response
