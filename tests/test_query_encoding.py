from __future__ import annotations

from urllib.parse import parse_qs, parse_qsl

import pytest

from opensky_states._api.states import build_states_query, states_url
from opensky_states._constants import format_degrees
from opensky_states.config import OpenSkyConfig
from opensky_states.models.requests import BoundingBox, StatesRequest


def test_no_request_yields_empty_query() -> None:
    assert build_states_query(None) == ""


def test_default_request_yields_empty_query() -> None:
    assert build_states_query(StatesRequest()) == ""


def test_time_is_emitted_once() -> None:
    query = build_states_query(StatesRequest(time=1458564121))
    assert query == "time=1458564121"
    assert parse_qs(query)["time"] == ["1458564121"]


def test_icao24_repeated_per_address_with_duplicates() -> None:
    query = build_states_query(StatesRequest(icao24=["abc9f3", "3c6444", "abc9f3"]))
    assert parse_qsl(query) == [("icao24", "abc9f3"), ("icao24", "3c6444"), ("icao24", "abc9f3")]


@pytest.mark.parametrize(
    ("degrees", "expected"),
    [
        (1.5, "1.5000"),
        (12.34, "12.3400"),
        (-0.00004, "-0.0000"),
        (-123.456789, "-123.4568"),
        (0, "0.0000"),
        (180, "180.0000"),
    ],
)
def test_format_degrees_has_four_fractional_digits(degrees: float, expected: str) -> None:
    assert format_degrees(degrees) == expected


def test_bbox_bounds_are_fixed_point() -> None:
    bbox = BoundingBox(lat_min=45.8389, lon_min=5.9962, lat_max=47.8229, lon_max=10.5226)
    query = build_states_query(StatesRequest(bbox=bbox))
    assert query == "lamax=47.8229&lamin=45.8389&lomax=10.5226&lomin=5.9962"


def test_bbox_is_not_validated() -> None:
    bbox = BoundingBox(lamin=10, lomin=20, lamax=-10, lomax=-20)
    params = dict(parse_qsl(build_states_query(StatesRequest(bbox=bbox))))
    assert params == {"lamin": "10.0000", "lomin": "20.0000", "lamax": "-10.0000", "lomax": "-20.0000"}


def test_full_request_is_recoverable_from_query() -> None:
    request = StatesRequest(
        time=1458564121,
        icao24=["abc9f3", "3c6444"],
        bbox=BoundingBox(lat_min=1, lon_min=2, lat_max=3, lon_max=4),
    )

    values = parse_qs(build_states_query(request))

    assert values["icao24"] == ["abc9f3", "3c6444"]
    assert values["time"] == ["1458564121"]
    assert values["lamin"] == ["1.0000"]
    assert values["lomin"] == ["2.0000"]
    assert values["lamax"] == ["3.0000"]
    assert values["lomax"] == ["4.0000"]


def test_states_url_without_filters() -> None:
    assert states_url(OpenSkyConfig(), None) == "https://opensky-network.org/api/states/all"


def test_states_url_with_filters() -> None:
    config = OpenSkyConfig(base_url="http://localhost:8080/api/")
    url = states_url(config, StatesRequest(icao24=["3c6444"]))
    assert url == "http://localhost:8080/api/states/all?icao24=3c6444"
