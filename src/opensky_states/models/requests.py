"""Pydantic request models for client entrypoints.

These models provide a consistent "validate → encode → execute" flow.
They are consumed by :func:`opensky_states._api.states.build_states_query`.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BoundingBox(BaseModel):
    """Rectangular area in WGS-84 decimal degrees.

    Bound ordering and coordinate ranges are left to the server.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    lat_min: float = Field(validation_alias=AliasChoices("lat_min", "lamin"))
    lon_min: float = Field(validation_alias=AliasChoices("lon_min", "lomin"))
    lat_max: float = Field(validation_alias=AliasChoices("lat_max", "lamax"))
    lon_max: float = Field(validation_alias=AliasChoices("lon_max", "lomax"))


class StatesRequest(BaseModel):
    """Filters for ``/states/all``.

    Parameters
    ----------
    time : int
        Unix timestamp to retrieve states for. ``0`` means current time.
    icao24 : tuple of str
        Transponder addresses as hex strings (e.g. ``"abc9f3"``). Sent once
        per entry, in order. Empty means all aircraft.
    bbox : BoundingBox or None
        Geographic filter.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )

    time: int = 0
    icao24: tuple[str, ...] = ()
    bbox: BoundingBox | None = None
