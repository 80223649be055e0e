"""State vector and ``/states/all`` response models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from opensky_states.models._base import OpenSkyBaseModel, OpenSkyEnum, epoch_to_utc


class PositionSource(OpenSkyEnum):
    """Origin of a state vector's position."""

    UNKNOWN = -1
    ADSB = 0
    ASTERIX = 1
    MLAT = 2
    FLARM = 3


class StateVector(OpenSkyBaseModel):
    """One aircraft's state as reported by ``/states/all``.

    Fields the API may send as null hold their zero value instead
    (``""``, ``0``, ``0.0`` or an empty tuple). The original row is kept
    in ``raw``.
    """

    icao24: str
    """Unique ICAO 24-bit transponder address, hex string."""
    callsign: str = ""
    """Callsign (8 chars, space padded). Empty if none was received."""
    origin_country: str
    """Country name inferred from the ICAO 24-bit address."""
    time_position: int = 0
    """Unix timestamp of the last position update, 0 if none within 15s."""
    last_contact: int
    """Unix timestamp of the last valid message from the transponder."""
    longitude: float = 0.0
    """WGS-84 longitude in decimal degrees."""
    latitude: float = 0.0
    """WGS-84 latitude in decimal degrees."""
    baro_altitude: float = 0.0
    """Barometric altitude in meters."""
    on_ground: bool
    """Position was retrieved from a surface position report."""
    velocity: float = 0.0
    """Velocity over ground in m/s."""
    true_track: float = 0.0
    """True track in decimal degrees clockwise from north."""
    vertical_rate: float = 0.0
    """Vertical rate in m/s, positive when climbing."""
    sensors: tuple[int, ...] = ()
    """IDs of the receivers which contributed to this state vector."""
    geo_altitude: float = 0.0
    """Geometric altitude in meters."""
    squawk: str = ""
    """Transponder code."""
    spi: bool
    """Special purpose indicator."""
    position_source: int
    """Origin of the position, see :class:`PositionSource`."""

    raw: tuple[Any, ...] = Field(default=(), repr=False)
    """Original state vector row."""

    @property
    def position_source_kind(self) -> PositionSource:
        return PositionSource(self.position_source)

    @property
    def time_position_utc(self) -> datetime | None:
        return epoch_to_utc(self.time_position)

    @property
    def last_contact_utc(self) -> datetime | None:
        return epoch_to_utc(self.last_contact)

    @property
    def has_position(self) -> bool:
        """Whether the row carried both coordinates."""
        if len(self.raw) < 7:
            return bool(self.longitude or self.latitude)
        return self.raw[5] is not None and self.raw[6] is not None


class StatesResponse(OpenSkyBaseModel):
    """Result of a ``/states/all`` query.

    All vectors represent the state of a vehicle within the interval
    ``[time - 1, time]``.
    """

    time: int
    """Unix timestamp the state vectors are associated with."""
    states: tuple[StateVector, ...] = ()
    """State vectors in server order."""

    @property
    def time_utc(self) -> datetime | None:
        return epoch_to_utc(self.time)

    def find(self, icao24: str) -> StateVector | None:
        """Return the first state vector for *icao24* (case-insensitive)."""
        wanted = icao24.strip().lower()
        for state in self.states:
            if state.icao24.lower() == wanted:
                return state
        return None
