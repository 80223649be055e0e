"""Data models for OpenSky API requests and responses."""

from opensky_states.models._base import OpenSkyBaseModel, OpenSkyEnum, epoch_to_utc
from opensky_states.models.requests import BoundingBox, StatesRequest
from opensky_states.models.state import PositionSource, StatesResponse, StateVector

__all__ = [
    "BoundingBox",
    "OpenSkyBaseModel",
    "OpenSkyEnum",
    "PositionSource",
    "StateVector",
    "StatesRequest",
    "StatesResponse",
    "epoch_to_utc",
]
