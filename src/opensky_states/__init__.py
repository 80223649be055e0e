"""opensky_states - Async Python client for OpenSky Network state vectors."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("opensky-states")
except PackageNotFoundError:
    __version__ = "0+local"
from opensky_states._api.states import (
    build_states_query,
    deserialize_state,
    deserialize_states,
    parse_states_response,
)
from opensky_states.client import OpenSkyClient
from opensky_states.config import OpenSkyConfig
from opensky_states.exceptions import (
    OpenSkyConfigError,
    OpenSkyDecodeError,
    OpenSkyError,
    OpenSkyHttpStatusError,
)
from opensky_states.models import (
    BoundingBox,
    PositionSource,
    StatesRequest,
    StatesResponse,
    StateVector,
)

__all__ = [
    "__version__",
    "BoundingBox",
    "OpenSkyClient",
    "OpenSkyConfig",
    "OpenSkyConfigError",
    "OpenSkyDecodeError",
    "OpenSkyError",
    "OpenSkyHttpStatusError",
    "PositionSource",
    "StateVector",
    "StatesRequest",
    "StatesResponse",
    "build_states_query",
    "deserialize_state",
    "deserialize_states",
    "parse_states_response",
]
