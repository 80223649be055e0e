"""Internal constants shared across the library."""

BASE_URL = "https://opensky-network.org/api"
STATES_ALL_PATH = "/states/all"
USER_AGENT = "opensky-states"

# Number of positional fields in a state vector row.
STATE_VECTOR_LENGTH = 17

# Bounding box bounds are sent with this many fractional digits.
DEGREE_DECIMALS = 4


def format_degrees(degrees: float) -> str:
    """Format a coordinate in decimal degrees with exactly four fractional digits."""
    return f"{float(degrees):.{DEGREE_DECIMALS}f}"
