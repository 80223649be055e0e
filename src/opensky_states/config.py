"""Client configuration for opensky_states."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from opensky_states._constants import BASE_URL, USER_AGENT
from opensky_states.exceptions import OpenSkyConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class OpenSkyConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API root. Defaults to the public OpenSky Network endpoint.
    user_agent : str
        ``User-Agent`` header sent with every request.
    api_trace_enabled : bool
        Log a summarized copy of every response body at DEBUG level.
    """

    base_url: str = BASE_URL
    user_agent: str = USER_AGENT
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        base_url = self.base_url.strip()
        if not base_url.startswith(("http://", "https://")):
            raise OpenSkyConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        # Endpoint paths are appended with a leading slash.
        object.__setattr__(self, "base_url", base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> OpenSkyConfig:
        """Create configuration from environment variables.

        Reads ``OPENSKY_BASE_URL``, ``OPENSKY_USER_AGENT`` and
        ``OPENSKY_API_TRACE_ENABLED``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        OpenSkyConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "OPENSKY_BASE_URL": "base_url",
            "OPENSKY_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("OPENSKY_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
