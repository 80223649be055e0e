"""Base model, enum and timestamp helper for OpenSky API models.

Every response model inherits from :class:`OpenSkyBaseModel` (frozen,
extra keys ignored, fields populated by name or alias).

Code enums inherit from :class:`OpenSkyEnum` which requires an ``UNKNOWN``
member at ``-1`` and resolves any unmapped value to it instead of raising
``ValueError``.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


def epoch_to_utc(value: int) -> datetime | None:
    """Convert epoch seconds to a UTC datetime.

    ``0`` is what the decoder stores for a null timestamp, so it maps to
    ``None``.
    """
    if not value:
        return None
    return datetime.fromtimestamp(value, tz=UTC)


class OpenSkyEnum(enum.IntEnum):
    """Base for OpenSky API code enums.

    Every subclass **must** define ``UNKNOWN = -1``.
    """

    @classmethod
    def _missing_(cls, value: object) -> OpenSkyEnum:
        # pylint: disable=no-member
        unknown: OpenSkyEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class OpenSkyBaseModel(BaseModel):
    """Base for OpenSky API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
