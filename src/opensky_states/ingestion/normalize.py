"""Normalization helpers for state vector values.

The ``*_or_*`` helpers map JSON null to a zero value. The ``require_*``
helpers back the fields the API always fills and reject null. Every helper
raises :class:`ValueError` on a value of the wrong JSON type; callers turn
that into a decode error naming the field.
"""

from __future__ import annotations

import math
from typing import Any


def _is_number(value: Any) -> bool:
    # bool is an int subclass but a JSON true/false is never a number.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_number(value: Any) -> int | float:
    if not _is_number(value):
        raise ValueError(f"expected number, got {_json_type(value)}")
    # json.loads turns out-of-range literals such as 1e400 into inf.
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"expected finite number, got {value!r}")
    return value


def require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected string, got {_json_type(value)}")
    return value


def require_int(value: Any) -> int:
    return int(_require_number(value))


def require_float(value: Any) -> float:
    return float(_require_number(value))


def require_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected boolean, got {_json_type(value)}")
    return value


def str_or_empty(value: Any) -> str:
    if value is None:
        return ""
    return require_str(value)


def int_or_zero(value: Any) -> int:
    if value is None:
        return 0
    return require_int(value)


def float_or_zero(value: Any) -> float:
    if value is None:
        return 0.0
    return require_float(value)


def int_list_or_empty(value: Any) -> list[int]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected array, got {_json_type(value)}")
    return [require_int(item) for item in value]


def _json_type(value: Any) -> str:
    """Name *value* by its JSON type for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
