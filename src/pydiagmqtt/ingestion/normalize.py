"""Normalization helpers.

Centralizes defensive parsing and placeholder handling.
"""

from __future__ import annotations

import math
import re
from typing import Any

from pydiagmqtt._constants import NA

# Plain decimal literals only: no underscores, no non-ASCII digits.
_NUMBER_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$", re.ASCII)


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--" or isinstance(value, bool):
        return None
    if isinstance(value, str) and not _NUMBER_RE.match(value.strip()):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def parse_number(value: Any) -> int | float | None:
    """Parse *value* as a number, keeping integer literals as ``int``.

    Booleans are not numbers here; ``"TRUE"``/``True`` both return ``None``.
    """
    parsed = safe_float(value)
    if parsed is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and parsed.is_integer() and "." not in value and "e" not in value.lower():
        return int(parsed)
    return parsed


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def normalize_unit(raw: Any, instance: str | None) -> str | None:
    """Return *raw* unless it is a "no unit" sentinel.

    ``"na"`` in any case and a unit equal to the vehicle instance id both
    normalize to ``None``; everything else passes through unchanged.
    """
    unit = safe_str(raw)
    if unit is None:
        return None
    if unit.lower() == NA:
        return None
    if instance is not None and unit == instance:
        return None
    return unit


def prune_payload(data: Any) -> Any:
    """Recursively drop ``None`` values from a payload structure.

    ``None`` stands for "field not set": the key is left out of the
    published JSON. Falsy values (``""``, ``0``, ``False``, ``[]``) are
    kept.
    """

    if isinstance(data, dict):
        return {key: prune_payload(value) for key, value in data.items() if value is not None}

    if isinstance(data, list):
        return [prune_payload(item) for item in data if item is not None]

    return data
