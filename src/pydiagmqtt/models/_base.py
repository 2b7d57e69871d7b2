"""Base model for telemetry values.

Every model inherits from :class:`DiagBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys map
  automatically to snake_case fields.
* A ``model_validator(mode="before")`` that strips API sentinel
  values (``""``, ``"--"``, NaN) so the field default is used.
* ``frozen=True``: the mapping engine never mutates its inputs.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# Sentinel strings the telemetry API uses for "not available".
_SENTINELS = frozenset({"", "--", "NaN", "nan"})


class DiagBaseModel(BaseModel):
    """Base for telemetry models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        """Strip sentinel values from *values*."""
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_api_values(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        return DiagBaseModel._clean_dict(values)
