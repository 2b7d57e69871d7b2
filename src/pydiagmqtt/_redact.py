"""Helpers for safe debug logging.

Discovery topics, unique ids and device blocks all embed the VIN. This
module masks it before DEBUG logs are emitted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset({"vin", "identifiers"})

# ISO 3779: 17 characters, I/O/Q excluded.
_VIN_RE = re.compile(r"(?<![A-Za-z0-9])[A-HJ-NPR-Za-hj-npr-z0-9]{17}(?![A-Za-z0-9])")

_MASK = "<vin>"


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of *value* with VINs masked, suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        masked = _VIN_RE.sub(_MASK, value)
        if len(masked) > max_string:
            return f"{masked[:max_string]}…<truncated>"
        return masked

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _SENSITIVE_VALUE_KEYS:
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
