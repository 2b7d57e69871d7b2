"""Diagnostic response ingestion.

The telemetry API answers a ``diagnostics`` command with::

    {"commandResponse": {"body": {"diagnosticResponse": [
        {"name": "AMBIENT AIR TEMPERATURE",
         "diagnosticElements": [{"name": ..., "value": ..., "unit": ...}]},
        ...
    ]}}}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pydiagmqtt.exceptions import DiagnosticResponseError
from pydiagmqtt.models.diagnostic import Diagnostic

_logger = logging.getLogger(__name__)

_RESPONSE_PATH: tuple[str, ...] = ("commandResponse", "body", "diagnosticResponse")


def _walk(response: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    node: Any = response
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            raise DiagnosticResponseError(
                f"diagnostic response is missing {'.'.join(path)}",
                path=".".join(path),
            )
        node = node[key]
    return node


def parse_diagnostic_response(response: Mapping[str, Any]) -> list[Diagnostic]:
    """Parse a diagnostics command response into :class:`Diagnostic` models.

    Entries that are not objects, or that fail validation, are skipped and
    logged; a response without the diagnostic list raises
    :class:`DiagnosticResponseError`.
    """
    entries = _walk(response, _RESPONSE_PATH)
    if not isinstance(entries, list):
        raise DiagnosticResponseError(
            "diagnosticResponse is not a list",
            path=".".join(_RESPONSE_PATH),
        )

    diagnostics: list[Diagnostic] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            _logger.debug("Skipping diagnostic entry %d: not an object", index)
            continue
        try:
            diagnostics.append(Diagnostic.model_validate(dict(entry)))
        except ValidationError as exc:
            _logger.warning("Skipping diagnostic entry %d (%s): %s", index, entry.get("name"), exc)
    _logger.debug("Parsed %d diagnostics from %d entries", len(diagnostics), len(entries))
    return diagnostics
