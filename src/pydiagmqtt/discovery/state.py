"""State payloads.

One flat JSON document per :class:`Diagnostic`, published on the
diagnostic's state topic. Every emitted field ``x`` is paired with an
``x_message`` field carrying the element message (``"na"`` when absent).
"""

from __future__ import annotations

import logging
from typing import Any

from pydiagmqtt._constants import NA
from pydiagmqtt.discovery.classification import boolean_tokens, classify
from pydiagmqtt.discovery.config_mapper import DiagnosticLike, as_diagnostic
from pydiagmqtt.discovery.naming import convert_name
from pydiagmqtt.ingestion.normalize import parse_number
from pydiagmqtt.models.diagnostic import DiagnosticElement

_logger = logging.getLogger(__name__)


def _state_value(element: DiagnosticElement) -> Any:
    """Return the published value of *element*, or ``None`` to drop it."""
    tokens = boolean_tokens(element.name)
    if tokens is not None:
        return element.value == tokens.true
    number = parse_number(element.value)
    if number is not None:
        return number
    if isinstance(element.value, str) and classify(element.name).text:
        return element.value
    return None


def get_state_payload(diagnostic: DiagnosticLike) -> dict[str, Any]:
    """Flatten every element of *diagnostic* into one state document.

    Elements without a name, and elements whose value is neither boolean,
    numeric nor a tabled text value, contribute nothing.
    """
    diagnostic = as_diagnostic(diagnostic)
    state: dict[str, Any] = {}
    for element in diagnostic.diagnostic_elements:
        key = convert_name(element.name)
        value = _state_value(element) if key else None
        if value is None:
            _logger.debug("Dropping %s/%s from state: value %r", diagnostic.name, element.name, element.value)
            continue
        state[key] = value
        state[f"{key}_message"] = element.message if element.message is not None else NA
    return state
