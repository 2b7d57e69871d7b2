"""Diagnostic snapshot models.

A :class:`Diagnostic` groups the readings returned for one diagnostic
item of the telemetry API (e.g. ``FUEL TANK INFO`` → fuel amount,
capacity, level). Readings in a metric unit with a tabled secondary
unit get a derived sibling appended on construction; see
:mod:`pydiagmqtt.ingestion.units`.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from pydiagmqtt.ingestion.units import derive_values
from pydiagmqtt.models._base import DiagBaseModel

ElementValue = str | bool | int | float | None


class DiagnosticElement(DiagBaseModel):
    """One named telemetry reading."""

    name: str | None = None
    """Element name as sent by the API (e.g. ``"AMBIENT AIR TEMPERATURE"``)."""
    value: ElementValue = None
    """Reading; numbers frequently arrive string-encoded."""
    unit: str | None = None
    """Unit label (``"°C"``, ``"km"``, ``"NA"``...)."""
    message: str | None = None
    """Status message attached to the reading (``"charging_complete"``)."""


class Diagnostic(DiagBaseModel):
    """All readings of one diagnostic item for a single poll."""

    name: str | None = None
    """Diagnostic item name (e.g. ``"FUEL TANK INFO"``)."""
    diagnostic_elements: tuple[DiagnosticElement, ...] = Field(default_factory=tuple)
    """Readings, source readings first, derived readings after."""

    @model_validator(mode="after")
    def _append_derived_elements(self) -> Diagnostic:
        """Append secondary-unit siblings for convertible readings."""
        present = {element.name for element in self.diagnostic_elements}
        derived: list[DiagnosticElement] = []
        for element in self.diagnostic_elements:
            for name, value, unit in derive_values(element.name, element.value, element.unit):
                if name in present:
                    continue
                present.add(name)
                derived.append(DiagnosticElement(name=name, value=value, unit=unit, message=element.message))
        if derived:
            object.__setattr__(self, "diagnostic_elements", self.diagnostic_elements + tuple(derived))
        return self
