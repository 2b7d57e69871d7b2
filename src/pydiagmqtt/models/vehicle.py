"""Vehicle model."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import Field, field_validator

from pydiagmqtt.ingestion.normalize import safe_str
from pydiagmqtt.models._base import DiagBaseModel


@runtime_checkable
class VehicleIdentity(Protocol):
    """What the discovery builders need to know about a vehicle.

    ``str(vehicle)`` must render the display name ``"{year} {make} {model}"``.
    """

    make: str
    model: str
    vin: str | None
    year: int | str | None


class Vehicle(DiagBaseModel):
    """A vehicle associated with the telemetry account."""

    make: str = ""
    """Manufacturer (e.g. ``"Chevrolet"``)."""
    model: str = ""
    """Model name (e.g. ``"Bolt EV"``)."""
    vin: str | None = None
    """Vehicle Identification Number; also the MQTT instance id."""
    year: int | str | None = Field(default=None)
    """Model year."""

    @field_validator("make", "model", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return safe_str(value) or ""

    @property
    def display_name(self) -> str:
        return f"{self.year} {self.make} {self.model}"

    def __str__(self) -> str:
        return self.display_name
