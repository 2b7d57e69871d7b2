"""Data models for telemetry values."""

from pydiagmqtt.models._base import DiagBaseModel
from pydiagmqtt.models.diagnostic import Diagnostic, DiagnosticElement, ElementValue
from pydiagmqtt.models.vehicle import Vehicle, VehicleIdentity

__all__ = [
    "DiagBaseModel",
    "Diagnostic",
    "DiagnosticElement",
    "ElementValue",
    "Vehicle",
    "VehicleIdentity",
]
