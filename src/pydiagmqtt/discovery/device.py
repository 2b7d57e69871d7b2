"""Device and availability blocks shared by every discovery payload."""

from __future__ import annotations

from typing import Any

from pydiagmqtt._constants import COMMAND_STATUS_MONITOR, PAYLOAD_AVAILABLE, PAYLOAD_NOT_AVAILABLE, UNDEFINED
from pydiagmqtt.models.vehicle import VehicleIdentity


def unique_id_vin(vehicle: VehicleIdentity | None) -> str:
    """Lowercased VIN for unique ids, ``"undefined"`` when unknown."""
    vin = vehicle.vin if vehicle is not None else None
    return vin.lower() if vin else UNDEFINED


def vehicle_device(vehicle: VehicleIdentity, *, suggested_area: str | None = None) -> dict[str, Any]:
    """Primary device of the vehicle."""
    return {
        "identifiers": [vehicle.vin],
        "manufacturer": vehicle.make,
        "model": f"{vehicle.year} {vehicle.model}",
        "name": str(vehicle),
        "suggested_area": suggested_area if suggested_area is not None else str(vehicle),
    }


def command_status_monitor_device(vehicle: VehicleIdentity) -> dict[str, Any]:
    """Secondary device grouping the command/polling status entities."""
    label = f"{vehicle} {COMMAND_STATUS_MONITOR} Sensors"
    return {
        "identifiers": [f"{vehicle.vin}_{COMMAND_STATUS_MONITOR.replace(' ', '_')}"],
        "manufacturer": vehicle.make,
        "model": f"{vehicle.year} {vehicle.model}",
        "name": label,
        "suggested_area": label,
    }


def status_device(vehicle: VehicleIdentity, list_all_sensors_together: bool) -> dict[str, Any]:
    if list_all_sensors_together:
        return vehicle_device(vehicle)
    return command_status_monitor_device(vehicle)


def availability_block(topic: str) -> dict[str, str]:
    return {
        "topic": topic,
        "payload_available": PAYLOAD_AVAILABLE,
        "payload_not_available": PAYLOAD_NOT_AVAILABLE,
    }
