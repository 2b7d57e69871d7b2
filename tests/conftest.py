from __future__ import annotations

import copy
from typing import Any

import pytest

from pydiagmqtt.discovery import HomeAssistantMqtt
from pydiagmqtt.ingestion.diagnostics import parse_diagnostic_response
from pydiagmqtt.models import Diagnostic, Vehicle

SAMPLE_RESPONSE: dict[str, Any] = {
    "commandResponse": {
        "requestTime": "2022-12-04T22:41:59.193Z",
        "completionTime": "2022-12-04T22:42:08.539Z",
        "status": "success",
        "type": "diagnostics",
        "body": {
            "diagnosticResponse": [
                {
                    "name": "AMBIENT AIR TEMPERATURE",
                    "diagnosticElements": [
                        {"name": "AMBIENT AIR TEMPERATURE", "status": "NA", "message": None, "value": "15", "unit": "°C"}
                    ],
                },
                {
                    "name": "CHARGER POWER LEVEL",
                    "diagnosticElements": [
                        {"name": "CHARGER POWER LEVEL", "status": "NA", "value": "NO_REDUCTION", "unit": "NA"}
                    ],
                },
                {
                    "name": "ENERGY EFFICIENCY",
                    "diagnosticElements": [
                        {"name": "ELECTRIC ECONOMY", "status": "NA", "value": "21.85", "unit": "kWh"},
                        {"name": "LIFETIME EFFICIENCY", "status": "NA", "value": "21.85", "unit": "kWh"},
                        {"name": "LIFETIME MPGE", "status": "NA", "value": "40.73", "unit": "km/L(e)"},
                        {"name": "ODOMETER", "status": "NA", "value": "6013.8", "unit": "km"},
                    ],
                },
                {
                    "name": "EV CHARGE STATE",
                    "diagnosticElements": [
                        {
                            "name": "EV CHARGE STATE",
                            "status": "NA",
                            "message": "charging_complete",
                            "value": "not_charging",
                            "unit": "Stat",
                        },
                        {"name": "PRIORITY CHARGE INDICATOR", "status": "NA", "value": "FALSE", "unit": "N/A"},
                        {"name": "PRIORITY CHARGE STATUS", "status": "NA", "value": "NOT_ACTIVE", "unit": "N/A"},
                    ],
                },
                {
                    "name": "EV PLUG STATE",
                    "diagnosticElements": [
                        {"name": "EV PLUG STATE", "status": "NA", "message": "plugged", "value": "plugged", "unit": "Stat"}
                    ],
                },
                {
                    "name": "EV BATTERY LEVEL",
                    "diagnosticElements": [{"name": "EV BATTERY LEVEL", "status": "NA", "value": "100", "unit": "%"}],
                },
                {
                    "name": "INTERM VOLT BATT VOLT",
                    "diagnosticElements": [
                        {"name": "INTERM VOLT BATT VOLT", "status": "NA", "value": "14.39", "unit": "V"}
                    ],
                },
                {
                    "name": "ODOMETER",
                    "diagnosticElements": [{"name": "ODOMETER", "status": "NA", "value": "6013.8", "unit": "km"}],
                },
                {
                    "name": "TIRE PRESSURE",
                    "diagnosticElements": [
                        {"name": "TIRE PRESSURE LF", "status": "NA", "message": "YELLOW", "value": "240.0", "unit": "kPa"},
                        {"name": "TIRE PRESSURE LR", "status": "NA", "message": "GREEN", "value": "236.0", "unit": "kPa"},
                        {"name": "TIRE PRESSURE PLACARD FRONT", "status": "NA", "value": "262.0", "unit": "kPa"},
                        {"name": "TIRE PRESSURE PLACARD REAR", "status": "NA", "value": "262.0", "unit": "kPa"},
                        {"name": "TIRE PRESSURE RF", "status": "NA", "message": "YELLOW", "value": "236.0", "unit": "kPa"},
                        {"name": "TIRE PRESSURE RR", "status": "NA", "message": "GREEN", "value": "236.0", "unit": "kPa"},
                    ],
                },
                {
                    "name": "VEHICLE RANGE",
                    "diagnosticElements": [{"name": "EV RANGE", "status": "NA", "value": "341", "unit": "km"}],
                },
                {
                    "name": "OIL LIFE",
                    "diagnosticElements": [
                        {"name": "OIL LIFE", "status": "NA", "message": "GREEN", "value": "87", "unit": "%"}
                    ],
                },
                {
                    "name": "FUEL TANK INFO",
                    "diagnosticElements": [
                        {"name": "FUEL AMOUNT", "status": "NA", "value": "19.98", "unit": "L"},
                        {"name": "FUEL CAPACITY", "status": "NA", "value": "60", "unit": "L"},
                        {"name": "FUEL LEVEL", "status": "NA", "value": "33.3", "unit": "%"},
                        {"name": "FUEL LEVEL IN GAL", "status": "NA", "value": "19.98", "unit": "L"},
                    ],
                },
                {
                    "name": "LIFETIME FUEL ECON",
                    "diagnosticElements": [
                        {"name": "LIFETIME FUEL ECON", "status": "NA", "value": "11.86", "unit": "km/L"}
                    ],
                },
                {
                    "name": "LIFETIME FUEL USED",
                    "diagnosticElements": [
                        {"name": "LIFETIME FUEL USED", "status": "NA", "value": "4476.94", "unit": "L"}
                    ],
                },
            ]
        },
    }
}


@pytest.fixture
def api_response() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_RESPONSE)


@pytest.fixture
def diagnostics(api_response: dict[str, Any]) -> list[Diagnostic]:
    return parse_diagnostic_response(api_response)


@pytest.fixture
def vehicle() -> Vehicle:
    return Vehicle(make="foo", model="bar", vin="XXX", year=2020)


@pytest.fixture
def ha(vehicle: Vehicle) -> HomeAssistantMqtt:
    return HomeAssistantMqtt(vehicle)


@pytest.fixture
def device() -> dict[str, Any]:
    """Primary device block of the sample vehicle on element entities."""
    return {
        "identifiers": ["XXX"],
        "manufacturer": "foo",
        "model": "2020 bar",
        "name": "2020 foo bar",
        "suggested_area": "2020 foo bar Sensors",
    }


@pytest.fixture
def availability() -> dict[str, str]:
    return {
        "topic": "homeassistant/XXX/available",
        "payload_available": "true",
        "payload_not_available": "false",
    }
