"""pydiagmqtt - Home Assistant MQTT discovery for vehicle diagnostics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydiagmqtt")
except PackageNotFoundError:
    __version__ = "0+local"
from pydiagmqtt.config import SessionConfig
from pydiagmqtt.discovery import HomeAssistantMqtt
from pydiagmqtt.exceptions import (
    DiagMqttConfigError,
    DiagMqttError,
    DiagMqttPublishError,
    DiagnosticResponseError,
)
from pydiagmqtt.ingestion.diagnostics import parse_diagnostic_response
from pydiagmqtt.models import Diagnostic, DiagnosticElement, Vehicle, VehicleIdentity
from pydiagmqtt.publish import MqttMessage, publish_messages

__all__ = [
    "Diagnostic",
    "DiagnosticElement",
    "DiagMqttConfigError",
    "DiagMqttError",
    "DiagMqttPublishError",
    "DiagnosticResponseError",
    "HomeAssistantMqtt",
    "MqttMessage",
    "SessionConfig",
    "Vehicle",
    "VehicleIdentity",
    "__version__",
    "parse_diagnostic_response",
    "publish_messages",
]
