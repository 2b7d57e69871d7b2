"""Custom exception hierarchy for pydiagmqtt.

The mapping engine itself never raises for unknown or malformed
diagnostics; these errors cover configuration, API envelope parsing and
the hand-off to the MQTT client.
"""

from __future__ import annotations


class DiagMqttError(Exception):
    """Base exception for all pydiagmqtt errors."""


class DiagMqttConfigError(DiagMqttError):
    """Invalid configuration value."""


class DiagnosticResponseError(DiagMqttError):
    """Telemetry API response does not carry a diagnostic list."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class DiagMqttPublishError(DiagMqttError):
    """The MQTT client refused to queue a message."""

    def __init__(self, message: str, *, topic: str = "", rc: int | None = None) -> None:
        self.topic = topic
        self.rc = rc
        super().__init__(message)
