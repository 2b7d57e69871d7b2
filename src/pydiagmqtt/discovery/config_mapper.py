"""Discovery config payloads for diagnostic elements.

Every element of a :class:`Diagnostic` becomes one Home Assistant entity.
All entities of a diagnostic share its state topic; each one picks its
field out of the shared state document with ``value_template``.

The mapping is total: unknown names get the default sensor
classification and missing values simply leave keys out of the payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydiagmqtt._constants import PAYLOAD_AVAILABLE, PAYLOAD_NOT_AVAILABLE, STATE_CLASS_MEASUREMENT
from pydiagmqtt.config import SessionConfig
from pydiagmqtt.discovery.attributes import attributes_template
from pydiagmqtt.discovery.classification import SensorType, binary_device_class, classify, determine_sensor_type
from pydiagmqtt.discovery.device import unique_id_vin, vehicle_device
from pydiagmqtt.discovery.naming import add_name_prefix, convert_name, friendly_name, unique_id_slug
from pydiagmqtt.discovery.topics import TopicBuilder
from pydiagmqtt.ingestion.normalize import normalize_unit, prune_payload
from pydiagmqtt.models.diagnostic import Diagnostic, DiagnosticElement
from pydiagmqtt.models.vehicle import VehicleIdentity

DiagnosticLike = Diagnostic | Mapping[str, Any]
ElementLike = DiagnosticElement | Mapping[str, Any]


def as_diagnostic(diagnostic: DiagnosticLike) -> Diagnostic:
    if isinstance(diagnostic, Diagnostic):
        return diagnostic
    return Diagnostic.model_validate(dict(diagnostic))


def as_element(element: ElementLike) -> DiagnosticElement:
    if isinstance(element, DiagnosticElement):
        return element
    return DiagnosticElement.model_validate(dict(element))


class ConfigMapper:
    """Builds discovery config payloads for one vehicle."""

    def __init__(self, vehicle: VehicleIdentity, config: SessionConfig, topics: TopicBuilder | None = None) -> None:
        self._vehicle = vehicle
        self._config = config
        self._topics = topics or TopicBuilder(config)

    def _base(self, diagnostic: Diagnostic, element: DiagnosticElement) -> dict[str, Any]:
        return {
            "availability_topic": self._topics.availability(),
            "payload_available": PAYLOAD_AVAILABLE,
            "payload_not_available": PAYLOAD_NOT_AVAILABLE,
            "device": vehicle_device(self._vehicle, suggested_area=f"{self._vehicle} Sensors"),
            "name": add_name_prefix(friendly_name(element.name), self._config.name_prefix),
            "unique_id": f"{unique_id_vin(self._vehicle)}-{unique_id_slug(element.name)}",
            "state_topic": self._topics.state(diagnostic),
            "value_template": f"{{{{ value_json.{convert_name(element.name)} }}}}",
        }

    def _sensor(
        self,
        diagnostic: Diagnostic,
        element: DiagnosticElement,
        state_class: str | None,
    ) -> dict[str, Any]:
        payload = self._base(diagnostic, element)
        classification = classify(element.name)
        template = attributes_template(element.name)
        # Overrides only replace a real unit; sentinels stay absent.
        unit = normalize_unit(element.unit, self._config.instance)
        if unit is not None and classification.unit:
            unit = classification.unit
        payload.update(
            {
                "state_class": state_class,
                "device_class": classification.device_class,
                "unit_of_measurement": unit,
                "json_attributes_topic": payload["state_topic"] if template else None,
                "json_attributes_template": template,
            }
        )
        return payload

    def _binary_sensor(self, diagnostic: Diagnostic, element: DiagnosticElement) -> dict[str, Any]:
        payload = self._base(diagnostic, element)
        payload.update(
            {
                "payload_on": True,
                "payload_off": False,
                "device_class": binary_device_class(element.name),
            }
        )
        return payload

    def map_base_config_payload(self, diagnostic: DiagnosticLike, element: ElementLike) -> dict[str, Any]:
        """Scaffold common to every element entity."""
        return prune_payload(self._base(as_diagnostic(diagnostic), as_element(element)))

    def map_sensor_config_payload(
        self,
        diagnostic: DiagnosticLike,
        element: ElementLike,
        state_class: str | None = STATE_CLASS_MEASUREMENT,
    ) -> dict[str, Any]:
        """Sensor entity with an explicit *state_class*."""
        return prune_payload(self._sensor(as_diagnostic(diagnostic), as_element(element), state_class))

    def map_binary_sensor_config_payload(self, diagnostic: DiagnosticLike, element: ElementLike) -> dict[str, Any]:
        """Binary sensor entity publishing JSON booleans."""
        return prune_payload(self._binary_sensor(as_diagnostic(diagnostic), as_element(element)))

    def get_config_mapping(self, diagnostic: DiagnosticLike, element: ElementLike) -> dict[str, Any]:
        """Config payload for *element*, routed on its sensor type."""
        diagnostic = as_diagnostic(diagnostic)
        element = as_element(element)
        if determine_sensor_type(element.name) is SensorType.BINARY_SENSOR:
            return prune_payload(self._binary_sensor(diagnostic, element))
        return prune_payload(self._sensor(diagnostic, element, classify(element.name).state_class))

    get_config_payload = get_config_mapping
