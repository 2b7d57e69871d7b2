"""Home Assistant MQTT discovery for vehicle diagnostics.

:class:`HomeAssistantMqtt` binds one vehicle and its session
configuration to the topic builders, the config and state mappers and
the auxiliary payload factories::

    ha = HomeAssistantMqtt(vehicle, prefix="homeassistant")
    for diagnostic in parse_diagnostic_response(response):
        publish_messages(client, ha.iter_discovery_messages(diagnostic))
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from pydiagmqtt._constants import DEFAULT_PREFIX, STATE_CLASS_MEASUREMENT
from pydiagmqtt.config import SessionConfig
from pydiagmqtt.discovery import naming
from pydiagmqtt.discovery.auxiliary import AuxiliaryPayloadFactories, ButtonConfigs, ButtonInstance
from pydiagmqtt.discovery.classification import SensorType, determine_sensor_type
from pydiagmqtt.discovery.config_mapper import ConfigMapper, DiagnosticLike, ElementLike, as_diagnostic
from pydiagmqtt.discovery.state import get_state_payload
from pydiagmqtt.discovery.topics import Named, TopicBuilder
from pydiagmqtt.models.vehicle import VehicleIdentity
from pydiagmqtt.publish import MqttMessage

_logger = logging.getLogger(__name__)

__all__ = [
    "AuxiliaryPayloadFactories",
    "ButtonConfigs",
    "ButtonInstance",
    "ConfigMapper",
    "HomeAssistantMqtt",
    "SensorType",
    "TopicBuilder",
]


class HomeAssistantMqtt(AuxiliaryPayloadFactories):
    """Discovery facade for one vehicle.

    Parameters
    ----------
    vehicle : VehicleIdentity
        The vehicle; its VIN becomes the topic instance.
    prefix : str
        Discovery prefix, ``"homeassistant"`` by default.
    name_prefix : str or None
        Prepended to every entity name when set.
    config : SessionConfig or None
        Full configuration; takes precedence over *prefix*/*name_prefix*.
    """

    def __init__(
        self,
        vehicle: VehicleIdentity,
        prefix: str = DEFAULT_PREFIX,
        name_prefix: str | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        config = config or SessionConfig.from_vehicle(vehicle, prefix=prefix, name_prefix=name_prefix)
        topics = TopicBuilder(config)
        super().__init__(vehicle, config, topics)
        self._mapper = ConfigMapper(vehicle, config, topics)

    @property
    def vehicle(self) -> VehicleIdentity:
        return self._vehicle

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def prefix(self) -> str:
        return self._topics.prefix

    @property
    def instance(self) -> str | None:
        return self._config.instance

    @property
    def name_prefix(self) -> str | None:
        return self._config.name_prefix

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    convert_name = staticmethod(naming.convert_name)
    convert_friendly_name = staticmethod(naming.convert_friendly_name)
    determine_sensor_type = staticmethod(determine_sensor_type)

    def add_name_prefix(self, name: str | None) -> str | None:
        return naming.add_name_prefix(name, self._config.name_prefix)

    # ------------------------------------------------------------------
    # Topics
    # ------------------------------------------------------------------

    def get_availability_topic(self) -> str:
        return self._topics.availability()

    def get_command_topic(self) -> str:
        return self._topics.command()

    def get_polling_status_topic(self) -> str:
        return self._topics.polling_status()

    def get_refresh_interval_topic(self) -> str:
        return self._topics.refresh_interval()

    def get_refresh_interval_current_val_topic(self) -> str:
        return self._topics.refresh_interval_current_val()

    def get_device_tracker_config_topic(self) -> str:
        return self._topics.device_tracker_config()

    def get_command_status_topic(self, command: str) -> str:
        return self._topics.command_status_state(command)

    def get_config_topic(self, named: Named) -> str:
        return self._topics.config(named)

    def get_state_topic(self, named: Named) -> str:
        return self._topics.state(named)

    # ------------------------------------------------------------------
    # Payloads
    # ------------------------------------------------------------------

    def map_base_config_payload(self, diagnostic: DiagnosticLike, element: ElementLike) -> dict[str, Any]:
        return self._mapper.map_base_config_payload(diagnostic, element)

    def map_sensor_config_payload(
        self,
        diagnostic: DiagnosticLike,
        element: ElementLike,
        state_class: str | None = STATE_CLASS_MEASUREMENT,
    ) -> dict[str, Any]:
        return self._mapper.map_sensor_config_payload(diagnostic, element, state_class)

    def map_binary_sensor_config_payload(self, diagnostic: DiagnosticLike, element: ElementLike) -> dict[str, Any]:
        return self._mapper.map_binary_sensor_config_payload(diagnostic, element)

    def get_config_payload(self, diagnostic: DiagnosticLike, element: ElementLike) -> dict[str, Any]:
        return self._mapper.get_config_payload(diagnostic, element)

    get_config_mapping = get_config_payload

    def get_state_payload(self, diagnostic: DiagnosticLike) -> dict[str, Any]:
        return get_state_payload(diagnostic)

    def iter_discovery_messages(self, diagnostic: DiagnosticLike) -> Iterator[MqttMessage]:
        """Yield the config message of every element, then the state message.

        Nameless elements have no topic and are skipped; an empty state
        document is not published.
        """
        diagnostic = as_diagnostic(diagnostic)
        for element in diagnostic.diagnostic_elements:
            if not element.name:
                _logger.debug("Skipping nameless element of %s", diagnostic.name)
                continue
            yield MqttMessage(self._topics.config(element), self._mapper.get_config_payload(diagnostic, element))
        state = get_state_payload(diagnostic)
        if state:
            yield MqttMessage(self._topics.state(diagnostic), state)
