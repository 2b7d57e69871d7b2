"""MQTT topic builders.

Fixed per-vehicle topics live directly under the prefix
(``homeassistant/<vin>/available``); discovery topics follow
``{prefix}/{component}/{instance}/{object_id}/{config|state}``.
"""

from __future__ import annotations

from typing import Protocol

from pydiagmqtt._constants import UNDEFINED
from pydiagmqtt.config import SessionConfig
from pydiagmqtt.discovery.classification import SensorType, determine_sensor_type
from pydiagmqtt.discovery.naming import convert_name


class Named(Protocol):
    name: str | None


class TopicBuilder:
    """Pure topic builders over a :class:`SessionConfig`."""

    def __init__(self, config: SessionConfig) -> None:
        self._config = config

    @property
    def prefix(self) -> str:
        return self._config.prefix

    @property
    def instance(self) -> str:
        return self._config.instance if self._config.instance is not None else UNDEFINED

    def _vehicle_topic(self, name: str) -> str:
        return f"{self.prefix}/{self.instance}/{name}"

    def availability(self) -> str:
        return self._vehicle_topic("available")

    def command(self) -> str:
        return self._vehicle_topic("command")

    def polling_status(self) -> str:
        return self._vehicle_topic("polling_status")

    def refresh_interval(self) -> str:
        return self._vehicle_topic("refresh_interval")

    def refresh_interval_current_val(self) -> str:
        return self._vehicle_topic("refresh_interval_current_val")

    def command_status_state(self, command: str) -> str:
        return f"{self.command()}/{command}/state"

    def device_tracker_config(self) -> str:
        return f"{self.prefix}/{SensorType.DEVICE_TRACKER}/{self.instance}/config"

    def entity(self, component: SensorType | str, object_id: str, kind: str) -> str:
        return f"{self.prefix}/{component}/{self.instance}/{object_id}/{kind}"

    def config(self, named: Named) -> str:
        return self.entity(determine_sensor_type(named.name), convert_name(named.name), "config")

    def state(self, named: Named) -> str:
        return self.entity(determine_sensor_type(named.name), convert_name(named.name), "state")
