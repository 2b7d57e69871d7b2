"""Discovery payloads for the gateway's own entities.

Command buttons, command status monitors and polling status sensors do
not come from diagnostics. Each factory returns ``{"topic": ...,
"payload": ...}``; the ``list_all_sensors_together`` flag picks the
device the entity binds to (see :func:`status_device`) and leaves
topics and templates untouched.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from pydiagmqtt._constants import (
    BUTTONS,
    ICON_CALENDAR_CLOCK,
    ICON_MESSAGE_ALERT,
    ICON_SYNC_ALERT,
    ICON_TIMER_CHECK,
    STATE_CLASS_MEASUREMENT,
)
from pydiagmqtt.config import SessionConfig
from pydiagmqtt.discovery.classification import SensorType
from pydiagmqtt.discovery.device import (
    availability_block,
    command_status_monitor_device,
    status_device,
    unique_id_vin,
    vehicle_device,
)
from pydiagmqtt.discovery.naming import add_name_prefix, convert_name, message_friendly_name, unique_id_slug
from pydiagmqtt.discovery.topics import TopicBuilder
from pydiagmqtt.ingestion.normalize import prune_payload
from pydiagmqtt.models.vehicle import VehicleIdentity

ConfigMessage = dict[str, Any]


@dataclasses.dataclass(frozen=True)
class ButtonInstance:
    """One command button and its config topic."""

    name: str
    config: str
    vehicle: VehicleIdentity


@dataclasses.dataclass(frozen=True)
class ButtonConfigs:
    """Parallel lists, one entry per :data:`BUTTONS` key, in table order."""

    button_instances: list[ButtonInstance]
    button_configs: list[str]
    config_payloads: list[dict[str, Any]]


def _button_unique_id(vin: str | None, *parts: str) -> str:
    return unique_id_slug("_".join((str(vin), "Command", *parts)))


class AuxiliaryPayloadFactories:
    """Factories for buttons and status sensors of one vehicle."""

    def __init__(self, vehicle: VehicleIdentity, config: SessionConfig, topics: TopicBuilder | None = None) -> None:
        self._vehicle = vehicle
        self._config = config
        self._topics = topics or TopicBuilder(config)

    def _together(self, list_all_sensors_together: bool | None) -> bool:
        if list_all_sensors_together is None:
            return self._config.list_all_sensors_together
        return list_all_sensors_together

    def _name(self, name: str) -> str | None:
        return add_name_prefix(name, self._config.name_prefix)

    def _status_sensor(
        self,
        component: SensorType,
        object_id: str,
        list_all_sensors_together: bool | None,
        **fields: Any,
    ) -> ConfigMessage:
        payload: dict[str, Any] = {
            "device": status_device(self._vehicle, self._together(list_all_sensors_together)),
            "availability": availability_block(self._topics.availability()),
        }
        payload.update(fields)
        if "name" in payload:
            payload["name"] = self._name(payload["name"])
        return {
            "topic": self._topics.entity(component, object_id, "config"),
            "payload": prune_payload(payload),
        }

    # ------------------------------------------------------------------
    # Buttons
    # ------------------------------------------------------------------

    def _buttons(self, vehicle: VehicleIdentity, *, monitor: bool) -> ButtonConfigs:
        instances: list[ButtonInstance] = []
        configs: list[str] = []
        payloads: list[dict[str, Any]] = []
        for button_name, definition in BUTTONS.items():
            object_id = convert_name(button_name)
            suffix: tuple[str, ...] = ()
            if monitor:
                object_id = f"{object_id}_monitor"
                suffix = ("Monitor",)
            config_topic = self._topics.entity(SensorType.BUTTON, object_id, "config")
            instances.append(ButtonInstance(name=button_name, config=config_topic, vehicle=vehicle))
            configs.append(config_topic)
            payloads.append(
                prune_payload(
                    {
                        "device": command_status_monitor_device(vehicle) if monitor else vehicle_device(vehicle),
                        "availability": availability_block(self._topics.availability()),
                        "unique_id": _button_unique_id(vehicle.vin, button_name, *suffix),
                        "name": self._name(f"Command {button_name}"),
                        "icon": definition.icon,
                        "command_topic": self._topics.command(),
                        "payload_press": json.dumps({"command": definition.name}),
                        "qos": 2,
                        "enabled_by_default": False,
                    }
                )
            )
        return ButtonConfigs(button_instances=instances, button_configs=configs, config_payloads=payloads)

    def create_button_config_payload(self, vehicle: VehicleIdentity | None = None) -> ButtonConfigs:
        """One command button per :data:`BUTTONS` entry on the vehicle device."""
        return self._buttons(vehicle or self._vehicle, monitor=False)

    def create_button_config_payload_csmg(self, vehicle: VehicleIdentity | None = None) -> ButtonConfigs:
        """Command buttons bound to the Command Status Monitor device."""
        return self._buttons(vehicle or self._vehicle, monitor=True)

    # ------------------------------------------------------------------
    # Command status
    # ------------------------------------------------------------------

    def create_command_status_sensor_config_payload(
        self, command: str, list_all_sensors_together: bool | None = None
    ) -> ConfigMessage:
        return self._status_sensor(
            SensorType.SENSOR,
            f"{command}_status_monitor",
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_{command}_command_status_monitor",
            name=f"Command {command} Status Monitor",
            state_topic=self._topics.command_status_state(command),
            value_template="{{ value_json.command.error.message }}",
            icon=ICON_MESSAGE_ALERT,
        )

    def create_command_status_sensor_timestamp_config_payload(
        self, command: str, list_all_sensors_together: bool | None = None
    ) -> ConfigMessage:
        return self._status_sensor(
            SensorType.SENSOR,
            f"{command}_status_timestamp",
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_{command}_command_status_timestamp_monitor",
            name=f"Command {command} Status Monitor Timestamp",
            state_topic=self._topics.command_status_state(command),
            value_template="{{ value_json.completionTimestamp }}",
            device_class="timestamp",
            icon=ICON_CALENDAR_CLOCK,
        )

    # ------------------------------------------------------------------
    # Polling status
    # ------------------------------------------------------------------

    def create_polling_status_message_sensor_config_payload(
        self, polling_status_topic_state: str, list_all_sensors_together: bool | None = None
    ) -> ConfigMessage:
        return self._status_sensor(
            SensorType.SENSOR,
            "polling_status_message",
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_polling_status_message",
            name="Polling Status Message",
            state_topic=polling_status_topic_state,
            value_template="{{ value_json.error.message }}",
            icon=ICON_MESSAGE_ALERT,
        )

    def create_polling_status_code_sensor_config_payload(
        self, polling_status_topic_state: str, list_all_sensors_together: bool | None = None
    ) -> ConfigMessage:
        return self._status_sensor(
            SensorType.SENSOR,
            "polling_status_code",
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_polling_status_code",
            name="Polling Status Code",
            state_topic=polling_status_topic_state,
            value_template="{{ value_json.error.response.status | int(0) }}",
            icon=ICON_SYNC_ALERT,
        )

    def create_polling_status_timestamp_sensor_config_payload(
        self, polling_status_topic_state: str, list_all_sensors_together: bool | None = None
    ) -> ConfigMessage:
        return self._status_sensor(
            SensorType.SENSOR,
            "polling_status_timestamp",
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_polling_status_timestamp",
            name="Polling Status Timestamp",
            state_topic=polling_status_topic_state,
            value_template="{{ value_json.completionTimestamp }}",
            device_class="timestamp",
            icon=ICON_CALENDAR_CLOCK,
        )

    def create_polling_refresh_interval_sensor_config_payload(
        self, refresh_interval_current_val_topic: str, list_all_sensors_together: bool | None = None
    ) -> ConfigMessage:
        return self._status_sensor(
            SensorType.SENSOR,
            "polling_refresh_interval",
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_polling_refresh_interval",
            name="Polling Refresh Interval",
            state_topic=refresh_interval_current_val_topic,
            value_template="{{ value | int(0) }}",
            icon=ICON_TIMER_CHECK,
            unit_of_measurement="ms",
            state_class=STATE_CLASS_MEASUREMENT,
            device_class="duration",
        )

    def create_polling_status_tf_sensor_config_payload(
        self, polling_status_topic_state: str, list_all_sensors_together: bool | None = None
    ) -> ConfigMessage:
        # "problem" semantics: on means the last poll failed.
        return self._status_sensor(
            SensorType.BINARY_SENSOR,
            "polling_status_tf",
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_onstar_polling_status_successful",
            name="Polling Status Successful",
            state_topic=polling_status_topic_state,
            payload_on="false",
            payload_off="true",
            device_class="problem",
            icon=ICON_SYNC_ALERT,
        )

    # ------------------------------------------------------------------
    # Message companions
    # ------------------------------------------------------------------

    def create_sensor_message_config_payload(
        self,
        sensor: str,
        component: str | None = None,
        icon: str | None = None,
        list_all_sensors_together: bool | None = True,
    ) -> ConfigMessage:
        """Text sensor exposing the ``*_message`` field of a state document.

        *sensor* is the state object id (``"tire_pressure"``); *component*
        the message field when it is not ``f"{sensor}_message"``.
        """
        object_id = component or f"{sensor}_message"
        return self._status_sensor(
            SensorType.SENSOR,
            object_id,
            list_all_sensors_together,
            unique_id=f"{unique_id_vin(self._vehicle)}_{object_id}",
            name=message_friendly_name(object_id),
            state_topic=self._topics.entity(SensorType.SENSOR, sensor, "state"),
            value_template=f"{{{{ value_json.{object_id} }}}}",
            icon=icon,
        )
