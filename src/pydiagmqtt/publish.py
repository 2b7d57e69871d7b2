"""Hand-off of discovery and state messages to a paho-mqtt client.

Connection management, reconnection and delivery guarantees belong to
the caller's client; this module only serialises payloads and queues
them with :meth:`paho.mqtt.client.Client.publish`.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Iterable
from typing import Any

import paho.mqtt.client as mqtt

from pydiagmqtt._redact import redact_for_log
from pydiagmqtt.exceptions import DiagMqttPublishError

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class MqttMessage:
    """One message ready to publish."""

    topic: str
    payload: dict[str, Any]
    retain: bool = True

    def serialize(self) -> str:
        return json.dumps(self.payload, ensure_ascii=False, separators=(",", ":"))


def publish_messages(
    client: mqtt.Client,
    messages: Iterable[MqttMessage],
    qos: int = 0,
) -> list[mqtt.MQTTMessageInfo]:
    """Queue every message on *client* and return the paho message infos.

    Raises
    ------
    DiagMqttPublishError
        When paho refuses to queue a message (e.g. client not connected).
    """
    infos: list[mqtt.MQTTMessageInfo] = []
    for message in messages:
        _logger.debug(
            "MQTT publish topic=%s retain=%s payload=%s",
            redact_for_log(message.topic),
            message.retain,
            redact_for_log(message.payload),
        )
        info = client.publish(message.topic, message.serialize(), qos=qos, retain=message.retain)
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            raise DiagMqttPublishError(
                f"MQTT publish failed: {mqtt.error_string(info.rc)}",
                topic=message.topic,
                rc=info.rc,
            )
        infos.append(info)
    return infos
