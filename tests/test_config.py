from __future__ import annotations

import dataclasses

import pytest

from pydiagmqtt.config import SessionConfig
from pydiagmqtt.exceptions import DiagMqttConfigError
from pydiagmqtt.models import Vehicle


def test_defaults() -> None:
    config = SessionConfig()
    assert config.prefix == "homeassistant"
    assert config.instance is None
    assert config.name_prefix is None
    assert config.list_all_sensors_together is False


def test_frozen() -> None:
    config = SessionConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.prefix = "other"  # type: ignore[misc]


def test_from_vehicle(vehicle: Vehicle) -> None:
    config = SessionConfig.from_vehicle(vehicle, prefix="ha", name_prefix="Car")
    assert config.instance == "XXX"
    assert config.prefix == "ha"
    assert config.name_prefix == "Car"


def test_from_vehicle_explicit_instance(vehicle: Vehicle) -> None:
    assert SessionConfig.from_vehicle(vehicle, instance="other").instance == "other"


def test_from_env(monkeypatch: pytest.MonkeyPatch, vehicle: Vehicle) -> None:
    monkeypatch.setenv("MQTT_PREFIX", "custom")
    monkeypatch.setenv("MQTT_NAME_PREFIX", "Bolt")
    monkeypatch.setenv("MQTT_LIST_ALL_SENSORS_TOGETHER", "yes")
    config = SessionConfig.from_env(vehicle)
    assert config.prefix == "custom"
    assert config.name_prefix == "Bolt"
    assert config.list_all_sensors_together is True
    assert config.instance == "XXX"


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch, vehicle: Vehicle) -> None:
    for key in ("MQTT_PREFIX", "MQTT_NAME_PREFIX", "MQTT_LIST_ALL_SENSORS_TOGETHER"):
        monkeypatch.delenv(key, raising=False)
    config = SessionConfig.from_env(vehicle)
    assert config == SessionConfig(instance="XXX")


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch, vehicle: Vehicle) -> None:
    monkeypatch.setenv("MQTT_PREFIX", "custom")
    monkeypatch.setenv("MQTT_LIST_ALL_SENSORS_TOGETHER", "not-a-bool")
    config = SessionConfig.from_env(vehicle, prefix="explicit", list_all_sensors_together=False)
    assert config.prefix == "explicit"
    assert config.list_all_sensors_together is False


def test_from_env_invalid_bool(monkeypatch: pytest.MonkeyPatch, vehicle: Vehicle) -> None:
    monkeypatch.setenv("MQTT_LIST_ALL_SENSORS_TOGETHER", "maybe")
    with pytest.raises(DiagMqttConfigError, match="MQTT_LIST_ALL_SENSORS_TOGETHER"):
        SessionConfig.from_env(vehicle)
