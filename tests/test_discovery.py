from __future__ import annotations

from pydiagmqtt.discovery import HomeAssistantMqtt, SensorType
from pydiagmqtt.models import Diagnostic, Vehicle


def test_static_helpers() -> None:
    assert HomeAssistantMqtt.convert_name("FOO BAR bazz") == "foo_bar_bazz"
    assert HomeAssistantMqtt.convert_friendly_name("FOO BAR") == "Foo Bar"
    assert HomeAssistantMqtt.determine_sensor_type("EV PLUG STATE") is SensorType.BINARY_SENSOR


def test_add_name_prefix(vehicle: Vehicle) -> None:
    assert HomeAssistantMqtt(vehicle).add_name_prefix("TestName") == "TestName"
    assert HomeAssistantMqtt(vehicle, name_prefix="").add_name_prefix("TestName") == "TestName"
    prefixed = HomeAssistantMqtt(vehicle, name_prefix="Prefix")
    assert prefixed.add_name_prefix("TestName") == "Prefix TestName"
    assert prefixed.add_name_prefix(None) == "Prefix undefined"


def test_config_alias(ha: HomeAssistantMqtt, diagnostics: list[Diagnostic]) -> None:
    d = diagnostics[7]
    assert ha.get_config_mapping(d, d.diagnostic_elements[0]) == ha.get_config_payload(d, d.diagnostic_elements[0])


def test_iter_discovery_messages(ha: HomeAssistantMqtt, diagnostics: list[Diagnostic]) -> None:
    d = diagnostics[3]
    messages = list(ha.iter_discovery_messages(d))

    assert [m.topic for m in messages] == [
        "homeassistant/binary_sensor/XXX/ev_charge_state/config",
        "homeassistant/binary_sensor/XXX/priority_charge_indicator/config",
        "homeassistant/binary_sensor/XXX/priority_charge_status/config",
        "homeassistant/binary_sensor/XXX/ev_charge_state/state",
    ]
    assert all(m.retain for m in messages)
    assert messages[1].payload["state_topic"] == messages[-1].topic
    assert messages[-1].payload == ha.get_state_payload(d)


def test_iter_discovery_messages_mixed_types(ha: HomeAssistantMqtt, diagnostics: list[Diagnostic]) -> None:
    topics = [m.topic for m in ha.iter_discovery_messages(diagnostics[8])]
    assert len(topics) == 13
    assert "homeassistant/sensor/XXX/tire_pressure_rr_psi/config" in topics
    assert topics[-1] == "homeassistant/sensor/XXX/tire_pressure/state"


def test_iter_discovery_messages_skips_nameless_and_empty(ha: HomeAssistantMqtt) -> None:
    d = Diagnostic.model_validate({"name": "X", "diagnosticElements": [{"value": "1"}]})
    assert list(ha.iter_discovery_messages(d)) == []
