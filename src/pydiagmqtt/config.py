"""Session configuration for pydiagmqtt."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pydiagmqtt._constants import DEFAULT_PREFIX
from pydiagmqtt.exceptions import DiagMqttConfigError
from pydiagmqtt.models.vehicle import VehicleIdentity


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise DiagMqttConfigError(f"{name} must be a boolean, got {value!r}")


@dataclasses.dataclass(frozen=True)
class SessionConfig:
    """Discovery session configuration.

    Set once per vehicle and read-only thereafter.

    Parameters
    ----------
    prefix : str
        Home Assistant discovery prefix. Defaults to ``"homeassistant"``.
    instance : str or None
        Per-vehicle topic segment, the VIN. ``None`` renders as the
        literal ``"undefined"`` in topics and unique ids.
    name_prefix : str or None
        Prepended (space separated) to every entity name when set.
    list_all_sensors_together : bool
        Default for the auxiliary status entities: ``True`` keeps them on
        the vehicle device, ``False`` groups them on a separate
        "Command Status Monitor" device.
    """

    prefix: str = DEFAULT_PREFIX
    instance: str | None = None
    name_prefix: str | None = None
    list_all_sensors_together: bool = False

    @classmethod
    def from_vehicle(
        cls,
        vehicle: VehicleIdentity | None,
        prefix: str = DEFAULT_PREFIX,
        name_prefix: str | None = None,
        **kwargs: Any,
    ) -> SessionConfig:
        """Create a configuration whose instance is the vehicle VIN."""
        kwargs.setdefault("instance", vehicle.vin if vehicle is not None else None)
        return cls(prefix=prefix, name_prefix=name_prefix, **kwargs)

    @classmethod
    def from_env(cls, vehicle: VehicleIdentity | None, **overrides: Any) -> SessionConfig:
        """Create configuration from environment variables.

        Reads ``MQTT_PREFIX``, ``MQTT_NAME_PREFIX`` and
        ``MQTT_LIST_ALL_SENSORS_TOGETHER``. Explicit keyword arguments
        override environment values.

        Raises
        ------
        DiagMqttConfigError
            When ``MQTT_LIST_ALL_SENSORS_TOGETHER`` is not a boolean.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "MQTT_PREFIX": "prefix",
            "MQTT_NAME_PREFIX": "name_prefix",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val:
                config_kwargs[field_name] = val

        if "list_all_sensors_together" not in overrides:
            config_kwargs["list_all_sensors_together"] = _env_bool(
                "MQTT_LIST_ALL_SENSORS_TOGETHER",
                env.get("MQTT_LIST_ALL_SENSORS_TOGETHER"),
                False,
            )

        config_kwargs.update(overrides)

        return cls.from_vehicle(vehicle, **config_kwargs)
