"""Internal constants shared across the library."""

from __future__ import annotations

from typing import NamedTuple

DEFAULT_PREFIX = "homeassistant"

# Rendered wherever a vehicle identifier or field name is missing.
UNDEFINED = "undefined"

# Unit sentinel the telemetry API sends for "no unit".
NA = "na"

PAYLOAD_AVAILABLE = "true"
PAYLOAD_NOT_AVAILABLE = "false"

COMMAND_STATUS_MONITOR = "Command Status Monitor"

# ------------------------------------------------------------------
# Home Assistant vocabulary
# ------------------------------------------------------------------

STATE_CLASS_MEASUREMENT = "measurement"
STATE_CLASS_TOTAL_INCREASING = "total_increasing"

ICON_MESSAGE_ALERT = "mdi:message-alert"
ICON_CALENDAR_CLOCK = "mdi:calendar-clock"
ICON_SYNC_ALERT = "mdi:sync-alert"
ICON_TIMER_CHECK = "mdi:timer-check-outline"

# ------------------------------------------------------------------
# Command buttons  (button label -> command sent on press)
# ------------------------------------------------------------------


class ButtonSpec(NamedTuple):
    """Command published on press and the button icon."""

    name: str
    icon: str


BUTTONS: dict[str, ButtonSpec] = {
    "Alert": ButtonSpec("alert", "mdi:alert"),
    "Alert Flash": ButtonSpec("alertFlash", "mdi:car-light-alert"),
    "Alert Honk": ButtonSpec("alertHonk", "mdi:bullhorn"),
    "Cancel Alert": ButtonSpec("cancelAlert", "mdi:alert-remove"),
    "Lock Door": ButtonSpec("lockDoor", "mdi:car-door-lock"),
    "Unlock Door": ButtonSpec("unlockDoor", "mdi:car-door-lock-open"),
    "Lock Trunk": ButtonSpec("lockTrunk", "mdi:car-back"),
    "Unlock Trunk": ButtonSpec("unlockTrunk", "mdi:car-back"),
    "Start": ButtonSpec("start", "mdi:car-key"),
    "Cancel Start": ButtonSpec("cancelStart", "mdi:car-off"),
    "Get Location": ButtonSpec("getLocation", "mdi:map-marker"),
    "Diagnostics": ButtonSpec("diagnostics", "mdi:car-info"),
    "Charge Override": ButtonSpec("chargeOverride", "mdi:ev-station"),
    "Cancel Charge Override": ButtonSpec("cancelChargeOverride", "mdi:ev-plug-type1"),
    "Get Charging Profile": ButtonSpec("getChargingProfile", "mdi:battery-charging-wireless"),
}
