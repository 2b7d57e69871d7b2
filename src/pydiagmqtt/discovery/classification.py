"""Diagnostic element classification.

Maps element names (``"ODOMETER"``, ``"EV PLUG STATE"``...) to the Home
Assistant component that represents them and, for sensors, to their
``device_class`` / ``state_class`` / unit override.

:data:`SENSOR_RULES` is evaluated top to bottom and the first matching
rule wins; names no rule matches fall back to :data:`DEFAULT_SENSOR`
(``state_class="measurement"``, no device class).
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from pydiagmqtt._constants import STATE_CLASS_MEASUREMENT, STATE_CLASS_TOTAL_INCREASING
from pydiagmqtt.ingestion.units import derived_names

_logger = logging.getLogger(__name__)


class SensorType(enum.StrEnum):
    """Home Assistant MQTT component."""

    SENSOR = "sensor"
    BINARY_SENSOR = "binary_sensor"
    DEVICE_TRACKER = "device_tracker"
    BUTTON = "button"


@dataclass(frozen=True)
class Classification:
    """How a sensor element is presented to Home Assistant."""

    device_class: str | None = None
    state_class: str | None = STATE_CLASS_MEASUREMENT
    unit: str | None = None
    """Overrides the unit reported by the API."""
    text: bool = False
    """Text-valued: the raw string is published instead of a number."""


@dataclass(frozen=True)
class BooleanTokens:
    """String encoding of a boolean element; anything but ``true`` is off."""

    true: str
    false: str


DEFAULT_SENSOR = Classification()
TEXT_SENSOR = Classification(state_class=None, text=True)

# ------------------------------------------------------------------
# Boolean elements
# ------------------------------------------------------------------

_TRUE_FALSE = BooleanTokens("TRUE", "FALSE")
_ON_OFF = BooleanTokens("ON", "OFF")

BOOLEAN_TOKENS: dict[str, BooleanTokens] = {
    "EV CHARGE STATE": BooleanTokens("charging", "not_charging"),
    "EV PLUG STATE": BooleanTokens("plugged", "unplugged"),
    "PRIORITY CHARGE INDICATOR": _TRUE_FALSE,
    "PRIORITY CHARGE STATUS": BooleanTokens("ACTIVE", "NOT_ACTIVE"),
    "LOC BASED CHARGING HOME LOC STORED": _TRUE_FALSE,
    "SCHEDULED CABIN PRECONDTION CUSTOM SET REQ ACTIVE": _TRUE_FALSE,
    "VEH IN HOME LOCATION": _TRUE_FALSE,
    "VEH NOT IN HOME LOC": _TRUE_FALSE,
    "VEH LOCATION STATUS INVALID": _TRUE_FALSE,
    "CABIN PRECOND REQUEST": _ON_OFF,
    "PREF CHARGING TIMES SETTING": _ON_OFF,
    "LOCATION BASE CHARGE SETTING": _ON_OFF,
    "CABIN PRECONDITIONING REQUEST": BooleanTokens("ACTION", "NO_ACTION"),
    "HIGH VOLTAGE BATTERY PRECONDITIONING STATUS": BooleanTokens("ENABLED", "DISABLED"),
    "EXHST PART FLTR WARN ON": _TRUE_FALSE,
    "EXHST PART FLTR WARN2 ON": _TRUE_FALSE,
}

# Substrings that mark a boolean element even when it has no token entry.
BINARY_MARKERS: tuple[str, ...] = (
    "CHARGE STATE",
    "PLUG STATE",
    "PRIORITY CHARGE INDICATOR",
    "PRIORITY CHARGE STATUS",
)

BINARY_DEVICE_CLASSES: dict[str, str] = {
    "EV CHARGE STATE": "battery_charging",
    "EV PLUG STATE": "plug",
}

_LOCATION_GETTER_RE = re.compile(r"^get\w*location$", re.IGNORECASE)

# ------------------------------------------------------------------
# Sensor rules
# ------------------------------------------------------------------

Matcher = Callable[[str], bool]


def _named(*names: str) -> Matcher:
    """Exact match on any of *names* or their derived-unit variants."""
    expanded = frozenset(derived_names(names))
    return lambda name: name in expanded


def _containing(*fragments: str) -> Matcher:
    return lambda name: any(fragment in name for fragment in fragments)


def _word(*words: str) -> Matcher:
    pattern = re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")
    return lambda name: pattern.search(name) is not None


@dataclass(frozen=True)
class ClassificationRule:
    matches: Matcher
    classification: Classification


SENSOR_RULES: tuple[ClassificationRule, ...] = (
    # Text-valued settings and statuses
    ClassificationRule(
        _named(
            "CHARGER POWER LEVEL",
            "CHARGE DAY OF WEEK",
            "WEEKDAY START TIME",
            "WEEKDAY END TIME",
            "WEEKEND START TIME",
            "WEEKEND END TIME",
            "EXHST FL LEVL WARN STATUS",
            "EV CHARGE MODE",
            "RATE TYPE",
            "CHARGE MODE",
        ),
        TEXT_SENSOR,
    ),
    # Counters
    ClassificationRule(_named("ODOMETER"), Classification("distance", STATE_CLASS_TOTAL_INCREASING)),
    ClassificationRule(_named("LIFETIME ENERGY USED"), Classification("energy", STATE_CLASS_TOTAL_INCREASING)),
    ClassificationRule(_named("LIFETIME FUEL USED"), Classification("volume", STATE_CLASS_TOTAL_INCREASING)),
    # Levels
    ClassificationRule(_named("EV BATTERY LEVEL", "HYBRID BATTERY LEVEL"), Classification("battery", unit="%")),
    ClassificationRule(_named("OIL LIFE", "FUEL LEVEL"), Classification(unit="%")),
    ClassificationRule(_named("FUEL AMOUNT", "FUEL CAPACITY"), Classification("volume_storage")),
    # Physical quantities
    ClassificationRule(_containing("TIRE PRESSURE"), Classification("pressure")),
    ClassificationRule(_word("TEMPERATURE", "TEMP"), Classification("temperature")),
    ClassificationRule(_word("VOLT", "VOLTAGE"), Classification("voltage")),
    ClassificationRule(_word("CURRENT"), Classification("current")),
    ClassificationRule(_word("RANGE", "DISTANCE"), Classification("distance")),
    # Economy figures have no matching device class
    ClassificationRule(
        _named(
            "ELECTRIC ECONOMY",
            "LIFETIME EFFICIENCY",
            "LIFETIME MPGE",
            "LIFETIME FUEL ECON",
            "LAST TRIP FUEL ECONOMY",
            "LAST TRIP ELECTRIC ECON",
        ),
        DEFAULT_SENSOR,
    ),
)


def _key(name: str | None) -> str:
    return " ".join(name.split()).upper() if name else ""


def boolean_tokens(name: str | None) -> BooleanTokens | None:
    return BOOLEAN_TOKENS.get(_key(name))


def determine_sensor_type(name: str | None) -> SensorType:
    """Return the component for *name*; total, defaulting to ``sensor``."""
    if not name:
        return SensorType.SENSOR
    key = _key(name)
    if key in BOOLEAN_TOKENS or any(marker in key for marker in BINARY_MARKERS):
        return SensorType.BINARY_SENSOR
    if _LOCATION_GETTER_RE.match(name.strip()):
        return SensorType.DEVICE_TRACKER
    return SensorType.SENSOR


def classify(name: str | None) -> Classification:
    """Return the sensor classification for *name*."""
    key = _key(name)
    for rule in SENSOR_RULES:
        if rule.matches(key):
            return rule.classification
    _logger.debug("No classification rule for %r, using default", name)
    return DEFAULT_SENSOR


def binary_device_class(name: str | None) -> str | None:
    return BINARY_DEVICE_CLASSES.get(_key(name))
