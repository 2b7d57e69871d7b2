"""Name normalization for topics, unique ids and entity names."""

from __future__ import annotations

import re

from pydiagmqtt._constants import UNDEFINED

_WHITESPACE_RE = re.compile(r"\s+")

_TIRES: dict[str, str] = {
    "LF": "Left Front",
    "RF": "Right Front",
    "LR": "Left Rear",
    "RR": "Right Rear",
}

FRIENDLY_NAME_OVERRIDES: dict[str, str] = {
    f"TIRE PRESSURE {code}": f"Tire Pressure: {position}" for code, position in _TIRES.items()
}
FRIENDLY_NAME_OVERRIDES.update(
    {f"TIRE PRESSURE {code} PSI": f"Tire Pressure: {position} PSI" for code, position in _TIRES.items()}
)


def convert_name(name: str | None) -> str:
    """Topic slug: lowercase, every whitespace run → ``_``, edges included.

    ``None``/empty → ``''``; ``" foo"`` → ``"_foo"``.
    """
    if not name:
        return ""
    return _WHITESPACE_RE.sub("_", name).lower()


def convert_friendly_name(name: str | None) -> str:
    """Title-case every whitespace-delimited word: ``"FOO  BAR"`` → ``"Foo Bar"``."""
    if not name:
        return ""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split())


def unique_id_slug(name: str | None) -> str:
    """Unique-id slug: lowercase, whitespace runs → ``-``.

    A missing name renders the literal ``"undefined"``.
    """
    if name is None:
        return UNDEFINED
    return _WHITESPACE_RE.sub("-", name).lower()


def friendly_name(name: str | None) -> str:
    """Entity name for an element, honouring the tire-position overrides."""
    if not name:
        return ""
    override = FRIENDLY_NAME_OVERRIDES.get(_WHITESPACE_RE.sub(" ", name.strip()).upper())
    return override if override is not None else convert_friendly_name(name)


def message_friendly_name(object_id: str) -> str:
    """Entity name for a ``*_message`` companion sensor.

    ``"tire_pressure_lf_message"`` → ``"Tire Pressure: Left Front Message"``,
    ``"testSensor"`` → ``"TestSensor Message"``.
    """
    base = object_id[: -len("_message")] if object_id.endswith("_message") else object_id
    override = FRIENDLY_NAME_OVERRIDES.get(base.replace("_", " ").upper())
    if override is None:
        override = " ".join(word[:1].upper() + word[1:] for word in base.split("_") if word)
    return f"{override} Message"


def add_name_prefix(name: str | None, name_prefix: str | None) -> str | None:
    """Prepend *name_prefix* when set: ``("Name", "Prefix")`` → ``"Prefix Name"``."""
    if not name_prefix:
        return name
    return f"{name_prefix} {name if name is not None else UNDEFINED}"

