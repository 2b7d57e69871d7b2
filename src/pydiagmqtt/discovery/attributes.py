"""``json_attributes_template`` derivations.

Some sensors expose sibling fields of their state document as entity
attributes: every tire pressure carries the placard recommendation and
its own status message, oil life carries its message.
"""

from __future__ import annotations

from collections.abc import Callable

from pydiagmqtt.discovery.naming import convert_name

AttributeTemplateBuilder = Callable[[str], str]


def render_attributes_template(attributes: dict[str, str]) -> str:
    """Render a Jinja expression that serialises *attributes* from ``value_json``.

    ``{"message": "oil_life_message"}`` →
    ``"{{ {'message': value_json.oil_life_message} | tojson }}"``
    """
    pairs = ", ".join(f"'{key}': value_json.{field}" for key, field in attributes.items())
    return f"{{{{ {{{pairs}}} | tojson }}}}"


def _message_only(name: str) -> str:
    return render_attributes_template({"message": f"{convert_name(name)}_message"})


def _with_recommendation(placard: str) -> AttributeTemplateBuilder:
    def build(name: str) -> str:
        return render_attributes_template(
            {
                "recommendation": placard,
                "message": f"{convert_name(name)}_message",
            }
        )

    return build


ATTRIBUTE_TEMPLATES: dict[str, AttributeTemplateBuilder] = {
    "TIRE PRESSURE LF": _with_recommendation("tire_pressure_placard_front"),
    "TIRE PRESSURE RF": _with_recommendation("tire_pressure_placard_front"),
    "TIRE PRESSURE LR": _with_recommendation("tire_pressure_placard_rear"),
    "TIRE PRESSURE RR": _with_recommendation("tire_pressure_placard_rear"),
    "TIRE PRESSURE LF PSI": _with_recommendation("tire_pressure_placard_front_psi"),
    "TIRE PRESSURE RF PSI": _with_recommendation("tire_pressure_placard_front_psi"),
    "TIRE PRESSURE LR PSI": _with_recommendation("tire_pressure_placard_rear_psi"),
    "TIRE PRESSURE RR PSI": _with_recommendation("tire_pressure_placard_rear_psi"),
    "OIL LIFE": _message_only,
}


def attributes_template(name: str | None) -> str | None:
    """Return the ``json_attributes_template`` for *name*, if it has one."""
    if not name:
        return None
    builder = ATTRIBUTE_TEMPLATES.get(" ".join(name.split()).upper())
    return builder(name) if builder is not None else None
