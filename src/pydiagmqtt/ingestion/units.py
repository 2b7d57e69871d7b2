"""Secondary-unit derivations.

Telemetry arrives in metric units. For every element whose unit is keyed
in :data:`UNIT_DERIVATIONS` a sibling element carrying the converted
value is derived, named ``"{name} {suffix}"`` (``ODOMETER`` →
``ODOMETER MI``). Target units are never source units, so derivation
does not chain.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pydiagmqtt.ingestion.normalize import safe_float

_KM_TO_MI = 0.621371
_L_TO_GAL = 0.264172
_KPA_TO_PSI = 0.145038
_KM_PER_L_TO_MPG = 2.35215
# 33.705 kWh per US gallon equivalent, per 100 km expressed in miles.
_KWH_PER_100KM_TO_MPGE = 33.705 * 100 * _KM_TO_MI

DERIVED_PRECISION = 1


@dataclass(frozen=True)
class UnitDerivation:
    """One secondary-unit conversion."""

    target_unit: str
    suffix: str
    convert: Callable[[float], float]

    def derived_name(self, name: str) -> str:
        return f"{name} {self.suffix}"

    def apply(self, value: float) -> float:
        return round(self.convert(value), DERIVED_PRECISION)


def _scale(factor: float) -> Callable[[float], float]:
    return lambda value: value * factor


def _celsius_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def _kwh_per_100km_to_mpge(value: float) -> float:
    if value == 0:
        return 0.0
    return _KWH_PER_100KM_TO_MPGE / value


UNIT_DERIVATIONS: dict[str, UnitDerivation] = {
    "°C": UnitDerivation("°F", "F", _celsius_to_fahrenheit),
    "km": UnitDerivation("mi", "MI", _scale(_KM_TO_MI)),
    "kPa": UnitDerivation("psi", "PSI", _scale(_KPA_TO_PSI)),
    "km/L": UnitDerivation("mpg", "MPG", _scale(_KM_PER_L_TO_MPG)),
    "km/L(e)": UnitDerivation("mpg(e)", "MPGE", _scale(_KM_PER_L_TO_MPG)),
    "L": UnitDerivation("gal", "GAL", _scale(_L_TO_GAL)),
    "L/hr": UnitDerivation("gal/hr", "GAL HR", _scale(_L_TO_GAL)),
    "kWh/100km": UnitDerivation("MPGe", "MPGE", _kwh_per_100km_to_mpge),
}

DERIVED_SUFFIXES: frozenset[str] = frozenset(d.suffix for d in UNIT_DERIVATIONS.values())


def derivation_for(unit: str | None) -> UnitDerivation | None:
    if unit is None:
        return None
    return UNIT_DERIVATIONS.get(unit)


def derive_values(
    name: str | None,
    value: object,
    unit: str | None,
) -> list[tuple[str, float, str]]:
    """Return ``(derived_name, converted_value, target_unit)`` for one reading.

    Non-numeric values, nameless readings and units without a derivation
    yield nothing.
    """
    derivation = derivation_for(unit)
    if derivation is None or not name:
        return []
    number = safe_float(value)
    if number is None:
        return []
    return [(derivation.derived_name(name), derivation.apply(number), derivation.target_unit)]


def derived_names(names: Iterable[str]) -> set[str]:
    """Expand *names* with every possible derived variant."""
    expanded: set[str] = set()
    for name in names:
        expanded.add(name)
        expanded.update(f"{name} {suffix}" for suffix in DERIVED_SUFFIXES)
    return expanded
