from __future__ import annotations

import math

import pytest

from pydiagmqtt.ingestion.normalize import normalize_unit, parse_number, prune_payload, safe_float


class TestParseNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("15", 15),
            ("6013.8", 6013.8),
            ("60", 60),
            (341, 341),
            (21.85, 21.85),
            ("1e3", 1000.0),
            ("-4", -4),
        ],
    )
    def test_numbers(self, value: object, expected: float) -> None:
        assert parse_number(value) == expected

    def test_integer_literals_stay_int(self) -> None:
        assert isinstance(parse_number("15"), int)
        assert isinstance(parse_number("15.0"), float)

    @pytest.mark.parametrize(
        "value",
        [None, "", "--", "NOT_A_NUMBER", "TRUE", True, False, "nan", "inf", "1_000", "١٢٣", "１２", "0x10", "1e"],
    )
    def test_non_numbers(self, value: object) -> None:
        assert parse_number(value) is None


def test_safe_float_rejects_nan() -> None:
    assert safe_float(math.nan) is None
    assert safe_float("12.5") == 12.5


class TestNormalizeUnit:
    @pytest.mark.parametrize("unit", ["NA", "na", "nA", "Na"])
    def test_na_in_any_case(self, unit: str) -> None:
        assert normalize_unit(unit, "XXX") is None

    def test_instance_id(self) -> None:
        assert normalize_unit("XXX", "XXX") is None
        assert normalize_unit("XXX", None) == "XXX"

    def test_passthrough(self) -> None:
        assert normalize_unit("kPa", "XXX") == "kPa"
        assert normalize_unit(None, "XXX") is None
        assert normalize_unit("", "XXX") is None


def test_prune_payload_drops_only_none() -> None:
    payload = {
        "name": "",
        "qos": 0,
        "enabled_by_default": False,
        "icon": None,
        "device": {"identifiers": [None, "XXX"], "suggested_area": None},
    }
    assert prune_payload(payload) == {
        "name": "",
        "qos": 0,
        "enabled_by_default": False,
        "device": {"identifiers": ["XXX"]},
    }
