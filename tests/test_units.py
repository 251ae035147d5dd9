import pytest

from rir_tracker.units import (
    UnitSystem,
    convert_weight,
    format_weight,
    parse_weight_input,
    round_half_away,
    to_display,
    weight_unit_for,
)


def test_same_unit_is_identity():
    assert convert_weight(42.123, "kg", "kg") == 42.123
    assert convert_weight(42.123, "lbs", "lbs") == 42.123


def test_kg_to_lbs_and_back():
    assert convert_weight(100, "kg", "lbs") == 220.46
    assert convert_weight(220.46, "lbs", "kg") == 100.0


def test_rounds_half_away_from_zero():
    assert round_half_away(0.125) == 0.13
    assert round_half_away(2.675) == 2.68


@pytest.mark.parametrize("x", [0, 0.5, 1, 2.5, 61.3, 100, 142.75, 999.99])
def test_round_trip_within_tolerance(x):
    back = convert_weight(convert_weight(x, "kg", "lbs"), "lbs", "kg")
    assert abs(back - x) <= 0.01


def test_unknown_unit_raises():
    with pytest.raises(ValueError):
        convert_weight(1, "kg", "stone")


def test_unit_for_system():
    assert weight_unit_for(UnitSystem.METRIC) == "kg"
    assert weight_unit_for("imperial") == "lbs"


def test_display_helpers():
    assert to_display(100, UnitSystem.IMPERIAL) == 220.46
    assert to_display(100.126, UnitSystem.METRIC) == 100.13
    assert format_weight(100, UnitSystem.IMPERIAL) == "220.46 lbs"
    assert format_weight(100, UnitSystem.METRIC) == "100 kg"


def test_parse_weight_input():
    assert parse_weight_input("220.46", UnitSystem.IMPERIAL) == 100.0
    assert parse_weight_input("80", UnitSystem.METRIC) == 80.0
    assert parse_weight_input("abc", UnitSystem.METRIC) == 0
    assert parse_weight_input(None, UnitSystem.METRIC) == 0
