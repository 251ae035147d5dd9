# rir_tracker/units.py
import math
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

KG_TO_LBS = 2.20462

KG = "kg"
LBS = "lbs"
WEIGHT_UNITS = (KG, LBS)


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


def round_half_away(value: float, places: int = 2) -> float:
    # Decimal's ROUND_HALF_UP rounds ties away from zero
    quant = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quant, rounding=ROUND_HALF_UP))


def convert_weight(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert between kilograms and pounds, rounded to 2 decimals.
    Equal units return the value untouched.
    """
    if from_unit not in WEIGHT_UNITS or to_unit not in WEIGHT_UNITS:
        raise ValueError(f"unknown weight unit: {from_unit!r} -> {to_unit!r}")
    if from_unit == to_unit:
        return value

    if from_unit == KG:
        return round_half_away(value * KG_TO_LBS)
    return round_half_away(value / KG_TO_LBS)


def weight_unit_for(system: UnitSystem) -> str:
    return KG if UnitSystem(system) == UnitSystem.METRIC else LBS


def to_display(weight_kg: float, system: UnitSystem) -> float:
    """Stored kg -> display unit, rounded for presentation."""
    return round_half_away(convert_weight(weight_kg, KG, weight_unit_for(system)))


def _trim(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_weight(weight_kg: float, system: UnitSystem) -> str:
    unit = weight_unit_for(system)
    return f"{_trim(convert_weight(weight_kg, KG, unit))} {unit}"


def parse_weight_input(text, system: UnitSystem) -> float:
    """Display-unit user input -> kg. Unparsable input counts as 0."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return convert_weight(value, weight_unit_for(system), KG)
