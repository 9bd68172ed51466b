"""
Unit normalization for calculator inputs.

Values are converted with fixed linear factors and are never rounded here;
rounding happens only when a result is produced.
"""
from typing import Callable, Dict, Tuple
from dataclasses import dataclass
from enum import Enum

from models.inputs import UnitSystem

CM_PER_INCH = 2.54
KG_PER_LB = 0.453592
CM_PER_M = 100.0


class Unit(str, Enum):
    CM = "cm"
    INCH = "in"
    M = "m"
    KG = "kg"
    LB = "lb"


class UnitConversionError(ValueError):
    """No conversion exists between the two units."""


@dataclass(frozen=True)
class Measurement:
    value: float
    unit: Unit

    def __post_init__(self):
        if self.value <= 0:
            raise ValueError(f"Measurement must be positive, got {self.value} {self.unit.value}")


_CONVERSIONS: Dict[Tuple[Unit, Unit], Callable[[float], float]] = {
    (Unit.INCH, Unit.CM): lambda v: v * CM_PER_INCH,
    (Unit.CM, Unit.INCH): lambda v: v / CM_PER_INCH,
    (Unit.LB, Unit.KG): lambda v: v * KG_PER_LB,
    (Unit.KG, Unit.LB): lambda v: v / KG_PER_LB,
    (Unit.CM, Unit.M): lambda v: v / CM_PER_M,
}


def convert(measurement: Measurement, target: Unit) -> float:
    """
    Convert a measurement to the target unit.

    Lengths without a direct factor (inches to meters) go through
    centimeters. Any other pair raises UnitConversionError.
    """
    source = measurement.unit
    value = measurement.value
    if source == target:
        return value
    if (source, target) in _CONVERSIONS:
        return _CONVERSIONS[(source, target)](value)
    if (source, Unit.CM) in _CONVERSIONS and (Unit.CM, target) in _CONVERSIONS:
        return _CONVERSIONS[(Unit.CM, target)](_CONVERSIONS[(source, Unit.CM)](value))
    raise UnitConversionError(f"Cannot convert {source.value} to {target.value}")


def length(value: float, unit_system: UnitSystem) -> Measurement:
    """A length as entered: cm for metric, inches for imperial."""
    return Measurement(value, Unit.INCH if UnitSystem(unit_system) == UnitSystem.IMPERIAL else Unit.CM)


def mass(value: float, unit_system: UnitSystem) -> Measurement:
    """A body weight as entered: kg for metric, lb for imperial."""
    return Measurement(value, Unit.LB if UnitSystem(unit_system) == UnitSystem.IMPERIAL else Unit.KG)


def to_cm(value: float, unit_system: UnitSystem) -> float:
    return convert(length(value, unit_system), Unit.CM)


def to_inches(value: float, unit_system: UnitSystem) -> float:
    return convert(length(value, unit_system), Unit.INCH)


def to_meters(value: float, unit_system: UnitSystem) -> float:
    return convert(length(value, unit_system), Unit.M)


def to_kg(value: float, unit_system: UnitSystem) -> float:
    return convert(mass(value, unit_system), Unit.KG)
