"""Calculator result variants.

One frozen dataclass per calculator. Callers match on the concrete type;
CalculatorResult lists every variant.
"""
from typing import ClassVar, Union
from dataclasses import dataclass

from models.inputs import CalculatorType


@dataclass(frozen=True)
class BmiResult:
    calculator_type: ClassVar[CalculatorType] = CalculatorType.BMI
    bmi: float              # kg/m², 1 decimal
    category: str


@dataclass(frozen=True)
class CalorieResult:
    calculator_type: ClassVar[CalculatorType] = CalculatorType.CALORIE
    calories: int           # TDEE, kcal/day
    bmr: float              # kcal/day, 1 decimal


@dataclass(frozen=True)
class HeartRateResult:
    calculator_type: ClassVar[CalculatorType] = CalculatorType.HEART_RATE
    lower: int              # bpm
    upper: int              # bpm
    max_heart_rate: int


@dataclass(frozen=True)
class BodyFatResult:
    calculator_type: ClassVar[CalculatorType] = CalculatorType.BODY_FAT
    body_fat: float         # percent, clamped to [2, 50]
    category: str


@dataclass(frozen=True)
class IdealWeightResult:
    calculator_type: ClassVar[CalculatorType] = CalculatorType.IDEAL_WEIGHT
    minimum: float
    maximum: float
    unit: str               # "kg" or "lbs"


@dataclass(frozen=True)
class WhrResult:
    calculator_type: ClassVar[CalculatorType] = CalculatorType.WHR
    ratio: float            # 2 decimals
    risk: str


@dataclass(frozen=True)
class WaterIntakeResult:
    calculator_type: ClassVar[CalculatorType] = CalculatorType.WATER_INTAKE
    amount: float           # per day, 1 decimal
    unit: str               # "Liters" or "oz"


CalculatorResult = Union[
    BmiResult,
    CalorieResult,
    HeartRateResult,
    BodyFatResult,
    IdealWeightResult,
    WhrResult,
    WaterIntakeResult,
]
