"""Tip Request Formatter

Turns a calculator result and the input it came from into the plain-text
summary the tip service receives. The input values are shown as entered,
with the display units of the chosen unit system.
"""
import logging
from typing import List

from models.inputs import (
    CalculatorInput,
    BmiInput,
    CalorieInput,
    HeartRateInput,
    BodyFatInput,
    IdealWeightInput,
    WhrInput,
    WaterIntakeInput,
    Gender,
    UnitSystem,
)
from models.results import (
    CalculatorResult,
    BmiResult,
    CalorieResult,
    HeartRateResult,
    BodyFatResult,
    IdealWeightResult,
    WhrResult,
    WaterIntakeResult,
)
from models.tips import TipRequest

logger = logging.getLogger(__name__)


def _num(value: float) -> str:
    """180.0 -> '180', 70.5 -> '70.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _length_unit(unit: UnitSystem) -> str:
    return "in" if unit == UnitSystem.IMPERIAL else "cm"


def _weight_unit(unit: UnitSystem) -> str:
    return "lbs" if unit == UnitSystem.IMPERIAL else "kg"


def format_result(result: CalculatorResult) -> str:
    if isinstance(result, BmiResult):
        return f"{result.bmi:.1f} kg/m² ({result.category})"
    if isinstance(result, CalorieResult):
        return f"{result.calories} kcal/day"
    if isinstance(result, HeartRateResult):
        return f"Zone: {result.lower} - {result.upper} bpm"
    if isinstance(result, BodyFatResult):
        return f"Body Fat: {result.body_fat:.1f}% ({result.category})"
    if isinstance(result, IdealWeightResult):
        return f"Range: {result.minimum:.1f} - {result.maximum:.1f} {result.unit}"
    if isinstance(result, WhrResult):
        return f"Ratio: {result.ratio:.2f}, Risk: {result.risk}"
    if isinstance(result, WaterIntakeResult):
        return f"Recommended Intake: {result.amount:.1f} {result.unit}/day"
    raise TypeError(f"Unsupported calculator result: {result!r}")


def format_user_data(data: CalculatorInput) -> str:
    if isinstance(data, HeartRateInput):
        return f"Age: {data.age}."

    length = _length_unit(data.unit)
    parts: List[str] = []

    if isinstance(data, BmiInput):
        parts = [
            f"Height: {_num(data.height)}{length}",
            f"Weight: {_num(data.weight)}{_weight_unit(data.unit)}",
        ]
    elif isinstance(data, CalorieInput):
        parts = [
            f"Age: {data.age}",
            f"Gender: {data.gender.value}",
            f"Height: {_num(data.height)}{length}",
            f"Weight: {_num(data.weight)}{_weight_unit(data.unit)}",
            f"Activity Level: {data.activity_level.value}",
        ]
    elif isinstance(data, BodyFatInput):
        parts = [
            f"Gender: {data.gender.value}",
            f"Height: {_num(data.height)}{length}",
            f"Neck: {_num(data.neck)}{length}",
            f"Waist: {_num(data.waist)}{length}",
        ]
        if data.gender == Gender.FEMALE:
            parts.append(f"Hip: {_num(data.hip)}{length}")
    elif isinstance(data, IdealWeightInput):
        parts = [
            f"Gender: {data.gender.value}",
            f"Height: {_num(data.height)}{length}",
        ]
    elif isinstance(data, WhrInput):
        parts = [
            f"Waist: {_num(data.waist)}{length}",
            f"Hip: {_num(data.hip)}{length}",
        ]
    elif isinstance(data, WaterIntakeInput):
        parts = [
            f"Weight: {_num(data.weight)}{_weight_unit(data.unit)}",
            f"Activity Level: {data.activity_level.value}",
        ]
    else:
        raise TypeError(f"Unsupported calculator input: {data!r}")

    parts.append(f"Unit System: {data.unit.value}")
    text = ", ".join(parts) + "."
    if isinstance(data, WhrInput) and data.gender is not None:
        text += f" Gender: {data.gender.value}."
    return text


def build_tip_request(data: CalculatorInput, result: CalculatorResult) -> TipRequest:
    """Pair a calculator's input with its result as a TipRequest."""
    if result.calculator_type != data.calculator_type:
        raise TypeError(
            f"{type(result).__name__} does not belong to {type(data).__name__}"
        )

    user_data = format_user_data(data).strip()
    request = TipRequest(
        calculator_type=data.calculator_type.value,
        calculator_result=format_result(result),
        user_data=user_data or None,
    )
    logger.debug(f"Tip request built: {request.to_payload()}")
    return request
