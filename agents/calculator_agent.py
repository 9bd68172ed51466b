"""CalculatorAgent - Deterministic Health Calculations

This agent turns a validated calculator input into its result variant:
it normalizes units, runs the formula from health_metrics.py and attaches
the category label where the calculator has one.

Design Decision:
    Like the formulas it wraps, this agent does NOT use an LLM. Results
    must be precise and reproducible; only the tips that follow are
    generated.
"""
from typing import Callable, Dict
import logging

from core.observability import trace_agent, metrics
from models.inputs import (
    CalculatorInput,
    BmiInput,
    CalorieInput,
    HeartRateInput,
    BodyFatInput,
    IdealWeightInput,
    WhrInput,
    WaterIntakeInput,
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
from tools.units import to_cm, to_inches, to_kg, to_meters
from tools.health_metrics import (
    round_half_up,
    calc_bmi,
    bmi_category,
    calc_bmr_harris_benedict,
    estimate_tdee,
    calc_max_heart_rate,
    calc_target_heart_rate_zone,
    calc_body_fat_navy,
    body_fat_category,
    calc_ideal_weight_range,
    calc_waist_to_hip_ratio,
    whr_risk_category,
    calc_daily_water_intake,
)

logger = logging.getLogger(__name__)


def compute_bmi(data: BmiInput) -> BmiResult:
    bmi = calc_bmi(to_kg(data.weight, data.unit), to_meters(data.height, data.unit))
    return BmiResult(bmi=bmi, category=bmi_category(bmi))


def compute_calories(data: CalorieInput) -> CalorieResult:
    bmr = calc_bmr_harris_benedict(
        to_kg(data.weight, data.unit),
        to_cm(data.height, data.unit),
        data.age,
        data.gender,
    )
    return CalorieResult(calories=estimate_tdee(bmr, data.activity_level), bmr=round_half_up(bmr, 1))


def compute_heart_rate(data: HeartRateInput) -> HeartRateResult:
    lower, upper = calc_target_heart_rate_zone(data.age)
    return HeartRateResult(lower=lower, upper=upper, max_heart_rate=calc_max_heart_rate(data.age))


def compute_body_fat(data: BodyFatInput) -> BodyFatResult:
    hip_in = to_inches(data.hip, data.unit) if data.hip is not None else None
    body_fat = calc_body_fat_navy(
        data.gender,
        to_inches(data.height, data.unit),
        to_inches(data.neck, data.unit),
        to_inches(data.waist, data.unit),
        hip_in,
    )
    return BodyFatResult(body_fat=body_fat, category=body_fat_category(body_fat, data.gender))


def compute_ideal_weight(data: IdealWeightInput) -> IdealWeightResult:
    minimum, maximum, unit = calc_ideal_weight_range(
        data.gender, to_inches(data.height, data.unit), data.unit
    )
    return IdealWeightResult(minimum=minimum, maximum=maximum, unit=unit)


def compute_whr(data: WhrInput) -> WhrResult:
    ratio = calc_waist_to_hip_ratio(data.waist, data.hip)
    return WhrResult(ratio=ratio, risk=whr_risk_category(ratio, data.gender))


def compute_water_intake(data: WaterIntakeInput) -> WaterIntakeResult:
    amount, unit = calc_daily_water_intake(data.weight, data.activity_level, data.unit)
    return WaterIntakeResult(amount=amount, unit=unit)


CALCULATORS: Dict[type, Callable[..., CalculatorResult]] = {
    BmiInput: compute_bmi,
    CalorieInput: compute_calories,
    HeartRateInput: compute_heart_rate,
    BodyFatInput: compute_body_fat,
    IdealWeightInput: compute_ideal_weight,
    WhrInput: compute_whr,
    WaterIntakeInput: compute_water_intake,
}


class CalculatorAgent:
    """
    CalculatorAgent - one entry point for all seven calculators.

    Inputs arrive already validated (see models.inputs), so the formulas
    never see a non-positive measurement or a missing hip for women.
    """

    @trace_agent
    def run(self, data: CalculatorInput) -> CalculatorResult:
        compute = CALCULATORS.get(type(data))
        if compute is None:
            raise TypeError(f"No calculator for input type {type(data).__name__}")

        result = compute(data)
        metrics.record_calculation(data.calculator_type.value)
        logger.info(f"CalculatorAgent: {data.calculator_type.value} -> {result}")
        return result
