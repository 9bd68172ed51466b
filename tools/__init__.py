"""HealthCalc Tools Module.

This module contains the deterministic calculator formulas and unit handling.

Tools:
    convert / to_cm / to_inches / to_meters / to_kg: Unit normalization.
    calc_bmi, bmi_category: Body Mass Index.
    calc_bmr_harris_benedict, estimate_tdee: Daily calorie needs.
    calc_target_heart_rate_zone: 50-85% heart rate zone.
    calc_body_fat_navy, body_fat_category: U.S. Navy body fat.
    calc_ideal_weight_range: Devine ideal weight range.
    calc_waist_to_hip_ratio, whr_risk_category: Waist-to-hip ratio.
    calc_daily_water_intake: Hydration target.
"""
from tools.units import (
    Unit,
    Measurement,
    UnitConversionError,
    convert,
    to_cm,
    to_inches,
    to_meters,
    to_kg,
)
from tools.health_metrics import (
    round_half_up,
    calc_bmi,
    bmi_category,
    calc_bmr_harris_benedict,
    estimate_tdee,
    calc_target_heart_rate_zone,
    calc_max_heart_rate,
    calc_body_fat_navy,
    body_fat_category,
    BODY_FAT_UNKNOWN,
    calc_ideal_weight_range,
    calc_waist_to_hip_ratio,
    whr_risk_category,
    calc_daily_water_intake,
)

__all__ = [
    "Unit",
    "Measurement",
    "UnitConversionError",
    "convert",
    "to_cm",
    "to_inches",
    "to_meters",
    "to_kg",
    "round_half_up",
    "calc_bmi",
    "bmi_category",
    "calc_bmr_harris_benedict",
    "estimate_tdee",
    "calc_target_heart_rate_zone",
    "calc_max_heart_rate",
    "calc_body_fat_navy",
    "body_fat_category",
    "BODY_FAT_UNKNOWN",
    "calc_ideal_weight_range",
    "calc_waist_to_hip_ratio",
    "whr_risk_category",
    "calc_daily_water_intake",
]
