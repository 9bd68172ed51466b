import math
from typing import Optional, Tuple

from models.inputs import ActivityLevel, Gender, UnitSystem


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round halves away from zero for positive values (2.25 -> 2.3, 90.5 -> 91).

    Python's round() uses banker's rounding; every result here is rounded
    this way instead.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


# ============================================================================
# BMI
# ============================================================================

def calc_bmi(weight_kg: float, height_m: float) -> float:
    """
    Calculate Body Mass Index (BMI).

    Returns:
        BMI as float (kg/m^2), rounded to 1 decimal.
    """
    return round_half_up(weight_kg / (height_m ** 2), 1)


def bmi_category(bmi: float) -> str:
    """
    Classify BMI using standard WHO categories for adults.
    """
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


# ============================================================================
# CALORIES
# ============================================================================

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}


def calc_bmr_harris_benedict(
    weight_kg: float,
    height_cm: float,
    age_years: int,
    gender: Gender,
) -> float:
    """
    Revised Harris-Benedict BMR formula (Roza & Shizgal, 1984).

    Returns the unrounded BMR in kcal/day.
    """
    if Gender(gender) == Gender.MALE:
        return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age_years
    return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age_years


def estimate_tdee(bmr: float, activity_level: ActivityLevel) -> int:
    """
    Estimate Total Daily Energy Expenditure from BMR and activity level.

    activity_level:
        'sedentary', 'light', 'moderate', 'active', 'very_active'
    """
    factor = ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)]
    return int(round_half_up(bmr * factor))


# ============================================================================
# HEART RATE
# ============================================================================

def calc_target_heart_rate_zone(age_years: int) -> Tuple[int, int]:
    """
    Target heart rate zone: 50-85% of max heart rate (220 - age).

    No adjustment for sex or fitness level.

    Source: American Heart Association
    """
    max_hr = calc_max_heart_rate(age_years)
    return int(round_half_up(max_hr * 0.50)), int(round_half_up(max_hr * 0.85))


def calc_max_heart_rate(age_years: int) -> int:
    return 220 - age_years


# ============================================================================
# BODY FAT
# ============================================================================

def calc_body_fat_navy(
    gender: Gender,
    height_in: float,
    neck_in: float,
    waist_in: float,
    hip_in: Optional[float] = None,
) -> float:
    """
    U.S. Navy circumference method. All measurements in inches.

    Women need hip_in. Result is clamped to 2-50% and rounded to 1 decimal.

    Source: Hodgdon & Beckett, Naval Health Research Center (1984)
    """
    if Gender(gender) == Gender.MALE:
        body_fat = 86.010 * math.log10(waist_in - neck_in) - 70.041 * math.log10(height_in) + 36.76
    else:
        if hip_in is None:
            raise ValueError("hip_in is required for the female Navy formula")
        body_fat = 163.205 * math.log10(waist_in + hip_in - neck_in) - 97.684 * math.log10(height_in) - 78.387

    body_fat = max(2.0, min(50.0, body_fat))
    return round_half_up(body_fat, 1)


BODY_FAT_UNKNOWN = "Unknown"

# (critically underfat below, obese above)
_BODY_FAT_LIMITS = {
    Gender.FEMALE: (10, 31),
    Gender.MALE: (2, 24),
}

# closed (low, high) ranges; values between two ranges have no label
_BODY_FAT_BANDS = {
    Gender.FEMALE: (
        (10, 13, "Essential Fat"),
        (14, 20, "Athletes"),
        (21, 24, "Fitness"),
        (25, 31, "Acceptable"),
    ),
    Gender.MALE: (
        (2, 5, "Essential Fat"),
        (6, 13, "Athletes"),
        (14, 17, "Fitness"),
        (18, 24, "Acceptable"),
    ),
}


def body_fat_category(body_fat: float, gender: Gender) -> str:
    """
    Classify body fat percentage (American Council on Exercise chart).

    Female: <10 critically underfat, 10-13 essential, 14-20 athletes,
            21-24 fitness, 25-31 acceptable, >31 obese
    Male:   <2 critically underfat, 2-5 essential, 6-13 athletes,
            14-17 fitness, 18-24 acceptable, >24 obese

    The chart's bands are whole percentages, so a value such as 13.5 for
    women sits between two bands and is reported as BODY_FAT_UNKNOWN.
    """
    gender = Gender(gender)
    underfat_below, obese_above = _BODY_FAT_LIMITS[gender]
    if body_fat < underfat_below:
        return "Critically Underfat"
    for low, high, label in _BODY_FAT_BANDS[gender]:
        if low <= body_fat <= high:
            return label
    if body_fat > obese_above:
        return "Obese"
    return BODY_FAT_UNKNOWN


# ============================================================================
# IDEAL WEIGHT
# ============================================================================

LB_PER_KG = 2.20462
DEVINE_BASE_HEIGHT_IN = 60


def calc_ideal_weight_kg(gender: Gender, height_in: float) -> float:
    """
    Devine formula ideal body weight in kg (unrounded).

    At or below 5 feet the base weight is returned with no height term.
    """
    base = 50.0 if Gender(gender) == Gender.MALE else 45.5
    if height_in > DEVINE_BASE_HEIGHT_IN:
        return base + 2.3 * (height_in - DEVINE_BASE_HEIGHT_IN)
    return base


def calc_ideal_weight_range(
    gender: Gender,
    height_in: float,
    unit_system: UnitSystem = UnitSystem.METRIC,
) -> Tuple[float, float, str]:
    """
    Ideal weight +/- 10%, in kg (metric) or lbs (imperial), 1 decimal.

    Returns:
        (minimum, maximum, unit label)
    """
    ideal_kg = calc_ideal_weight_kg(gender, height_in)
    low_kg, high_kg = ideal_kg * 0.9, ideal_kg * 1.1

    if UnitSystem(unit_system) == UnitSystem.IMPERIAL:
        return round_half_up(low_kg * LB_PER_KG, 1), round_half_up(high_kg * LB_PER_KG, 1), "lbs"
    return round_half_up(low_kg, 1), round_half_up(high_kg, 1), "kg"


# ============================================================================
# WAIST-TO-HIP RATIO
# ============================================================================

WHR_GENDER_MISSING = "Risk category requires gender selection"


def calc_waist_to_hip_ratio(waist: float, hip: float) -> float:
    """Waist / hip, rounded to 2 decimals. Both values must share a unit."""
    if hip <= 0:
        raise ValueError("hip must be positive")
    return round_half_up(waist / hip, 2)


def whr_risk_category(ratio: float, gender: Optional[Gender]) -> str:
    """
    Health risk from waist-to-hip ratio.

    Clinical Reference:
    - Women: <=0.80 low, 0.81-0.85 moderate, >0.85 high
    - Men:   <=0.95 low, 0.96-1.0 moderate, >1.0 high

    Source: World Health Organization, Waist Circumference and
    Waist-Hip Ratio (2008)
    """
    if gender is None:
        return WHR_GENDER_MISSING

    low, moderate = (0.80, 0.85) if Gender(gender) == Gender.FEMALE else (0.95, 1.0)
    if ratio <= low:
        return "Low Risk"
    if ratio <= moderate:
        return "Moderate Risk"
    return "High Risk"


# ============================================================================
# HYDRATION
# ============================================================================

WATER_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.0,
    ActivityLevel.LIGHT: 1.1,
    ActivityLevel.MODERATE: 1.25,
    ActivityLevel.ACTIVE: 1.4,
    ActivityLevel.VERY_ACTIVE: 1.6,
}
WATER_ML_PER_KG = 30
WATER_OZ_PER_LB = 0.5


def calc_daily_water_intake(
    weight: float,
    activity_level: ActivityLevel,
    unit_system: UnitSystem = UnitSystem.METRIC,
) -> Tuple[float, str]:
    """
    Daily water target, not medical advice.

    Base rule:
        metric: 30 ml per kg, reported in liters
        imperial: 0.5 oz per lb, reported in oz
    scaled up for more active days.
    """
    factor = WATER_ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)]
    if UnitSystem(unit_system) == UnitSystem.IMPERIAL:
        return round_half_up(weight * WATER_OZ_PER_LB * factor, 1), "oz"

    liters = weight * WATER_ML_PER_KG * factor / 1000
    return round_half_up(liters, 1), "Liters"
