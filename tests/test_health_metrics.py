"""Unit Tests for the calculator formulas and category classifiers.

Run with: pytest tests/ -v
"""
import math

import pytest
from models.inputs import ActivityLevel, Gender, UnitSystem
from tools.health_metrics import (
    round_half_up,
    calc_bmi,
    bmi_category,
    calc_bmr_harris_benedict,
    estimate_tdee,
    calc_target_heart_rate_zone,
    calc_body_fat_navy,
    body_fat_category,
    calc_ideal_weight_kg,
    calc_ideal_weight_range,
    calc_waist_to_hip_ratio,
    whr_risk_category,
    calc_daily_water_intake,
    WHR_GENDER_MISSING,
    BODY_FAT_UNKNOWN,
)
from tools.units import to_kg, to_meters


class TestRounding:

    def test_halves_round_up(self):
        assert round_half_up(90.5) == 91
        assert round_half_up(2.25, 1) == 2.3
        assert round_half_up(2.625, 1) == 2.6

    def test_whole_numbers_unchanged(self):
        assert round_half_up(153.0) == 153


class TestBmi:

    def test_bmi_calculation_normal(self):
        """BMI for average adult should be in normal range."""
        bmi = calc_bmi(weight_kg=70, height_m=1.75)
        assert bmi == 22.9

    def test_bmi_category_boundaries(self):
        """Lower bounds are inclusive."""
        assert bmi_category(18.49) == "Underweight"
        assert bmi_category(18.5) == "Normal weight"
        assert bmi_category(24.99) == "Normal weight"
        assert bmi_category(25.0) == "Overweight"
        assert bmi_category(29.99) == "Overweight"
        assert bmi_category(30.0) == "Obese"

    @pytest.mark.parametrize("height_cm,weight_kg", [
        (160, 45), (175, 70), (180, 90), (165, 95), (190, 60),
    ])
    def test_metric_and_imperial_agree_on_category(self, height_cm, weight_kg):
        """The same person measured in either unit system gets the same label."""
        metric = calc_bmi(weight_kg, to_meters(height_cm, UnitSystem.METRIC))
        imperial = calc_bmi(
            to_kg(weight_kg / 0.453592, UnitSystem.IMPERIAL),
            to_meters(height_cm / 2.54, UnitSystem.IMPERIAL),
        )
        assert bmi_category(metric) == bmi_category(imperial)
        assert metric == pytest.approx(imperial, abs=0.1)


class TestCalories:

    def test_male_reference_case(self):
        bmr = calc_bmr_harris_benedict(80, 180, 30, Gender.MALE)
        expected_bmr = 88.362 + 13.397 * 80 + 4.799 * 180 - 5.677 * 30
        assert bmr == pytest.approx(expected_bmr)
        assert estimate_tdee(bmr, ActivityLevel.SEDENTARY) == 2224

    def test_female_formula(self):
        bmr = calc_bmr_harris_benedict(60, 165, 25, Gender.FEMALE)
        assert bmr == pytest.approx(447.593 + 9.247 * 60 + 3.098 * 165 - 4.330 * 25)

    def test_bmr_differs_by_gender(self):
        assert calc_bmr_harris_benedict(70, 175, 30, "male") > calc_bmr_harris_benedict(70, 175, 30, "female")

    def test_activity_multipliers_increase(self):
        tdees = [estimate_tdee(1500, level) for level in ActivityLevel]
        assert tdees == [1800, 2063, 2325, 2588, 2850]

    def test_unknown_activity_level_rejected(self):
        with pytest.raises(ValueError):
            estimate_tdee(1500, "couch")


class TestHeartRate:

    def test_age_40(self):
        assert calc_target_heart_rate_zone(40) == (90, 153)

    def test_half_values_round_up(self):
        # max HR 181 -> 90.5 and 153.85
        assert calc_target_heart_rate_zone(39) == (91, 154)


class TestBodyFat:

    def test_male_reference_case(self):
        expected = 86.010 * math.log10(19) - 70.041 * math.log10(70) + 36.76
        body_fat = calc_body_fat_navy(Gender.MALE, height_in=70, neck_in=15, waist_in=34)
        assert body_fat == round_half_up(expected, 1)
        assert body_fat == 17.5

    def test_female_formula(self):
        expected = 163.205 * math.log10(30 + 40 - 13) - 97.684 * math.log10(65) - 78.387
        body_fat = calc_body_fat_navy(Gender.FEMALE, height_in=65, neck_in=13, waist_in=30, hip_in=40)
        assert body_fat == round_half_up(expected, 1)

    def test_clamped_to_minimum(self):
        """Waist barely larger than neck would give a negative percentage."""
        assert calc_body_fat_navy(Gender.MALE, height_in=70, neck_in=15, waist_in=15.1) == 2.0

    def test_clamped_to_maximum(self):
        assert calc_body_fat_navy(Gender.MALE, height_in=50, neck_in=10, waist_in=80) == 50.0

    def test_female_without_hip_rejected(self):
        with pytest.raises(ValueError):
            calc_body_fat_navy(Gender.FEMALE, height_in=65, neck_in=13, waist_in=30)

    @pytest.mark.parametrize("body_fat,expected", [
        (1.5, "Critically Underfat"),
        (2.0, "Essential Fat"),
        (5.0, "Essential Fat"),
        (6.0, "Athletes"),
        (13.0, "Athletes"),
        (14.0, "Fitness"),
        (17.0, "Fitness"),
        (18.0, "Acceptable"),
        (24.0, "Acceptable"),
        (24.1, "Obese"),
    ])
    def test_male_categories(self, body_fat, expected):
        assert body_fat_category(body_fat, Gender.MALE) == expected

    @pytest.mark.parametrize("body_fat,expected", [
        (9.9, "Critically Underfat"),
        (10.0, "Essential Fat"),
        (14.0, "Athletes"),
        (20.0, "Athletes"),
        (21.0, "Fitness"),
        (24.0, "Fitness"),
        (25.0, "Acceptable"),
        (31.0, "Acceptable"),
        (31.1, "Obese"),
    ])
    def test_female_categories(self, body_fat, expected):
        assert body_fat_category(body_fat, Gender.FEMALE) == expected

    @pytest.mark.parametrize("body_fat,gender", [
        (5.5, Gender.MALE),
        (13.5, Gender.MALE),
        (17.5, Gender.MALE),
        (13.5, Gender.FEMALE),
        (20.5, Gender.FEMALE),
        (24.5, Gender.FEMALE),
    ])
    def test_values_between_bands_unknown(self, body_fat, gender):
        assert body_fat_category(body_fat, gender) == BODY_FAT_UNKNOWN


class TestIdealWeight:

    def test_female_metric_range(self):
        assert calc_ideal_weight_range(Gender.FEMALE, 170 / 2.54) == (55.3, 67.6, "kg")

    def test_male_imperial_range(self):
        base = 50 + 2.3 * 10
        minimum, maximum, unit = calc_ideal_weight_range(Gender.MALE, 70, UnitSystem.IMPERIAL)
        assert unit == "lbs"
        assert minimum == round_half_up(base * 0.9 * 2.20462, 1)
        assert maximum == round_half_up(base * 1.1 * 2.20462, 1)

    def test_short_stature_uses_base_weight(self):
        """At or below 60 inches there is no height adjustment."""
        assert calc_ideal_weight_kg(Gender.MALE, 60) == 50
        assert calc_ideal_weight_kg(Gender.MALE, 55) == 50
        assert calc_ideal_weight_kg(Gender.FEMALE, 48) == 45.5
        assert calc_ideal_weight_range(Gender.MALE, 55) == (45.0, 55.0, "kg")


class TestWaistToHip:

    def test_female_low_risk(self):
        ratio = calc_waist_to_hip_ratio(80, 100)
        assert ratio == 0.8
        assert whr_risk_category(ratio, Gender.FEMALE) == "Low Risk"

    def test_female_high_risk(self):
        ratio = calc_waist_to_hip_ratio(90, 100)
        assert ratio == 0.9
        assert whr_risk_category(ratio, Gender.FEMALE) == "High Risk"

    def test_boundaries(self):
        assert whr_risk_category(0.85, Gender.FEMALE) == "Moderate Risk"
        assert whr_risk_category(0.95, Gender.MALE) == "Low Risk"
        assert whr_risk_category(1.0, Gender.MALE) == "Moderate Risk"
        assert whr_risk_category(1.01, Gender.MALE) == "High Risk"

    def test_missing_gender_is_not_a_risk_band(self):
        category = whr_risk_category(0.9, None)
        assert category == WHR_GENDER_MISSING
        assert category not in ("Low Risk", "Moderate Risk", "High Risk")

    def test_non_positive_hip_rejected(self):
        with pytest.raises(ValueError):
            calc_waist_to_hip_ratio(80, 0)


class TestWaterIntake:

    def test_metric_moderate(self):
        assert calc_daily_water_intake(70, ActivityLevel.MODERATE) == (2.6, "Liters")

    def test_imperial_stays_in_ounces(self):
        assert calc_daily_water_intake(150, ActivityLevel.SEDENTARY, UnitSystem.IMPERIAL) == (75.0, "oz")
        assert calc_daily_water_intake(150, ActivityLevel.VERY_ACTIVE, UnitSystem.IMPERIAL) == (120.0, "oz")
